"""Command module for one-shot timestamp stamping."""

import asyncio
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

import typer
from loguru import logger
from rich.console import Console
from rich.tree import Tree

from auto_timestamp.cli.app import app, get_config, get_settings_manager
from auto_timestamp.services import FileService, StampOutcome, TimestampService

console = Console()


async def run_stamp(
    timestamp_service: TimestampService,
    paths: List[Path],
    update: bool = False,
    dry_run: bool = False,
) -> Dict[StampOutcome, List[str]]:
    """Stamp every note under the given paths and group results by outcome."""
    file_service = timestamp_service.file_service
    results: Dict[StampOutcome, List[str]] = defaultdict(list)

    for path in paths:
        for note in file_service.iter_notes(path):
            if update:
                outcome = await timestamp_service.touch(note, dry_run=dry_run)
            else:
                outcome = await timestamp_service.stamp(note, dry_run=dry_run)
            results[outcome].append(file_service.relative_path(note))

    return dict(results)


def display_stamp_results(results: Dict[StampOutcome, List[str]], dry_run: bool = False):
    """Display stamp results as a tree."""
    stamped = results.get(StampOutcome.WRITTEN, [])
    unchanged = results.get(StampOutcome.UNCHANGED, [])
    ignored = results.get(StampOutcome.IGNORED, [])

    if not stamped:
        console.print("[green]Everything up to date[/green]")
    else:
        verb = "Would stamp" if dry_run else "Stamped"
        tree = Tree(f"[bold]{verb} {len(stamped)} files[/bold]")
        for path in sorted(stamped):
            tree.add(f"[yellow]{path}[/yellow]")
        console.print(tree)

    if unchanged or ignored:
        console.print(f"{len(unchanged)} unchanged, {len(ignored)} ignored")


@app.command()
def stamp(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(
        None,
        help="Notes or directories to stamp (defaults to the whole vault).",
    ),
    update: bool = typer.Option(
        False,
        "--update",
        "-u",
        help="Refresh the modified timestamp instead of only adding missing ones.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show which files would change without writing them.",
    ),
) -> None:
    """Add created/modified timestamps to existing notes."""
    config = get_config(ctx)
    targets = [path if path.is_absolute() else config.home / path for path in paths or []]
    targets = targets or [config.home]

    missing = [str(path) for path in targets if not path.exists()]
    if missing:
        typer.echo(f"No such file or directory: {', '.join(missing)}", err=True)
        raise typer.Exit(1)

    try:
        timestamp_service = TimestampService(
            file_service=FileService(config.home, config.note_extensions),
            settings=get_settings_manager(ctx).settings,
        )
        results = asyncio.run(run_stamp(timestamp_service, targets, update, dry_run))
        display_stamp_results(results, dry_run)
    except Exception as e:
        logger.exception("Stamp failed")
        typer.echo(f"Error during stamp: {e}", err=True)
        raise typer.Exit(1)
