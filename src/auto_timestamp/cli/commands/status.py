"""Status command for auto-timestamp CLI."""

from typing import Dict, List

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from auto_timestamp.cli.app import app, get_config
from auto_timestamp.sync.watch_service import WatchEvent, WatchServiceState

# Create rich console
console = Console()

STATUS_STYLES = {"success": "green", "skipped": "dim", "error": "red"}


def add_events_to_tree(tree: Tree, events: List[WatchEvent]):
    """Add events to tree, grouped by directory."""
    by_dir: Dict[str, List[WatchEvent]] = {}
    for event in events:
        parts = event.path.rsplit("/", 1)
        dir_name = parts[0] if len(parts) > 1 else ""
        by_dir.setdefault(dir_name, []).append(event)

    for dir_name, dir_events in sorted(by_dir.items()):
        if dir_name:
            branch = tree.add(f"[bold]{dir_name}/[/bold]")
        else:
            branch = tree

        for event in dir_events:
            style = STATUS_STYLES.get(event.status, "white")
            file_name = event.path.rsplit("/", 1)[-1] or "(watcher)"
            line = (
                f"{event.timestamp.isoformat(timespec='seconds')} "
                f"[{style}]{event.action} {file_name}[/{style}]"
            )
            if event.error:
                line += f" [red]{event.error}[/red]"
            branch.add(line)


def display_status(state: WatchServiceState, verbose: bool = False):
    """Display watch state using Rich."""
    running = "[green]running[/green]" if state.running else "[yellow]stopped[/yellow]"
    tree = Tree(f"Watcher {running} (pid {state.pid})")
    tree.add(f"Started: {state.start_time.isoformat(timespec='seconds')}")
    if state.last_scan:
        tree.add(f"Last change: {state.last_scan.isoformat(timespec='seconds')}")
    tree.add(f"Stamped files: {state.stamped_files}")
    if state.error_count:
        tree.add(f"[red]Errors: {state.error_count}[/red]")

    events = state.recent_events if verbose else state.recent_events[:10]
    if events:
        add_events_to_tree(tree.add("Recent activity"), events)
    else:
        tree.add("No activity")

    console.print(Panel(tree, expand=False))


@app.command()
def status(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all recent events"),
):
    """Show the state of the vault watcher."""
    config = get_config(ctx)
    if not config.status_path.exists():
        console.print("[yellow]The watcher has not run for this vault yet[/yellow]")
        return

    try:
        state = WatchServiceState.model_validate_json(config.status_path.read_text())
    except (OSError, ValidationError) as e:
        logger.error(f"Error reading status: {e}")
        typer.echo(f"Error reading status: {e}", err=True)
        raise typer.Exit(1)

    display_status(state, verbose)
