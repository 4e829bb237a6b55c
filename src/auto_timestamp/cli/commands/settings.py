"""Settings commands for auto-timestamp CLI."""

from enum import Enum

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from auto_timestamp.cli.app import config_app, get_settings_manager
from auto_timestamp.config import (
    DEFAULT_CREATED_KEY,
    DEFAULT_MODIFIED_KEY,
    FALLBACK_DATE_FORMAT,
    SettingsError,
    SettingsManager,
    TimestampSettings,
)
from auto_timestamp.ignore_utils import is_valid_pattern

console = Console()


class SettingKey(str, Enum):
    date_format = "date-format"
    created_key = "created-key"
    modified_key = "modified-key"


# value used when a setting is cleared
FALLBACKS = {
    SettingKey.date_format: FALLBACK_DATE_FORMAT,
    SettingKey.created_key: DEFAULT_CREATED_KEY,
    SettingKey.modified_key: DEFAULT_MODIFIED_KEY,
}


def display_settings(settings: TimestampSettings):
    table = Table(title="Timestamp settings", show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("date-format", settings.date_format)
    table.add_row("created-key", settings.created_key)
    table.add_row("modified-key", settings.modified_key)
    table.add_row("ignore-patterns", "\n".join(settings.ignore_patterns) or "[dim](none)[/dim]")
    console.print(table)


def load_settings(manager: SettingsManager) -> TimestampSettings:
    try:
        return manager.settings
    except SettingsError as e:
        typer.echo(f"Error loading settings: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def show(ctx: typer.Context):
    """Show the current settings."""
    display_settings(load_settings(get_settings_manager(ctx)))


@config_app.command("set")
def set_value(
    ctx: typer.Context,
    key: SettingKey = typer.Argument(..., help="Setting to change"),
    value: str = typer.Argument("", help="New value; empty restores the fallback"),
):
    """Change a single setting."""
    manager = get_settings_manager(ctx)
    load_settings(manager)

    value = value.strip() or FALLBACKS[key]
    settings = manager.update(**{key.name: value})
    logger.info(f"Set {key.value} to {value!r}")
    display_settings(settings)


@config_app.command("ignore-add")
def ignore_add(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Regular expression matched against note paths"),
):
    """Add an ignore pattern."""
    pattern = pattern.strip()
    if not pattern:
        typer.echo("Ignore pattern cannot be empty", err=True)
        raise typer.Exit(1)
    if not is_valid_pattern(pattern):
        typer.echo(f"Invalid regular expression: {pattern}", err=True)
        raise typer.Exit(1)

    manager = get_settings_manager(ctx)
    settings = load_settings(manager)
    if pattern in settings.ignore_patterns:
        console.print(f"[yellow]Already ignoring[/yellow] {pattern}")
        return

    settings = manager.update(ignore_patterns=[*settings.ignore_patterns, pattern])
    logger.info(f"Added ignore pattern {pattern!r}")
    display_settings(settings)


@config_app.command("ignore-remove")
def ignore_remove(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Pattern to remove"),
):
    """Remove an ignore pattern."""
    manager = get_settings_manager(ctx)
    settings = load_settings(manager)
    if pattern not in settings.ignore_patterns:
        typer.echo(f"Not an ignore pattern: {pattern}", err=True)
        raise typer.Exit(1)

    remaining = [p for p in settings.ignore_patterns if p != pattern]
    settings = manager.update(ignore_patterns=remaining)
    logger.info(f"Removed ignore pattern {pattern!r}")
    display_settings(settings)


@config_app.command("reset")
def reset(ctx: typer.Context):
    """Restore the default settings."""
    display_settings(get_settings_manager(ctx).reset())
