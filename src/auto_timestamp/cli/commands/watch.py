"""Watch command for auto-timestamp CLI."""

import asyncio

import typer
from loguru import logger

from auto_timestamp.cli.app import app, get_config, get_settings_manager
from auto_timestamp.config import ProjectConfig, TimestampSettings
from auto_timestamp.services import FileService, TimestampService
from auto_timestamp.sync import WatchService


def get_watch_service(config: ProjectConfig, settings: TimestampSettings) -> WatchService:
    """Get watch service instance with all dependencies."""
    file_service = FileService(config.home, config.note_extensions)
    timestamp_service = TimestampService(
        file_service=file_service,
        settings=settings,
        create_delay=config.create_delay,
    )
    return WatchService(
        timestamp_service=timestamp_service,
        file_service=file_service,
        config=config,
    )


@app.command()
def watch(ctx: typer.Context) -> None:
    """Watch the vault and stamp notes as they are created and modified."""
    config = get_config(ctx)
    try:
        settings = get_settings_manager(ctx).settings
        watch_service = get_watch_service(config, settings)
        logger.info(f"Watching {config.home} (ignore patterns: {settings.ignore_patterns})")
        asyncio.run(watch_service.run())
    except KeyboardInterrupt:  # pragma: no cover
        typer.echo("Stopped watching")
    except Exception as e:
        logger.exception("Watch failed")
        typer.echo(f"Error while watching: {e}", err=True)
        raise typer.Exit(1)
