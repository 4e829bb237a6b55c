from pathlib import Path
from typing import Optional

import typer

from auto_timestamp.config import ProjectConfig, SettingsManager, get_project_config
from auto_timestamp.utils import setup_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import auto_timestamp

        typer.echo(f"auto-timestamp version: {auto_timestamp.__version__}")
        raise typer.Exit()


app = typer.Typer(name="auto-timestamp")


@app.callback()
def app_callback(
    ctx: typer.Context,
    home: Optional[Path] = typer.Option(
        None,
        "--home",
        "-H",
        help="Vault directory to work on",
        envvar="AUTO_TIMESTAMP_HOME",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """auto-timestamp - stamp markdown notes with created/modified frontmatter."""

    if not version and ctx.invoked_subcommand is not None:
        config = get_project_config(home)
        setup_logging(log_file=config.log_path, level=config.log_level)
        ctx.obj = config


def get_config(ctx: typer.Context) -> ProjectConfig:
    """Project config resolved by the app callback."""
    if isinstance(ctx.obj, ProjectConfig):
        return ctx.obj
    return get_project_config()  # pragma: no cover


def get_settings_manager(ctx: typer.Context) -> SettingsManager:
    return SettingsManager(get_config(ctx).settings_path)


# Register sub-command groups
config_app = typer.Typer(help="Show and change timestamp settings")
app.add_typer(config_app, name="config")
