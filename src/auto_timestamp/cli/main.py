"""Main CLI entry point for auto-timestamp."""  # pragma: no cover

from auto_timestamp.cli.app import app  # pragma: no cover

# Register commands
from auto_timestamp.cli.commands import settings, stamp, status, watch  # pragma: no cover

__all__ = ["app", "settings", "stamp", "status", "watch"]  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
