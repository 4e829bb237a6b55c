"""CLI commands for auto-timestamp."""

from . import settings, stamp, status, watch

__all__ = ["settings", "stamp", "status", "watch"]
