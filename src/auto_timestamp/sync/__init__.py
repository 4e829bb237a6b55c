from .watch_service import WatchService, WatchServiceState

__all__ = ["WatchService", "WatchServiceState"]
