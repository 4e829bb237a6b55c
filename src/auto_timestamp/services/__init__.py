from .file_service import FileService
from .timestamp_service import StampOutcome, TimestampService

__all__ = ["FileService", "StampOutcome", "TimestampService"]
