"""Watch service for auto-timestamp."""

import asyncio
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from loguru import logger
from pydantic import BaseModel, Field
from rich.console import Console
from watchfiles import Change, awatch

from auto_timestamp.config import ProjectConfig
from auto_timestamp.services.file_service import FileService
from auto_timestamp.services.timestamp_service import StampOutcome, TimestampService

console = Console()


class WatchEvent(BaseModel):
    timestamp: datetime
    path: str
    action: str  # created, modified
    status: str  # success, skipped, error
    error: Optional[str] = None


class WatchServiceState(BaseModel):
    # Service status
    running: bool = False
    start_time: datetime = Field(default_factory=datetime.now)
    pid: int = Field(default_factory=os.getpid)

    # Stats
    error_count: int = 0
    last_error: Optional[datetime] = None
    last_scan: Optional[datetime] = None

    # File counts
    stamped_files: int = 0

    # Recent activity
    recent_events: List[WatchEvent] = Field(default_factory=list)

    def add_event(
        self,
        path: str,
        action: str,
        status: str,
        error: Optional[str] = None,
    ) -> WatchEvent:
        event = WatchEvent(
            timestamp=datetime.now(),
            path=path,
            action=action,
            status=status,
            error=error,
        )
        self.recent_events.insert(0, event)
        self.recent_events = self.recent_events[:100]  # Keep last 100
        return event

    def record_error(self, error: str, path: str = "", action: str = "watch"):
        self.error_count += 1
        self.add_event(path=path, action=action, status="error", error=error)
        self.last_error = datetime.now()


class WatchService:
    def __init__(
        self,
        timestamp_service: TimestampService,
        file_service: FileService,
        config: ProjectConfig,
    ):
        self.timestamp_service = timestamp_service
        self.file_service = file_service
        self.config = config
        self.state = WatchServiceState()
        self.status_path = config.status_path
        self.status_path.parent.mkdir(parents=True, exist_ok=True)

    async def run(self):
        """Watch for note changes and stamp them"""
        self.state.running = True
        self.state.start_time = datetime.now()
        await self.write_status()

        console.print(f"\n[cyan]Watching {self.config.home} for changes...[/cyan]")
        try:
            async for changes in awatch(
                self.config.home,
                watch_filter=self.filter_changes,
                debounce=self.config.sync_delay,
                recursive=True,
            ):
                await self.handle_changes(changes)

        except Exception as e:
            self.state.record_error(str(e))
            await self.write_status()
            raise
        finally:
            self.state.running = False
            await self.write_status()

    async def write_status(self):
        """Write current state to status file"""
        self.status_path.write_text(WatchServiceState.model_dump_json(self.state, indent=2))

    def filter_changes(self, change: Change, path: str) -> bool:
        """Filter to added or modified notes outside hidden directories"""
        if change == Change.deleted:
            return False
        file_path = Path(path)
        relative = Path(self.file_service.relative_path(file_path))
        if any(part.startswith(".") for part in relative.parent.parts):
            return False
        return self.file_service.is_note(file_path)

    async def handle_changes(self, changes: Iterable[Tuple[Change, str]]):
        """Process a batch of file changes, one task per file"""
        created: Set[str] = set()
        modified: Set[str] = set()
        for change, path in changes:
            if change == Change.added:
                created.add(path)
            elif change == Change.modified:
                modified.add(path)
        # a file created within the batch only needs the create stamp
        modified -= created

        logger.debug(f"handling {len(created)} created and {len(modified)} modified files")
        tasks = [self.handle_file("created", Path(path)) for path in sorted(created)]
        tasks += [self.handle_file("modified", Path(path)) for path in sorted(modified)]
        await asyncio.gather(*tasks)

        self.state.last_scan = datetime.now()
        await self.write_status()

    async def handle_file(self, action: str, path: Path) -> Optional[StampOutcome]:
        """Stamp a single file and record the outcome"""
        relative = self.file_service.relative_path(path)
        try:
            if action == "created":
                outcome = await self.timestamp_service.handle_create(path)
            else:
                outcome = await self.timestamp_service.handle_modify(path)
        except Exception as e:
            logger.exception(f"Failed to stamp {relative}")
            self.state.record_error(str(e), path=relative, action=action)
            console.print(f"[red]Error:[/red]\t\t {relative}: {e}")
            return None

        if outcome == StampOutcome.OWN_WRITE:
            return outcome
        if not outcome.written:
            self.state.add_event(path=relative, action=action, status="skipped")
            return outcome

        self.state.stamped_files += 1
        event = self.state.add_event(path=relative, action=action, status="success")
        color = "green" if action == "created" else "yellow"
        console.print(
            f"{event.timestamp.isoformat(timespec='minutes')} {action.capitalize()}:\t [{color}]{relative}[/{color}]"
        )
        return outcome
