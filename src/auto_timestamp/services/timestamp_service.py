"""Service that stamps notes with created/modified timestamps."""

import asyncio
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional

from loguru import logger

from auto_timestamp.config import TimestampSettings
from auto_timestamp.ignore_utils import should_ignore
from auto_timestamp.markdown.frontmatter import add_frontmatter, update_modified_time
from auto_timestamp.services.file_service import FileService
from auto_timestamp.utils import format_date


class StampOutcome(str, Enum):
    WRITTEN = "written"
    UNCHANGED = "unchanged"
    IGNORED = "ignored"
    OWN_WRITE = "own_write"

    @property
    def written(self) -> bool:
        return self is StampOutcome.WRITTEN


class TimestampService:
    """
    Handles create and modify notifications for notes.

    Writes made by this service show up again as watcher events. The checksum
    of the last write to each path is remembered, and an event whose file still
    has exactly that content is dropped. The record is keyed by vault-relative
    path, so another file's edit is never suppressed. An entry is forgotten once
    its echo is consumed or the file is seen with different content.
    """

    def __init__(
        self,
        file_service: FileService,
        settings: TimestampSettings,
        create_delay: float = 0.1,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.file_service = file_service
        self.settings = settings
        self.create_delay = create_delay
        self.clock = clock
        self.last_written: Dict[str, str] = {}

    def now(self) -> str:
        return format_date(self.clock(), self.settings.date_format)

    def should_ignore(self, path: Path) -> bool:
        return should_ignore(self.file_service.relative_path(path), self.settings.ignore_patterns)

    async def handle_create(self, path: Path) -> StampOutcome:
        """Add both timestamps to a newly created note."""
        skipped = self._check_guards(path)
        if skipped:
            return skipped

        # give the writer of the new file a moment to finish
        await asyncio.sleep(self.create_delay)

        return await self._apply(path, update=False, check_own_write=True)

    async def handle_modify(self, path: Path) -> StampOutcome:
        """Refresh the modified timestamp of a changed note."""
        skipped = self._check_guards(path)
        if skipped:
            return skipped

        return await self._apply(path, update=True, check_own_write=True)

    async def stamp(self, path: Path, dry_run: bool = False) -> StampOutcome:
        """Add missing timestamps to a note right away."""
        if self.should_ignore(path):
            return StampOutcome.IGNORED
        return await self._apply(path, update=False, dry_run=dry_run)

    async def touch(self, path: Path, dry_run: bool = False) -> StampOutcome:
        """Set the modified timestamp of a note right away."""
        if self.should_ignore(path):
            return StampOutcome.IGNORED
        return await self._apply(path, update=True, dry_run=dry_run)

    def _check_guards(self, path: Path) -> Optional[StampOutcome]:
        relative = self.file_service.relative_path(path)
        if should_ignore(relative, self.settings.ignore_patterns):
            logger.debug(f"Skipping {relative}: matches ignore pattern")
            return StampOutcome.IGNORED
        return None

    async def _apply(
        self,
        path: Path,
        update: bool,
        check_own_write: bool = False,
        dry_run: bool = False,
    ) -> StampOutcome:
        relative = self.file_service.relative_path(path)
        content, checksum = await self.file_service.read_file(path)

        if check_own_write and relative in self.last_written:
            if self.last_written.pop(relative) == checksum:
                logger.debug(f"Skipping {relative}: content is our own last write")
                return StampOutcome.OWN_WRITE

        settings = self.settings
        now = self.now()
        if update:
            updated = update_modified_time(
                content, now, settings.created_key, settings.modified_key
            )
        else:
            updated = add_frontmatter(
                content, now, now, settings.created_key, settings.modified_key
            )

        if updated == content:
            logger.debug(f"No timestamp changes for {relative}")
            return StampOutcome.UNCHANGED

        if dry_run:
            return StampOutcome.WRITTEN

        self.last_written[relative] = await self.file_service.write_file(path, updated)

        logger.info(f"Stamped {relative} ({settings.modified_key}: {now})")
        return StampOutcome.WRITTEN
