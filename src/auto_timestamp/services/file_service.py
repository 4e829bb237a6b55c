"""Service for note file operations with checksum tracking."""

from pathlib import Path
from typing import Iterator, Sequence, Tuple

from loguru import logger

from auto_timestamp.ignore_utils import relative_note_path
from auto_timestamp.services.exceptions import FileOperationError
from auto_timestamp.utils import file_utils


class FileService:
    """
    Service for reading and writing notes inside a vault.

    Features:
    - Byte-exact reads and writes (no newline translation)
    - Checksums for every read and write
    - Atomic replace on write
    """

    def __init__(self, base_path: Path, note_extensions: Sequence[str] = (".md",)):
        self.base_path = base_path
        self.note_extensions = tuple(note_extensions)

    def relative_path(self, path: Path) -> str:
        """Vault-relative path with forward slashes, as matched by ignore patterns."""
        return relative_note_path(path, self.base_path)

    def is_note(self, path: Path) -> bool:
        """Whether a path names a visible note file."""
        return path.suffix in self.note_extensions and not path.name.startswith(".")

    def iter_notes(self, path: Path) -> Iterator[Path]:
        """Yield note files at or below a path, skipping hidden directories."""
        if path.is_file():
            if self.is_note(path):
                yield path
            return

        for candidate in sorted(path.rglob("*")):
            relative_parts = candidate.relative_to(path).parts
            if any(part.startswith(".") for part in relative_parts[:-1]):
                continue
            if candidate.is_file() and self.is_note(candidate):
                yield candidate

    async def write_file(self, path: Path, content: str) -> str:
        """
        Write content to file and return checksum.

        Args:
            path: Path where to write
            content: Content to write

        Returns:
            Checksum of written content

        Raises:
            FileOperationError: If write fails
        """
        try:
            await file_utils.write_file_atomic(path, content)

            checksum = await file_utils.compute_checksum(content)
            logger.debug(f"wrote file: {path}, checksum: {checksum}")
            return checksum

        except Exception as e:
            logger.error(f"Failed to write file {path}: {e}")
            raise FileOperationError(f"Failed to write file: {e}")

    @staticmethod
    async def read_file(path: Path) -> Tuple[str, str]:
        """
        Read file and compute checksum.

        Args:
            path: Path to read

        Returns:
            Tuple of (content, checksum)

        Raises:
            FileOperationError: If read fails
        """
        try:
            content = await file_utils.read_file(path)
            checksum = await file_utils.compute_checksum(content)
            logger.debug(f"read file: {path}, checksum: {checksum}")
            return content, checksum

        except Exception as e:
            logger.error(f"Failed to read file {path}: {e}")
            raise FileOperationError(f"Failed to read file: {e}")
