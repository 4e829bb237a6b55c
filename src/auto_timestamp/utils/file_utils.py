"""Utilities for file operations."""
import hashlib
from pathlib import Path

from loguru import logger


class FileError(Exception):
    """Base exception for file operations."""
    pass


class FileWriteError(FileError):
    """Raised when file operations fail."""
    pass


async def compute_checksum(content: str) -> str:
    """
    Compute SHA-256 checksum of content.

    Args:
        content: Text content to hash

    Returns:
        SHA-256 hex digest

    Raises:
        FileError: If checksum computation fails
    """
    try:
        return hashlib.sha256(content.encode("utf-8")).hexdigest()
    except Exception as e:
        logger.error(f"Failed to compute checksum: {e}")
        raise FileError(f"Failed to compute checksum: {e}")


async def read_file(path: Path) -> str:
    """
    Read a file as UTF-8 without newline translation.

    Args:
        path: File to read

    Returns:
        File text exactly as stored, CRLF line endings included

    Raises:
        FileError: If the file cannot be read or decoded
    """
    try:
        return path.read_bytes().decode("utf-8")
    except Exception as e:
        logger.error(f"Failed to read file: {path}: {e}")
        raise FileError(f"Failed to read file {path}: {e}")


async def write_file_atomic(path: Path, content: str) -> None:
    """
    Write file with atomic operation using temporary file.

    Args:
        path: Target file path
        content: Content to write

    Raises:
        FileWriteError: If write operation fails
    """
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        temp_path.write_bytes(content.encode("utf-8"))
        temp_path.replace(path)
    except Exception as e:
        temp_path.unlink(missing_ok=True)
        logger.error(f"Failed to write file: {path}: {e}")
        raise FileWriteError(f"Failed to write file {path}: {e}")
