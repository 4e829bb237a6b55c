"""Utilities for matching note paths against ignore patterns."""

import re
from pathlib import Path
from typing import List, Pattern, Sequence


def compile_patterns(patterns: Sequence[str]) -> List[Pattern[str]]:
    """Compile ignore patterns as regular expressions.

    Raises:
        re.error: If a pattern is not a valid regular expression
    """
    return [re.compile(pattern) for pattern in patterns]


def is_valid_pattern(pattern: str) -> bool:
    try:
        re.compile(pattern)
    except re.error:
        return False
    return True


def should_ignore(path: str, patterns: Sequence[str]) -> bool:
    """Check if a note path matches any ignore pattern.

    Patterns are searched anywhere in the path, so ``templates/.*`` matches
    both ``templates/daily.md`` and ``archive/templates/daily.md``.

    Args:
        path: Vault-relative path using forward slashes
        patterns: Regular expressions, in the order they were configured

    Returns:
        True if the path should be ignored, False otherwise

    Raises:
        re.error: If a pattern is not a valid regular expression
    """
    return any(regex.search(path) for regex in compile_patterns(patterns))


def relative_note_path(file_path: Path, base_path: Path) -> str:
    """Path of a note relative to the vault, with forward slashes.

    Files outside the vault are returned as absolute POSIX paths.
    """
    try:
        return file_path.relative_to(base_path).as_posix()
    except ValueError:
        return file_path.as_posix()
