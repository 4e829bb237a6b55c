"""Utility functions for auto-timestamp."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger


def format_date(time: datetime, template: str) -> str:
    """
    Render a timestamp with a yyyy/MM/dd/HH/mm/ss template:
    - Each placeholder is replaced once, first occurrence only
    - Placeholders are applied in the order yyyy, MM, dd, HH, mm, ss
    - Everything else in the template is kept as literal text
    """
    components = (
        ("yyyy", str(time.year)),
        ("MM", f"{time.month:02d}"),
        ("dd", f"{time.day:02d}"),
        ("HH", f"{time.hour:02d}"),
        ("mm", f"{time.minute:02d}"),
        ("ss", f"{time.second:02d}"),
    )

    result = template
    for placeholder, value in components:
        result = result.replace(placeholder, value, 1)
    return result


def setup_logging(
    log_file: Optional[Path] = None, level: str = "INFO", console: bool = True
) -> None:
    """Configure loguru sinks for the CLI.

    Args:
        log_file: Optional path of a rotating debug log
        level: Level for the stderr sink
        console: Whether to log to stderr at all
    """
    logger.remove()

    if console:
        logger.add(sys.stderr, level=level.upper(), colorize=True, backtrace=True, diagnose=False)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level="DEBUG",
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=False,
        )
