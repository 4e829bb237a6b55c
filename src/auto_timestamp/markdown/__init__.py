"""Frontmatter handling for markdown notes."""

from auto_timestamp.markdown.frontmatter import (
    Frontmatter,
    add_frontmatter,
    parse_frontmatter,
    update_modified_time,
)

__all__ = [
    "Frontmatter",
    "add_frontmatter",
    "parse_frontmatter",
    "update_modified_time",
]
