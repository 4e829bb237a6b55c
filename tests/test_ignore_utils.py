"""Tests for ignore pattern matching."""

import re
from pathlib import Path

import pytest

from auto_timestamp.ignore_utils import is_valid_pattern, relative_note_path, should_ignore


def test_should_ignore_matches_pattern():
    assert should_ignore("templates/foo.md", ["templates/.*"]) is True
    assert should_ignore("notes/foo.md", ["templates/.*"]) is False


def test_should_ignore_is_unanchored():
    assert should_ignore("archive/templates/foo.md", ["templates/"]) is True
    assert should_ignore("notes/daily-2024.md", ["daily"]) is True


def test_should_ignore_any_pattern():
    patterns = ["^inbox/", r"\.draft\.md$"]
    assert should_ignore("inbox/a.md", patterns) is True
    assert should_ignore("notes/a.draft.md", patterns) is True
    assert should_ignore("notes/inbox/a.md", patterns) is False


def test_should_ignore_no_patterns():
    assert should_ignore("anything.md", []) is False


def test_should_ignore_invalid_pattern():
    with pytest.raises(re.error):
        should_ignore("notes/foo.md", ["templates/("])


def test_is_valid_pattern():
    assert is_valid_pattern("templates/.*")
    assert not is_valid_pattern("[unclosed")


def test_relative_note_path(tmp_path: Path):
    assert relative_note_path(tmp_path / "a" / "b.md", tmp_path) == "a/b.md"
    outside = Path("/elsewhere/c.md")
    assert relative_note_path(outside, tmp_path) == "/elsewhere/c.md"
