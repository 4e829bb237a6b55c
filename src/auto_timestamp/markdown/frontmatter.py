"""Line-oriented frontmatter editing for timestamp keys.

Frontmatter is kept as the raw lines between the two ``---`` delimiters.
Nothing is parsed as YAML: a key is present when a line starts with
``key:``, and only the timestamp lines are ever inserted or rewritten, so
every other byte of the document survives untouched.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

FRONTMATTER_DELIMITER = "---"


@dataclass
class Frontmatter:
    """Frontmatter block of a document.

    Attributes:
        lines: Inner lines without their trailing newline (a CR is kept)
        opening: The opening delimiter line as written (``---`` or ``---\\r``)
        rest: Everything after the closing ``---``, starting with its line ending
    """

    lines: List[str]
    opening: str = FRONTMATTER_DELIMITER
    rest: str = ""
    _index: Optional[Dict[str, int]] = field(default=None, init=False, repr=False)

    @property
    def line_ending(self) -> str:
        return "\r" if self.opening.endswith("\r") else ""

    def find(self, key: str) -> Optional[int]:
        """Index of the first line starting with ``key:``, or None."""
        if ":" in key:
            prefix = f"{key}:"
            return next((i for i, line in enumerate(self.lines) if line.startswith(prefix)), None)
        if self._index is None:
            self._index = {}
            for i, line in enumerate(self.lines):
                name, sep, _ = line.partition(":")
                if sep and name not in self._index:
                    self._index[name] = i
        return self._index.get(key)

    def has(self, key: str) -> bool:
        return self.find(key) is not None

    def prepend(self, key: str, value: str) -> None:
        self.lines.insert(0, self._line(key, value))
        self._index = None

    def append(self, key: str, value: str) -> None:
        self.lines.append(self._line(key, value))
        self._index = None

    def set(self, key: str, value: str) -> None:
        """Replace the value of an existing key in place, or append it."""
        index = self.find(key)
        if index is None:
            self.append(key, value)
            return
        cr = "\r" if self.lines[index].endswith("\r") else ""
        self.lines[index] = f"{key}: {value}{cr}"

    def render(self) -> str:
        inner = "".join(f"{line}\n" for line in self.lines)
        return f"{self.opening}\n{inner}{FRONTMATTER_DELIMITER}{self.rest}"

    def _line(self, key: str, value: str) -> str:
        return f"{key}: {value}{self.line_ending}"


def parse_frontmatter(text: str) -> Optional[Frontmatter]:
    """Split off the frontmatter block at the very start of a document.

    Returns None when the document does not open with a ``---`` line or the
    block is never closed.
    """
    opening, newline, remainder = text.partition("\n")
    if not newline or opening.rstrip("\r") != FRONTMATTER_DELIMITER:
        return None

    lines = []
    pos = 0
    while pos <= len(remainder):
        end = remainder.find("\n", pos)
        line = remainder[pos:] if end == -1 else remainder[pos:end]
        if line.rstrip("\r") == FRONTMATTER_DELIMITER:
            rest = remainder[pos + len(FRONTMATTER_DELIMITER) :]
            return Frontmatter(lines=lines, opening=opening, rest=rest)
        if end == -1:
            break
        lines.append(line)
        pos = end + 1

    return None


def add_frontmatter(
    text: str,
    created: str,
    modified: str,
    created_key: str,
    modified_key: str,
) -> str:
    """Make sure a document carries both timestamp keys.

    Existing keys keep their values and position. A missing created key is
    added as the first frontmatter line and a missing modified key as the
    last. A document without frontmatter gets a new block in front of it.
    """
    frontmatter = parse_frontmatter(text)

    if frontmatter is None:
        return (
            f"{FRONTMATTER_DELIMITER}\n"
            f"{created_key}: {created}\n"
            f"{modified_key}: {modified}\n"
            f"{FRONTMATTER_DELIMITER}\n"
            f"{text}"
        )

    if not frontmatter.has(created_key):
        frontmatter.prepend(created_key, created)
    if not frontmatter.has(modified_key):
        frontmatter.append(modified_key, modified)

    return frontmatter.render()


def update_modified_time(
    text: str,
    modified: str,
    created_key: str,
    modified_key: str,
) -> str:
    """Refresh the modified key of a document that already has frontmatter.

    Documents without frontmatter are returned unchanged; stamping those is
    the create handler's job. A missing created key is backfilled with the
    modified value.
    """
    frontmatter = parse_frontmatter(text)
    if frontmatter is None:
        return text

    frontmatter.set(modified_key, modified)

    if not frontmatter.has(created_key):
        frontmatter.prepend(created_key, modified)

    return frontmatter.render()
