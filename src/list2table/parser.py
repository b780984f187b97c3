"""Item parser — turn selected list text into clean table items."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkerRule:
    """A list marker recognised at the start of a line."""

    name: str
    pattern: re.Pattern[str]

    def strip(self, line: str) -> str | None:
        """Return ``line`` without the marker, or None if it doesn't start with one."""
        match = self.pattern.match(line)
        if match is None:
            return None
        return line[match.end():]


def _literal(name: str, prefix: str) -> MarkerRule:
    return MarkerRule(name, re.compile(re.escape(prefix)))


# Checked in order, first match wins. To-do boxes come before the plain hyphen.
MARKER_RULES: tuple[MarkerRule, ...] = (
    MarkerRule("ordinal", re.compile(r"[0-9]+\.\s")),
    _literal("todo_open", "- [ ] "),
    _literal("todo_done", "- [x] "),
    _literal("hyphen", "- "),
    _literal("asterisk", "* "),
    _literal("plus", "+ "),
)


def strip_marker(line: str, rules: tuple[MarkerRule, ...] = MARKER_RULES) -> str:
    """Remove at most one leading list marker from a single line."""
    for rule in rules:
        stripped = rule.strip(line)
        if stripped is not None:
            return stripped
    return line


def parse_list_items(text: str) -> list[str]:
    """Split list text into items with markers and outer blank lines removed.

    Blank lines between two items are kept as empty items so they become
    blank table rows.
    """
    # Only "\n" ends a line; a trailing "\r" from CRLF text is dropped
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    items = [strip_marker(line) for line in lines]

    start = 0
    while start < len(items) and not items[start].strip():
        start += 1

    end = len(items)
    while end > start and not items[end - 1].strip():
        end -= 1

    items = items[start:end]
    logger.debug("Parsed %d list items", len(items))
    return items
