"""Editor integration — the "Convert list to table" command.

The host hands over its document, the current selections and the cursor.
The command widens a valid selection to whole lines and replaces the list
with a table. Every rejected invocation leaves the document untouched and
returns None.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from list2table.commands import register_command
from list2table.core import convert_list_to_table
from list2table.errors import InvalidLineRangeError
from list2table.types import ConversionConfig, Position, SelectionRange

logger = logging.getLogger(__name__)

COMMAND_ID = "list-to-table-convert"
COMMAND_NAME = "Convert list to table"

# Column the cursor lands on after conversion, just inside the first cell
CURSOR_COLUMN = 2


class TextDocument:
    """Line-addressed text buffer with range reads and replacement."""

    def __init__(self, text: str = "") -> None:
        self._lines = text.split("\n")

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line: int) -> str:
        return self._lines[line]

    def get_range(self, start: Position, end: Position) -> str:
        if start.line == end.line:
            return self._lines[start.line][start.ch:end.ch]
        parts = [self._lines[start.line][start.ch:]]
        parts.extend(self._lines[start.line + 1:end.line])
        parts.append(self._lines[end.line][:end.ch])
        return "\n".join(parts)

    def replace_range(self, start: Position, end: Position, replacement: str) -> None:
        prefix = self._lines[start.line][:start.ch]
        suffix = self._lines[end.line][end.ch:]
        new_lines = (prefix + replacement + suffix).split("\n")
        self._lines[start.line:end.line + 1] = new_lines

    def full_lines(self, selection: SelectionRange) -> SelectionRange:
        """Widen a selection to cover its first and last lines completely."""
        start, end = selection.start, selection.end
        return SelectionRange(
            anchor=Position(line=start.line, ch=0),
            head=Position(line=end.line, ch=len(self.get_line(end.line))),
        )


def parse_line_range(raw: str, document: TextDocument) -> SelectionRange:
    """Parse a 1-based inclusive ``START:END`` range into a full-line selection.

    Either bound may be omitted to mean the first or last line.
    """
    line_count = document.line_count
    start_raw, sep, end_raw = raw.partition(":")
    if not sep:
        start_raw = end_raw = raw
    try:
        first = int(start_raw) if start_raw.strip() else 1
        last = int(end_raw) if end_raw.strip() else line_count
    except ValueError:
        raise InvalidLineRangeError(f"Invalid line range '{raw}'", raw=raw) from None

    if not 1 <= first <= last <= line_count:
        raise InvalidLineRangeError(
            f"Line range '{raw}' is outside 1:{line_count}", raw=raw
        )
    return SelectionRange(
        anchor=Position(line=first - 1, ch=0),
        head=Position(line=last - 1, ch=len(document.get_line(last - 1))),
    )


@register_command(COMMAND_ID, COMMAND_NAME)
class ListToTableCommand:
    """Convert the single selected list into a table in place."""

    def __init__(self, config_provider: Callable[[], ConversionConfig] | None = None) -> None:
        self._config_provider = config_provider or ConversionConfig

    def run(
        self,
        document: TextDocument,
        selections: Sequence[SelectionRange],
        cursor: Position,
    ) -> Position | None:
        """Apply the command; return the new cursor, or None if nothing changed."""
        # An empty range also covers anchor and head resolving to one position
        if not selections or all(sel.is_empty for sel in selections):
            logger.debug("Nothing selected, skipping")
            return None
        if len(selections) != 1:
            logger.debug("%d selections, only one is supported", len(selections))
            return None

        selection = selections[0]
        if not document.get_range(selection.start, selection.end).strip():
            logger.debug("Selection is whitespace only, skipping")
            return None

        config = self._config_provider()
        lines = document.full_lines(selection)
        table = convert_list_to_table(document.get_range(lines.start, lines.end), config)
        if not table:
            logger.debug("Selection has no list items, skipping")
            return None

        document.replace_range(lines.start, lines.end, table)
        logger.info(
            "Converted lines %d-%d to a table", lines.start.line + 1, lines.end.line + 1
        )
        return Position(line=cursor.line, ch=CURSOR_COLUMN)
