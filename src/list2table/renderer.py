"""Table renderer — lay out parsed list items as a fixed-width pipe table."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from list2table.config.defaults import EMPTY_COLUMN_WIDTH
from list2table.types import ConversionConfig

logger = logging.getLogger(__name__)


def compute_column_widths(items: Sequence[str], number_of_empty_columns: int) -> list[int]:
    """Width of the content column followed by one fixed width per empty column.

    The content column is as wide as the longest item.
    """
    content_width = len(max(items, key=len))
    return [content_width] + [EMPTY_COLUMN_WIDTH] * number_of_empty_columns


def _row(cells: Sequence[str]) -> str:
    return "".join(f"| {cell} " for cell in cells) + "|\n"


def render_fill_row(widths: Sequence[int], char: str) -> str:
    """Row whose every cell is ``char`` repeated to the column width."""
    return _row([char * width for width in widths])


def render_content_row(widths: Sequence[int], text: str) -> str:
    """Row with ``text`` left-aligned in the first cell, the rest blank."""
    cells = [text.ljust(widths[0])]
    cells.extend(" " * width for width in widths[1:])
    return _row(cells)


def render_table(items: Sequence[str], config: ConversionConfig) -> str:
    """Render list items as table text.

    Returns an empty string when there are no items.
    """
    if not items:
        return ""

    widths = compute_column_widths(items, config.number_of_empty_columns)

    if config.leave_header_empty:
        rows = [render_fill_row(widths, " ")]
        body = items
    else:
        rows = [render_content_row(widths, items[0])]
        body = items[1:]

    rows.append(render_fill_row(widths, "-"))
    rows.extend(render_content_row(widths, item) for item in body)

    logger.debug("Rendered %d rows with column widths %s", len(rows), widths)
    return "".join(rows)
