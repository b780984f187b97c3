"""Top-level entry point: convert_list_to_table()."""

from __future__ import annotations

from list2table.parser import parse_list_items
from list2table.renderer import render_table
from list2table.types import ConversionConfig


def convert_list_to_table(text: str, config: ConversionConfig | None = None) -> str:
    """Convert list-formatted text into table text.

    Returns an empty string when the text holds no list items.
    """
    if config is None:
        config = ConversionConfig()
    return render_table(parse_list_items(text), config)
