"""list2table — convert list-formatted text into fixed-width pipe tables."""

from list2table.core import convert_list_to_table
from list2table.editor import ListToTableCommand, TextDocument
from list2table.parser import parse_list_items
from list2table.renderer import render_table
from list2table.types import ConversionConfig, Position, SelectionRange

__version__ = "0.1.0"

__all__ = [
    "convert_list_to_table",
    "parse_list_items",
    "render_table",
    "ConversionConfig",
    "ListToTableCommand",
    "TextDocument",
    "Position",
    "SelectionRange",
]
