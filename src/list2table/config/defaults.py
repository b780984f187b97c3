"""Package-level default configuration values."""

from __future__ import annotations

from pathlib import Path
from typing import Any

# Default conversion settings
DEFAULT_LEAVE_HEADER_EMPTY = True
DEFAULT_NUMBER_OF_EMPTY_COLUMNS = 1

# Width reserved for each empty column, the shortest valid separator "---"
EMPTY_COLUMN_WIDTH = 3

# Log level
DEFAULT_LOG_LEVEL = "WARNING"

# Settings file shared by the settings store and the config hierarchy
DEFAULT_SETTINGS_PATH = Path.home() / ".list2table" / "config.yaml"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "leave_header_empty": DEFAULT_LEAVE_HEADER_EMPTY,
        "number_of_empty_columns": DEFAULT_NUMBER_OF_EMPTY_COLUMNS,
        "log_level": DEFAULT_LOG_LEVEL,
    }
