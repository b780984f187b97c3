"""Error handling — exception hierarchy for list2table."""

from list2table.errors.exceptions import (
    InvalidLineRangeError,
    InvalidSettingError,
    List2TableError,
    SettingsPersistenceError,
)

__all__ = [
    "List2TableError",
    "InvalidSettingError",
    "InvalidLineRangeError",
    "SettingsPersistenceError",
]
