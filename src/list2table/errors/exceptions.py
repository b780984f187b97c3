"""Custom exception hierarchy for list2table."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class List2TableError(Exception):
    """Base exception for all list2table errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class InvalidSettingError(List2TableError):
    """A settings value could not be applied.

    Examples: non-numeric or negative text for the empty column count.
    """

    def __init__(self, message: str = "", field: str = "", value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidLineRangeError(List2TableError):
    """A line range argument is malformed or outside the document."""

    def __init__(self, message: str = "", raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


class SettingsPersistenceError(List2TableError):
    """The settings blob could not be written."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original
