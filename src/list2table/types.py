"""Shared Pydantic models for list2table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from list2table.config.defaults import (
    DEFAULT_LEAVE_HEADER_EMPTY,
    DEFAULT_NUMBER_OF_EMPTY_COLUMNS,
)

# ── Config models ──


class ConversionConfig(BaseModel):
    """Immutable snapshot of the settings used by one conversion.

    Accepts both the persisted camelCase keys and the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    leave_header_empty: bool = Field(
        default=DEFAULT_LEAVE_HEADER_EMPTY, alias="leaveHeaderEmpty"
    )
    number_of_empty_columns: int = Field(
        default=DEFAULT_NUMBER_OF_EMPTY_COLUMNS, ge=0, alias="numberOfEmptyColumns"
    )

    def to_blob(self) -> dict[str, bool | int]:
        """Return the persisted key-value form."""
        return self.model_dump(by_alias=True)


# ── Editor models ──


class Position(BaseModel):
    """A 0-based (line, column) location in a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    ch: int = Field(default=0, ge=0)

    def __lt__(self, other: Position) -> bool:
        return (self.line, self.ch) < (other.line, other.ch)


class SelectionRange(BaseModel):
    """One selection region; anchor is where it started, head where it ended."""

    model_config = ConfigDict(frozen=True)

    anchor: Position
    head: Position

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.head

    @property
    def start(self) -> Position:
        return min(self.anchor, self.head)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.head)
