"""Persisted conversion settings — load, edit and save the settings blob."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from list2table.config.defaults import DEFAULT_SETTINGS_PATH
from list2table.config.hierarchy import load_yaml_config
from list2table.errors import InvalidSettingError, SettingsPersistenceError
from list2table.types import ConversionConfig

logger = logging.getLogger(__name__)


def parse_column_count(text: str) -> int:
    """Parse the empty column count typed into a settings field."""
    try:
        count = int(text.strip())
    except ValueError:
        count = -1
    if count < 0:
        raise InvalidSettingError(
            f"Number of empty columns must be a non-negative integer, got '{text}'",
            field="numberOfEmptyColumns",
            value=text,
        )
    return count


def build_settings(values: dict[str, Any], source: object = "settings") -> ConversionConfig:
    """Validate settings values, dropping only the keys that fail.

    Dropped keys fall back to their defaults; the rest are kept.
    """
    values = dict(values)
    try:
        return ConversionConfig.model_validate(values)
    except ValidationError as e:
        bad_keys = {err["loc"][0] for err in e.errors() if err["loc"]} & values.keys()
    for key in sorted(bad_keys):
        logger.warning("Ignoring invalid %s=%r in %s", key, values.pop(key), source)
    return ConversionConfig.model_validate(values)


class SettingsStore:
    """Holds the current settings and persists them as a YAML mapping.

    Readers get an immutable ConversionConfig snapshot; changes go through
    the setters and are written with save().
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path else DEFAULT_SETTINGS_PATH
        self._settings = ConversionConfig()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def settings(self) -> ConversionConfig:
        return self._settings

    def load(self) -> ConversionConfig:
        """Merge the stored blob over the defaults."""
        blob = load_yaml_config(self._path) or {}
        self._settings = build_settings(blob, source=self._path)
        return self._settings

    def save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w") as f:
                yaml.safe_dump(self._settings.to_blob(), f, sort_keys=False)
        except OSError as e:
            raise SettingsPersistenceError(
                f"Failed to save settings to {self._path}: {e}", path=self._path, original=e
            ) from e
        logger.debug("Saved settings to %s", self._path)

    def set_leave_header_empty(self, value: bool) -> None:
        self._settings = self._settings.model_copy(update={"leave_header_empty": value})

    def set_number_of_empty_columns(self, text: str) -> bool:
        """Apply a column count typed by the user.

        Invalid text is ignored and the previous value kept. Returns whether
        the value was applied.
        """
        try:
            count = parse_column_count(text)
        except InvalidSettingError as e:
            logger.info("%s, keeping %d", e.message, self._settings.number_of_empty_columns)
            return False
        self._settings = self._settings.model_copy(update={"number_of_empty_columns": count})
        return True

