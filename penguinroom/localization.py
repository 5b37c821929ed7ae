"""Localized interface strings loaded from per-locale JSON files."""

from __future__ import annotations

import json
import os
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Union

UNDEFINED_TEXT = "Undefined"


class Locale(Enum):
    EN = "en"
    PT = "pt"
    FR = "fr"
    ES = "es"
    DE = "de"
    RU = "ru"


class LocalizationError(Exception):
    """A locale file is missing, unreadable or not valid JSON."""


def flatten_strings(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested objects into dotted keys, keeping only string values."""
    flat: dict[str, str] = {}
    for name in sorted(data):
        value = data[name]
        key = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            flat.update(flatten_strings(value, key))
        elif isinstance(value, str):
            flat[key] = value
    return flat


class LocalizationManager:
    """Holds the strings of the chosen locale."""

    def __init__(
        self,
        locale: Locale = Locale.EN,
        directory: Union[str, "os.PathLike[str]"] = "locales",
    ) -> None:
        self.locale = locale
        self.directory = Path(directory)
        self._strings: dict[str, str] = {}

    @property
    def strings(self) -> Mapping[str, str]:
        return MappingProxyType(self._strings)

    def locale_path(self) -> Path:
        """The JSON file holding the current locale's strings."""
        return self.directory / f"locale_{self.locale.value}.json"

    def load(self) -> None:
        """Read the current locale's file and add its strings."""
        path = self.locale_path()
        if not path.exists():
            raise LocalizationError(f"File '{path}' does not exist")
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise LocalizationError(f"Cannot read '{path}': {exc}") from exc
        try:
            document = json.loads(raw)
        except ValueError as exc:
            raise LocalizationError(f"Cannot parse json file '{path}': {exc}") from exc
        if isinstance(document, dict):
            self._strings.update(flatten_strings(document))

    def text(self, key: str) -> str:
        """The string for ``key``, or "Undefined" if it is missing or empty."""
        return self._strings.get(key) or UNDEFINED_TEXT