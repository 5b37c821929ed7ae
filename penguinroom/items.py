"""Read-only access to the item catalogue (a JSON object keyed by item id)."""

from __future__ import annotations

import json
import os
from typing import Any, Mapping, Optional, Union


def _json_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


class ItemCatalog:
    """Item facts looked up by numeric id."""

    def __init__(self, items: Optional[Mapping[str, Any]] = None) -> None:
        self._items = dict(items or {})

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return str(item_id) in self._items

    def _entry(self, item_id: int) -> Optional[Mapping[str, Any]]:
        value = self._items.get(str(item_id))
        return value if isinstance(value, dict) else None

    def exists(self, item_id: int) -> bool:
        """True if the catalogue has any entry for ``item_id``."""
        return str(item_id) in self._items

    def item_type(self, item_id: int) -> int:
        """The item's slot type, or -1 for an unknown item."""
        entry = self._entry(item_id)
        return -1 if entry is None else _json_int(entry.get("type"))

    def cost(self, item_id: int) -> int:
        """The item's price in coins, or -1 for an unknown item."""
        entry = self._entry(item_id)
        return -1 if entry is None else _json_int(entry.get("cost"))

    def is_bait(self, item_id: int) -> bool:
        entry = self._entry(item_id)
        return entry is not None and entry.get("bait") is True

    def is_patched(self, item_id: int) -> bool:
        entry = self._entry(item_id)
        return entry is not None and entry.get("patched") is True


def load_items(path: Union[str, "os.PathLike[str]"]) -> ItemCatalog:
    """Load a catalogue file; a missing or unreadable file gives an empty one."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError:
        return ItemCatalog()
    try:
        document = json.loads(raw)
    except ValueError:
        return ItemCatalog()
    if not isinstance(document, dict):
        return ItemCatalog()
    return ItemCatalog(document)