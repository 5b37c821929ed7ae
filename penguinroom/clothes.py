"""The item ids a penguin is wearing, one per slot."""

from __future__ import annotations

from dataclasses import dataclass

from penguinroom.constants import ClothingType

_SLOT_FIELDS = {
    ClothingType.HEAD: "head",
    ClothingType.FACE: "face",
    ClothingType.NECK: "neck",
    ClothingType.BODY: "body",
    ClothingType.HAND: "hand",
    ClothingType.FEET: "feet",
    ClothingType.PIN: "pin",
    ClothingType.BACKGROUND: "background",
}


def _field(slot: int) -> str:
    try:
        return _SLOT_FIELDS[ClothingType(slot)]
    except (KeyError, ValueError):
        raise ValueError(f"clothes have no {slot!r} slot") from None


def _as_short(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


@dataclass
class Clothes:
    """Worn item ids; 0 means nothing in that slot. Ids are 16-bit signed."""

    head: int = 0
    face: int = 0
    neck: int = 0
    body: int = 0
    hand: int = 0
    feet: int = 0
    pin: int = 0
    background: int = 0

    def item_for(self, slot: ClothingType) -> int:
        """The item id worn in ``slot``."""
        return getattr(self, _field(slot))

    def wear(self, slot: ClothingType, item_id: int) -> int:
        """Put ``item_id`` in ``slot`` and return the id as stored."""
        name = _field(slot)
        stored = _as_short(item_id)
        setattr(self, name, stored)
        return stored