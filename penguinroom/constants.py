"""Shared enumerations and lookup tables for penguins, clothing and layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from types import MappingProxyType
from typing import Mapping, Optional


class Direction(IntEnum):
    """The eight compass directions a penguin can face."""

    S = 0
    SW = 1
    W = 2
    NW = 3
    N = 4
    NE = 5
    E = 6
    SE = 7


class State(IntEnum):
    """What a penguin is doing."""

    STANDING = 0
    SITTING = 1
    WALKING = 2
    DANCING = 3
    WAVING = 4
    SNOWBALL = 5
    NINJA = 6
    UNUSED = 7


@dataclass(frozen=True)
class SpriteInfo:
    """The direction and state shown by one sprite of the penguin atlas."""

    direction: Direction
    state: State


def _build_sprite_table() -> Mapping[int, SpriteInfo]:
    table: dict[int, SpriteInfo] = {}
    sprite_id = 1
    for state in (State.STANDING, State.WALKING, State.SITTING):
        for direction in (
            Direction.S,
            Direction.SW,
            Direction.W,
            Direction.NW,
            Direction.N,
            Direction.NE,
            Direction.E,
            Direction.SE,
        ):
            table[sprite_id] = SpriteInfo(direction, state)
            sprite_id += 1
    rest = [
        (Direction.S, State.WAVING),
        (Direction.S, State.DANCING),
        (Direction.SW, State.SNOWBALL),
        (Direction.NW, State.SNOWBALL),
        (Direction.NE, State.SNOWBALL),
        (Direction.SE, State.SNOWBALL),
        (Direction.S, State.UNUSED),
        (Direction.S, State.UNUSED),
        (Direction.E, State.NINJA),
        (Direction.W, State.NINJA),
        (Direction.SE, State.NINJA),
        (Direction.NW, State.NINJA),
        (Direction.SW, State.NINJA),
        (Direction.NE, State.NINJA),
    ]
    for direction, state in rest:
        table[sprite_id] = SpriteInfo(direction, state)
        sprite_id += 1
    return MappingProxyType(table)


SPRITES_MAPPED: Mapping[int, SpriteInfo] = _build_sprite_table()
"""Sprite number in the penguin atlas -> what that sprite shows (1 to 38)."""


class Badge(IntEnum):
    """Membership badge shown on a player card."""

    NONE = 0
    PLAYER = 1
    MEMBER_0 = 2
    MEMBER_1 = 3
    MEMBER_2 = 4
    MEMBER_3 = 5
    MEMBER_4 = 6


class ClothingType(IntEnum):
    """Item slots, numbered as in the item catalogue."""

    COLOR = 1
    HEAD = 2
    FACE = 3
    NECK = 4
    BODY = 5
    HAND = 6
    FEET = 7
    PIN = 8
    BACKGROUND = 9
    AWARD = 10


class InventorySort(IntEnum):
    """Inventory filters: one per clothing slot, plus everything."""

    COLOR = 1
    HEAD = 2
    FACE = 3
    NECK = 4
    BODY = 5
    HAND = 6
    FEET = 7
    PIN = 8
    BACKGROUND = 9
    AWARD = 10
    ALL = 11


class CanvasAction(IntFlag):
    """Interactions a canvas object accepts."""

    CLICKABLE = 1
    HOVERABLE = 2
    MOUSE_TRACKABLE = 4


class VerticalAlignment(Enum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2
    INVALID = 3


class HorizontalAlignment(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2
    INVALID = 3


@dataclass(eq=False)
class CellProperties:
    """Placement of one item in a grid container.

    Two cells are equal when they occupy the same row and column.
    """

    row: int = 0
    col: int = 0
    vertical_span: int = 1
    horizontal_span: int = 1
    vertical_alignment: VerticalAlignment = VerticalAlignment.CENTER
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.CENTER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellProperties):
            return NotImplemented
        return (self.row, self.col) == (other.row, other.col)


class BackgroundColor(Enum):
    BLUE = 0
    ORANGE = 1


_NAMED_STATES = {
    "standing": State.STANDING,
    "walking": State.WALKING,
    "dancing": State.DANCING,
    "sitting": State.SITTING,
    "waving": State.WAVING,
}


def sprite_id_for(direction: Direction, state: State) -> Optional[int]:
    """Return the atlas sprite showing ``direction`` and ``state``, or None.

    Where several sprites match, the lowest number is chosen.
    """
    return min(
        (
            sprite_id
            for sprite_id, info in SPRITES_MAPPED.items()
            if info.direction == direction and info.state == state
        ),
        default=None,
    )


def state_from_string(text: str) -> State:
    """Parse a state name case-insensitively; unknown names give UNUSED."""
    return _NAMED_STATES.get(text.lower(), State.UNUSED)