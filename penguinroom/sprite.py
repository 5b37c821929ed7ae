"""The walking, sitting and waving penguin controlled by the player."""

from __future__ import annotations

from typing import Any, Callable, Optional

from penguinroom.constants import ClothingType, Direction, State
from penguinroom.facing import clamp_to_scene, direction_towards
from penguinroom.sprite_base import PenguinSpriteBase, SpriteClothing
from penguinroom.workers import WorkerPool

Point = tuple[float, float]

DEFAULT_VELOCITY = 3.0
DEFAULT_ORIGIN: Point = (50.0, 50.0)

_CLOTHING_Z = {
    ClothingType.HEAD: 6,
    ClothingType.FACE: 5,
    ClothingType.NECK: 4,
    ClothingType.BODY: 3,
    ClothingType.HAND: 8,
    ClothingType.FEET: 2,
}

_SIT_KEYS = {
    "I": Direction.N,
    "K": Direction.S,
    "J": Direction.W,
    "L": Direction.E,
}


class PenguinSprite(PenguinSpriteBase):
    """A penguin that turns towards the pointer, walks and reacts to keys.

    ``origin`` is the point, in the sprite's own coordinates, that the
    penguin stands on; ``scale`` is the sprite's drawing scale.
    """

    def __init__(self, pool: Optional[WorkerPool] = None) -> None:
        super().__init__()
        self.pool = pool
        self.velocity = DEFAULT_VELOCITY
        self.mouse_trackable = True
        self.clickable = True
        self.hoverable = True
        self.animation_loop = False
        self.origin: Point = DEFAULT_ORIGIN
        self.scale = 1.0
        self.destination: Point = (0.0, 0.0)
        self.z_value = 0
        self.on_click: list[Callable[[], Any]] = []
        self._clothing: dict[ClothingType, SpriteClothing] = {}
        self.set_current_sprite(Direction.S, State.STANDING)

    @property
    def clothing(self) -> dict[ClothingType, SpriteClothing]:
        """The worn clothing sprites by slot."""
        return dict(self._clothing)

    def _anchor(self) -> Point:
        """Where the penguin stands, in scene coordinates."""
        x, y = self.position
        if self.origin == (0.0, 0.0) or self.origin == (0, 0):
            return (float(x), float(y))
        return (x + self.origin[0] * self.scale, y + self.origin[1] * self.scale)

    def look_at(self, point: Point) -> Direction:
        """Turn towards ``point`` if the penguin follows the pointer."""
        if self.mouse_trackable:
            anchor = self._anchor()
            self.set_direction(direction_towards(point[0] - anchor[0], point[1] - anchor[1]))
        return self.direction

    def press_at(self, point: Point, scene_width: float, scene_height: float) -> Point:
        """Start walking so that the penguin's origin ends up at ``point``.

        Returns the position the sprite walks to, kept inside the scene.
        """
        self.mouse_trackable = False
        self.animation_loop = True
        anchor = self._anchor()
        direction = direction_towards(point[0] - anchor[0], point[1] - anchor[1])
        self.set_current_sprite(direction, State.WALKING)
        target = (
            point[0] - self.origin[0] * self.scale,
            point[1] - self.origin[1] * self.scale,
        )
        target = clamp_to_scene(target, scene_width, scene_height)
        self.walk_to(target)
        return target

    def walk_to(self, destination: Point) -> None:
        """Hand the sprite to the pool's move worker, starting it if idle."""
        self.destination = (float(destination[0]), float(destination[1]))
        if self.pool is None:
            return
        pool = self.pool
        worker = pool.move_worker()
        worker.add(self, self.destination)
        if not worker.started:
            worker.on_finished.append(pool.reset_move_worker)
            pool.start(worker)

    def handle_key(self, key: str) -> bool:
        """React to a key: W waves, D dances, I/K/J/L sit north/south/west/east.

        Pressing a sit key again while sitting that way stands up. Keys are
        ignored while walking. Returns True if the key was acted upon.
        """
        name = key.upper()
        if self.state == State.WALKING:
            return False
        if name == "W":
            self.mouse_trackable = False
            self.animation_loop = False
            self.set_current_sprite(Direction.S, State.WAVING)
            return True
        if name == "D":
            self.mouse_trackable = False
            self.animation_loop = True
            self.set_current_sprite(Direction.S, State.DANCING)
            return True
        sit_direction = _SIT_KEYS.get(name)
        if sit_direction is None:
            return False
        if self.state == State.SITTING and self.direction == sit_direction:
            self.reset()
        else:
            self.mouse_trackable = False
            self.animation_loop = False
            self.set_current_sprite(sit_direction, State.SITTING)
        return True

    def reset(self) -> None:
        """Stand still facing the same way and follow the pointer again."""
        self.set_current_sprite(self.direction, State.STANDING)
        self.mouse_trackable = True
        self.frame = 0
        for child in self.children:
            child.frame = 0

    def animation_done(self) -> None:
        self.reset()

    def set_position(self, point: Point) -> None:
        self.position = (float(point[0]), float(point[1]))

    def click(self) -> None:
        """Notify listeners that the penguin was clicked."""
        for callback in list(self.on_click):
            callback()

    def wear(self, slot: ClothingType, item_id: int) -> SpriteClothing:
        """Put on item ``item_id`` in ``slot``, replacing what was there."""
        try:
            kind = ClothingType(slot)
            z_value = _CLOTHING_Z[kind]
        except (KeyError, ValueError):
            raise ValueError(f"a penguin sprite has no {slot!r} slot") from None
        old = self._clothing.pop(kind, None)
        if old is not None:
            self.remove_child(old)
        item = SpriteClothing(self, item_id)
        item.z_value = z_value
        item.set_current_sprite(self.direction, self.state)
        item.frame = self.frame
        self._clothing[kind] = item
        return item