"""Penguin atlas sprites that pick their picture from a direction and a state."""

from __future__ import annotations

from typing import Optional

from penguinroom.constants import Direction, State, sprite_id_for


class PenguinSpriteBase:
    """An atlas sprite showing a penguin (or a worn item) by direction and state.

    Children follow the sprite picture chosen for their parent.
    """

    def __init__(self, parent: Optional["PenguinSpriteBase"] = None) -> None:
        self.position: tuple[float, float] = (0.0, 0.0)
        self.sprite_id: Optional[int] = None
        self.frame = 0
        self.parent: Optional[PenguinSpriteBase] = None
        self._children: list[PenguinSpriteBase] = []
        self._direction = Direction.S
        self._state = State.STANDING
        if parent is not None:
            parent.add_child(self)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def state(self) -> State:
        return self._state

    @property
    def children(self) -> tuple["PenguinSpriteBase", ...]:
        return tuple(self._children)

    def show_sprite(self, sprite_id: int, frame: int) -> None:
        """Show atlas sprite ``sprite_id`` at ``frame``."""
        self.sprite_id = sprite_id
        self.frame = frame

    def set_current_sprite(self, direction: Direction, state: State) -> bool:
        """Show the sprite for ``direction`` and ``state``.

        Returns False, changing nothing, when the atlas has no such sprite.
        """
        sprite_id = sprite_id_for(direction, state)
        if sprite_id is None:
            return False
        self._direction = Direction(direction)
        self._state = State(state)
        self.show_sprite(sprite_id, self.frame)
        for child in self._children:
            child.show_sprite(sprite_id, self.frame)
        return True

    def set_direction(self, direction: Direction) -> None:
        """Turn to ``direction``, keeping the state; children turn too."""
        if direction == self._direction:
            return
        self.set_current_sprite(direction, self._state)
        for child in self._children:
            child.set_current_sprite(direction, self._state)
            child.frame = self.frame

    def set_state(self, state: State) -> None:
        """Switch to ``state``, keeping the direction."""
        self.set_current_sprite(self._direction, state)

    def add_child(self, child: "PenguinSpriteBase") -> None:
        if child.parent is not None and child.parent is not self:
            child.parent.remove_child(child)
        if child not in self._children:
            self._children.append(child)
        child.parent = self

    def remove_child(self, child: "PenguinSpriteBase") -> None:
        """Detach ``child``; ValueError if it is not a child of this sprite."""
        self._children.remove(child)
        child.parent = None


class SpriteClothing(PenguinSpriteBase):
    """A clothing item drawn over a penguin sprite."""

    def __init__(
        self,
        parent: Optional[PenguinSpriteBase] = None,
        item_id: Optional[int] = None,
    ) -> None:
        super().__init__(parent)
        self.item_id = item_id