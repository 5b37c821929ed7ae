"""Players in the room and the factory that keeps track of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from penguinroom.constants import Badge
from penguinroom.paper import PenguinPaper
from penguinroom.sprite import PenguinSprite
from penguinroom.workers import WorkerPool


@dataclass(eq=False)
class Player:
    """One player: identity, social lists, owned items and their penguin."""

    username: str = ""
    player_id: int = -1
    color: str = ""
    badge: Badge = Badge.PLAYER
    friends: list[int] = field(default_factory=list)
    ignored: list[int] = field(default_factory=list)
    owned_items: list[int] = field(default_factory=list)
    pool: Optional[WorkerPool] = field(default=None, repr=False)
    _sprite: Optional[PenguinSprite] = field(default=None, init=False, repr=False)
    _paper: Optional[PenguinPaper] = field(default=None, init=False, repr=False)

    def add_friend(self, player_id: int) -> list[int]:
        """Add ``player_id`` to the friend list and return a copy of it."""
        self.friends.append(player_id)
        return list(self.friends)

    def remove_friend(self, player_id: int) -> list[int]:
        """Remove every occurrence of ``player_id`` from the friend list."""
        self.friends[:] = [pid for pid in self.friends if pid != player_id]
        return list(self.friends)

    def add_ignore(self, player_id: int) -> list[int]:
        self.ignored.append(player_id)
        return list(self.ignored)

    def remove_ignore(self, player_id: int) -> list[int]:
        self.ignored[:] = [pid for pid in self.ignored if pid != player_id]
        return list(self.ignored)

    def sprite(self) -> PenguinSprite:
        """The player's in-room penguin, created on first use."""
        if self._sprite is None:
            self._sprite = PenguinSprite(self.pool)
        return self._sprite

    def paper(self) -> PenguinPaper:
        """The player's paper doll, created on first use."""
        if self._paper is None:
            self._paper = PenguinPaper()
        return self._paper


class PlayerFactory:
    """Creates players and finds them by name or id."""

    def __init__(self, pool: Optional[WorkerPool] = None) -> None:
        self.pool = pool
        self.active_player: Optional[Player] = None
        self._players: list[Player] = []

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    def create_player(self) -> Player:
        player = Player(pool=self.pool)
        self._players.append(player)
        return player

    def destroy_player(self, player: Player) -> bool:
        """Forget ``player``; return False if it was not known."""
        for index, known in enumerate(self._players):
            if known is player:
                del self._players[index]
                if self.active_player is player:
                    self.active_player = None
                return True
        return False

    def by_username(self, username: str) -> Optional[Player]:
        """The first player whose name matches, ignoring case."""
        wanted = username.lower()
        return next((p for p in self._players if p.username.lower() == wanted), None)

    def by_id(self, player_id: int) -> Optional[Player]:
        return next((p for p in self._players if p.player_id == player_id), None)