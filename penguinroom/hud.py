"""In-world HUD pieces: notification badges, chat bubbles and the chat history."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

MAX_NOTIFICATION = 99
BUBBLE_FONT_SIZE = 6
BUBBLE_LIFETIME = 5.0
BUBBLE_SCALE = 6.5
HISTORY_CAPACITY = 15


class Notification:
    """A round badge showing a count from 0 to 99; hidden at zero."""

    def __init__(self, number: int = 0) -> None:
        self.number = 0
        self.visible = False
        self.two_digits = False
        self.label = ""
        self.set_number(number)

    def set_number(self, number: int) -> int:
        """Show ``number`` clamped to 0..99 and return the value shown."""
        number = min(max(int(number), 0), MAX_NOTIFICATION)
        self.number = number
        self.visible = number != 0
        self.two_digits = number >= 10
        self.label = str(number)
        return number


class BubbleSize(Enum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2


def bubble_layout(message: str) -> tuple[BubbleSize, float]:
    """The bubble size for ``message`` and how far its text sits from the top."""
    font_height = BUBBLE_FONT_SIZE + 3
    if len(message) < 12:
        return BubbleSize.SMALL, font_height * 2.5
    if len(message) < 24:
        return BubbleSize.MEDIUM, float(font_height)
    return BubbleSize.LARGE, 0.0


class ChatBubble:
    """A speech bubble over a penguin that hides itself after a while."""

    def __init__(
        self,
        message: str,
        clock: Callable[[], float] = time.monotonic,
        lifetime: float = BUBBLE_LIFETIME,
    ) -> None:
        self.clock = clock
        self.lifetime = lifetime
        self.scale = BUBBLE_SCALE
        self.message = ""
        self.size = BubbleSize.SMALL
        self.text_offset_y = 0.0
        self._shown_at: float | None = None
        self.set_text(message)

    @property
    def visible(self) -> bool:
        if self._shown_at is None:
            return False
        return self.clock() - self._shown_at < self.lifetime

    def hide(self) -> None:
        self._shown_at = None

    def set_text(self, message: str) -> BubbleSize:
        """Show ``message``, resizing the bubble and restarting its timer."""
        self.message = message
        self.size, self.text_offset_y = bubble_layout(message)
        self._shown_at = self.clock()
        return self.size


@dataclass
class _HistorySlot:
    text: str = ""
    highlighted: bool = False


class ChatHistory:
    """The last few chat lines, newest at the bottom."""

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots = [_HistorySlot() for _ in range(capacity)]

    @property
    def messages(self) -> tuple[str, ...]:
        """Slot texts from top (oldest) to bottom (newest)."""
        return tuple(slot.text for slot in self._slots)

    @property
    def highlights(self) -> tuple[bool, ...]:
        return tuple(slot.highlighted for slot in self._slots)

    def add_message(self, message: str) -> None:
        """Push ``message`` in at the bottom; the top line falls off."""
        carried = message
        for slot in reversed(self._slots):
            slot.text, carried = carried, slot.text

    def hover(self, index: int, entered: bool) -> bool:
        """Highlight (or unhighlight) a non-empty line; return its highlight."""
        slot = self._slots[index]
        if slot.text:
            slot.highlighted = entered
        return slot.highlighted