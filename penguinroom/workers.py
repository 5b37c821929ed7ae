"""Background work: loading-bar progress, sprite movement and the worker pool."""

from __future__ import annotations

import math
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Protocol

Point = tuple[float, float]

DEFAULT_VELOCITY = 7.0
DEFAULT_MOVE_DELAY = 0.005
DEFAULT_LOADING_DELAY = 0.005
MAX_POOL_THREADS = 4


class LoadingProgress:
    """Percentage shown by a loading bar that fills one step at a time."""

    def __init__(self, current_step: int = 1, max_steps: int = 1, current_percent: float = 0) -> None:
        if max_steps < 1:
            raise ValueError("max_steps must be at least 1")
        self.current_step = current_step
        self.max_steps = max_steps
        self.current_percent = float(current_percent)

    @property
    def step_share(self) -> int:
        """Whole percentage points each step is worth."""
        return 100 // self.max_steps

    def increment_step(self) -> int:
        """Move to the next step, never past the last; return the current step."""
        if self.current_step < self.max_steps:
            self.current_step += 1
        return self.current_step

    def advance(self) -> Optional[float]:
        """Raise the percentage by one if the current step allows it.

        Returns the new percentage, or None when the bar has caught up.
        """
        if self.current_percent < self.current_step * self.step_share:
            self.current_percent += 1
            return self.current_percent
        return None

    def run(
        self,
        on_percent: Optional[Callable[[float], Any]] = None,
        delay: float = DEFAULT_LOADING_DELAY,
    ) -> None:
        """Fill the bar until it reaches 100, reporting every new percentage.

        Other threads call :meth:`increment_step` to let it go further.
        """
        while self.current_percent < 100:
            percent = self.advance()
            if percent is not None and on_percent is not None:
                on_percent(percent)
            if delay:
                time.sleep(delay)


def move_towards(position: Point, destination: Point, velocity: float = DEFAULT_VELOCITY) -> Point:
    """One movement step from ``position`` towards ``destination``.

    Each axis moves by its share of ``velocity`` and never overshoots.
    """
    x, y = float(position[0]), float(position[1])
    dest_x, dest_y = float(destination[0]), float(destination[1])
    if (x, y) == (dest_x, dest_y):
        return (dest_x, dest_y)
    x_diff = dest_x - x
    y_diff = dest_y - y
    length = math.hypot(x_diff, y_diff)
    if x != dest_x:
        moving_right = x <= dest_x
        x += x_diff / length * velocity
        if moving_right and x > dest_x or not moving_right and x < dest_x:
            x = dest_x
    if y != dest_y:
        moving_down = y <= dest_y
        y += y_diff / length * velocity
        if moving_down and y > dest_y or not moving_down and y < dest_y:
            y = dest_y
    return (x, y)


class Movable(Protocol):
    position: Point

    def set_position(self, point: Point) -> Any: ...

    def reset(self) -> Any: ...


class MoveWorker:
    """Walks sprites towards their destinations until all have arrived."""

    def __init__(self, velocity: float = DEFAULT_VELOCITY) -> None:
        self.velocity = velocity
        self.on_finished: list[Callable[[], Any]] = []
        self._moving: dict[Movable, Point] = {}
        self._lock = threading.Lock()
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    @property
    def pending(self) -> int:
        """How many sprites are still on their way."""
        with self._lock:
            return len(self._moving)

    def add(self, sprite: Movable, destination: Point) -> None:
        """Send ``sprite`` to ``destination``, replacing any earlier target."""
        with self._lock:
            self._moving[sprite] = (float(destination[0]), float(destination[1]))

    def step(self) -> int:
        """Move every sprite once; arrived sprites are reset and dropped.

        Returns the number of sprites still moving.
        """
        with self._lock:
            snapshot = list(self._moving.items())
        for sprite, destination in snapshot:
            current = (float(sprite.position[0]), float(sprite.position[1]))
            if current != destination:
                sprite.set_position(move_towards(current, destination, self.velocity))
            else:
                sprite.reset()
                with self._lock:
                    if self._moving.get(sprite) == destination:
                        del self._moving[sprite]
        return self.pending

    def run(self, delay: float = DEFAULT_MOVE_DELAY) -> None:
        """Step until no sprite is moving, then notify ``on_finished``."""
        self._started = True
        try:
            while self.pending:
                self.step()
                if delay:
                    time.sleep(delay)
        finally:
            with self._lock:
                self._moving.clear()
            self._started = False
        for callback in list(self.on_finished):
            callback()


class WorkerPool:
    """A small thread pool that also owns the shared move worker."""

    def __init__(self, max_threads: int = MAX_POOL_THREADS) -> None:
        self._executor = ThreadPoolExecutor(max_workers=max_threads)
        self._move_worker: Optional[MoveWorker] = None

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def move_worker(self) -> MoveWorker:
        """The current move worker, created on first use."""
        if self._move_worker is None:
            self._move_worker = MoveWorker()
        return self._move_worker

    def reset_move_worker(self) -> None:
        """Forget the current move worker so the next call makes a new one."""
        self._move_worker = None

    def start(self, task: Any) -> Future:
        """Run ``task`` (a callable or an object with ``run()``) on the pool."""
        runner = getattr(task, "run", None)
        if not callable(runner):
            runner = task
        if not callable(runner):
            raise TypeError("task must be callable or have a run() method")
        return self._executor.submit(runner)

    def shutdown(self) -> None:
        """Stop accepting tasks and wait for the running ones to finish."""
        self._executor.shutdown(wait=True)