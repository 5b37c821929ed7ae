"""Which way a penguin faces when looking at, or walking to, a point."""

from __future__ import annotations

import math

from penguinroom.constants import Direction

_PI_APPROX = 3.14591


def facing_angle(dx: float, dy: float) -> float:
    """Angle of the offset (dx, dy), measured from straight down.

    Offsets are truncated to whole pixels first. A purely horizontal
    offset gives 90 (or -90 to the left).
    """
    x = int(dx)
    y = int(dy)
    angle = math.atan2(x, y) * 180 / _PI_APPROX if y != 0 else 90.0
    if y == 0 and x < 0:
        angle = -angle
    return angle


def direction_towards(dx: float, dy: float) -> Direction:
    """The compass direction nearest to the offset (dx, dy).

    Angles falling exactly on a sector boundary give S.
    """
    angle = facing_angle(dx, dy)
    if -180 < angle < -157.5:
        return Direction.N
    if -157.5 < angle < -112.5:
        return Direction.NW
    if -112.5 < angle < -67.5:
        return Direction.W
    if -67.5 < angle < -22.5:
        return Direction.SW
    if -22.5 < angle < 22.5:
        return Direction.S
    if 22.5 < angle < 67.5:
        return Direction.SE
    if 67.5 < angle < 112.5:
        return Direction.E
    if 112.5 < angle < 157.5:
        return Direction.NE
    if 157.5 < angle < 180:
        return Direction.N
    return Direction.S


def clamp_to_scene(point: tuple[float, float], width: float, height: float) -> tuple[float, float]:
    """Keep ``point`` inside a scene of the given size."""
    x = min(max(float(point[0]), 0.0), float(width))
    y = min(max(float(point[1]), 0.0), float(height))
    return (x, y)