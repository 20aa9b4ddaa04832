"""Two-dimensional vector maths, rectangles and screen geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional

_EPSILON = 1e-5


@dataclass
class Vector2D:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vector2D:
        if not isinstance(k, Real):
            return NotImplemented
        return Vector2D(self.x * k, self.y * k)

    def __rmul__(self, k: float) -> Vector2D:
        return self.__mul__(k)

    def __truediv__(self, k: float) -> Vector2D:
        if not isinstance(k, Real):
            return NotImplemented
        return Vector2D(self.x / k, self.y / k)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def intersection(self, other: Rect) -> Optional[Rect]:
        """Return the overlapping rectangle, or None when the overlap is empty."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left >= right or top >= bottom:
            return None
        return Rect(left, top, right, bottom)

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles share a non-empty area."""
        return self.intersection(other) is not None


class Screen:
    """Dimensions of the game screen in pixels."""

    WIDTH = 1280
    HEIGHT = 720

    TOP = 0
    BOTTOM = HEIGHT
    LEFT = 0
    RIGHT = WIDTH

    CENTER_X = WIDTH // 2
    CENTER_Y = HEIGHT // 2


def dot(v1: Vector2D, v2: Vector2D) -> float:
    """Dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y


def cross(v1: Vector2D, v2: Vector2D) -> float:
    """Scalar cross product of two vectors."""
    return v1.x * v2.y - v1.y * v2.x


def length(v: Vector2D) -> float:
    """Euclidean length of a vector."""
    return math.hypot(v.x, v.y)


def normalize(v: Vector2D) -> Vector2D:
    """Unit vector in the direction of v, or the zero vector if v is too short."""
    size = length(v)
    if size < _EPSILON:
        return Vector2D(0.0, 0.0)
    return v / size


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / math.pi)


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (math.pi / 180.0)


def normalize_angle_pi(radians: float) -> float:
    """Wrap an angle into the range -pi to pi."""
    return math.atan2(math.sin(radians), math.cos(radians))


def normalize_angle_2pi(radians: float) -> float:
    """Wrap an angle into the range 0 to 2*pi."""
    angle = normalize_angle_pi(radians)
    if angle < 0.0:
        angle += 2.0 * math.pi
    return angle