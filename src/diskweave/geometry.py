"""Small 2D geometry types shared by the samplers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box given by two opposite corners, in any order."""

    corner1: Point
    corner2: Point

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> "BoundingBox":
        return cls(Point(float(x0), float(y0)), Point(float(x1), float(y1)))

    @classmethod
    def from_size(cls, width: float, height: float) -> "BoundingBox":
        """Box of ``width`` x ``height`` centred on the origin."""
        w2, h2 = 0.5 * float(width), 0.5 * float(height)
        return cls(Point(-w2, -h2), Point(w2, h2))

    @property
    def width(self) -> float:
        return abs(self.corner2.x - self.corner1.x)

    @property
    def height(self) -> float:
        return abs(self.corner2.y - self.corner1.y)

    @property
    def low(self) -> Point:
        return Point(min(self.corner1.x, self.corner2.x), min(self.corner1.y, self.corner2.y))

    @property
    def high(self) -> Point:
        return Point(max(self.corner1.x, self.corner2.x), max(self.corner1.y, self.corner2.y))

    @property
    def center(self) -> Point:
        return Point(
            0.5 * (self.corner1.x + self.corner2.x),
            0.5 * (self.corner1.y + self.corner2.y),
        )


BoxLike = Union[BoundingBox, Sequence[float]]


def as_box(box: BoxLike) -> BoundingBox:
    """Accept a :class:`BoundingBox` or an ``(x0, y0, x1, y1)`` sequence."""
    if isinstance(box, BoundingBox):
        return box
    vals = [float(v) for v in box]
    if len(vals) != 4:
        raise ValueError(f"box must be (x0, y0, x1, y1), got {len(vals)} values")
    return BoundingBox.from_corners(*vals)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def points_to_array(points: Iterable[Point]) -> Array:
    """Stack points into an ``(N, 2)`` float array (``(0, 2)`` when empty)."""
    rows = [(p.x, p.y) for p in points]
    if not rows:
        return np.zeros((0, 2), dtype=float)
    return np.asarray(rows, dtype=float)


__all__ = [
    "Point",
    "BoundingBox",
    "BoxLike",
    "as_box",
    "distance",
    "points_to_array",
]
