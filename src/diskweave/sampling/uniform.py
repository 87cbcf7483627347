"""Uniform random points inside a rectangle."""
from __future__ import annotations

from typing import List

from ..geometry import BoxLike, Point, as_box
from ..random import RngLike, resolve_rng


def random_ordinate(low: float, high: float, rng: RngLike = None) -> float:
    """Uniform value between ``low`` and ``high``; the bounds may be swapped."""
    if low > high:
        low, high = high, low
    rng = resolve_rng(rng)
    return float(low + rng.random() * (high - low))


def random_point(low: Point, high: Point, rng: RngLike = None) -> Point:
    """Random point inside the rectangle spanned by two corners."""
    rng = resolve_rng(rng)
    return Point(random_ordinate(low.x, high.x, rng), random_ordinate(low.y, high.y, rng))


def random_point_array(low: Point, high: Point, n: int, rng: RngLike = None) -> List[Point]:
    """``n`` independent uniform points inside the rectangle spanned by two corners."""
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    rng = resolve_rng(rng)
    return [random_point(low, high, rng) for _ in range(n)]


def random_point_in(box: BoxLike, rng: RngLike = None) -> Point:
    """Like :func:`random_point` for a box or ``(x0, y0, x1, y1)``."""
    bb = as_box(box)
    return random_point(bb.corner1, bb.corner2, rng)


def random_point_array_in(box: BoxLike, n: int, rng: RngLike = None) -> List[Point]:
    bb = as_box(box)
    return random_point_array(bb.corner1, bb.corner2, n, rng)


__all__ = [
    "random_ordinate",
    "random_point",
    "random_point_array",
    "random_point_in",
    "random_point_array_in",
]
