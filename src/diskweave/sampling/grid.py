"""Uniform acceptance grid used by the Poisson-disc sampler."""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..geometry import Point

# Bridson's construction: with cell = d/sqrt(2) any conflicting point lies
# within two cells of the candidate.
SEARCH_RADIUS = 2


def _check_positive(name: str, value: float) -> float:
    v = float(value)
    if not math.isfinite(v) or v <= 0:
        raise ValueError(f"{name} must be positive finite, got {value!r}")
    return v


class AcceptanceGrid:
    """Dense grid of cell size ``d/sqrt(2)`` over ``[0,w) x [0,h)``.

    Each cell stores the index of the one accepted point inside it, or
    :attr:`EMPTY`.  Cells are written at most once.
    """

    EMPTY = -1

    def __init__(self, width: float, height: float, min_distance: float):
        self.width = _check_positive("width", width)
        self.height = _check_positive("height", height)
        self.min_distance = _check_positive("min_distance", min_distance)
        self.cellsize = self.min_distance / math.sqrt(2.0)
        self.shape = (
            int(math.ceil(self.width / self.cellsize)),
            int(math.ceil(self.height / self.cellsize)),
        )
        self.cells = np.full(self.shape, self.EMPTY, dtype=np.intp)

    @property
    def capacity(self) -> int:
        return self.shape[0] * self.shape[1]

    def occupied(self) -> int:
        return int(np.count_nonzero(self.cells != self.EMPTY))

    def contains(self, p: Point) -> bool:
        return 0.0 <= p.x < self.width and 0.0 <= p.y < self.height

    def cell_of(self, p: Point) -> tuple[int, int]:
        gw, gh = self.shape
        i = min(int(p.x // self.cellsize), gw - 1)
        j = min(int(p.y // self.cellsize), gh - 1)
        return i, j

    def register(self, p: Point, index: int) -> None:
        if not self.contains(p):
            raise RuntimeError(f"cannot register {p} outside the {self.width}x{self.height} region")
        i, j = self.cell_of(p)
        held = int(self.cells[i, j])
        if held != self.EMPTY:
            raise RuntimeError(f"grid cell ({i}, {j}) already holds point {held}")
        self.cells[i, j] = index

    def query_empty_neighbourhood(self, sample: Point, points: Sequence[Point]) -> bool:
        """True when ``sample`` is inside the region and no registered point
        lies closer than ``min_distance``."""
        if not self.contains(sample):
            return False
        gx, gy = self.cell_of(sample)
        gw, gh = self.shape
        x0, x1 = max(gx - SEARCH_RADIUS, 0), min(gx + SEARCH_RADIUS + 1, gw)
        y0, y1 = max(gy - SEARCH_RADIUS, 0), min(gy + SEARCH_RADIUS + 1, gh)
        window = self.cells[x0:x1, y0:y1]
        d = self.min_distance
        for idx in window[window != self.EMPTY]:
            q = points[idx]
            if math.hypot(sample.x - q.x, sample.y - q.y) < d:
                return False
        return True


__all__ = ["AcceptanceGrid", "SEARCH_RADIUS"]
