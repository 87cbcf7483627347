"""Poisson-disc sampling utilities."""
from __future__ import annotations

import math
from typing import List

from ..geometry import BoxLike, Point, as_box
from ..random import RngLike, resolve_rng
from ..utils.logging import logger
from .grid import AcceptanceGrid


def _check_attempts(attempts: int) -> int:
    if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
        raise ValueError(f"attempts must be an int >= 1, got {attempts!r}")
    return attempts


def sample_poisson_disk(
    width: float,
    height: float,
    min_distance: float,
    attempts: int = 20,
    rng: RngLike = None,
) -> List[Point]:
    """Generate 2D Poisson-disc samples inside ``[0,width) x [0,height)``.

    Bridson's algorithm, seeded with a single point at the centre of the
    rectangle: https://www.cs.ubc.ca/~rbridson/docs/bridson-siggraph07-poissondisk.pdf

    Parameters
    ----------
    width, height : float
        Size of the sampling rectangle, origin at ``(0,0)``.
    min_distance : float
        Minimum distance between any two samples.
    attempts : int, optional
        Candidates tried around an active point before it is retired, by
        default ``20``.  Larger values fill gaps more densely at a higher cost.
    rng : np.random.Generator | int | None
        Random source, an ``int`` seed, or ``None`` for a fresh generator.

    Returns
    -------
    list[Point]
        Samples in discovery order, the seed point first.
    """
    attempts = _check_attempts(attempts)
    grid = AcceptanceGrid(width, height, min_distance)
    rng = resolve_rng(rng)
    d = grid.min_distance

    seed = Point(grid.width / 2.0, grid.height / 2.0)
    points: List[Point] = [seed]
    active: List[Point] = [seed]
    grid.register(seed, 0)

    exhausted = 0
    while active:
        k = int(rng.integers(len(active)))
        center = active[k]
        for _ in range(attempts):
            angle = rng.random() * 2.0 * math.pi
            radius = d + rng.random() * d
            cand = Point(center.x + radius * math.sin(angle), center.y + radius * math.cos(angle))
            if grid.query_empty_neighbourhood(cand, points):
                points.append(cand)
                active.append(cand)
                grid.register(cand, len(points) - 1)
                break
        else:
            # order of the frontier is irrelevant
            active[k] = active[-1]
            active.pop()
            exhausted += 1

    logger.debug(
        "poisson disk: %d points in %.3gx%.3g (d=%.3g, grid=%dx%d, exhausted=%d)",
        len(points), grid.width, grid.height, d, grid.shape[0], grid.shape[1], exhausted,
    )
    return points


def sample_poisson_disk_bbox(
    box: BoxLike,
    min_distance: float,
    attempts: int = 20,
    rng: RngLike = None,
) -> List[Point]:
    """Poisson-disc samples over the extents of ``box``.

    Sampling runs over ``box.width x box.height`` and every point is shifted
    by minus half the extents, so the samples are centred on the origin.
    """
    bb = as_box(box)
    bw, bh = bb.width, bb.height
    if bw <= 0 or bh <= 0:
        raise ValueError(f"bounding box must have positive extents, got {bw}x{bh}")
    half = Point(bw / 2.0, bh / 2.0)
    return [p - half for p in sample_poisson_disk(bw, bh, min_distance, attempts=attempts, rng=rng)]


__all__ = ["sample_poisson_disk", "sample_poisson_disk_bbox"]
