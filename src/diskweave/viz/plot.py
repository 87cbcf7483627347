from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from ..geometry import BoundingBox, Point, points_to_array
from ..utils.logging import logger


def plot_points(
    points: Sequence[Point],
    *,
    region: Optional[BoundingBox] = None,
    min_distance: Optional[float] = None,
    show_disks: bool = False,
    path: str | Path | None = None,
    dpi: int = 120,
):
    """Scatter ``points``; optionally outline ``region`` and draw the
    ``min_distance/2`` disc around each sample.  Saves a PNG when ``path`` is
    given and returns the figure."""
    P = points_to_array(points)
    fig, ax = plt.subplots(figsize=(6, 6), dpi=dpi)
    ax.set_aspect("equal")

    if region is not None:
        lo = region.low
        ax.add_patch(
            Rectangle((lo.x, lo.y), region.width, region.height, fill=False, edgecolor="0.4", lw=1.0)
        )
        c = region.center
        hw = 0.55 * region.width
        hh = 0.55 * region.height
        ax.set_xlim(c.x - hw, c.x + hw)
        ax.set_ylim(c.y - hh, c.y + hh)

    if show_disks and min_distance is not None:
        r = 0.5 * float(min_distance)
        for x, y in P:
            ax.add_patch(Circle((x, y), radius=r, facecolor="#9ecae1", edgecolor="#3182bd", lw=0.5, alpha=0.5))

    if P.shape[0]:
        ax.scatter(P[:, 0], P[:, 1], s=6, c="#08306b", zorder=3)
    ax.set_title(f"{P.shape[0]} points" + (f", d={min_distance:g}" if min_distance else ""))

    if path is not None:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out)
        logger.info("wrote plot %s", out)
    return fig


__all__ = ["plot_points"]
