"""Minimal example: Poisson-disc sample a rectangle and save a plot."""

import numpy as np

from diskweave import BoundingBox, sample_poisson_disk
from diskweave.logging import init_logging
from diskweave.viz import plot_points


def main() -> None:
    init_logging("debug")
    rng = np.random.default_rng(42)
    pts = sample_poisson_disk(200.0, 120.0, 8.0, attempts=30, rng=rng)
    print(f"[minimal_sample] {len(pts)} points, first {pts[0]}")
    plot_points(
        pts,
        region=BoundingBox.from_corners(0.0, 0.0, 200.0, 120.0),
        min_distance=8.0,
        show_disks=True,
        path="out/minimal_sample.png",
    )


if __name__ == "__main__":
    main()
