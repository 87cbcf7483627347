from __future__ import annotations

from typing import List

from .config.schema import Profile, SamplingConfig
from .geometry import Point
from .random import RngLike
from .sampling.poisson import sample_poisson_disk, sample_poisson_disk_bbox
from .utils.logging import logger


def sample_from_config(cfg: Profile | SamplingConfig, rng: RngLike = None) -> List[Point]:
    """Run the Poisson-disc sampler described by ``cfg``.

    ``rng`` wins over ``cfg.seed`` when both are given.  A ``box`` region goes
    through :func:`sample_poisson_disk_bbox`, a ``width``/``height`` region
    through :func:`sample_poisson_disk`.
    """
    sc = cfg.sampling if isinstance(cfg, Profile) else cfg
    if rng is None:
        rng = sc.seed
    region = sc.region
    if region.is_box:
        pts = sample_poisson_disk_bbox(region.bounding_box(), sc.min_distance, attempts=sc.attempts, rng=rng)
    else:
        pts = sample_poisson_disk(region.width, region.height, sc.min_distance, attempts=sc.attempts, rng=rng)
    logger.info("sampled %d points (min_distance=%g, attempts=%d)", len(pts), sc.min_distance, sc.attempts)
    return pts


__all__ = ["sample_from_config"]
