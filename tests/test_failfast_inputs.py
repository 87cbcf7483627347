import math

import numpy as np
import pytest

from diskweave import BoundingBox, sample_poisson_disk, sample_poisson_disk_bbox


@pytest.mark.parametrize(
    "w,h,d",
    [(0.0, 10.0, 1.0), (10.0, -1.0, 1.0), (10.0, 10.0, 0.0), (10.0, 10.0, -2.0), (10.0, math.inf, 1.0), (10.0, 10.0, math.nan)],
)
def test_bad_geometry_raises(w, h, d):
    with pytest.raises(ValueError):
        sample_poisson_disk(w, h, d, rng=0)


@pytest.mark.parametrize("attempts", [0, -3, 2.5, True, "20"])
def test_bad_attempts_raises(attempts):
    with pytest.raises(ValueError):
        sample_poisson_disk(10.0, 10.0, 1.0, attempts=attempts, rng=0)


def test_bad_rng_type():
    with pytest.raises(TypeError):
        sample_poisson_disk(10.0, 10.0, 1.0, rng="seed")


def test_degenerate_bbox_raises():
    with pytest.raises(ValueError):
        sample_poisson_disk_bbox(BoundingBox.from_corners(0.0, 0.0, 0.0, 5.0), 1.0, rng=0)


def test_numpy_int_seed_accepted():
    assert sample_poisson_disk(10.0, 10.0, 2.0, rng=np.int64(3)) == sample_poisson_disk(10.0, 10.0, 2.0, rng=3)
