import numpy as np
import pytest

from diskweave import (
    BoundingBox,
    Point,
    points_to_array,
    random_ordinate,
    random_point,
    random_point_array,
    random_point_array_in,
    random_point_in,
)


def test_random_ordinate_swaps_bounds():
    rng = np.random.default_rng(1)
    vals = [random_ordinate(5.0, -1.0, rng) for _ in range(200)]
    assert all(-1.0 <= v < 5.0 for v in vals)
    assert random_ordinate(2.0, 2.0, rng) == 2.0


def test_random_point_inside_corners():
    rng = np.random.default_rng(2)
    for _ in range(100):
        p = random_point(Point(10.0, 0.0), Point(0.0, -4.0), rng)
        assert 0.0 <= p.x < 10.0 and -4.0 <= p.y < 0.0


def test_random_point_array_shape_and_bounds():
    box = BoundingBox.from_corners(-3.0, 2.0, 7.0, 12.0)
    pts = random_point_array(box.low, box.high, 500, rng=3)
    P = points_to_array(pts)
    assert P.shape == (500, 2)
    assert np.all(P[:, 0] >= -3.0) and np.all(P[:, 0] < 7.0)
    assert np.all(P[:, 1] >= 2.0) and np.all(P[:, 1] < 12.0)
    # roughly centred for a uniform draw
    assert abs(P[:, 0].mean() - 2.0) < 1.0


def test_random_point_array_reproducible_and_empty():
    a = random_point_array(Point(0, 0), Point(1, 1), 10, rng=4)
    b = random_point_array(Point(0, 0), Point(1, 1), 10, rng=np.random.default_rng(4))
    assert a == b
    assert random_point_array(Point(0, 0), Point(1, 1), 0, rng=4) == []
    with pytest.raises(ValueError):
        random_point_array(Point(0, 0), Point(1, 1), -1)


def test_box_forms_match_corner_forms():
    box = (4.0, -2.0, -6.0, 8.0)
    a = random_point_array_in(box, 20, rng=5)
    b = random_point_array(Point(4.0, -2.0), Point(-6.0, 8.0), 20, rng=5)
    assert a == b
    P = points_to_array(a)
    assert np.all((P[:, 0] >= -6.0) & (P[:, 0] < 4.0) & (P[:, 1] >= -2.0) & (P[:, 1] < 8.0))
    p = random_point_in(BoundingBox.from_size(2.0, 2.0), rng=1)
    assert -1.0 <= p.x < 1.0 and -1.0 <= p.y < 1.0
    with pytest.raises(ValueError):
        random_point_array_in((0.0, 1.0, 2.0), 3)
