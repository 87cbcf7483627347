"""diskweave top-level API.

External users can simply ``from diskweave import sample_poisson_disk``.
"""

from .api import sample_from_config
from .geometry import BoundingBox, Point, distance, points_to_array
from .sampling import (
    random_ordinate,
    random_point,
    random_point_array,
    random_point_array_in,
    random_point_in,
    sample_poisson_disk,
    sample_poisson_disk_bbox,
)

__all__ = [
    "sample_poisson_disk",
    "sample_poisson_disk_bbox",
    "sample_from_config",
    "random_ordinate",
    "random_point",
    "random_point_array",
    "random_point_in",
    "random_point_array_in",
    "Point",
    "BoundingBox",
    "distance",
    "points_to_array",
]
