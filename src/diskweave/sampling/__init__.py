"""Point sampling routines."""
from .poisson import sample_poisson_disk, sample_poisson_disk_bbox
from .uniform import random_ordinate, random_point, random_point_array, random_point_array_in, random_point_in

__all__ = [
    "sample_poisson_disk",
    "sample_poisson_disk_bbox",
    "random_ordinate",
    "random_point",
    "random_point_array",
    "random_point_in",
    "random_point_array_in",
]
