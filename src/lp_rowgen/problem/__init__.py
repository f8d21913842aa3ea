"""Example problems solved by row generation.

Each entry extends `RowGenModel` in `lp_rowgen/rowgen/model.py`.
"""

from .facility_location import FacilityLocationLP, KMedianLP
from .instance import FacilityLocationInstance, instance_from_params, load_instance, random_instance

PROBLEMS = {
    "facility_location": FacilityLocationLP,
    "k_median": KMedianLP,
}

__all__ = [
    "PROBLEMS",
    "FacilityLocationLP",
    "KMedianLP",
    "FacilityLocationInstance",
    "instance_from_params",
    "load_instance",
    "random_instance",
]
