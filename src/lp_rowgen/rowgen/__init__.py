from .types import LpStatus, RowGenRunResult
from .rotate import RotatedView, RandomRotate, rotate, make_random_rotate
from .oracle import (
    SeparationOracle,
    MaxViolatedOracle,
    FirstViolatedOracle,
    is_violated,
    make_oracle,
    max_violated_separation_oracle,
    first_violated_separation_oracle,
    random_violated_separation_oracle,
)
from .driver import row_generation, RowGenerationSolver
from .model import RowGenModel

__all__ = [
    "LpStatus",
    "RowGenRunResult",
    "RotatedView",
    "RandomRotate",
    "rotate",
    "make_random_rotate",
    "SeparationOracle",
    "MaxViolatedOracle",
    "FirstViolatedOracle",
    "is_violated",
    "make_oracle",
    "max_violated_separation_oracle",
    "first_violated_separation_oracle",
    "random_violated_separation_oracle",
    "row_generation",
    "RowGenerationSolver",
    "RowGenModel",
]
