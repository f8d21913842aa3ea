"""lp_rowgen

Row generation (cutting-plane) driver for LP relaxations of combinatorial
optimization problems. The package provides:

- The row generation loop and an iteration-bounded solver wrapper
- Separation oracles: most-violated, first-violated and random-violated
- Pyomo helpers and an example facility location / k-median relaxation
- A small CLI and YAML-based configuration

Add your own relaxation by extending `RowGenModel` in
`lp_rowgen/rowgen/model.py` and registering it in `lp_rowgen/problem/`.
"""

from .rowgen import (
    LpStatus,
    RowGenerationSolver,
    make_oracle,
    row_generation,
    first_violated_separation_oracle,
    max_violated_separation_oracle,
    random_violated_separation_oracle,
)
from .runner import run

__all__ = [
    "__version__",
    "LpStatus",
    "RowGenerationSolver",
    "make_oracle",
    "row_generation",
    "first_violated_separation_oracle",
    "max_violated_separation_oracle",
    "random_violated_separation_oracle",
    "run",
]

__version__ = "0.1.0"
