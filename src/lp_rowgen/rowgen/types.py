from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional


class LpStatus(str, Enum):
    OPTIMAL = "OPTIMAL"
    INFEASIBLE = "INFEASIBLE"
    UNBOUNDED = "UNBOUNDED"
    UNKNOWN = "UNKNOWN"


# None means "not violated"; any other value is an ordered violation measure
Measure = Optional[Any]

SolveLp = Callable[[], LpStatus]
TryAddViolated = Callable[[], bool]
GetCandidates = Callable[[], Iterable[Any]]
HowViolated = Callable[[Any], Measure]
AddViolated = Callable[[Any], None]
CompareHow = Callable[[Any, Any], bool]


@dataclass(slots=True)
class RowGenRunResult:
    status: LpStatus
    iterations: int
    rows_added: int
    converged: bool
    elapsed_s: float = 0.0


__all__ = [
    "LpStatus",
    "Measure",
    "SolveLp",
    "TryAddViolated",
    "GetCandidates",
    "HowViolated",
    "AddViolated",
    "CompareHow",
    "RowGenRunResult",
]
