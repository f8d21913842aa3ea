from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from .types import LpStatus, Measure


class RowGenModel(ABC):
    """Abstract interface for an LP relaxation solved by row generation.

    Implementations own the LP model and expose the four operations the
    driver and the separation oracles need: re-solve, list candidate rows,
    measure how violated a candidate is, and add it to the model.
    """

    def __init__(self, params: dict[str, Any] | None = None):
        self.params = params or {}

    def initialize(self) -> None:
        """Build or reset the initial relaxation. Called once before iteration."""

    @abstractmethod
    def solve(self) -> LpStatus:
        """(Re)optimize the current relaxation."""

    @abstractmethod
    def candidates(self) -> Sequence[Any]:
        """Rows of the full problem not yet in the relaxation."""

    @abstractmethod
    def how_violated(self, candidate: Any) -> Measure:
        """Violation of ``candidate`` at the last optimum, or None if satisfied."""

    @abstractmethod
    def add_violated(self, candidate: Any) -> None:
        """Add the row for ``candidate`` to the relaxation."""

    def objective_value(self) -> float | None:  # optional, can be overridden
        return None

    def rows_count(self) -> int:
        return 0


__all__ = ["RowGenModel"]
