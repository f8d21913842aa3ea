from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional

import pyomo.environ as pyo

from ..config import SolverConfig
from ..lp_pyomo import make_solver, solve_lp
from ..rowgen.model import RowGenModel
from ..rowgen.types import LpStatus
from .instance import FacilityLocationInstance, instance_from_params

log = logging.getLogger(__name__)


class FacilityLocationLP(RowGenModel):
    """LP relaxation of uncapacitated facility location.

        min  sum_i f[i] y[i] + sum_ij c[i][j] x[i,j]
        s.t. sum_i x[i,j] = 1            for all clients j
             sum_i y[i] <= k             (only when k is given)
             x[i,j] <= y[i]              generated lazily
             0 <= x, y <= 1

    The linking rows x[i,j] <= y[i] are the candidates; a candidate is
    violated by x[i,j] - y[i] when that exceeds the tolerance.
    """

    def __init__(
        self,
        params: dict[str, Any] | None = None,
        solver: SolverConfig | None = None,
        tolerance: float = 1e-6,
        instance: FacilityLocationInstance | None = None,
    ):
        super().__init__(params)
        self.solver_cfg = solver or SolverConfig()
        self.tolerance = float(tolerance)
        self.instance = instance
        self.m: pyo.ConcreteModel | None = None
        self._linked: set[tuple[int, int]] = set()
        self._status: LpStatus | None = None

    def initialize(self) -> None:
        if self.instance is None:
            self.instance = instance_from_params(self.params)
        inst = self.instance
        inst.validate()

        m = pyo.ConcreteModel(name=inst.name)
        m.F = pyo.RangeSet(0, inst.n_facilities - 1)
        m.C = pyo.RangeSet(0, inst.n_clients - 1)
        m.y = pyo.Var(m.F, bounds=(0, 1))
        m.x = pyo.Var(m.F, m.C, bounds=(0, 1))

        m.obj = pyo.Objective(
            expr=sum(inst.opening_costs[i] * m.y[i] for i in m.F)
            + sum(inst.assignment_costs[i][j] * m.x[i, j] for i in m.F for j in m.C),
            sense=pyo.minimize,
        )
        m.assign = pyo.Constraint(m.C, rule=lambda m, j: sum(m.x[i, j] for i in m.F) == 1)
        if inst.k is not None:
            m.card = pyo.Constraint(expr=sum(m.y[i] for i in m.F) <= inst.k)
        # Linking rows x[i,j] <= y[i] added by row generation
        m.linking = pyo.ConstraintList()

        self.m = m
        self._linked = set()
        self._status = None
        self._solver = make_solver(
            self.solver_cfg.name, self.solver_cfg.executable, self.solver_cfg.options
        )
        log.info(
            "Built %s: facilities=%d clients=%d k=%s",
            inst.name, inst.n_facilities, inst.n_clients, inst.k,
        )

    def solve(self) -> LpStatus:
        assert self.m is not None, "Call initialize() before solve()"
        self._status = solve_lp(self.m, self._solver, tee=self.solver_cfg.tee)
        return self._status

    def candidates(self) -> list[tuple[int, int]]:
        assert self.m is not None, "Call initialize() before candidates()"
        return [(i, j) for i in self.m.F for j in self.m.C if (i, j) not in self._linked]

    def how_violated(self, candidate: tuple[int, int]) -> Optional[float]:
        assert self.m is not None
        i, j = candidate
        viol = float(self.m.x[i, j].value or 0.0) - float(self.m.y[i].value or 0.0)
        return viol if viol > self.tolerance else None

    def add_violated(self, candidate: tuple[int, int]) -> None:
        assert self.m is not None
        i, j = candidate
        self.m.linking.add(self.m.x[i, j] <= self.m.y[i])
        self._linked.add((i, j))

    def objective_value(self) -> float | None:
        if self.m is None or self._status is not LpStatus.OPTIMAL:
            return None
        return float(pyo.value(self.m.obj))

    def rows_count(self) -> int:
        return len(self._linked)

    def opened(self, tol: float = 1e-6) -> dict[int, float]:
        """Fractional opening levels y[i] above ``tol`` at the last optimum."""
        assert self.m is not None
        return {i: float(self.m.y[i].value or 0.0) for i in self.m.F if float(self.m.y[i].value or 0.0) > tol}

    def format_solution(self) -> str:
        if self.m is None or self._status is None:
            return "(not solved)"
        lines = [f"status={self._status.value} rows={self.rows_count()}"]
        obj = self.objective_value()
        if obj is not None:
            lines.append(f"objective={obj:.6g}")
            for i, v in self.opened().items():
                lines.append(f"  y[{i}] = {v:.4f}")
        return "\n".join(lines)


class KMedianLP(FacilityLocationLP):
    """k-median: no opening costs, at most k facilities open."""

    def initialize(self) -> None:
        if self.instance is None:
            self.instance = instance_from_params(self.params)
        if self.instance.k is None:
            raise ValueError("k-median requires 'k' in the problem params or instance")
        self.instance = dataclasses.replace(
            self.instance, opening_costs=[0.0] * self.instance.n_facilities
        )
        super().initialize()


__all__ = ["FacilityLocationLP", "KMedianLP"]
