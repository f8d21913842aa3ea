from __future__ import annotations

import logging
from typing import Any

import pyomo.environ as pyo

from .rowgen.types import LpStatus

log = logging.getLogger(__name__)


def map_termination(term: Any) -> LpStatus:
    if term == pyo.TerminationCondition.optimal:
        return LpStatus.OPTIMAL
    if term in (
        pyo.TerminationCondition.infeasible,
        pyo.TerminationCondition.infeasibleOrUnbounded,
    ):
        return LpStatus.INFEASIBLE
    if term == pyo.TerminationCondition.unbounded:
        return LpStatus.UNBOUNDED
    return LpStatus.UNKNOWN


def make_solver(name: str = "glpk", executable: str | None = None, options: dict | None = None):
    solver = pyo.SolverFactory(name)
    if executable:
        solver.set_executable(executable)
    if options:
        for k, v in options.items():
            solver.options[k] = v
    return solver


def solver_available(name: str = "glpk") -> bool:
    try:
        return bool(pyo.SolverFactory(name).available(exception_flag=False))
    except Exception:  # noqa: BLE001 - plugin lookup failures mean "not available"
        return False


def solve_lp(m: pyo.ConcreteModel, solver, tee: bool = False) -> LpStatus:
    """Solve ``m`` and load the solution only when it is optimal."""
    res = solver.solve(m, tee=tee, load_solutions=False)
    term = getattr(res.solver, "termination_condition", None)
    status = map_termination(term)
    if status is LpStatus.OPTIMAL:
        m.solutions.load_from(res)
    else:
        log.debug("solver termination=%s mapped to %s", term, status)
    return status


__all__ = ["map_termination", "make_solver", "solver_available", "solve_lp"]
