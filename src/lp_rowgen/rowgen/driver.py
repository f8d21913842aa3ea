from __future__ import annotations

import logging
import time

from ..config import RunConfig
from .types import LpStatus, RowGenRunResult, SolveLp, TryAddViolated

log = logging.getLogger(__name__)


def row_generation(try_add_violated: TryAddViolated, solve_lp: SolveLp) -> LpStatus:
    """Find an extreme point of the full LP by row generation.

    Solves the current relaxation and asks the separation oracle whether
    its optimum violates a row of the complete problem. If so, the oracle
    adds that row and the relaxation is re-solved. Stops when the solve
    is not OPTIMAL (returned as-is) or the oracle finds nothing violated
    (OPTIMAL is returned).
    """
    while True:
        status = solve_lp()
        if status != LpStatus.OPTIMAL or not try_add_violated():
            return status


class RowGenerationSolver:
    """Row generation loop with an external iteration and time budget.

    ``max_iterations`` caps the number of rows added (0 = no cap). Every
    exit happens right after a solve, so the relaxation is always
    consistent with the rows added so far.
    """

    def __init__(self, solve_lp: SolveLp, oracle: TryAddViolated, cfg: RunConfig | None = None):
        self.solve_lp = solve_lp
        self.oracle = oracle
        self.cfg = cfg or RunConfig()

    def _budget_exhausted(self, rows_added: int, t0: float) -> str | None:
        max_it = int(self.cfg.max_iterations or 0)
        if max_it > 0 and rows_added >= max_it:
            return f"iteration limit ({max_it}) reached"
        limit = float(self.cfg.time_limit_s or 0.0)
        if limit > 0 and time.time() - t0 >= limit:
            return f"time limit ({limit:g}s) reached"
        return None

    def run(self) -> RowGenRunResult:
        t0 = time.time()
        every = max(1, int(self.cfg.log_every or 1))
        solves = 0
        rows_added = 0
        converged = False

        def solve_lp() -> LpStatus:
            nonlocal solves
            status = self.solve_lp()
            solves += 1
            if status != LpStatus.OPTIMAL:
                log.error("iter=%d relaxation solve failed: status=%s", solves, status)
            return status

        def try_add_violated() -> bool:
            nonlocal rows_added, converged
            # Budgets are checked only after a successful solve, so a stop never leaves a row unsolved
            reason = self._budget_exhausted(rows_added, t0)
            if reason is not None:
                log.warning("Stopping row generation: %s after %d row(s)", reason, rows_added)
                return False
            if not self.oracle():
                log.info("No violated row found after %d solve(s); relaxation optimum is feasible", solves)
                converged = True
                return False
            rows_added += 1
            if solves % every == 0:
                log.info("iter=%d rows_added=%d elapsed=%.3fs", solves, rows_added, time.time() - t0)
            return True

        status = row_generation(try_add_violated, solve_lp)
        return self._result(status, solves, rows_added, converged, t0)

    @staticmethod
    def _result(status: LpStatus, solves: int, rows: int, converged: bool, t0: float) -> RowGenRunResult:
        return RowGenRunResult(
            status=LpStatus(status),
            iterations=solves,
            rows_added=rows,
            converged=converged,
            elapsed_s=time.time() - t0,
        )


__all__ = ["row_generation", "RowGenerationSolver"]
