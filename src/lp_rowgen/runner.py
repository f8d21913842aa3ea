from __future__ import annotations

import logging
from pathlib import Path

from .config import RowGenConfig, load_config
from .logging_config import setup_logging
from .problem import PROBLEMS
from .rowgen.driver import RowGenerationSolver
from .rowgen.model import RowGenModel
from .rowgen.oracle import make_oracle
from .rowgen.types import RowGenRunResult

log = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Best-effort discovery of the default YAML config.

    Tries these, in order:
    1) CWD `configs/default.yaml`
    2) Repo root relative to this file
    Falls back to `configs/default.yaml` in CWD regardless.
    """
    cwd_path = Path("configs/default.yaml")
    if cwd_path.exists():
        return cwd_path
    # src/lp_rowgen/runner.py -> repo root
    repo_path = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"
    if repo_path.exists():
        return repo_path
    return cwd_path


def build_model(cfg: RowGenConfig) -> RowGenModel:
    impl = cfg.problem.impl.strip().lower()
    cls = PROBLEMS.get(impl)
    if cls is None:
        raise ValueError(
            f"Unknown problem impl '{cfg.problem.impl}'. Available: {', '.join(sorted(PROBLEMS))}"
        )
    return cls(dict(cfg.problem.params), solver=cfg.solver, tolerance=cfg.oracle.tolerance)


def solve(cfg: RowGenConfig, model: RowGenModel | None = None) -> tuple[RowGenRunResult, RowGenModel]:
    """Initialize the model, wire the configured oracle and run row generation."""
    model = model if model is not None else build_model(cfg)
    model.initialize()
    oracle = make_oracle(
        cfg.oracle.strategy,
        model.candidates,
        model.how_violated,
        model.add_violated,
        rng=cfg.run.seed,
    )
    log.info("Row generation with strategy=%s", cfg.oracle.strategy)
    result = RowGenerationSolver(model.solve, oracle, cfg.run).run()
    log.info(
        "status=%s iterations=%d rows_added=%d converged=%s elapsed=%.3fs",
        result.status.value, result.iterations, result.rows_added, result.converged, result.elapsed_s,
    )
    return result, model


def run(config_path: str | Path | None = None) -> RowGenRunResult:
    """Run row generation reading all options from YAML."""
    cfg_path = Path(config_path) if config_path is not None else default_config_path()
    cfg = load_config(cfg_path)
    setup_logging(cfg.run.log_level)
    result, _ = solve(cfg)
    return result


__all__ = ["default_config_path", "build_model", "solve", "run"]
