import argparse
import sys
from pathlib import Path

from .config import load_config
from .logging_config import setup_logging
from .lp_pyomo import solver_available
from .rowgen.types import LpStatus
from .runner import build_model, default_config_path, solve


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lp-rowgen",
        description="Row generation (cutting-plane) runner for LP relaxations",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config. Default: configs/default.yaml in the CWD, else the repo copy",
    )
    sub = p.add_subparsers(dest="cmd")
    sub.required = False

    run_p = sub.add_parser("run", help="Run the row generation loop")
    run_p.add_argument(
        "--strategy",
        choices=["max", "first", "random"],
        default=None,
        help="Separation strategy; overrides oracle.strategy from the config",
    )
    run_p.add_argument(
        "--max-iterations",
        dest="max_iterations",
        type=int,
        default=None,
        help="Maximum number of rows to add (0 = no limit)",
    )
    sub.add_parser("validate", help="Validate config, problem impl and LP solver")
    sub.add_parser("info", help="Show current configuration")
    return p


def cmd_run(args) -> int:
    try:
        cfg = load_config(args.config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 2
    if getattr(args, "strategy", None):
        cfg.oracle.strategy = args.strategy
    if getattr(args, "max_iterations", None) is not None:
        cfg.run.max_iterations = int(args.max_iterations)
    setup_logging(cfg.run.log_level)

    print("Run configuration:")
    print(
        f"  run: max_iterations={cfg.run.max_iterations} time_limit_s={cfg.run.time_limit_s} "
        f"seed={cfg.run.seed}"
    )
    print(f"  oracle: strategy={cfg.oracle.strategy} tol={cfg.oracle.tolerance}")
    print(f"  problem: impl={cfg.problem.impl} params={cfg.problem.params}")
    print(f"  solver: {cfg.solver.name}")

    try:
        result, model = solve(cfg)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 2
    print(
        f"\nResult: status={result.status.value} iterations={result.iterations} "
        f"rows_added={result.rows_added} converged={result.converged} "
        f"time={result.elapsed_s:.3f}s"
    )
    fmt = getattr(model, "format_solution", None)
    if callable(fmt):
        print(fmt())
    return 0 if result.status is LpStatus.OPTIMAL else 1


def cmd_validate(args) -> int:
    try:
        cfg = load_config(args.config)
        build_model(cfg)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 2
    setup_logging(cfg.run.log_level)
    if not solver_available(cfg.solver.name):
        print(f"Config OK. LP solver '{cfg.solver.name}' is not available.")
        return 1
    print("Config OK. Problem impl and LP solver found.")
    return 0


def cmd_info(args) -> int:
    try:
        cfg = load_config(args.config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 2
    print(cfg)
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.config is None:
        args.config = default_config_path()
    if args.cmd in (None, "run"):
        return cmd_run(args)
    if args.cmd == "validate":
        return cmd_validate(args)
    if args.cmd == "info":
        return cmd_info(args)
    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
