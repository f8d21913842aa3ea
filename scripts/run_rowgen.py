#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure `src/` is on sys.path for direct script execution
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from lp_rowgen.config import load_config  # noqa: E402
from lp_rowgen.logging_config import setup_logging  # noqa: E402
from lp_rowgen.runner import default_config_path, solve  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare separation strategies on one config")
    p.add_argument("--config", type=Path, default=None)
    p.add_argument("--strategies", default="max,first,random", help="Comma-separated strategies to run")
    args = p.parse_args(argv)

    cfg = load_config(args.config or default_config_path())
    setup_logging(cfg.run.log_level)
    for strategy in [s.strip() for s in args.strategies.split(",") if s.strip()]:
        cfg.oracle.strategy = strategy
        res, model = solve(cfg)
        obj = model.objective_value()
        print(
            f"strategy={strategy:<6} status={res.status.value} solves={res.iterations} "
            f"rows={res.rows_added} obj={obj if obj is None else f'{obj:.6g}'} time={res.elapsed_s:.3f}s"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
