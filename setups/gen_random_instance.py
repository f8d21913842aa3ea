#!/usr/bin/env python3
"""
Generate a random Euclidean facility location instance.

Facilities and clients are drawn uniformly on the unit square; the
assignment cost is the Euclidean distance. Output is a YAML file with keys:
  name, opening_costs: [f_i], assignment_costs: [[c_ij]], k (optional)

Examples:
  python setups/gen_random_instance.py -F 10 -C 40 --seed 1
  python setups/gen_random_instance.py -F 20 -C 100 -k 5 -o setups/kmed_20_100.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from lp_rowgen.problem.instance import random_instance  # noqa: E402


def default_out_path(F: int, C: int, seed: int | None) -> Path:
    suffix = f"_s{seed}" if seed is not None else ""
    return Path(f"setups/random_F{F}_C{C}{suffix}.yaml")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random facility location instance")
    p.add_argument("-F", "--facilities", type=int, required=True, help="Number of facilities (>= 1)")
    p.add_argument("-C", "--clients", type=int, required=True, help="Number of clients (>= 1)")
    p.add_argument("-f", "--opening-cost", dest="opening_cost", type=float, default=1.0, help="Opening cost per facility")
    p.add_argument("-k", type=int, default=None, help="Max open facilities (k-median)")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    p.add_argument("-o", "--output", type=Path, default=None, help="Output YAML path. Default auto-named under setups/")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    if args.facilities <= 0 or args.clients <= 0:
        raise SystemExit("Need at least one facility and one client")
    if args.k is not None and args.k < 1:
        raise SystemExit("k must be >= 1")

    inst = random_instance(args.facilities, args.clients, seed=args.seed, opening_cost=args.opening_cost, k=args.k)
    out_path = args.output if args.output is not None else default_out_path(args.facilities, args.clients, args.seed)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(inst.to_dict(), f, sort_keys=False)
    print(f"Wrote instance to: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
