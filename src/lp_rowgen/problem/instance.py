from __future__ import annotations

import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

import yaml


@dataclass(slots=True)
class FacilityLocationInstance:
    """Facility location data: opening costs f[i] and assignment costs c[i][j]."""

    opening_costs: List[float]
    assignment_costs: List[List[float]]
    k: int | None = None
    name: str = "instance"

    @property
    def n_facilities(self) -> int:
        return len(self.opening_costs)

    @property
    def n_clients(self) -> int:
        return len(self.assignment_costs[0]) if self.assignment_costs else 0

    def validate(self) -> None:
        if self.n_facilities == 0:
            raise ValueError("instance has no facilities")
        if len(self.assignment_costs) != self.n_facilities:
            raise ValueError(
                f"assignment_costs has {len(self.assignment_costs)} row(s), expected {self.n_facilities}"
            )
        widths = {len(row) for row in self.assignment_costs}
        if len(widths) != 1:
            raise ValueError("assignment_costs rows must all have the same length")
        if self.k is not None and self.k < 1:
            raise ValueError("k must be >= 1")

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "name": self.name,
            "opening_costs": list(self.opening_costs),
            "assignment_costs": [list(r) for r in self.assignment_costs],
        }
        if self.k is not None:
            d["k"] = self.k
        return d


def random_instance(
    n_facilities: int,
    n_clients: int,
    seed: int | None = None,
    opening_cost: float = 1.0,
    k: int | None = None,
) -> FacilityLocationInstance:
    """Euclidean instance with facilities and clients uniform on the unit square."""
    rng = random.Random(seed)
    fac = [(rng.random(), rng.random()) for _ in range(n_facilities)]
    cli = [(rng.random(), rng.random()) for _ in range(n_clients)]
    costs = [[math.dist(p, q) for q in cli] for p in fac]
    return FacilityLocationInstance(
        opening_costs=[float(opening_cost)] * n_facilities,
        assignment_costs=costs,
        k=k,
        name=f"random_F{n_facilities}_C{n_clients}" + (f"_s{seed}" if seed is not None else ""),
    )


def _from_mapping(raw: dict[str, Any], name: str) -> FacilityLocationInstance:
    k = raw.get("k")
    inst = FacilityLocationInstance(
        opening_costs=[float(v) for v in raw.get("opening_costs") or []],
        assignment_costs=[[float(v) for v in row] for row in raw.get("assignment_costs") or []],
        k=int(k) if k is not None else None,
        name=str(raw.get("name", name)),
    )
    if not inst.opening_costs and inst.assignment_costs:
        inst.opening_costs = [0.0] * len(inst.assignment_costs)
    inst.validate()
    return inst


def load_instance(path: str | Path) -> FacilityLocationInstance:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Instance file {p} must contain a mapping")
    return _from_mapping(raw, p.stem)


def instance_from_params(params: dict[str, Any]) -> FacilityLocationInstance:
    """Instance from an ``instance_file``, inline costs, or random generation."""
    if params.get("instance_file"):
        inst = load_instance(params["instance_file"])
        if params.get("k") is not None:
            inst.k = int(params["k"])
        inst.validate()
        return inst
    if params.get("assignment_costs"):
        return _from_mapping(params, "inline")
    k = params.get("k")
    inst = random_instance(
        n_facilities=int(params.get("n_facilities", 5)),
        n_clients=int(params.get("n_clients", 10)),
        seed=params.get("seed"),
        opening_cost=float(params.get("opening_cost", 1.0)),
        k=int(k) if k is not None else None,
    )
    inst.validate()
    return inst


__all__ = ["FacilityLocationInstance", "random_instance", "load_instance", "instance_from_params"]
