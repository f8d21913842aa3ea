from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import ast
import operator as _op

import yaml


@dataclass(slots=True)
class RunConfig:
    # 0 = no limit; the row generation loop then stops only on convergence or solve failure
    max_iterations: int = 0
    time_limit_s: float = 0.0
    log_level: str = "INFO"
    seed: int = 42
    # Log an iteration line every N iters (1 = every iter)
    log_every: int = 10


@dataclass(slots=True)
class OracleConfig:
    strategy: str = "max"
    tolerance: float = 1e-6


@dataclass(slots=True)
class SolverConfig:
    name: str = "glpk"
    executable: str | None = None
    options: dict[str, Any] = field(default_factory=dict)
    tee: bool = False


@dataclass(slots=True)
class ComponentConfig:
    impl: str = "facility_location"
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class RowGenConfig:
    run: RunConfig = field(default_factory=RunConfig)
    oracle: OracleConfig = field(default_factory=OracleConfig)
    problem: ComponentConfig = field(default_factory=ComponentConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)


def _as_dict(m: Mapping[str, Any] | None) -> dict[str, Any]:
    return dict(m) if m else {}


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _eval_expr(expr: str, names: Mapping[str, Any]) -> float | int:
    """Safely evaluate a simple arithmetic expression with provided names.

    Allowed:
      - literals: ints and floats
      - names: variables present in 'names' (must be numeric)
      - operators: +, -, *, /, //, %, **
      - parentheses and unary +/-

    Disallowed: function calls, attribute access, subscripting, comprehensions, etc.
    """
    node = ast.parse(expr, mode="eval")

    bin_ops = {
        ast.Add: _op.add,
        ast.Sub: _op.sub,
        ast.Mult: _op.mul,
        ast.Div: _op.truediv,
        ast.FloorDiv: _op.floordiv,
        ast.Mod: _op.mod,
        ast.Pow: _op.pow,
    }
    unary_ops = {ast.UAdd: _op.pos, ast.USub: _op.neg}

    def _eval(n: ast.AST) -> float | int:
        if isinstance(n, ast.Expression):
            return _eval(n.body)
        if isinstance(n, ast.Constant):
            if _is_number(n.value):
                return n.value
            raise ValueError("non-numeric constant in expression")
        if isinstance(n, ast.Name):
            if n.id not in names:
                raise NameError(f"unknown name '{n.id}' in expression")
            v = names[n.id]
            if _is_number(v):
                return v
            if isinstance(v, str) and v.strip():
                try:
                    return float(v)
                except ValueError as exc:
                    raise ValueError(f"name '{n.id}' is not numeric: {v}") from exc
            raise ValueError(f"name '{n.id}' is not numeric: {v}")
        if isinstance(n, ast.BinOp):
            if type(n.op) not in bin_ops:
                raise ValueError("operator not allowed in expression")
            return bin_ops[type(n.op)](_eval(n.left), _eval(n.right))
        if isinstance(n, ast.UnaryOp):
            if type(n.op) not in unary_ops:
                raise ValueError("unary operator not allowed in expression")
            return unary_ops[type(n.op)](_eval(n.operand))
        raise ValueError("unsupported syntax in expression")

    return _eval(node)


def resolve_param_expressions(params: dict[str, Any]) -> dict[str, Any]:
    """Resolve arithmetic string expressions within a parameter dict.

    Only attempts evaluation for string values that look like math expressions
    (contain one of '+-*/()'). Leaves other values untouched. Variables can
    reference other keys in the same dict.
    """
    if not params:
        return params
    names = dict(params)
    out: dict[str, Any] = dict(params)
    for k, v in params.items():
        if isinstance(v, str):
            s = v.strip()
            if any(ch in s for ch in "+-*/()"):
                try:
                    out[k] = _eval_expr(s, names)
                except (ValueError, NameError, SyntaxError, ZeroDivisionError):
                    # Leave as-is (e.g. a file path); downstream code surfaces a clearer error
                    out[k] = v
    return out


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML document must be a mapping")
        return data


def load_config(path: str | Path | None) -> RowGenConfig:
    """Load configuration from a YAML file or return defaults.

    The schema is minimal and forgiving; unknown keys are ignored. Only YAML is supported.
    """
    if path is None:
        return RowGenConfig()
    p = Path(path)
    if not p.exists():
        # Return defaults but allow the CLI to keep going
        return RowGenConfig()

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError(f"Unsupported config format '{p.suffix}'. Please provide a YAML file.")
    raw = _load_yaml(p)
    run = _as_dict(raw.get("run"))
    oracle = _as_dict(raw.get("oracle"))
    problem = _as_dict(raw.get("problem"))
    solver = _as_dict(raw.get("solver"))

    run_cfg = RunConfig(
        max_iterations=int(run.get("max_iterations", 0) or 0),
        time_limit_s=float(run.get("time_limit_s", 0.0) or 0.0),
        log_level=str(run.get("log_level", "INFO")),
        seed=int(run.get("seed", 42)),
        log_every=int(run.get("log_every", 10) or 10),
    )
    oracle_cfg = OracleConfig(
        strategy=str(oracle.get("strategy", "max")),
        tolerance=float(oracle.get("tolerance", 1e-6)),
    )
    problem_cfg = ComponentConfig(
        impl=str(problem.get("impl", "facility_location")),
        # Evaluate arithmetic expressions within problem params (e.g., "n_clients // 2")
        params=resolve_param_expressions(_as_dict(problem.get("params"))),
    )
    executable = solver.get("executable")
    solver_cfg = SolverConfig(
        name=str(solver.get("name", "glpk")),
        executable=str(executable) if executable else None,
        options=_as_dict(solver.get("options")),
        tee=bool(solver.get("tee", False)),
    )
    return RowGenConfig(run=run_cfg, oracle=oracle_cfg, problem=problem_cfg, solver=solver_cfg)


__all__ = [
    "RunConfig",
    "OracleConfig",
    "SolverConfig",
    "ComponentConfig",
    "RowGenConfig",
    "load_config",
    "resolve_param_expressions",
]
