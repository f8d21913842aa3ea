import pytest

from lp_rowgen.cli import main
from lp_rowgen.lp_pyomo import solver_available


def write_cfg(tmp_path, body):
    p = tmp_path / "cfg.yaml"
    p.write_text(body, encoding="utf-8")
    return p


def test_info(tmp_path, capsys):
    p = write_cfg(tmp_path, "oracle:\n  strategy: first\n")
    assert main(["--config", str(p), "info"]) == 0
    assert "strategy='first'" in capsys.readouterr().out


def test_info_bad_config(tmp_path):
    p = write_cfg(tmp_path, "- not a mapping\n")
    assert main(["--config", str(p), "info"]) == 2


def test_validate_unknown_impl(tmp_path, capsys):
    p = write_cfg(tmp_path, "problem:\n  impl: nope\n")
    assert main(["--config", str(p), "validate"]) == 2
    assert "Unknown problem impl" in capsys.readouterr().out


def test_run_unknown_strategy(tmp_path, capsys):
    p = write_cfg(
        tmp_path,
        "oracle:\n  strategy: bogus\nproblem:\n  params: {n_facilities: 2, n_clients: 2, seed: 1}\n",
    )
    assert main(["--config", str(p), "run"]) == 2
    assert "Unknown separation strategy" in capsys.readouterr().out


@pytest.mark.skipif(not solver_available("glpk"), reason="glpk not available")
def test_run_small_instance(tmp_path, capsys):
    p = write_cfg(
        tmp_path,
        "run:\n  log_level: WARNING\nproblem:\n  params: {n_facilities: 3, n_clients: 5, seed: 2}\n",
    )
    assert main(["--config", str(p), "run", "--strategy", "random", "--max-iterations", "0"]) == 0
    out = capsys.readouterr().out
    assert "status=OPTIMAL" in out
    assert "converged=True" in out


def test_default_config_comes_from_cwd(tmp_path, monkeypatch, capsys):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("oracle:\n  strategy: random\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["info"]) == 0
    assert "strategy='random'" in capsys.readouterr().out
