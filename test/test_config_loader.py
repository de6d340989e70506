# test/test_config_loader.py
import os
from types import SimpleNamespace

import pytest

from bnb_kp.solvers.classic.bnb_solver import BranchAndBoundSolver
from bnb_kp.solvers.classic.dp_solver import DPSolver1D
from bnb_kp.utils.config_loader import ALGORITHM_REGISTRY, cfg, load_config
from bnb_kp.utils.run_utils import create_run_name

CONFIG_TEMPLATE = """
paths:
  data: data
  data_testing: data/testing
  logs: logs
  artifacts: artifacts
data_gen:
  correlation_type: subset_sum
  max_weight: 10
  max_value: 10
  capacity_ratio: 0.5
  n_range: [5, 15, 5]
  instances_per_n: 2
  seed: 1
classic_solvers:
  algorithms_to_test: [{algorithms}]
  baseline_algorithm: 1D DP (Optimized)
  bnb:
    trace: true
"""


def write_config(tmp_path, algorithms):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_TEMPLATE.format(algorithms=algorithms))
    return str(path)


def test_default_config_is_loaded():
    assert os.path.isabs(cfg.paths.data_testing)
    assert cfg.paths.root == os.path.dirname(os.path.dirname(cfg.paths.data_testing))
    assert len(cfg.data_gen.n_range) == 3
    assert cfg.classic_solvers.algorithms_to_test["Branch and Bound"] is BranchAndBoundSolver
    assert cfg.classic_solvers.baseline_algorithm is DPSolver1D
    assert cfg.classic_solvers.bnb.trace is False


def test_custom_config(tmp_path):
    config = load_config(write_config(tmp_path, "Branch and Bound, Greedy"))
    assert list(config.classic_solvers.algorithms_to_test) == ["Branch and Bound", "Greedy"]
    assert config.data_gen.n_range == (5, 15, 5)
    assert config.classic_solvers.bnb.trace is True


def test_unknown_algorithm_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="Simulated Annealing"):
        load_config(write_config(tmp_path, "Branch and Bound, Simulated Annealing"))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="pip install -e"):
        load_config(str(tmp_path / "missing.yaml"))


def test_registry_names_match_solver_names():
    for name, solver_class in ALGORITHM_REGISTRY.items():
        assert solver_class().name == name


def test_run_name():
    config = SimpleNamespace(data_gen=SimpleNamespace(n_range=(10, 100, 10), correlation_type="uncorrelated"))
    assert create_run_name(config).endswith("_n10-100_uncorrelated")
    assert "_n" not in create_run_name(SimpleNamespace())
