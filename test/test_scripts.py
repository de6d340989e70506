# test/test_scripts.py
import glob
import logging
import os
import sys

import pandas as pd
import pytest

import Scripts.evaluate_solvers as ev
import Scripts.generate_data as gd
from bnb_kp.utils.config_loader import cfg
from bnb_kp.utils.generator import load_instance_from_file, save_instance_to_file
from bnb_kp.utils.logger import setup_logger

PARAMS = {
    'correlation': 'uncorrelated',
    'max_weight': 20,
    'max_value': 20,
    'capacity_ratio': 0.5,
}


@pytest.fixture
def dataset_dir(tmp_path):
    data_dir = tmp_path / "testing"
    gd.create_dataset("Unit-Set", str(data_dir), PARAMS, n_range=(5, 10, 5), num_instances=1, seed=3)
    return data_dir


# --- generate ---

def test_create_dataset_writes_one_file_per_instance(tmp_path):
    written = gd.create_dataset("Unit-Set", str(tmp_path), PARAMS, n_range=(4, 8, 2), num_instances=2, seed=1)
    assert len(written) == 6
    assert os.path.basename(written[0]) == "instance_n4_uncorrelated_1.csv"
    assert all(os.path.exists(path) for path in written)

    weights, values, _ = load_instance_from_file(written[-1])
    assert len(weights) == len(values) == 8


def test_create_dataset_is_reproducible(tmp_path):
    first = gd.create_dataset("A", str(tmp_path / "a"), PARAMS, n_fixed=12, num_instances=2, seed=9)
    second = gd.create_dataset("B", str(tmp_path / "b"), PARAMS, n_fixed=12, num_instances=2, seed=9)
    for left, right in zip(first, second):
        assert load_instance_from_file(left) == load_instance_from_file(right)


def test_create_dataset_needs_a_size(tmp_path):
    with pytest.raises(ValueError):
        gd.create_dataset("Unit-Set", str(tmp_path), PARAMS)


def test_generate_main(tmp_path, monkeypatch):
    monkeypatch.setattr(cfg.paths, "logs", str(tmp_path / "logs"))
    monkeypatch.setattr(sys, "argv", ["generate", "--n-fixed", "7", "--num-instances", "2",
                                      "--output-dir", str(tmp_path / "out")])
    gd.main()
    assert sorted(os.listdir(tmp_path / "out")) == [
        f"instance_n7_{cfg.data_gen.correlation_type}_1.csv",
        f"instance_n7_{cfg.data_gen.correlation_type}_2.csv",
    ]


# --- evaluate ---

def test_instance_size_from_name_or_contents(tmp_path):
    assert ev.instance_size("instance_n50_uncorrelated_3.csv") == 50

    path = str(tmp_path / "mydata.csv")
    save_instance_to_file([(6, 3), (5, 2), (4, 4)], 6, path)
    assert ev.instance_size(path) == 3


def test_collect_instances_skips_unreadable_files(dataset_dir, caplog):
    (dataset_dir / "notes.csv").write_text("this is not an instance\n")
    (dataset_dir / "README.txt").write_text("ignored\n")

    collected = ev.collect_instances(str(dataset_dir), logging.getLogger("test"))

    assert [n for n, _ in collected] == [5, 10]
    assert any("notes.csv" in message for message in caplog.messages)


def test_evaluate_main_end_to_end(tmp_path, dataset_dir, monkeypatch):
    save_instance_to_file([(6, 3), (5, 2), (4, 4)], 6, str(dataset_dir / "mydata.csv"))
    artifacts = tmp_path / "artifacts"
    monkeypatch.setattr(cfg.paths, "artifacts", str(artifacts))
    monkeypatch.setattr(sys, "argv", ["evaluate", "--data-dir", str(dataset_dir)])

    ev.main()

    run_dirs = glob.glob(os.path.join(str(artifacts), "runs", "evaluation", "*"))
    assert len(run_dirs) == 1
    run_dir = run_dirs[0]
    for name in ("evaluation_full_summary.csv", "evaluation_gaps_vs_n.png", "evaluation_times_vs_n.png"):
        assert os.path.exists(os.path.join(run_dir, name))

    raw = pd.read_csv(os.path.join(run_dir, "evaluation_raw_results.csv"))
    assert len(raw) == 3 * len(cfg.classic_solvers.algorithms_to_test)
    assert raw["feasible"].all()
    assert set(raw.loc[raw["instance"] == "mydata.csv", "n"]) == {3}

    bnb = raw[raw["solver"] == "Branch and Bound"].set_index("instance")["value"]
    dp = raw[raw["solver"] == "1D DP (Optimized)"].set_index("instance")["value"]
    assert bnb.sort_index().tolist() == pytest.approx(dp.sort_index().tolist())


def test_evaluate_main_exits_without_data(tmp_path, monkeypatch):
    monkeypatch.setattr(cfg.paths, "artifacts", str(tmp_path / "artifacts"))
    monkeypatch.setattr(sys, "argv", ["evaluate", "--data-dir", str(tmp_path / "missing")])
    with pytest.raises(SystemExit):
        ev.main()


# --- logging ---

def test_setup_logger_configures_the_root_logger_once(tmp_path, monkeypatch):
    root = logging.getLogger()
    original_level = root.level
    monkeypatch.setattr(root, "handlers", [])
    try:
        log_path = setup_logger("unit", str(tmp_path))
        assert log_path is not None
        assert os.path.dirname(log_path) == str(tmp_path)
        assert {type(h) for h in root.handlers} == {logging.FileHandler, logging.StreamHandler}

        logging.getLogger("bnb_kp.test").debug("debug line")
        with open(log_path) as f:
            content = f.read()
        assert "Logger initialized" in content
        assert "debug line" in content

        assert setup_logger("unit", str(tmp_path)) is None
        assert len(root.handlers) == 2
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(original_level)
