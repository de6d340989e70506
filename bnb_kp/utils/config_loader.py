# bnb_kp/utils/config_loader.py
import yaml
import os
from types import SimpleNamespace
from typing import Dict, Any

# --- Import solver CLASSes here ---
from bnb_kp.solvers.classic.bnb_solver import BranchAndBoundSolver
from bnb_kp.solvers.classic.dp_solver import DPSolver2D, DPSolver1D
from bnb_kp.solvers.classic.gurobi_solver import GurobiSolver
from bnb_kp.solvers.classic.heuristic_solvers import GreedySolver

# The registry maps a name to a Solver Class.
ALGORITHM_REGISTRY = {
    "Branch and Bound": BranchAndBoundSolver,
    "2D DP": DPSolver2D,
    "1D DP (Optimized)": DPSolver1D,
    "Greedy": GreedySolver,
    "Gurobi": GurobiSolver,
}

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


def _post_process_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Processes the raw config dict to add dynamic values and absolute paths.
    This function contains all logic that cannot be represented in a static YAML file.
    """
    # --- 1. Build absolute paths for all entries in the 'paths' section ---
    for key, rel_path in config_dict['paths'].items():
        config_dict['paths'][key] = os.path.join(PROJECT_ROOT, rel_path)
    config_dict['paths']['root'] = PROJECT_ROOT

    # --- 2. Normalise the generation range ---
    data_gen_cfg = config_dict['data_gen']
    n_range = data_gen_cfg['n_range']
    if len(n_range) != 3:
        raise ValueError(f"data_gen.n_range must be [start_n, end_n, step], got {n_range}.")
    data_gen_cfg['n_range'] = tuple(int(n) for n in n_range)

    # --- 3. Map Algorithm Names to Solver Classes ---
    classic_cfg = config_dict['classic_solvers']
    try:
        classic_cfg['algorithms_to_test'] = {
            name: ALGORITHM_REGISTRY[name] for name in classic_cfg['algorithms_to_test']
        }
        classic_cfg['baseline_algorithm'] = ALGORITHM_REGISTRY[classic_cfg['baseline_algorithm']]
    except KeyError as e:
        raise ValueError(f"Algorithm '{e.args[0]}' is defined in config.yaml but not found in ALGORITHM_REGISTRY in config_loader.py.") from e

    return config_dict


def load_config(config_path: str = 'configs/config.yaml') -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.
    A relative config_path is resolved against the project root.
    """
    full_config_path = os.path.join(PROJECT_ROOT, config_path)

    try:
        with open(full_config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Configuration file not found at: {full_config_path}. "
            "The scripts read configs/ from the source tree; install with 'pip install -e .'."
        )

    processed_config = _post_process_config(config_dict)

    # Convert nested dicts to SimpleNamespace for easy attribute access.
    # The solver mapping stays a dict so it can be iterated by name.
    def dict_to_namespace(d: Dict) -> SimpleNamespace:
        for k, v in d.items():
            if isinstance(v, dict) and k != 'algorithms_to_test':
                d[k] = dict_to_namespace(v)
        return SimpleNamespace(**d)

    return dict_to_namespace(processed_config)

# --- A single, global config instance for the scripts ---
# configs/config.yaml is not packaged, so this import only works from a source
# checkout or an editable install (pip install -e .).
# Other modules can simply use: from bnb_kp.utils.config_loader import cfg
cfg = load_config()
