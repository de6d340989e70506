# evaluate_solvers.py
import logging
import os
import re
import sys
import argparse
import pandas as pd
from tqdm import tqdm

from bnb_kp.errors import InstanceFormatError
from bnb_kp.utils.config_loader import cfg
from bnb_kp.utils.logger import setup_logger
from bnb_kp.utils.run_utils import create_run_name
import bnb_kp.utils.generator as gen
from bnb_kp.evaluation.plotting import plot_evaluation_errors, plot_evaluation_times
from bnb_kp.evaluation.reporting import save_results_to_csv, solvers_with_gaps, summarize_results

_SIZE_IN_NAME = re.compile(r'_n(\d+)(?:_|\.csv$)')

def instance_size(instance_file: str) -> int:
    """
    Reads n from a file name such as 'instance_n50_uncorrelated_3.csv'.
    Files named otherwise are sized by the item count of their contents.
    """
    match = _SIZE_IN_NAME.search(os.path.basename(instance_file))
    if match:
        return int(match.group(1))
    weights, _, _ = gen.load_instance_from_file(instance_file)
    return len(weights)

def collect_instances(data_dir: str, logger: logging.Logger) -> list:
    """Returns (n, path) pairs for the csv files of data_dir, smallest n first."""
    sized = []
    for f in os.listdir(data_dir):
        if not f.endswith('.csv'):
            continue
        path = os.path.join(data_dir, f)
        try:
            sized.append((instance_size(path), path))
        except InstanceFormatError as e:
            logger.warning(f"Skipping {f}: {e}")
    return sorted(sized)

def main():
    """
    Evaluates the configured solvers on the testing instances, checks every
    returned selection for feasibility, and writes the summary table and plots.
    """
    parser = argparse.ArgumentParser(description="Evaluate knapsack problem solvers.")
    parser.add_argument('--limit', type=int, default=None,
                        help='Limit the number of test instances to run (for quick testing).')
    parser.add_argument('--data-dir', type=str, default=cfg.paths.data_testing,
                        help='Directory holding the instance csv files.')
    args = parser.parse_args()

    # --- 1. Create a unique name and directory for this evaluation run ---
    run_name = create_run_name(cfg)
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "evaluation", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="evaluation_session", log_dir=run_dir)
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting New Evaluation Run: {run_name} ---")

    # --- 2. Setup Solvers ---
    solvers_to_evaluate = dict(cfg.classic_solvers.algorithms_to_test)
    if not solvers_to_evaluate:
        logger.critical("No solvers are listed in classic_solvers.algorithms_to_test. Exiting.")
        sys.exit(1)
    logger.info(f"Solvers to be evaluated: {list(solvers_to_evaluate.keys())}")

    baseline_name = None
    for name, solver_class in solvers_to_evaluate.items():
        if solver_class == cfg.classic_solvers.baseline_algorithm:
            baseline_name = name
            break
    if baseline_name is None:
        logger.warning("The baseline algorithm is not among the evaluated solvers; gaps will not be computed.")

    # --- 3. Data Loading ---
    if not os.path.isdir(args.data_dir) or not os.listdir(args.data_dir):
        logger.error(f"Test data directory is empty or does not exist: {args.data_dir}")
        logger.error("Please run 'generate' to create test instances first.")
        sys.exit(1)
    instance_files = collect_instances(args.data_dir, logger)
    if not instance_files:
        logger.error(f"No readable instance files found in: {args.data_dir}")
        sys.exit(1)
    if args.limit is not None and args.limit > 0:
        logger.info(f"--- Running in limited mode. Processing only the first {args.limit} instances. ---")
        instance_files = instance_files[:args.limit]

    # --- 4. Run Evaluation Loop ---
    raw_results = []
    for name, SolverClass in solvers_to_evaluate.items():
        logger.info(f"--- Evaluating Solver: {name} ---")
        solver_config = vars(cfg.classic_solvers.bnb) if name == "Branch and Bound" else {}
        try:
            solver_instance = SolverClass(config=solver_config)
            for n, instance_file in tqdm(instance_files, desc=f"Solving with {name}"):
                weights, values, capacity = gen.load_instance_from_file(instance_file)
                result = solver_instance.solve_instance(weights, values, capacity)
                used = sum(w for w, x in zip(weights, result["solution"]) if x)
                if used > capacity:
                    logger.error(f"{name} returned an infeasible selection for {instance_file} "
                                 f"(weight {used} > capacity {capacity}).")
                raw_results.append({
                    "solver": name,
                    "instance": os.path.basename(instance_file),
                    "n": n,
                    "value": result["value"],
                    "time_seconds": result["time"],
                    "feasible": used <= capacity,
                })
                logger.debug(f"  -> {name} on {os.path.basename(instance_file)}: "
                             f"value {result['value']}, time {result['time']:.6f}s")
        except Exception as e:
            logger.error(f"Solver '{name}' failed during evaluation. Error: {e}", exc_info=True)

    # --- 5. Process Results ---
    if not raw_results:
        logger.critical("CRITICAL: No results were generated from any solver. Exiting.")
        sys.exit(1)

    results_df = pd.DataFrame(raw_results)
    agg_df = summarize_results(results_df, baseline_name)

    # --- 6. Save Reports and Generate Plots ---
    logger.info("--- Finalizing Results and Plots ---")
    save_results_to_csv(results_df, os.path.join(run_dir, "evaluation_raw_results.csv"))
    save_results_to_csv(agg_df, os.path.join(run_dir, "evaluation_full_summary.csv"))

    gap_solvers = solvers_with_gaps(agg_df)
    if gap_solvers:
        logger.info(f"Generating gap plots for solvers: {gap_solvers}")
        plot_evaluation_errors(agg_df, os.path.join(run_dir, "evaluation_gaps_vs_n.png"), gap_solvers)
    else:
        logger.info("Skipping gap plot generation as no gap metrics were calculated.")

    plot_evaluation_times(agg_df, os.path.join(run_dir, "evaluation_times_vs_n.png"))

    logger.info("--- Evaluation script finished successfully! ---")

if __name__ == '__main__':
    main()
