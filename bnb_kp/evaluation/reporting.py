# bnb_kp/evaluation/reporting.py
import os
import logging
from typing import List, Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def summarize_results(results_df: pd.DataFrame, baseline_name: Optional[str]) -> pd.DataFrame:
    """
    Aggregates raw per-instance results by solver and problem size.

    Args:
        results_df (pd.DataFrame): one row per (solver, instance) with the
            columns 'solver', 'instance', 'n', 'value' and 'time_seconds'.
        baseline_name (str): solver whose values are treated as optimal. When
            it is present, the gap of every other solver is added as
            '<solver>_mae', '<solver>_mre' (percent) and '<solver>_rmse'.

    Returns:
        pd.DataFrame: one row per (solver, n).
    """
    agg_df = results_df.groupby(['solver', 'n']).agg(
        avg_value=('value', 'mean'),
        avg_time_ms=('time_seconds', lambda x: x.mean() * 1000)
    ).reset_index()

    if not baseline_name or baseline_name not in set(results_df['solver']):
        logger.warning("Skipping gap metrics because the baseline solver has no results.")
        return agg_df

    pivot_df = results_df.pivot_table(index=['n', 'instance'], columns='solver', values='value').reset_index()

    for solver_name in sorted(set(results_df['solver']) - {baseline_name}):
        if solver_name not in pivot_df.columns:
            continue
        temp_df = pivot_df[['n', baseline_name, solver_name]].dropna()
        temp_df = temp_df.assign(absolute_error=(temp_df[baseline_name] - temp_df[solver_name]).abs())
        temp_df = temp_df.assign(
            relative_error=(temp_df['absolute_error'] / temp_df[baseline_name].abs().replace(0, 1e-9)).fillna(0),
            squared_error=temp_df['absolute_error'] ** 2,
        )

        gap_df = temp_df.groupby('n').agg(
            mae=('absolute_error', 'mean'),
            mre=('relative_error', lambda x: x.mean() * 100),
            rmse=('squared_error', lambda x: np.sqrt(x.mean()))
        ).reset_index()
        gap_df = gap_df.add_prefix(f"{solver_name}_").rename(columns={f"{solver_name}_n": "n"})
        agg_df = pd.merge(agg_df, gap_df, on='n', how='left')

    return agg_df


def solvers_with_gaps(agg_df: pd.DataFrame) -> List[str]:
    """Names of the solvers that have gap columns in a summary table."""
    return sorted(c[:-len("_rmse")] for c in agg_df.columns if c.endswith("_rmse"))


def save_results_to_csv(df: pd.DataFrame, path: str):
    """Writes a results table to csv, creating the parent directory."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info(f"Results saved to {path}")
