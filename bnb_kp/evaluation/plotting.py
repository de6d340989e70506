# bnb_kp/evaluation/plotting.py
import pandas as pd
import seaborn as sns
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import logging

logger = logging.getLogger(__name__)

def plot_evaluation_errors(results_df: pd.DataFrame, save_path: str, solver_names: list):
    """
    Plots MAE, MRE, and RMSE against the baseline for a list of solvers
    against problem size 'n'.

    Args:
        results_df (pd.DataFrame): The aggregated dataframe containing gap columns.
        save_path (str): The path to save the plot image.
        solver_names (list): A list of solver names to plot gaps for.
    """
    logger.info("Generating optimality gap comparison plot...")

    fig, axes = plt.subplots(3, 1, figsize=(12, 18), sharex=True)
    fig.suptitle('Optimality Gap vs. Problem Size (n)', fontsize=16, y=0.99)

    metrics_to_plot = {
        'mae': "Mean Absolute Error (MAE)",
        'mre': "Mean Relative Error (MRE %)",
        'rmse': "Root Mean Square Error (RMSE)"
    }

    for solver_name in solver_names:
        for i, (metric, title) in enumerate(metrics_to_plot.items()):
            column_name = f"{solver_name}_{metric}"
            if column_name in results_df.columns:
                # gap columns are repeated for every solver row of the same n
                gap_df = results_df[['n', column_name]].drop_duplicates()
                sns.lineplot(
                    ax=axes[i],
                    data=gap_df,
                    x='n',
                    y=column_name,
                    label=solver_name
                )
                axes[i].set_title(title)
                axes[i].set_ylabel("Gap")
                axes[i].legend()

    axes[-1].set_xlabel("Number of Items (n)")
    plt.tight_layout(rect=[0, 0.03, 1, 0.98])

    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Gap comparison plot saved to {save_path}")
    except OSError as e:
        logger.error(f"Failed to save gap plot: {e}")
    finally:
        plt.close()

def plot_evaluation_times(results_df: pd.DataFrame, save_path: str):
    """Plots a comparison of solve times for all solvers."""
    logger.info("Generating evaluation time comparison plot...")
    sns.set_theme(style="whitegrid")
    plt.figure(figsize=(12, 7))

    sns.lineplot(data=results_df, x='n', y='avg_time_ms', hue='solver', style='solver', markers=True, dashes=False)

    plt.title('Solver Performance: Time vs. Problem Size (n)', fontsize=16)
    plt.xlabel('Number of Items (n)', fontsize=12)
    plt.ylabel('Average Time per Instance (ms)', fontsize=12)
    plt.yscale('log') # branch and bound times vary by orders of magnitude
    plt.legend(title='Solver')
    plt.grid(True, which="both", ls="--")
    plt.tight_layout()
    plt.savefig(save_path, dpi=300)
    plt.close()
    logger.info(f"Time comparison plot saved to {save_path}")
