# bnb_kp/utils/run_utils.py
import datetime
from types import SimpleNamespace

def create_run_name(config: SimpleNamespace) -> str:
    """
    Creates a unique and informative name for an evaluation run.

    Args:
        config (SimpleNamespace): The configuration object for the run.

    Returns:
        str: A unique name, e.g., '20250622_210000_n10-100_uncorrelated'
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")

    # Extract key parameters from the config to make the name informative
    try:
        start_n, end_n = config.data_gen.n_range[0], config.data_gen.n_range[1]
        correlation = config.data_gen.correlation_type
        run_name = f"{timestamp}_n{start_n}-{end_n}_{correlation}"
    except (AttributeError, IndexError, TypeError):
        # Fallback for configs without a data_gen section
        run_name = timestamp

    return run_name
