# bnb_kp/utils/logger.py
import logging
import sys
import os
from datetime import datetime

# Configuration is passed in as arguments so this helper stays independent
# of the config loader.

def setup_logger(run_name: str, log_dir: str, level=logging.INFO) -> str:
    """
    Configures the root logger for the entire application.
    This should be called only ONCE at the application's entry point.

    Returns:
        str: the path of the log file, or None if the root logger was
        already configured.
    """
    logger = logging.getLogger() # Get the root logger

    # If the root logger already has handlers it has been configured before
    if logger.hasHandlers():
        return None

    logger.setLevel(logging.DEBUG)

    # 1. File handler, one file per run
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = f"{run_name}_{timestamp}.log"
    log_filepath = os.path.join(log_dir, log_filename)

    file_handler = logging.FileHandler(log_filepath, mode='w')
    file_handler.setLevel(logging.DEBUG) # file keeps DEBUG and above
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # 2. Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level) # console shows INFO and above by default
    console_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.info(f"Logger initialized. All subsequent logs will be saved to: {log_filepath}")
    return log_filepath