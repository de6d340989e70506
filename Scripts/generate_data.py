# generate_data.py
# -*- coding: utf-8 -*-

"""
Single entry point for generating the knapsack test instances.
It uses the configuration from 'configs/config.yaml' and the core functions
from 'bnb_kp/utils/generator.py'.
"""

import os
import logging
import argparse
from typing import List
from tqdm import tqdm

from bnb_kp.utils.config_loader import cfg
from bnb_kp.utils.logger import setup_logger
import bnb_kp.utils.generator as gen

def create_dataset(
    dataset_name: str,
    output_dir: str,
    instance_params: dict,
    n_range: tuple = None,
    n_fixed: int = None,
    num_instances: int = 1,
    seed: int = None
) -> List[str]:
    """
    A generic function to create a dataset of knapsack instances.

    Args:
        dataset_name (str): A name for the generation task (e.g., 'Testing-Set').
        output_dir (str): The directory to save the instance files.
        instance_params (dict): Parameters for the instance generator.
        n_range (tuple): A tuple for varied sizes (start, stop, step), stop inclusive.
        n_fixed (int): A fixed size for all instances.
        num_instances (int): The number of instances to generate for each size 'n'.
        seed (int): Base seed; instance k of the task uses seed + k.

    Returns:
        List[str]: paths of the written files.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting dataset generation: '{dataset_name}' ---")
    os.makedirs(output_dir, exist_ok=True)

    if n_range:
        range_of_n = range(n_range[0], n_range[1] + 1, n_range[2])
    elif n_fixed:
        range_of_n = [n_fixed]
    else:
        raise ValueError("Either n_range or n_fixed must be provided.")

    written = []
    task_index = 0
    with tqdm(total=len(range_of_n) * num_instances, desc=f"Generating {dataset_name}") as pbar:
        for n in range_of_n:
            for i in range(num_instances):
                items, capacity = gen.generate_knapsack_instance(
                    n=n,
                    correlation=instance_params['correlation'],
                    max_weight=instance_params['max_weight'],
                    max_value=instance_params['max_value'],
                    capacity_ratio=instance_params['capacity_ratio'],
                    seed=None if seed is None else seed + task_index
                )
                task_index += 1

                filename = os.path.join(output_dir, f"instance_n{n}_{instance_params['correlation']}_{i+1}.csv")
                gen.save_instance_to_file(items, capacity, filename)
                written.append(filename)
                pbar.update(1)

    logger.info(f"--- Dataset generation '{dataset_name}' complete. Files saved in '{output_dir}'. ---")
    return written

def main():
    parser = argparse.ArgumentParser(description="Generate knapsack problem instances.")
    parser.add_argument('--n-fixed', type=int, default=None,
                        help='Generate instances of a single size instead of the configured n_range.')
    parser.add_argument('--num-instances', type=int, default=cfg.data_gen.instances_per_n,
                        help='Number of instances per size n.')
    parser.add_argument('--output-dir', type=str, default=cfg.paths.data_testing,
                        help='Directory for the generated csv files.')
    args = parser.parse_args()

    # --- Configure logger ONCE for this script run ---
    setup_logger(run_name="data_generation", log_dir=cfg.paths.logs)

    shared_instance_params = {
        'correlation': cfg.data_gen.correlation_type,
        'max_weight': cfg.data_gen.max_weight,
        'max_value': cfg.data_gen.max_value,
        'capacity_ratio': cfg.data_gen.capacity_ratio,
    }

    create_dataset(
        dataset_name="Testing-Set",
        output_dir=args.output_dir,
        instance_params=shared_instance_params,
        n_range=None if args.n_fixed else cfg.data_gen.n_range,
        n_fixed=args.n_fixed,
        num_instances=args.num_instances,
        seed=cfg.data_gen.seed
    )

if __name__ == '__main__':
    main()
