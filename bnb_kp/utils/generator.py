# bnb_kp/utils/generator.py
# -*- coding: utf-8 -*-


'''
This module provides functions to generate 0/1 knapsack instances and to
save/load them as csv files.
'''

import random
from typing import List, Optional, Tuple, Union
import os
import csv
import logging

from bnb_kp.errors import InstanceFormatError

logger = logging.getLogger(__name__)

Number = Union[int, float]

CORRELATION_TYPES = ('uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum')


# Function to generate a knapsack instance with one constraint
def generate_knapsack_instance(
    n: int,
    correlation: str = 'uncorrelated',
    max_weight: int = 1000,
    max_value: int = 1000,
    capacity_ratio: float = 0.5,
    seed: Optional[int] = None
) -> Tuple[List[Tuple[int, int]], int]:

    """
    Generate an instance of the 0/1 knapsack problem.

    Args:
        n (int): Number of items to generate.
        correlation (str): Type of correlation between item values and weights.
            Options: 'uncorrelated', 'weakly_correlated',
                    'strongly_correlated', 'subset_sum'.
        max_weight (int): Maximum weight for a single item.
        max_value (int): Maximum value for a single item (used when uncorrelated).
        capacity_ratio (float): Ratio of knapsack capacity to the total weight of all items (between 0.0 and 1.0).
        seed (int, optional): Seed for a private random generator, so the same
            arguments always give the same instance.

    Returns:
        Tuple[List[Tuple[int, int]], int]:
            - A list of items, each represented as a tuple (value, weight).
            - The computed knapsack capacity.
    """

    if correlation not in CORRELATION_TYPES:
        raise ValueError("Correlation type must be one of 'uncorrelated', 'weakly_correlated', 'strongly_correlated', or 'subset_sum'")
    if not (0.0 < capacity_ratio <= 1.0):
        raise ValueError("Capacity ratio must be between 0.0 and 1.0")

    rng = random.Random(seed)
    items = []
    total_weight = 0

    for _ in range(n):
        weight = rng.randint(1, max_weight)
        value = 0

        if correlation == 'uncorrelated':
            value = rng.randint(1, max_value)
        elif correlation == 'weakly_correlated':
            # Noise is around 25% of the maximum value
            noise = int(max_value / 4)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'strongly_correlated':
            # Noise is around 10% of the maximum value
            noise = int(max_value / 10)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'subset_sum':
            # Value equals weight
            value = weight

        items.append((value, weight))
        total_weight += weight

    capacity = int(total_weight * capacity_ratio)

    return items, capacity


def save_instance_to_file(items: List[Tuple[Number, Number]], capacity: Number, filename: str):
    """Saves the generated instance to a csv file."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', newline='') as f:
        # First line holds the number of items and the capacity
        f.write(f"{len(items)} {capacity}\n")
        writer = csv.writer(f)
        writer.writerow(['value', 'weight'])
        for value, weight in items:
            writer.writerow([value, weight])

    logger.info(f"Instance successfully saved to {filename}")


def _parse_number(text: str, filename: str) -> Number:
    try:
        number = float(text)
    except ValueError as e:
        raise InstanceFormatError(f"'{filename}': '{text}' is not a number.") from e
    return int(number) if number.is_integer() else number


def load_instance_from_file(filename: str) -> Tuple[List[Number], List[Number], Number]:
    """
    Loads a knapsack instance from a csv file.
    Assumes first line is 'num_items capacity', then a 'value,weight' header
    and one 'value,weight' row per item.
    Includes validation to check if the number of items matches the header.

    Returns:
        Tuple[List[Number], List[Number], Number]: (weights_list, values_list, capacity)
    """
    weights = []
    values = []

    with open(filename, 'r', newline='') as f:
        # 1. Read meta-data from the first line
        meta = f.readline().split()
        if len(meta) != 2:
            raise InstanceFormatError(f"'{filename}': expected 'num_items capacity' on the first line.")
        expected_num_items = int(_parse_number(meta[0], filename))
        capacity = _parse_number(meta[1], filename)

        # 2. Use csv.reader to process the rest of the file
        reader = csv.reader(f)

        # 3. Skip the header row
        try:
            next(reader)
        except StopIteration:
            logger.warning(f"Warning: File '{filename}' contains no data rows.")

        # 4. Read each data row
        for row in reader:
            if not row:
                continue
            if len(row) < 2:
                raise InstanceFormatError(f"'{filename}': malformed row {row}.")
            values.append(_parse_number(row[0], filename))
            weights.append(_parse_number(row[1], filename))

    # 5. Check if the actual number of items matches the expected number
    actual_num_items = len(values)
    if actual_num_items != expected_num_items:
        logger.warning(f"Inconsistent data in '{filename}'. "
                       f"Header specified {expected_num_items} items, but file contained {actual_num_items} items.")

    logger.info(f"Instance successfully loaded from {filename} ({actual_num_items} items).")
    return weights, values, capacity
