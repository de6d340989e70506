# bnb_kp/errors.py
# -*- coding: utf-8 -*-
"""
Common exceptions for the knapsack solvers.
"""


class KnapsackError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(KnapsackError, ValueError):
    """Raised when a problem instance violates the solver's input contract."""


class InstanceFormatError(KnapsackError, ValueError):
    """Raised when an instance file cannot be parsed."""


class SolveCancelled(KnapsackError, RuntimeError):
    """Raised when a cooperative stop request interrupts a running solve."""
