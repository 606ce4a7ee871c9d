"""
Statistical Calculation Functions for Olympic Stats

Pure functions shared by the statistics queries.
All functions handle edge cases (division by zero, empty inputs).
"""
from typing import Iterable


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide, returning default if denominator is 0.

    Args:
        numerator: Numerator value
        denominator: Denominator value
        default: Value to return if denominator is 0

    Returns:
        Result of division or default value
    """
    if denominator == 0:
        return default
    return numerator / denominator


def calculate_ratio(part: int, whole: int) -> float:
    """
    Fraction of a population (0.0 - 1.0).

    Args:
        part: Members matching the condition
        whole: Population size

    Returns:
        part / whole, 0.0 for an empty population
    """
    return safe_divide(part, whole, default=0.0)


def count_true(values: Iterable[bool]) -> int:
    """Number of truthy values"""
    return sum(1 for value in values if value)
