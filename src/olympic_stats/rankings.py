"""
Leader Selection Utilities for Olympic Stats

Find every entry tied for first place in a statistic.
"""
from typing import Dict, Iterable, Tuple, TypeVar

from olympics.models import MedalTally

K = TypeVar("K")


def select_leaders(
    values: Iterable[Tuple[K, int]],
    starting_max: int = 0
) -> Dict[K, int]:
    """
    Keep every entry tied for the highest value.

    Args:
        values: (key, value) pairs in collection order
        starting_max: Initial running maximum. Entries below it are never
                      selected; entries equal to it are.

    Returns:
        Dict of key -> value for all entries equal to the maximum

    Notes:
        - Ties are all included, in collection order
        - With starting_max=-1 every entry qualifies when all values are 0
    """
    leaders: Dict[K, int] = {}
    current_max = starting_max

    for key, value in values:
        if value < current_max:
            continue
        if value > current_max:
            leaders.clear()
            current_max = value
        leaders[key] = value

    return leaders


def select_best_tallies(tallies: Iterable[Tuple[K, MedalTally]]) -> Dict[K, MedalTally]:
    """
    Keep every entry tied for the best medal tally.

    Tallies are compared gold first, then silver, then bronze. Any real
    tally beats the (-1, -1, -1) starting point, so (0, 0, 0) entries are
    kept when nobody did better.

    Args:
        tallies: (key, MedalTally) pairs in collection order

    Returns:
        Dict of key -> MedalTally for all entries tied for best
    """
    best: Dict[K, MedalTally] = {}
    best_key = (-1, -1, -1)

    for key, tally in tallies:
        tally_key = tally.as_tuple()
        if tally_key < best_key:
            continue
        if tally_key > best_key:
            best.clear()
            best_key = tally_key
        best[key] = tally

    return best
