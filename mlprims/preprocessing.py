"""Feature scaling and categorical encoding."""

from __future__ import annotations

from collections.abc import Iterable

from mlprims.stats import mean, standard_deviation

__all__ = ["normalize", "standardize", "min_max_scaling", "one_hot_encode"]


def _values(data: Iterable[float]) -> list[float]:
    values = list(data)
    if not values:
        raise ValueError("at least one value is required")
    return values


def normalize(data: Iterable[float]) -> list[float]:
    """Return the z-scores of the data: (x - mean) / standard deviation."""
    values = _values(data)
    centre = mean(values)
    spread = standard_deviation(values)
    if spread == 0.0:
        raise ValueError("cannot normalize data with zero standard deviation")
    return [(x - centre) / spread for x in values]


def standardize(data: Iterable[float]) -> list[float]:
    """Return the data rescaled linearly onto [0, 1]."""
    return min_max_scaling(data, 0.0, 1.0)


def min_max_scaling(data: Iterable[float], new_min: float, new_max: float) -> list[float]:
    """Return the data rescaled linearly onto [new_min, new_max]."""
    values = _values(data)
    low, high = min(values), max(values)
    if high == low:
        raise ValueError("cannot rescale data whose values are all equal")
    return [new_min + (x - low) * (new_max - new_min) / (high - low) for x in values]


def one_hot_encode(categories: Iterable[int], category_size: int) -> list[list[float]]:
    """Return one row per category with 1.0 at its index and 0.0 elsewhere.

    A category outside range(category_size) yields a row of zeros.
    """
    return [
        [1.0 if category == j else 0.0 for j in range(category_size)]
        for category in categories
    ]