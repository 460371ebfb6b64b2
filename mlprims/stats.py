"""Descriptive statistics over sequences of floats."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "covariance",
    "correlation_coefficient",
]


def _values(data: Iterable[float]) -> list[float]:
    values = list(data)
    if not values:
        raise ValueError("at least one value is required")
    return values


def _paired(data1: Iterable[float], data2: Iterable[float]) -> tuple[list[float], list[float]]:
    first, second = _values(data1), _values(data2)
    if len(first) != len(second):
        raise ValueError("both data sets must have the same length")
    return first, second


def mean(data: Iterable[float]) -> float:
    """Return the arithmetic mean."""
    values = _values(data)
    total = 0.0
    for x in values:
        total += x
    return total / len(values)


def median(data: Iterable[float]) -> float:
    """Return the median; the mean of the two middle values for even sizes."""
    values = sorted(_values(data))
    half = len(values) // 2
    if len(values) % 2 == 0:
        return (values[half - 1] + values[half]) / 2
    return float(values[half])


def mode(data: Iterable[float]) -> float:
    """Return the most frequent value, the earliest one on ties."""
    values = _values(data)
    counts = Counter(values)
    highest = max(counts.values())
    return float(next(x for x in values if counts[x] == highest))


def variance(data: Iterable[float]) -> float:
    """Return the population variance."""
    values = _values(data)
    m = mean(values)
    total = 0.0
    for x in values:
        total += (x - m) ** 2
    return total / len(values)


def standard_deviation(data: Iterable[float]) -> float:
    """Return the population standard deviation."""
    return math.sqrt(variance(data))


def covariance(data1: Iterable[float], data2: Iterable[float]) -> float:
    """Return the population covariance of two equally long data sets."""
    first, second = _paired(data1, data2)
    mean1, mean2 = mean(first), mean(second)
    total = 0.0
    for a, b in zip(first, second):
        total += (a - mean1) * (b - mean2)
    return total / len(first)


def correlation_coefficient(data1: Iterable[float], data2: Iterable[float]) -> float:
    """Return Pearson's correlation coefficient."""
    first, second = _paired(data1, data2)
    spread = standard_deviation(first) * standard_deviation(second)
    if spread == 0.0:
        raise ValueError("correlation is undefined for constant data")
    return covariance(first, second) / spread