"""Vector arithmetic and loss functions over sequences of floats."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = [
    "dot_product",
    "vector_addition",
    "vector_subtraction",
    "mean_squared_error",
    "cross_entropy_loss",
]


def _pairs(v1: Iterable[float], v2: Iterable[float]) -> list[tuple[float, float]]:
    try:
        return list(zip(v1, v2, strict=True))
    except ValueError:
        raise ValueError("vectors must have the same length") from None


def _nonempty_pairs(
    y_true: Iterable[float], y_pred: Iterable[float]
) -> list[tuple[float, float]]:
    pairs = _pairs(y_true, y_pred)
    if not pairs:
        raise ValueError("at least one value is required")
    return pairs


def _log(x: float) -> float:
    """Natural logarithm that yields -inf at 0 and NaN below it."""
    if x > 0.0:
        return math.log(x)
    if x == 0.0:
        return -math.inf
    return math.nan


def dot_product(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the sum of element-wise products."""
    result = 0.0
    for a, b in _pairs(v1, v2):
        result += a * b
    return result


def vector_addition(v1: Sequence[float], v2: Sequence[float]) -> list[float]:
    """Return the element-wise sum of two vectors."""
    return [float(a + b) for a, b in _pairs(v1, v2)]


def vector_subtraction(v1: Sequence[float], v2: Sequence[float]) -> list[float]:
    """Return the element-wise difference v1 - v2."""
    return [float(a - b) for a, b in _pairs(v1, v2)]


def mean_squared_error(y_true: Sequence[float], y_pred: Sequence[float]) -> float:
    """Return the mean of squared differences."""
    pairs = _nonempty_pairs(y_true, y_pred)
    total = 0.0
    for t, p in pairs:
        total += (t - p) ** 2
    return total / len(pairs)


def cross_entropy_loss(y_true: Sequence[float], y_pred: Sequence[float]) -> float:
    """Return the mean binary cross-entropy of predictions against targets."""
    pairs = _nonempty_pairs(y_true, y_pred)
    total = 0.0
    for t, p in pairs:
        total += -t * _log(p) - (1.0 - t) * _log(1.0 - p)
    return total / len(pairs)