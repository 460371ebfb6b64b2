"""Scalar activation functions."""

from __future__ import annotations

import math

__all__ = ["sigmoid", "relu", "tanh_activation"]


def sigmoid(x: float) -> float:
    """Return the logistic function 1 / (1 + e**-x)."""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    # Rearranged for negative inputs so that exp() cannot overflow.
    e = math.exp(x)
    return e / (1.0 + e)


def relu(x: float) -> float:
    """Return max(0, x); NaN maps to 0."""
    return float(x) if x > 0.0 else 0.0


def tanh_activation(x: float) -> float:
    """Return the hyperbolic tangent of x."""
    return math.tanh(x)