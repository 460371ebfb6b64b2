"""Weight regularization."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["apply_l2_regularization"]


def apply_l2_regularization(
    weights: Iterable[float], lam: float, learning_rate: float
) -> list[float]:
    """Return weights shrunk by the L2 penalty step learning_rate * lam * w."""
    return [w - learning_rate * lam * w for w in weights]