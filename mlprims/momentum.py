"""Gradient descent with classical momentum."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["MomentumOptimizer"]


class MomentumOptimizer:
    """Keeps one velocity per weight and applies momentum updates."""

    def __init__(self, size: int, momentum_factor: float) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.momentum_factor = momentum_factor
        self.velocity: list[float] = [0.0] * size

    def apply(
        self,
        weights: Sequence[float],
        gradients: Sequence[float],
        learning_rate: float,
    ) -> list[float]:
        """Update the velocity and return the moved weights."""
        if len(weights) != self.size or len(gradients) != self.size:
            raise ValueError(
                f"weights and gradients must both have {self.size} values"
            )
        self.velocity = [
            self.momentum_factor * v - learning_rate * g
            for v, g in zip(self.velocity, gradients)
        ]
        return [w + v for w, v in zip(weights, self.velocity)]