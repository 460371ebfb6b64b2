"""Adam, plain gradient descent and a step-decay learning-rate schedule."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["AdamOptimizer", "gradient_descent", "LearningRateSchedule"]


def _check_lengths(weights: Sequence[float], gradients: Sequence[float]) -> None:
    if len(weights) != len(gradients):
        raise ValueError("weights and gradients must have the same length")


class AdamOptimizer:
    """Adam with bias-corrected first and second moment estimates."""

    def __init__(self, size: int, beta1: float, beta2: float, epsilon: float) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.beta1 = beta1
        self.beta2 = beta2
        self.epsilon = epsilon
        self.m: list[float] = [0.0] * size
        self.v: list[float] = [0.0] * size
        self.t = 0

    def apply(
        self,
        weights: Sequence[float],
        gradients: Sequence[float],
        learning_rate: float,
    ) -> list[float]:
        """Advance one time step and return the updated weights."""
        if len(weights) != self.size or len(gradients) != self.size:
            raise ValueError(
                f"weights and gradients must both have {self.size} values"
            )
        self.t += 1
        correction1 = 1 - self.beta1 ** self.t
        correction2 = 1 - self.beta2 ** self.t
        self.m = [
            self.beta1 * m + (1 - self.beta1) * g for m, g in zip(self.m, gradients)
        ]
        self.v = [
            self.beta2 * v + (1 - self.beta2) * g * g
            for v, g in zip(self.v, gradients)
        ]
        return [
            w - learning_rate * (m / correction1)
            / (math.sqrt(v / correction2) + self.epsilon)
            for w, m, v in zip(weights, self.m, self.v)
        ]


def gradient_descent(
    weights: Sequence[float], gradients: Sequence[float], learning_rate: float
) -> list[float]:
    """Return weights moved against the gradients by learning_rate."""
    _check_lengths(weights, gradients)
    return [w - learning_rate * g for w, g in zip(weights, gradients)]


class LearningRateSchedule:
    """Step decay: the rate is multiplied by decay_rate every decay_steps steps."""

    def __init__(
        self, initial_learning_rate: float, decay_rate: float, decay_steps: int
    ) -> None:
        if decay_steps <= 0:
            raise ValueError("decay_steps must be positive")
        self.initial_learning_rate = initial_learning_rate
        self.decay_rate = decay_rate
        self.decay_steps = decay_steps
        self.current_step = 0

    def current_rate(self) -> float:
        """Return the learning rate for the current step."""
        return self.initial_learning_rate * self.decay_rate ** float(
            self.current_step // self.decay_steps
        )

    def step(self) -> None:
        """Advance the schedule by one step."""
        self.current_step += 1