"""A sigmoid perceptron and a fully connected sigmoid network."""

from __future__ import annotations

import random
from collections.abc import Sequence

from mlprims.activation import sigmoid

__all__ = ["Perceptron", "FeedforwardNN"]


def _sigmoid_derivative(x: float) -> float:
    s = sigmoid(x)
    return s * (1.0 - s)


def _checked(values: Sequence[float], expected: int, what: str) -> list[float]:
    result = [float(v) for v in values]
    if len(result) != expected:
        raise ValueError(f"expected {expected} {what}, got {len(result)}")
    return result


class Perceptron:
    """A single unit that fires when sigmoid(bias + weights . inputs) >= 0.5."""

    def __init__(
        self,
        num_inputs: int,
        learning_rate: float,
        rng: random.Random | None = None,
    ) -> None:
        if num_inputs < 1:
            raise ValueError("num_inputs must be positive")
        if rng is None:
            rng = random.Random()
        self.num_inputs = num_inputs
        self.learning_rate = learning_rate
        self.weights: list[float] = [rng.random() for _ in range(num_inputs)]
        self.bias = 0.0

    def predict(self, inputs: Sequence[float]) -> int:
        """Return 1 if the unit fires for these inputs, else 0."""
        values = _checked(inputs, self.num_inputs, "inputs")
        weighted = sum((w * x for w, x in zip(self.weights, values)), self.bias)
        return 1 if sigmoid(weighted) >= 0.5 else 0

    def train(self, inputs: Sequence[float], target: int, num_samples: int) -> None:
        """Apply the perceptron rule num_samples times for one input and target."""
        values = _checked(inputs, self.num_inputs, "inputs")
        for _ in range(num_samples):
            error = target - self.predict(values)
            step = self.learning_rate * error
            self.bias += step
            self.weights = [w + step * x for w, x in zip(self.weights, values)]


class FeedforwardNN:
    """Fully connected layers with sigmoid activations.

    weights[i][j][k] connects unit j of layer i to unit k of layer i + 1.
    """

    def __init__(
        self,
        layer_sizes: Sequence[int],
        learning_rate: float,
        rng: random.Random | None = None,
    ) -> None:
        sizes = list(layer_sizes)
        if len(sizes) < 2:
            raise ValueError("a network needs at least an input and an output layer")
        if any(size < 1 for size in sizes):
            raise ValueError("layer sizes must be positive")
        if rng is None:
            rng = random.Random()
        self.layer_sizes = sizes
        self.learning_rate = learning_rate
        self.weights: list[list[list[float]]] = []
        self.biases: list[list[float]] = []
        for n_in, n_out in zip(sizes, sizes[1:]):
            self.weights.append(
                [[rng.random() for _ in range(n_out)] for _ in range(n_in)]
            )
            self.biases.append([rng.random() for _ in range(n_out)])
        self.activations: list[list[float]] = [[0.0] * size for size in sizes]

    @property
    def output(self) -> list[float]:
        return list(self.activations[-1])

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Propagate the inputs, store every layer's activations, return the output."""
        current = _checked(inputs, self.layer_sizes[0], "inputs")
        self.activations[0] = current
        for index, (weights, biases) in enumerate(zip(self.weights, self.biases)):
            columns = zip(*weights)
            current = [
                sigmoid(sum((a * w for a, w in zip(current, column)), bias))
                for column, bias in zip(columns, biases)
            ]
            self.activations[index + 1] = current
        return list(current)

    def backpropagate(self, targets: Sequence[float]) -> None:
        """Adjust weights and biases towards targets from the last forward pass."""
        wanted = _checked(targets, self.layer_sizes[-1], "targets")
        deltas = [
            (t - a) * _sigmoid_derivative(a)
            for t, a in zip(wanted, self.activations[-1])
        ]
        rate = self.learning_rate
        for index in reversed(range(len(self.weights))):
            weights = self.weights[index]
            previous = self.activations[index]
            next_deltas = [
                sum((d * w for d, w in zip(deltas, row)), 0.0) for row in weights
            ]
            self.weights[index] = [
                [w + rate * d * a for w, d in zip(row, deltas)]
                for row, a in zip(weights, previous)
            ]
            self.biases[index] = [
                b + rate * d for b, d in zip(self.biases[index], deltas)
            ]
            deltas = next_deltas

    def train(
        self,
        inputs: Sequence[float],
        targets: Sequence[float],
        num_samples: int,
        epochs: int,
    ) -> None:
        """Run num_samples forward/backward passes per epoch on one input."""
        for _ in range(epochs):
            for _ in range(num_samples):
                self.forward(inputs)
                self.backpropagate(targets)

    def predict(self, inputs: Sequence[float]) -> list[float]:
        """Return the network output for the inputs."""
        return self.forward(inputs)