"""A fully connected linear network trained with per-sample gradient steps."""

from __future__ import annotations

import random
from collections.abc import Sequence

__all__ = ["DenseLayer", "NeuralNetwork"]


class DenseLayer:
    """A dense layer: output = biases + weights x inputs, no activation.

    weights holds one row of input_size values per output.
    """

    def __init__(
        self, input_size: int, output_size: int, rng: random.Random | None = None
    ) -> None:
        if input_size < 1 or output_size < 1:
            raise ValueError("layer sizes must be positive")
        if rng is None:
            rng = random.Random()
        self.input_size = input_size
        self.output_size = output_size
        self.weights: list[list[float]] = [
            [rng.random() * 0.01 for _ in range(input_size)]
            for _ in range(output_size)
        ]
        self.biases: list[float] = [0.0] * output_size
        self.output: list[float] = [0.0] * output_size

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Compute, store and return the layer output."""
        if len(inputs) != self.input_size:
            raise ValueError(f"expected {self.input_size} inputs, got {len(inputs)}")
        self.output = [
            sum((x * w for x, w in zip(inputs, row)), bias)
            for row, bias in zip(self.weights, self.biases)
        ]
        return list(self.output)


class NeuralNetwork:
    """A stack of dense layers between consecutive sizes in layer_sizes."""

    def __init__(
        self, layer_sizes: Sequence[int], rng: random.Random | None = None
    ) -> None:
        if len(layer_sizes) < 2:
            raise ValueError("a network needs at least an input and an output size")
        if rng is None:
            rng = random.Random()
        self.layers = [
            DenseLayer(n_in, n_out, rng)
            for n_in, n_out in zip(layer_sizes, layer_sizes[1:])
        ]

    @property
    def input_size(self) -> int:
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        return self.layers[-1].output_size

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Run the inputs through every layer and return the final output."""
        current: Sequence[float] = inputs
        for layer in self.layers:
            current = layer.forward(current)
        return list(current)

    def _target_row(self, target: float | Sequence[float]) -> list[float]:
        if isinstance(target, (int, float)):
            row = [float(target)]
        else:
            row = [float(v) for v in target]
        if len(row) != self.output_size:
            raise ValueError(
                f"each target needs {self.output_size} values, got {len(row)}"
            )
        return row

    def train(
        self,
        X: Sequence[Sequence[float]],
        y: Sequence[float | Sequence[float]],
        epochs: int,
        learning_rate: float,
    ) -> None:
        """Fit the network to (X, y) with squared-error gradient steps per sample."""
        samples = [list(sample) for sample in X]
        targets = [self._target_row(target) for target in y]
        if len(samples) != len(targets):
            raise ValueError("X and y must hold the same number of samples")
        for _ in range(epochs):
            for sample, target in zip(samples, targets):
                output = self.forward(sample)
                error = [o - t for o, t in zip(output, target)]
                for index in range(len(self.layers) - 1, -1, -1):
                    layer = self.layers[index]
                    inputs = sample if index == 0 else self.layers[index - 1].output
                    layer.biases = [
                        b - learning_rate * e for b, e in zip(layer.biases, error)
                    ]
                    layer.weights = [
                        [w - learning_rate * e * x for w, x in zip(row, inputs)]
                        for row, e in zip(layer.weights, error)
                    ]
                    if index > 0:
                        error = [
                            sum(
                                (e * row[k] for row, e in zip(layer.weights, error)),
                                0.0,
                            )
                            for k in range(layer.input_size)
                        ]