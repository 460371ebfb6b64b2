"""Command that demonstrates the library's primitives on small fixed inputs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence

from mlprims.activation import relu, sigmoid, tanh_activation
from mlprims.linalg import (
    cross_entropy_loss,
    dot_product,
    mean_squared_error,
    vector_addition,
    vector_subtraction,
)
from mlprims.matrix import (
    SingularMatrixError,
    determinant,
    invert_matrix,
    matrix_multiply,
    transpose_matrix,
)
from mlprims.momentum import MomentumOptimizer
from mlprims.optimization import LearningRateSchedule
from mlprims.preprocessing import (
    min_max_scaling,
    normalize,
    one_hot_encode,
    standardize,
)
from mlprims.stats import (
    correlation_coefficient,
    covariance,
    mean,
    median,
    standard_deviation,
    variance,
)

__all__ = ["main"]

_VECTOR_A = (1.0, 2.0, 3.0)
_VECTOR_B = (4.0, 5.0, 6.0)
_Y_TRUE = (1.0, 0.0, 1.0)
_Y_PRED = (0.8, 0.2, 0.6)
_SERIES_A = (1.0, 2.0, 3.0, 4.0)
_SERIES_B = (5.0, 6.0, 7.0, 8.0)


def _row(values: Iterable[float]) -> str:
    return "".join(f"{v:f} " for v in values)


def _matrix_lines(title: str, matrix: Sequence[Sequence[float]]) -> Iterator[str]:
    yield title
    for row in matrix:
        yield _row(row)


def _activation_functions(x: float) -> Iterator[str]:
    yield f"Sigmoid({x:f}) = {sigmoid(x):f}"
    yield f"ReLU({x:f}) = {relu(x):f}"
    yield f"Tanh({x:f}) = {tanh_activation(x):f}"


def _dot_product(v1: Sequence[float], v2: Sequence[float]) -> Iterator[str]:
    yield f"Dot Product = {dot_product(v1, v2):f}"


def _loss_functions(
    y_true: Sequence[float], y_pred: Sequence[float]
) -> Iterator[str]:
    yield f"Mean Squared Error = {mean_squared_error(y_true, y_pred):f}"
    yield f"Cross Entropy Loss = {cross_entropy_loss(y_true, y_pred):f}"


def _vector_operations(v1: Sequence[float], v2: Sequence[float]) -> Iterator[str]:
    yield f"Vector Addition: {_row(vector_addition(v1, v2))}"
    yield f"Vector Subtraction: {_row(vector_subtraction(v1, v2))}"


def _data_preprocessing() -> Iterator[str]:
    data = normalize([10.0, 20.0, 30.0, 40.0])
    yield f"Normalized Data: {_row(data)}"
    data = standardize(data)
    yield f"Standardized Data: {_row(data)}"
    data = min_max_scaling(data, 0.0, 1.0)
    yield f"Min-Max Scaled Data: {_row(data)}"
    encoded = one_hot_encode([0, 1, 2], 3)
    yield f"One-Hot Encoded Data: {_row(v for row in encoded for v in row)}"


def _matrix_operations() -> Iterator[str]:
    matrix1 = [[1.0, 2.0], [3.0, 4.0]]
    matrix2 = [[5.0, 6.0], [7.0, 8.0]]
    yield from _matrix_lines(
        "Matrix Multiplication Result:", matrix_multiply(matrix1, matrix2)
    )
    yield from _matrix_lines("Matrix Transpose Result:", transpose_matrix(matrix1))
    yield f"Matrix Determinant = {determinant(matrix1):f}"
    try:
        inverse = invert_matrix(matrix1)
    except SingularMatrixError:
        yield "Matrix inversion failed"
    else:
        yield from _matrix_lines("Matrix Inversion Result:", inverse)


def _momentum_optimizer() -> Iterator[str]:
    optimizer = MomentumOptimizer(3, 0.9)
    weights = optimizer.apply([1.0, 2.0, 3.0], [0.1, 0.2, 0.3], 0.01)
    yield f"Weights after Momentum Update: {_row(weights)}"


def _learning_rate_schedule() -> Iterator[str]:
    schedule = LearningRateSchedule(0.1, 0.01, 10)
    for step in range(20):
        yield f"Learning Rate at step {step}: {schedule.current_rate():f}"
        schedule.step()


def _statistics(data1: Sequence[float], data2: Sequence[float]) -> Iterator[str]:
    yield f"Mean = {mean(data1):f}"
    yield f"Median = {median(data1):f}"
    yield f"Variance = {variance(data1):f}"
    yield f"Standard Deviation = {standard_deviation(data1):f}"
    yield f"Covariance = {covariance(data1, data2):f}"
    yield f"Correlation Coefficient = {correlation_coefficient(data1, data2):f}"


def _report() -> Iterator[str]:
    yield from _activation_functions(1.0)
    yield from _dot_product(_VECTOR_A, _VECTOR_B)
    yield from _loss_functions(_Y_TRUE, _Y_PRED)
    yield from _vector_operations(_VECTOR_A, _VECTOR_B)
    yield from _data_preprocessing()
    yield from _matrix_operations()
    yield from _momentum_optimizer()
    yield from _learning_rate_schedule()
    yield from _statistics(list(_SERIES_A), list(_SERIES_B))


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of every primitive and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="mlprims",
        description="Run the library's primitives on small fixed examples.",
    )
    parser.parse_args(argv)

    for line in _report():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())