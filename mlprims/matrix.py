"""Dense matrix operations on row-major lists of lists."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "SingularMatrixError",
    "determinant",
    "invert_matrix",
    "matrix_multiply",
    "transpose_matrix",
]

Matrix = list[list[float]]


class SingularMatrixError(ValueError):
    """Raised when elimination meets a zero pivot."""


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _square_size(matrix: Sequence[Sequence[float]]) -> int:
    rows, cols = _shape(matrix)
    if rows == 0 or rows != cols:
        raise ValueError("matrix must be square and non-empty")
    return rows


def _as_floats(matrix: Sequence[Sequence[float]]) -> Matrix:
    return [[float(v) for v in row] for row in matrix]


def _cofactor_determinant(m: Matrix) -> float:
    n = len(m)
    if n == 1:
        return m[0][0]
    if n == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]
    total = 0.0
    for p, pivot in enumerate(m[0]):
        minor = [row[:p] + row[p + 1:] for row in m[1:]]
        sign = 1.0 if p % 2 == 0 else -1.0
        total += pivot * _cofactor_determinant(minor) * sign
    return total


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant by cofactor expansion along the first row."""
    _square_size(matrix)
    return _cofactor_determinant(_as_floats(matrix))


def invert_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse by Gauss-Jordan elimination without row exchanges.

    Raises SingularMatrixError as soon as a diagonal pivot is exactly zero,
    which also happens for some invertible matrices that would need pivoting.
    """
    n = _square_size(matrix)
    augmented = [
        row + [1.0 if i == j else 0.0 for j in range(n)]
        for i, row in enumerate(_as_floats(matrix))
    ]
    for i in range(n):
        pivot = augmented[i][i]
        if pivot == 0:
            raise SingularMatrixError(f"zero pivot in row {i}")
        pivot_row = [v / pivot for v in augmented[i]]
        augmented[i] = pivot_row
        for j, row in enumerate(augmented):
            if j != i:
                factor = row[i]
                augmented[j] = [v - p * factor for v, p in zip(row, pivot_row)]
    return [row[n:] for row in augmented]


def matrix_multiply(
    m1: Sequence[Sequence[float]], m2: Sequence[Sequence[float]]
) -> Matrix:
    """Return the matrix product m1 x m2."""
    _, cols1 = _shape(m1)
    rows2, _ = _shape(m2)
    if cols1 != rows2:
        raise ValueError(
            f"cannot multiply: left has {cols1} columns, right has {rows2} rows"
        )
    columns = list(zip(*m2))
    return [
        [sum((a * b for a, b in zip(row, column)), 0.0) for column in columns]
        for row in m1
    ]


def transpose_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of the matrix."""
    _shape(matrix)
    return [[float(v) for v in column] for column in zip(*matrix)]