"""Dense matrix arithmetic: addition, subtraction, schoolbook and Strassen products."""

from __future__ import annotations

import random
from collections.abc import Sequence

Matrix = list[list[float]]


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(matrix)
    if rows == 0:
        raise ValueError("matrix must have at least one row")
    cols = len(matrix[0])
    if cols == 0:
        raise ValueError("matrix must have at least one column")
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _require_same_shape(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> None:
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")


def _add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _subtract(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def add_matrices(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the element-wise sum of two matrices of equal shape."""
    _require_same_shape(a, b)
    return _add(a, b)


def subtract_matrices(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the element-wise difference ``a - b`` of two matrices of equal shape."""
    _require_same_shape(a, b)
    return _subtract(a, b)


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product ``a @ b`` by the schoolbook triple loop."""
    _, inner = _shape(a)
    rows_b, _ = _shape(b)
    if inner != rows_b:
        raise ValueError("the columns of a must match the rows of b")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def _quadrants(m: Matrix, half: int) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    size = len(a)
    if size == 1:
        return [[a[0][0] * b[0][0]]]
    half = size // 2
    a11, a12, a21, a22 = _quadrants(a, half)
    b11, b12, b21, b22 = _quadrants(b, half)

    m1 = _strassen(_add(a11, a22), _add(b11, b22))
    m2 = _strassen(_add(a21, a22), b11)
    m3 = _strassen(a11, _subtract(b12, b22))
    m4 = _strassen(a22, _subtract(b21, b11))
    m5 = _strassen(_add(a11, a12), b22)
    m6 = _strassen(_subtract(a21, a11), _add(b11, b12))
    m7 = _strassen(_subtract(a12, a22), _add(b21, b22))

    c11 = _add(_subtract(_add(m1, m4), m5), m7)
    c12 = _add(m3, m5)
    c21 = _add(m2, m4)
    c22 = _add(_subtract(_add(m1, m3), m2), m6)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def strassen_multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return ``a @ b`` for square matrices whose size is a power of two, by Strassen's method."""
    rows, cols = _shape(a)
    if rows != cols:
        raise ValueError("Strassen multiplication needs square matrices")
    if _shape(b) != (rows, cols):
        raise ValueError("matrices must have the same shape")
    if rows & (rows - 1):
        raise ValueError("matrix size must be a power of two")
    return _strassen([list(row) for row in a], [list(row) for row in b])


def random_matrix(rows: int, cols: int, rng: random.Random | None = None) -> Matrix:
    """Return a ``rows`` by ``cols`` matrix of uniform values in [0, 1)."""
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive")
    generator = rng if rng is not None else random.Random()
    return [[generator.random() for _ in range(cols)] for _ in range(rows)]