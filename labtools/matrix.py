"""Square integer matrices: building, multiplying and printing."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

Matrix = list[list[int]]


def create_matrix(rows: int, cols: int) -> Matrix:
    """Return a ``rows`` by ``cols`` matrix filled with 0, 1, 2, ... row by row."""
    if rows < 0 or cols < 0:
        raise ValueError(f"dimensions must not be negative, got {rows}x{cols}")
    return [list(range(row * cols, (row + 1) * cols)) for row in range(rows)]


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product of two square matrices of the same size."""
    size = len(a)
    if len(b) != size or any(len(row) != size for row in (*a, *b)):
        raise ValueError("both matrices must be square and of the same size")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Return the square matrix as lines of space-padded numbers."""
    size = len(matrix)
    return "\n".join(
        "".join(f" {value} " for value in row[:size]) for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Multiply two 4x4 counting matrices and print all three."""
    parser = argparse.ArgumentParser(
        description="Show the product of two counting matrices."
    )
    parser.parse_args(argv)

    first = create_matrix(4, 4)
    second = create_matrix(4, 4)
    product = matrix_multiply(first, second)
    print(format_matrix(first))
    print("---------------")
    print(format_matrix(second))
    print("---------------")
    print(format_matrix(product))
    return 0