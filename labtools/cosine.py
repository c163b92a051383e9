"""Cosine similarity between every pair of two-dimensional vectors read from a file."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = "double_vectors.txt"


@dataclass
class DoubleVector:
    """A numbered two-dimensional vector."""

    id: int = -1
    from_: float = 0.0
    to: float = 0.0


@dataclass
class Pair:
    """The coordinates of the first vector of a pair and the pair's cosine."""

    from_: float
    to: float
    dist: float


def _numbers(text: str) -> Iterable[float]:
    for token in text.split():
        try:
            yield float(token)
        except ValueError:
            return


def read_file(path: str | Path) -> list[DoubleVector]:
    """Read whitespace-separated number pairs, numbering the vectors from 0.

    Reading stops at the first token that is not a number; an odd number left
    over is ignored. A file that cannot be opened gives an empty list.
    """
    try:
        text = Path(path).read_text()
    except OSError:
        return []
    numbers = iter(_numbers(text))
    return [
        DoubleVector(index, start, end)
        for index, (start, end) in enumerate(zip(numbers, numbers))
    ]


def dot_prod(v1: DoubleVector, v2: DoubleVector) -> float:
    """Return the dot product of two vectors."""
    return v1.from_ * v2.from_ + v1.to * v2.to


def vector_len(v: DoubleVector) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(dot_prod(v, v))


def cosine_dist(v1: DoubleVector, v2: DoubleVector) -> float:
    """Return the cosine of the angle between two vectors (NaN for a zero vector)."""
    lengths = vector_len(v1) * vector_len(v2)
    if lengths == 0:
        return math.nan
    return dot_prod(v1, v2) / lengths


def calculate_cosine_pairs(vectors: Sequence[DoubleVector]) -> list[Pair]:
    """Return one entry for each unordered pair of vectors, in input order.

    Each entry carries the coordinates of the earlier vector of its pair.
    """
    return [
        Pair(first.from_, first.to, cosine_dist(first, second))
        for index, first in enumerate(vectors)
        for second in vectors[index + 1 :]
    ]


def sorted_pairs(pairs: Iterable[Pair]) -> list[Pair]:
    """Return the pairs ordered by increasing cosine."""
    return sorted(pairs, key=lambda pair: pair.dist)


def main(argv: Sequence[str] | None = None) -> int:
    """Print every pair's cosine, smallest first."""
    parser = argparse.ArgumentParser(
        description="List cosines between all pairs of vectors in a file."
    )
    parser.add_argument(
        "path", nargs="?", default=DEFAULT_INPUT, help="file of number pairs"
    )
    args = parser.parse_args(argv)

    for pair in sorted_pairs(calculate_cosine_pairs(read_file(args.path))):
        print(f"({pair.from_:g}, {pair.to:g})= {pair.dist:g}")
    return 0