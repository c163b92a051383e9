"""Reordering a shuffled +1/-1 sequence so its prefix sums stay balanced."""

from __future__ import annotations

import argparse
import random
from collections.abc import MutableSequence, Sequence
from itertools import accumulate


def prefix_sum(values: Sequence[int], last: int) -> int:
    """Return the sum of the first ``last`` elements (zero when ``last`` <= 0)."""
    return sum(values[: max(last, 0)])


def non_negative_prefix_sum(values: Sequence[int]) -> bool:
    """Tell whether every prefix sum, the empty and the full one included, is >= 0."""
    return all(total >= 0 for total in accumulate(values, initial=0))


def non_positive_prefix_sum(values: Sequence[int]) -> bool:
    """Tell whether every prefix sum, the empty and the full one included, is <= 0."""
    return all(total <= 0 for total in accumulate(values, initial=0))


def fisher_yates(values: MutableSequence[int], rng: random.Random | None = None) -> None:
    """Shuffle ``values`` in place with the Fisher-Yates algorithm."""
    if rng is None:
        rng = random.Random()
    length = len(values)
    for i in range(length - 1):
        j = i + rng.randrange(length - i)
        values[i], values[j] = values[j], values[i]


def make_array(length: int) -> list[int]:
    """Return ``length`` values: +1 for the first ``length // 2``, -1 for the rest."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    half = length // 2
    return [1] * half + [-1] * (length - half)


def lowest_depth(values: Sequence[int]) -> int:
    """Return the first index where the running sum is lowest.

    A sequence of one element gives 1.
    """
    if not values:
        raise ValueError("cannot find the lowest depth of an empty sequence")
    if len(values) == 1:
        return 1
    best, best_index = values[0], 0
    for index, total in enumerate(accumulate(values)):
        if total < best:
            best, best_index = total, index
    return best_index


def reorder(values: Sequence[int]) -> list[int]:
    """Drop the element at the lowest depth and rotate the rest to follow it.

    The result has one element fewer than ``values``.
    """
    if len(values) <= 1:
        return []
    lowest = lowest_depth(values)
    return list(values[lowest + 1 :]) + list(values[:lowest])


def format_array(values: Sequence[int]) -> str:
    """Return the values joined by commas."""
    return ", ".join(str(value) for value in values)


def _ask(prompt: str, given: int | None) -> int:
    if given is not None:
        return given
    print(prompt)
    return int(input())


def main(argv: Sequence[str] | None = None) -> int:
    """Shuffle and reorder sequences, printing each before and after."""
    parser = argparse.ArgumentParser(
        description="Show shuffled sequences reordered around their lowest point."
    )
    parser.add_argument("runs", type=int, nargs="?", help="number of runs")
    parser.add_argument("vector_size", type=int, nargs="?", help="half the sequence length")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    runs = _ask("Enter number of runs", args.runs)
    vector_size = _ask("Enter a value for vector_size", args.vector_size)
    rng = random.Random(args.seed)
    length = 2 * vector_size + 1

    for _ in range(runs):
        values = make_array(length)
        fisher_yates(values, rng)
        reordered = reorder(values)
        print("array 1 ")
        print(" " + format_array(values))
        print("Reordered list: " + format_array(reordered))
        print()
    return 0