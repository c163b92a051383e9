"""Rotating a shuffled +1/-1 sequence around its lowest valley."""

from __future__ import annotations

import argparse
import random
from collections.abc import MutableSequence, Sequence
from itertools import accumulate

_VECTOR_SIZES = range(10, 101, 10)
_RUN_COUNTS = range(1000, 25001, 2000)


def set_up_list(n: int) -> list[int]:
    """Return ``n`` values: +1 for the first ``n // 2``, -1 for the rest."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    half = n // 2
    return [1] * half + [-1] * (n - half)


def swap(values: MutableSequence[int], x: int, y: int) -> None:
    """Exchange the elements at positions ``x`` and ``y`` in place."""
    values[x], values[y] = values[y], values[x]


def fisher_yates(values: MutableSequence[int], rng: random.Random | None = None) -> None:
    """Shuffle in place, swapping each position from the end with any position."""
    if rng is None:
        rng = random.Random()
    length = len(values)
    for i in reversed(range(length)):
        swap(values, i, rng.randrange(length))


def non_negative_sum(values: Sequence[int]) -> bool:
    """Tell whether every prefix sum of ``values`` is non-negative."""
    return all(total >= 0 for total in accumulate(values))


def non_positive_sum(values: Sequence[int]) -> bool:
    """Tell whether every prefix sum of ``values`` is non-positive."""
    return all(total <= 0 for total in accumulate(values))


def check_array_start_positive(values: Sequence[int]) -> bool:
    """Tell whether ``values`` is non-empty and does not start with -1."""
    return bool(values) and values[0] != -1


def prefix_sum(values: Sequence[int], length: int) -> int:
    """Return the sum of the first ``length`` elements (zero when ``length`` <= 0)."""
    return sum(values[: max(length, 0)])


def lowest_valley(values: Sequence[int]) -> int:
    """Return the first index at which the running sum reaches its minimum."""
    if not values:
        raise ValueError("cannot find the lowest valley of an empty sequence")
    best, best_index = values[0], 0
    for index, total in enumerate(accumulate(values)):
        if total < best:
            best, best_index = total, index
    return best_index


def p2_p1(values: Sequence[int], lowest: int) -> list[int]:
    """Drop the element at ``lowest`` and put the part after it first."""
    return list(values[lowest + 1 :]) + list(values[:lowest])


def success_rate(n: int, trials: int, rng: random.Random | None = None) -> float:
    """Return the fraction of ``trials`` shuffles of ``2n + 1`` values that balance.

    A shuffle counts when it starts with +1 and its rotation around the lowest
    valley has prefix sums of a single sign.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    if rng is None:
        rng = random.Random()
    length = 2 * n + 1
    well_balanced = 0
    for _ in range(trials):
        values = set_up_list(length)
        fisher_yates(values, rng)
        if not check_array_start_positive(values):
            continue
        rotated = p2_p1(values, lowest_valley(values))
        if non_positive_sum(rotated) or non_negative_sum(rotated):
            well_balanced += 1
    return well_balanced / trials


def main(argv: Sequence[str] | None = None) -> int:
    """Report success rates for a range of sequence sizes and run counts."""
    parser = argparse.ArgumentParser(
        description="Estimate how often rotated shuffles are well balanced."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    for n in _VECTOR_SIZES:
        print(f"n = {n}")
        total = 0.0
        for runs in _RUN_COUNTS:
            result = success_rate(n, runs + 1, rng)
            total += result
            print(f"Running the process {runs} times. success rate is {result:g}")
        print(f"Average was: {total / len(_RUN_COUNTS):g}")
    return 0