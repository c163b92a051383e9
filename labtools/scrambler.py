"""Random shuffles of +1/-1 sequences and their prefix-sum signs."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import MutableSequence, Sequence
from itertools import accumulate


def prefix_sum(values: Sequence[int], last: int) -> int:
    """Return the sum of the first ``last`` elements (zero when ``last`` <= 0)."""
    return sum(values[: max(last, 0)])


def non_negative_prefix_sum(values: Sequence[int]) -> bool:
    """Tell whether no proper prefix of ``values`` has a negative sum.

    Prefixes of length 0 up to ``len(values) - 1`` are checked; a lone
    element is judged by its own sign.
    """
    if len(values) == 1 and values[0] < 0:
        return False
    return all(total >= 0 for total in accumulate(values[:-1], initial=0))


def non_positive_prefix_sum(values: Sequence[int]) -> bool:
    """Tell whether no proper prefix of ``values`` has a positive sum.

    Prefixes of length 0 up to ``len(values) - 1`` are checked; a lone
    element is judged by its own sign.
    """
    if len(values) == 1 and values[0] > 0:
        return False
    return all(total <= 0 for total in accumulate(values[:-1], initial=0))


def fisher_yates(values: MutableSequence[int], rng: random.Random | None = None) -> None:
    """Shuffle ``values`` in place with the Fisher-Yates algorithm."""
    if rng is None:
        rng = random.Random()
    length = len(values)
    for i in range(length - 1):
        j = i + rng.randrange(length - i)
        values[i], values[j] = values[j], values[i]


def make_array(length: int) -> list[int]:
    """Return ``length`` values: +1 in the first half, -1 in the rest."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    half = length // 2
    return [1] * half + [-1] * (length - half)


def simulation(
    n_tests: int, n: int, rng: random.Random | None = None
) -> tuple[int, int]:
    """Shuffle a balanced sequence of ``2 * n`` values ``n_tests`` times.

    Returns how many shuffles had only non-positive and only non-negative
    proper prefix sums, in that order.
    """
    if n < 0:
        raise ValueError(f"vector size must not be negative, got {n}")
    if rng is None:
        rng = random.Random()
    values = make_array(2 * n)
    total_non_positive = 0
    total_non_negative = 0
    for _ in range(n_tests):
        fisher_yates(values, rng)
        if non_positive_prefix_sum(values):
            total_non_positive += 1
        if non_negative_prefix_sum(values):
            total_non_negative += 1
    return total_non_positive, total_non_negative


def _ask(prompt: str, given: int | None) -> int:
    if given is not None:
        return given
    print(prompt)
    return int(input())


def _ratio(count: int, runs: int) -> float:
    return count / runs if runs else math.nan


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shuffle simulation and report the counts and fractions."""
    parser = argparse.ArgumentParser(
        description="Count shuffles whose prefix sums keep one sign."
    )
    parser.add_argument("runs", type=int, nargs="?", help="number of runs")
    parser.add_argument("vector_size", type=int, nargs="?", help="half the sequence length")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    runs = _ask("Enter number of runs: ", args.runs)
    vector_size = _ask("Enter vector_size ", args.vector_size)
    non_positive, non_negative = simulation(runs, vector_size, random.Random(args.seed))

    print(f"non positive: {non_positive}")
    print(f"non negative: {non_negative}")
    print(f"percent non-positive: {_ratio(non_positive, runs):g}")
    print(f"percent non-negative: {_ratio(non_negative, runs):g}")
    return 0