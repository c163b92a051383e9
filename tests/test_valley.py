import random

import pytest

from labtools.valley import (
    check_array_start_positive,
    fisher_yates,
    lowest_valley,
    non_negative_sum,
    non_positive_sum,
    p2_p1,
    prefix_sum,
    set_up_list,
    success_rate,
    swap,
)

NUM_0 = [1, 1, 0, 4]
NUM_1 = [0, 0, 0, 9]
NUM_2 = [1, 2, 3, 4]
NUM_3 = [0]
NUM_4 = []
NUM_5 = [-1, -2, -4]
NUM_6 = [-2, 0, 2, -3]
NUM_7 = [-1, -3, -5, 10]
NUM_8 = [10, 10, 10, -40]
NUM_9 = [1, 2, 3, 4, 5, 6, 7, 8, 9]
NUM_10 = [-1, -2, -3, -4, -5, -6, -7, -8, -9]


def test_set_up_list():
    assert set_up_list(5) == [1, 1, -1, -1, -1]
    assert set_up_list(7) == [1, 1, 1, -1, -1, -1, -1]
    assert set_up_list(3) == [1, -1, -1]


def test_set_up_list_rejects_negative():
    with pytest.raises(ValueError):
        set_up_list(-1)


def test_swap():
    lst2 = [2, 4, 5, 6]
    lst3 = [5, 10, 21, 92, 45]
    lst4 = [9, 8, 7, 6, 5, 4, 3, 2]
    swap(lst2, 0, 1)
    swap(lst3, 2, 3)
    swap(lst4, 0, 3)
    assert lst2[0] == 4
    assert lst2[1] == 2
    assert lst3[2] == 92
    assert lst3[3] == 21
    assert lst4[0] == 6
    assert lst4[3] == 9


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (NUM_0, True),
        (NUM_1, True),
        (NUM_2, True),
        (NUM_3, True),
        (NUM_4, True),
        (NUM_9, True),
        (NUM_5, False),
        (NUM_6, False),
        (NUM_7, False),
        (NUM_8, False),
        (NUM_10, False),
    ],
)
def test_non_negative_sum(values, expected):
    assert non_negative_sum(values) is expected


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (NUM_0, False),
        (NUM_1, False),
        (NUM_2, False),
        (NUM_3, True),
        (NUM_4, True),
        (NUM_9, False),
        (NUM_5, True),
        (NUM_6, True),
        (NUM_7, False),
        (NUM_8, False),
        (NUM_10, True),
    ],
)
def test_non_positive_sum(values, expected):
    assert non_positive_sum(values) is expected


def test_check_array_start_positive():
    assert check_array_start_positive([1, 1, 1, -1, -1, -1, -1]) is True
    assert check_array_start_positive([1, -1, 1, -1, -1, -1, 1]) is True
    assert check_array_start_positive([-1, -1, -1, 1, 1]) is False
    assert check_array_start_positive([]) is False


def test_lowest_valley_and_rotation():
    lst2 = [1, -1, 1, -1, -1, -1, 1]
    lowest = lowest_valley(lst2)
    assert lowest == 5
    assert p2_p1(lst2, lowest) == [1, 1, -1, 1, -1, -1]


def test_lowest_valley_and_rotation_longer():
    test_lst1 = [1, -1, -1, 1, 1, -1, -1, 1]
    lowest = lowest_valley(test_lst1)
    assert lowest == 2
    rotated = p2_p1(test_lst1, lowest)
    assert rotated[:5] == [1, 1, -1, -1, 1]


def test_lowest_valley_at_end():
    test_lst2 = [1, -1, -1]
    lowest = lowest_valley(test_lst2)
    assert lowest == 2
    assert p2_p1(test_lst2, lowest) == [1, -1]


def test_lowest_valley_empty_raises():
    with pytest.raises(ValueError):
        lowest_valley([])


def test_p2_p1_drops_one_element():
    values = [1, -1, 1, -1, -1, -1, 1]
    rotated = p2_p1(values, 3)
    assert len(rotated) == len(values) - 1
    assert sorted(rotated + [values[3]]) == sorted(values)


def test_prefix_sum():
    assert prefix_sum(NUM_9, len(NUM_9)) == sum(NUM_9)
    assert prefix_sum(NUM_9, 0) == 0
    assert prefix_sum(NUM_8, 3) == sum(NUM_8[:3])


def test_fisher_yates_is_a_permutation():
    values = set_up_list(21)
    fisher_yates(values, random.Random(4))
    assert sorted(values) == sorted(set_up_list(21))


def test_fisher_yates_is_reproducible_with_seed():
    first = list(range(12))
    second = list(range(12))
    fisher_yates(first, random.Random(11))
    fisher_yates(second, random.Random(11))
    assert first == second


def test_success_rate_within_bounds():
    rate = success_rate(5, 200, random.Random(2))
    assert 0.0 <= rate <= 1.0


def test_success_rate_single_negative_never_balances():
    assert success_rate(0, 5, random.Random(0)) == 0.0


def test_success_rate_rejects_no_trials():
    with pytest.raises(ValueError):
        success_rate(3, 0)