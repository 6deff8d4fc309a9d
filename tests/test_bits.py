import pytest

from blind75.bits import (
    count_bits,
    get_sum,
    hamming_weight,
    hamming_weight_kernighan,
    reverse_bits,
)


@pytest.mark.parametrize(
    "num, expected", [(43261596, 964176192), (4294967293, 3221225471)]
)
def test_reverse_bits(num, expected):
    assert reverse_bits(num) == expected


@pytest.mark.parametrize("num", [0, 1, 43261596, 4294967295, 123456789])
def test_reverse_bits_round_trip(num):
    assert reverse_bits(reverse_bits(num)) == num


def test_reverse_bits_out_of_range():
    with pytest.raises(ValueError):
        reverse_bits(1 << 32)


@pytest.mark.parametrize("solver", [hamming_weight, hamming_weight_kernighan])
@pytest.mark.parametrize(
    "num, expected", [(5, 2), (13, 3), (0, 0), (11, 3), (4294967293, 31)]
)
def test_hamming_weight(solver, num, expected):
    assert solver(num) == expected


def test_hamming_weight_negative():
    with pytest.raises(ValueError):
        hamming_weight_kernighan(-1)


@pytest.mark.parametrize(
    "num, expected", [(2, [0, 1, 1]), (5, [0, 1, 1, 2, 1, 2]), (0, [0])]
)
def test_count_bits(num, expected):
    assert count_bits(num) == expected


def test_count_bits_rejects_negative():
    with pytest.raises(ValueError):
        count_bits(-2)


@pytest.mark.parametrize(
    "a, b, expected", [(1, 2, 3), (-2, 3, 1), (0, 5, 5), (-5, -7, -12), (7, 0, 7)]
)
def test_get_sum(a, b, expected):
    assert get_sum(a, b) == expected


def test_get_sum_wraps_like_int64():
    assert get_sum((1 << 63) - 1, 1) == -(1 << 63)