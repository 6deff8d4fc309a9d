import pytest

from blind75.arrays import (
    Interval,
    can_attend_meetings,
    contains_duplicate,
    erase_overlap_intervals,
    erase_overlap_intervals_greedy,
    find_min,
    find_min_binary,
    find_min_linear,
    length_of_lis,
    length_of_lis_fast,
    longest_consecutive,
    longest_consecutive_brute_force,
    longest_consecutive_union_find,
    max_product,
    min_meeting_rooms,
    missing_number,
    product_except_self,
    top_k_frequent,
)

CONSECUTIVE_CASES = [
    ([], 0),
    ([0], 1),
    ([9, 1, 4, 7, 3, -1, 0, 5, 8, -1, 6], 7),
    ([2147483646, -2147483647, 0, 2, 2147483644, -2147483645, 2147483645], 3),
    ([100, 4, 200, 1, 3, 2], 4),
]


@pytest.mark.parametrize(
    "solver",
    [longest_consecutive, longest_consecutive_union_find, longest_consecutive_brute_force],
)
@pytest.mark.parametrize("nums, expected", CONSECUTIVE_CASES)
def test_longest_consecutive(solver, nums, expected):
    assert solver(nums) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [([-2], -2), ([3, -1, 4], 4), ([0], 0), ([2, 3, -2, 4], 6), ([-2, 0, -1], 0)],
)
def test_max_product(nums, expected):
    assert max_product(nums) == expected


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


FIND_MIN_CASES = [
    ([5, 1, 2, 3, 4], 1),
    ([1], 1),
    ([1, 2], 1),
    ([2, 1], 1),
    ([2, 3, 1], 1),
    ([1, 2, 3], 1),
    ([3, 4, 5, 1, 2], 1),
    ([4, 5, 6, 7, 0, 1, 2], 0),
]


@pytest.mark.parametrize("solver", [find_min, find_min_binary, find_min_linear])
@pytest.mark.parametrize("nums, expected", FIND_MIN_CASES)
def test_find_min(solver, nums, expected):
    assert solver(nums) == expected


def test_find_min_empty():
    with pytest.raises(ValueError):
        find_min([])
    assert find_min_binary([]) == 0


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 1], True), ([1, 2, 3, 4], False), ([1, 1, 1, 3, 3, 4, 3, 2, 4, 2], True)],
)
def test_contains_duplicate(nums, expected):
    assert contains_duplicate(nums) is expected


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 4], [24, 12, 8, 6]), ([-1, 1, 0, -3, 3], [0, 0, 9, 0, 0]), ([], [])],
)
def test_product_except_self(nums, expected):
    assert product_except_self(nums) == expected


@pytest.mark.parametrize(
    "nums, expected", [([3, 0, 1], 2), ([9, 6, 4, 2, 3, 5, 7, 0, 1], 8)]
)
def test_missing_number(nums, expected):
    assert missing_number(nums) == expected


@pytest.mark.parametrize(
    "nums, k, expected", [([1, 1, 1, 2, 2, 3], 2, [1, 2]), ([1], 1, [1])]
)
def test_top_k_frequent(nums, k, expected):
    assert top_k_frequent(nums, k) == expected


def test_top_k_frequent_too_many():
    with pytest.raises(ValueError):
        top_k_frequent([1, 2], 3)


@pytest.mark.parametrize("solver", [length_of_lis, length_of_lis_fast])
@pytest.mark.parametrize(
    "nums, expected", [([10, 9, 2, 5, 3, 7, 101, 18], 4), ([], 0), ([7, 7, 7], 1)]
)
def test_length_of_lis(solver, nums, expected):
    assert solver(nums) == expected


@pytest.mark.parametrize("solver", [erase_overlap_intervals, erase_overlap_intervals_greedy])
@pytest.mark.parametrize(
    "intervals, expected",
    [
        ([[1, 2], [2, 3], [3, 4], [1, 3]], 1),
        ([[1, 2], [1, 2], [1, 2]], 2),
        ([[1, 2], [2, 3]], 0),
        ([], 0),
    ],
)
def test_erase_overlap_intervals(solver, intervals, expected):
    assert solver(intervals) == expected


def test_erase_overlap_does_not_mutate_input():
    intervals = [[3, 4], [1, 2]]
    erase_overlap_intervals_greedy(intervals)
    assert intervals == [[3, 4], [1, 2]]


def test_can_attend_meetings():
    assert can_attend_meetings([Interval(0, 30), Interval(5, 10), Interval(15, 20)]) is False
    assert can_attend_meetings([Interval(9, 15), Interval(5, 8)]) is True
    assert can_attend_meetings([Interval(1, 5), Interval(5, 8)]) is True


@pytest.mark.parametrize(
    "intervals, expected",
    [([[0, 30], [5, 10], [15, 20]], 2), ([[7, 10], [2, 4]], 1), ([], 0), ([[1, 5], [5, 8]], 1)],
)
def test_min_meeting_rooms(intervals, expected):
    assert min_meeting_rooms(intervals) == expected


def test_min_meeting_rooms_negative():
    with pytest.raises(ValueError):
        min_meeting_rooms([[-1, 3]])