import pytest

from blind75.grids import exist, find_words, num_islands, pacific_atlantic


def _grid(rows):
    return [list(row) for row in rows]


@pytest.mark.parametrize(
    "rows, expected",
    [
        (["11110", "11010", "11000", "00000"], 1),
        (["11000", "11000", "00100", "00011"], 3),
        ([], 0),
    ],
)
def test_num_islands(rows, expected):
    assert num_islands(_grid(rows)) == expected


BOARD_ONE = _grid(["ABCE", "SFCS", "ADEE"])
BOARD_TWO = _grid(["oaan", "etae", "ihkr", "iflv"])


def test_find_words_first_board():
    assert find_words(BOARD_ONE, ["ABCCED", "SEE", "ABCB"]) == ["ABCCED", "SEE"]


def test_find_words_second_board():
    assert find_words(BOARD_TWO, ["oath", "pea", "eat", "rain"]) == ["oath", "eat"]


@pytest.mark.parametrize(
    "word, expected", [("ABCCED", True), ("SEE", True), ("ABCB", False), ("A", True)]
)
def test_exist(word, expected):
    assert exist(BOARD_ONE, word) is expected


def test_exist_rejects_empty_word():
    with pytest.raises(ValueError):
        exist(BOARD_ONE, "")


def test_pacific_atlantic():
    matrix = [
        [1, 2, 2, 3, 5],
        [3, 2, 3, 4, 4],
        [2, 4, 5, 3, 1],
        [6, 7, 1, 4, 5],
        [5, 1, 1, 2, 4],
    ]
    assert pacific_atlantic(matrix) == [
        [0, 4],
        [1, 3],
        [1, 4],
        [2, 2],
        [3, 0],
        [3, 1],
        [4, 0],
    ]


def test_pacific_atlantic_empty():
    assert pacific_atlantic([]) == []


def test_pacific_atlantic_single_cell():
    assert pacific_atlantic([[7]]) == [[0, 0]]