"""Grid search problems."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_LOWEST_HEIGHT = -(2**31)


def _in_board(board: Sequence[Sequence], x: int, y: int) -> bool:
    return 0 <= x < len(board) and 0 <= y < len(board[0])


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of ``"1"`` cells."""
    if not grid or not grid[0]:
        return 0
    visited: set[tuple[int, int]] = set()
    islands = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != "1" or (i, j) in visited:
                continue
            islands += 1
            visited.add((i, j))
            stack = [(i, j)]
            while stack:
                x, y = stack.pop()
                for dx, dy in _DIRECTIONS:
                    nx, ny = x + dx, y + dy
                    if (
                        _in_board(grid, nx, ny)
                        and (nx, ny) not in visited
                        and grid[nx][ny] == "1"
                    ):
                        visited.add((nx, ny))
                        stack.append((nx, ny))
    return islands


def _search_word(
    board: Sequence[Sequence[str]],
    visited: set[tuple[int, int]],
    word: str,
    index: int,
    x: int,
    y: int,
) -> bool:
    if index == len(word) - 1:
        return board[x][y] == word[index]
    if board[x][y] != word[index]:
        return False
    visited.add((x, y))
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if (
            _in_board(board, nx, ny)
            and (nx, ny) not in visited
            and _search_word(board, visited, word, index + 1, nx, ny)
        ):
            return True
    visited.discard((x, y))
    return False


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """True if ``word`` can be traced through adjacent cells, each used once."""
    if not word:
        raise ValueError("word must not be empty")
    visited: set[tuple[int, int]] = set()
    return any(
        _search_word(board, visited, word, 0, i, j)
        for i, row in enumerate(board)
        for j in range(len(row))
    )


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """The words, in their given order, that can be traced on the board."""
    return [word for word in words if exist(board, word)]


def _flow(
    matrix: Sequence[Sequence[int]], starts: Iterable[tuple[int, int]]
) -> set[tuple[int, int]]:
    reached: set[tuple[int, int]] = set()
    stack: list[tuple[int, int, Optional[int]]] = [
        (r, c, _LOWEST_HEIGHT) for r, c in starts
    ]
    while stack:
        r, c, height = stack.pop()
        if not _in_board(matrix, r, c) or (r, c) in reached or matrix[r][c] < height:
            continue
        reached.add((r, c))
        for dr, dc in _DIRECTIONS:
            stack.append((r + dr, c + dc, matrix[r][c]))
    return reached


def pacific_atlantic(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Cells from which water can reach both oceans, in row-major order."""
    if not matrix or not matrix[0]:
        return []
    rows, cols = len(matrix), len(matrix[0])
    pacific = _flow(
        matrix, [(i, 0) for i in range(rows)] + [(0, j) for j in range(cols)]
    )
    atlantic = _flow(
        matrix,
        [(i, cols - 1) for i in range(rows)] + [(rows - 1, j) for j in range(cols)],
    )
    return [list(cell) for cell in sorted(pacific & atlantic)]