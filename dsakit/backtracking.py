"""Backtracking searches: sudoku, N-queens and bitmask subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

SIZE = 9
BOX = 3

Grid = list[list[int]]


def is_safe(grid: Sequence[Sequence[int]], i: int, j: int, no: int) -> bool:
    """Return whether ``no`` can go at row ``i``, column ``j`` of a sudoku grid."""
    if any(grid[k][j] == no or grid[i][k] == no for k in range(SIZE)):
        return False
    top, left = (i // BOX) * BOX, (j // BOX) * BOX
    return all(
        grid[x][y] != no for x in range(top, top + BOX) for y in range(left, left + BOX)
    )


def _fill(board: Grid, position: int) -> bool:
    if position == SIZE * SIZE:
        return True
    i, j = divmod(position, SIZE)
    if board[i][j] != 0:
        return _fill(board, position + 1)
    for no in range(1, SIZE + 1):
        if is_safe(board, i, j, no):
            board[i][j] = no
            if _fill(board, position + 1):
                return True
    board[i][j] = 0
    return False


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid | None:
    """Solve a 9x9 sudoku where 0 marks an empty cell.

    Returns the solved grid as a new list of rows, or None when no solution
    exists. The input grid is not modified.
    """
    board = [list(row) for row in grid]
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("sudoku grid must be 9x9")
    return board if _fill(board, 0) else None


def can_place(board: Sequence[Sequence[int]], x: int, y: int) -> bool:
    """Return whether a queen at ``(x, y)`` is safe from queens in rows above."""
    n = len(board)
    if any(board[k][y] for k in range(x)):
        return False
    up_left = zip(range(x, -1, -1), range(y, -1, -1))
    up_right = zip(range(x, -1, -1), range(y, n))
    return not any(board[i][j] for i, j in (*up_left, *up_right))


def n_queen_solutions(n: int) -> Iterator[Grid]:
    """Yield every placement of ``n`` non-attacking queens as a 0/1 board."""
    board = [[0] * n for _ in range(n)]

    def place(row: int) -> Iterator[Grid]:
        if row == n:
            yield [list(r) for r in board]
            return
        for col in range(n):
            if can_place(board, row, col):
                board[row][col] = 1
                yield from place(row + 1)
                board[row][col] = 0

    return place(0)


def count_n_queens(n: int) -> int:
    """Return the number of ways to place ``n`` non-attacking queens."""
    return sum(1 for _ in n_queen_solutions(n))


def first_n_queen(n: int) -> Grid | None:
    """Return the first N-queens placement found, or None if there is none."""
    return next(n_queen_solutions(n), None)


def filter_bits(items: Sequence, mask: int) -> list:
    """Return the items whose positions are set bits of ``mask``."""
    if mask < 0 or mask >= 1 << len(items):
        raise ValueError("mask selects positions outside the items")
    return [item for bit, item in enumerate(items) if mask >> bit & 1]


def subsets_by_bits(items: Sequence) -> Iterator[list]:
    """Yield every subset of ``items``, in order of the bitmask that selects it."""
    for mask in range(1 << len(items)):
        yield filter_bits(items, mask)