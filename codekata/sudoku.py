"""Sudoku checking and solving on 9x9 boards of '1'-'9' and '.' for empty cells."""

from __future__ import annotations

from typing import Iterator, Sequence

EMPTY = "."
DIGITS = "123456789"

Board = list[list[str]]


def can_place(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    """Return True if ``digit`` is absent from the row, column and box of the cell."""
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    return all(
        board[row][i] != digit
        and board[i][col] != digit
        and board[box_row + i // 3][box_col + i % 3] != digit
        for i in range(9)
    )


def _empty_cells(board: Sequence[Sequence[str]]) -> Iterator[tuple[int, int]]:
    for row, cells in enumerate(board):
        for col, cell in enumerate(cells):
            if cell == EMPTY:
                yield row, col


def solve_sudoku(board: Board) -> bool:
    """Fill the empty cells of ``board`` in place by backtracking.

    Returns True when a solution was found; otherwise the board is left as it was.
    """
    cell = next(_empty_cells(board), None)
    if cell is None:
        return True
    row, col = cell
    for digit in DIGITS:
        if can_place(board, row, col, digit):
            board[row][col] = digit
            if solve_sudoku(board):
                return True
            board[row][col] = EMPTY
    return False


def _units() -> Iterator[list[tuple[int, int]]]:
    for i in range(9):
        yield [(i, j) for j in range(9)]
        yield [(j, i) for j in range(9)]
        box_row, box_col = 3 * (i // 3), 3 * (i % 3)
        yield [(box_row + j // 3, box_col + j % 3) for j in range(9)]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True if no row, column or 3x3 box repeats a filled digit."""
    for unit in _units():
        filled = [board[r][c] for r, c in unit if board[r][c] != EMPTY]
        if len(filled) != len(set(filled)):
            return False
    return True


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board as nine lines of space-separated cells."""
    return "\n".join(" ".join(row) for row in board)