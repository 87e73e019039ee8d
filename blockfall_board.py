"""Board helpers: create, collide, merge, sweep, ghost"""
from typing import List

from blockfall_config import COLS, ROWS
from blockfall_piece import Matrix

Board = List[List[int]]


def create_board(w: int = COLS, h: int = ROWS) -> Board:
    return [[0] * w for _ in range(h)]


def clear(board: Board) -> None:
    """Reset every cell to empty without replacing the row lists."""
    for row in board:
        for x in range(len(row)):
            row[x] = 0


def collide(board: Board, shape: Matrix, x: int, y: int) -> bool:
    """Return True if ``shape`` anchored at (x, y) hits a wall, the floor or a block.

    Cells above the top of the board never collide.
    """
    for dy, row in enumerate(shape):
        for dx, v in enumerate(row):
            if not v:
                continue
            bx, by = x + dx, y + dy
            if bx < 0 or bx >= COLS or by >= ROWS:
                return True
            if by >= 0 and board[by][bx]:
                return True
    return False


def merge(board: Board, shape: Matrix, x: int, y: int) -> None:
    """Copy the shape's filled cells into the board (no collision check)."""
    for dy, row in enumerate(shape):
        for dx, v in enumerate(row):
            if v and y + dy >= 0:
                board[y + dy][x + dx] = v


def sweep(board: Board) -> int:
    """Clear full lines and return the number of cleared rows."""
    cleared = 0
    y = len(board) - 1
    while y >= 0:
        if all(board[y]):
            row = board.pop(y)
            for x in range(len(row)):
                row[x] = 0
            board.insert(0, row)
            cleared += 1
        else:
            y -= 1
    return cleared


def ghost_y(board: Board, shape: Matrix, x: int, y: int) -> int:
    """Return the y the shape would come to rest at if dropped from (x, y)."""
    while not collide(board, shape, x, y + 1):
        y += 1
    return y
