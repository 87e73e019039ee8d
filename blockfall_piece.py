"""Piece model, canonical shapes, in-place rotation"""
from dataclasses import dataclass
from typing import List

from blockfall_config import COLS

Matrix = List[List[int]]

PIECE_TYPES = ["T", "O", "L", "J", "I", "S", "Z"]

SHAPES = {
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "O": [[2,2],[2,2]],
    "L": [[0,0,3],[3,3,3],[0,0,0]],
    "J": [[4,0,0],[4,4,4],[0,0,0]],
    "I": [[0,5,0,0],[0,5,0,0],[0,5,0,0],[0,5,0,0]],
    "S": [[0,6,6],[6,6,0],[0,0,0]],
    "Z": [[7,7,0],[0,7,7],[0,0,0]],
}


def create_piece(t: str) -> Matrix:
    """Return a fresh copy of the shape for piece type ``t``."""
    return [row[:] for row in SHAPES[t]]


def rotate_cw(m: Matrix) -> None:
    """Rotate a square matrix clockwise in place: transpose, then reverse rows."""
    for y in range(len(m)):
        for x in range(y):
            m[x][y], m[y][x] = m[y][x], m[x][y]
    for row in m:
        row.reverse()


@dataclass
class Piece:
    shape: Matrix
    x: int = 0
    y: int = 0

    def __post_init__(self):
        n = len(self.shape)
        if n == 0 or any(len(r) != n for r in self.shape):
            raise ValueError("piece shape must be a non-empty square matrix")

    @staticmethod
    def spawn(shape: Matrix) -> "Piece":
        return Piece(shape, (COLS // 2) - (len(shape[0]) // 2), 0)

