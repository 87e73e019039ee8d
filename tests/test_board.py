"""Tests for collision, merge, sweep and ghost projection."""
import copy
import unittest

from blockfall_board import create_board, clear, collide, merge, sweep, ghost_y
from blockfall_config import COLS, ROWS
from blockfall_piece import create_piece


def full_row(v=1):
    return [v] * COLS


class TestCollide(unittest.TestCase):

    def setUp(self):
        self.board = create_board()

    def test_empty_board_in_bounds(self):
        self.assertFalse(collide(self.board, create_piece("O"), 0, 0))
        self.assertFalse(collide(self.board, create_piece("O"), COLS - 2, ROWS - 2))

    def test_left_and_right_walls(self):
        self.assertTrue(collide(self.board, create_piece("O"), -1, 5))
        self.assertTrue(collide(self.board, create_piece("O"), COLS - 1, 5))

    def test_empty_columns_of_shape_may_leave_board(self):
        # I sits in column 1 of its 4x4 box
        self.assertFalse(collide(self.board, create_piece("I"), -1, 0))
        self.assertTrue(collide(self.board, create_piece("I"), -2, 0))
        self.assertFalse(collide(self.board, create_piece("I"), COLS - 2, 0))

    def test_floor(self):
        self.assertFalse(collide(self.board, create_piece("O"), 4, ROWS - 2))
        self.assertTrue(collide(self.board, create_piece("O"), 4, ROWS - 1))

    def test_above_top_never_collides(self):
        self.assertFalse(collide(self.board, create_piece("O"), 4, -5))
        self.board[0] = full_row()
        self.assertFalse(collide(self.board, create_piece("O"), 4, -2))
        self.assertTrue(collide(self.board, create_piece("O"), 4, -1))

    def test_occupied_cell(self):
        self.board[10][5] = 3
        self.assertTrue(collide(self.board, create_piece("O"), 4, 9))
        self.assertTrue(collide(self.board, create_piece("O"), 5, 10))
        self.assertFalse(collide(self.board, create_piece("O"), 6, 9))
        self.assertFalse(collide(self.board, create_piece("O"), 4, 7))

    def test_empty_shape_cells_ignore_blocks(self):
        # T's bottom row is empty, so the block under it does not count
        self.board[2][4] = 1
        self.assertFalse(collide(self.board, create_piece("T"), 3, 0))

    def test_does_not_mutate(self):
        self.board[19] = full_row(2)
        before = copy.deepcopy(self.board)
        shape = create_piece("J")
        collide(self.board, shape, 3, 17)
        self.assertEqual(self.board, before)
        self.assertEqual(shape, create_piece("J"))


class TestMergeAndClear(unittest.TestCase):

    def test_merge_copies_values(self):
        board = create_board()
        merge(board, create_piece("O"), 4, 18)
        self.assertEqual(board[18][4:6], [2, 2])
        self.assertEqual(board[19][4:6], [2, 2])
        self.assertEqual(sum(v for row in board for v in row), 8)

    def test_merge_skips_cells_above_board(self):
        board = create_board()
        merge(board, create_piece("I"), 0, -2)
        self.assertEqual([board[y][1] for y in range(3)], [5, 5, 0])

    def test_clear_keeps_rows(self):
        board = create_board()
        rows = list(board)
        board[3][3] = 4
        clear(board)
        self.assertTrue(all(a is b for a, b in zip(rows, board)))
        self.assertFalse(any(v for row in board for v in row))


class TestSweep(unittest.TestCase):

    def test_no_full_rows(self):
        board = create_board()
        board[19] = full_row()
        board[19][0] = 0
        board[5][5] = 7
        before = copy.deepcopy(board)
        self.assertEqual(sweep(board), 0)
        self.assertEqual(board, before)

    def test_single_row(self):
        board = create_board()
        board[19] = full_row()
        board[18][2] = 6
        self.assertEqual(sweep(board), 1)
        self.assertEqual(len(board), ROWS)
        self.assertEqual(board[19][2], 6)
        self.assertEqual(board[0], [0] * COLS)

    def test_rows_two_and_five(self):
        board = create_board()
        for y in range(ROWS):
            board[y][0] = y + 1 if y not in (2, 5) else 0
        board[2] = full_row(3)
        board[5] = full_row(4)
        self.assertEqual(sweep(board), 2)
        self.assertEqual(len(board), ROWS)
        self.assertEqual(board[0], [0] * COLS)
        self.assertEqual(board[1], [0] * COLS)
        # rows 0, 1, 3, 4 moved down; rows below 5 stay put
        self.assertEqual([board[y][0] for y in range(2, 6)], [1, 2, 4, 5])
        self.assertEqual([board[y][0] for y in range(6, ROWS)], list(range(7, ROWS + 1)))

    def test_adjacent_full_rows(self):
        board = create_board()
        board[16][0] = 9
        for y in (17, 18, 19):
            board[y] = full_row()
        self.assertEqual(sweep(board), 3)
        self.assertEqual(board[19][0], 9)
        self.assertEqual(sum(1 for row in board for v in row if v), 1)

    def test_four_rows(self):
        board = create_board()
        for y in range(16, 20):
            board[y] = full_row(5)
        self.assertEqual(sweep(board), 4)
        self.assertEqual(board, create_board())


class TestGhost(unittest.TestCase):

    def test_lands_on_floor(self):
        board = create_board()
        self.assertEqual(ghost_y(board, create_piece("O"), 4, 0), ROWS - 2)
        self.assertEqual(ghost_y(board, create_piece("I"), 3, 0), ROWS - 4)

    def test_lands_on_stack(self):
        board = create_board()
        board[15][4] = 1
        self.assertEqual(ghost_y(board, create_piece("O"), 4, 0), 13)
        self.assertEqual(ghost_y(board, create_piece("O"), 3, 0), 13)
        self.assertEqual(ghost_y(board, create_piece("O"), 5, 0), 18)

    def test_already_resting(self):
        board = create_board()
        self.assertEqual(ghost_y(board, create_piece("O"), 0, 18), 18)


if __name__ == "__main__":
    unittest.main()
