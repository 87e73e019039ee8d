"""Tests for the piece factory and rotation."""
import copy
import unittest

from blockfall_piece import PIECE_TYPES, SHAPES, Piece, create_piece, rotate_cw


class TestCreatePiece(unittest.TestCase):

    def test_all_seven_types(self):
        self.assertEqual(sorted(PIECE_TYPES), sorted("TOLJISZ"))

    def test_colour_index_unique_per_type(self):
        seen = {}
        for t in PIECE_TYPES:
            values = {v for row in create_piece(t) for v in row if v}
            self.assertEqual(len(values), 1, t)
            seen[t] = values.pop()
        self.assertEqual(sorted(seen.values()), list(range(1, 8)))

    def test_four_cells_each(self):
        for t in PIECE_TYPES:
            self.assertEqual(sum(1 for row in create_piece(t) for v in row if v), 4, t)

    def test_exact_shapes(self):
        self.assertEqual(create_piece("T"), [[0, 1, 0], [1, 1, 1], [0, 0, 0]])
        self.assertEqual(create_piece("O"), [[2, 2], [2, 2]])
        self.assertEqual(create_piece("I"), [[0, 5, 0, 0]] * 4)
        self.assertEqual(create_piece("Z"), [[7, 7, 0], [0, 7, 7], [0, 0, 0]])

    def test_returns_fresh_copy(self):
        a = create_piece("L")
        a[0][0] = 9
        self.assertEqual(create_piece("L")[0][0], 0)
        self.assertEqual(SHAPES["L"][0][0], 0)

    def test_unknown_type(self):
        with self.assertRaises(KeyError):
            create_piece("X")


class TestRotate(unittest.TestCase):

    def test_rotate_t_clockwise(self):
        m = create_piece("T")
        rotate_cw(m)
        self.assertEqual(m, [[0, 1, 0], [0, 1, 1], [0, 1, 0]])

    def test_rotate_i_to_horizontal(self):
        m = create_piece("I")
        rotate_cw(m)
        self.assertEqual(m[1], [5, 5, 5, 5])
        self.assertEqual(sum(1 for row in m for v in row if v), 4)

    def test_four_rotations_is_identity(self):
        for t in PIECE_TYPES:
            m = create_piece(t)
            original = copy.deepcopy(m)
            for _ in range(4):
                rotate_cw(m)
            self.assertEqual(m, original, t)

    def test_rotates_in_place(self):
        m = create_piece("S")
        rows = list(m)
        rotate_cw(m)
        self.assertTrue(all(a is b for a, b in zip(rows, m)))


class TestPiece(unittest.TestCase):

    def test_rejects_non_square(self):
        with self.assertRaises(ValueError):
            Piece([[1, 1, 1, 1]])
        with self.assertRaises(ValueError):
            Piece([[0, 1, 0], [1, 1, 1]])
        with self.assertRaises(ValueError):
            Piece([])

    def test_spawn_is_centred_on_top_row(self):
        self.assertEqual((Piece.spawn(create_piece("O")).x, Piece.spawn(create_piece("O")).y), (4, 0))
        self.assertEqual(Piece.spawn(create_piece("T")).x, 4)
        self.assertEqual(Piece.spawn(create_piece("I")).x, 3)


if __name__ == "__main__":
    unittest.main()
