"""Tests for the window geometry used by the renderer."""
import unittest

from blockfall_config import COLS, ROWS
from blockfall_render import MARGIN, PREVIEW_COLS, Dims


class TestDims(unittest.TestCase):

    def test_board_size_follows_cell(self):
        d = Dims.for_cell(30)
        self.assertEqual((d.board_w, d.board_h), (COLS * 30, ROWS * 30))
        self.assertEqual((d.board_x, d.board_y), (MARGIN, MARGIN))

    def test_panel_sits_right_of_board(self):
        d = Dims.for_cell(30)
        self.assertEqual(d.panel_x, d.board_x + d.board_w + MARGIN)
        self.assertEqual(d.total_w, d.panel_x + d.panel_w + MARGIN)
        self.assertEqual(d.total_h, d.board_h + 2 * MARGIN)

    def test_preview_fits_panel(self):
        for cell in (16, 30, 48, 64):
            d = Dims.for_cell(cell)
            self.assertGreaterEqual(d.preview_cell, 14)
            self.assertLessEqual(PREVIEW_COLS * d.preview_cell + 24, d.panel_w)

    def test_small_cells_keep_minimum_panel(self):
        self.assertEqual(Dims.for_cell(16).panel_w, 220)
        self.assertEqual(Dims.for_cell(64).panel_w, PREVIEW_COLS * 48 + 24)


if __name__ == "__main__":
    unittest.main()
