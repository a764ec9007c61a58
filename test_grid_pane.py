import unittest

from cell_address import CellAddress
from grid import Grid
from grid_pane import GridPane, _fit


def _wide_grid(columns=50):
    return Grid.parse("\t".join("a" for _ in range(columns)))


def _tall_grid(rows=100):
    return Grid.parse("\n".join(str(i) for i in range(rows)))


class GridPaneGeometryTests(unittest.TestCase):
    def test_column_width_is_whole_tab_stops(self):
        grid = Grid.parse("short\t" + "y" * 9)
        pane = GridPane(grid, tab_size=8)

        self.assertEqual(pane.get_col_width(0), 8)
        self.assertEqual(pane.get_col_width(1), 16)
        # unknown columns fall back to one tab stop
        self.assertEqual(pane.get_col_width(7), 8)

    def test_gutter_grows_with_row_count(self):
        self.assertEqual(GridPane(Grid()).gutter_width(), 3)
        self.assertEqual(GridPane(_tall_grid(1000)).gutter_width(), 4)

    def test_visible_col_count_always_at_least_one(self):
        pane = GridPane(Grid.parse("x" * 200))
        self.assertEqual(pane.visible_col_count(10), 1)


class GridPaneAdjustViewportTests(unittest.TestCase):
    def test_adjust_viewport_scrolls_right_to_cursor(self):
        pane = GridPane(_wide_grid(50))

        pane.adjust_viewport(CellAddress(0, 49), 24, 80)

        # 76 usable cells hold nine 8-cell columns
        self.assertEqual(pane.col_offset, 41)
        self.assertLessEqual(pane.col_offset, 49)

    def test_adjust_viewport_scrolls_back_left(self):
        pane = GridPane(_wide_grid(50))
        pane.adjust_viewport(CellAddress(0, 49), 24, 80)

        pane.adjust_viewport(CellAddress(0, 3), 24, 80)

        self.assertEqual(pane.col_offset, 3)

    def test_adjust_viewport_rows(self):
        pane = GridPane(_tall_grid(100))

        pane.adjust_viewport(CellAddress(50, 0), 24, 80)
        self.assertEqual(pane.row_offset, 28)

        pane.adjust_viewport(CellAddress(0, 0), 24, 80)
        self.assertEqual(pane.row_offset, 0)

    def test_cursor_inside_view_does_not_scroll(self):
        pane = GridPane(_tall_grid(100))

        pane.adjust_viewport(CellAddress(10, 0), 24, 80)

        self.assertEqual((pane.row_offset, pane.col_offset), (0, 0))


class FitTests(unittest.TestCase):
    def test_fit_pads_and_truncates(self):
        self.assertEqual(_fit("ab", 4), "ab  ")
        self.assertEqual(_fit("abcdef", 3), "abc")

    def test_fit_counts_wide_characters(self):
        self.assertEqual(_fit("漢字", 3), "漢 ")


if __name__ == "__main__":
    unittest.main()
