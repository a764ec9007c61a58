import unittest

from cell_address import CellAddress, CellRange


class CellAddressTests(unittest.TestCase):
    def test_rejects_negative_indices(self):
        with self.assertRaises(ValueError):
            CellAddress(-1, 0)
        with self.assertRaises(ValueError):
            CellAddress(0, -1)

    def test_moved_saturates_at_zero(self):
        self.assertEqual(CellAddress(0, 2).moved(-1, -5), CellAddress(0, 0))
        self.assertEqual(CellAddress(1, 1).moved(2, 3), CellAddress(3, 4))

    def test_clamped(self):
        self.assertEqual(CellAddress(9, 9).clamped(3, 2), CellAddress(2, 1))
        self.assertEqual(CellAddress(1, 0).clamped(3, 2), CellAddress(1, 0))


class CellRangeTests(unittest.TestCase):
    def test_corners_are_normalized(self):
        rng = CellRange(CellAddress(3, 1), CellAddress(0, 4))

        self.assertEqual(rng.start, CellAddress(0, 1))
        self.assertEqual(rng.end, CellAddress(3, 4))
        self.assertEqual(rng.row_span, 4)
        self.assertEqual(rng.column_span, 4)

    def test_construction_does_not_check_any_grid(self):
        rng = CellRange.from_corners(100, 100, 200, 200)

        self.assertFalse(rng.fits(10, 10))
        self.assertTrue(rng.fits(201, 201))

    def test_contains_and_addresses(self):
        rng = CellRange.from_corners(0, 0, 1, 1)

        self.assertTrue(rng.contains(CellAddress(1, 0)))
        self.assertFalse(rng.contains(CellAddress(2, 0)))
        self.assertEqual(
            list(rng.addresses()),
            [CellAddress(0, 0), CellAddress(0, 1), CellAddress(1, 0), CellAddress(1, 1)],
        )

    def test_single(self):
        rng = CellRange.single(CellAddress(2, 3))
        self.assertEqual((rng.row_span, rng.column_span), (1, 1))


if __name__ == "__main__":
    unittest.main()
