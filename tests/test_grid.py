import unittest
import sys
import os

import numpy as np

# Add project root to path so we can import maze_carver
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.core.errors import InvalidDimensions, MazeError

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        rows, cols = 7, 9
        grid = Grid(rows, cols)
        self.assertEqual(len(grid.cells), rows * cols, f"Grid initialization size mismatch. Expected {rows*cols}, got {len(grid.cells)}")
        # All walls standing
        for val in grid.cells:
            self.assertEqual(val, Grid.WALL)
        self.assertEqual(grid.cell_rows, 3)
        self.assertEqual(grid.cell_cols, 4)

    def test_invalid_dimensions(self):
        for rows, cols in [(2, 2), (3, 9), (9, 3), (0, 0), (-5, 7)]:
            with self.assertRaises(InvalidDimensions):
                Grid(rows, cols)

    def test_even_dimensions_rejected(self):
        with self.assertRaises(InvalidDimensions) as ctx:
            Grid(6, 7)
        self.assertIn("odd", ctx.exception.reason)
        with self.assertRaises(InvalidDimensions):
            Grid(7, 8)

    def test_non_integer_dimensions_rejected(self):
        with self.assertRaises(InvalidDimensions):
            Grid(7.0, 7)
        with self.assertRaises(InvalidDimensions):
            Grid(True, 7)

    def test_numpy_integer_dimensions(self):
        grid = Grid(np.int64(17), np.int32(25))
        self.assertEqual((grid.rows, grid.cols), (17, 25))
        self.assertIs(type(grid.rows), int)
        with self.assertRaises(InvalidDimensions) as ctx:
            Grid(np.int64(4), 25)
        self.assertIn("at least", ctx.exception.reason)

    def test_error_hierarchy(self):
        with self.assertRaises(ValueError):
            Grid(2, 2)
        with self.assertRaises(MazeError):
            Grid(2, 2)

    def test_coordinates(self):
        grid = Grid(5, 7)
        self.assertEqual(grid.get_index(2, 3), 17) # 2 * 7 + 3

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 7)
        with self.assertRaises(IndexError):
            grid.get(5, 0)

    def test_increment(self):
        grid = Grid(5, 5)
        self.assertFalse(grid.is_open(1, 1))
        self.assertEqual(grid.increment(1, 1), 1)
        self.assertEqual(grid.increment(1, 1), 2)
        self.assertEqual(grid.get(1, 1), 2)
        self.assertTrue(grid.is_open(1, 1))
        # Neighbours untouched
        self.assertEqual(grid.get(1, 2), 0)

    def test_cell_classification(self):
        grid = Grid(5, 5)
        self.assertTrue(Grid.is_cell(1, 3))
        self.assertFalse(Grid.is_cell(1, 2))
        self.assertFalse(Grid.is_cell(2, 2))
        self.assertTrue(grid.is_border(0, 2))
        self.assertTrue(grid.is_border(3, 4))
        self.assertFalse(grid.is_border(3, 3))
        self.assertEqual(list(grid.cell_positions()), [(1, 1), (1, 3), (3, 1), (3, 3)])

    def test_step(self):
        grid = Grid(7, 7)
        self.assertEqual(grid.step(3, 3, Grid.EAST), (3, 4))
        self.assertEqual(grid.step(3, 3, Grid.NORTH, 2), (1, 3))
        self.assertEqual(grid.step(3, 3, Grid.WEST, 2), (3, 1))
        self.assertEqual(grid.step(3, 3, Grid.SOUTH), (4, 3))
        self.assertEqual(Grid.NAMES[Grid.WEST], "west")

    def test_to_rows(self):
        grid = Grid(5, 5)
        grid.increment(1, 2)
        rows = grid.to_rows()
        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[1], [0, 0, 1, 0, 0])
        # Snapshot, not a view
        rows[0][0] = 9
        self.assertEqual(grid.get(0, 0), 0)

    def test_equality(self):
        a, b = Grid(5, 5), Grid(5, 5)
        self.assertEqual(a, b)
        b.increment(1, 1)
        self.assertNotEqual(a, b)
        self.assertNotEqual(Grid(5, 5), Grid(5, 7))

if __name__ == '__main__':
    unittest.main()
