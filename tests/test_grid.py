import unittest
import sys
import os

# Add project root to path so we can import paint_engine
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from paint_engine.core.grid import Grid
from paint_engine.core.errors import BoardFormatError, InvariantViolation

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 8, 6
        grid = Grid(w, h)
        self.assertEqual(len(grid.cells), w * h)
        # Open and unvisited by default
        for val in grid.cells:
            self.assertEqual(val, 0)
        self.assertIsNone(grid.start)
        self.assertEqual(grid.non_wall_count(), w * h)

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            Grid(0, 5)

    def test_coordinates(self):
        grid = Grid(5, 4)
        self.assertEqual(grid.get_index(2, 3), 17) # 3 * 5 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(5, 0)
        with self.assertRaises(IndexError):
            grid.is_wall(0, 4)

        self.assertTrue(grid.in_bounds(4, 3))
        self.assertFalse(grid.in_bounds(4, 4))

    def test_direction_order(self):
        # right, down, left, up
        self.assertEqual(Grid.DIRECTIONS, ((1, 0), (0, 1), (-1, 0), (0, -1)))
        grid = Grid(3, 3)
        self.assertEqual(grid.neighbor(1, 1, Grid.RIGHT), (2, 1))
        self.assertEqual(grid.neighbor(1, 1, Grid.UP), (1, 0))

        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual([d for _, _, d in neighbors], [Grid.RIGHT, Grid.DOWN, Grid.LEFT, Grid.UP])

        corner = list(grid.get_neighbors(0, 0))
        self.assertEqual(corner, [(1, 0, Grid.RIGHT), (0, 1, Grid.DOWN)])

    def test_wall_and_visited_flags(self):
        grid = Grid(3, 3)
        grid.set_visited(1, 1, color=(10, 20, 30))
        self.assertTrue(grid.is_visited(1, 1))
        self.assertEqual(grid.color_at(1, 1), (10, 20, 30))

        # Walling a cell drops its visit
        grid.set_wall(1, 1)
        self.assertTrue(grid.is_wall(1, 1))
        self.assertFalse(grid.is_visited(1, 1))
        self.assertIsNone(grid.color_at(1, 1))

        with self.assertRaises(InvariantViolation):
            grid.set_visited(1, 1)

        grid.set_wall(1, 1, False)
        self.assertFalse(grid.is_wall(1, 1))

    def test_is_open(self):
        grid = Grid(2, 2)
        grid.set_wall(1, 0)
        grid.set_visited(0, 1)
        self.assertTrue(grid.is_open(0, 0))
        self.assertFalse(grid.is_open(1, 0))
        self.assertFalse(grid.is_open(0, 1))
        self.assertFalse(grid.is_open(2, 0))
        self.assertFalse(grid.is_open(0, -1))

    def test_reset_visited_keeps_start(self):
        grid = Grid(3, 2, start=(2, 1))
        grid.set_wall(0, 0)
        for x, y in [(1, 0), (2, 0), (0, 1)]:
            grid.set_visited(x, y)

        grid.reset_visited()
        self.assertEqual(grid.visited_count(), 1)
        self.assertTrue(grid.is_visited(2, 1))
        self.assertTrue(grid.is_wall(0, 0))

    def test_reset_visited_without_start(self):
        grid = Grid(2, 2)
        grid.set_visited(0, 0)
        grid.reset_visited()
        self.assertEqual(grid.visited_count(), 0)

    def test_start_on_wall(self):
        grid = Grid(2, 2)
        grid.set_wall(0, 0)
        with self.assertRaises(InvariantViolation):
            grid.set_start(0, 0)

        grid = Grid(2, 2, start=(1, 1))
        with self.assertRaises(InvariantViolation):
            grid.set_wall(1, 1)

    def test_from_rows(self):
        grid = Grid.from_rows(["#.S", "..#"])
        self.assertEqual((grid.width, grid.height), (3, 2))
        self.assertEqual(grid.start, (2, 0))
        self.assertTrue(grid.is_wall(0, 0))
        self.assertTrue(grid.is_wall(2, 1))
        self.assertEqual(grid.non_wall_count(), 4)
        self.assertEqual(grid.to_rows(), ["#.S", "..#"])

    def test_from_rows_errors(self):
        with self.assertRaises(BoardFormatError):
            Grid.from_rows([])
        with self.assertRaises(BoardFormatError):
            Grid.from_rows(["S..", ".."])
        with self.assertRaises(BoardFormatError):
            Grid.from_rows(["...", "..."])
        with self.assertRaises(BoardFormatError):
            Grid.from_rows(["S.S"])
        with self.assertRaises(BoardFormatError):
            Grid.from_rows(["S.x"])
        with self.assertRaises(BoardFormatError):
            Grid.from_rows(["S.."], width=4)
        with self.assertRaises(BoardFormatError):
            Grid.from_rows(["S.."], height=2)
        # Malformed layouts are also plain ValueErrors
        with self.assertRaises(ValueError):
            Grid.from_rows(["S#", "#"])

    def test_row_major_order(self):
        grid = Grid(3, 2)
        cells = list(grid.cells_row_major())
        self.assertEqual(cells[:4], [(0, 0), (1, 0), (2, 0), (0, 1)])
        for i, (x, y) in enumerate(cells):
            self.assertEqual(grid.get_index(x, y), i)

    def test_copy_is_independent(self):
        grid = Grid.from_rows(["S.", "#."])
        other = grid.copy()
        other.set_visited(1, 0)
        other.set_wall(1, 1)
        self.assertFalse(grid.is_visited(1, 0))
        self.assertFalse(grid.is_wall(1, 1))
        self.assertEqual(other.start, grid.start)

    def test_clear(self):
        grid = Grid(3, 1, start=(0, 0))
        grid.set_wall(2, 0)
        grid.set_visited(1, 0)
        grid.clear()
        self.assertEqual(grid.non_wall_count(), 3)
        self.assertEqual(grid.visited_count(), 1)
        self.assertTrue(grid.is_visited(0, 0))

if __name__ == '__main__':
    unittest.main()
