import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from paint_engine.core.board import Board
from paint_engine.core.errors import GenerationExhausted
from paint_engine.algo.factory import BoardFactory
from paint_engine.algo.verifier import UniquenessVerifier

class FixedLayoutCarver:
    """Stands in for PathCarver and always hands back the same candidate."""
    layout = None
    calls = 0

    def __init__(self, grid, min_cover_ratio=0.72, rng=None, stuck_limit=12):
        self.grid = grid

    def carve(self):
        type(self).calls += 1
        return self.layout

class SparseCarver(FixedLayoutCarver):
    # Coverage too low: the carver rejects its own candidate
    layout = None

class CentreWallCarver(FixedLayoutCarver):
    layout = ["S..", ".#.", "..."]

class CorridorCarver(FixedLayoutCarver):
    layout = ["S..", "##.", "..."]

class TestBoardFactory(unittest.TestCase):
    def test_generated_board_is_unique(self):
        factory = BoardFactory(4, 4, seed=7)
        board = factory.generate(min_cover_ratio=0.5, max_tries=20000)

        self.assertIsInstance(board, Board)
        self.assertGreaterEqual(factory.attempts, 1)
        self.assertEqual(UniquenessVerifier(board.to_rows()).count_solutions(), 1)

    def test_generated_board_coverage(self):
        factory = BoardFactory(4, 4, seed=11)
        for _ in range(3):
            board = factory.generate(min_cover_ratio=0.5, max_tries=20000)
            self.assertGreaterEqual(board.non_wall_count / (board.width * board.height), 0.5)

    def test_generated_board_is_fresh(self):
        board = BoardFactory(4, 4, seed=5).generate(min_cover_ratio=0.5, max_tries=20000)
        self.assertEqual(board.player, board.start)
        self.assertFalse(board.is_wall(*board.start))
        self.assertEqual(board.painted_count(), 1)
        self.assertTrue(board.is_visited(*board.start))

    def test_solution_clears_board(self):
        board = BoardFactory(4, 4, seed=21).generate(min_cover_ratio=0.5, max_tries=20000)
        verifier = UniquenessVerifier(board.to_rows())
        self.assertEqual(verifier.count_solutions(), 1)

        for direction in verifier.solution:
            self.assertTrue(board.attempt_slide(direction))
        self.assertTrue(board.is_cleared())

    def test_determinism(self):
        board1 = BoardFactory(4, 4, seed=99).generate(min_cover_ratio=0.5, max_tries=20000)
        board2 = BoardFactory(4, 4, seed=99).generate(min_cover_ratio=0.5, max_tries=20000)
        self.assertEqual(board1.to_rows(), board2.to_rows())

    def test_exhausted_after_single_attempt(self):
        SparseCarver.calls = 0
        factory = BoardFactory(6, 6, seed=1, carver_cls=SparseCarver)
        with self.assertRaises(GenerationExhausted) as ctx:
            factory.generate(min_cover_ratio=0.99, max_tries=1)

        self.assertEqual(ctx.exception.attempts, 1)
        self.assertEqual(ctx.exception.max_tries, 1)
        self.assertEqual(ctx.exception.min_cover_ratio, 0.99)
        self.assertEqual(SparseCarver.calls, 1)
        self.assertEqual(factory.rejected_cover, 1)

    def test_non_unique_candidate_rejected(self):
        CentreWallCarver.calls = 0
        factory = BoardFactory(3, 3, carver_cls=CentreWallCarver)
        with self.assertRaises(GenerationExhausted):
            factory.generate(min_cover_ratio=0.5, max_tries=3)
        self.assertEqual(CentreWallCarver.calls, 3)
        self.assertEqual(factory.rejected_unique, 3)
        self.assertEqual(factory.rejected_cover, 0)

    def test_unique_candidate_committed(self):
        factory = BoardFactory(3, 3, carver_cls=CorridorCarver)
        board = factory.generate(min_cover_ratio=0.5, max_tries=3)
        self.assertEqual(factory.attempts, 1)
        self.assertEqual(board.to_rows(), ["S..", "##.", "..."])
        self.assertEqual(board.non_wall_count, 7)

    def test_invalid_arguments(self):
        factory = BoardFactory(4, 4, seed=1)
        with self.assertRaises(ValueError):
            factory.generate(min_cover_ratio=0.0, max_tries=10)
        with self.assertRaises(ValueError):
            factory.generate(min_cover_ratio=1.5, max_tries=10)
        with self.assertRaises(ValueError):
            factory.generate(min_cover_ratio=0.5, max_tries=0)

if __name__ == '__main__':
    unittest.main()
