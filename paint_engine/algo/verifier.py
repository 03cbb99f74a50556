from typing import List, Sequence, Union
from paint_engine.core.grid import Grid
from paint_engine.core.errors import BoardFormatError
from paint_engine.algo.slide import legal_moves, apply_slide

class UniquenessVerifier:
    """
    Counts the sliding-move tours that paint every open cell of a layout.

    The search is exhaustive backtracking from the start cell and gives up
    as soon as a second tour turns up: only "exactly one" matters.
    """
    LIMIT = 2

    def __init__(self, layout: Union[Grid, Sequence[str]], limit: int = LIMIT):
        if isinstance(layout, Grid):
            self.grid = layout.copy()
        else:
            self.grid = Grid.from_rows(layout)
        if self.grid.start is None:
            raise BoardFormatError("Layout has no start cell to verify from")
        self.limit = limit
        self.solutions = 0
        self.nodes = 0
        # Directions of the first tour found
        self.solution: List[int] = []
        self._moves: List[int] = []
        self._non_wall = self.grid.non_wall_count()

    def count_solutions(self) -> int:
        self.solutions = 0
        self.nodes = 0
        self.solution = []
        self._moves = []

        self.grid.reset_visited()
        sx, sy = self.grid.start
        self._search(sx, sy, 1)
        return self.solutions

    def is_unique(self) -> bool:
        return self.count_solutions() == 1

    def _search(self, x: int, y: int, painted: int):
        if self.solutions >= self.limit:
            return
        self.nodes += 1
        if painted == self._non_wall:
            if self.solutions == 0:
                self.solution = list(self._moves)
            self.solutions += 1
            return

        # Enumerate before mutating: every branch starts from the same state
        for direction, path in legal_moves(self.grid, x, y):
            apply_slide(self.grid, path, True)
            self._moves.append(direction)
            hx, hy = path[-1]
            self._search(hx, hy, painted + len(path))
            self._moves.pop()
            apply_slide(self.grid, path, False)
            if self.solutions >= self.limit:
                return

def count_solutions(layout: Union[Grid, Sequence[str]], limit: int = UniquenessVerifier.LIMIT) -> int:
    return UniquenessVerifier(layout, limit=limit).count_solutions()
