from typing import List, Sequence, Tuple

from paint_engine.core.grid import Grid
from paint_engine.core.errors import BoardFormatError
from paint_engine.algo.slide import slide_path, apply_slide

class Board:
    """
    A committed one-stroke puzzle board.

    The player starts on 'start' (painted) and slides in one of four
    directions until blocked by a wall, a painted cell or the edge,
    painting every cell it crosses. The board is cleared once every
    non-wall cell is painted.
    """

    def __init__(self, grid: Grid):
        if grid.start is None:
            raise BoardFormatError("Board requires a start cell")
        self.grid = grid
        self._non_wall_count = grid.non_wall_count()
        self.player: Tuple[int, int] = grid.start
        self.grid.reset_visited()

    @classmethod
    def from_rows(cls, rows: Sequence[str], width: int = None, height: int = None) -> "Board":
        return cls(Grid.from_rows(rows, width=width, height=height))

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def start(self) -> Tuple[int, int]:
        return self.grid.start

    @property
    def non_wall_count(self) -> int:
        # Fixed at load time
        return self._non_wall_count

    def is_wall(self, x: int, y: int) -> bool:
        return self.grid.is_wall(x, y)

    def is_visited(self, x: int, y: int) -> bool:
        return self.grid.is_visited(x, y)

    def is_obstacle(self, x: int, y: int) -> bool:
        return not self.grid.is_open(x, y)

    def to_rows(self) -> List[str]:
        return self.grid.to_rows()

    def reset_paint(self):
        """Back to the fresh state: only the start painted, player on start."""
        self.grid.reset_visited()
        self.player = self.grid.start

    def attempt_slide(self, direction: int) -> bool:
        px, py = self.player
        path = slide_path(self.grid, px, py, direction)
        if not path:
            return False
        apply_slide(self.grid, path)
        self.player = path[-1]
        return True

    def painted_count(self) -> int:
        count = 0
        for val in self.grid.cells:
            if (val & Grid.VISITED) and not (val & Grid.WALL):
                count += 1
        return count

    def is_cleared(self) -> bool:
        return self.painted_count() == self._non_wall_count
