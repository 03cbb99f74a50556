import random
from typing import Iterator, List, Optional, Tuple
from paint_engine.core.grid import Grid
from paint_engine.algo.base import Generator

class PathCarver(Generator):
    """
    Carves one candidate puzzle layout out of a solid block of walls.

    A random walk starts on a random goal cell and repeatedly carves a
    straight run of random length into the walls ahead. The walk ends once
    the head is boxed in for 'stuck_limit' consecutive rounds. The last
    carved cell becomes the start.
    """
    STUCK_LIMIT = 12

    def __init__(self, grid: Grid, min_cover_ratio: float = 0.72, seed: int = None,
                 rng: random.Random = None, stuck_limit: int = STUCK_LIMIT):
        super().__init__(grid, seed=seed, rng=rng)
        self.min_cover_ratio = min_cover_ratio
        self.stuck_limit = stuck_limit
        self.carved: List[Tuple[int, int]] = []
        self.accepted = False

    @property
    def cover_ratio(self) -> float:
        total = self.grid.width * self.grid.height
        return self.grid.non_wall_count() / total

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng
        grid.start = None
        for x, y in grid.cells_row_major():
            grid.set_wall(x, y)
        self.carved = []
        self.accepted = False

        # Goal
        gx = rng.randint(0, grid.width - 1)
        gy = rng.randint(0, grid.height - 1)
        grid.set_wall(gx, gy, False)
        self.carved.append((gx, gy))
        yield f"Goal: ({gx}, {gy})"

        stuck = 0
        while stuck < self.stuck_limit:
            directions = list(range(len(Grid.DIRECTIONS)))
            rng.shuffle(directions)

            moved = False
            for direction in directions:
                hx, hy = self.carved[-1]
                run = self._wall_run(hx, hy, direction)
                if run == 0:
                    continue

                length = rng.randint(1, run)
                cx, cy = hx, hy
                for _ in range(length):
                    cx, cy = grid.neighbor(cx, cy, direction)
                    grid.set_wall(cx, cy, False)
                    self.carved.append((cx, cy))
                self.step_count += 1
                moved = True
                break

            if moved:
                stuck = 0
                yield f"Carving... Path: {len(self.carved)}"
            else:
                stuck += 1

        if self.cover_ratio < self.min_cover_ratio:
            yield "Rejected"
            return

        grid.set_start(*self.carved[-1])
        self.accepted = True
        yield "Done"

    def _wall_run(self, x: int, y: int, direction: int) -> int:
        """Contiguous wall cells from (x, y) in 'direction', stopping at the edge."""
        run = 0
        cx, cy = self.grid.neighbor(x, y, direction)
        while self.grid.in_bounds(cx, cy) and self.grid.is_wall(cx, cy):
            run += 1
            cx, cy = self.grid.neighbor(cx, cy, direction)
        return run

    def carve(self) -> Optional[List[str]]:
        """Runs the carver and returns the candidate row layout, or None if coverage is too low."""
        self.run_all()
        if not self.accepted:
            return None
        return self.grid.to_rows()
