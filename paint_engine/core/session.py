import logging
import random
from enum import Enum
from typing import Optional

from paint_engine.config import FloodFillConfig, PuzzleConfig
from paint_engine.core.grid import Grid
from paint_engine.core.board import Board
from paint_engine.algo.explorer import SteppedDFSExplorer, StepKind
from paint_engine.algo.factory import BoardFactory

logger = logging.getLogger(__name__)

class Phase(Enum):
    PREPARING = "preparing"
    EXPLORING = "exploring"
    DONE = "done"

class StepTimer:
    """
    Fixed-interval clock for the explorer animation.
    advance(dt) reports True at most once per call, then restarts.
    """
    def __init__(self, interval: float = 0.15, min_interval: float = 0.02, max_interval: float = 0.80,
                 slower_increment: float = 0.05, faster_decrement: float = 0.02):
        self.min_interval = min_interval
        self.max_interval = max_interval
        self.slower_increment = slower_increment
        self.faster_decrement = faster_decrement
        self.interval = self._clamp(interval)
        self.elapsed = 0.0

    def _clamp(self, value: float) -> float:
        # Rounded so repeated +0.05 / -0.02 does not drift
        return round(max(self.min_interval, min(self.max_interval, value)), 4)

    def slower(self) -> float:
        self.interval = self._clamp(self.interval + self.slower_increment)
        return self.interval

    def faster(self) -> float:
        self.interval = self._clamp(self.interval - self.faster_decrement)
        return self.interval

    def restart(self):
        self.elapsed = 0.0

    def advance(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed >= self.interval:
            self.elapsed = 0.0
            return True
        return False

class FloodFillSession:
    """
    The flood-fill demo: paint walls, confirm, then watch the stepped DFS
    colour every connected region.
    """
    def __init__(self, config: FloodFillConfig = None, rng: random.Random = None):
        self.config = config or FloodFillConfig()
        self.grid = Grid(self.config.width, self.config.height)
        self.explorer = SteppedDFSExplorer(self.grid, seed=self.config.seed, rng=rng)
        self.timer = StepTimer(self.config.step_interval, self.config.min_interval, self.config.max_interval,
                               self.config.slower_increment, self.config.faster_decrement)
        self.phase = Phase.PREPARING
        self.last_step: Optional[StepKind] = None

    def set_wall(self, x: int, y: int, wall: bool = True):
        if self.phase is not Phase.PREPARING:
            raise RuntimeError(f"Walls can only be edited while preparing (phase: {self.phase.value})")
        self.grid.set_wall(x, y, wall)

    def confirm(self):
        if self.phase is not Phase.PREPARING:
            raise RuntimeError(f"confirm() is only valid while preparing (phase: {self.phase.value})")
        self.explorer.reset()
        self.timer.restart()
        self.last_step = None
        self.phase = Phase.EXPLORING
        logger.debug(f"Exploring {self.grid.width}x{self.grid.height} grid "
                     f"({self.grid.width * self.grid.height - self.grid.non_wall_count()} walls)")

    def step(self) -> Optional[StepKind]:
        """One explorer step. Does nothing outside the exploring phase."""
        if self.phase is not Phase.EXPLORING:
            return None
        kind = self.explorer.step()
        self.last_step = kind
        if kind is StepKind.COMPLETE:
            self.phase = Phase.DONE
            logger.debug(f"Exploration complete: {self.explorer.regions} regions, "
                         f"{self.explorer.step_count} steps")
        return kind

    def update(self, dt: float) -> Optional[StepKind]:
        """Feeds elapsed wall-clock time; steps once when the interval has passed."""
        if self.phase is not Phase.EXPLORING:
            return None
        if self.timer.advance(dt):
            return self.step()
        return None

    def restart(self):
        """Back to preparing. Visits are cleared, walls are kept."""
        self.explorer.reset()
        self.timer.restart()
        self.last_step = None
        self.phase = Phase.PREPARING

class PuzzleSession:
    """The one-stroke puzzle demo: one board at a time, regenerated on request."""
    def __init__(self, config: PuzzleConfig = None, rng: random.Random = None, board: Board = None):
        self.config = config or PuzzleConfig()
        self.factory = BoardFactory(self.config.width, self.config.height, seed=self.config.seed,
                                    rng=rng, stuck_limit=self.config.stuck_limit)
        self.board: Optional[Board] = board

    def regenerate(self) -> Board:
        """
        Replaces the board with a freshly generated one.
        GenerationExhausted propagates and the current board is kept.
        """
        board = self.factory.generate(self.config.min_cover_ratio, self.config.max_reseed_tries)
        logger.info(f"Generated {board.width}x{board.height} board in {self.factory.attempts} attempts")
        self.board = board
        return board

    def _require_board(self) -> Board:
        if self.board is None:
            raise RuntimeError("No board loaded; call regenerate() first")
        return self.board

    @property
    def cleared(self) -> bool:
        return self._require_board().is_cleared()

    def move(self, direction: int) -> bool:
        board = self._require_board()
        if board.is_cleared():
            return False
        return board.attempt_slide(direction)

    def reset(self):
        self._require_board().reset_paint()
