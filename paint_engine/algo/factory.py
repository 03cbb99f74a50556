import logging
import random
from typing import Type
from paint_engine.core.grid import Grid
from paint_engine.core.board import Board
from paint_engine.core.errors import GenerationExhausted
from paint_engine.algo.carve import PathCarver
from paint_engine.algo.verifier import UniquenessVerifier

logger = logging.getLogger(__name__)

class BoardFactory:
    """
    Retries carving + verification until a board is both covered enough
    and uniquely solvable, or the retry budget runs out.
    """
    def __init__(self, width: int, height: int, seed: int = None, rng: random.Random = None,
                 carver_cls: Type[PathCarver] = PathCarver, stuck_limit: int = PathCarver.STUCK_LIMIT):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(seed)
        self.carver_cls = carver_cls
        self.stuck_limit = stuck_limit

        # Stats of the last generate() call
        self.attempts = 0
        self.rejected_cover = 0
        self.rejected_unique = 0

    def generate(self, min_cover_ratio: float = 0.72, max_tries: int = 8000) -> Board:
        if not 0.0 < min_cover_ratio <= 1.0:
            raise ValueError(f"min_cover_ratio must be in (0, 1], got {min_cover_ratio}")
        if max_tries < 1:
            raise ValueError(f"max_tries must be positive, got {max_tries}")

        self.attempts = 0
        self.rejected_cover = 0
        self.rejected_unique = 0

        for _ in range(max_tries):
            self.attempts += 1
            grid = Grid(self.width, self.height)
            carver = self.carver_cls(grid, min_cover_ratio=min_cover_ratio, rng=self.rng,
                                     stuck_limit=self.stuck_limit)
            rows = carver.carve()
            if rows is None:
                self.rejected_cover += 1
                continue

            if not UniquenessVerifier(rows).is_unique():
                self.rejected_unique += 1
                continue

            logger.debug(f"Accepted board after {self.attempts} attempts "
                         f"(coverage rejects: {self.rejected_cover}, uniqueness rejects: {self.rejected_unique})")
            return Board.from_rows(rows, width=self.width, height=self.height)

        logger.debug(f"Gave up after {self.attempts} attempts "
                     f"(coverage rejects: {self.rejected_cover}, uniqueness rejects: {self.rejected_unique})")
        raise GenerationExhausted(attempts=self.attempts, min_cover_ratio=min_cover_ratio, max_tries=max_tries)
