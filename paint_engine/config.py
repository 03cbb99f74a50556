from dataclasses import dataclass
from typing import Optional

@dataclass
class FloodFillConfig:
    width: int = 8
    height: int = 8
    # Seconds per explorer step
    step_interval: float = 0.15
    min_interval: float = 0.02
    max_interval: float = 0.80
    slower_increment: float = 0.05
    faster_decrement: float = 0.02
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.min_interval <= self.max_interval:
            raise ValueError(f"Invalid interval bounds [{self.min_interval}, {self.max_interval}]")
        if not self.min_interval <= self.step_interval <= self.max_interval:
            raise ValueError(f"step_interval {self.step_interval} outside "
                             f"[{self.min_interval}, {self.max_interval}]")

@dataclass
class PuzzleConfig:
    width: int = 6
    height: int = 6
    min_cover_ratio: float = 0.72
    max_reseed_tries: int = 1_000_000
    stuck_limit: int = 12
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.min_cover_ratio <= 1.0:
            raise ValueError(f"min_cover_ratio must be in (0, 1], got {self.min_cover_ratio}")
        if self.max_reseed_tries < 1:
            raise ValueError(f"max_reseed_tries must be positive, got {self.max_reseed_tries}")
        if self.stuck_limit < 1:
            raise ValueError(f"stuck_limit must be positive, got {self.stuck_limit}")

@dataclass
class WindowConfig:
    width: int = 800
    height: int = 560
    cell_size: int = 60
    origin_x: int = 40
    origin_y: int = 40
    fps: int = 60
    font_name: str = "Consolas"
    font_size: int = 16
    title_size: int = 18
