import colorsys
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from paint_engine.core.grid import Grid, Color
from paint_engine.core.errors import InvariantViolation

@dataclass
class Frame:
    """One suspended DFS call: where it is and which direction it tries next."""
    position: Tuple[int, int]
    next_direction: int = 0

class Mode(Enum):
    IDLE = "idle"            # no DFS running, stack empty
    PUSHED = "pushed"        # top frame pushed, waiting for its confirm step
    SEARCHING = "searching"  # top frame confirmed, trying its directions
    UNWOUND = "unwound"      # last frame popped, deactivates on the next step

class StepKind(Enum):
    START = "start"            # new region: first frame pushed from the scan cursor
    PUSH = "push"              # frame pushed onto an unvisited neighbour
    CONFIRM = "confirm"        # top frame marked visited and painted
    POP = "pop"                # top frame exhausted, backtrack
    DEACTIVATE = "deactivate"  # stack empty, back to scanning
    SCAN = "scan"              # scan cursor moved past a wall or visited cell
    COMPLETE = "complete"      # scan cursor reached the end of the grid

class SteppedDFSExplorer:
    """
    Depth-first flood fill that does one unit of work per step() call.

    The call stack is explicit so the search can stop between any two
    steps. Entering a cell takes two steps: one to push its frame and one
    to confirm (mark visited + paint) it. When no DFS is running, a
    row-major scan cursor looks for the next unvisited open cell and starts
    a new region there with a fresh colour.
    """
    SATURATION = 0.65
    VALUE = 0.92

    def __init__(self, grid: Grid, seed: int = None, rng: random.Random = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random(seed)
        self.mode = Mode.IDLE
        self._stack = []
        self.cursor = 0
        self.current_color: Optional[Color] = None
        self.regions = 0
        self.step_count = 0

    @property
    def active(self) -> bool:
        return self.mode is not Mode.IDLE

    @property
    def just_pushed(self) -> bool:
        return self.mode is Mode.PUSHED

    @property
    def complete(self) -> bool:
        return self.mode is Mode.IDLE and self.cursor >= self.grid.width * self.grid.height

    @property
    def stack(self) -> Tuple[Frame, ...]:
        """Read-only snapshot, bottom first."""
        return tuple(Frame(f.position, f.next_direction) for f in self._stack)

    @property
    def top(self) -> Optional[Frame]:
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    def cursor_cell(self) -> Optional[Tuple[int, int]]:
        """Cell under the scan cursor, or None once the scan is finished."""
        if self.cursor >= self.grid.width * self.grid.height:
            return None
        return self.cursor % self.grid.width, self.cursor // self.grid.width

    def reset(self):
        self.grid.reset_visited()
        self._stack = []
        self.cursor = 0
        self.mode = Mode.IDLE
        self.current_color = None
        self.regions = 0
        self.step_count = 0

    def step(self) -> StepKind:
        self.step_count += 1
        if self.mode is Mode.UNWOUND:
            self.mode = Mode.IDLE
            return StepKind.DEACTIVATE

        if self.mode is Mode.PUSHED:
            x, y = self._stack[-1].position
            self.grid.set_visited(x, y, True, self.current_color)
            self.mode = Mode.SEARCHING
            return StepKind.CONFIRM

        if self.mode is Mode.SEARCHING:
            return self._advance_top()

        return self._scan()

    def _advance_top(self) -> StepKind:
        top = self._stack[-1]
        x, y = top.position
        while top.next_direction < len(Grid.DIRECTIONS):
            nx, ny = self.grid.neighbor(x, y, top.next_direction)
            top.next_direction += 1
            if self.grid.is_open(nx, ny):
                self._stack.append(Frame((nx, ny), 0))
                self.mode = Mode.PUSHED
                return StepKind.PUSH

        # All directions tried: backtrack
        self._stack.pop()
        if not self._stack:
            self.mode = Mode.UNWOUND
        return StepKind.POP

    def _scan(self) -> StepKind:
        total = self.grid.width * self.grid.height
        if self.cursor >= total:
            return StepKind.COMPLETE
        if self.cursor < 0:
            raise InvariantViolation(f"Scan cursor {self.cursor} outside the grid")

        x, y = self.cursor % self.grid.width, self.cursor // self.grid.width

        if self.grid.is_open(x, y):
            self.current_color = self.random_color()
            self.regions += 1
            self._stack = [Frame((x, y), 0)]
            self.mode = Mode.PUSHED
            return StepKind.START

        self.cursor += 1
        return StepKind.SCAN

    def random_color(self) -> Color:
        hue = self.rng.uniform(0.0, 360.0)
        r, g, b = colorsys.hsv_to_rgb(hue / 360.0, self.SATURATION, self.VALUE)
        return int(r * 255), int(g * 255), int(b * 255)

    def run_to_completion(self, max_steps: int = None) -> int:
        """Steps until the scan completes. Returns the number of steps taken."""
        steps = 0
        while max_steps is None or steps < max_steps:
            if self.step() is StepKind.COMPLETE:
                break
            steps += 1
        return steps
