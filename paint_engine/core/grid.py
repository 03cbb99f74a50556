from array import array
from typing import Iterator, List, Optional, Sequence, Tuple

from paint_engine.core.errors import BoardFormatError, InvariantViolation

Coord = Tuple[int, int]
Color = Tuple[int, int, int]

class Grid:
    # Flags
    WALL    = 0b00000001
    VISITED = 0b00000010

    # Direction indices. The order is fixed: right, down, left, up.
    RIGHT = 0
    DOWN  = 1
    LEFT  = 2
    UP    = 3

    DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
    DIRECTION_NAMES = ("right", "down", "left", "up")

    # Row layout characters
    CHAR_WALL = '#'
    CHAR_OPEN = '.'
    CHAR_START = 'S'

    __slots__ = ('width', 'height', 'cells', 'colors', 'start')

    def __init__(self, width: int, height: int, start: Optional[Coord] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # All cells open and unvisited, 1 byte per cell
        self.cells = array('B', [0] * (width * height))
        # Paint colour per cell (None = unpainted)
        self.colors: List[Optional[Color]] = [None] * (width * height)
        self.start: Optional[Coord] = None
        if start is not None:
            self.set_start(*start)

    @classmethod
    def from_rows(cls, rows: Sequence[str], width: int = None, height: int = None,
                  require_start: bool = True) -> "Grid":
        """
        Builds a grid from a row layout ('#' wall, '.' open, 'S' start).
        If width/height are given the layout must match them exactly.
        """
        if not rows:
            raise BoardFormatError("Row layout is empty")
        h = len(rows)
        w = len(rows[0])
        if height is not None and h != height:
            raise BoardFormatError(f"Expected {height} rows, got {h}")
        if width is not None and w != width:
            raise BoardFormatError(f"Expected rows of width {width}, got {w}")

        grid = cls(w, h)
        start = None
        for y, row in enumerate(rows):
            if len(row) != w:
                raise BoardFormatError(f"Row {y} has width {len(row)}, expected {w}")
            for x, ch in enumerate(row):
                if ch == cls.CHAR_WALL:
                    grid.cells[y * w + x] |= cls.WALL
                elif ch == cls.CHAR_START:
                    if start is not None:
                        raise BoardFormatError(f"Duplicate start marker at ({x}, {y}), first at {start}")
                    start = (x, y)
                elif ch != cls.CHAR_OPEN:
                    raise BoardFormatError(f"Unknown cell character {ch!r} at ({x}, {y})")

        if start is None and require_start:
            raise BoardFormatError("Row layout has no start marker")
        if start is not None:
            grid.set_start(*start)
        return grid

    def to_rows(self) -> List[str]:
        rows = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                if self.is_wall(x, y):
                    chars.append(self.CHAR_WALL)
                elif self.start == (x, y):
                    chars.append(self.CHAR_START)
                else:
                    chars.append(self.CHAR_OPEN)
            rows.append(''.join(chars))
        return rows

    def copy(self) -> "Grid":
        other = Grid(self.width, self.height)
        other.cells = array('B', self.cells)
        other.colors = list(self.colors)
        other.start = self.start
        return other

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbor(self, x: int, y: int, direction: int) -> Coord:
        """Coordinate one step away in 'direction'. May be out of bounds."""
        dx, dy = self.DIRECTIONS[direction]
        return x + dx, y + dy

    def set_start(self, x: int, y: int):
        if self.is_wall(x, y):
            raise InvariantViolation(f"Start ({x}, {y}) is a wall cell")
        self.start = (x, y)

    def is_wall(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.WALL) != 0

    def set_wall(self, x: int, y: int, wall: bool = True):
        idx = self.get_index(x, y)
        if wall:
            if self.start == (x, y):
                raise InvariantViolation(f"Cannot wall over the start cell ({x}, {y})")
            # A wall is never visited
            self.cells[idx] = self.WALL
            self.colors[idx] = None
        else:
            self.cells[idx] &= ~self.WALL

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def set_visited(self, x: int, y: int, visited: bool = True, color: Optional[Color] = None):
        idx = self.get_index(x, y)
        if visited:
            if self.cells[idx] & self.WALL:
                raise InvariantViolation(f"Wall cell ({x}, {y}) cannot be visited")
            self.cells[idx] |= self.VISITED
            self.colors[idx] = color
        else:
            self.cells[idx] &= ~self.VISITED
            self.colors[idx] = None

    def color_at(self, x: int, y: int) -> Optional[Color]:
        return self.colors[self.get_index(x, y)]

    def is_open(self, x: int, y: int) -> bool:
        """In bounds, not a wall and not visited."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return (self.cells[y * self.width + x] & (self.WALL | self.VISITED)) == 0

    def reset_visited(self):
        """Clears every visited flag and colour, then re-marks the start cell."""
        for i in range(len(self.cells)):
            self.cells[i] &= ~self.VISITED
            self.colors[i] = None
        if self.start is not None:
            self.set_visited(*self.start)

    def clear(self):
        """Removes all walls and visits. The start cell (if any) is kept."""
        self.cells = array('B', [0] * (self.width * self.height))
        self.colors = [None] * (self.width * self.height)
        if self.start is not None:
            self.set_visited(*self.start)

    def non_wall_count(self) -> int:
        return sum(1 for val in self.cells if not (val & self.WALL))

    def visited_count(self) -> int:
        return sum(1 for val in self.cells if val & self.VISITED)

    def cells_row_major(self) -> Iterator[Coord]:
        """Yields (x, y) in row-major order: index = y * width + x."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction) for all in-bounds neighbours, in direction order.
        Does NOT check walls or visits.
        """
        for direction, (dx, dy) in enumerate(self.DIRECTIONS):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield (nx, ny, direction)
