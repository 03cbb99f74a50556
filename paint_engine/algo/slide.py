from typing import List, Tuple
from paint_engine.core.grid import Grid

def slide_path(grid: Grid, x: int, y: int, direction: int) -> List[Tuple[int, int]]:
    """
    Cells swept by a sliding move from (x, y) in 'direction'.
    The slide stops just before a wall, a visited cell or the boundary.
    An empty list means the move is blocked on its first step.
    """
    dx, dy = Grid.DIRECTIONS[direction]
    path = []
    cx, cy = x + dx, y + dy
    while grid.is_open(cx, cy):
        path.append((cx, cy))
        cx += dx
        cy += dy
    return path

def legal_moves(grid: Grid, x: int, y: int) -> List[Tuple[int, List[Tuple[int, int]]]]:
    """(direction, swept cells) for every legal slide from (x, y), in direction order."""
    moves = []
    for direction in range(len(Grid.DIRECTIONS)):
        path = slide_path(grid, x, y, direction)
        if path:
            moves.append((direction, path))
    return moves

def apply_slide(grid: Grid, path: List[Tuple[int, int]], visited: bool = True):
    for px, py in path:
        grid.set_visited(px, py, visited)
