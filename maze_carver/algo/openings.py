import logging
from typing import Tuple
from maze_carver.core.grid import Grid
from maze_carver.core.errors import InternalInvariantViolation

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

def _punch(grid: Grid, rng, fixed: int, inside: int, vertical: bool) -> Position:
    """
    Opens one border slot on the line `fixed` (a column when vertical, a row
    otherwise). The position along the side is resampled until the slot just
    inside the border, on line `inside`, is already carved.
    """
    span = grid.rows if vertical else grid.cols

    def inner(i):
        return grid.get(i, inside) if vertical else grid.get(inside, i)

    if not any(inner(i) for i in range(1, span - 1)):
        side = "column" if vertical else "row"
        raise InternalInvariantViolation(f"No carved slot next to border {side} {fixed}")

    index = rng.randrange(span - 2) + 1
    while inner(index) == 0:
        index = rng.randrange(span - 2) + 1

    pos = (index, fixed) if vertical else (fixed, index)
    grid.increment(*pos)
    return pos

def place_openings(grid: Grid, rng) -> Tuple[Position, Position]:
    """
    Punches an entrance and an exit through opposite sides of the outer border.

    Orientation is East/West or North/South with equal probability. Both
    openings sit next to a carved interior slot, so the entrance always
    connects to the exit through the maze.

    Returns (entrance, exit) as (row, col) pairs.
    """
    if rng.randrange(2) == 0:
        # Entrance on the east side, exit on the west
        entrance = _punch(grid, rng, grid.cols - 1, grid.cols - 2, vertical=True)
        exit_ = _punch(grid, rng, 0, 1, vertical=True)
    else:
        # Entrance on the north side, exit on the south
        entrance = _punch(grid, rng, 0, 1, vertical=False)
        exit_ = _punch(grid, rng, grid.rows - 1, grid.rows - 2, vertical=False)

    logger.debug(f"Openings placed: entrance={entrance} exit={exit_}")
    return entrance, exit_
