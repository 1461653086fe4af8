import logging
from typing import Iterator, List, Optional, Tuple
from maze_carver.core.grid import Grid
from maze_carver.core.errors import InternalInvariantViolation
from maze_carver.algo.base import Generator
from maze_carver.algo.openings import place_openings

logger = logging.getLogger(__name__)

class MazeCarver(Generator):
    """
    Randomized recursive backtracker working directly on the wall/cell grid.

    Every slot the carver passes through has its visit count bumped. Forward
    moves break a standing wall and land on an untouched cell two slots away;
    when no forward move exists the carver retreats along the adjacent carved
    slot with the lowest count, which is always the one it arrived through.
    Carving stops as soon as the start cell is entered a second time.
    """

    def __init__(self, grid: Grid, rng=None, seed: int = None):
        super().__init__(grid, rng=rng, seed=seed)
        self.start: Optional[Tuple[int, int]] = None
        self.position: Optional[Tuple[int, int]] = None
        self.entrance: Optional[Tuple[int, int]] = None
        self.exit: Optional[Tuple[int, int]] = None
        self.carve_count = 0
        self.backtrack_count = 0

    def _random_odd(self, size: int) -> int:
        # Interior range [1, size - 2], rejection sampled down to odd values
        value = self.rng.randrange(size - 2) + 1
        while value % 2 != 1:
            value = self.rng.randrange(size - 2) + 1
        return value

    def choose_start(self) -> Tuple[int, int]:
        col = self._random_odd(self.grid.cols)
        row = self._random_odd(self.grid.rows)
        return (row, col)

    def valid_directions(self, row: int, col: int) -> List[int]:
        """
        Directions (E, N, W, S order) where both the adjacent wall slot and
        the cell beyond it are untouched and that cell stays off the border.
        """
        grid = self.grid
        paths = []
        for direction in Grid.DIRECTIONS:
            nr, nc = grid.step(row, col, direction, 2)
            if not (1 <= nr <= grid.rows - 2 and 1 <= nc <= grid.cols - 2):
                continue
            wr, wc = grid.step(row, col, direction)
            if grid.get(wr, wc) == 0 and grid.get(nr, nc) == 0:
                paths.append(direction)
        return paths

    def backtrack_direction(self, row: int, col: int) -> int:
        """
        Direction of the adjacent wall slot with the smallest positive visit
        count. Ties go to the first direction in E, N, W, S order.
        """
        best = None
        best_value = 0
        for direction in Grid.DIRECTIONS:
            value = self.grid.get(*self.grid.step(row, col, direction))
            if value > 0 and (best is None or value < best_value):
                best = direction
                best_value = value
        if best is None:
            raise InternalInvariantViolation(f"No carved slot to backtrack through at {(row, col)}")
        return best

    def move(self, direction: int):
        """Bumps the wall slot ahead and advances two slots in that direction."""
        row, col = self.position
        self.grid.increment(*self.grid.step(row, col, direction))
        self.position = self.grid.step(row, col, direction, 2)
        self.step_count += 1

    def carve(self) -> Iterator[str]:
        """Carves the interior only. The border stays closed."""
        grid = self.grid
        self.start = self.choose_start()
        self.position = self.start
        logger.debug(f"Carving {grid.rows}x{grid.cols} grid from {self.start}")

        # A spanning tree over n cells is walked in exactly 2 * (n - 1) moves
        max_steps = 2 * grid.cell_rows * grid.cell_cols

        while True:
            grid.increment(*self.position)

            # Back at the start after backtracking: nothing left to explore
            if grid.get(*self.start) > 1:
                break

            if self.step_count >= max_steps:
                raise InternalInvariantViolation(
                    f"Carving did not return to {self.start} within {max_steps} moves"
                )

            paths = self.valid_directions(*self.position)
            if paths:
                self.move(paths[self.rng.randrange(len(paths))])
                self.carve_count += 1
                if self.step_count % 100 == 0:
                    yield f"Carving... Carved: {self.carve_count}"
            else:
                direction = self.backtrack_direction(*self.position)
                logger.debug(f"Dead end at {self.position}, backtracking {Grid.NAMES[direction]}")
                self.move(direction)
                self.backtrack_count += 1
                if self.step_count % 100 == 0:
                    yield f"Backtracking... Carved: {self.carve_count}"

        logger.debug(f"Interior done: {self.carve_count} carves, {self.backtrack_count} backtracks")

    def run(self) -> Iterator[str]:
        yield from self.carve()
        self.entrance, self.exit = place_openings(self.grid, self.rng)
        yield "Done"

def generate(rows: int, cols: int, rng=None, seed: int = None) -> Grid:
    """Builds a rows x cols grid and carves a perfect maze with openings into it."""
    grid = Grid(rows, cols)
    MazeCarver(grid, rng=rng, seed=seed).run_all()
    return grid
