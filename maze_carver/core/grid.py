import operator
from array import array
from typing import Iterator, List, Tuple

from maze_carver.core.errors import InvalidDimensions

class Grid:
    # Direction encoding (iteration order matters for backtracking tie-breaks)
    EAST  = 0
    NORTH = 1
    WEST  = 2
    SOUTH = 3

    DIRECTIONS = (EAST, NORTH, WEST, SOUTH)
    NAMES = {EAST: "east", NORTH: "north", WEST: "west", SOUTH: "south"}

    # Direction Helpers (row, col offsets)
    DR = {EAST: 0, NORTH: -1, WEST: 0, SOUTH: 1}
    DC = {EAST: 1, NORTH: 0, WEST: -1, SOUTH: 0}

    # 0 = standing wall / unvisited, >= 1 = carved (value is the visit count)
    WALL = 0

    # Smallest grid with a 2x2 block of cells inside the border
    MIN_SIZE = 5

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        rows, cols = self.validate_dimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        # 'H' (unsigned short) -> 2 bytes per slot, visit counts never exceed 4
        self.cells = array('H', [self.WALL] * (rows * cols))

    @classmethod
    def validate_dimensions(cls, rows: int, cols: int) -> Tuple[int, int]:
        """
        Raises InvalidDimensions unless both dimensions are odd and at least
        MIN_SIZE. Odd indices are cells, even indices are wall slots, so an
        even dimension leaves a line next to the far border that can never be
        carved.

        Returns the dimensions as plain ints (numpy integers are accepted).
        """
        if isinstance(rows, bool) or isinstance(cols, bool):
            raise InvalidDimensions(rows, cols, "dimensions must be integers")
        try:
            rows, cols = operator.index(rows), operator.index(cols)
        except TypeError:
            raise InvalidDimensions(rows, cols, "dimensions must be integers") from None
        if rows < cls.MIN_SIZE or cols < cls.MIN_SIZE:
            raise InvalidDimensions(rows, cols, f"both dimensions must be at least {cls.MIN_SIZE}")
        if rows % 2 == 0 or cols % 2 == 0:
            raise InvalidDimensions(rows, cols, "both dimensions must be odd")
        return rows, cols

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get(self, row: int, col: int) -> int:
        return self.cells[self.get_index(row, col)]

    def increment(self, row: int, col: int) -> int:
        """Bumps the visit count at (row, col) and returns the new value."""
        idx = self.get_index(row, col)
        self.cells[idx] += 1
        return self.cells[idx]

    def is_open(self, row: int, col: int) -> bool:
        return self.cells[self.get_index(row, col)] != self.WALL

    @staticmethod
    def is_cell(row: int, col: int) -> bool:
        return row % 2 == 1 and col % 2 == 1

    def is_border(self, row: int, col: int) -> bool:
        return row == 0 or col == 0 or row == self.rows - 1 or col == self.cols - 1

    @property
    def cell_rows(self) -> int:
        return (self.rows - 1) // 2

    @property
    def cell_cols(self) -> int:
        return (self.cols - 1) // 2

    def cell_positions(self) -> Iterator[Tuple[int, int]]:
        """Yields every traversable (odd, odd) coordinate, row-major."""
        for row in range(1, self.rows - 1, 2):
            for col in range(1, self.cols - 1, 2):
                yield (row, col)

    def step(self, row: int, col: int, direction: int, distance: int = 1) -> Tuple[int, int]:
        return (row + self.DR[direction] * distance, col + self.DC[direction] * distance)

    def to_rows(self) -> List[List[int]]:
        return [list(self.cells[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self.cells == other.cells

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"
