from collections import deque
from typing import Dict, List, Optional, Tuple

import numpy as np

from maze_carver.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def as_array(grid: Grid) -> np.ndarray:
        """(rows, cols) view of the visit counts. Shares memory with the grid."""
        return np.frombuffer(grid.cells, dtype=np.uint16).reshape(grid.rows, grid.cols)

    @staticmethod
    def cell_count(grid: Grid) -> int:
        return grid.cell_rows * grid.cell_cols

    @staticmethod
    def carved_wall_count(grid: Grid) -> int:
        """Carved wall slots strictly inside the border (openings excluded)."""
        inner = MazeAnalyzer.as_array(grid)[1:-1, 1:-1]
        # Wall slots are the odd/even and even/odd positions; inner[0,0] is the (1,1) cell
        parity = np.add.outer(np.arange(inner.shape[0]), np.arange(inner.shape[1])) % 2
        return int(np.count_nonzero(inner[parity == 1]))

    @staticmethod
    def find_openings(grid: Grid) -> List[Tuple[int, int]]:
        """Carved border slots, row-major."""
        arr = MazeAnalyzer.as_array(grid)
        border = np.ones(arr.shape, dtype=bool)
        border[1:-1, 1:-1] = False
        rows, cols = np.nonzero(border & (arr > 0))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    @staticmethod
    def reachable_cells(grid: Grid, start: Optional[Tuple[int, int]] = None) -> int:
        """Flood fills from `start` (default (1, 1)) through carved wall slots."""
        if start is None:
            start = (1, 1)
        if not grid.is_cell(*start):
            raise ValueError(f"{start} is not a cell coordinate")

        seen = {start}
        queue = deque([start])
        while queue:
            row, col = queue.popleft()
            for direction in Grid.DIRECTIONS:
                nr, nc = grid.step(row, col, direction, 2)
                if not (0 < nr < grid.rows - 1 and 0 < nc < grid.cols - 1):
                    continue
                if (nr, nc) in seen or not grid.is_open(*grid.step(row, col, direction)):
                    continue
                seen.add((nr, nc))
                queue.append((nr, nc))
        return len(seen)

    @staticmethod
    def is_connected(grid: Grid, start: Optional[Tuple[int, int]] = None) -> bool:
        return MazeAnalyzer.reachable_cells(grid, start) == MazeAnalyzer.cell_count(grid)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected, and exactly cells - 1 carved walls: the passages form a tree."""
        cells = MazeAnalyzer.cell_count(grid)
        return (MazeAnalyzer.carved_wall_count(grid) == cells - 1
                and MazeAnalyzer.is_connected(grid))

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        arr = MazeAnalyzer.as_array(grid) > 0
        r, c = grid.rows, grid.cols

        # Open sides of every cell, border openings included
        degree = (arr[1:r - 1:2, 2:c:2].astype(int)      # east
                  + arr[0:r - 2:2, 1:c - 1:2]            # north
                  + arr[1:r - 1:2, 0:c - 2:2]            # west
                  + arr[2:r:2, 1:c - 1:2])               # south

        cells = MazeAnalyzer.cell_count(grid)
        dead_ends = int(np.count_nonzero(degree == 1))
        return {
            "cells": cells,
            "carved_walls": MazeAnalyzer.carved_wall_count(grid),
            "openings": len(MazeAnalyzer.find_openings(grid)),
            "dead_ends": dead_ends,
            "corridors": int(np.count_nonzero(degree == 2)),
            "junctions": int(np.count_nonzero(degree >= 3)),
            "dead_end_percent": (dead_ends / cells) * 100 if cells > 0 else 0,
        }
