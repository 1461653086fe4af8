import random
from abc import ABC, abstractmethod
from typing import Iterator
from maze_carver.core.grid import Grid

class Generator(ABC):
    """
    Stepwise maze builder working in place on a Grid.

    rng is any object with randrange(n); draws are consumed in strict call
    order, so a seeded or scripted source reproduces the same maze. When no
    rng is given a random.Random(seed) is created. Subclasses bump
    step_count once per move.
    """
    def __init__(self, grid: Grid, rng=None, seed: int = None):
        self.grid = grid
        self.seed = seed
        # Any object exposing randrange(n) will do; injected sources make runs reproducible
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        
    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
