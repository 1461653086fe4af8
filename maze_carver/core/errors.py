class MazeError(Exception):
    """Base class for everything the maze carver raises on purpose."""


class InvalidDimensions(MazeError, ValueError):
    """Grid dimensions cannot hold a carvable interior."""

    def __init__(self, rows: int, cols: int, reason: str):
        self.rows = rows
        self.cols = cols
        self.reason = reason
        super().__init__(f"Invalid maze dimensions {rows}x{cols}: {reason}")


class InternalInvariantViolation(MazeError, RuntimeError):
    """
    The carving state reached a configuration that a correct run can never
    produce. This is a bug in the generator, not a bad input.
    """
