import sys
from typing import Iterator, TextIO
from maze_carver.core.grid import Grid

class TextRenderer:
    GLYPH_WALL = "■"  # Filled square
    GLYPH_WALL_ASCII = "#"
    GLYPH_OPEN = " "

    def __init__(self, grid: Grid, wall_glyph: str = GLYPH_WALL, open_glyph: str = GLYPH_OPEN, padding: int = 2):
        self.grid = grid
        self.wall_glyph = wall_glyph
        self.open_glyph = open_glyph
        # Terminal glyphs are taller than wide, pad so the maze looks square-ish
        self.padding = " " * padding

    def render_lines(self) -> Iterator[str]:
        wall = self.wall_glyph + self.padding
        space = self.open_glyph + self.padding
        for row in self.grid.to_rows():
            yield "".join(wall if val == Grid.WALL else space for val in row)

    def render(self) -> str:
        return "\n".join(self.render_lines())

    def show(self, stream: TextIO = None):
        stream = stream or sys.stdout
        for line in self.render_lines():
            stream.write(line + "\n")
