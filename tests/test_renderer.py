import unittest
import io
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.viz.text_renderer import TextRenderer
from maze_carver.algo.carver import generate

class TestTextRenderer(unittest.TestCase):
    def test_solid_grid(self):
        grid = Grid(5, 5)
        lines = list(TextRenderer(grid).render_lines())
        self.assertEqual(len(lines), 5)
        for line in lines:
            self.assertEqual(line, "■  " * 5)

    def test_open_slots_are_blank(self):
        grid = Grid(5, 5)
        grid.increment(1, 1)
        grid.increment(1, 2)
        lines = list(TextRenderer(grid, wall_glyph="#").render_lines())
        self.assertEqual(lines[1], "#  " + "   " + "   " + "#  " + "#  ")
        self.assertEqual(lines[0], "#  " * 5)

    def test_padding(self):
        grid = Grid(5, 5)
        text = TextRenderer(grid, wall_glyph="#", padding=0).render()
        self.assertEqual(text, "\n".join(["#####"] * 5))

    def test_show_writes_every_row(self):
        grid = generate(9, 13, seed=1)
        buf = io.StringIO()
        TextRenderer(grid).show(buf)
        lines = buf.getvalue().splitlines()
        self.assertEqual(len(lines), 9)
        self.assertTrue(all(len(line) == 13 * 3 for line in lines))
        # Two openings in the border
        glyphs = [line[::3] for line in lines]
        border = glyphs[0] + glyphs[-1] + "".join(g[0] + g[-1] for g in glyphs[1:-1])
        self.assertEqual(border.count(" "), 2)

if __name__ == '__main__':
    unittest.main()
