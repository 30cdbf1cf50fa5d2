import unittest
import itertools

import numpy as np

from geometry import Direction
from maze_graph import MazeGraph
from maze_render import (VERTEX_GLYPHS, format_vertex, pack_vertex, format_maze,
                         collect_horizontal_edges, collect_vertical_edges, collect_vertices,
                         maze_to_wall_grids, wall_segments, trail_arrows, plot_walk)

INITIAL_5X5 = "\n".join([
    "┌───────────────────┐",
    "│ ·   ←   ←   ←   ← │",
    "│   ╶───────────────┤",
    "│ ↑   ←   ←   ←   ← │",
    "│   ╶───────────────┤",
    "│ ↑   ←   ←   ←   ← │",
    "│   ╶───────────────┤",
    "│ ↑   ←   ←   ←   ← │",
    "│   ╶───────────────┤",
    "│ ↑   ←   ←   ←   ← │",
    "└───────────────────┘",
])


def set_walk(maze, directions, origin):
    """Overwrite every cell from a row-major grid of directions (None for the origin)"""
    for y, row in enumerate(directions):
        for x, direction in enumerate(row):
            maze.data[y][x].direction = direction
    maze.origin = origin


class TestVertexGlyphs(unittest.TestCase):

    def test_table_is_total(self):
        self.assertEqual(len(VERTEX_GLYPHS), 16)
        for flags in itertools.product((False, True), repeat=4):
            self.assertIn(format_vertex(*flags), VERTEX_GLYPHS)

    def test_table_entries(self):
        """(left, up, right, down) -> glyph, one entry per combination."""
        expected = {
            (False, False, False, False): " ",
            (False, False, False, True): "╷",
            (False, False, True, False): "╶",
            (False, False, True, True): "┌",
            (False, True, False, False): "╵",
            (False, True, False, True): "│",
            (False, True, True, False): "└",
            (False, True, True, True): "├",
            (True, False, False, False): "╴",
            (True, False, False, True): "┐",
            (True, False, True, False): "─",
            (True, False, True, True): "┬",
            (True, True, False, False): "┘",
            (True, True, False, True): "┤",
            (True, True, True, False): "┴",
            (True, True, True, True): "┼",
        }
        for flags, glyph in expected.items():
            self.assertEqual(format_vertex(*flags), glyph, flags)
        self.assertEqual(len(set(VERTEX_GLYPHS)), 16)

    def test_bit_order(self):
        self.assertEqual(pack_vertex(True, False, False, False), 1)
        self.assertEqual(pack_vertex(False, True, False, False), 2)
        self.assertEqual(pack_vertex(False, False, True, False), 4)
        self.assertEqual(pack_vertex(False, False, False, True), 8)


class TestWallGrids(unittest.TestCase):

    def test_initial_walls(self):
        maze = MazeGraph(5, 5)
        h_walls = collect_horizontal_edges(maze)
        v_walls = collect_vertical_edges(maze)
        self.assertEqual(h_walls.shape, (6, 5))
        self.assertEqual(v_walls.shape, (5, 6))

        # Borders are always walls
        self.assertTrue(h_walls[0].all() and h_walls[5].all())
        self.assertTrue(v_walls[:, 0].all() and v_walls[:, 5].all())

        # Column 0 points up, so every inner wall above it is open
        np.testing.assert_array_equal(h_walls[1:5, 0], [False] * 4)
        self.assertTrue(h_walls[1:5, 1:].all())

        # Everything else points left into its neighbour
        self.assertFalse(v_walls[:, 1:5].any())

    def test_down_and_right_open_walls(self):
        maze = MazeGraph(2, 2)
        set_walk(maze, [[Direction.DOWN, Direction.LEFT],
                        [Direction.RIGHT, None]], origin=(1, 1))
        h_walls, v_walls = maze_to_wall_grids(maze)
        np.testing.assert_array_equal(h_walls, [[True, True], [False, True], [True, True]])
        np.testing.assert_array_equal(v_walls, [[True, False, True], [True, False, True]])

    def test_vertex_flags(self):
        maze = MazeGraph(5, 5)
        vertices = collect_vertices(*maze_to_wall_grids(maze))
        self.assertEqual(vertices.shape, (6, 6))
        self.assertEqual(VERTEX_GLYPHS[vertices[0, 0]], "┌")
        self.assertEqual(VERTEX_GLYPHS[vertices[0, 5]], "┐")
        self.assertEqual(VERTEX_GLYPHS[vertices[2, 1]], "╶")
        self.assertEqual(VERTEX_GLYPHS[vertices[5, 5]], "┘")


class TestFormatMaze(unittest.TestCase):

    def test_initial_5x5(self):
        self.assertEqual(format_maze(MazeGraph(5, 5)), INITIAL_5X5)

    def test_degenerate_sizes(self):
        self.assertEqual(format_maze(MazeGraph(0, 0)), "┌┐\n└┘")
        self.assertEqual(format_maze(MazeGraph(2, 0)), "┌───────┐\n└───────┘")
        self.assertEqual(format_maze(MazeGraph(0, 2)), "┌┐\n││\n││\n└┘")

    def test_walked_2x2(self):
        maze = MazeGraph(2, 2)
        set_walk(maze, [[Direction.RIGHT, Direction.DOWN],
                        [None, Direction.LEFT]], origin=(0, 1))
        self.assertEqual(format_maze(maze), "\n".join([
            "┌───────┐",
            "│ →   ↓ │",
            "├───╴   │",
            "│ ·   ← │",
            "└───────┘",
        ]))

    def test_rendering_is_idempotent(self):
        maze = MazeGraph(6, 4)
        rng = np.random.default_rng(5)
        for _ in range(40):
            maze.move_origin(rng)
        self.assertEqual(format_maze(maze), format_maze(maze))

    def test_line_widths(self):
        maze = MazeGraph(4, 3)
        rng = np.random.default_rng(11)
        for _ in range(30):
            maze.move_origin(rng)
        lines = format_maze(maze).split("\n")
        self.assertEqual(len(lines), 2 * 3 + 1)
        self.assertTrue(all(len(line) == 4 * 4 + 1 for line in lines))
        self.assertEqual(sum(line.count("·") for line in lines), 1)


class TestPlotWalk(unittest.TestCase):

    def test_wall_segments(self):
        """Every present wall becomes one unit segment in cell coordinates."""
        h_walls, v_walls = maze_to_wall_grids(MazeGraph(2, 2))
        segments = {(tuple(map(int, a)), tuple(map(int, b)))
                    for a, b in wall_segments(h_walls, v_walls)}
        self.assertEqual(len(segments), int(h_walls.sum() + v_walls.sum()))
        self.assertIn(((0, 0), (1, 0)), segments)       # top border
        self.assertIn(((1, 1), (2, 1)), segments)       # wall under the right column
        self.assertNotIn(((0, 1), (1, 1)), segments)    # opened by the up arrow below
        self.assertNotIn(((1, 0), (1, 1)), segments)    # opened by the left arrow

    def test_trail_arrows_skip_origin(self):
        maze = MazeGraph(2, 2)
        set_walk(maze, [[Direction.RIGHT, Direction.DOWN],
                        [None, Direction.LEFT]], origin=(0, 1))
        tails, steps = trail_arrows(maze)
        self.assertEqual(tails.shape, (3, 2))
        np.testing.assert_array_equal(tails, [[0.5, 0.5], [1.5, 0.5], [1.5, 1.5]])
        np.testing.assert_array_equal(steps, [[1, 0], [0, 1], [-1, 0]])

    def test_trail_arrows_empty_grid(self):
        tails, steps = trail_arrows(MazeGraph(0, 0))
        self.assertEqual(tails.shape, (0, 2))
        self.assertEqual(steps.shape, (0, 2))

    def test_plot_without_showing(self):
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        maze = MazeGraph(3, 3)
        rng = np.random.default_rng(4)
        for _ in range(10):
            maze.move_origin(rng)
        fig, ax = plot_walk(maze, show=False)
        self.assertEqual(tuple(ax.get_xlim()), (0.0, 3.0))
        self.assertEqual(tuple(ax.get_ylim()), (3.0, 0.0))
        self.assertIn(str(maze.origin), ax.get_title())
        plt.close(fig)


if __name__ == '__main__':
    unittest.main()
