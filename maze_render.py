#!/usr/bin/env python3
# maze_render.py - Turn a walked maze into box-drawing text and trail plots

import numpy as np

from geometry import Direction

# Bit values for the wall segments meeting at a vertex: 1=Left, 2=Up, 4=Right, 8=Down
# Example: 10 = Up(2) + Down(8) = a straight vertical line through the vertex
LEFT_BIT, UP_BIT, RIGHT_BIT, DOWN_BIT = 1, 2, 4, 8

VERTEX_GLYPHS = (
    " ",  # 0
    "╴",  # 1  left
    "╵",  # 2  up
    "┘",  # 3  left up
    "╶",  # 4  right
    "─",  # 5  left right
    "└",  # 6  up right
    "┴",  # 7  left up right
    "╷",  # 8  down
    "┐",  # 9  left down
    "│",  # 10 up down
    "┤",  # 11 left up down
    "┌",  # 12 right down
    "┬",  # 13 left right down
    "├",  # 14 up right down
    "┼",  # 15 all four
)

NODE_GLYPHS = {
    None: "·",
    Direction.LEFT: "←",
    Direction.UP: "↑",
    Direction.RIGHT: "→",
    Direction.DOWN: "↓",
}

H_WALL, H_OPEN = "───", "   "
V_WALL, V_OPEN = "│", " "


def pack_vertex(left, up, right, down):
    """Pack the four wall flags of a vertex into its glyph index"""
    return (LEFT_BIT if left else 0) | (UP_BIT if up else 0) | \
           (RIGHT_BIT if right else 0) | (DOWN_BIT if down else 0)


def format_vertex(left, up, right, down):
    return VERTEX_GLYPHS[pack_vertex(left, up, right, down)]


def format_maze_node(node):
    return NODE_GLYPHS[node.direction]


def collect_horizontal_edges(maze):
    """Walls between vertically stacked cells, shape (height + 1, width)"""
    h_walls = np.ones((maze.height + 1, maze.width), dtype=bool)

    for y in range(1, maze.height):
        for x in range(maze.width):
            # Open when the upper cell went down or the lower cell went up
            if maze.direction_at(x, y - 1) == Direction.DOWN or \
               maze.direction_at(x, y) == Direction.UP:
                h_walls[y, x] = False

    return h_walls


def collect_vertical_edges(maze):
    """Walls between horizontally adjacent cells, shape (height, width + 1)"""
    v_walls = np.ones((maze.height, maze.width + 1), dtype=bool)

    for y in range(maze.height):
        for x in range(1, maze.width):
            # Open when the left cell went right or the right cell went left
            if maze.direction_at(x - 1, y) == Direction.RIGHT or \
               maze.direction_at(x, y) == Direction.LEFT:
                v_walls[y, x] = False

    return v_walls


def collect_vertices(h_walls, v_walls):
    """OR every wall segment into the packed flags of the two vertices it joins"""
    rows, cols = v_walls.shape[0], h_walls.shape[1]
    vertices = np.zeros((rows + 1, cols + 1), dtype=np.uint8)

    # A horizontal wall runs right from its left vertex and left from its right vertex
    vertices[:, :-1] |= np.where(h_walls, RIGHT_BIT, 0).astype(np.uint8)
    vertices[:, 1:] |= np.where(h_walls, LEFT_BIT, 0).astype(np.uint8)

    # A vertical wall runs down from its top vertex and up from its bottom vertex
    vertices[:-1, :] |= np.where(v_walls, DOWN_BIT, 0).astype(np.uint8)
    vertices[1:, :] |= np.where(v_walls, UP_BIT, 0).astype(np.uint8)

    return vertices


def maze_to_wall_grids(maze):
    """Derive the horizontal and vertical wall grids of a maze"""
    return collect_horizontal_edges(maze), collect_vertical_edges(maze)


def _interleave(outer, inner):
    """outer[0], inner[0], outer[1], ... - outer holds one more item than inner"""
    merged = [outer[0]]
    for a, b in zip(inner, outer[1:]):
        merged += [a, b]
    return merged


def format_maze(maze):
    """Render the maze as rows of box-drawing vertices, walls and cell arrows"""
    width, height = maze.width, maze.height

    # Degenerate sizes only have the outer border to draw
    if width == 0 and height == 0:
        return "┌┐\n└┘"
    if height == 0:
        wall = "─".join([H_WALL] * width)
        return f"┌{wall}┐\n└{wall}┘"
    if width == 0:
        return "┌┐\n" + "││\n" * height + "└┘"

    h_walls, v_walls = maze_to_wall_grids(maze)
    vertices = collect_vertices(h_walls, v_walls)

    lines = []
    for y in range(height + 1):
        corners = [VERTEX_GLYPHS[v] for v in vertices[y]]
        segments = [H_WALL if wall else H_OPEN for wall in h_walls[y]]
        lines.append("".join(_interleave(corners, segments)))

        if y < height:
            sides = [V_WALL if wall else V_OPEN for wall in v_walls[y]]
            nodes = [format_maze_node(maze.get(x, y)) for x in range(width)]
            lines.append(" ".join(_interleave(sides, nodes)))

    return "\n".join(lines)


def wall_segments(h_walls, v_walls):
    """Line segments ((x0, y0), (x1, y1)) in cell units for every wall that is present"""
    segments = [((x, y), (x + 1, y)) for y, x in np.argwhere(h_walls)]
    segments += [((x, y), (x, y + 1)) for y, x in np.argwhere(v_walls)]
    return segments


def trail_arrows(maze):
    """Arrow tails at cell centres and unit steps for every cell the walker has left"""
    tails, steps = [], []
    for y in range(maze.height):
        for x in range(maze.width):
            direction = maze.direction_at(x, y)
            if direction is None:
                continue
            tails.append((x + 0.5, y + 0.5))
            steps.append(direction.offset(0, 0))
    return np.array(tails, dtype=float).reshape(-1, 2), np.array(steps, dtype=float).reshape(-1, 2)


def plot_walk(maze, show=True):
    """Draw the walls, the trail of departure arrows and the walker with matplotlib"""
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection

    fig, ax = plt.subplots(figsize=(max(maze.width, 1), max(maze.height, 1)))
    h_walls, v_walls = maze_to_wall_grids(maze)
    ax.add_collection(LineCollection(wall_segments(h_walls, v_walls), linewidths=3, colors='k'))

    tails, steps = trail_arrows(maze)
    if len(tails):
        # Half-cell arrows so neighbouring arrows do not overlap
        ax.quiver(tails[:, 0], tails[:, 1], steps[:, 0], steps[:, 1],
                  angles='xy', scale_units='xy', scale=2, color='tab:blue')

    if maze.width and maze.height:
        ox, oy = maze.origin
        ax.plot(ox + 0.5, oy + 0.5, 'ro', markersize=10)

    ax.set_xlim(0, maze.width)
    ax.set_ylim(maze.height, 0)   # row 0 at the top, as in the text view
    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title(f'Random walk after reaching {maze.origin}')

    if show:
        plt.show()
    return fig, ax
