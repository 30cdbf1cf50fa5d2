#!/usr/bin/env python3
# maze_graph.py - Grid model and the bounded random walk over it

from dataclasses import dataclass
from typing import Optional

import numpy as np

from geometry import DRAW_RANGE, Direction


class MazeInvariantError(AssertionError):
    """Raised when the walk reaches a state that correct code can never produce"""


@dataclass(slots=True)
class MazeNode:
    """One grid cell: the direction the walker left it by, or None for the origin"""
    direction: Optional[Direction] = None

    @classmethod
    def origin(cls):
        return cls(None)

    @classmethod
    def towards(cls, direction: Direction):
        return cls(direction)

    @property
    def is_origin(self) -> bool:
        return self.direction is None


def random_direction(rng):
    """Draw one of the four directions uniformly, ignoring the grid bounds"""
    return Direction.from_ordinal(int(rng.integers(0, 4)))


def legal_directions(x, y, width, height):
    """
    Classify (x, y) and return the moves that keep the walker on the grid.

    Corners are checked before edges and edges before the interior, so a cell
    touching two borders is always treated as a corner. The order of the
    returned tuple decides which slice of the [0, 12) draw each move owns.
    """
    if not (0 <= x < width and 0 <= y < height):
        raise MazeInvariantError(f"origin {(x, y)} should be in-bounds of {width}x{height}")

    left, top = x == 0, y == 0
    right, bottom = x == width - 1, y == height - 1

    # Corners
    if left and top:
        return (Direction.RIGHT, Direction.DOWN)
    if right and top:
        return (Direction.LEFT, Direction.DOWN)
    if right and bottom:
        return (Direction.LEFT, Direction.UP)
    if left and bottom:
        return (Direction.UP, Direction.RIGHT)

    # Edges
    if left:
        return (Direction.UP, Direction.RIGHT, Direction.DOWN)
    if top:
        return (Direction.LEFT, Direction.RIGHT, Direction.DOWN)
    if right:
        return (Direction.LEFT, Direction.UP, Direction.DOWN)
    if bottom:
        return (Direction.LEFT, Direction.UP, Direction.RIGHT)

    # Inside
    return (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


def choose_direction(candidates, draw):
    """Pick a candidate from a single draw in [0, DRAW_RANGE), each owning an equal slice"""
    if not 0 <= draw < DRAW_RANGE:
        raise MazeInvariantError(f"direction draw {draw} should be within [0, {DRAW_RANGE})")
    if DRAW_RANGE % len(candidates):
        raise MazeInvariantError(f"{len(candidates)} candidates do not split {DRAW_RANGE} evenly")
    return candidates[draw // (DRAW_RANGE // len(candidates))]


def gen_bounded_direction(x, y, width, height, rng):
    """Sample a direction from (x, y) that never steps off a width×height grid"""
    candidates = legal_directions(x, y, width, height)
    return choose_direction(candidates, int(rng.integers(0, DRAW_RANGE)))


class MazeGraph:
    def __init__(self, width, height):
        if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width < 0:
            raise ValueError(f"maze width must be a non-negative integer, got {width!r}")
        if isinstance(height, bool) or not isinstance(height, (int, np.integer)) or height < 0:
            raise ValueError(f"maze height must be a non-negative integer, got {height!r}")

        self.width = int(width)
        self.height = int(height)
        self.origin = (0, 0)

        # Seed pattern before any step: column 0 points up, everything else left
        self.data = [
            [MazeNode.towards(Direction.UP if x == 0 else Direction.LEFT) for x in range(self.width)]
            for _ in range(self.height)
        ]
        if self.width and self.height:
            self.data[0][0] = MazeNode.origin()

    def __repr__(self):
        return f"MazeGraph(width={self.width}, height={self.height}, origin={self.origin})"

    @property
    def can_move(self):
        """A walk needs at least two columns and two rows"""
        return self.width > 1 and self.height > 1

    def get(self, x, y):
        """Return the node at (x, y), or None when the coordinate is off the grid"""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.data[y][x]
        return None

    def direction_at(self, x, y):
        node = self.get(x, y)
        return None if node is None else node.direction

    def origin_count(self):
        """Count the cells currently marked as the walker's position"""
        return sum(node.is_origin for row in self.data for node in row)

    def move_origin(self, rng):
        """
        Advance the walk by exactly one cell.

        The vacated cell records the direction taken and the entered cell is
        cleared to become the new origin. Requires a grid of at least 2x2.
        Returns the direction moved.
        """
        if not self.can_move:
            raise ValueError(f"cannot walk a {self.width}x{self.height} maze, need at least 2x2")

        x, y = self.origin
        direction = gen_bounded_direction(x, y, self.width, self.height, rng)
        self.data[y][x].direction = direction

        nx, ny = direction.offset(x, y)
        if not (0 <= nx < self.width and 0 <= ny < self.height):
            raise MazeInvariantError(f"{direction.name} from {(x, y)} left the grid")
        self.origin = (nx, ny)
        self.data[ny][nx].direction = None

        return direction
