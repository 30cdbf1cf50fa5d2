#!/usr/bin/env python3
# geometry.py - Grid geometry constants and walk directions

from enum import IntEnum
from numbers import Integral

WIDTH, HEIGHT        = 5, 5    # default grid size (columns × rows)
ITERATIONS_PER_CELL  = 10      # default walk length is WIDTH*HEIGHT*this
DRAW_RANGE           = 12      # lcm(2, 3, 4): one draw splits evenly into 2, 3 or 4 moves

# Direction vectors for moving in each absolute direction
# Left(0), Up(1), Right(2), Down(3) - y grows downwards, row 0 is printed first
DX = [-1, 0, 1, 0]
DY = [0, -1, 0, 1]


class Direction(IntEnum):
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_ordinal(cls, ordinal):
        """Map an ordinal 0-3 to its Direction, rejecting anything else"""
        if isinstance(ordinal, bool) or not isinstance(ordinal, Integral) or ordinal not in (0, 1, 2, 3):
            raise ValueError(f"no direction with ordinal {ordinal}")
        return cls(ordinal)

    def offset(self, x, y):
        """Return the neighbouring cell one step away in this direction"""
        return x + DX[self], y + DY[self]
