#!/usr/bin/env python3
# run_walk.py - Animate a random walk over a grid as a box-drawing maze

import argparse
import sys
import time

import numpy as np

from geometry import WIDTH, HEIGHT, ITERATIONS_PER_CELL
from maze_graph import MazeGraph
from maze_render import format_maze, plot_walk

CLEAR_SCREEN = "\033[H\033[J"   # cursor home, erase to end of screen


def walk_size(value):
    """argparse type for a grid side the walker can move along"""
    size = int(value)
    if size < 2:
        raise argparse.ArgumentTypeError(f"grid side must be at least 2, got {size}")
    return size


def non_negative(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return number


def non_negative_float(value):
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description='Animate a random walk as a box-drawing maze')
    parser.add_argument('--width', type=walk_size, default=WIDTH, help='Number of grid columns')
    parser.add_argument('--height', type=walk_size, default=HEIGHT, help='Number of grid rows')
    parser.add_argument('--iterations', type=non_negative,
                        help=f'Number of walk steps, numbered 1..N (default: width*height*{ITERATIONS_PER_CELL})')
    parser.add_argument('--seed', type=non_negative, help='Seed the random walk for a reproducible run')
    parser.add_argument('--delay', type=non_negative_float, default=0.0,
                        help='Seconds to pause between frames')
    parser.add_argument('--clear', action='store_true', help='Clear the terminal before each frame')
    parser.add_argument('--plot', action='store_true',
                        help='Plot the final walls and trail using matplotlib')
    return parser


def show_frame(title, maze, out, clear=False, first=False):
    """Write one titled maze frame to the output stream"""
    if clear:
        out.write(CLEAR_SCREEN)
    elif not first:
        print(file=out)
    print(title, file=out)
    print(format_maze(maze), file=out)
    out.flush()


def run_walk(maze, rng, iterations, out=None, delay=0.0, clear=False):
    """
    Print the initial maze, then step and reprint it for every iteration.

    Frames are numbered 1..iterations inclusive, so the default run prints
    width*height*10 steps rather than stopping one short of it.
    """
    out = sys.stdout if out is None else out

    show_frame("Initial maze", maze, out, clear=clear, first=True)
    for idx in range(1, iterations + 1):
        if delay:
            time.sleep(delay)
        maze.move_origin(rng)
        show_frame(f"After iteration #{idx}", maze, out, clear=clear)

    return maze


def main(argv=None):
    args = build_parser().parse_args(argv)

    iterations = args.iterations
    if iterations is None:
        iterations = args.width * args.height * ITERATIONS_PER_CELL

    if args.seed is not None:
        print(f"Seeding random walk with {args.seed}", file=sys.stderr)
    rng = np.random.default_rng(args.seed)

    maze = MazeGraph(args.width, args.height)

    try:
        run_walk(maze, rng, iterations, delay=args.delay, clear=args.clear)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 0

    if args.plot:
        plot_walk(maze)

    return 0


if __name__ == "__main__":
    sys.exit(main())
