"""Plain-text rendering of a generated maze (CLI / diagnostics).

North is up: rows are printed from z_max down to z_min.

    +---+---+
    | S     |
    +   +---+
    |     G |
    +---+---+
"""

from __future__ import annotations

from typing import Dict, Tuple

from .walls import Coord2D, Orientation, Wall

CORNER = "+"
H_WALL = "---"
V_WALL = "|"
START = "S"
GOAL = "G"


def _wall_index(walls) -> Dict[Tuple[Coord2D, Orientation], Wall]:
    return {(w.sw_corner, w.orientation): w for w in walls}


def render_ascii(maze) -> str:
    x_min, x_max = maze.x_range
    z_min, z_max = maze.z_range
    index = _wall_index(maze.walls)

    def present(x, z, orientation):
        w = index.get(((x, z), orientation))
        return w is not None and w.is_present

    lines = []
    for z in range(z_max, z_min - 1, -1):
        line = CORNER
        for x in range(x_min, x_max):
            line += (H_WALL if present(x, z, Orientation.PARALLEL_TO_X) else "   ") + CORNER
        lines.append(line)
        if z == z_min:
            break
        row = z - 1
        line = ""
        for x in range(x_min, x_max + 1):
            line += V_WALL if present(x, row, Orientation.PARALLEL_TO_Z) else " "
            if x == x_max:
                break
            mark = " "
            if (x, row) == tuple(maze.goal):
                mark = GOAL
            if (x, row) == tuple(maze.start):
                mark = START
            line += f" {mark} "
        lines.append(line)
    return "\n".join(lines)


__all__ = ["render_ascii"]
