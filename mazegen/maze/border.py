from typing import List

from .config import IntRange
from .walls import Disposition, Orientation, Wall


def border_walls(x_range: IntRange, z_range: IntRange) -> List[Wall]:
    """Outer boundary walls, always PRESENT and independent of the seed.

    South and north edges first (one PARALLEL_TO_X wall per x step), then west
    and east edges (one PARALLEL_TO_Z wall per z step).
    """
    x_min, x_max = x_range
    z_min, z_max = z_range
    walls: List[Wall] = []
    for x in range(x_min, x_max):
        walls.append(Wall((x, z_min), Orientation.PARALLEL_TO_X, Disposition.PRESENT))
        walls.append(Wall((x, z_max), Orientation.PARALLEL_TO_X, Disposition.PRESENT))
    for z in range(z_min, z_max):
        walls.append(Wall((x_min, z), Orientation.PARALLEL_TO_Z, Disposition.PRESENT))
        walls.append(Wall((x_max, z), Orientation.PARALLEL_TO_Z, Disposition.PRESENT))
    return walls


__all__ = ["border_walls"]
