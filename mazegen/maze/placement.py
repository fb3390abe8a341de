"""World-space placement descriptors for the geometry layer.

Only data is produced here: where each standing wall, corner post and spawn
point goes once grid units are scaled by ``room_side_length``. Mesh and
collider construction stay with the consumer.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .config import Sizes
from .rooms import Room
from .walls import Orientation, Wall

WorldXZ = Tuple[float, float]


def wall_center(wall: Wall, sizes: Sizes) -> WorldXZ:
    x, z = wall.sw_corner
    side = sizes.room_side_length
    if wall.orientation is Orientation.PARALLEL_TO_X:
        return ((x + 0.5) * side, z * side)
    return (x * side, (z + 0.5) * side)


def wall_placements(maze) -> List[Dict]:
    """One descriptor per PRESENT wall.

    ``rotation_quarter_turns`` is 1 for walls running along z (rotate a unit
    x-aligned segment a quarter turn about the vertical axis).
    """
    sizes = maze.sizes
    out = []
    for wall in maze.present_walls():
        cx, cz = wall_center(wall, sizes)
        out.append(
            {
                "center": [cx, cz],
                "rotation_quarter_turns": 0 if wall.orientation is Orientation.PARALLEL_TO_X else 1,
                "length": sizes.room_side_length,
                "radius": sizes.wall_radius,
            }
        )
    return out


def corner_posts(maze) -> List[WorldXZ]:
    """Every grid corner, boundary included, in world space."""
    side = maze.sizes.room_side_length
    x_min, x_max = maze.x_range
    z_min, z_max = maze.z_range
    return [(x * side, z * side) for x in range(x_min, x_max + 1) for z in range(z_min, z_max + 1)]


def spawn_world_position(room: Room, sizes: Sizes) -> WorldXZ:
    side = sizes.room_side_length
    return ((room.west_edge + 0.5) * side, (room.south_edge + 0.5) * side)


__all__ = ["corner_posts", "spawn_world_position", "wall_center", "wall_placements"]
