"""Public maze package interface."""

from .border import border_walls
from .carver import CarveStats, carve_spanning_tree
from .config import MazeConfig, Sizes
from .pipeline import Maze, generate_maze
from .rooms import Room, RoomGraph, build_room_graph
from .spawn import SpawnPositions, all_pairs_distances, select_spawn_positions
from .walls import Disposition, MazeInvariantError, Orientation, Wall  # noqa: F401

__all__ = [
    "CarveStats",
    "Disposition",
    "Maze",
    "MazeConfig",
    "MazeInvariantError",
    "Orientation",
    "Room",
    "RoomGraph",
    "Sizes",
    "SpawnPositions",
    "Wall",
    "all_pairs_distances",
    "border_walls",
    "build_room_graph",
    "carve_spanning_tree",
    "generate_maze",
    "select_spawn_positions",
]
