"""Room graph construction.

Rooms live in a dense arena sorted by coordinate so every random choice made
later can be expressed as an index into a stable list. Edges are keyed by the
sorted pair of room indices, giving O(1) lookup by endpoints.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Tuple

from .config import IntRange, validate_range
from .walls import Disposition, MazeInvariantError, Orientation, Wall

EdgeKey = Tuple[int, int]
Adjacency = List[List[int]]


class Room(NamedTuple):
    west_edge: int
    south_edge: int

    def to_list(self) -> List[int]:
        return [self.west_edge, self.south_edge]


class RoomGraph:
    """Undirected grid graph: rooms as nodes, interior walls as edges."""

    def __init__(self, x_range: IntRange, z_range: IntRange):
        self.x_range = x_range
        self.z_range = z_range
        self.rooms: List[Room] = []
        self._index: Dict[Room, int] = {}
        self._edges: Dict[EdgeKey, Wall] = {}

    def _add_room(self, room: Room) -> int:
        idx = len(self.rooms)
        self.rooms.append(room)
        self._index[room] = idx
        return idx

    def _add_edge(self, a: int, b: int, wall: Wall) -> None:
        key = (a, b) if a < b else (b, a)
        if a == b or key in self._edges:
            raise MazeInvariantError(f"duplicate or self edge {key}")
        self._edges[key] = wall

    def __len__(self) -> int:
        return len(self.rooms)

    def index_of(self, room: Room) -> int:
        try:
            return self._index[room]
        except KeyError:
            raise MazeInvariantError(f"room {tuple(room)} not in graph") from None

    def edge(self, a: int, b: int) -> Wall:
        key = (a, b) if a < b else (b, a)
        try:
            return self._edges[key]
        except KeyError:
            raise MazeInvariantError(f"no edge between rooms {key}") from None

    def edges(self) -> Iterator[Tuple[EdgeKey, Wall]]:
        return iter(self._edges.items())

    def walls(self) -> List[Wall]:
        return list(self._edges.values())

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def neighbors(self, idx: int) -> List[int]:
        """Indices of axis-adjacent rooms in fixed order: -x, +x, -z, +z."""
        x, z = self.rooms[idx]
        out = []
        for nx, nz in ((x - 1, z), (x + 1, z), (x, z - 1), (x, z + 1)):
            n = self._index.get(Room(nx, nz))
            if n is not None:
                out.append(n)
        return out

    def passable_neighbors(self, idx: int) -> List[int]:
        return [n for n in self.neighbors(idx) if self.edge(idx, n).disposition is Disposition.ABSENT]

    def passable_adjacency(self) -> Adjacency:
        """Neighbour lists over ABSENT walls only, built once per carved graph."""
        adj: Adjacency = [[] for _ in self.rooms]
        for (a, b), wall in self._edges.items():
            if wall.disposition is Disposition.ABSENT:
                adj[a].append(b)
                adj[b].append(a)
        return adj


def wall_between(a: Room, b: Room) -> Wall:
    """Return a fresh UNKNOWN wall separating two axis-adjacent rooms."""
    dx = b.west_edge - a.west_edge
    dz = b.south_edge - a.south_edge
    if (abs(dx), abs(dz)) == (1, 0):
        return Wall((max(a.west_edge, b.west_edge), a.south_edge), Orientation.PARALLEL_TO_Z)
    if (abs(dx), abs(dz)) == (0, 1):
        return Wall((a.west_edge, max(a.south_edge, b.south_edge)), Orientation.PARALLEL_TO_X)
    raise MazeInvariantError(f"rooms {tuple(a)} and {tuple(b)} are not adjacent")


def build_room_graph(x_range: IntRange, z_range: IntRange) -> RoomGraph:
    """Build the full grid graph with one UNKNOWN wall per adjacent room pair.

    Ranges are inclusive bounds; rooms occupy the half-open interval
    ``[min, max)`` on each axis, the upper bound being the outer boundary.
    """
    validate_range("x_range", x_range)
    validate_range("z_range", z_range)
    graph = RoomGraph(x_range, z_range)
    for x in range(x_range[0], x_range[1]):
        for z in range(z_range[0], z_range[1]):
            graph._add_room(Room(x, z))
    # Arena is x-major, so +z is idx+1 and +x is idx+height; inserting +z first keeps keys sorted.
    for idx, room in enumerate(graph.rooms):
        for other in (Room(room.west_edge, room.south_edge + 1), Room(room.west_edge + 1, room.south_edge)):
            n = graph._index.get(other)
            if n is not None:
                graph._add_edge(idx, n, wall_between(room, other))
    return graph


__all__ = ["Adjacency", "EdgeKey", "Room", "RoomGraph", "build_room_graph", "wall_between"]
