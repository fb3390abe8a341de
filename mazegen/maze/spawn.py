"""Start/goal selection over the carved maze.

Distances count passable (ABSENT) walls crossed; PRESENT walls are not edges
at all. Because the carved passages form a spanning tree every pair has a
finite distance, and the farthest pair are the endpoints of the tree's
diameter.

Rows of the all-pairs table are produced one source at a time by
``distance_rows`` so the selector never holds more than one row.
"""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence

from .rooms import Adjacency, Room, RoomGraph
from .walls import MazeInvariantError

DistanceMatrix = List[List[float]]


class SpawnPositions(NamedTuple):
    start: Room
    goal: Room

    def to_dict(self):
        return {"start": self.start.to_list(), "goal": self.goal.to_list()}


def _bfs_row(adj: Adjacency, source: int) -> List[float]:
    dist = [-1] * len(adj)
    dist[source] = 0
    reached = 1
    q = deque([source])
    while q:
        cur = q.popleft()
        nd = dist[cur] + 1
        for n in adj[cur]:
            if dist[n] < 0:
                dist[n] = nd
                reached += 1
                q.append(n)
    if reached < len(adj):
        return [d if d >= 0 else math.inf for d in dist]
    return dist


def distance_rows(graph: RoomGraph, adj: Optional[Adjacency] = None) -> Iterator[List[float]]:
    """Yield the distance row of every room in arena order (one BFS per room)."""
    if adj is None:
        adj = graph.passable_adjacency()
    for source in range(len(adj)):
        yield _bfs_row(adj, source)


def all_pairs_distances(graph: RoomGraph) -> DistanceMatrix:
    """Unit-weight shortest paths between every pair of rooms (indexed like ``graph.rooms``)."""
    return list(distance_rows(graph))


def farthest_pair(graph: RoomGraph, rows: Iterable[Sequence[float]]):
    """Return ``(start_idx, goal_idx, distance)`` for the farthest pair.

    ``rows`` is the all-pairs table or any iterator over its rows in arena
    order. Ties go to the lexicographically smallest (start, goal) room pair;
    the arena is sorted by coordinate so the first maximum found wins.
    """
    best = (0, 0, 0)
    for i, row in enumerate(rows):
        tail = row[i:]
        d = max(tail)
        if d == math.inf:
            j = i + tail.index(math.inf)
            raise MazeInvariantError(f"rooms {tuple(graph.rooms[i])} and {tuple(graph.rooms[j])} are disconnected")
        if d > best[2]:
            best = (i, i + tail.index(d), int(d))
    return best


def select_spawn_positions(graph: RoomGraph) -> SpawnPositions:
    start, goal, _ = farthest_pair(graph, distance_rows(graph))
    return SpawnPositions(graph.rooms[start], graph.rooms[goal])


__all__ = [
    "DistanceMatrix",
    "SpawnPositions",
    "all_pairs_distances",
    "distance_rows",
    "farthest_pair",
    "select_spawn_positions",
]
