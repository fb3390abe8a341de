"""Randomized spanning-tree carving (the maze proper).

Rooms move through three partitions: unfinished -> frontier -> finished. Each
step picks a frontier room uniformly at random and resolves one of its
UNKNOWN walls. A wall only becomes ABSENT when it leads into an unfinished
room, so every room joins the carved structure exactly once and no cycle can
form. Drawing from the whole frontier (instead of always the newest room)
gives a branchy maze rather than long depth-first corridors.

All random draws are indices into ordered lists, so a given seed reproduces
the same maze on every run.
"""

from __future__ import annotations

import random
from typing import List, NamedTuple

from .rooms import RoomGraph
from .walls import Disposition, MazeInvariantError


class CarveStats(NamedTuple):
    iterations: int
    carved: int
    kept: int


class _Frontier:
    """Index-stable list with O(1) membership and swap-remove."""

    def __init__(self):
        self.items: List[int] = []
        self._pos = {}

    def __len__(self):
        return len(self.items)

    def __contains__(self, idx):
        return idx in self._pos

    def add(self, idx: int) -> None:
        self._pos[idx] = len(self.items)
        self.items.append(idx)

    def remove(self, idx: int) -> None:
        pos = self._pos.pop(idx)
        last = self.items.pop()
        if last != idx:
            self.items[pos] = last
            self._pos[last] = pos


def carve_spanning_tree(graph: RoomGraph, rng: random.Random) -> CarveStats:
    """Resolve every UNKNOWN wall in ``graph`` so ABSENT walls form a spanning tree."""
    n_rooms = len(graph)
    unfinished = [True] * n_rooms
    finished = [False] * n_rooms
    frontier = _Frontier()

    first = rng.randrange(n_rooms)
    unfinished[first] = False
    frontier.add(first)
    remaining = n_rooms - 1

    iterations = carved = kept = 0
    while len(frontier):
        iterations += 1
        r = frontier.items[rng.randrange(len(frontier))]
        open_walls = [n for n in graph.neighbors(r) if graph.edge(r, n).disposition is Disposition.UNKNOWN]
        if not open_walls:
            frontier.remove(r)
            finished[r] = True
            continue
        n = open_walls[rng.randrange(len(open_walls))]
        wall = graph.edge(r, n)
        if unfinished[n]:
            wall.resolve(Disposition.ABSENT)
            unfinished[n] = False
            frontier.add(n)
            remaining -= 1
            carved += 1
        else:
            wall.resolve(Disposition.PRESENT)
            kept += 1

    if remaining or not all(finished):
        raise MazeInvariantError(f"carving left {remaining} rooms unreached")
    leftover = [key for key, wall in graph.edges() if wall.disposition is Disposition.UNKNOWN]
    if leftover:
        raise MazeInvariantError(f"walls left unresolved after carving: {leftover[:5]}")
    if carved != n_rooms - 1:
        raise MazeInvariantError(f"carved {carved} passages for {n_rooms} rooms")
    return CarveStats(iterations, carved, kept)


__all__ = ["CarveStats", "carve_spanning_tree"]
