"""Maze generation pipeline.

Coordinates the generation phases and exposes the public entry points:

    generate_maze(x_range, z_range, seed, sizes) -> (walls, SpawnPositions)
    Maze(MazeConfig(...)) or Maze(seed=..., x_range=..., z_range=...)

Phases, in order:
    * build_graph: one room per grid cell, one UNKNOWN wall per adjacent pair.
    * carve: randomized spanning tree resolves every interior wall.
    * border: outer walls, always PRESENT.
    * adjacency: passable neighbour lists over the carved walls.
    * all_pairs: one BFS per room, streamed into the farthest-pair scan.

The whole structure is built and queried inside one call; the only outputs are
the merged wall list (border walls first, then interior walls in edge order)
and the spawn pair.
"""

from __future__ import annotations

import dataclasses
import os
import random
import time
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .border import border_walls
from .carver import carve_spanning_tree
from .config import SEED_MAX, IntRange, MazeConfig, Sizes
from .metrics import init_metrics
from .rooms import RoomGraph, build_room_graph
from .spawn import SpawnPositions, distance_rows, farthest_pair
from .walls import Disposition, Wall

log = get_logger("mazegen.maze")


def _metrics_enabled() -> bool:
    val = os.environ.get("MAZE_ENABLE_GENERATION_METRICS", "1").lower()
    return val not in {"0", "false", "no", ""}


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        seed: int | None = None,
        x_range: IntRange | None = None,
        z_range: IntRange | None = None,
        sizes: Sizes | None = None,
    ):
        # Overrides and a drawn seed apply to a copy; the caller's config is left as given.
        config = dataclasses.replace(config) if config is not None else MazeConfig()
        if seed is not None:
            config.seed = seed
        if x_range is not None:
            config.x_min, config.x_max = x_range
        if z_range is not None:
            config.z_min, config.z_max = z_range
        if sizes is not None:
            config.room_side_length, config.wall_radius = sizes
        config.validate()
        if config.seed is None:
            config.seed = random.randint(0, SEED_MAX)
        self.config = config
        self.seed = config.seed
        self.sizes = config.sizes
        self.enable_metrics = _metrics_enabled()
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self.graph: RoomGraph | None = None
        self.walls: List[Wall] = []
        self.spawn: SpawnPositions | None = None
        self.diameter = 0
        self._run_pipeline()

    def _run_pipeline(self):
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
                phase_times[label] = round((pe - ps) * 1000, 3)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        # Local RNG so outside random usage never perturbs the maze
        rng = random.Random(self.seed)
        cfg = self.config
        self.graph = _phase("build_graph", build_room_graph, cfg.x_range, cfg.z_range)
        stats = _phase("carve", carve_spanning_tree, self.graph, rng)
        border = _phase("border", border_walls, cfg.x_range, cfg.z_range)
        self.walls = border + self.graph.walls()
        adj = _phase("adjacency", self.graph.passable_adjacency)
        # Rows are streamed into the selector; the full table is never materialized.
        s, g, self.diameter = _phase("all_pairs", farthest_pair, self.graph, distance_rows(self.graph, adj))
        self.spawn = SpawnPositions(self.graph.rooms[s], self.graph.rooms[g])

        if self.enable_metrics:
            self.metrics.update(
                rooms=len(self.graph),
                interior_walls=self.graph.edge_count,
                border_walls=len(border),
                walls_present=sum(1 for w in self.walls if w.is_present),
                walls_absent=stats.carved,
                carve_iterations=stats.iterations,
                diameter=self.diameter,
            )
            self.metrics["runtime_ms"] = round((time.perf_counter() - start) * 1000, 3)
            self.metrics["phase_ms"] = phase_times
        log.debug(
            event="maze_generated",
            seed=self.seed,
            rooms=len(self.graph),
            start=tuple(self.spawn.start),
            goal=tuple(self.spawn.goal),
            runtime_ms=self.metrics.get("runtime_ms"),
        )

    @property
    def x_range(self) -> IntRange:
        return self.config.x_range

    @property
    def z_range(self) -> IntRange:
        return self.config.z_range

    @property
    def start(self):
        return self.spawn.start

    @property
    def goal(self):
        return self.spawn.goal

    def present_walls(self) -> List[Wall]:
        return [w for w in self.walls if w.disposition is Disposition.PRESENT]

    def to_dict(self, include_absent: bool = False) -> Dict[str, Any]:
        walls = self.walls if include_absent else self.present_walls()
        return {
            "seed": self.seed,
            "x_range": list(self.x_range),
            "z_range": list(self.z_range),
            "sizes": self.sizes._asdict(),
            "walls": [w.to_dict() for w in walls],
            **self.spawn.to_dict(),
            "metrics": self.metrics,
        }


def generate_maze(
    x_range: IntRange,
    z_range: IntRange,
    seed: int,
    sizes: Optional[Sizes] = None,
) -> Tuple[List[Wall], SpawnPositions]:
    """Generate a maze and return ``(walls, spawn_positions)``.

    ``sizes`` is carried for the geometry layer and never consulted here.
    """
    maze = Maze(MazeConfig.from_ranges(x_range, z_range, seed=seed, sizes=sizes))
    return maze.walls, maze.spawn


__all__ = ["Maze", "generate_maze"]
