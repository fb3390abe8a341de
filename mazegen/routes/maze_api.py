"""
project: Browser Maze
module: maze_api.py
License: MIT

Maze generation API routes.

GET  /api/maze        -> walls, start/goal rooms and metrics for a seed and extent
POST /api/maze/seed   -> normalize an int/str/null seed into an unsigned 64-bit seed
"""

import hashlib
import random
import threading

from flask import Blueprint, current_app, jsonify, request

from mazegen.logging_utils import get_logger
from mazegen.maze import Maze, MazeConfig
from mazegen.maze.config import SEED_MAX
from mazegen.maze.placement import spawn_world_position

log = get_logger("mazegen.api")

# Per-axis room cap; all-pairs spawn selection is quadratic in rooms.
MAX_EXTENT = 50

# Simple in-process cache (seed, x_range, z_range, sizes) -> Maze. Guarded by a lock for threaded servers.
_maze_cache = {}
_maze_cache_lock = threading.Lock()
_MAZE_CACHE_MAX = 16


def get_cached_maze(config: MazeConfig) -> Maze:
    if current_app.config.get("MAZE_DISABLE_CACHE"):
        return Maze(config)
    key = (config.seed, config.x_range, config.z_range, config.sizes)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
        if maze is not None:
            return maze
    maze = Maze(config)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        if len(_maze_cache) > _MAZE_CACHE_MAX:
            first_key = next(iter(_maze_cache.keys()))
            if first_key != key:
                _maze_cache.pop(first_key, None)
    return maze


def coerce_seed(payload_seed):
    """Convert a provided seed (int or str) into an unsigned 64-bit int."""
    if payload_seed is None:
        return random.randint(0, SEED_MAX)
    if isinstance(payload_seed, bool):
        raise ValueError("seed must be an integer or string")
    if isinstance(payload_seed, int):
        return payload_seed % (SEED_MAX + 1)
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(0, SEED_MAX)
        try:
            n = int(s)
        except ValueError:
            h = hashlib.sha256(s.encode("utf-8")).digest()
            return int.from_bytes(h[:8], "big")
        return n % (SEED_MAX + 1)
    raise ValueError("seed must be an integer or string")


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None


def _config_from_request() -> MazeConfig:
    cfg = current_app.config
    width = _int_arg("width", cfg["MAZE_DEFAULT_WIDTH"])
    height = _int_arg("height", cfg["MAZE_DEFAULT_HEIGHT"])
    if not (0 < width <= MAX_EXTENT and 0 < height <= MAX_EXTENT):
        raise ValueError(f"width and height must be between 1 and {MAX_EXTENT}")
    x_min = _int_arg("x_min", 0)
    z_min = _int_arg("z_min", 0)
    config = MazeConfig(
        x_min=x_min,
        x_max=x_min + width,
        z_min=z_min,
        z_max=z_min + height,
        seed=coerce_seed(request.args.get("seed")),
        room_side_length=cfg["MAZE_ROOM_SIDE_LENGTH"],
        wall_radius=cfg["MAZE_WALL_RADIUS"],
    )
    config.validate()
    return config


bp_maze = Blueprint("maze", __name__)


@bp_maze.errorhandler(ValueError)
def _bad_request(e):
    return jsonify({"error": str(e)}), 400


@bp_maze.route("/api/maze")
def maze():
    """
    Return a generated maze.
    Query: seed, width, height, x_min, z_min, all (include absent walls when 1)
    Response: { seed, x_range, z_range, sizes, walls, start, goal, spawn_world, metrics }
    """
    config = _config_from_request()
    m = get_cached_maze(config)
    include_absent = request.args.get("all") in ("1", "true", "yes")
    data = m.to_dict(include_absent=include_absent)
    data["spawn_world"] = {
        "start": list(spawn_world_position(m.start, m.sizes)),
        "goal": list(spawn_world_position(m.goal, m.sizes)),
    }
    log.info(event="maze_served", seed=m.seed, width=config.width, height=config.height)
    return jsonify(data)


@bp_maze.route("/api/maze/seed", methods=["POST"])
def set_seed():
    """Normalize (or generate) a maze seed.

    Body JSON (optional): { "seed": <int|str|null> }
    Response: { "seed": <int> }
    """
    data = request.get_json(silent=True) or {}
    seed = coerce_seed(data.get("seed"))
    return jsonify({"seed": seed})
