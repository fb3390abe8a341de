"""
project: Browser Maze
module: __init__.py
License: MIT

Flask application factory for the maze generation service.

The generator itself lives in ``mazegen.maze`` and has no web dependencies;
this module wires it into a small JSON API so a browser-side geometry layer
can fetch wall lists and spawn rooms. Configuration is sourced from
environment variables (optionally loaded from ``.env``).
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so MAZE_* settings can be supplied without exporting shell variables.
load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def create_app(test_config=None):
    """Build the Flask app and register the maze blueprint."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.update(
        MAZE_DISABLE_CACHE=_env_flag("MAZE_DISABLE_CACHE"),
        MAZE_DEFAULT_WIDTH=int(os.getenv("MAZE_DEFAULT_WIDTH", "10")),
        MAZE_DEFAULT_HEIGHT=int(os.getenv("MAZE_DEFAULT_HEIGHT", "10")),
        MAZE_ROOM_SIDE_LENGTH=float(os.getenv("MAZE_ROOM_SIDE_LENGTH", "1.0")),
        MAZE_WALL_RADIUS=float(os.getenv("MAZE_WALL_RADIUS", "0.1")),
    )
    if test_config:
        app.config.update(test_config)

    from mazegen.routes.maze_api import bp_maze

    app.register_blueprint(bp_maze)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app
