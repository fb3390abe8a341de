"""
project: Browser Maze
module: server.py
License: MIT

Server bootstrap for the maze generation API.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from mazegen import create_app


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Run the Flask development server with file + console logging configured."""
    app = create_app()
    _configure_logging(app)
    try:
        print(f"[INFO] Starting maze server on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(app):
    """Configure logging to both console and a rotating file in instance/.

    The file path will be instance/maze.log. Retains a few backups to avoid growth.
    """
    log_dir = app.instance_path
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "maze.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
