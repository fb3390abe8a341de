import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegen import create_app  # noqa: E402
from mazegen.routes import maze_api  # noqa: E402


@pytest.fixture()
def test_app():
    app = create_app({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_maze_cache():
    with maze_api._maze_cache_lock:
        maze_api._maze_cache.clear()
    yield
