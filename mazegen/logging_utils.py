"""Minimal structured logging helper.

Emits key=value pairs (or one JSON object per line) with a timestamp and
level through print(), keeping log lines easy to grep and parse.

Usage:
    from mazegen.logging_utils import log
    log.info(event="server_start", port=5000)

Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info"), 20)
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegen"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegen")
