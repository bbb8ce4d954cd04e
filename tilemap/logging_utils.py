"""Minimal structured logging helper.

Emits key=value pairs (or JSON lines) with a timestamp and level, so map
generation events can be grepped or parsed without configuring the stdlib
logging tree.

Usage:
    from tilemap.logging_utils import get_logger
    log = get_logger("generation")
    log.debug(event="map_generated", width=16, height=16)

Environment:
    TILEMAP_LOG_LEVEL  debug | info | warn | error (default info)
    TILEMAP_LOG_JSON   1/true/yes/on for JSON lines

Non-str values are str()'d with spaces replaced by underscores. Reserved keys:
level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def current_level() -> int:
    return LEVELS.get(os.getenv("TILEMAP_LOG_LEVEL", "info").lower(), 20)


def json_mode() -> bool:
    return os.getenv("TILEMAP_LOG_JSON", "0") in _TRUTHY


def _format(level: str, **fields) -> str:
    if json_mode():
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
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "tilemap"

    def enabled_for(self, lvl: str) -> bool:
        return LEVELS[lvl] >= current_level()

    def _log(self, lvl: str, **fields):
        if not self.enabled_for(lvl):
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(_format(lvl, **fields), file=stream)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("tilemap")
