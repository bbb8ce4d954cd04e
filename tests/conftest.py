import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from tilemap import Map  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_tilemap_env(monkeypatch):
    """Strip TILEMAP_* variables before each test and drop any a test (or a .env load) added."""
    for key in list(os.environ):
        if key.startswith("TILEMAP_"):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith("TILEMAP_"):
            del os.environ[key]


@pytest.fixture
def make_map():
    """Factory for seeded maps: make_map(width, height, wrap, p, seed=1234, **config)."""

    def _make(width=8, height=8, wrap=True, p=0.5, seed=1234, **kwargs):
        if kwargs:
            from tilemap import MapConfig

            cfg = MapConfig(width=width, height=height, wrap=wrap, wall_probability=p, seed=seed, **kwargs)
            return Map(config=cfg)
        return Map(width, height, wrap, p, seed=seed)

    return _make
