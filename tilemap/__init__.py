"""
project: Tile Maze
module: __init__.py
License: MIT

Random tile maps for grid-based game boards.

A maze of walls is carved over a rectangular grid (optionally wrapping at the
edges like a torus), the open-edge components become irregular tiles, and
each tile gets a representative cell plus the ids of the tiles it touches.
"""

from .errors import MapConfigError, MapInvariantError
from .generation import Map, MapConfig, Tile, generate_map, verify_map_invariants  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Map",
    "MapConfig",
    "Tile",
    "generate_map",
    "verify_map_invariants",
    "MapConfigError",
    "MapInvariantError",
]
