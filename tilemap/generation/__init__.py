"""Tile map generation package.

Minimal public surface:
    from tilemap.generation import Map, MapConfig, Tile, generate_map
"""

from .config import MapConfig
from .invariants import verify_map_invariants
from .pipeline import Map, generate_map
from .tiles import Tile

__all__ = [
    "Map",
    "MapConfig",
    "Tile",
    "generate_map",
    "verify_map_invariants",
]
