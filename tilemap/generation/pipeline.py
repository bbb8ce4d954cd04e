"""
project: Tile Maze
module: generation/pipeline.py
License: MIT

Pipeline orchestration for tile map generation.

Phases, in order:
    * walls        sample one wall flag per grid edge
    * discover     flood-fill open-edge components into provisional regions
    * merge        renumber each region to its final id, collecting cells and
                   neighbour ids in the same walk
    * build_tiles  pick a representative cell per region

Public contract:
    Map(width, height, wrap, wall_probability, seed=None) OR Map(config=MapConfig(...))
    Attributes: width, height, wrap, size, cells[x][y], tiles, seed, metrics
"""
from __future__ import annotations

import random
import time
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from ..errors import MapConfigError
from ..logging_utils import get_logger
from .cells import Coord2D, topology_for
from .config import MapConfig
from .invariants import verify_map_invariants
from .metrics import init_metrics
from .regions import discover_regions, merge_region
from .tiles import Tile, build_tile
from .walls import count_walls, generate_walls

_log = get_logger("generation")


class Map:
    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        wrap: bool | None = None,
        wall_probability: float | None = None,
        *,
        seed: int | None = None,
        config: MapConfig | None = None,
    ):
        # Config object and/or explicit parameters; explicit ones win. The caller's config is copied.
        config = MapConfig() if config is None else replace(config)
        overrides = {
            "width": width,
            "height": height,
            "wrap": wrap,
            "wall_probability": wall_probability,
            "seed": seed,
        }
        for attr, value in overrides.items():
            if value is not None:
                setattr(config, attr, value)
        self.config = config.validate()
        if self.config.seed is None:
            self.config.seed = random.randint(0, 2**31 - 1)
        # Local RNG so external random usage does not affect generation
        self._rng = random.Random(self.config.seed)
        self._width = self.config.width
        self._height = self.config.height
        self._wrap = bool(self.config.wrap)
        self.metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}
        self._run_pipeline()
        if self.config.strict:
            verify_map_invariants(self)

    @classmethod
    def from_config(cls, config: MapConfig) -> "Map":
        return cls(config=config)

    # ------------------------------------------------------------------
    # Generation Pipeline
    # ------------------------------------------------------------------
    def _run_pipeline(self):
        enable_metrics = self.config.enable_metrics
        phase_times: Dict[str, int] = {}
        start = time.perf_counter()

        def _phase(label, fn, *a, **k):
            if not enable_metrics:
                return fn(*a, **k)
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r

        topology = topology_for(self._width, self._height, self._wrap)
        walls = _phase("walls", generate_walls, topology, self.config.wall_probability, self._rng)
        discovery = _phase("discover", discover_regions, walls, topology)
        labels = discovery.labels
        regions: List[Tuple[List[Coord2D], List[int]]] = _phase(
            "merge",
            lambda: [
                merge_region(labels, i, topology, start=discovery.starts[i])
                for i in range(discovery.region_count)
            ],
        )
        tiles = _phase(
            "build_tiles",
            lambda: [build_tile(i, positions, nb, self._rng) for i, (positions, nb) in enumerate(regions)],
        )
        self._cells: Tuple[Tuple[int, ...], ...] = tuple(tuple(col) for col in labels)
        self._tiles: Tuple[Tile, ...] = tuple(tiles)
        runtime_ms = int((time.perf_counter() - start) * 1000)

        if enable_metrics:
            closed_v, closed_h, open_edges = count_walls(walls)
            sizes = [len(positions) for positions, _nb in regions]
            self.metrics.update(
                {
                    "tiles": len(tiles),
                    "walls_vertical": closed_v,
                    "walls_horizontal": closed_h,
                    "open_edges": open_edges,
                    "largest_tile": max(sizes),
                    "smallest_tile": min(sizes),
                    "isolated_tiles": sum(1 for t in tiles if not t.neighbors),
                    "neighbor_links": sum(len(t.neighbors) for t in tiles) // 2,
                    "runtime_ms": runtime_ms,
                    "phase_ms": phase_times,
                }
            )
        self.metrics["seed"] = self.seed
        _log.debug(
            event="map_generated",
            width=self._width,
            height=self._height,
            wrap=self._wrap,
            seed=self.seed,
            tiles=len(tiles),
            runtime_ms=runtime_ms,
        )

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def wrap(self) -> bool:
        return self._wrap

    @property
    def size(self) -> Tuple[int, int, bool]:
        return (self._width, self._height, self._wrap)

    @property
    def seed(self) -> int:
        return self.config.seed

    @property
    def cells(self) -> Tuple[Tuple[int, ...], ...]:
        """Final tile id per cell, column-major (``cells[x][y]``)."""
        return self._cells

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    @property
    def tile_count(self) -> int:
        return len(self._tiles)

    def tile_at(self, x: int, y: int) -> Tile:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"cell {(x, y)} outside {self._width}x{self._height} map")
        return self._tiles[self._cells[x][y]]

    def neighbors_of(self, tile_id: int) -> Tuple[int, ...]:
        if not 0 <= tile_id < len(self._tiles):
            raise IndexError(f"no tile with id {tile_id}")
        return self._tiles[tile_id].neighbors

    # Convenience outputs
    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self._width,
            "height": self._height,
            "wrap": self._wrap,
            # row-major rows for consumers that index [y][x]
            "cells": [[self._cells[x][y] for x in range(self._width)] for y in range(self._height)],
            "tiles": [t.to_dict() for t in self._tiles],
            "metrics": self.metrics,
        }

    def __repr__(self) -> str:
        return f"Map(width={self._width}, height={self._height}, wrap={self._wrap}, seed={self.seed}, tiles={len(self._tiles)})"


def generate_map(config: Optional[MapConfig] = None, **overrides) -> Map:
    """Build a map from ``config`` (or the ``TILEMAP_*`` environment) plus overrides."""
    if config is None:
        config = MapConfig.from_env(**overrides)
    else:
        config = replace(config)
        for attr, value in overrides.items():
            if not hasattr(config, attr):
                raise MapConfigError(f"unknown config field {attr!r}")
            setattr(config, attr, value)
    return Map(config=config)


__all__ = ["Map", "generate_map"]
