"""Wall generation: one Bernoulli sample per grid edge."""
from __future__ import annotations

import random
from typing import Optional

from .cells import Topology, WallGrid, WallGrids


def _sample_grid(cols: int, rows: int, probability: float, rng) -> WallGrid:
    return [[rng.random() < probability for _ in range(rows)] for _ in range(cols)]


def generate_walls(topology: Topology, probability: float, rng: Optional[random.Random] = None) -> WallGrids:
    """Sample the vertical then the horizontal wall grid for ``topology``.

    ``probability`` must lie in [0, 1]; callers validate it (see
    ``MapConfig.validate``). 0 never closes an edge, 1 closes every edge.
    """
    if rng is None:
        rng = random
    (vc, vr), (hc, hr) = topology.wall_shape()
    vertical = _sample_grid(vc, vr, probability, rng)
    horizontal = _sample_grid(hc, hr, probability, rng)
    return WallGrids(vertical, horizontal)


def count_walls(walls: WallGrids):
    """Return ``(closed_vertical, closed_horizontal, open_edges)``."""
    closed_v = sum(sum(col) for col in walls.vertical)
    closed_h = sum(sum(col) for col in walls.horizontal)
    total = sum(len(col) for col in walls.vertical) + sum(len(col) for col in walls.horizontal)
    return closed_v, closed_h, total - closed_v - closed_h


__all__ = ["generate_walls", "count_walls"]
