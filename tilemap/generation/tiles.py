from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from .cells import Coord2D


@dataclass(frozen=True)
class Tile:
    """A finalised region: representative cell, dense id, neighbour ids."""

    position: Coord2D
    id: int
    neighbors: Tuple[int, ...] = ()

    def is_neighbor(self, other_id: int) -> bool:
        return other_id in self.neighbors

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "position": list(self.position), "neighbors": list(self.neighbors)}


def build_tile(index: int, positions: Sequence[Coord2D], neighbor_ids: Sequence[int], rng=None) -> Tile:
    """Pick a uniformly random member of ``positions`` as the representative."""
    if rng is None:
        rng = random
    if not positions:
        raise ValueError(f"region {index} has no cells")
    x, y = rng.choice(positions)
    return Tile(position=(x, y), id=index, neighbors=tuple(neighbor_ids))


__all__ = ["Tile", "build_tile"]
