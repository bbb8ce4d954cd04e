"""Structural invariant checks for a finished map.

Invariants:
  * every cell holds a tile id in [0, tile_count)
  * tiles[i].id == i and every tile owns at least one cell
  * a tile's representative position lies inside the tile
  * neighbour lists are ascending, unique and never contain the tile itself
  * neighbour lists equal the adjacency derived from the cell grid, which
    makes the relation symmetric
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Set

from ..errors import MapInvariantError
from ..logging_utils import get_logger
from .cells import iter_row_major, topology_for

_log = get_logger("generation")


def collect_violations(cells: Sequence[Sequence[int]], tiles: Sequence, width: int, height: int, wrap: bool) -> List[str]:
    problems: List[str] = []
    count = len(tiles)
    owned = [0] * count
    for x, y in iter_row_major(width, height):
        tid = cells[x][y]
        if not 0 <= tid < count:
            problems.append(f"cell {(x, y)} holds id {tid} outside [0, {count})")
        else:
            owned[tid] += 1
    if problems:
        return problems
    for i, tile in enumerate(tiles):
        if tile.id != i:
            problems.append(f"tile at index {i} has id {tile.id}")
        if not owned[i]:
            problems.append(f"tile {i} owns no cells")
        px, py = tile.position
        if not (0 <= px < width and 0 <= py < height) or cells[px][py] != i:
            problems.append(f"tile {i} representative {tile.position} lies outside the tile")
        nb = list(tile.neighbors)
        if nb != sorted(set(nb)):
            problems.append(f"tile {i} neighbours not ascending/unique: {nb}")
        if i in nb:
            problems.append(f"tile {i} lists itself as a neighbour")

    topology = topology_for(width, height, wrap)
    expected: Dict[int, Set[int]] = {i: set() for i in range(count)}
    for x, y in iter_row_major(width, height):
        here = cells[x][y]
        for nx, ny, _dx, _dy in topology.adjacent(x, y):
            there = cells[nx][ny]
            if there != here:
                expected[here].add(there)
    for i, tile in enumerate(tiles):
        if set(tile.neighbors) != expected[i]:
            problems.append(f"tile {i} neighbours {list(tile.neighbors)} differ from grid adjacency {sorted(expected[i])}")
    return problems


def verify_map_invariants(tile_map) -> None:
    """Raise ``MapInvariantError`` if ``tile_map`` breaks any invariant."""
    problems = collect_violations(tile_map.cells, tile_map.tiles, tile_map.width, tile_map.height, tile_map.wrap)
    if problems:
        _log.warn(event="map_invariants_failed", seed=tile_map.seed, violations=len(problems), first=problems[0])
        raise MapInvariantError(f"{len(problems)} invariant violation(s): {problems[0]}", problems)


__all__ = ["collect_violations", "verify_map_invariants"]
