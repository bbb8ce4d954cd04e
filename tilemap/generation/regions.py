"""Region discovery and region merge/renumbering.

Labels in the working grid move through three meanings:

    0            unvisited
    1..n         provisional region number, in discovery order
    0..n-1       final tile id (provisional number minus one)

Discovery labels every cell with its provisional number. The merge pass then
walks regions in order; while region ``i`` is rewritten from ``i + 1`` to
``i`` the grid holds final ids below ``i`` and provisional numbers above it,
so a neighbour label seen during that walk is projected with
``project_label``.

Both passes use explicit stacks; depth is bounded only by region size.
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Set, Tuple

from .cells import Coord2D, LabelGrid, Topology, WallGrids, iter_row_major

UNVISITED = 0


def new_label_grid(width: int, height: int) -> LabelGrid:
    # column-major: grid[x][y]
    return [[UNVISITED for _ in range(height)] for _ in range(width)]


def find_first(labels: LabelGrid, needle: int, width: int, height: int):
    """Return the first (x, y) in row-major order holding ``needle`` or None."""
    for x, y in iter_row_major(width, height):
        if labels[x][y] == needle:
            return x, y
    return None


def flood_region(labels: LabelGrid, start: Coord2D, label: int, walls: WallGrids, topology: Topology) -> int:
    """Label the open-edge component containing ``start``; returns its size."""
    sx, sy = start
    labels[sx][sy] = label
    stack = [start]
    size = 0
    while stack:
        x, y = stack.pop()
        size += 1
        for nx, ny in topology.open_adjacent(walls, x, y):
            if labels[nx][ny] == UNVISITED:
                labels[nx][ny] = label
                stack.append((nx, ny))
    return size


class Discovery(NamedTuple):
    labels: LabelGrid
    region_count: int
    # starts[k] is the first row-major cell of provisional region k + 1
    starts: List[Coord2D]


def discover_regions(walls: WallGrids, topology: Topology) -> Discovery:
    """Partition every cell into open-edge components.

    Provisional numbers 1..n are handed out in row-major scan order.
    """
    width, height = topology.width, topology.height
    labels = new_label_grid(width, height)
    starts: List[Coord2D] = []
    for x, y in iter_row_major(width, height):
        if labels[x][y] != UNVISITED:
            continue
        starts.append((x, y))
        flood_region(labels, (x, y), len(starts), walls, topology)
    return Discovery(labels, len(starts), starts)


def project_label(raw: int, index: int) -> int:
    """Map a label seen while finalising region ``index`` to its final tile id.

    Labels at or below ``index`` are already final. Anything above is still a
    provisional number and loses one, because provisional ``index + 1`` is
    the region being finalised.
    """
    return raw - 1 if raw > index else raw


def merge_region(
    labels: LabelGrid,
    index: int,
    topology: Topology,
    start: Optional[Coord2D] = None,
) -> Tuple[List[Coord2D], List[int]]:
    """Rewrite provisional region ``index + 1`` to final id ``index``.

    Walls are not consulted here: membership is the label itself, and any
    differently labelled cell across an edge is a neighbour. ``start`` may be
    any cell of the region; without it the grid is scanned row-major.

    Returns the region's cell positions (visit order) and its neighbour ids
    in final numbering, ascending and unique.
    """
    provisional = index + 1
    if start is None:
        start = find_first(labels, provisional, topology.width, topology.height)
        if start is None:
            return [], []
    elif labels[start[0]][start[1]] != provisional:
        raise ValueError(f"start {start} does not hold provisional label {provisional}")
    positions: List[Coord2D] = []
    raw_neighbors: Set[int] = set()
    sx, sy = start
    labels[sx][sy] = index
    stack = [start]
    while stack:
        x, y = stack.pop()
        positions.append((x, y))
        for nx, ny, _dx, _dy in topology.adjacent(x, y):
            value = labels[nx][ny]
            if value == provisional:
                labels[nx][ny] = index
                stack.append((nx, ny))
            elif value != index:
                raw_neighbors.add(value)
    neighbors = sorted({project_label(raw, index) for raw in raw_neighbors})
    return positions, neighbors


__all__ = [
    "UNVISITED",
    "new_label_grid",
    "find_first",
    "flood_region",
    "Discovery",
    "discover_regions",
    "project_label",
    "merge_region",
]
