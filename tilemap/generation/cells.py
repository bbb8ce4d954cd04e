"""Grid coordinate types and the adjacency rules for both wrap modes.

Both flood-fill phases share one traversal routine and only differ in the
topology object handed to them: ``ToroidalTopology`` wraps coordinates modulo
the grid size, ``BoundedTopology`` treats the grid edge as a hard boundary.
"""
from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

Coord2D = Tuple[int, int]
LabelGrid = List[List[int]]
WallGrid = List[List[bool]]

LEFT: Coord2D = (-1, 0)
RIGHT: Coord2D = (1, 0)
UP: Coord2D = (0, -1)
DOWN: Coord2D = (0, 1)
DIRECTIONS: Tuple[Coord2D, ...] = (LEFT, RIGHT, UP, DOWN)


class WallGrids(NamedTuple):
    # vertical[x][y]: edge between (x, y) and its right neighbour is closed
    vertical: WallGrid
    # horizontal[x][y]: edge between (x, y) and its lower neighbour is closed
    horizontal: WallGrid


class Topology:
    wrap = False

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def step(self, x: int, y: int, dx: int, dy: int) -> Optional[Coord2D]:
        raise NotImplementedError

    def wall_shape(self) -> Tuple[Coord2D, Coord2D]:
        """Return ``((cols, rows), (cols, rows))`` for the vertical and horizontal wall grids."""
        raise NotImplementedError

    def adjacent(self, x: int, y: int) -> Iterator[Tuple[int, int, int, int]]:
        """Yield ``(nx, ny, dx, dy)`` for every in-range orthogonal neighbour."""
        for dx, dy in DIRECTIONS:
            nxt = self.step(x, y, dx, dy)
            if nxt is not None:
                yield nxt[0], nxt[1], dx, dy

    def open_adjacent(self, walls: WallGrids, x: int, y: int) -> Iterator[Coord2D]:
        """Yield neighbours reachable from (x, y) through an open edge."""
        for nx, ny, dx, dy in self.adjacent(x, y):
            if not edge_closed(walls, x, y, nx, ny, dx, dy):
                yield nx, ny


def edge_closed(walls: WallGrids, x: int, y: int, nx: int, ny: int, dx: int, dy: int) -> bool:
    # One boolean per edge: moving left/up reads the slot owned by the neighbour.
    if dx == 1:
        return walls.vertical[x][y]
    if dx == -1:
        return walls.vertical[nx][y]
    if dy == 1:
        return walls.horizontal[x][y]
    return walls.horizontal[x][ny]


class ToroidalTopology(Topology):
    wrap = True

    def step(self, x, y, dx, dy):
        return (x + dx) % self.width, (y + dy) % self.height

    def wall_shape(self):
        return (self.width, self.height), (self.width, self.height)


class BoundedTopology(Topology):
    wrap = False

    def step(self, x, y, dx, dy):
        nx, ny = x + dx, y + dy
        if 0 <= nx < self.width and 0 <= ny < self.height:
            return nx, ny
        return None

    def wall_shape(self):
        return (self.width - 1, self.height), (self.width, self.height - 1)


def topology_for(width: int, height: int, wrap: bool) -> Topology:
    cls = ToroidalTopology if wrap else BoundedTopology
    return cls(width, height)


def iter_row_major(width: int, height: int) -> Iterator[Coord2D]:
    for y in range(height):
        for x in range(width):
            yield x, y


__all__ = [
    "Coord2D",
    "LabelGrid",
    "WallGrid",
    "WallGrids",
    "DIRECTIONS",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "Topology",
    "ToroidalTopology",
    "BoundedTopology",
    "edge_closed",
    "topology_for",
    "iter_row_major",
]
