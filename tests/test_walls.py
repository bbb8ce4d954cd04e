import random

import pytest

from tilemap.generation.cells import (
    BoundedTopology,
    ToroidalTopology,
    edge_closed,
    topology_for,
)
from tilemap.generation.walls import count_walls, generate_walls


def test_toroidal_wall_shapes():
    walls = generate_walls(ToroidalTopology(4, 3), 0.5, random.Random(1))
    assert len(walls.vertical) == 4 and all(len(c) == 3 for c in walls.vertical)
    assert len(walls.horizontal) == 4 and all(len(c) == 3 for c in walls.horizontal)


def test_bounded_wall_shapes():
    walls = generate_walls(BoundedTopology(4, 3), 0.5, random.Random(1))
    assert len(walls.vertical) == 3 and all(len(c) == 3 for c in walls.vertical)
    assert len(walls.horizontal) == 4 and all(len(c) == 2 for c in walls.horizontal)


def test_bounded_single_column_has_no_vertical_walls():
    walls = generate_walls(BoundedTopology(1, 4), 1.0, random.Random(1))
    assert walls.vertical == []
    assert walls.horizontal == [[True, True, True]]


@pytest.mark.parametrize("wrap", [True, False])
def test_probability_extremes(wrap):
    topo = topology_for(5, 4, wrap)
    none = generate_walls(topo, 0.0, random.Random(3))
    every = generate_walls(topo, 1.0, random.Random(3))
    assert not any(any(c) for c in none.vertical + none.horizontal)
    assert all(all(c) for c in every.vertical + every.horizontal)


def test_count_walls():
    walls = generate_walls(ToroidalTopology(3, 3), 1.0, random.Random(0))
    assert count_walls(walls) == (9, 9, 0)
    walls = generate_walls(BoundedTopology(3, 3), 0.0, random.Random(0))
    assert count_walls(walls) == (0, 0, 12)


def test_wall_density_tracks_probability():
    walls = generate_walls(ToroidalTopology(40, 40), 0.3, random.Random(42))
    closed_v, closed_h, _ = count_walls(walls)
    ratio = (closed_v + closed_h) / 3200
    assert 0.25 < ratio < 0.35


@pytest.mark.parametrize("topo", [ToroidalTopology(4, 3), BoundedTopology(4, 3), ToroidalTopology(1, 2)])
def test_edges_are_shared_by_both_sides(topo):
    walls = generate_walls(topo, 0.5, random.Random(7))
    for y in range(topo.height):
        for x in range(topo.width):
            for nx, ny, dx, dy in topo.adjacent(x, y):
                there = edge_closed(walls, x, y, nx, ny, dx, dy)
                back = edge_closed(walls, nx, ny, x, y, -dx, -dy)
                assert there == back, f"edge {(x, y)}->{(nx, ny)}"


def test_bounded_topology_stops_at_edges():
    topo = BoundedTopology(3, 2)
    assert sorted((nx, ny) for nx, ny, _, _ in topo.adjacent(0, 0)) == [(0, 1), (1, 0)]
    assert topo.step(2, 1, 1, 0) is None


def test_toroidal_topology_wraps():
    topo = ToroidalTopology(3, 2)
    assert topo.step(0, 0, -1, 0) == (2, 0)
    assert topo.step(0, 1, 0, 1) == (0, 0)
