"""verify_map_invariants must flag corrupted maps (hand-built, not generated)."""
from types import SimpleNamespace

import pytest

from tilemap import MapInvariantError, Tile, verify_map_invariants
from tilemap.generation.invariants import collect_violations


def fake_map(cells, tiles, wrap=False):
    return SimpleNamespace(
        cells=cells,
        tiles=tiles,
        width=len(cells),
        height=len(cells[0]),
        wrap=wrap,
        seed=0,
    )


def good_pair():
    # 2x1 bounded, two single-cell tiles
    cells = ((0,), (1,))
    tiles = (Tile((0, 0), 0, (1,)), Tile((1, 0), 1, (0,)))
    return cells, tiles


def test_valid_map_has_no_violations():
    cells, tiles = good_pair()
    assert collect_violations(cells, tiles, 2, 1, False) == []
    verify_map_invariants(fake_map(cells, tiles))


def test_cell_id_out_of_range():
    cells = ((0,), (2,))
    _, tiles = good_pair()
    problems = collect_violations(cells, tiles, 2, 1, False)
    assert problems and "outside" in problems[0]


def test_self_neighbor_flagged():
    cells, _ = good_pair()
    tiles = (Tile((0, 0), 0, (0, 1)), Tile((1, 0), 1, (0,)))
    problems = collect_violations(cells, tiles, 2, 1, False)
    assert any("itself" in p for p in problems)


def test_asymmetric_neighbors_flagged():
    cells, _ = good_pair()
    tiles = (Tile((0, 0), 0, (1,)), Tile((1, 0), 1, ()))
    with pytest.raises(MapInvariantError) as exc:
        verify_map_invariants(fake_map(cells, tiles))
    assert exc.value.violations


def test_representative_outside_tile_flagged():
    cells, _ = good_pair()
    tiles = (Tile((1, 0), 0, (1,)), Tile((1, 0), 1, (0,)))
    problems = collect_violations(cells, tiles, 2, 1, False)
    assert any("representative" in p for p in problems)


def test_unsorted_neighbors_flagged():
    cells = ((0,), (1,), (2,))
    tiles = (
        Tile((0, 0), 0, (1,)),
        Tile((1, 0), 1, (2, 0)),
        Tile((2, 0), 2, (1,)),
    )
    problems = collect_violations(cells, tiles, 3, 1, False)
    assert any("ascending" in p for p in problems)


def test_wrap_changes_expected_adjacency():
    cells = ((0,), (1,), (2,))
    tiles = (
        Tile((0, 0), 0, (1,)),
        Tile((1, 0), 1, (0, 2)),
        Tile((2, 0), 2, (1,)),
    )
    assert collect_violations(cells, tiles, 3, 1, False) == []
    # on a torus tiles 0 and 2 touch across the seam
    assert collect_violations(cells, tiles, 3, 1, True)
