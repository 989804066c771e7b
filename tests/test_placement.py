from __future__ import annotations

import pytest

from hexboard.engine.errors import TopologyInvariantError
from hexboard.engine.ids import TileID
from hexboard.engine.placement import PlacementGrid


def test_lookup_by_position():
    grid = PlacementGrid(4, 4, [(1, 1), (2, 1), (2, 2)])
    assert grid.get((1, 1)) == TileID(0)
    assert grid.get((2, 2)) == TileID(2)
    assert grid.get((0, 0)) is None
    assert grid.position_of(TileID(1)) == (2, 1)
    assert grid.tile_count == 3


def test_outside_bounds_is_empty():
    grid = PlacementGrid(3, 3, [(1, 1)])
    assert grid.get((-1, 0)) is None
    assert grid.get((3, 1)) is None
    assert grid.get((1, 3)) is None


def test_occupied_in_row_order():
    grid = PlacementGrid(3, 3, [(2, 2), (0, 0)])
    assert list(grid.occupied()) == [((0, 0), TileID(1)), ((2, 2), TileID(0))]


def test_placement_outside_map_is_fatal():
    with pytest.raises(TopologyInvariantError):
        PlacementGrid(3, 3, [(3, 0)])
