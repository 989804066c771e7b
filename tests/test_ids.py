from __future__ import annotations

import pytest

from hexboard.engine.errors import IDOverflowError, TopologyInvariantError
from hexboard.engine.ids import DiceMarkerID, PlayerID, RoadID, SettlePlaceID, TileID


def test_ids_of_different_kinds_never_equal():
    assert TileID(3) == TileID(3)
    assert TileID(3) != RoadID(3)
    assert SettlePlaceID(0) != RoadID(0)
    assert len({TileID(1), RoadID(1), SettlePlaceID(1)}) == 3


def test_id_converts_to_index():
    seq = ["a", "b", "c"]
    assert seq[RoadID(2)] == "c"
    assert int(PlayerID(1)) == 1


def test_id_width_is_enforced():
    assert TileID.from_index(255).value == 255
    assert SettlePlaceID.from_index(65535).value == 65535
    with pytest.raises(IDOverflowError):
        TileID.from_index(256)
    with pytest.raises(IDOverflowError):
        DiceMarkerID.from_index(-1)


def test_overflow_is_an_invariant_violation():
    with pytest.raises(TopologyInvariantError):
        RoadID.from_index(1 << 16)


def test_ids_of_different_kinds_do_not_order():
    assert TileID(1) < TileID(2)
    with pytest.raises(TypeError):
        TileID(1) < RoadID(2)
