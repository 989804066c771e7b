from __future__ import annotations

import pytest

from hexboard.engine.array_vec import ArrayVec
from hexboard.engine.errors import CapacityError
from hexboard.engine.ids import RoadID


def test_push_within_capacity():
    v = ArrayVec(3)
    v.push(RoadID(4))
    v.push(RoadID(7))
    assert len(v) == 2
    assert v[0] == RoadID(4)
    assert v[-1] == RoadID(7)
    assert list(v) == [RoadID(4), RoadID(7)]
    assert RoadID(7) in v
    assert not v.is_full()


def test_push_past_capacity_is_fatal():
    v = ArrayVec(3, [1, 2, 3])
    assert v.is_full()
    with pytest.raises(CapacityError):
        v.push(4)
    assert v.as_tuple() == (1, 2, 3)


def test_only_initialised_prefix_is_visible():
    v = ArrayVec(3, ["a"])
    assert v.as_tuple() == ("a",)
    with pytest.raises(IndexError):
        v[1]
    assert v == ["a"]


def test_clear_releases_items():
    v = ArrayVec(2, ["a", "b"])
    v.clear()
    assert len(v) == 0
    v.push("c")
    assert v == ArrayVec(2, ["c"])


def test_capacity_bounds():
    with pytest.raises(ValueError):
        ArrayVec(256)
