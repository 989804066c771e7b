from __future__ import annotations

from hexboard.engine.board_geom import (
    SIDES,
    VERTICES,
    HexSide,
    HexVertex,
    connected_vertices,
    neighbor_positions,
    opposite,
    shared_vertices,
    vertex_neighbor_lookup,
)


def test_neighbors_on_even_row():
    nb = neighbor_positions((2, 2))
    assert nb[HexSide.NORTH_WEST] == (1, 1)
    assert nb[HexSide.NORTH_EAST] == (2, 1)
    assert nb[HexSide.WEST] == (1, 2)
    assert nb[HexSide.EAST] == (3, 2)
    assert nb[HexSide.SOUTH_WEST] == (1, 3)
    assert nb[HexSide.SOUTH_EAST] == (2, 3)


def test_neighbors_on_odd_row():
    nb = neighbor_positions((1, 1))
    assert nb[HexSide.NORTH_WEST] == (1, 0)
    assert nb[HexSide.NORTH_EAST] == (2, 0)
    assert nb[HexSide.SOUTH_WEST] == (1, 2)
    assert nb[HexSide.SOUTH_EAST] == (2, 2)


def test_neighbors_may_leave_the_map():
    nb = neighbor_positions((0, 0))
    assert nb[HexSide.NORTH_WEST] == (-1, -1)


def test_neighbor_relation_is_symmetric():
    for pos in [(0, 0), (1, 1), (3, 2), (2, 5)]:
        for side, npos in neighbor_positions(pos).items():
            assert neighbor_positions(npos)[opposite(side)] == pos


def test_opposite_is_an_involution():
    assert opposite(HexSide.NORTH_WEST) is HexSide.SOUTH_EAST
    assert opposite(HexSide.NORTH_EAST) is HexSide.SOUTH_WEST
    assert opposite(HexSide.WEST) is HexSide.EAST
    for side in SIDES:
        assert opposite(side) is not side
        assert opposite(opposite(side)) is side


def test_each_vertex_bounds_two_sides():
    touching = {v: 0 for v in VERTICES}
    for side in SIDES:
        a, b = connected_vertices(side)
        assert a is not b
        touching[a] += 1
        touching[b] += 1
    assert set(touching.values()) == {2}


def test_vertex_lookup_agrees_with_shared_sides():
    for vertex in VERTICES:
        for side, theirs in vertex_neighbor_lookup(vertex):
            assert vertex in connected_vertices(side)
            assert (vertex, theirs) in shared_vertices(side)


def test_east_side_shares_corners_with_west_neighbour():
    assert set(shared_vertices(HexSide.EAST)) == {
        (HexVertex.NORTH_EAST, HexVertex.NORTH_WEST),
        (HexVertex.SOUTH_EAST, HexVertex.SOUTH_WEST),
    }
