from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

Position = Tuple[int, int]


class HexSide(Enum):
    NORTH_WEST = "nw"
    NORTH_EAST = "ne"
    WEST = "w"
    EAST = "e"
    SOUTH_WEST = "sw"
    SOUTH_EAST = "se"


class HexVertex(Enum):
    NORTH = "n"
    NORTH_WEST = "nw"
    NORTH_EAST = "ne"
    SOUTH_WEST = "sw"
    SOUTH_EAST = "se"
    SOUTH = "s"


SIDES: Tuple[HexSide, ...] = tuple(HexSide)
VERTICES: Tuple[HexVertex, ...] = tuple(HexVertex)

# Pointy-top cells in horizontal rows, odd rows shifted half a cell east.
_EVEN_ROW_OFFSETS: Dict[HexSide, Position] = {
    HexSide.NORTH_WEST: (-1, -1),
    HexSide.NORTH_EAST: (0, -1),
    HexSide.WEST: (-1, 0),
    HexSide.EAST: (1, 0),
    HexSide.SOUTH_WEST: (-1, 1),
    HexSide.SOUTH_EAST: (0, 1),
}

_ODD_ROW_OFFSETS: Dict[HexSide, Position] = {
    HexSide.NORTH_WEST: (0, -1),
    HexSide.NORTH_EAST: (1, -1),
    HexSide.WEST: (-1, 0),
    HexSide.EAST: (1, 0),
    HexSide.SOUTH_WEST: (0, 1),
    HexSide.SOUTH_EAST: (1, 1),
}

_OPPOSITE: Dict[HexSide, HexSide] = {
    HexSide.NORTH_WEST: HexSide.SOUTH_EAST,
    HexSide.SOUTH_EAST: HexSide.NORTH_WEST,
    HexSide.NORTH_EAST: HexSide.SOUTH_WEST,
    HexSide.SOUTH_WEST: HexSide.NORTH_EAST,
    HexSide.WEST: HexSide.EAST,
    HexSide.EAST: HexSide.WEST,
}

# clockwise around the cell
_CONNECTED: Dict[HexSide, Tuple[HexVertex, HexVertex]] = {
    HexSide.NORTH_WEST: (HexVertex.NORTH_WEST, HexVertex.NORTH),
    HexSide.NORTH_EAST: (HexVertex.NORTH, HexVertex.NORTH_EAST),
    HexSide.EAST: (HexVertex.NORTH_EAST, HexVertex.SOUTH_EAST),
    HexSide.SOUTH_EAST: (HexVertex.SOUTH_EAST, HexVertex.SOUTH),
    HexSide.SOUTH_WEST: (HexVertex.SOUTH, HexVertex.SOUTH_WEST),
    HexSide.WEST: (HexVertex.SOUTH_WEST, HexVertex.NORTH_WEST),
}

# For each corner: the two neighbours that share it, and what that corner is
# called on the neighbour.
_VERTEX_NEIGHBORS: Dict[HexVertex, Tuple[Tuple[HexSide, HexVertex], Tuple[HexSide, HexVertex]]] = {
    HexVertex.NORTH: (
        (HexSide.NORTH_WEST, HexVertex.SOUTH_EAST),
        (HexSide.NORTH_EAST, HexVertex.SOUTH_WEST),
    ),
    HexVertex.NORTH_WEST: (
        (HexSide.WEST, HexVertex.NORTH_EAST),
        (HexSide.NORTH_WEST, HexVertex.SOUTH),
    ),
    HexVertex.NORTH_EAST: (
        (HexSide.NORTH_EAST, HexVertex.SOUTH),
        (HexSide.EAST, HexVertex.NORTH_WEST),
    ),
    HexVertex.SOUTH_WEST: (
        (HexSide.SOUTH_WEST, HexVertex.NORTH),
        (HexSide.WEST, HexVertex.SOUTH_EAST),
    ),
    HexVertex.SOUTH_EAST: (
        (HexSide.EAST, HexVertex.SOUTH_WEST),
        (HexSide.SOUTH_EAST, HexVertex.NORTH),
    ),
    HexVertex.SOUTH: (
        (HexSide.SOUTH_EAST, HexVertex.NORTH_WEST),
        (HexSide.SOUTH_WEST, HexVertex.NORTH_EAST),
    ),
}


def neighbor_positions(pos: Position) -> Dict[HexSide, Position]:
    x, y = pos
    offsets = _EVEN_ROW_OFFSETS if y % 2 == 0 else _ODD_ROW_OFFSETS
    return {side: (x + dx, y + dy) for side, (dx, dy) in offsets.items()}


def opposite(side: HexSide) -> HexSide:
    return _OPPOSITE[side]


def connected_vertices(side: HexSide) -> Tuple[HexVertex, HexVertex]:
    return _CONNECTED[side]


def vertex_neighbor_lookup(vertex: HexVertex) -> Tuple[Tuple[HexSide, HexVertex], Tuple[HexSide, HexVertex]]:
    return _VERTEX_NEIGHBORS[vertex]


def shared_vertices(side: HexSide) -> Tuple[Tuple[HexVertex, HexVertex], Tuple[HexVertex, HexVertex]]:
    """Pairs (own corner, neighbour's corner) naming the same point along ``side``."""
    a, b = connected_vertices(side)
    na, nb = connected_vertices(opposite(side))
    # both walks are clockwise, so the shared side runs in opposite directions
    return (a, nb), (b, na)
