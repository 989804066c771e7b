from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Literal, Optional, Set, Tuple

from hexboard.engine.array_vec import ArrayVec
from hexboard.engine.board_geom import (
    SIDES,
    VERTICES,
    HexSide,
    HexVertex,
    Position,
    connected_vertices,
    neighbor_positions,
    opposite,
    vertex_neighbor_lookup,
)
from hexboard.engine.errors import TopologyInvariantError
from hexboard.engine.ids import RoadID, SettlePlaceID, TileID
from hexboard.engine.placement import PlacementGrid
from hexboard.engine.relations import RelationTable

logger = logging.getLogger(__name__)

MAX_ROADS_PER_SETTLE_PLACE = 3

VertexMap = Dict[HexVertex, SettlePlaceID]
SideMap = Dict[HexSide, RoadID]
RoadEnds = Tuple[SettlePlaceID, SettlePlaceID]

NeighborKind = Literal["processed", "unvisited", "absent"]


@dataclass(frozen=True)
class Neighbor:
    kind: NeighborKind
    tile: Optional[TileID] = None
    position: Optional[Position] = None


@dataclass
class Topology:
    tile_settle_places: RelationTable[TileID, Optional[VertexMap]]
    tile_roads: RelationTable[TileID, Optional[SideMap]]
    road_settle_places: RelationTable[RoadID, RoadEnds]
    settle_place_roads: RelationTable[SettlePlaceID, ArrayVec[RoadID]]
    settle_place_count: int

    @property
    def road_count(self) -> int:
        return len(self.road_settle_places)

    @property
    def tile_count(self) -> int:
        return len(self.tile_roads)

    def unreached_tiles(self) -> List[TileID]:
        return [tid for tid, roads in self.tile_roads.items() if roads is None]

    def is_connected(self) -> bool:
        return not self.unreached_tiles()


class _Builder:
    """Per-call traversal state; nothing here outlives one ``build_topology``."""

    def __init__(self, grid: PlacementGrid, tile_count: int):
        self.grid = grid
        self.processed: Set[TileID] = set()
        self.queue: Deque[Tuple[TileID, Position]] = deque()
        self.next_settle_place = 0
        self.tile_settle_places: RelationTable[TileID, Optional[VertexMap]] = RelationTable(TileID)
        self.tile_roads: RelationTable[TileID, Optional[SideMap]] = RelationTable(TileID)
        self.road_settle_places: RelationTable[RoadID, RoadEnds] = RelationTable(RoadID)
        # reserve one slot per tile so a tile's slot never depends on visit order
        for _ in range(tile_count):
            self.tile_settle_places.push(None)
            self.tile_roads.push(None)

    def new_settle_place(self) -> SettlePlaceID:
        sp = SettlePlaceID.from_index(self.next_settle_place)
        self.next_settle_place += 1
        return sp

    def classify(self, pos: Position) -> Dict[HexSide, Neighbor]:
        out: Dict[HexSide, Neighbor] = {}
        for side, npos in neighbor_positions(pos).items():
            tile = self.grid.get(npos)
            if tile is None:
                out[side] = Neighbor("absent")
            elif tile in self.processed:
                out[side] = Neighbor("processed", tile)
            else:
                out[side] = Neighbor("unvisited", tile, npos)
        return out

    def resolve_vertices(self, tile: TileID, neighbors: Dict[HexSide, Neighbor]) -> VertexMap:
        vertices: VertexMap = {}
        for vertex in VERTICES:
            found: List[SettlePlaceID] = []
            for side, their_vertex in vertex_neighbor_lookup(vertex):
                nb = neighbors[side]
                if nb.kind != "processed":
                    continue
                their_map = self.tile_settle_places[nb.tile]
                found.append(their_map[their_vertex])
            if len(found) == 2 and found[0] != found[1]:
                raise TopologyInvariantError(
                    "neighbouring tiles disagree on a shared corner",
                    {"tile": tile.value, "vertex": vertex.value, "candidates": [sp.value for sp in found]},
                )
            vertices[vertex] = found[0] if found else self.new_settle_place()
        return vertices

    def resolve_sides(self, neighbors: Dict[HexSide, Neighbor], vertices: VertexMap) -> SideMap:
        roads: SideMap = {}
        for side in SIDES:
            nb = neighbors[side]
            if nb.kind == "processed":
                roads[side] = self.tile_roads[nb.tile][opposite(side)]
                continue
            a, b = connected_vertices(side)
            roads[side] = self.road_settle_places.push((vertices[a], vertices[b]))
        return roads

    def run(self) -> None:
        if self.grid.tile_count == 0:
            return
        first = TileID.from_index(0)
        self.queue.append((first, self.grid.position_of(first)))

        while self.queue:
            tile, pos = self.queue.popleft()
            if tile in self.processed:
                continue
            self.processed.add(tile)

            neighbors = self.classify(pos)
            vertices = self.resolve_vertices(tile, neighbors)
            roads = self.resolve_sides(neighbors, vertices)
            self.tile_settle_places[tile] = vertices
            self.tile_roads[tile] = roads

            for nb in neighbors.values():
                if nb.kind == "unvisited":
                    self.queue.append((nb.tile, nb.position))
            logger.debug("processed tile %d at %s", tile.value, pos)


def invert_road_endpoints(
    road_settle_places: RelationTable[RoadID, RoadEnds],
    settle_place_count: int,
) -> RelationTable[SettlePlaceID, ArrayVec[RoadID]]:
    settle_place_roads: RelationTable[SettlePlaceID, ArrayVec[RoadID]] = RelationTable(SettlePlaceID)
    for _ in range(settle_place_count):
        settle_place_roads.push(ArrayVec(MAX_ROADS_PER_SETTLE_PLACE))
    for road, (a, b) in road_settle_places.items():
        settle_place_roads[a].push(road)
        settle_place_roads[b].push(road)
    return settle_place_roads


def build_topology(grid: PlacementGrid, tile_count: Optional[int] = None) -> Topology:
    """Walk the placed tiles breadth-first from tile 0 and number every corner and side.

    Corners and sides shared between tiles get exactly one ID, whichever of the
    owning tiles is reached first. Tiles not connected to tile 0 are left without
    tables; ``Topology.unreached_tiles`` lists them and the caller decides what
    to do.
    """
    count = grid.tile_count if tile_count is None else tile_count
    builder = _Builder(grid, count)
    builder.run()

    settle_place_roads = invert_road_endpoints(builder.road_settle_places, builder.next_settle_place)
    topo = Topology(
        tile_settle_places=builder.tile_settle_places,
        tile_roads=builder.tile_roads,
        road_settle_places=builder.road_settle_places,
        settle_place_roads=settle_place_roads,
        settle_place_count=builder.next_settle_place,
    )
    logger.debug(
        "built topology: %d tiles, %d roads, %d settle places, %d unreached",
        topo.tile_count,
        topo.road_count,
        topo.settle_place_count,
        count - len(builder.processed),
    )
    return topo
