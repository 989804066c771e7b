from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Literal, Optional, Tuple

from hexboard.engine.array_vec import ArrayVec
from hexboard.engine.board_geom import HexSide, HexVertex, Position
from hexboard.engine.ids import DiceMarkerID, PlayerID, RoadID, SettlePlaceID, TileID
from hexboard.engine.relations import RelationTable


class Resource(str, Enum):
    WHEAT = "wheat"
    SHEEP = "sheep"
    WOOD = "wood"
    BRICK = "brick"
    ORE = "ore"


class Terrain(str, Enum):
    FIELD = "field"
    PASTURE = "pasture"
    FOREST = "forest"
    MESA = "mesa"
    MOUNTAINS = "mountains"
    DESERT = "desert"


class HarbourKind(str, Enum):
    WHEAT = "wheat"
    SHEEP = "sheep"
    WOOD = "wood"
    ORE = "ore"
    BRICK = "brick"
    UNIVERSAL = "universal"


class DiceMarker(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    # seven is the robber's
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12


TERRAIN_TO_RES: Dict[Terrain, Optional[Resource]] = {
    Terrain.FIELD: Resource.WHEAT,
    Terrain.PASTURE: Resource.SHEEP,
    Terrain.FOREST: Resource.WOOD,
    Terrain.MESA: Resource.BRICK,
    Terrain.MOUNTAINS: Resource.ORE,
    Terrain.DESERT: None,
}

BANK_START = 19
HAND_SETTLEMENTS = 5
HAND_TOWNS = 4
HAND_ROADS = 15
MIN_PLAYERS = 2
MAX_PLAYERS = 4

OccupancyKind = Literal["empty", "settlement", "town"]


@dataclass(frozen=True)
class SettlePlace:
    kind: OccupancyKind = "empty"
    player: Optional[PlayerID] = None


EMPTY = SettlePlace()


@dataclass
class PlayerHand:
    resources: Dict[Resource, int] = field(default_factory=lambda: {r: 0 for r in Resource})
    settlements: int = HAND_SETTLEMENTS
    towns: int = HAND_TOWNS
    roads: int = HAND_ROADS


@dataclass(frozen=True)
class Harbour:
    kind: HarbourKind
    road: RoadID
    tile: TileID
    side: HexSide


@dataclass
class TileEntities:
    position: RelationTable[TileID, Position] = field(default_factory=lambda: RelationTable(TileID))
    terrain: RelationTable[TileID, Terrain] = field(default_factory=lambda: RelationTable(TileID))
    roads: RelationTable[TileID, Dict[HexSide, RoadID]] = field(default_factory=lambda: RelationTable(TileID))
    settle_places: RelationTable[TileID, Dict[HexVertex, SettlePlaceID]] = field(
        default_factory=lambda: RelationTable(TileID)
    )


@dataclass
class RoadEntities:
    settle_places: RelationTable[RoadID, Tuple[SettlePlaceID, SettlePlaceID]] = field(
        default_factory=lambda: RelationTable(RoadID)
    )


@dataclass
class SettlePlaceEntities:
    roads: RelationTable[SettlePlaceID, ArrayVec[RoadID]] = field(default_factory=lambda: RelationTable(SettlePlaceID))
    occupancy: RelationTable[SettlePlaceID, SettlePlace] = field(default_factory=lambda: RelationTable(SettlePlaceID))


@dataclass
class PlayerEntities:
    placed_roads: RelationTable[PlayerID, List[RoadID]] = field(default_factory=lambda: RelationTable(PlayerID))
    towns: RelationTable[PlayerID, List[SettlePlaceID]] = field(default_factory=lambda: RelationTable(PlayerID))
    settlements: RelationTable[PlayerID, List[SettlePlaceID]] = field(default_factory=lambda: RelationTable(PlayerID))
    hand: RelationTable[PlayerID, PlayerHand] = field(default_factory=lambda: RelationTable(PlayerID))


@dataclass
class DiceMarkerEntities:
    values: RelationTable[DiceMarkerID, DiceMarker] = field(default_factory=lambda: RelationTable(DiceMarkerID))
    place: RelationTable[DiceMarkerID, TileID] = field(default_factory=lambda: RelationTable(DiceMarkerID))


@dataclass
class GameState:
    """All board entities, stored as relationship tables keyed by entity ID."""

    map_name: str = ""
    size: Tuple[int, int] = (0, 0)
    tile: TileEntities = field(default_factory=TileEntities)
    road: RoadEntities = field(default_factory=RoadEntities)
    settle_place: SettlePlaceEntities = field(default_factory=SettlePlaceEntities)
    player: PlayerEntities = field(default_factory=PlayerEntities)
    dice_marker: DiceMarkerEntities = field(default_factory=DiceMarkerEntities)
    harbours: List[Harbour] = field(default_factory=list)
    bank: Dict[Resource, int] = field(default_factory=lambda: {r: BANK_START for r in Resource})

    @property
    def tile_count(self) -> int:
        return len(self.tile.terrain)

    @property
    def road_count(self) -> int:
        return len(self.road.settle_places)

    @property
    def settle_place_count(self) -> int:
        return len(self.settle_place.roads)

    @property
    def player_count(self) -> int:
        return len(self.player.hand)

    def dice_markers_on(self, tile: TileID) -> List[DiceMarker]:
        return [self.dice_marker.values[mid] for mid, where in self.dice_marker.place.items() if where == tile]

    def harbour_kinds_at(self, settle_place: SettlePlaceID) -> List[HarbourKind]:
        out = []
        for h in self.harbours:
            if settle_place in self.road.settle_places[h.road]:
                out.append(h.kind)
        return out
