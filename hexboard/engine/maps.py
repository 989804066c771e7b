from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from hexboard.engine.board_geom import HexSide, Position, neighbor_positions
from hexboard.engine.errors import MapConfigError, PlayerCountError
from hexboard.engine.ids import TileID
from hexboard.engine.placement import PlacementGrid
from hexboard.engine.state import (
    EMPTY,
    MAX_PLAYERS,
    MIN_PLAYERS,
    DiceMarker,
    GameState,
    Harbour,
    HarbourKind,
    PlayerHand,
    Terrain,
)
from hexboard.engine.topology import Topology, build_topology
from hexboard.resource_path import asset_path

logger = logging.getLogger(__name__)

MAP_VERSION = 1
DEFAULT_PRESET_ID = "base_standard"
MAX_MAP_SIDE = 255
MAX_TILES = 256

PRESET_REGISTRY = [
    {
        "id": "base_standard",
        "name": "Base Standard",
        "description": "Classic 19-hex island with the beginner layout.",
        "file": "base_standard.json",
    },
    {
        "id": "base_banked",
        "name": "Base: Banked Terrain",
        "description": "19-hex island, terrain dealt from the bank in placement order.",
        "file": "base_banked.json",
    },
    {
        "id": "triangle",
        "name": "Triangle",
        "description": "Three mutually adjacent tiles; the smallest map with a shared corner.",
        "file": "triangle.json",
    },
]

ALLOWED_TERRAIN = {t.value for t in Terrain}
ALLOWED_SIDES = {s.value for s in HexSide}
ALLOWED_HARBOURS = {h.value for h in HarbourKind}
ALLOWED_NUMBERS = {int(d) for d in DiceMarker}


def maps_dir() -> Path:
    return asset_path("maps")


def load_map_file(path: Path) -> Dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MapConfigError("map file not found", {"path": str(path)}) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MapConfigError("map json invalid", {"path": str(path), "error": str(exc)}) from exc
    return data


def get_preset_map(name: str) -> Dict[str, Any]:
    preset = next((p for p in PRESET_REGISTRY if p["id"] == name), None)
    filename = preset["file"] if preset else f"{name}.json"
    path = maps_dir() / filename
    logger.info("loading map preset %s from %s", name, path)
    return load_map_file(path)


def list_presets() -> List[Dict[str, str]]:
    return [{"id": p["id"], "name": p["name"], "description": p["description"]} for p in PRESET_REGISTRY]


def get_preset_meta(name: str) -> Optional[Dict[str, str]]:
    preset = next((p for p in PRESET_REGISTRY if p["id"] == name), None)
    if not preset:
        return None
    return {"id": preset["id"], "name": preset["name"], "description": preset["description"]}


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _int_pair(v: Any) -> bool:
    return isinstance(v, list) and len(v) == 2 and all(_is_int(x) for x in v)


def validate_map_data(data: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MapConfigError("map must be object")
    version = data.get("version", MAP_VERSION)
    if version != MAP_VERSION:
        raise MapConfigError("unsupported map version", {"version": version})
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise MapConfigError("map name must be string")

    size = data.get("size")
    if not _int_pair(size):
        raise MapConfigError("size must be int pair")
    width, height = size
    if not (1 <= width <= MAX_MAP_SIDE and 1 <= height <= MAX_MAP_SIDE):
        raise MapConfigError("size out of range", {"size": size})

    tiles = data.get("tiles")
    if not isinstance(tiles, list) or not tiles:
        raise MapConfigError("tiles must be non-empty list")
    if len(tiles) > MAX_TILES:
        raise MapConfigError("too many tiles", {"count": len(tiles), "max": MAX_TILES})

    seen: Dict[Tuple[int, int], int] = {}
    unassigned = 0
    for idx, t in enumerate(tiles):
        if not isinstance(t, dict):
            raise MapConfigError("tile must be object", {"index": idx})
        pos = t.get("position")
        if not _int_pair(pos):
            raise MapConfigError("tile position must be int pair", {"index": idx})
        x, y = pos
        if not (0 <= x < width and 0 <= y < height):
            raise MapConfigError("tile position out of bounds", {"index": idx, "position": pos})
        if (x, y) in seen:
            raise MapConfigError("duplicate tile position", {"index": idx, "other": seen[(x, y)], "position": pos})
        seen[(x, y)] = idx

        terrain = t.get("terrain")
        if terrain is None:
            unassigned += 1
        elif not isinstance(terrain, str) or terrain not in ALLOWED_TERRAIN:
            raise MapConfigError("unknown terrain", {"index": idx, "terrain": terrain})

        num = t.get("number")
        if num is not None:
            if not _is_int(num):
                raise MapConfigError("tile number must be int/None", {"index": idx})
            if num not in ALLOWED_NUMBERS:
                raise MapConfigError("tile number out of range", {"index": idx, "number": num})
            if terrain == Terrain.DESERT.value:
                raise MapConfigError("desert cannot carry a number", {"index": idx})

    bank = data.get("terrain_bank")
    if bank is not None:
        if not isinstance(bank, dict):
            raise MapConfigError("terrain_bank must be object")
        for k, v in bank.items():
            if k not in ALLOWED_TERRAIN:
                raise MapConfigError("unknown terrain in bank", {"terrain": k})
            if not _is_int(v) or v < 0:
                raise MapConfigError("terrain_bank counts must be non-negative int", {"terrain": k})
        if sum(bank.values()) != len(tiles):
            raise MapConfigError(
                "terrain_bank must cover every tile",
                {"bank_total": sum(bank.values()), "tiles": len(tiles)},
            )
    elif unassigned:
        raise MapConfigError("tiles without terrain need a terrain_bank", {"unassigned": unassigned})

    harbours = data.get("harbours")
    if harbours is not None:
        if not isinstance(harbours, list):
            raise MapConfigError("harbours must be list")
        for idx, h in enumerate(harbours):
            if not isinstance(h, dict):
                raise MapConfigError("harbour must be object", {"index": idx})
            if not _int_pair(h.get("position")):
                raise MapConfigError("harbour position must be int pair", {"index": idx})
            if tuple(h["position"]) not in seen:
                raise MapConfigError("harbour position has no tile", {"index": idx, "position": h["position"]})
            side = h.get("side")
            if not isinstance(side, str) or side not in ALLOWED_SIDES:
                raise MapConfigError("unknown harbour side", {"index": idx, "side": side})
            kind = h.get("kind")
            if not isinstance(kind, str) or kind not in ALLOWED_HARBOURS:
                raise MapConfigError("unknown harbour kind", {"index": idx, "kind": kind})

    return data


def _materialize_terrain(data: Dict[str, Any]) -> List[Terrain]:
    tiles_spec = data["tiles"]
    bank = data.get("terrain_bank")
    if bank is None:
        return [Terrain(t["terrain"]) for t in tiles_spec]

    left = {Terrain(k): int(v) for k, v in bank.items()}
    for idx, t in enumerate(tiles_spec):
        terrain = t.get("terrain")
        if terrain is None:
            continue
        terrain = Terrain(terrain)
        if left.get(terrain, 0) <= 0:
            raise MapConfigError("terrain_bank exhausted", {"index": idx, "terrain": terrain.value})
        left[terrain] -= 1

    # leftovers are dealt in bank order, no shuffling
    deck: List[Terrain] = []
    for terrain, n in left.items():
        deck.extend([terrain] * n)

    out: List[Terrain] = []
    for t in tiles_spec:
        terrain = t.get("terrain")
        out.append(Terrain(terrain) if terrain is not None else deck.pop(0))
    return out


def check_player_count(player_count: int) -> int:
    if not _is_int(player_count) or not (MIN_PLAYERS <= player_count <= MAX_PLAYERS):
        raise PlayerCountError(
            "player count out of range",
            {"players": player_count, "min": MIN_PLAYERS, "max": MAX_PLAYERS},
        )
    return player_count


def _resolve_harbours(data: Dict[str, Any], grid: PlacementGrid, topo: Topology) -> List[Harbour]:
    out: List[Harbour] = []
    taken: Dict[int, int] = {}
    for idx, h in enumerate(data.get("harbours") or []):
        pos: Position = (h["position"][0], h["position"][1])
        side = HexSide(h["side"])
        tile = grid.get(pos)
        if grid.get(neighbor_positions(pos)[side]) is not None:
            raise MapConfigError("harbour must face open water", {"index": idx, "position": h["position"], "side": side.value})
        road = topo.tile_roads[tile][side]
        if road.value in taken:
            raise MapConfigError("two harbours on one road", {"index": idx, "other": taken[road.value]})
        taken[road.value] = idx
        out.append(Harbour(kind=HarbourKind(h["kind"]), road=road, tile=tile, side=side))
    return out


def build_game(data: Dict[str, Any], player_count: int = MAX_PLAYERS) -> GameState:
    validate_map_data(data)
    check_player_count(player_count)

    width, height = data["size"]
    positions: List[Position] = [(t["position"][0], t["position"][1]) for t in data["tiles"]]
    terrains = _materialize_terrain(data)

    grid = PlacementGrid(width, height, positions)
    topo = build_topology(grid, len(positions))
    unreached = topo.unreached_tiles()
    if unreached:
        raise MapConfigError(
            "map is not connected",
            {"unreached": [t.value for t in unreached], "tiles": len(positions)},
        )

    g = GameState(map_name=str(data.get("name") or ""), size=(width, height))
    for pos, terrain in zip(positions, terrains):
        tid = g.tile.position.push(pos)
        g.tile.terrain.push(terrain)
        g.tile.roads.push(topo.tile_roads[tid])
        g.tile.settle_places.push(topo.tile_settle_places[tid])

    g.road.settle_places = topo.road_settle_places
    g.settle_place.roads = topo.settle_place_roads
    for _ in range(topo.settle_place_count):
        g.settle_place.occupancy.push(EMPTY)

    for _ in range(player_count):
        g.player.hand.push(PlayerHand())
        g.player.placed_roads.push([])
        g.player.settlements.push([])
        g.player.towns.push([])

    for idx, (t, terrain) in enumerate(zip(data["tiles"], terrains)):
        num = t.get("number")
        if num is None:
            continue
        if terrain is Terrain.DESERT:
            raise MapConfigError("desert cannot carry a number", {"index": idx})
        g.dice_marker.values.push(DiceMarker(num))
        g.dice_marker.place.push(TileID.from_index(idx))

    g.harbours = _resolve_harbours(data, grid, topo)
    logger.debug(
        "assembled game %r: %d tiles, %d roads, %d settle places, %d players",
        g.map_name,
        g.tile_count,
        g.road_count,
        g.settle_place_count,
        g.player_count,
    )
    return g


def build_preset_game(name: str = DEFAULT_PRESET_ID, player_count: int = MAX_PLAYERS) -> GameState:
    return build_game(get_preset_map(name), player_count)
