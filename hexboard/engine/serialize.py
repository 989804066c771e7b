from __future__ import annotations

from typing import Any, Dict

from hexboard.engine.state import TERRAIN_TO_RES, GameState, PlayerHand, SettlePlace, Terrain


def _hand_dict(h: PlayerHand) -> Dict[str, Any]:
    return {
        "resources": {r.value: n for r, n in h.resources.items()},
        "settlements": h.settlements,
        "towns": h.towns,
        "roads": h.roads,
    }


def _resource_value(terrain: Terrain):
    res = TERRAIN_TO_RES[terrain]
    return res.value if res is not None else None


def _occupancy_dict(sp: SettlePlace) -> Dict[str, Any]:
    return {"kind": sp.kind, "player": sp.player.value if sp.player is not None else None}


def to_dict(g: GameState) -> Dict[str, Any]:
    return {
        "map_name": g.map_name,
        "size": list(g.size),
        "counts": {
            "tiles": g.tile_count,
            "roads": g.road_count,
            "settle_places": g.settle_place_count,
            "players": g.player_count,
            "dice_markers": len(g.dice_marker.values),
        },
        "tiles": [
            {
                "id": tid.value,
                "position": list(g.tile.position[tid]),
                "terrain": g.tile.terrain[tid].value,
                "resource": _resource_value(g.tile.terrain[tid]),
                "roads": {side.value: rid.value for side, rid in g.tile.roads[tid].items()},
                "settle_places": {v.value: sp.value for v, sp in g.tile.settle_places[tid].items()},
            }
            for tid in g.tile.terrain.ids()
        ],
        "roads": [[a.value, b.value] for _, (a, b) in g.road.settle_places.items()],
        "settle_places": [
            {
                "roads": [rid.value for rid in roads],
                "occupancy": _occupancy_dict(g.settle_place.occupancy[sid]),
            }
            for sid, roads in g.settle_place.roads.items()
        ],
        "players": [
            {
                "id": pid.value,
                "hand": _hand_dict(hand),
                "placed_roads": [r.value for r in g.player.placed_roads[pid]],
                "settlements": [s.value for s in g.player.settlements[pid]],
                "towns": [s.value for s in g.player.towns[pid]],
            }
            for pid, hand in g.player.hand.items()
        ],
        "dice_markers": [
            {"id": mid.value, "value": int(value), "tile": g.dice_marker.place[mid].value}
            for mid, value in g.dice_marker.values.items()
        ],
        "harbours": [
            {"kind": h.kind.value, "road": h.road.value, "tile": h.tile.value, "side": h.side.value}
            for h in g.harbours
        ],
        "bank": {r.value: n for r, n in g.bank.items()},
    }
