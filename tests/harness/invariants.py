from __future__ import annotations

from typing import Any, Dict, List

from hexboard.engine.board_geom import SIDES, neighbor_positions, opposite, shared_vertices
from hexboard.engine.placement import PlacementGrid
from hexboard.engine.topology import Topology


def check_topology(topo: Topology, grid: PlacementGrid) -> List[Dict[str, Any]]:
    fails: List[Dict[str, Any]] = []

    # dense ids: every settle place and road is referenced by some tile
    seen_sp = set()
    seen_roads = set()
    for tid, places in topo.tile_settle_places.items():
        if places is None:
            continue
        seen_sp.update(sp.value for sp in places.values())
        seen_roads.update(r.value for r in topo.tile_roads[tid].values())
    if seen_sp != set(range(topo.settle_place_count)):
        fails.append({
            "code": "settle_place_density",
            "message": "Settle place ids are not dense",
            "details": {"count": topo.settle_place_count, "seen": sorted(seen_sp)},
        })
    if seen_roads != set(range(topo.road_count)):
        fails.append({
            "code": "road_density",
            "message": "Road ids are not dense",
            "details": {"count": topo.road_count, "seen": sorted(seen_roads)},
        })

    # road ends point at existing, distinct settle places
    for rid, (a, b) in topo.road_settle_places.items():
        if a.value >= topo.settle_place_count or b.value >= topo.settle_place_count or a == b:
            fails.append({"code": "road_ends", "message": "Bad road endpoints", "details": {"road": rid.value}})

    # inverted table agrees with road ends
    for rid, (a, b) in topo.road_settle_places.items():
        for sp in (a, b):
            if rid not in topo.settle_place_roads[sp]:
                fails.append({
                    "code": "inversion",
                    "message": "Road missing from endpoint",
                    "details": {"road": rid.value, "settle_place": sp.value},
                })

    # adjacent tiles share the road and both corners of the side between them
    for tid, roads in topo.tile_roads.items():
        if roads is None:
            continue
        for side in SIDES:
            other = grid.get(neighbor_positions(grid.position_of(tid))[side])
            if other is None or topo.tile_roads[other] is None:
                continue
            if roads[side] != topo.tile_roads[other][opposite(side)]:
                fails.append({
                    "code": "road_symmetry",
                    "message": "Adjacent tiles disagree on shared road",
                    "details": {"tile": tid.value, "other": other.value, "side": side.value},
                })
            mine = topo.tile_settle_places[tid]
            theirs = topo.tile_settle_places[other]
            for own_v, their_v in shared_vertices(side):
                if mine[own_v] != theirs[their_v]:
                    fails.append({
                        "code": "corner_sharing",
                        "message": "Adjacent tiles disagree on shared corner",
                        "details": {"tile": tid.value, "other": other.value, "vertex": own_v.value},
                    })

    return fails
