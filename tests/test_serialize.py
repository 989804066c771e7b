from __future__ import annotations

import json

from hexboard.engine import maps as map_loader
from hexboard.engine.serialize import to_dict


def test_to_dict_is_json_ready():
    g = map_loader.build_preset_game("triangle", player_count=2)
    d = to_dict(g)
    assert json.loads(json.dumps(d)) == d
    assert d["counts"] == {"tiles": 3, "roads": 15, "settle_places": 13, "players": 2, "dice_markers": 3}
    assert d["tiles"][1]["settle_places"]["nw"] == d["tiles"][0]["settle_places"]["ne"]
    assert d["tiles"][1]["roads"]["w"] == d["tiles"][0]["roads"]["e"]
    assert d["roads"][0] == [1, 0]
    assert d["settle_places"][4]["roads"] == [3, 5, 9]
    assert d["settle_places"][0]["occupancy"] == {"kind": "empty", "player": None}
    assert d["players"][1]["hand"]["roads"] == 15
    assert d["dice_markers"][2] == {"id": 2, "value": 5, "tile": 2}
    assert d["harbours"] == [{"kind": "universal", "road": 2, "tile": 0, "side": "w"}]
    assert d["bank"]["ore"] == 19


def test_tiles_report_yielded_resource():
    tiles = to_dict(map_loader.build_preset_game("triangle"))["tiles"]
    assert [t["resource"] for t in tiles] == ["wheat", "wood", "ore"]

    tiles = to_dict(map_loader.build_preset_game("base_standard"))["tiles"]
    assert [t["resource"] for t in tiles if t["terrain"] == "desert"] == [None]
    assert all(t["resource"] is not None for t in tiles if t["terrain"] != "desert")
