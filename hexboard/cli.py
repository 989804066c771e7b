from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hexboard.config import ServiceConfig
from hexboard.engine import maps as map_loader
from hexboard.engine.board_geom import SIDES, VERTICES
from hexboard.engine.errors import MapConfigError
from hexboard.engine.serialize import to_dict
from hexboard.engine.state import TERRAIN_TO_RES, GameState

console = Console()

EXIT_CONFIG_ERROR = 2


def _load(source: str):
    path = Path(source)
    if path.suffix == ".json" or path.exists():
        return map_loader.load_map_file(path)
    return map_loader.get_preset_map(source)


def print_presets() -> None:
    t = Table(show_header=True, header_style="bold")
    t.add_column("Id")
    t.add_column("Name")
    t.add_column("Description")
    for p in map_loader.list_presets():
        t.add_row(p["id"], p["name"], p["description"])
    console.print(t)


def print_game(g: GameState) -> None:
    console.rule(f"MAP  {g.map_name or '(unnamed)'}  {g.size[0]}x{g.size[1]}")

    t = Table(show_header=True, header_style="bold")
    t.add_column("Tile", justify="right")
    t.add_column("Pos")
    t.add_column("Terrain")
    t.add_column("Yields")
    t.add_column("Dice", justify="right")
    t.add_column("Roads " + " ".join(s.value for s in SIDES))
    t.add_column("Settle places " + " ".join(v.value for v in VERTICES))
    for tid in g.tile.terrain.ids():
        x, y = g.tile.position[tid]
        dice = ",".join(str(int(d)) for d in g.dice_markers_on(tid)) or "-"
        roads = g.tile.roads[tid]
        places = g.tile.settle_places[tid]
        res = TERRAIN_TO_RES[g.tile.terrain[tid]]
        t.add_row(
            str(tid.value),
            f"{x},{y}",
            g.tile.terrain[tid].value,
            res.value if res is not None else "-",
            dice,
            " ".join(str(roads[s].value) for s in SIDES),
            " ".join(str(places[v].value) for v in VERTICES),
        )
    console.print(t)

    console.print(
        f"[bold]Tiles:[/bold] {g.tile_count}  [bold]Roads:[/bold] {g.road_count}  "
        f"[bold]Settle places:[/bold] {g.settle_place_count}  [bold]Players:[/bold] {g.player_count}"
    )
    if g.harbours:
        console.print("[bold]Harbours:[/bold]")
        for h in g.harbours:
            a, b = g.road.settle_places[h.road]
            console.print(f"  - {h.kind.value}: road {h.road.value} ({a.value}-{b.value})")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexboard", description="Build hex board topologies from map configs.")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("presets", help="list bundled map presets")

    show = sub.add_parser("show", help="build a map and print its topology")
    show.add_argument("source", nargs="?", default=None, help="preset id or path to a map json")
    show.add_argument("--players", type=int, default=None)
    show.add_argument("--json", action="store_true", help="print the serialized game instead of tables")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    cfg = ServiceConfig.from_env()
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or cfg.log_level).upper())

    if args.command == "presets":
        print_presets()
        return 0

    source = args.source or cfg.default_preset
    players = args.players if args.players is not None else cfg.default_players
    try:
        g = map_loader.build_game(_load(source), players)
    except MapConfigError as exc:
        console.print(f"[red]ERROR:[/red] {escape(exc.message)} {escape(str(exc.details or ''))}")
        return EXIT_CONFIG_ERROR

    if args.json:
        console.print_json(json.dumps(to_dict(g)))
    else:
        print_game(g)
    return 0


if __name__ == "__main__":
    sys.exit(main())
