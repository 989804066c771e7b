from hexboard.engine.errors import (
    CapacityError,
    IDOverflowError,
    MapConfigError,
    PlayerCountError,
    TopologyInvariantError,
)
from hexboard.engine.maps import build_game, build_preset_game, validate_map_data
from hexboard.engine.placement import PlacementGrid
from hexboard.engine.topology import Topology, build_topology, invert_road_endpoints

__all__ = [
    "CapacityError",
    "IDOverflowError",
    "MapConfigError",
    "PlacementGrid",
    "PlayerCountError",
    "Topology",
    "TopologyInvariantError",
    "build_game",
    "build_preset_game",
    "build_topology",
    "invert_road_endpoints",
    "validate_map_data",
]
