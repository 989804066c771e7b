from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from hexboard.engine.board_geom import Position
from hexboard.engine.errors import TopologyInvariantError
from hexboard.engine.ids import TileID


class PlacementGrid:
    """Dense width x height lookup from board position to the tile placed there."""

    def __init__(self, width: int, height: int, positions: Sequence[Position]):
        self.width = int(width)
        self.height = int(height)
        self._cells: List[List[Optional[TileID]]] = [[None] * self.width for _ in range(self.height)]
        self._positions: List[Position] = []
        for idx, (x, y) in enumerate(positions):
            if not self.in_bounds((x, y)):
                raise TopologyInvariantError(
                    "tile placed outside the map",
                    {"tile": idx, "position": [x, y], "size": [self.width, self.height]},
                )
            self._cells[y][x] = TileID.from_index(idx)
            self._positions.append((x, y))

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, pos: Position) -> Optional[TileID]:
        if not self.in_bounds(pos):
            return None
        x, y = pos
        return self._cells[y][x]

    def position_of(self, tile: TileID) -> Position:
        return self._positions[tile.value]

    @property
    def tile_count(self) -> int:
        return len(self._positions)

    def occupied(self) -> Iterator[Tuple[Position, TileID]]:
        for y, row in enumerate(self._cells):
            for x, tile in enumerate(row):
                if tile is not None:
                    yield (x, y), tile
