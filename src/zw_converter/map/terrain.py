"""Terrain grid reconstruction.

Elite Command marks tiles holding a base with a 'base' code instead of a terrain,
whereas Zetawar always wants real terrain under a base. Those tiles take the most
common terrain among their neighbors.
"""

import logging
from collections import Counter

from zw_converter.data.models import (
    BASE_FILLER_CODES,
    TERRAIN_TABLE,
    TerrainKind,
    Tile,
)
from zw_converter.errors import TerrainResolutionError
from .hexes import AxialCoord, HexField

logger = logging.getLogger(__name__)


def terrain_from_code(code: int) -> TerrainKind | None:
    """Terrain for an Elite Command tile code, or None if there is no tile."""
    if 0 <= code < len(TERRAIN_TABLE):
        return TERRAIN_TABLE[code]
    if code in BASE_FILLER_CODES:
        return TerrainKind.BASE_FILLER
    return None


class TerrainGrid(HexField[TerrainKind]):
    """Terrain for each tile of a map, possibly with unresolved base fillers."""

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> "TerrainGrid":
        """Build from row-major Elite Command tile codes (row is `r`, column is `q`)."""
        cells: dict[AxialCoord, TerrainKind] = {}
        for r, row in enumerate(rows):
            for q, code in enumerate(row):
                terrain = terrain_from_code(code)
                if terrain is not None:
                    cells[AxialCoord(root=(q, r))] = terrain
        return cls(cells=cells)

    @property
    def base_fillers(self) -> list[AxialCoord]:
        """Coordinates still waiting for a terrain."""
        return [c for c, t in self.cells.items() if t == TerrainKind.BASE_FILLER]

    def neighbor_terrains(self, coord: AxialCoord) -> list[TerrainKind]:
        """Concrete terrains of the existing neighbors of `coord`."""
        return [
            t
            for _, t in self.present_neighbors(coord)
            if t != TerrainKind.BASE_FILLER
        ]

    def most_common_neighbor_terrain(
        self, coord: AxialCoord, fallback: TerrainKind | None = None
    ) -> TerrainKind:
        """Most common terrain among the neighbors of `coord`.

        Ties go to the terrain listed first in the Elite Command terrain table.
        With no usable neighbors, returns `fallback`, or raises
        `TerrainResolutionError` if there is none.
        """
        counts = Counter(self.neighbor_terrains(coord))
        if len(counts) == 0:
            if fallback is None:
                raise TerrainResolutionError(coord.q, coord.r)
            logger.warning(
                f"No neighbor terrain at ({coord.q}, {coord.r}), using {fallback.value}"
            )
            return fallback
        return max(counts, key=lambda t: (counts[t], -TERRAIN_TABLE.index(t)))

    def resolve_base_fillers(
        self, fallback: TerrainKind | None = None
    ) -> "TerrainGrid":
        """Get a copy with every base filler replaced by its neighbors' terrain.

        Votes only count the original terrain, so the result doesn't depend on
        the order in which fillers are visited.
        """
        resolved = dict(self.cells)
        for coord in self.base_fillers:
            resolved[coord] = self.most_common_neighbor_terrain(coord, fallback)
            logger.debug(
                f"Base tile ({coord.q}, {coord.r}) -> {resolved[coord].value}"
            )
        return TerrainGrid(cells=resolved)

    def to_tiles(self) -> list[Tile]:
        """Tiles sorted by (r, q)."""
        return [
            Tile(q=c.q, r=c.r, terrain=self.cells[c]) for c in self.sorted_coords()
        ]


def resolve_terrains(
    rows: list[list[int]], fallback: TerrainKind | None = None
) -> list[Tile]:
    """Convert Elite Command tile codes to Zetawar terrains."""
    grid = TerrainGrid.from_rows(rows)
    n_fillers = len(grid.base_fillers)
    res = grid.resolve_base_fillers(fallback).to_tiles()
    logger.info(f"Resolved {len(res)} tiles ({n_fillers} under bases)")
    return res
