"""Hexagonal map definition."""

from typing import Generic, TypeVar

from pydantic import BaseModel, RootModel


class AxialCoord(RootModel[tuple[int, int]]):
    """Hex coordinate definition, using Zetawar's axial coordinates.

    Elite Command stores tiles row-major; the column is `q` and the row is `r`.
    """

    model_config = {"frozen": True}

    root: tuple[int, int]

    @property
    def q(self) -> int:
        """First 'q' coordinate (column)."""
        return self.root[0]

    @property
    def r(self) -> int:
        """Second 'r' coordinate (row)."""
        return self.root[1]

    # Vector operations

    def __add__(self, rhs: "AxialCoord") -> "AxialCoord":
        """Add this delta to a coordinate (or another delta)."""
        if isinstance(rhs, AxialCoord):
            return AxialCoord(root=(self.q + rhs.q, self.r + rhs.r))
        return NotImplemented

    # Neighbors

    @property
    def neighbors(self) -> list["AxialCoord"]:
        """Get direct neighbors of this cell."""
        global HEX_NEIGHBOR_VECTORS
        return [self + vec for vec in HEX_NEIGHBOR_VECTORS]


HEX_NEIGHBOR_VECTORS = tuple(
    AxialCoord(root=_tup)
    for _tup in [(-1, -1), (0, -1), (-1, 0), (1, 0), (-1, 1), (0, 1)]
)
"""Neighbor offsets for the Elite Command grid layout.

Not the symmetric axial set: odd and even rows share these offsets.
"""


ObjType = TypeVar("ObjType")


class HexField(BaseModel, Generic[ObjType]):
    """Hexagonal field with objects that occupy some cells."""

    model_config = {"arbitrary_types_allowed": True}  # so that ObjType can be any

    cells: dict[AxialCoord, ObjType] = {}

    def present_neighbors(self, coord: AxialCoord) -> list[tuple[AxialCoord, ObjType]]:
        """Neighbors of `coord` that are occupied, in neighbor-vector order."""
        return [(nb, self.cells[nb]) for nb in coord.neighbors if nb in self.cells]

    def sorted_coords(self) -> list[AxialCoord]:
        """Occupied coordinates, sorted by (r, q)."""
        return sorted(self.cells, key=lambda c: (c.r, c.q))
