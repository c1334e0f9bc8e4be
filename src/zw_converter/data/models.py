"""Data models."""

from collections import Counter
from enum import Enum

from typing_extensions import Annotated
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from zw_converter.map.names import id_from_name


class TerrainKind(str, Enum):
    """Zetawar terrain type."""

    PLAINS = "plains"
    DEEP_WATER = "deep-water"
    MOUNTAINS = "mountains"
    WOODS = "woods"
    DESERT = "desert"
    TUNDRA = "tundra"
    SWAMP = "swamp"
    SHALLOW_WATER = "shallow-water"
    FORD = "ford"
    BASE_FILLER = "base-filler"  # only while resolving, never in output


class ColorKind(str, Enum):
    """Faction color."""

    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    PINK = "pink"
    GREEN = "green"
    ORANGE = "orange"


TERRAIN_TABLE: tuple[TerrainKind, ...] = (
    TerrainKind.PLAINS,
    TerrainKind.DEEP_WATER,
    TerrainKind.MOUNTAINS,
    TerrainKind.WOODS,
    TerrainKind.DESERT,
    TerrainKind.TUNDRA,
    TerrainKind.SWAMP,
    TerrainKind.SHALLOW_WATER,
    TerrainKind.FORD,
)
"""Elite Command terrain code -> terrain, indexed by code."""

BASE_FILLER_CODES = range(10, 13)
"""Elite Command codes for 'a base sits here', terrain unknown."""

FACTION_COLORS: dict[int, ColorKind] = {
    1: ColorKind.RED,
    2: ColorKind.BLUE,
    3: ColorKind.YELLOW,
    4: ColorKind.PINK,
    5: ColorKind.GREEN,
    6: ColorKind.ORANGE,
}
"""Player slot -> faction color."""

COLOR_SLOTS: dict[ColorKind, int] = {v: k for k, v in FACTION_COLORS.items()}


# Elite Command (input) side


class RawBase(BaseModel):
    """Base placement in an Elite Command map."""

    player: Annotated[int, Field(ge=0)]
    x: int
    y: int
    base_type: str


class RawUnit(BaseModel):
    """Unit placement in an Elite Command map."""

    player: Annotated[int, Field(ge=0)]
    x: int
    y: int
    unit_type: str


class RawMap(BaseModel):
    """An Elite Command map, as exported to JSON.

    Elite Command metadata (`id`, `created_at`, `status`, ...) has no Zetawar
    counterpart and is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str
    starting_credits: Annotated[int, Field(ge=0)]
    tiles: list[list[int]]
    bases: list[RawBase] = []
    units: list[RawUnit] = []

    @field_validator("name", mode="after")
    @classmethod
    def _chk_name(cls, v: str) -> str:
        """Ensure the name gives a usable id."""
        if id_from_name(v).strip("-") == "":
            raise ValueError(f"Map name {v!r} does not produce a map id")
        return v

    @field_validator("tiles", mode="after")
    @classmethod
    def _chk_tiles(cls, v: list[list[int]]) -> list[list[int]]:
        """Ensure every cell is a known terrain code, base code or 'no tile'."""
        for r, row in enumerate(v):
            for q, code in enumerate(row):
                # negative codes mean 'no tile here'
                if code < len(TERRAIN_TABLE) or code in BASE_FILLER_CODES:
                    continue
                raise ValueError(f"Unknown terrain code {code} at row {r}, column {q}")
        return v

    @model_validator(mode="after")
    def _chk_unique_coords(self) -> "RawMap":
        """Ensure no two bases (or two units) share a coordinate."""
        for kind, items in (("bases", self.bases), ("units", self.units)):
            counts = Counter((x.x, x.y) for x in items)
            dupes = sorted(xy for xy, n in counts.items() if n > 1)
            if dupes:
                raise ValueError(f"Duplicate {kind} at coordinates: {dupes}")
        return self


# Zetawar (output) side


class Tile(BaseModel):
    """Terrain at a hex."""

    model_config = ConfigDict(frozen=True)

    q: int
    r: int
    terrain: TerrainKind


class BaseRecord(BaseModel):
    """Base location and type, independent of ownership."""

    model_config = ConfigDict(frozen=True)

    q: int
    r: int
    base_type: str


class FactionBase(BaseModel):
    """Location of a base owned by a faction."""

    model_config = ConfigDict(frozen=True)

    q: int
    r: int


class FactionUnit(BaseModel):
    """Starting unit of a faction."""

    model_config = ConfigDict(frozen=True)

    q: int
    r: int
    unit_type: str


class FactionRecord(BaseModel):
    """Faction information."""

    model_config = ConfigDict(frozen=True)

    color: ColorKind
    credits: int
    ai: bool
    bases: list[FactionBase] = []
    units: list[FactionUnit] | None = None  # only if the faction starts with units


class MapSection(BaseModel):
    """Entry for the 'maps' definition."""

    id: str
    description: str
    created_by: str
    notes: str
    terrains: list[Tile]

    @field_validator("terrains", mode="after")
    @classmethod
    def _chk_no_filler(cls, v: list[Tile]) -> list[Tile]:
        """Ensure all base fillers have been resolved."""
        for tile in v:
            if tile.terrain == TerrainKind.BASE_FILLER:
                raise ValueError(f"Unresolved base filler at ({tile.q}, {tile.r})")
        return v


class ScenarioSection(BaseModel):
    """Entry for the 'scenarios' definition."""

    id: str
    description: str
    created_by: str
    notes: str
    ruleset_id: str
    map_id: str
    max_count_per_unit: int
    credits_per_base: int
    bases: list[BaseRecord]
    factions: list[FactionRecord]


class ConversionResult(BaseModel):
    """Everything generated from one Elite Command map."""

    game_map: MapSection
    scenario: ScenarioSection


# Settings


class ConverterSettings(BaseModel):
    """Scenario constants and data file anchors.

    Values come from `data/defaults.yaml` or a file of the same shape.
    """

    created_by: str
    ruleset_id: str
    max_count_per_unit: Annotated[int, Field(ge=1)]
    credits_per_base: Annotated[int, Field(ge=0)]
    map_anchor: str
    scenario_anchor: str
    fallback_terrain: TerrainKind | None  # None fails on isolated bases

    @field_validator("fallback_terrain", mode="after")
    @classmethod
    def _chk_fallback(cls, v: TerrainKind | None) -> TerrainKind | None:
        """Fallback must be a real terrain."""
        if v == TerrainKind.BASE_FILLER:
            raise ValueError("Fallback terrain can't be a base filler.")
        return v
