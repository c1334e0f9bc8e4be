"""Conversion errors.

Malformed input is reported by pydantic's `ValidationError` when building a
`RawMap`; everything here is raised further down the pipeline.
"""


class ConversionError(Exception):
    """Base class for conversion failures."""


class TerrainResolutionError(ConversionError):
    """A base tile's terrain couldn't be inferred from its neighbors."""

    def __init__(self, q: int, r: int):
        self.q = q
        self.r = r
        super().__init__(f"No neighbor terrain to infer base tile terrain at ({q}, {r})")


class PartitionError(ConversionError):
    """A base or unit is owned by a player slot with no faction color."""

    def __init__(self, player: int):
        self.player = player
        super().__init__(f"No faction color for player slot {player}")


class TemplateError(ConversionError):
    """The destination data file is missing an insertion anchor."""
