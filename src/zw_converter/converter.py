"""Elite Command to Zetawar conversion."""

import logging

from pydantic import BaseModel

from zw_converter.data import default_settings
from zw_converter.data.models import (
    ConversionResult,
    ConverterSettings,
    MapSection,
    RawMap,
    ScenarioSection,
)
from zw_converter.map.names import derive_map_ids
from zw_converter.map.terrain import resolve_terrains
from zw_converter.scenario.bases import all_bases
from zw_converter.scenario.factions import assemble_factions, partition_factions

logger = logging.getLogger(__name__)


class MapConverter(BaseModel):
    """Map conversion helper object."""

    settings: ConverterSettings = default_settings

    def convert(self, raw: RawMap) -> ConversionResult:
        """Convert an Elite Command map to a Zetawar map and scenario."""
        ids = derive_map_ids(raw.name)
        logger.info(f"Converting {raw.name!r} as {ids.map_id!r}")

        terrains = resolve_terrains(raw.tiles, fallback=self.settings.fallback_terrain)
        holdings = partition_factions(raw.bases, raw.units)
        factions = assemble_factions(holdings, credits=raw.starting_credits)

        game_map = MapSection(
            id=ids.map_id,
            description=ids.map_description,
            created_by=self.settings.created_by,
            notes=raw.description,
            terrains=terrains,
        )
        scenario = ScenarioSection(
            id=ids.scenario_id,
            description=ids.scenario_description,
            created_by=self.settings.created_by,
            notes=raw.description,
            ruleset_id=self.settings.ruleset_id,
            map_id=ids.map_id,
            max_count_per_unit=self.settings.max_count_per_unit,
            credits_per_base=self.settings.credits_per_base,
            bases=all_bases(raw.bases),
            factions=factions,
        )
        return ConversionResult(game_map=game_map, scenario=scenario)
