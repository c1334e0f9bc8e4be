"""Rendering to Zetawar `data.cljs` syntax.

Each section renders as a map entry (`:id {...}`) that goes right after the
opening brace of the `maps` or `scenarios` definition, so it's followed by the
entries already there.
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel

from zw_converter.data.models import (
    ConversionResult,
    FactionRecord,
    MapSection,
    ScenarioSection,
)

VECTOR_INDENT = 4
FACTION_INDENT = 6
ENTRY_END = "}\n\n   "

KEY_NAMES = {"terrain": "terrain-type"}
"""Field names that differ from their Zetawar keys (besides '_' vs '-')."""

KEYWORD_FIELDS = {"terrain", "base_type", "unit_type", "color", "ruleset_id", "map_id"}
"""Fields whose values are keywords rather than strings."""


class RenderedSections(BaseModel):
    """Text to insert into the `maps` and `scenarios` definitions."""

    game_map: str
    scenario: str


def keyword(name: str) -> str:
    """Keyword for a name, e.g. `:credits-per-base`."""
    return ":" + name.replace("_", "-")


def edn_value(field: str, value: Any) -> str:
    """Render a single field value."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if field in KEYWORD_FIELDS:
        return ":" + str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def edn_record(model: BaseModel) -> str:
    """Render a flat model as a single-line map, e.g. `{:q 0, :r 1}`."""
    parts = [
        f"{keyword(KEY_NAMES.get(k, k))} {edn_value(k, v)}"
        for k, v in model
        if v is not None
    ]
    return "{" + ", ".join(parts) + "}"


def format_vector(entities: list[str], first_prefix: str) -> str:
    """One entity per line, continuation lines aligned under the first entity."""
    if len(entities) == 0:
        return first_prefix + "[]"
    pad = " " * (len(first_prefix) + 1)
    lines = [first_prefix + "[" + entities[0]]
    lines += [pad + e for e in entities[1:]]
    lines[-1] += "]"
    return "\n".join(lines)


def format_faction(faction: FactionRecord, first_prefix: str) -> str:
    """Render one faction."""
    indent = " " * FACTION_INDENT
    lines = [
        f"{first_prefix}{{:color {edn_value('color', faction.color)}",
        f"{indent}:credits {faction.credits}",
        f"{indent}:ai {edn_value('ai', faction.ai)}",
        format_vector([edn_record(b) for b in faction.bases], f"{indent}:bases "),
    ]
    if faction.units is not None:
        lines.append(
            format_vector([edn_record(u) for u in faction.units], f"{indent}:units ")
        )
    return "\n".join(lines) + "}"


def format_factions(factions: list[FactionRecord]) -> str:
    """Render the faction vector."""
    outer = " " * VECTOR_INDENT
    if len(factions) == 0:
        return outer + "[]"
    parts = [
        format_faction(f, outer + "[" if i == 0 else outer + " ")
        for i, f in enumerate(factions)
    ]
    return "\n".join(parts) + "]"


def render_map_section(section: MapSection) -> str:
    """Render the map entry."""
    map_kw = ":" + section.id
    return (
        f"{map_kw}\n"
        f"   {{:id {map_kw}\n"
        f"    :description {edn_value('description', section.description)}\n"
        f"    :created-by {edn_value('created_by', section.created_by)}\n"
        f"    :notes {edn_value('notes', section.notes)}\n"
        "    :terrains\n"
        + format_vector([edn_record(t) for t in section.terrains], " " * VECTOR_INDENT)
        + ENTRY_END
    )


def render_scenario_section(section: ScenarioSection) -> str:
    """Render the scenario entry."""
    scenario_kw = ":" + section.id
    return (
        f"{scenario_kw}\n"
        f"   {{:id {scenario_kw}\n"
        f"    :description {edn_value('description', section.description)}\n"
        f"    :created-by {edn_value('created_by', section.created_by)}\n"
        f"    :notes {edn_value('notes', section.notes)}\n"
        f"    :ruleset-id {edn_value('ruleset_id', section.ruleset_id)}\n"
        f"    :map-id {edn_value('map_id', section.map_id)}\n"
        f"    :max-count-per-unit {section.max_count_per_unit}\n"
        f"    :credits-per-base {section.credits_per_base}\n"
        "    :bases\n"
        + format_vector([edn_record(b) for b in section.bases], " " * VECTOR_INDENT)
        + "\n    :factions\n"
        + format_factions(section.factions)
        + ENTRY_END
    )


def render(result: ConversionResult) -> RenderedSections:
    """Render both sections of a conversion."""
    return RenderedSections(
        game_map=render_map_section(result.game_map),
        scenario=render_scenario_section(result.scenario),
    )
