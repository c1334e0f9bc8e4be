"""Faction assembly.

Elite Command tags bases and units with a player slot; Zetawar groups them
under factions identified by color.
"""

import logging
from collections import defaultdict

from pydantic import BaseModel

from zw_converter.data.models import (
    COLOR_SLOTS,
    FACTION_COLORS,
    ColorKind,
    FactionBase,
    FactionRecord,
    FactionUnit,
    RawBase,
    RawUnit,
)
from zw_converter.errors import PartitionError

logger = logging.getLogger(__name__)


class FactionHoldings(BaseModel):
    """Bases and units owned by one faction."""

    bases: list[FactionBase] = []
    units: list[FactionUnit] = []


def slot_color(player: int) -> ColorKind:
    """Faction color of a player slot."""
    try:
        return FACTION_COLORS[player]
    except KeyError as ke:
        raise PartitionError(player) from ke


def faction_bases(raw_bases: list[RawBase]) -> dict[ColorKind, list[FactionBase]]:
    """Owned base locations per faction, each sorted by (q, r)."""
    grouped: dict[ColorKind, list[FactionBase]] = defaultdict(list)
    for b in raw_bases:
        if b.player > 0:
            grouped[slot_color(b.player)].append(FactionBase(q=b.x, r=b.y))
    return {c: sorted(v, key=lambda x: (x.q, x.r)) for c, v in grouped.items()}


def faction_units(raw_units: list[RawUnit]) -> dict[ColorKind, list[FactionUnit]]:
    """Owned units per faction, each sorted by (q, r)."""
    grouped: dict[ColorKind, list[FactionUnit]] = defaultdict(list)
    for u in raw_units:
        if u.player > 0:
            grouped[slot_color(u.player)].append(
                FactionUnit(q=u.x, r=u.y, unit_type=u.unit_type.lower())
            )
    return {c: sorted(v, key=lambda x: (x.q, x.r)) for c, v in grouped.items()}


def partition_factions(
    raw_bases: list[RawBase], raw_units: list[RawUnit]
) -> dict[ColorKind, FactionHoldings]:
    """Merge owned bases and units by faction color.

    A faction may own only bases, only units, or both.
    """
    bases = faction_bases(raw_bases)
    units = faction_units(raw_units)
    res: dict[ColorKind, FactionHoldings] = {}
    for color in set(bases) | set(units):
        res[color] = FactionHoldings(
            bases=bases.get(color, []), units=units.get(color, [])
        )
    return res


def assemble_factions(
    holdings: dict[ColorKind, FactionHoldings], credits: int
) -> list[FactionRecord]:
    """Create the final faction list, ordered by player slot.

    Everyone starts with the same credits. The lowest slot is the human player;
    all other factions are AI.
    """
    res: list[FactionRecord] = []
    for i, color in enumerate(sorted(holdings, key=lambda c: COLOR_SLOTS[c])):
        held = holdings[color]
        res.append(
            FactionRecord(
                color=color,
                credits=credits,
                ai=i > 0,
                bases=held.bases,
                units=held.units if len(held.units) > 0 else None,
            )
        )
    logger.info(f"Assembled factions: {', '.join(f.color.value for f in res)}")
    return res
