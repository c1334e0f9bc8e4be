"""Map and scenario naming."""

import re

from pydantic import BaseModel, ConfigDict

SCENARIO_ID_SUFFIX = "-multiplayer"
SCENARIO_DESCRIPTION_SUFFIX = " Multiplayer"

_PLUS_AT_ENDS = re.compile(r"^\s*(?:\+\s*)+|(?:\s*\+)+\s*$")
_PLUS_INSIDE = re.compile(r"\s*(?:\+\s*)+")
_APOSTROPHES = ("'", "’")


class MapIds(BaseModel):
    """Ids and descriptions derived from a map name."""

    model_config = ConfigDict(frozen=True)

    map_id: str
    scenario_id: str
    map_description: str
    scenario_description: str


def map_description(name: str) -> str:
    """Display name: the Elite Command name without '+', case kept.

    The gap left by a '+' closes to a single space; other spacing is kept.
    """
    return _PLUS_INSIDE.sub(" ", _PLUS_AT_ENDS.sub("", name))


def id_from_name(name: str) -> str:
    """Zetawar id for a map name: lowercase, hyphenated, no '+' or apostrophes."""
    res = map_description(name).lower().replace(" ", "-")
    for apostrophe in _APOSTROPHES:
        res = res.replace(apostrophe, "")
    return res


def derive_map_ids(name: str) -> MapIds:
    """Convert an Elite Command map name to Zetawar ids and descriptions.

    >>> derive_map_ids("Sergeant's Run").scenario_id
    'sergeants-run-multiplayer'
    """
    map_id = id_from_name(name)
    descr = map_description(name)
    return MapIds(
        map_id=map_id,
        scenario_id=map_id + SCENARIO_ID_SUFFIX,
        map_description=descr,
        scenario_description=descr + SCENARIO_DESCRIPTION_SUFFIX,
    )
