"""Loading Elite Command maps."""

import logging
from pathlib import Path

from zw_converter.data.models import RawMap

logger = logging.getLogger(__name__)


def load_raw_map(path: Path | str) -> RawMap:
    """Load and validate an Elite Command map JSON file.

    Raises pydantic's `ValidationError` if the map is malformed.
    """
    path = Path(path)
    raw = RawMap.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        f"Loaded {raw.name!r} from {path!s}: "
        f"{sum(len(row) for row in raw.tiles)} cells, "
        f"{len(raw.bases)} bases, {len(raw.units)} units"
    )
    return raw
