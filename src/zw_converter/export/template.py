"""Inserting rendered entries into a Zetawar data file."""

import logging
from pathlib import Path

from zw_converter.data import default_settings
from zw_converter.data.models import ConverterSettings
from zw_converter.errors import TemplateError
from .render import RenderedSections

logger = logging.getLogger(__name__)


def splice_sections(
    document: str,
    rendered: RenderedSections,
    settings: ConverterSettings = default_settings,
) -> str:
    """Insert the new map and scenario entries after their anchors.

    Only the first occurrence of each anchor is used.
    """
    anchors = [
        (settings.map_anchor, rendered.game_map),
        (settings.scenario_anchor, rendered.scenario),
    ]
    missing = [a for a, _ in anchors if a not in document]
    if missing:
        raise TemplateError(f"Anchors not found in data file: {missing!r}")
    for anchor, text in anchors:
        document = document.replace(anchor, anchor + text, 1)
    return document


def write_data_file(
    path: Path | str,
    rendered: RenderedSections,
    settings: ConverterSettings = default_settings,
) -> str:
    """Insert the rendered entries into a data file in place; returns the new text."""
    path = Path(path)
    updated = splice_sections(path.read_text(encoding="utf-8"), rendered, settings)
    path.write_text(updated, encoding="utf-8")
    logger.info(f"Wrote {path!s}")
    return updated
