"""Shared fixtures."""

import json

import pytest

from zw_converter.data import data_path
from zw_converter.data.models import RawMap


DATA_FILE_TEXT = """(ns zetawar.data)

(def maps
  {:sterlings-aruba
   {:id :sterlings-aruba
    :description "Sterling's Aruba"}})

(def scenarios
  {:sterlings-aruba-multiplayer
   {:id :sterlings-aruba-multiplayer
    :map-id :sterlings-aruba}})
"""


@pytest.fixture
def sample_map_data() -> dict:
    """A small Elite Command map, as parsed from JSON.

    Grid (row r, column q), 10/11 are bases and -1 is 'no tile':

        r=0:   0   0   3  -1
        r=1:   0  10   0   4
        r=2:   1   0   0  11
    """
    return {
        "id": 42,
        "name": "Fire + Ice",
        "description": "Two rivers, one ford.",
        "starting_credits": 300,
        "official": True,
        "tiles": [
            [0, 0, 3, -1],
            [0, 10, 0, 4],
            [1, 0, 0, 11],
        ],
        "bases": [
            {"player": 2, "x": 3, "y": 2, "base_type": "Airfield"},
            {"player": 1, "x": 1, "y": 1, "base_type": "Base"},
            {"player": 0, "x": 2, "y": 0, "base_type": "Seaport"},
        ],
        "units": [
            {"player": 1, "x": 0, "y": 1, "unit_type": "Infantry"},
            {"player": 3, "x": 2, "y": 2, "unit_type": "Tank"},
            {"player": 1, "x": 0, "y": 0, "unit_type": "Artillery"},
            {"player": 0, "x": 2, "y": 1, "unit_type": "Infantry"},
        ],
    }


@pytest.fixture
def sample_raw_map(sample_map_data: dict) -> RawMap:
    """Validated sample map."""
    return RawMap.model_validate(sample_map_data)


@pytest.fixture
def map_json_path(tmp_path, sample_map_data):
    """Sample map written to a JSON file."""
    path = tmp_path / "fire-ice.json"
    path.write_text(json.dumps(sample_map_data), encoding="utf-8")
    return path


@pytest.fixture
def data_file_path(tmp_path):
    """A minimal Zetawar data file."""
    path = tmp_path / "data.cljs"
    path.write_text(DATA_FILE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def write_settings(tmp_path):
    """Write a settings file: the packaged defaults with some lines replaced."""
    defaults = (data_path / "defaults.yaml").read_text(encoding="utf-8")

    def _write(**replacements: str):
        text = defaults
        for key, value in replacements.items():
            old = next(ln for ln in text.splitlines() if ln.startswith(f"{key}:"))
            text = text.replace(old, f"{key}: {value}")
        path = tmp_path / "settings.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
