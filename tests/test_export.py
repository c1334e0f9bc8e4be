"""Tests for rendering and data file updates."""

import pytest

from zw_converter.converter import MapConverter
from zw_converter.data import default_settings
from zw_converter.data.models import (
    BaseRecord,
    ColorKind,
    FactionBase,
    FactionRecord,
    FactionUnit,
    MapSection,
    TerrainKind,
    Tile,
)
from zw_converter.errors import TemplateError
from zw_converter.export.render import (
    RenderedSections,
    edn_record,
    format_factions,
    format_vector,
    render,
    render_map_section,
)
from zw_converter.export.template import splice_sections, write_data_file


class TestRecords:
    def test_tile(self):
        tile = Tile(q=3, r=4, terrain=TerrainKind.SHALLOW_WATER)
        assert edn_record(tile) == "{:q 3, :r 4, :terrain-type :shallow-water}"

    def test_base(self):
        base = BaseRecord(q=0, r=1, base_type="airfield")
        assert edn_record(base) == "{:q 0, :r 1, :base-type :airfield}"

    def test_unit(self):
        unit = FactionUnit(q=2, r=2, unit_type="infantry")
        assert edn_record(unit) == "{:q 2, :r 2, :unit-type :infantry}"


class TestVectors:
    def test_many(self):
        assert format_vector(["a", "b", "c"], "    ") == "    [a\n     b\n     c]"

    def test_single(self):
        assert format_vector(["a"], "    ") == "    [a]"

    def test_empty(self):
        assert format_vector([], "      :bases ") == "      :bases []"

    def test_factions(self):
        factions = [
            FactionRecord(
                color=ColorKind.RED,
                credits=300,
                ai=False,
                bases=[FactionBase(q=1, r=1), FactionBase(q=2, r=3)],
                units=[FactionUnit(q=0, r=0, unit_type="infantry")],
            ),
            FactionRecord(
                color=ColorKind.BLUE,
                credits=300,
                ai=True,
                bases=[FactionBase(q=3, r=2)],
            ),
        ]
        assert format_factions(factions) == (
            "    [{:color :red\n"
            "      :credits 300\n"
            "      :ai false\n"
            "      :bases [{:q 1, :r 1}\n"
            "              {:q 2, :r 3}]\n"
            "      :units [{:q 0, :r 0, :unit-type :infantry}]}\n"
            "     {:color :blue\n"
            "      :credits 300\n"
            "      :ai true\n"
            "      :bases [{:q 3, :r 2}]}]"
        )


class TestSections:
    def test_map_section(self):
        section = MapSection(
            id="fire-ice",
            description="Fire Ice",
            created_by="Chris Vincent",
            notes='A "hot" map',
            terrains=[
                Tile(q=0, r=0, terrain=TerrainKind.PLAINS),
                Tile(q=1, r=0, terrain=TerrainKind.WOODS),
            ],
        )
        assert render_map_section(section) == (
            ":fire-ice\n"
            "   {:id :fire-ice\n"
            '    :description "Fire Ice"\n'
            '    :created-by "Chris Vincent"\n'
            '    :notes "A \\"hot\\" map"\n'
            "    :terrains\n"
            "    [{:q 0, :r 0, :terrain-type :plains}\n"
            "     {:q 1, :r 0, :terrain-type :woods}]}\n\n   "
        )

    def test_scenario_section(self, sample_raw_map):
        text = render(MapConverter().convert(sample_raw_map)).scenario
        assert text.startswith(":fire-ice-multiplayer\n   {:id :fire-ice-multiplayer\n")
        assert "    :ruleset-id :zetawar\n" in text
        assert "    :map-id :fire-ice\n" in text
        assert "    :max-count-per-unit 10\n    :credits-per-base 100\n" in text
        assert "    :bases\n    [{:q 1, :r 1, :base-type :base}\n" in text
        assert "    :factions\n    [{:color :red\n" in text
        assert "     {:color :yellow\n      :credits 300\n      :ai true\n" in text
        assert "      :bases []\n      :units [{:q 2, :r 2, :unit-type :tank}]}]" in text
        assert text.endswith("}\n\n   ")


class TestTemplate:
    def test_splice(self, data_file_path):
        rendered = RenderedSections(
            game_map=":new-map\n   {:id :new-map}\n\n   ",
            scenario=":new-map-multiplayer\n   {:id :new-map-multiplayer}\n\n   ",
        )
        res = splice_sections(data_file_path.read_text(), rendered)

        assert (
            "(def maps\n  {:new-map\n   {:id :new-map}\n\n   :sterlings-aruba\n" in res
        )
        assert (
            "(def scenarios\n  {:new-map-multiplayer\n"
            "   {:id :new-map-multiplayer}\n\n   :sterlings-aruba-multiplayer\n"
        ) in res
        assert res.startswith("(ns zetawar.data)\n")

    def test_missing_anchor(self):
        rendered = RenderedSections(game_map="x", scenario="y")
        with pytest.raises(TemplateError):
            splice_sections("(def maps\n  {:a {}})\n", rendered)

    def test_custom_anchor(self):
        settings = default_settings.model_copy(
            update={"map_anchor": "MAPS:", "scenario_anchor": "SCENARIOS:"}
        )
        rendered = RenderedSections(game_map="m", scenario="s")
        res = splice_sections("MAPS: SCENARIOS:", rendered, settings)
        assert res == "MAPS:m SCENARIOS:s"

    def test_write_data_file(self, data_file_path, sample_raw_map):
        rendered = render(MapConverter().convert(sample_raw_map))
        updated = write_data_file(data_file_path, rendered)

        assert data_file_path.read_text() == updated
        assert "(def maps\n  {:fire-ice\n   {:id :fire-ice\n" in updated
        assert "(def scenarios\n  {:fire-ice-multiplayer\n" in updated
        assert "   {:id :sterlings-aruba\n" in updated
        assert "    :map-id :sterlings-aruba}})\n" in updated
