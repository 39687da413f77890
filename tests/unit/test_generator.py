"""Unit tests for the generator module."""

import pytest
from PIL import Image

from bracketflow import BracketGenerator
from bracketflow.layout import GridLocator, RecursiveLocator
from bracketflow.models import InvalidConfigurationError, RoutingMode


class TestBracketGeneratorInit:
    """Tests for BracketGenerator initialization."""

    def test_defaults(self):
        generator = BracketGenerator()
        assert generator.config.cell_width == 150
        assert generator.config.routing_mode is RoutingMode.CENTERED
        assert generator.layout == "elimination"
        assert isinstance(generator.locator, RecursiveLocator)

    def test_routing_mode_string(self):
        generator = BracketGenerator(routing_mode="Below")
        assert generator.config.routing_mode is RoutingMode.BELOW

    def test_grid_layout(self):
        assert isinstance(BracketGenerator(layout="GRID").locator, GridLocator)

    def test_invalid_routing_mode(self):
        with pytest.raises(InvalidConfigurationError):
            BracketGenerator(routing_mode="diagonal")

    def test_invalid_layout(self):
        with pytest.raises(InvalidConfigurationError):
            BracketGenerator(layout="spiral")

    def test_negative_dimension(self):
        with pytest.raises(InvalidConfigurationError):
            BracketGenerator(cell_height=-10)


class TestBuildModel:
    """Tests for build_model."""

    def test_elimination(self, teams):
        model = BracketGenerator().build_model(teams)
        assert [model.row_count(c) for c in range(model.column_count())] == [4, 2, 1]

    def test_elimination_uneven_count(self):
        model = BracketGenerator().build_model(["A", "B", "C", "D", "E", "F"])
        assert [model.row_count(c) for c in range(model.column_count())] == [
            6,
            3,
            2,
            1,
        ]

    def test_elimination_rejects_empty(self):
        with pytest.raises(ValueError):
            BracketGenerator().build_model([])

    def test_grid_default_single_column(self):
        model = BracketGenerator(layout="grid").build_model(list("abc"))
        assert model.column_count() == 1
        assert model.row_count(0) == 3

    def test_grid_rows_only(self):
        model = BracketGenerator(layout="grid", rows=2).build_model(list("abcde"))
        assert model.column_count() == 3
        assert model.value_at(2, 0) == "e"

    def test_grid_explicit_shape(self):
        model = BracketGenerator(layout="grid", columns=4, rows=2).build_model([])
        assert model.column_count() == 4
        assert model.cell_count() == 8


class TestGenerate:
    """Tests for generate and save_png."""

    def test_returns_image(self, teams):
        img = BracketGenerator().generate(teams)
        assert isinstance(img, Image.Image)
        # 20px padding on each side around the 550x420 bracket
        assert img.size == (590, 460)

    def test_no_trace_by_default(self, teams):
        generator = BracketGenerator()
        generator.generate(teams)
        assert generator.get_trace() is None

    def test_debug_trace(self, teams):
        generator = BracketGenerator(routing_mode="above")
        generator.generate(teams, debug=True)

        trace = generator.get_trace()
        assert trace.routing_mode == "above"
        assert trace.get_stage("rendered").data["segments"] == 12
        assert len(trace.get_calls_for(0, 1)) == 3

    def test_save_png(self, teams, tmp_path):
        path = tmp_path / "bracket.png"
        BracketGenerator().save_png(teams, str(path))
        with Image.open(path) as img:
            assert img.format == "PNG"
