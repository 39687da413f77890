"""Unit tests for the models module."""

import dataclasses

import pytest

from bracketflow.models import (
    BracketError,
    ConnectorSegment,
    GridPosition,
    InvalidConfigurationError,
    LayoutConfig,
    OutOfRangeError,
    PixelPoint,
    RoutingMode,
)


class TestRoutingMode:
    """Tests for RoutingMode enum."""

    def test_routing_mode_values(self):
        assert RoutingMode.ABOVE.value == "above"
        assert RoutingMode.CENTERED.value == "centered"
        assert RoutingMode.BELOW.value == "below"

    def test_routing_mode_count(self):
        assert len(RoutingMode) == 3

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("above", RoutingMode.ABOVE),
            ("ABOVE", RoutingMode.ABOVE),
            ("centered", RoutingMode.CENTERED),
            ("center", RoutingMode.CENTERED),
            (" Below ", RoutingMode.BELOW),
        ],
    )
    def test_parse_strings(self, text, expected):
        assert RoutingMode.parse(text) is expected

    def test_parse_member(self):
        assert RoutingMode.parse(RoutingMode.BELOW) is RoutingMode.BELOW

    @pytest.mark.parametrize("value", ["diagonal", "", 0, None])
    def test_parse_unknown(self, value):
        with pytest.raises(InvalidConfigurationError):
            RoutingMode.parse(value)


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_defaults(self):
        config = LayoutConfig()
        assert config.cell_width == 150
        assert config.cell_height == 75
        assert config.line_thickness == 1
        assert config.horizontal_gap == 50
        assert config.vertical_gap == 40
        assert config.origin_pad_x == 0
        assert config.origin_pad_y == 0
        assert config.routing_mode is RoutingMode.CENTERED

    def test_pitches(self, config):
        assert config.column_pitch == 200
        assert config.row_pitch == 115

    def test_is_immutable(self, config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.cell_width = 10

    def test_is_hashable(self, config):
        assert hash(config) == hash(config.replace())
        assert {config: 1}[LayoutConfig(**dataclasses.asdict(config))] == 1

    @pytest.mark.parametrize(
        "field",
        [
            "cell_width",
            "cell_height",
            "line_thickness",
            "horizontal_gap",
            "vertical_gap",
            "origin_pad_x",
            "origin_pad_y",
        ],
    )
    def test_negative_dimension_rejected(self, field):
        with pytest.raises(InvalidConfigurationError):
            LayoutConfig(**{field: -1})

    def test_zero_dimensions_allowed(self):
        config = LayoutConfig(cell_width=0, cell_height=0, line_thickness=0)
        assert config.cell_width == 0

    def test_non_integer_dimension_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            LayoutConfig(cell_width=10.5)
        with pytest.raises(InvalidConfigurationError):
            LayoutConfig(cell_height=True)

    def test_string_routing_mode_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            LayoutConfig(routing_mode="above")

    def test_replace_parses_routing_mode(self, config):
        below = config.replace(routing_mode="below")
        assert below.routing_mode is RoutingMode.BELOW
        assert below.cell_width == config.cell_width
        assert config.routing_mode is RoutingMode.CENTERED

    def test_replace_validates(self, config):
        with pytest.raises(InvalidConfigurationError):
            config.replace(vertical_gap=-5)
        with pytest.raises(InvalidConfigurationError):
            config.replace(routing_mode="sideways")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            LayoutConfig(cell_width=-1)


class TestGridPosition:
    """Tests for GridPosition dataclass."""

    def test_creation(self):
        position = GridPosition(2, 3)
        assert position.column == 2
        assert position.row == 3

    def test_negative_rejected(self):
        with pytest.raises(OutOfRangeError):
            GridPosition(-1, 0)
        with pytest.raises(OutOfRangeError):
            GridPosition(0, -1)

    def test_next_slot(self):
        assert GridPosition(0, 0).next_slot() == GridPosition(1, 0)
        assert GridPosition(0, 1).next_slot() == GridPosition(1, 0)
        assert GridPosition(1, 5).next_slot() == GridPosition(2, 2)

    def test_hashable(self):
        assert len({GridPosition(0, 1), GridPosition(0, 1)}) == 1


class TestValueTypes:
    """Tests for PixelPoint and ConnectorSegment."""

    def test_pixel_point(self):
        point = PixelPoint(10, 20)
        assert (point.x, point.y) == (10, 20)

    def test_segment_equality(self):
        assert ConnectorSegment(1, 2, 3, 4) == ConnectorSegment(1, 2, 3, 4)

    def test_segment_allows_negative_extent(self):
        segment = ConnectorSegment(0, 10, 1, -5)
        assert segment.height == -5


class TestErrors:
    """Tests for the error hierarchy."""

    def test_out_of_range_is_index_error(self):
        assert issubclass(OutOfRangeError, IndexError)
        assert issubclass(OutOfRangeError, BracketError)

    def test_invalid_configuration_is_value_error(self):
        assert issubclass(InvalidConfigurationError, ValueError)
        assert issubclass(InvalidConfigurationError, BracketError)
