"""Pytest configuration and shared fixtures for BracketFlow tests."""

import pytest

from bracketflow import DefaultBracketModel, LayoutConfig, RoutingMode


def _naive_y(column, row, config):
    if column == 0:
        return config.origin_pad_y + row * (config.cell_height + config.vertical_gap)
    upper = _naive_y(column - 1, 2 * row, config)
    lower = _naive_y(column - 1, 2 * row + 1, config)
    return (upper + lower) // 2


@pytest.fixture
def naive_y():
    """Direct recursive definition of the elimination y coordinate."""
    return _naive_y


@pytest.fixture
def config():
    """150x75 cells, 50px column gap, 40px row gap, no padding."""
    return LayoutConfig(
        cell_width=150,
        cell_height=75,
        line_thickness=1,
        horizontal_gap=50,
        vertical_gap=40,
        origin_pad_x=0,
        origin_pad_y=0,
        routing_mode=RoutingMode.CENTERED,
    )


@pytest.fixture
def above_config(config):
    return config.replace(routing_mode=RoutingMode.ABOVE)


@pytest.fixture
def below_config(config):
    return config.replace(routing_mode=RoutingMode.BELOW)


@pytest.fixture
def odd_config():
    """Odd sizes and padding so every floor division matters."""
    return LayoutConfig(
        cell_width=41,
        cell_height=33,
        line_thickness=3,
        horizontal_gap=17,
        vertical_gap=8,
        origin_pad_x=5,
        origin_pad_y=7,
    )


@pytest.fixture
def teams():
    return ["Ajax", "Benfica", "Celtic", "Dinamo"]


@pytest.fixture
def elimination_model(teams):
    """Four-team bracket: 4, 2 and 1 rows."""
    return DefaultBracketModel.elimination(teams)


@pytest.fixture
def grid_model():
    """Three columns of four rows each."""
    return DefaultBracketModel.grid(list("ABCDEFGHIJKL"), columns=3, rows=4)
