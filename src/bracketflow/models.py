"""
Data models for bracket diagram layout.

This module contains the immutable value types shared by the layout engine,
the connector router and the render pipeline, together with the error
taxonomy used throughout the package.

Classes:
    RoutingMode: How connector lines approach the next column.
    LayoutConfig: Immutable geometry configuration for one diagram.
    GridPosition: A (column, row) cell address.
    PixelPoint: Top-left pixel origin of a cell box.
    ConnectorSegment: One axis-aligned stroke of a connector line.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Union


class BracketError(Exception):
    """Base class for all bracketflow errors."""


class OutOfRangeError(BracketError, IndexError):
    """A column or row lies outside the bounds of the grid."""


class InvalidConfigurationError(BracketError, ValueError):
    """A configuration value is outside its closed set of legal values."""


class RoutingMode(Enum):
    """Connector geometry between two adjacent columns."""

    ABOVE = "above"
    CENTERED = "centered"
    BELOW = "below"

    @classmethod
    def parse(cls, value: Union["RoutingMode", str]) -> "RoutingMode":
        """
        Resolve a routing mode from a member, its name or its value.

        Raises:
            InvalidConfigurationError: If the value names no routing mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "center":
                key = "centered"
            for mode in cls:
                if key == mode.value:
                    return mode
        raise InvalidConfigurationError(f"Unknown routing mode: {value!r}")


@dataclass(frozen=True)
class LayoutConfig:
    """
    Geometry configuration for a bracket diagram.

    All dimensions are in pixels and must be non-negative integers. The
    config is hashable and can key caches.

    Attributes:
        cell_width: Width of every cell box.
        cell_height: Height of every cell box.
        line_thickness: Stroke width of connector lines.
        horizontal_gap: Space between two columns.
        vertical_gap: Space between two cells of the first column.
        origin_pad_x: Initial offset on the x-axis.
        origin_pad_y: Initial offset on the y-axis.
        routing_mode: Connector geometry between columns.
    """

    cell_width: int = 150
    cell_height: int = 75
    line_thickness: int = 1
    horizontal_gap: int = 50
    vertical_gap: int = 40
    origin_pad_x: int = 0
    origin_pad_y: int = 0
    routing_mode: RoutingMode = RoutingMode.CENTERED

    def __post_init__(self):
        for f in fields(self):
            if f.name == "routing_mode":
                continue
            value = getattr(self, f.name)
            # bool is an int subclass but never a dimension
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigurationError(
                    f"{f.name} must be an integer, got {value!r}"
                )
            if value < 0:
                raise InvalidConfigurationError(
                    f"{f.name} must be >= 0, got {value}"
                )
        if not isinstance(self.routing_mode, RoutingMode):
            raise InvalidConfigurationError(
                f"routing_mode must be a RoutingMode, got {self.routing_mode!r}"
            )

    @property
    def column_pitch(self) -> int:
        """Distance between the left edges of two adjacent columns."""
        return self.cell_width + self.horizontal_gap

    @property
    def row_pitch(self) -> int:
        """Distance between the top edges of two adjacent first-column cells."""
        return self.cell_height + self.vertical_gap

    def replace(self, **changes) -> "LayoutConfig":
        """Return a validated copy with the given fields changed."""
        if "routing_mode" in changes:
            changes["routing_mode"] = RoutingMode.parse(changes["routing_mode"])
        return replace(self, **changes)


@dataclass(frozen=True)
class GridPosition:
    """Address of a cell in the bracket grid."""

    column: int
    row: int

    def __post_init__(self):
        if self.column < 0 or self.row < 0:
            raise OutOfRangeError(
                f"Grid position ({self.column}, {self.row}) is negative"
            )

    def next_slot(self) -> "GridPosition":
        """The cell this one feeds into in the next column."""
        return GridPosition(self.column + 1, self.row // 2)


@dataclass(frozen=True)
class PixelPoint:
    """Top-left origin of a cell box; the box extends by the cell size."""

    x: int
    y: int


@dataclass(frozen=True)
class ConnectorSegment:
    """
    One straight stroke of a connector, drawn as a filled rectangle.

    Width or height may be negative when the routing arithmetic produces an
    upward stroke; surfaces draw such rectangles over the mirrored area.
    """

    x: int
    y: int
    width: int
    height: int
