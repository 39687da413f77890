"""
BracketFlow - Tournament bracket diagrams

A Python library for laying out and drawing bracket diagrams: columns of
cells joined by connector lines, as in single-elimination tournaments.

Example:
    >>> from bracketflow import BracketGenerator
    >>> generator = BracketGenerator(routing_mode="centered")
    >>> image = generator.generate(["Ajax", "Benfica", "Celtic", "Dinamo"])
    >>> image.save("bracket.png")

Headless geometry:
    >>> from bracketflow import LayoutConfig, GridLocator, position_of, route_from
    >>> config = LayoutConfig(cell_width=150, horizontal_gap=50)
    >>> position_of(2, 0, config, GridLocator()).x
    400
"""

from .generator import BracketGenerator
from .layout import GridLocator, Locator, RecursiveLocator, get_locator, position_of
from .model import BracketModel, DefaultBracketModel
from .models import (
    BracketError,
    ConnectorSegment,
    GridPosition,
    InvalidConfigurationError,
    LayoutConfig,
    OutOfRangeError,
    PixelPoint,
    RoutingMode,
)
from .png_renderer import BoxCellRenderer, PillowSurface, PNGRenderer, render_to_png
from .renderer import BracketRenderer, RecordingSurface
from .router import ConnectorRouter, DefaultConnectorRouter, get_router, route_from
from .topology import feed_graph, is_elimination, path_to_final
from .tracer import DrawCall, PipelineStage, RenderTrace

__version__ = "0.1.0"

__all__ = [
    # Main API
    "BracketGenerator",
    # Models
    "LayoutConfig",
    "RoutingMode",
    "GridPosition",
    "PixelPoint",
    "ConnectorSegment",
    "BracketError",
    "OutOfRangeError",
    "InvalidConfigurationError",
    # Layout
    "Locator",
    "GridLocator",
    "RecursiveLocator",
    "get_locator",
    "position_of",
    # Router
    "ConnectorRouter",
    "DefaultConnectorRouter",
    "get_router",
    "route_from",
    # Data
    "BracketModel",
    "DefaultBracketModel",
    "feed_graph",
    "is_elimination",
    "path_to_final",
    # Rendering
    "BracketRenderer",
    "RecordingSurface",
    "PillowSurface",
    "BoxCellRenderer",
    "PNGRenderer",
    "render_to_png",
    # Debug/Tracing
    "RenderTrace",
    "DrawCall",
    "PipelineStage",
]
