"""
Render pipeline for bracket diagrams.

The pipeline walks every cell of a model, asks the locator where the cell
goes, lets a cell renderer paint its content and asks the connector router
which strokes leave it. All connector output reduces to ``fill_rect`` calls
on a draw surface, so any backend offering that primitive can be targeted.
"""

import logging
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple

from .layout import Locator, RecursiveLocator, default_locator
from .model import BracketModel
from .models import LayoutConfig, OutOfRangeError, PixelPoint
from .router import ConnectorRouter, DefaultConnectorRouter, get_router
from .topology import is_elimination
from .tracer import RenderTrace

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
Box = Tuple[int, int, int, int]  # x, y, width, height


class DrawSurface(Protocol):
    """Drawing backend used by the pipeline."""

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Fill a rectangle; negative extents cover the mirrored area."""
        ...

    def draw_text(self, box: Box, text: str, color: Color) -> None:
        """Draw text centred inside a box."""
        ...


class CellRenderer(Protocol):
    """Paints the content of one cell."""

    def __call__(
        self, surface: DrawSurface, value: Any, column: int, row: int, box: Box
    ) -> None:
        ...


def normalize_rect(x: int, y: int, width: int, height: int) -> Box:
    """Flip negative extents so the rectangle covers the same pixels."""
    if width < 0:
        x, width = x + width, -width
    if height < 0:
        y, height = y + height, -height
    return x, y, width, height


@dataclass
class RectCall:
    """A recorded ``fill_rect`` call."""

    x: int
    y: int
    width: int
    height: int
    color: Color


@dataclass
class TextCall:
    """A recorded ``draw_text`` call."""

    box: Box
    text: str
    color: Color


class RecordingSurface:
    """
    In-memory surface that records every call.

    Useful for headless geometry checks: render into it and inspect
    ``rects`` and ``texts``.
    """

    def __init__(self):
        self.rects: List[RectCall] = []
        self.texts: List[TextCall] = []

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        self.rects.append(RectCall(x, y, width, height, color))

    def draw_text(self, box: Box, text: str, color: Color) -> None:
        self.texts.append(TextCall(box, text, color))

    def clear(self) -> None:
        self.rects.clear()
        self.texts.clear()


class BracketRenderer:
    """
    Draws a bracket model onto a surface.

    Attributes:
        config: Immutable layout configuration.
        locator: Cell placement strategy.
        router: Connector routing strategy.
        cell_renderer: Optional callback painting cell content.
        line_color: Color of connector strokes.
        trace: Optional RenderTrace receiving stages and draw calls.
    """

    def __init__(
        self,
        config: LayoutConfig,
        locator: Optional[Locator] = None,
        router: Optional[ConnectorRouter] = None,
        cell_renderer: Optional[CellRenderer] = None,
        line_color: Color = (0, 0, 0),
        trace: Optional[RenderTrace] = None,
    ):
        self.config = config
        self.locator = locator if locator is not None else default_locator()
        self.router = router if router is not None else DefaultConnectorRouter()
        self.cell_renderer = cell_renderer
        self.line_color = line_color
        self.trace = trace

    def position_of(self, model: BracketModel, column: int, row: int) -> PixelPoint:
        """
        Bounds-checked pixel origin of a model cell.

        Raises:
            OutOfRangeError: If the cell does not exist in the model.
        """
        if not 0 <= column < model.column_count():
            raise OutOfRangeError(f"Column {column} is out of range")
        if not 0 <= row < model.row_count(column):
            raise OutOfRangeError(f"Row {row} is out of range for column {column}")
        return self.locator.locate(column, row, self.config)

    def canvas_size(self, model: BracketModel) -> Tuple[int, int]:
        """
        Preferred canvas size: the furthest cell extent plus the origin
        padding repeated on the far side.
        """
        config = self.config
        width = height = 0
        with _locked(model):
            for column in range(model.column_count()):
                for row in range(model.row_count(column)):
                    origin = self.locator.locate(column, row, config)
                    width = max(width, origin.x + config.cell_width)
                    height = max(height, origin.y + config.cell_height)
        if width == 0 and height == 0:
            return 2 * config.origin_pad_x, 2 * config.origin_pad_y
        return width + config.origin_pad_x, height + config.origin_pad_y

    def render(self, model: BracketModel, surface: DrawSurface) -> int:
        """
        Draw every cell and connector of a model.

        The model's lock, if any, is held for the whole pass. The first
        configuration error aborts the pass.

        Returns:
            Number of connector segments drawn.
        """
        config = self.config
        trace = self.trace

        with _locked(model):
            columns = model.column_count()
            if columns == 0:
                return 0
            last_column = columns - 1
            row_counts = [model.row_count(c) for c in range(columns)]

            if isinstance(self.locator, RecursiveLocator) and not is_elimination(model):
                logger.warning(
                    "Row counts %s do not halve per column; "
                    "recursive layout positions will not line up",
                    row_counts,
                )

            # unknown modes fail before anything is drawn or traced
            get_router(config.routing_mode)

            if trace is not None:
                trace.routing_mode = config.routing_mode.value
                trace.add_stage(
                    "layout",
                    {
                        "columns": columns,
                        "row_counts": row_counts,
                        "locator": repr(self.locator),
                        "router": repr(self.router),
                    },
                )

            segments_drawn = 0
            for column in range(columns):
                for row in range(row_counts[column]):
                    origin = self.locator.locate(column, row, config)

                    if self.cell_renderer is not None:
                        box = (origin.x, origin.y, config.cell_width, config.cell_height)
                        value = model.value_at(column, row)
                        self.cell_renderer(surface, value, column, row, box)
                        if trace is not None:
                            trace.add_call("cell", column, row, *box)

                    segments = self.router.route(
                        column, row, config, self.locator, last_column
                    )
                    for segment in segments:
                        surface.fill_rect(
                            segment.x,
                            segment.y,
                            segment.width,
                            segment.height,
                            self.line_color,
                        )
                        if trace is not None:
                            trace.add_call(
                                "connector",
                                column,
                                row,
                                segment.x,
                                segment.y,
                                segment.width,
                                segment.height,
                            )
                    segments_drawn += len(segments)

            if trace is not None:
                trace.add_stage(
                    "rendered",
                    {"cells": sum(row_counts), "segments": segments_drawn},
                )

        logger.debug(
            "Rendered %d cells with %d connector segments",
            sum(row_counts),
            segments_drawn,
        )
        return segments_drawn


def _locked(model: BracketModel):
    lock = getattr(model, "lock", None)
    return lock if lock is not None else nullcontext()
