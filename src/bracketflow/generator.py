"""
Main bracket generator module.

Combines the data model, layout, routing and PNG rendering to produce
bracket diagrams from a plain list of entries.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from PIL import Image

from .layout import get_locator
from .model import DefaultBracketModel
from .models import LayoutConfig, RoutingMode
from .png_renderer import BoxCellRenderer, PNGRenderer
from .renderer import Color
from .tracer import RenderTrace

logger = logging.getLogger(__name__)


class BracketGenerator:
    """
    Generate bracket diagrams from a list of entries.

    Example:
        >>> generator = BracketGenerator(routing_mode="above")
        >>> image = generator.generate(["Ajax", "Benfica", "Celtic", "Dinamo"])
        >>> generator.save_png(["Ajax", "Benfica"], "final.png")
    """

    def __init__(
        self,
        cell_width: int = 150,
        cell_height: int = 75,
        line_thickness: int = 1,
        horizontal_gap: int = 50,
        vertical_gap: int = 40,
        origin_pad_x: int = 20,
        origin_pad_y: int = 20,
        routing_mode: Union[RoutingMode, str] = RoutingMode.CENTERED,
        layout: str = "elimination",
        columns: Optional[int] = None,
        rows: Optional[int] = None,
        line_color: Color = (0, 0, 0),
        bg_color: Color = (255, 255, 255),
        font_size: int = 12,
        font_path: Optional[str] = None,
        empty_text: str = "TBA",
    ):
        """
        Initialize the bracket generator.

        Args:
            cell_width: Width of every cell box
            cell_height: Height of every cell box
            line_thickness: Stroke width of connector lines
            horizontal_gap: Space between columns
            vertical_gap: Space between first-column cells
            origin_pad_x: Margin left of the first column
            origin_pad_y: Margin above the first row
            routing_mode: "above", "centered" or "below"
            layout: "elimination" (recursive centring) or "grid"
            columns: Column count for the grid layout
            rows: Row count for the grid layout
            line_color: Color of connector lines
            bg_color: Image background color
            font_size: Font size for cell labels
            font_path: Optional path to a TrueType font
            empty_text: Label for cells without a value

        Raises:
            InvalidConfigurationError: If a dimension, the routing mode or
                the layout name is invalid.
        """
        self.config = LayoutConfig(
            cell_width=cell_width,
            cell_height=cell_height,
            line_thickness=line_thickness,
            horizontal_gap=horizontal_gap,
            vertical_gap=vertical_gap,
            origin_pad_x=origin_pad_x,
            origin_pad_y=origin_pad_y,
            routing_mode=RoutingMode.parse(routing_mode),
        )
        self.layout = layout.lower()
        self.locator = get_locator(self.layout)
        self.columns = columns
        self.rows = rows
        self.line_color = line_color
        self.bg_color = bg_color
        self.font_size = font_size
        self.font_path = font_path
        self.cell_renderer = BoxCellRenderer(empty_text=empty_text)
        self._trace: Optional[RenderTrace] = None

    def build_model(self, entries: Sequence[Any]) -> DefaultBracketModel:
        """
        Build the data model for a list of entries.

        For the elimination layout the entries form the first round. For the
        grid layout they fill ``columns`` x ``rows`` cells column by column;
        without an explicit shape every entry gets its own row in a single
        column.

        Raises:
            ValueError: If the entries do not fit the chosen layout.
        """
        if self.layout == "grid":
            rows = self.rows or max(len(entries), 1)
            columns = self.columns or max(-(-len(entries) // rows), 1)
            return DefaultBracketModel.grid(entries, columns, rows)
        return DefaultBracketModel.elimination(entries)

    def generate(self, entries: Sequence[Any], debug: bool = False) -> Image.Image:
        """
        Render a bracket image.

        Args:
            entries: First-round entries (or grid values)
            debug: Capture a RenderTrace, available through get_trace()

        Returns:
            The rendered Pillow image
        """
        model = self.build_model(entries)
        self._trace = RenderTrace() if debug else None

        renderer = PNGRenderer(
            self.config,
            locator=self.locator,
            cell_renderer=self.cell_renderer,
            bg_color=self.bg_color,
            line_color=self.line_color,
            font_size=self.font_size,
            font_path=self.font_path,
            trace=self._trace,
        )
        logger.debug("Generating %s bracket for %d entries", self.layout, len(entries))
        return renderer.render_image(model)

    def get_trace(self) -> Optional[RenderTrace]:
        """Trace of the last ``generate(..., debug=True)`` call, if any."""
        return self._trace

    def save_png(self, entries: Sequence[Any], filename: str) -> None:
        """
        Render a bracket and save it as PNG.

        Args:
            entries: First-round entries (or grid values)
            filename: Output filename (should end in .png)
        """
        img = self.generate(entries)
        img.save(Path(filename), "PNG")
