"""
PNG Renderer module for bracket diagrams.

Renders bracket models as PNG images using Pillow. PillowSurface adapts an
``ImageDraw`` context to the pipeline's draw surface, and BoxCellRenderer is
the default cell painter (bordered box with centred text).
"""

import logging
import os
from typing import Any, Callable, Optional

from PIL import Image, ImageDraw, ImageFont

from .layout import Locator
from .model import BracketModel
from .models import LayoutConfig
from .renderer import Box, BracketRenderer, CellRenderer, Color, normalize_rect
from .router import ConnectorRouter
from .tracer import RenderTrace

logger = logging.getLogger(__name__)

FONT_OPTIONS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeMono.ttf",
    "/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
    # macOS
    "/System/Library/Fonts/Menlo.ttc",
    # Windows
    "C:/Windows/Fonts/consola.ttf",
]


def load_font(font_size: int, font_path: Optional[str] = None) -> ImageFont.ImageFont:
    """
    Load a monospace font.

    Tries the following in order:
    1. The given font path, if it exists
    2. Common system monospace fonts
    3. Pillow's default font
    """
    candidates = []
    if font_path and os.path.exists(font_path):
        candidates.append(font_path)
    candidates.extend(path for path in FONT_OPTIONS if os.path.exists(path))

    for path in candidates:
        try:
            return ImageFont.truetype(path, font_size)
        except OSError:
            logger.debug("Could not load font %s", path)
            continue

    try:
        return ImageFont.load_default(size=font_size)
    except TypeError:
        # Older Pillow versions don't support size parameter
        return ImageFont.load_default()


class PillowSurface:
    """Draw surface backed by a Pillow image."""

    def __init__(self, image: Image.Image, font: Optional[ImageFont.ImageFont] = None):
        self.image = image
        self.draw = ImageDraw.Draw(image)
        self.font = font if font is not None else load_font(12)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        x, y, width, height = normalize_rect(x, y, width, height)
        if width == 0 or height == 0:
            return
        # Pillow boxes include their end coordinates
        self.draw.rectangle([x, y, x + width - 1, y + height - 1], fill=color)

    def draw_text(self, box: Box, text: str, color: Color) -> None:
        x, y, w, h = box
        lines = text.split("\n")
        line_spacing = 4

        # Calculate total text height
        total_height = 0
        line_dims = []
        for i, line in enumerate(lines):
            bbox = self.draw.textbbox((0, 0), line, font=self.font)
            line_w = bbox[2] - bbox[0]
            line_h = bbox[3] - bbox[1]
            line_dims.append((line_w, line_h))
            total_height += line_h
            if i > 0:
                total_height += line_spacing

        # Draw each line centered
        current_y = y + (h - total_height) // 2
        for line, (line_w, line_h) in zip(lines, line_dims):
            text_x = x + (w - line_w) // 2
            self.draw.text((text_x, current_y), line, fill=color, font=self.font)
            current_y += line_h + line_spacing


class BoxCellRenderer:
    """
    Paints a cell as a filled, bordered box with its value centred.

    Attributes:
        fill: Background color of the box.
        outline: Border color.
        text_color: Color of the label.
        border_width: Border thickness in pixels.
        empty_text: Label used for cells without a value.
        formatter: Turns a cell value into its label.
    """

    def __init__(
        self,
        fill: Color = (255, 255, 255),
        outline: Color = (0, 0, 0),
        text_color: Color = (0, 0, 0),
        border_width: int = 1,
        empty_text: str = "TBA",
        formatter: Callable[[Any], str] = str,
    ):
        self.fill = fill
        self.outline = outline
        self.text_color = text_color
        self.border_width = border_width
        self.empty_text = empty_text
        self.formatter = formatter

    def __call__(self, surface, value: Any, column: int, row: int, box: Box) -> None:
        x, y, w, h = box
        b = min(self.border_width, w // 2, h // 2)

        surface.fill_rect(x, y, w, h, self.outline)
        surface.fill_rect(x + b, y + b, w - 2 * b, h - 2 * b, self.fill)

        label = self.empty_text if value is None else self.formatter(value)
        surface.draw_text(box, label, self.text_color)


class PNGRenderer:
    """Renders bracket models as PNG images."""

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        locator: Optional[Locator] = None,
        router: Optional[ConnectorRouter] = None,
        cell_renderer: Optional[CellRenderer] = None,
        bg_color: Color = (255, 255, 255),
        line_color: Color = (0, 0, 0),
        font_size: int = 12,
        font_path: Optional[str] = None,
        trace: Optional[RenderTrace] = None,
    ):
        self.config = config if config is not None else LayoutConfig()
        self.bg_color = bg_color
        self.font_size = font_size
        self.font_path = font_path
        self.renderer = BracketRenderer(
            self.config,
            locator=locator,
            router=router,
            cell_renderer=cell_renderer if cell_renderer is not None else BoxCellRenderer(),
            line_color=line_color,
            trace=trace,
        )
        self.font = None

    def _get_font(self) -> ImageFont.ImageFont:
        if self.font is None:
            self.font = load_font(self.font_size, self.font_path)
        return self.font

    def render_image(self, model: BracketModel) -> Image.Image:
        """Render a model into a new image sized to fit it."""
        width, height = self.renderer.canvas_size(model)

        if width == 0 or height == 0:
            # Create a small placeholder image
            return Image.new("RGB", (200, 100), self.bg_color)

        img = Image.new("RGB", (width, height), self.bg_color)
        surface = PillowSurface(img, self._get_font())
        self.renderer.render(model, surface)
        return img

    def render(self, model: BracketModel, output_path: str = "bracket.png") -> str:
        """
        Render a model and save it as PNG.

        Returns:
            Path to the saved PNG file
        """
        img = self.render_image(model)
        img.save(output_path, "PNG", dpi=(300, 300))
        logger.debug("Saved %dx%d bracket to %s", img.width, img.height, output_path)
        return output_path


def render_to_png(
    model: BracketModel, output_path: str = "bracket.png", **kwargs
) -> str:
    """
    Convenience function to render a bracket model to PNG.

    Args:
        model: Bracket model
        output_path: Path to save the PNG file
        **kwargs: Additional parameters for PNGRenderer

    Returns:
        Path to the saved PNG file
    """
    renderer = PNGRenderer(**kwargs)
    return renderer.render(model, output_path)
