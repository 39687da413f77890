"""
Layout module computing the pixel position of every bracket cell.

Two locators are provided:
- GridLocator: uniform rows, every column laid out like the first one
- RecursiveLocator: elimination topology, each cell centred between the
  two cells that feed it

Column x positions are identical for both. Locators never consult the data
model; they only see integer indices and the immutable LayoutConfig.
"""

import logging
import threading
from typing import Dict, List, Protocol, Tuple

from .models import InvalidConfigurationError, LayoutConfig, OutOfRangeError, PixelPoint

logger = logging.getLogger(__name__)


class Locator(Protocol):
    """Capability for placing a cell on the canvas."""

    def x_of(self, column: int, config: LayoutConfig) -> int:
        """Left edge of the given column."""
        ...

    def y_of(self, column: int, row: int, config: LayoutConfig) -> int:
        """Top edge of the given cell."""
        ...

    def locate(self, column: int, row: int, config: LayoutConfig) -> PixelPoint:
        """Top-left origin of the given cell."""
        ...


def _check_indices(column: int, row: int) -> None:
    if column < 0 or row < 0:
        raise OutOfRangeError(f"Cell ({column}, {row}) has a negative index")


def column_x(column: int, config: LayoutConfig) -> int:
    """X coordinate of a column's left edge."""
    if column < 0:
        raise OutOfRangeError(f"Column {column} is negative")
    return config.origin_pad_x + column * config.column_pitch


def first_column_y(row: int, config: LayoutConfig) -> int:
    """Y coordinate of a first-column cell, which is always a plain grid."""
    return config.origin_pad_y + row * config.row_pitch


class GridLocator:
    """Places cells on a uniform grid. Stateless and O(1)."""

    def x_of(self, column: int, config: LayoutConfig) -> int:
        return column_x(column, config)

    def y_of(self, column: int, row: int, config: LayoutConfig) -> int:
        _check_indices(column, row)
        return first_column_y(row, config)

    def locate(self, column: int, row: int, config: LayoutConfig) -> PixelPoint:
        return PixelPoint(self.x_of(column, config), self.y_of(column, row, config))

    def __repr__(self) -> str:
        return "GridLocator()"


class RecursiveLocator:
    """
    Places cells for an elimination bracket.

    A cell in column ``c`` sits halfway between its two feeders in column
    ``c - 1``::

        y(0, r) = pad_y + r * (cell_height + vertical_gap)
        y(c, r) = (y(c-1, 2r) + y(c-1, 2r+1)) // 2

    Column 0 is an arithmetic sequence and averaging neighbouring pairs keeps
    it one, doubling the step and shifting the origin by half the previous
    step::

        y(c, r) = origin(c) + r * (row_pitch << c)
        origin(c) = origin(c-1) + (row_pitch << (c-1)) // 2

    Column origins are filled bottom-up and cached per vertical geometry
    (``origin_pad_y`` and ``row_pitch``, the only fields y depends on), so a
    query costs O(column) at most once and O(1) afterwards, whatever the
    shape of the model. At most ``max_tables`` geometries are kept.

    The geometry is only meaningful when every column holds half the rows
    of the previous one (rounded up). Other shapes still get numbers, they
    are just not centred on anything.
    """

    def __init__(self, max_tables: int = 32):
        self.max_tables = max_tables
        self._tables: Dict[Tuple[int, int], List[int]] = {}
        self._lock = threading.Lock()

    def x_of(self, column: int, config: LayoutConfig) -> int:
        return column_x(column, config)

    def y_of(self, column: int, row: int, config: LayoutConfig) -> int:
        _check_indices(column, row)
        if column == 0:
            return first_column_y(row, config)
        return self._origin(config, column) + row * (config.row_pitch << column)

    def locate(self, column: int, row: int, config: LayoutConfig) -> PixelPoint:
        return PixelPoint(self.x_of(column, config), self.y_of(column, row, config))

    def column_offsets(self, column: int, rows: int, config: LayoutConfig) -> List[int]:
        """Y coordinates of the first ``rows`` cells of a column."""
        _check_indices(column, rows)
        if rows == 0:
            return []
        origin = self._origin(config, column)
        step = config.row_pitch << column
        return [origin + r * step for r in range(rows)]

    def clear(self) -> None:
        """Drop every cached table."""
        with self._lock:
            self._tables.clear()

    def _origin(self, config: LayoutConfig, column: int) -> int:
        key = (config.origin_pad_y, config.row_pitch)
        with self._lock:
            origins = self._tables.get(key)
            if origins is None:
                if self._tables and len(self._tables) >= self.max_tables:
                    # evict the oldest geometry
                    del self._tables[next(iter(self._tables))]
                origins = self._tables[key] = [config.origin_pad_y]
            if len(origins) > column:
                return origins[column]

            pitch = config.row_pitch
            for c in range(len(origins), column + 1):
                origins.append(origins[c - 1] + (pitch << (c - 1)) // 2)

            logger.debug("Extended origin table to column %d for %s", column, key)
            return origins[column]

    def __repr__(self) -> str:
        return "RecursiveLocator()"


LOCATORS = {
    "grid": GridLocator,
    "recursive": RecursiveLocator,
    "elimination": RecursiveLocator,
}

_default_locator = RecursiveLocator()


def default_locator() -> RecursiveLocator:
    """The shared RecursiveLocator used when callers pass none."""
    return _default_locator


def get_locator(name: str) -> Locator:
    """
    Create a locator by name.

    Args:
        name: "grid", "recursive" or "elimination" (alias of recursive).

    Raises:
        InvalidConfigurationError: If the name is unknown.
    """
    try:
        factory = LOCATORS[name.lower()]
    except (KeyError, AttributeError):
        raise InvalidConfigurationError(f"Unknown layout: {name!r}") from None
    return factory()


def position_of(
    column: int, row: int, config: LayoutConfig, locator: Locator = None
) -> PixelPoint:
    """
    Pixel origin of a cell.

    Args:
        column: Column index (>= 0).
        row: Row index within the column (>= 0).
        config: Layout configuration.
        locator: Placement strategy; defaults to the shared RecursiveLocator.

    Raises:
        OutOfRangeError: If column or row is negative.
    """
    if locator is None:
        locator = default_locator()
    return locator.locate(column, row, config)
