"""
Connector routing between bracket columns.

Every connector is expressed as a list of axis-aligned ConnectorSegments,
i.e. filled rectangles of ``line_thickness`` width. Three routing modes are
supported:

ABOVE - every cell draws its own line into the top or bottom edge of the
next cell::

    +-----------+
    | Bracket 1 +------------+
    +-----------+            |
                       +-----+-----+
                       | Bracket 3 |
                       +-----+-----+
    +-----------+            |
    | Bracket 2 +------------+
    +-----------+

CENTERED - even rows draw a fork that joins both siblings::

    +-----------+
    | Bracket 1 +--+
    +-----------+  |
                   |   +-----------+
                   +---+ Bracket 3 |
                   |   +-----------+
    +-----------+  |
    | Bracket 2 +--+
    +-----------+

BELOW - even rows draw a line from their bottom edge down between the two
siblings and across to the next column.

Sibling rows ``2k`` and ``2k + 1`` both feed row ``k`` of the next column;
in CENTERED and BELOW mode only the even sibling draws, so no stroke is
painted twice. The last column never has outgoing connectors.
"""

from typing import Callable, Dict, List, Protocol

from .layout import Locator, default_locator
from .models import ConnectorSegment, InvalidConfigurationError, LayoutConfig, RoutingMode

RouteFunction = Callable[[int, int, LayoutConfig, Locator], List[ConnectorSegment]]


class ConnectorRouter(Protocol):
    """Capability for computing the connector strokes leaving a cell."""

    def route(
        self,
        column: int,
        row: int,
        config: LayoutConfig,
        locator: Locator,
        last_column: int,
    ) -> List[ConnectorSegment]:
        ...


def route_above(
    column: int, row: int, config: LayoutConfig, locator: Locator
) -> List[ConnectorSegment]:
    """
    Route a connector into the top (even row) or bottom (odd row) edge of
    the next cell.

    The horizontal stub starts at the vertical centre of the right edge and
    reaches past the gap to the middle of the next column.
    """
    t = config.line_thickness
    base_x = locator.x_of(column, config) + config.cell_width
    base_y = locator.y_of(column, row, config) + config.cell_height // 2
    width = config.horizontal_gap + config.cell_width // 2

    end_y = locator.y_of(column + 1, row // 2, config)
    height = end_y - base_y

    segments = [ConnectorSegment(base_x, base_y, width, t)]
    if row % 2 == 0:
        segments.append(ConnectorSegment(base_x + width, base_y, t, height + t))
    else:
        # approach from below: the stroke ends at the bottom edge of the target
        end_y += config.cell_height
        height = max(height, base_y - end_y)
        segments.append(ConnectorSegment(base_x + width, end_y, t, height + t))
    return segments


def route_below(
    column: int, row: int, config: LayoutConfig, locator: Locator
) -> List[ConnectorSegment]:
    """Route a connector from the bottom edge of an even cell to the next column."""
    if row % 2 != 0:
        return []

    t = config.line_thickness
    base_x = locator.x_of(column, config) + config.cell_width // 2
    base_y = locator.y_of(column, row, config) + config.cell_height

    end_y = locator.y_of(column, row + 1, config)
    height = end_y - base_y
    width = config.cell_width // 2 + config.horizontal_gap
    mid_y = (base_y + end_y) // 2

    return [
        ConnectorSegment(base_x, base_y, t, height),
        ConnectorSegment(base_x, mid_y, width, t),
    ]


def route_centered(
    column: int, row: int, config: LayoutConfig, locator: Locator
) -> List[ConnectorSegment]:
    """Route a fork joining an even cell and its odd sibling to the next column."""
    if row % 2 != 0:
        return []

    t = config.line_thickness
    base_x = locator.x_of(column, config) + config.cell_width
    base_y = locator.y_of(column, row, config) + config.cell_height // 2
    end_y = locator.y_of(column, row + 1, config) + config.cell_height // 2

    width = config.horizontal_gap // 2
    height = (end_y - base_y) + t

    return [
        ConnectorSegment(base_x, base_y, width, t),
        ConnectorSegment(base_x, end_y, width, t),
        ConnectorSegment(base_x + width, base_y, t, height),
        ConnectorSegment(base_x + width, (end_y + base_y) // 2, width, t),
    ]


ROUTES: Dict[RoutingMode, RouteFunction] = {
    RoutingMode.ABOVE: route_above,
    RoutingMode.CENTERED: route_centered,
    RoutingMode.BELOW: route_below,
}


def get_router(mode) -> RouteFunction:
    """
    Look up the route function for a routing mode.

    Raises:
        InvalidConfigurationError: If the mode is not a RoutingMode member.
    """
    try:
        return ROUTES[mode]
    except (KeyError, TypeError):
        raise InvalidConfigurationError(f"Unexpected routing mode: {mode!r}") from None


class DefaultConnectorRouter:
    """Routes connectors according to ``config.routing_mode``."""

    def route(
        self,
        column: int,
        row: int,
        config: LayoutConfig,
        locator: Locator,
        last_column: int,
    ) -> List[ConnectorSegment]:
        route = get_router(config.routing_mode)
        if column == last_column:
            return []
        return route(column, row, config, locator)

    def __repr__(self) -> str:
        return "DefaultConnectorRouter()"


def route_from(
    column: int,
    row: int,
    config: LayoutConfig,
    last_column: int,
    locator: Locator = None,
) -> List[ConnectorSegment]:
    """
    Connector segments leaving the given cell.

    Args:
        column: Column of the cell.
        row: Row of the cell.
        config: Layout configuration; its routing mode selects the geometry.
        last_column: Index of the final column, which has no outgoing
            connectors.
        locator: Placement strategy; defaults to the shared RecursiveLocator.

    Returns:
        Possibly empty list of segments.

    Raises:
        InvalidConfigurationError: If the routing mode is unknown.
    """
    if locator is None:
        locator = default_locator()
    return DefaultConnectorRouter().route(column, row, config, locator, last_column)
