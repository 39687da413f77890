#!/usr/bin/env python3
"""
Examples of using the bracket generator.

Run this file to generate example diagrams as PNG files.
"""

import logging

from bracketflow import (
    BoxCellRenderer,
    BracketGenerator,
    DefaultBracketModel,
    LayoutConfig,
    PNGRenderer,
    RoutingMode,
)

TEAMS = [
    "Ajax",
    "Benfica",
    "Celtic",
    "Dinamo",
    "Everton",
    "Feyenoord",
    "Galatasaray",
    "Hajduk",
]


def example_centered():
    """Eight-team bracket with forked connectors"""
    print("Example 1: Centered Connectors")

    generator = BracketGenerator(routing_mode="centered")
    generator.save_png(TEAMS, "example_centered.png")
    print("  Saved: example_centered.png\n")


def example_above():
    """Every match draws its own line into the next round"""
    print("Example 2: Connectors Above")

    generator = BracketGenerator(routing_mode="above", line_thickness=2)
    generator.save_png(TEAMS, "example_above.png")
    print("  Saved: example_above.png\n")


def example_below():
    """Compact cells with connectors dropping between siblings"""
    print("Example 3: Connectors Below")

    generator = BracketGenerator(
        routing_mode="below", cell_width=120, cell_height=40, vertical_gap=60
    )
    generator.save_png(TEAMS, "example_below.png")
    print("  Saved: example_below.png\n")


def example_results():
    """Partially played tournament with custom labels"""
    print("Example 4: Results")

    model = DefaultBracketModel.elimination(TEAMS)
    model.set_value_at("Benfica", 1, 0)
    model.set_value_at("Celtic", 1, 1)
    model.set_value_at("Celtic", 2, 0)

    slot = model.next_position(lambda team: team == "Celtic")
    print(f"  Celtic advances into column {slot.column}, row {slot.row}")

    renderer = PNGRenderer(
        LayoutConfig(origin_pad_x=20, origin_pad_y=20, routing_mode=RoutingMode.ABOVE),
        cell_renderer=BoxCellRenderer(fill=(240, 240, 255), empty_text="?"),
        line_color=(60, 60, 160),
    )
    renderer.render(model, "example_results.png")
    print("  Saved: example_results.png\n")


def example_grid():
    """Round-robin schedule laid out as a uniform grid"""
    print("Example 5: Grid")

    games = [f"Match {i + 1}" for i in range(12)]
    generator = BracketGenerator(layout="grid", columns=3, rows=4)
    generator.generate(games, debug=True).save("example_grid.png")
    print(generator.get_trace().summary())
    print("  Saved: example_grid.png\n")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.INFO)

    print("=" * 50)
    print("Bracket Generator Examples")
    print("=" * 50)
    print()

    example_centered()
    example_above()
    example_below()
    example_results()
    example_grid()

    print("=" * 50)
    print("All examples generated!")
    print("=" * 50)


if __name__ == "__main__":
    main()
