"""
Debug tracing infrastructure for bracketflow.

When tracing is enabled, the render pipeline records every pipeline stage
and every draw call it issues. This is primarily useful for:
1. Debugging geometry issues (which cell produced which rectangle)
2. Writing targeted tests (verifying specific connector strokes)

Usage:
    >>> generator = BracketGenerator()
    >>> image = generator.generate(["A", "B", "C", "D"], debug=True)
    >>> trace = generator.get_trace()
    >>> print(trace.summary())
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DrawCall:
    """
    Record of one drawing operation.

    Attributes:
        kind: "cell" for a cell box, "connector" for a connector segment
        column: Column of the cell that caused the call
        row: Row of the cell that caused the call
        x: Left edge of the rectangle
        y: Top edge of the rectangle
        width: Rectangle width (may be negative for upward strokes)
        height: Rectangle height (may be negative for upward strokes)
    """

    kind: str
    column: int
    row: int
    x: int
    y: int
    width: int
    height: int

    def __str__(self) -> str:
        return (
            f"[{self.kind}] ({self.column},{self.row}): "
            f"x={self.x} y={self.y} w={self.width} h={self.height}"
        )


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            # Truncate long values
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class RenderTrace:
    """
    Complete trace of a render pass.

    Attributes:
        stages: List of pipeline stages with their data
        draw_calls: List of all draw calls in the order they were issued
        routing_mode: Routing mode of the traced pass
    """

    stages: List[PipelineStage] = field(default_factory=list)
    draw_calls: List[DrawCall] = field(default_factory=list)
    routing_mode: str = ""

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """Add a pipeline stage snapshot."""
        self.stages.append(PipelineStage(name, data.copy()))

    def add_call(
        self,
        kind: str,
        column: int,
        row: int,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> None:
        """Record a draw call."""
        self.draw_calls.append(DrawCall(kind, column, row, x, y, width, height))

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def get_calls_for(self, column: int, row: int) -> List[DrawCall]:
        """Get all draw calls caused by a specific cell."""
        return [c for c in self.draw_calls if c.column == column and c.row == row]

    def get_calls_by_kind(self, kind: str) -> List[DrawCall]:
        """Get all draw calls of one kind ("cell" or "connector")."""
        return [c for c in self.draw_calls if c.kind == kind]

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with the pipeline stages overview and draw call
        statistics.
        """
        lines = [
            "=" * 60,
            "RENDER TRACE SUMMARY",
            "=" * 60,
            "",
            f"Routing mode: {self.routing_mode}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]

        for stage in self.stages:
            lines.append(f"  - {stage.name}")

        lines.extend(["", f"Total draw calls: {len(self.draw_calls)}", ""])

        kind_counts: Dict[str, int] = {}
        for call in self.draw_calls:
            kind_counts[call.kind] = kind_counts.get(call.kind, 0) + 1

        lines.append("Draw calls by kind:")
        for kind, count in sorted(kind_counts.items(), key=lambda x: -x[1]):
            lines.append(f"  {kind}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Complete dump of all stages and draw calls."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PIPELINE STAGES:")
        lines.append("-" * 40)
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")

        lines.append("DRAW CALLS:")
        lines.append("-" * 40)
        for call in self.draw_calls:
            lines.append(str(call))

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
