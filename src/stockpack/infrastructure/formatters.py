"""Output formatters and exporters for packing results."""

from __future__ import annotations

import json
from typing import Any

from stockpack.contracts.dtos import ContainerLayout, PackingOutput, PlacementRecord


class PackingReportFormatter:
    """Formats a packing run as a plain-text report.

    One table per container lists each placed piece with its position
    (relative to the container's bottom-left corner) and size, followed
    by a run summary.
    """

    def format(self, output: PackingOutput) -> str:
        if not output.is_valid:
            return "\n".join(["PACKING FAILED", *output.errors])

        if not output.layouts:
            return "No pieces packed."

        lines: list[str] = []
        for layout in output.layouts:
            lines.extend(self._format_layout(layout))
            lines.append("")

        lines.extend(self._format_summary(output))
        return "\n".join(lines)

    def _format_layout(self, layout: ContainerLayout) -> list[str]:
        lines = [
            f"CONTAINER {layout.index + 1} "
            f"({layout.width:g} x {layout.height:g} at {layout.origin_x:g}, {layout.origin_y:g})",
            "=" * 70,
            f"{'Piece':<20} {'X':<10} {'Y':<10} {'Width':<10} {'Height':<10}",
            "-" * 70,
        ]
        for placement in layout.placements:
            lines.append(
                f"{placement.label:<20} {placement.x:<10g} {placement.y:<10g} "
                f"{placement.width:<10g} {placement.height:<10g}"
            )
        lines.append("-" * 70)
        lines.append(
            f"Used {layout.used_area:g} of {layout.area:g} "
            f"({layout.waste_percentage:.1f}% waste)"
        )
        return lines

    def _format_summary(self, output: PackingOutput) -> list[str]:
        lines = [
            "PACKING SUMMARY",
            "=" * 40,
            f"Containers: {output.total_containers}",
            f"Pieces placed: {output.total_pieces_placed}",
            f"Total waste: {output.total_waste_percentage:.1f}%",
            f"Steps: {output.steps}",
        ]
        for phase, count in sorted(output.phase_counts.items()):
            lines.append(f"  {phase}: {count}")
        return lines


class JsonExporter:
    """Exports a packing run as JSON."""

    def export(self, output: PackingOutput) -> str:
        """Export packing output as a JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": list(output.errors)}, indent=2)

        data = {
            "containers": [self._format_layout(layout) for layout in output.layouts],
            "summary": {
                "total_containers": output.total_containers,
                "total_pieces_placed": output.total_pieces_placed,
                "total_waste_percentage": round(output.total_waste_percentage, 3),
                "steps": output.steps,
                "phase_counts": output.phase_counts,
            },
        }
        return json.dumps(data, indent=2)

    def _format_layout(self, layout: ContainerLayout) -> dict[str, Any]:
        return {
            "index": layout.index,
            "width": layout.width,
            "height": layout.height,
            "origin": {"x": layout.origin_x, "y": layout.origin_y},
            "used_area": layout.used_area,
            "waste_percentage": round(layout.waste_percentage, 3),
            "placements": [self._format_placement(p) for p in layout.placements],
        }

    def _format_placement(self, placement: PlacementRecord) -> dict[str, Any]:
        return {
            "label": placement.label,
            "x": placement.x,
            "y": placement.y,
            "width": placement.width,
            "height": placement.height,
        }
