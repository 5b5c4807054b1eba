"""Cut diagram rendering for packed containers.

Provides SVG and ASCII renderings of container layouts showing piece
placements, labels, dimensions and waste.

Layouts use a y-up convention (the bottom of the container is y = 0),
while SVG and text grids grow downward, so both renderers flip the y axis.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from stockpack.contracts.dtos import ContainerLayout, PackingOutput, PlacementRecord

# Fill colors cycled over pieces in placement order
PIECE_COLORS: tuple[str, ...] = (
    "#87CEEB",  # Sky blue
    "#90EE90",  # Light green
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # Light pink
    "#FFA07A",  # Light salmon
    "#E6E6FA",  # Lavender
    "#DEB887",  # Burlywood
)


class CutDiagramRenderer:
    """Renders container layouts as SVG or ASCII diagrams.

    Attributes:
        scale: Pixels per unit for SVG rendering.
        piece_fill: Default fill color for pieces when colors are not cycled.
        piece_stroke: Stroke color for piece outlines.
        container_fill: Fill color for empty container area.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show piece dimensions.
        show_labels: Whether to show piece labels.
        use_piece_colors: Whether to cycle colors over pieces.
    """

    def __init__(
        self,
        scale: float = 10.0,
        piece_fill: str = "#ADD8E6",  # Light blue
        piece_stroke: str = "#000000",
        container_fill: str = "#D3D3D3",  # Light gray, visible as waste
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
        use_piece_colors: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.piece_fill = piece_fill
        self.piece_stroke = piece_stroke
        self.container_fill = container_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels
        self.use_piece_colors = use_piece_colors

    def render_svg(self, layout: ContainerLayout, total_containers: int = 1) -> str:
        """Generate an SVG cut diagram for a single container.

        Args:
            layout: Container layout with placed pieces.
            total_containers: Total number of containers (for the header).

        Returns:
            SVG document as a string.
        """
        header_height = 30
        svg_width = layout.width * self.scale
        svg_height = layout.height * self.scale + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            self._render_header(layout, total_containers, svg_width, header_height),
            "",
            "  <!-- Container (uncovered area is waste) -->",
            f'  <rect x="0" y="{header_height}" width="{svg_width}" '
            f'height="{layout.height * self.scale}" fill="{self.container_fill}" '
            f'stroke="{self.piece_stroke}" stroke-width="2"/>',
            "",
            "  <!-- Placed pieces -->",
        ]

        for i, placement in enumerate(layout.placements):
            parts.append(self._render_piece(placement, i, layout, header_height))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, output: PackingOutput) -> list[str]:
        """Generate one SVG document per container."""
        total = len(output.layouts)
        return [self.render_svg(layout, total) for layout in output.layouts]

    def _render_header(
        self,
        layout: ContainerLayout,
        total_containers: int,
        svg_width: float,
        header_height: float,
    ) -> str:
        header_text = (
            f"Container {layout.index + 1} of {total_containers} - "
            f"{layout.piece_count} pieces - {layout.waste_percentage:.1f}% waste"
        )
        return (
            f"  <!-- Header -->\n"
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" '
            f'fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>'
        )

    def _render_piece(
        self,
        placement: PlacementRecord,
        position: int,
        layout: ContainerLayout,
        header_height: float,
    ) -> str:
        x = placement.x * self.scale
        y = header_height + (layout.height - placement.top_edge) * self.scale
        w = placement.width * self.scale
        h = placement.height * self.scale

        if self.use_piece_colors:
            fill_color = PIECE_COLORS[position % len(PIECE_COLORS)]
        else:
            fill_color = self.piece_fill

        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill_color}" stroke="{self.piece_stroke}"/>'
        )

        font_size = min(12, min(w, h) / 6)
        if font_size < 6:
            # Too small for text
            return f"  {rect}"

        text_x = x + w / 2
        text_y = y + h / 2
        svg_parts = ["  <g>", f"    {rect}"]

        if self.show_labels and placement.label:
            svg_parts.append(
                f'    <text x="{text_x}" y="{text_y - font_size / 2}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" fill="{self.text_color}">'
                f"{escape(placement.label)}</text>"
            )

        if self.show_dimensions:
            dims = f"{placement.width:g} x {placement.height:g}"
            dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
            svg_parts.append(
                f'    <text x="{text_x}" y="{dims_y}" '
                f'text-anchor="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size * 0.8}" fill="{self.text_color}">{dims}</text>'
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def render_ascii(
        self,
        layout: ContainerLayout,
        width: int = 80,
        total_containers: int = 1,
    ) -> str:
        """Generate an ASCII diagram of a single container.

        Args:
            layout: Container layout with placed pieces.
            width: Line width in characters, borders included.
            total_containers: Total number of containers (for the header).

        Returns:
            Text diagram with the container bottom on the last grid row.
        """
        usable_width = width - 2
        scale_x = usable_width / layout.width
        # Terminal cells are about twice as tall as they are wide
        grid_height = max(int(usable_width * layout.height / layout.width * 0.5), 10)
        scale_y = grid_height / layout.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for placement in layout.placements:
            self._draw_piece_ascii(grid, placement, layout, scale_x, scale_y)

        lines = [
            f"Container {layout.index + 1} of {total_containers} - "
            f"{layout.waste_percentage:.1f}% waste",
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_piece_ascii(
        self,
        grid: list[list[str]],
        placement: PlacementRecord,
        layout: ContainerLayout,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0

        def clamp(value: int, upper: int) -> int:
            return max(0, min(value, upper - 1))

        x1 = clamp(int(placement.x * scale_x), grid_width)
        x2 = clamp(int(placement.right_edge * scale_x), grid_width)
        # Row 0 is the top of the container
        y1 = clamp(int((layout.height - placement.top_edge) * scale_y), grid_height)
        y2 = clamp(int((layout.height - placement.y) * scale_y), grid_height)

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        label_row = y1 + 1
        if label_row < y2:
            label = placement.label[: max(0, x2 - x1 - 1)]
            for i, char in enumerate(label):
                grid[label_row][x1 + 1 + i] = char

    def render_all_ascii(self, output: PackingOutput, width: int = 80) -> str:
        """Generate ASCII diagrams for all containers plus a summary line."""
        if not output.layouts:
            return "No containers to display."

        total = len(output.layouts)
        parts: list[str] = []
        for layout in output.layouts:
            parts.append(self.render_ascii(layout, width, total))
            parts.append("")

        parts.append("=" * width)
        parts.append(
            f"SUMMARY: {total} container{'s' if total != 1 else ''}, "
            f"{output.total_waste_percentage:.1f}% total waste"
        )
        return "\n".join(parts)
