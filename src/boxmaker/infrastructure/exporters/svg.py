"""Layered SVG exporter for laser cutting.

The document is sized in millimetres and holds one group per laser
operation, so cutting software can map each group to its own power and
speed settings. Panels keep their own path coordinates; each placement
is applied through a ``transform`` attribute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar
from xml.sax.saxutils import escape

from boxmaker.domain.services.outline import format_number
from boxmaker.domain.value_objects import PathOperation
from boxmaker.infrastructure.exporters.base import LayoutExporter, register_format

if TYPE_CHECKING:
    from boxmaker.application.dtos import LayoutOutput
    from boxmaker.infrastructure.sheet_packer import PlacedFace


# Stroke colour and width per operation, in document order
OPERATION_STYLES = {
    PathOperation.CUT: ("#FF0000", 0.1),
    PathOperation.SCORE: ("#0000FF", 0.1),
    PathOperation.ENGRAVE: ("#000000", 0.2),
}
LABEL_COLOR = "#00A000"
LABEL_FONT_SIZE = 4.0


@register_format
class SvgExporter(LayoutExporter):
    """Exports placed panels as a layered SVG document.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(self, show_labels: bool = False, margin: float = 0.0) -> None:
        """Initialize the SVG exporter.

        Args:
            show_labels: Add panel id labels in a separate ``labels`` group.
            margin: Blank border around the layout in mm.
        """
        if margin < 0:
            raise ValueError(f"Invalid margin: {margin}. Must be non-negative")
        self.show_labels = show_labels
        self.margin = margin

    def render(self, output: LayoutOutput) -> str:
        layout = self.packed_layout(output)
        placed = self.sheet_panels(output)

        width = format_number(layout.width + 2 * self.margin)
        height = format_number(layout.height + 2 * self.margin)
        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}mm" '
            f'height="{height}mm" viewBox="0 0 {width} {height}">',
        ]
        if self.margin:
            parts.append(f'  <g transform="translate({format_number(self.margin)} '
                         f'{format_number(self.margin)})">')

        for op, (color, stroke_width) in OPERATION_STYLES.items():
            parts.append(self._render_group(op, color, stroke_width, placed))
        if self.show_labels:
            parts.append(self._render_labels(placed))

        if self.margin:
            parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts) + "\n"

    def _render_group(
        self,
        op: PathOperation,
        color: str,
        stroke_width: float,
        placed: tuple[PlacedFace, ...],
    ) -> str:
        lines = [
            f'  <g id="{op.value}" fill="none" stroke="{color}" '
            f'stroke-width="{stroke_width}">'
        ]
        for placement in placed:
            for face_path in placement.face.paths_for(op):
                lines.append(
                    f'    <path d="{face_path.d}" transform="{placement.transform}" '
                    f'data-panel="{escape(placement.face.id)}"/>'
                )
        lines.append("  </g>")
        return "\n".join(lines)

    def _render_labels(self, placed: tuple[PlacedFace, ...]) -> str:
        lines = [
            f'  <g id="labels" fill="{LABEL_COLOR}" stroke="none" '
            f'font-family="sans-serif" font-size="{LABEL_FONT_SIZE}" text-anchor="middle">'
        ]
        for placement in placed:
            cx = placement.x + placement.placed_width / 2
            cy = placement.y + placement.placed_height / 2
            lines.append(
                f'    <text x="{format_number(cx)}" y="{format_number(cy)}">'
                f"{escape(placement.face.id)}</text>"
            )
        lines.append("  </g>")
        return "\n".join(lines)
