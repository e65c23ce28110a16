"""DXF format exporter for laser cutting.

Generates 2D DXF files (R2010 format) in millimetres. Every panel path is
flattened into lightweight polylines on a layer named after its laser
operation, positioned as packed and flipped into CAD's y-up frame.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from boxmaker.domain.services.path_parser import MIN_FLATTEN_STEP, parse_path
from boxmaker.domain.value_objects import PathOperation, Point2D
from boxmaker.infrastructure.exporters.base import LayoutExporter, register_format

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from boxmaker.application.dtos import LayoutOutput
    from boxmaker.infrastructure.sheet_packer import PackedLayout, PlacedFace


logger = logging.getLogger(__name__)


# Layer name and ACI colour for DXF output
LAYERS = {
    "CUT": {"color": 1},  # Red - through cuts
    "SCORE": {"color": 5},  # Blue - grooves and guide lines
    "ENGRAVE": {"color": 7},  # White/black - engraving
    "LABELS": {"color": 3},  # Green - panel labels
}

OPERATION_LAYERS = {
    PathOperation.CUT: "CUT",
    PathOperation.SCORE: "SCORE",
    PathOperation.ENGRAVE: "ENGRAVE",
}

LABEL_HEIGHT = 4.0


def to_sheet_point(point: Point2D, placement: PlacedFace) -> Point2D:
    """Map a panel path point onto the sheet (both y-down).

    Mirrors ``PlacedFace.transform``: a rotated panel is turned 90 degrees
    clockwise and shifted right by its own height.
    """
    if placement.rotated:
        return Point2D(placement.x + placement.face.height - point.y, placement.y + point.x)
    return Point2D(placement.x + point.x, placement.y + point.y)


@register_format
class DxfExporter(LayoutExporter):
    """Exports placed panels to a layered DXF drawing.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, flatten_step: float = 0.5, show_labels: bool = False) -> None:
        """Initialize the DXF exporter.

        Args:
            flatten_step: Curve flattening step in mm; values below 0.25
                are raised to 0.25.
            show_labels: Add a TEXT label with the panel id on each panel.
        """
        self.flatten_step = max(flatten_step, MIN_FLATTEN_STEP)
        self.show_labels = show_labels

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Save the drawing with ezdxf, which picks the file encoding.

        Raises:
            ValueError: If the output has no packed layout.
        """
        self.build_document(output).saveas(path)
        logger.info(f"Wrote dxf layout to {path}")

    def render(self, output: LayoutOutput) -> str:
        doc = self.build_document(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, output: LayoutOutput) -> Drawing:
        """Create the DXF document for a packed layout.

        Raises:
            ValueError: If the output has no packed layout.
        """
        layout = self.packed_layout(output)
        doc = self._create_document()
        msp = doc.modelspace()
        for placement in self.sheet_panels(output):
            self._draw_panel(msp, placement, layout)
        return doc

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, props in LAYERS.items():
            doc.layers.add(name, color=props["color"])
        return doc

    def _draw_panel(
        self, msp: Modelspace, placement: PlacedFace, layout: PackedLayout
    ) -> None:
        """Draw every path of one panel, then its label."""
        for face_path in placement.face.paths:
            layer = OPERATION_LAYERS[face_path.op]
            for subpath in parse_path(face_path.d, self.flatten_step):
                if len(subpath.points) < 2:
                    continue
                points = []
                for point in subpath.points:
                    sheet = to_sheet_point(point, placement)
                    points.append((sheet.x, layout.height - sheet.y))
                msp.add_lwpolyline(points, close=subpath.closed, dxfattribs={"layer": layer})

        if self.show_labels:
            center_x = placement.x + placement.placed_width / 2
            center_y = layout.height - (placement.y + placement.placed_height / 2)
            msp.add_text(
                placement.face.id,
                height=LABEL_HEIGHT,
                dxfattribs={
                    "layer": "LABELS",
                    "insert": (center_x, center_y),
                    "align_point": (center_x, center_y),
                    "halign": 1,  # CENTER
                    "valign": 2,  # MIDDLE
                },
            )


__all__ = ["DxfExporter", "LAYERS", "to_sheet_point"]
