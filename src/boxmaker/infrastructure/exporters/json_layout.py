"""JSON exporter for generated panels and their layout.

Exports:
- Settings snapshot and derived dimensions
- Every panel with its size, outline vertices and tagged paths
- Sheet placements, including overflowed panels
- Layout bounds and metrics
- Geometry warnings and settings advisories
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING, Any, ClassVar

from boxmaker.infrastructure.exporters.base import LayoutExporter, register_format

if TYPE_CHECKING:
    from boxmaker.application.dtos import LayoutOutput
    from boxmaker.domain.value_objects import GeneratedFace
    from boxmaker.infrastructure.sheet_packer import PlacedFace


SCHEMA_VERSION = "1.0"


@register_format
class JsonLayoutExporter(LayoutExporter):
    """Exports a LayoutOutput as a JSON document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    needs_layout: ClassVar[bool] = False

    def __init__(self, include_paths: bool = True, indent: int = 2) -> None:
        """Initialize the JSON exporter.

        Args:
            include_paths: Include outline vertices and path strings per panel.
            indent: JSON indentation level (default 2 spaces).
        """
        self.include_paths = include_paths
        self.indent = indent

    def render(self, output: LayoutOutput) -> str:
        return json.dumps(self.build(output), indent=self.indent, default=str)

    def build(self, output: LayoutOutput) -> dict[str, Any]:
        """Build the JSON structure as plain dictionaries."""
        result: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "kind": output.kind,
            "settings": asdict(output.settings),
            "kerf_compensation": output.kerf_compensation,
            "dimensions": asdict(output.dimensions) if output.dimensions else None,
            "panels": [self._panel(face) for face in output.faces],
        }

        layout = output.layout
        if layout is not None:
            result["placements"] = [self._placement(p) for p in layout.placements]
            result["bounds"] = {"width": layout.width, "height": layout.height}
        else:
            result["placements"] = []
            result["bounds"] = None

        result["metrics"] = asdict(output.metrics) if output.metrics else None
        result["warnings"] = list(output.warnings)
        result["advisories"] = list(output.advisories)
        result["errors"] = list(output.errors)
        return result

    def _panel(self, face: GeneratedFace) -> dict[str, Any]:
        panel: dict[str, Any] = {
            "id": face.id,
            "name": face.name.value,
            "width": face.width,
            "height": face.height,
            "area": face.area,
        }
        if self.include_paths:
            panel["vertices"] = [[p.x, p.y] for p in face.vertices]
            panel["paths"] = [{"op": path.op.value, "d": path.d} for path in face.paths]
        return panel

    @staticmethod
    def _placement(placement: PlacedFace) -> dict[str, Any]:
        return {
            "id": placement.face.id,
            "x": placement.x,
            "y": placement.y,
            "width": placement.placed_width,
            "height": placement.placed_height,
            "rotated": placement.rotated,
            "overflow": placement.overflow,
            "transform": placement.transform,
        }
