"""SVG, DXF and JSON exporters for packed box layouts.

Importing this package registers every format in ``EXPORT_FORMATS``:
- dxf: Layered DXF drawing (R2010, millimetres) for CAD and laser software
- json: Panels, placements, dimensions, metrics and warnings
- svg: Layered SVG with one group per laser operation

Usage:
    from boxmaker.infrastructure.exporters import ExportManager, exporter_class

    svg = exporter_class("svg")(show_labels=True).export_string(layout_output)

    manager = ExportManager(output_dir=Path("./output"))
    files = manager.export_all(["svg", "dxf"], layout_output, project_name="my_box")
"""

from boxmaker.infrastructure.exporters.base import (
    EXPORT_FORMATS,
    ExportManager,
    LayoutExporter,
    available_formats,
    exporter_class,
    register_format,
)

# Import exporters to trigger registration
from boxmaker.infrastructure.exporters.dxf import LAYERS, DxfExporter
from boxmaker.infrastructure.exporters.json_layout import JsonLayoutExporter
from boxmaker.infrastructure.exporters.svg import OPERATION_STYLES, SvgExporter

__all__ = [
    # Framework
    "EXPORT_FORMATS",
    "ExportManager",
    "LayoutExporter",
    "available_formats",
    "exporter_class",
    "register_format",
    # Registered exporters
    "DxfExporter",
    "JsonLayoutExporter",
    "SvgExporter",
    # Styling
    "LAYERS",
    "OPERATION_STYLES",
]
