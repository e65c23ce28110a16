"""Infrastructure layer - sheet packing and file exporters."""

from .sheet_packer import (
    PackedLayout,
    PlacedFace,
    SheetSettings,
    ShelfPacker,
    pack_faces,
)
from .exporters import (
    DxfExporter,
    ExportManager,
    JsonLayoutExporter,
    LayoutExporter,
    SvgExporter,
)

__all__ = [
    # Sheet packing
    "PackedLayout",
    "PlacedFace",
    "SheetSettings",
    "ShelfPacker",
    "pack_faces",
    # Exporters
    "DxfExporter",
    "ExportManager",
    "JsonLayoutExporter",
    "LayoutExporter",
    "SvgExporter",
]
