"""Pydantic schemas for boxmaker configuration files."""

from boxmaker.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    ArtworkConfig,
    BoxTypeConfig,
    DimensionReferenceConfig,
    DividerConfig,
    FingerConfig,
    LidTypeConfig,
    MaterialConfig,
    PathOperationConfig,
)
from boxmaker.application.config.schemas.box_schema import BoxConfig, LidConfig
from boxmaker.application.config.schemas.drawer_schema import DrawerConfig
from boxmaker.application.config.schemas.output_schema import (
    EXPORT_FORMAT_NAMES,
    DxfOutputConfigSchema,
    JsonOutputConfigSchema,
    LayoutConfig,
    OutputConfig,
    SvgOutputConfigSchema,
)
from boxmaker.application.config.schemas.root import BoxmakerConfiguration

__all__ = [
    "SUPPORTED_VERSIONS",
    "EXPORT_FORMAT_NAMES",
    "ArtworkConfig",
    "BoxConfig",
    "BoxTypeConfig",
    "BoxmakerConfiguration",
    "DimensionReferenceConfig",
    "DividerConfig",
    "DrawerConfig",
    "DxfOutputConfigSchema",
    "FingerConfig",
    "JsonOutputConfigSchema",
    "LayoutConfig",
    "LidConfig",
    "LidTypeConfig",
    "MaterialConfig",
    "OutputConfig",
    "PathOperationConfig",
    "SvgOutputConfigSchema",
]
