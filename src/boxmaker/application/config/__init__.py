"""Configuration schema and loading system for boxmaker projects.

Public API:
    - BoxmakerConfiguration: Root configuration model
    - BoxConfig / DrawerConfig: Project sections
    - LayoutConfig / OutputConfig: Sheet arrangement and output sections
    - load_config / load_config_from_dict: Load and validate configuration
    - project_section / require_section: Which command a configuration is for
    - merge_config_with_cli: Apply command-line overrides
    - ConfigError: Exception for configuration errors
    - validate_config: Advisory checks beyond the schema
    - box_config_to_settings / drawer_config_to_settings /
      layout_config_to_sheet / config_to_artwork: Conversion to domain objects

Example:
    >>> from pathlib import Path
    >>> from boxmaker.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-box.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from boxmaker.application.config.adapter import (
    artwork_config_to_placements,
    box_config_to_settings,
    config_to_artwork,
    drawer_config_to_settings,
    layout_config_to_sheet,
)
from boxmaker.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    project_section,
    read_config_data,
    require_section,
)
from boxmaker.application.config.merger import merge_config_with_cli
from boxmaker.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ArtworkConfig,
    BoxConfig,
    BoxmakerConfiguration,
    DividerConfig,
    DrawerConfig,
    DxfOutputConfigSchema,
    FingerConfig,
    JsonOutputConfigSchema,
    LayoutConfig,
    LidConfig,
    MaterialConfig,
    OutputConfig,
    SvgOutputConfigSchema,
)
from boxmaker.application.config.validator import (
    ConfigIssue,
    Severity,
    ValidationResult,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "ArtworkConfig",
    "BoxConfig",
    "BoxmakerConfiguration",
    "DividerConfig",
    "DrawerConfig",
    "DxfOutputConfigSchema",
    "FingerConfig",
    "JsonOutputConfigSchema",
    "LayoutConfig",
    "LidConfig",
    "MaterialConfig",
    "OutputConfig",
    "SvgOutputConfigSchema",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "project_section",
    "read_config_data",
    "require_section",
    # Validation
    "ConfigIssue",
    "Severity",
    "ValidationResult",
    "validate_config",
    # Adapters
    "artwork_config_to_placements",
    "box_config_to_settings",
    "config_to_artwork",
    "drawer_config_to_settings",
    "layout_config_to_sheet",
]
