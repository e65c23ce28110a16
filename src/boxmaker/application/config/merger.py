"""Merge command-line overrides into a loaded configuration.

CLI options override configuration values only when they are given
(not None). The merged result is validated again, so an out-of-range
override is reported the same way as an out-of-range file value.
"""

from pathlib import Path
from typing import Any

from boxmaker.application.config.loader import load_config_from_dict, project_section
from boxmaker.application.config.schemas import BoxmakerConfiguration


def _given(overrides: dict[str, Any]) -> dict[str, Any]:
    """Drop None values and nested groups with nothing left in them."""
    given: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(value, dict):
            value = _given(value)
            if not value:
                continue
        elif value is None:
            continue
        given[key] = value
    return given


def _apply(section: dict[str, Any], overrides: dict[str, Any]) -> None:
    """Apply given overrides, merging nested dictionaries key by key."""
    for key, value in _given(overrides).items():
        if isinstance(value, dict) and isinstance(section.get(key), dict):
            _apply(section[key], value)
        else:
            section[key] = value


def merge_config_with_cli(
    config: BoxmakerConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    material_thickness: float | None = None,
    kerf: float | None = None,
    sheet_width: float | None = None,
    sheet_height: float | None = None,
    spacing: float | None = None,
    arrange_on_sheet: bool | None = None,
    auto_rotate: bool | None = None,
    output_formats: list[str] | None = None,
    output_dir: str | Path | None = None,
    project_name: str | None = None,
    section_overrides: dict[str, Any] | None = None,
) -> BoxmakerConfiguration:
    """Merge CLI arguments with configuration values.

    Dimension and material overrides apply to whichever of ``box`` or
    ``drawer`` the configuration holds. ``section_overrides`` carries any
    other field of that section, nested as in the file
    (e.g. ``{"lid": {"type": "sliding_lid"}}``).

    Returns:
        A new BoxmakerConfiguration with merged values

    Raises:
        ConfigError: If a merged value fails validation.

    Example:
        >>> config = load_config(Path("my-box.json"))
        >>> merged = merge_config_with_cli(config, width=150.0)
        >>> merged.box.width
        150.0
    """
    data = config.model_dump(mode="json", by_alias=True, exclude_none=True)

    project = data[project_section(config)]
    _apply(project, section_overrides or {})
    _apply(
        project,
        {
            "width": width,
            "height": height,
            "depth": depth,
            "material": {"thickness": material_thickness, "kerf": kerf},
        },
    )
    _apply(
        data.setdefault("layout", {}),
        {
            "sheet_width": sheet_width,
            "sheet_height": sheet_height,
            "spacing": spacing,
            "arrange_on_sheet": arrange_on_sheet,
            "auto_rotate": auto_rotate,
        },
    )
    _apply(
        data.setdefault("output", {}),
        {
            "formats": output_formats,
            "output_dir": str(output_dir) if output_dir is not None else None,
            "project_name": project_name,
        },
    )
    return load_config_from_dict(data)
