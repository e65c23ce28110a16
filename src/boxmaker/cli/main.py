"""Typer CLI for finger-jointed box and sliding drawer generation."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from boxmaker.application import GenerateBoxCommand, GenerateDrawerCommand, LayoutOutput
from boxmaker.application.config import (
    BoxmakerConfiguration,
    ConfigError,
    box_config_to_settings,
    config_to_artwork,
    drawer_config_to_settings,
    layout_config_to_sheet,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
    require_section,
)
from boxmaker.cli.commands import (
    handle_multi_format_export,
    parse_formats,
    print_layout_summary,
    validate_command,
)
from boxmaker.domain.exceptions import PathSyntaxError
from boxmaker.infrastructure import ShelfPacker

app = typer.Typer(
    name="boxmaker",
    help="Generate laser-cut finger-joint boxes and sliding drawers.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate laser-cut finger-joint boxes and sliding drawers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_or_build(
    config_file: Path | None,
    section: str,
    base_section: dict[str, Any],
    section_overrides: dict[str, Any],
    overrides: dict[str, Any],
) -> BoxmakerConfiguration:
    """Load the config file, or start from ``base_section``, then apply CLI overrides.

    The file must be for this command before any override is merged into it.

    Raises:
        typer.Exit: With code 1 when the configuration is invalid.
    """
    try:
        if config_file is not None:
            base = require_section(load_config(config_file), section, config_file)
        else:
            base = load_config_from_dict({"schema_version": "1.0", section: base_section})
        return merge_config_with_cli(base, section_overrides=section_overrides, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _report_and_export(
    result: LayoutOutput,
    config: BoxmakerConfiguration,
    output_formats: str | None,
    output_dir: Path | None,
    project_name: str | None,
) -> None:
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    print_layout_summary(result)

    formats = parse_formats(output_formats if output_formats is not None else config.output.formats)
    if not formats:
        return

    out_dir = output_dir
    if out_dir is None and config.output.output_dir:
        out_dir = Path(config.output.output_dir)
    handle_multi_format_export(
        formats,
        out_dir,
        project_name or config.output.project_name,
        result,
        config.output.exporter_options(),
    )


@app.command()
def box(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Box width in mm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Box height in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Box depth in mm")
    ] = None,
    thickness: Annotated[
        float | None, typer.Option("--thickness", "-t", help="Material thickness in mm")
    ] = None,
    kerf: Annotated[
        float | None, typer.Option("--kerf", help="Laser kerf in mm")
    ] = None,
    reference: Annotated[
        str | None,
        typer.Option("--reference", help="Dimension reference: inside, outside"),
    ] = None,
    style: Annotated[
        str | None,
        typer.Option("--style", help="Joint style: finger_all_edges, finger_vertical_edges"),
    ] = None,
    lid: Annotated[
        str | None,
        typer.Option("--lid", help="Lid: none, flat_lid, flat_lid_with_lip, sliding_lid"),
    ] = None,
    open_front: Annotated[
        bool, typer.Option("--open-front", help="Build an open-front shell")
    ] = False,
    finger_min: Annotated[
        float | None, typer.Option("--finger-min", help="Minimum finger width in mm")
    ] = None,
    finger_max: Annotated[
        float | None, typer.Option("--finger-max", help="Maximum finger width in mm")
    ] = None,
    dividers_x: Annotated[
        int | None, typer.Option("--dividers-x", help="Compartments along the width")
    ] = None,
    dividers_z: Annotated[
        int | None, typer.Option("--dividers-z", help="Compartments along the depth")
    ] = None,
    sheet_width: Annotated[
        float | None, typer.Option("--sheet-width", help="Sheet width in mm")
    ] = None,
    sheet_height: Annotated[
        float | None, typer.Option("--sheet-height", help="Sheet height in mm")
    ] = None,
    spacing: Annotated[
        float | None, typer.Option("--spacing", help="Gap between panels in mm")
    ] = None,
    arrange: Annotated[
        bool | None,
        typer.Option("--arrange/--no-arrange", help="Pack panels within the sheet"),
    ] = None,
    auto_rotate: Annotated[
        bool | None,
        typer.Option("--auto-rotate/--no-auto-rotate", help="Allow 90 degree rotation"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,dxf,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Generate a finger-jointed box.

    Provide dimensions via options or a JSON configuration file. With
    --config, dimension, material, sheet and output options override the
    file values.

    Examples:
        boxmaker box --width 100 --height 60 --depth 80
        boxmaker box --width 100 --height 60 --depth 80 --lid sliding_lid
        boxmaker box --config my-box.json --output-formats svg,dxf --output-dir ./out
    """
    overrides: dict[str, Any] = {
        "width": width,
        "height": height,
        "depth": depth,
        "material_thickness": thickness,
        "kerf": kerf,
        "sheet_width": sheet_width,
        "sheet_height": sheet_height,
        "spacing": spacing,
        "arrange_on_sheet": arrange,
        "auto_rotate": auto_rotate,
    }

    if config_file is None and (width is None or height is None or depth is None):
        typer.echo(
            "Error: --width, --height, and --depth are required when --config is not provided",
            err=True,
        )
        raise typer.Exit(code=1)

    section_overrides: dict[str, Any] = {
        "dimension_reference": reference,
        "style": style,
        "open_front": True if open_front else None,
        "fingers": {"min": finger_min, "max": finger_max},
        "lid": {"type": lid},
    }
    if dividers_x is not None or dividers_z is not None:
        section_overrides["dividers"] = {
            "enabled": True,
            "count_x": dividers_x,
            "count_z": dividers_z,
        }

    config = _load_or_build(
        config_file,
        "box",
        {"width": width, "height": height, "depth": depth},
        section_overrides,
        overrides,
    )
    settings = box_config_to_settings(config.box)
    command = GenerateBoxCommand(ShelfPacker(layout_config_to_sheet(config.layout)))

    try:
        result = command.execute(
            settings,
            open_front=config.box.open_front,
            artwork=config_to_artwork(config),
        )
    except PathSyntaxError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _report_and_export(result, config, output_formats, output_dir, project_name)


@app.command()
def drawer(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Shell outside width in mm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Shell outside height in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Shell outside depth in mm")
    ] = None,
    thickness: Annotated[
        float | None, typer.Option("--thickness", "-t", help="Material thickness in mm")
    ] = None,
    kerf: Annotated[
        float | None, typer.Option("--kerf", help="Laser kerf in mm")
    ] = None,
    clearance: Annotated[
        float | None, typer.Option("--clearance", help="Running clearance in mm")
    ] = None,
    bottom_offset: Annotated[
        float | None, typer.Option("--bottom-offset", help="Gap below the drawer in mm")
    ] = None,
    finger_width: Annotated[
        float | None, typer.Option("--finger-width", help="Fixed finger width in mm")
    ] = None,
    sheet_width: Annotated[
        float | None, typer.Option("--sheet-width", help="Sheet width in mm")
    ] = None,
    sheet_height: Annotated[
        float | None, typer.Option("--sheet-height", help="Sheet height in mm")
    ] = None,
    spacing: Annotated[
        float | None, typer.Option("--spacing", help="Gap between panels in mm")
    ] = None,
    arrange: Annotated[
        bool | None,
        typer.Option("--arrange/--no-arrange", help="Pack panels within the sheet"),
    ] = None,
    auto_rotate: Annotated[
        bool | None,
        typer.Option("--auto-rotate/--no-auto-rotate", help="Allow 90 degree rotation"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,dxf,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Generate an open-front shell and a sliding drawer.

    Sizes are the outside dimensions of the shell; the drawer is derived
    from them. Without any size options the defaults (120 x 60 x 80 mm)
    are used.

    Examples:
        boxmaker drawer
        boxmaker drawer --width 150 --height 70 --depth 100 --clearance 0.8
        boxmaker drawer --config my-drawer.json --output-formats all
    """
    overrides: dict[str, Any] = {
        "width": width,
        "height": height,
        "depth": depth,
        "material_thickness": thickness,
        "kerf": kerf,
        "sheet_width": sheet_width,
        "sheet_height": sheet_height,
        "spacing": spacing,
        "arrange_on_sheet": arrange,
        "auto_rotate": auto_rotate,
    }

    section_overrides: dict[str, Any] = {
        "clearance": clearance,
        "bottom_offset": bottom_offset,
        "finger_width": finger_width,
    }
    config = _load_or_build(config_file, "drawer", {}, section_overrides, overrides)
    settings = drawer_config_to_settings(config.drawer)
    command = GenerateDrawerCommand(ShelfPacker(layout_config_to_sheet(config.layout)))

    try:
        result = command.execute(settings, artwork=config_to_artwork(config))
    except PathSyntaxError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _report_and_export(result, config, output_formats, output_dir, project_name)


if __name__ == "__main__":
    app()
