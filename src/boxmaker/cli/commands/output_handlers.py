"""Output handling functions for the boxmaker CLI.

This module prints layout summaries and exports layouts to the
registered file formats (SVG, DXF, JSON).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

if TYPE_CHECKING:
    from boxmaker.application.dtos import LayoutOutput

from boxmaker.infrastructure.exporters import ExportManager, available_formats

__all__ = [
    "handle_multi_format_export",
    "parse_formats",
    "print_layout_summary",
]


def parse_formats(output_formats: str | list[str] | None) -> list[str]:
    """Normalize a comma-separated string or list of formats.

    "all" expands to every registered format.
    """
    if not output_formats:
        return []
    if isinstance(output_formats, str):
        formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]
    else:
        formats = [f.lower() for f in output_formats]
    if "all" in formats:
        return available_formats()
    return formats


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
    exporter_options: dict[str, dict[str, Any]] | None = None,
) -> dict[str, Path]:
    """Export a layout to several formats and list the written files.

    Args:
        formats: Format names, already normalized with parse_formats.
        output_dir: Output directory for exported files (default ".").
        project_name: Project name for file naming.
        result: The layout output to export.
        exporter_options: Constructor keyword arguments per format.

    Returns:
        Mapping of format name to written file.

    Raises:
        typer.Exit: With code 1 for unknown formats or failed exports.
    """
    available = available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."), exporter_options)
    try:
        files = manager.export_all(formats, result, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")

    return files


def print_layout_summary(result: LayoutOutput) -> None:
    """Print panel sizes, layout metrics, warnings and advisories."""
    typer.echo(f"Generated {len(result.faces)} panels ({result.kind})")
    for face in result.faces:
        typer.echo(f"  {face.id:<24} {face.width:8.1f} x {face.height:8.1f} mm")

    metrics = result.metrics
    if metrics is not None:
        typer.echo()
        typer.echo(
            f"Layout: {result.layout.width:.1f} x {result.layout.height:.1f} mm, "
            f"{metrics.placed_count} placed, {metrics.overflow_count} overflow"
        )
        typer.echo(
            f"Cut length: {metrics.cut_length:.1f} mm, "
            f"score length: {metrics.score_length:.1f} mm, "
            f"utilization: {metrics.utilization:.1f}%"
        )

    if result.warnings:
        typer.echo()
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning}")

    if result.advisories:
        typer.echo()
        typer.echo("Advisories:")
        for advisory in result.advisories:
            typer.echo(f"  {advisory}")
