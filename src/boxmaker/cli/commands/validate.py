"""Validate command for checking configuration files.

Checks a JSON configuration for syntax and schema errors, then runs the
geometry advisories (kerf against thickness, oversized parts, artwork
targets, sheet fit) without writing any output.
"""

from pathlib import Path
from typing import Annotated

import typer

from boxmaker.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)

_LOAD_ERROR_HEADINGS = {
    "file_not_found": "File not found",
    "permission_denied": "Permission denied",
    "file_read_error": "Could not read file",
    "json_parse": "Invalid JSON syntax",
    "validation": "Schema validation failed",
}


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    heading = _LOAD_ERROR_HEADINGS.get(error.error_type)
    if heading is None:
        typer.echo(f"  {error.message}", err=True)
    elif error.error_type == "json_parse":
        typer.echo(f"  {heading}", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path') or '<root>'}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {heading}: {error.path}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a box or drawer configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        boxmaker validate my-box.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
