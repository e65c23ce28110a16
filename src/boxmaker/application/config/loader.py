"""Reading box and drawer configuration files.

A configuration is a JSON object with exactly one project section,
``box`` or ``drawer``, plus optional ``layout`` and ``output`` sections.
Every problem is raised as ``ConfigError``; its ``error_type`` tells the
CLI how to present it:

- ``file_not_found``, ``permission_denied``, ``file_read_error``: the file
  could not be read
- ``json_parse``: syntax error, with line and column in ``details``
- ``validation``: schema violations, one ``details`` entry per field with
  its JSON path (``box.material.thickness``, ``box.artwork[1].path``)
- ``wrong_section``: a valid file for the other command
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from boxmaker.application.config.schemas import BoxmakerConfiguration

logger = logging.getLogger(__name__)

PROJECT_SECTIONS = ("box", "drawer")


class ConfigError(Exception):
    """A configuration that cannot be used.

    Attributes:
        message: Text shown to the user.
        error_type: One of the categories listed in the module docstring.
        path: The configuration file, when there is one.
        details: Line/column for syntax errors, path/message/value per field
            for schema errors.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """``("box", "artwork", 0, "path")`` -> ``"box.artwork[0].path"``."""
    text = ""
    for segment in loc:
        if isinstance(segment, int):
            text += f"[{segment}]"
        else:
            text += f".{segment}" if text else str(segment)
    return text


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _describe_field_errors(details: list[dict[str, Any]], source: Path | None) -> str:
    where = f" in {source}" if source is not None else ""
    lines = [f"Configuration validation failed{where}:"]
    for detail in details:
        line = f"  - {detail['path'] or '<root>'}: {detail['message']}"
        value = detail["value"]
        # nested sections are echoed back whole by pydantic; only show scalars
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def read_config_data(path: Path) -> Any:
    """Read and parse a configuration file without validating it.

    Raises:
        ConfigError: For unreadable files and JSON syntax errors.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        )
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}", "file_read_error", path)

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config_from_dict(data: Any, source: Path | None = None) -> BoxmakerConfiguration:
    """Validate parsed configuration data.

    Args:
        data: Parsed JSON; must be an object.
        source: File the data came from, for error messages.

    Raises:
        ConfigError: With ``error_type="validation"``.
    """
    if not isinstance(data, dict):
        detail = {
            "path": "",
            "message": f"Expected a JSON object with a {' or '.join(PROJECT_SECTIONS)} section",
            "value": type(data).__name__,
            "error_type": "object_type",
        }
        raise ConfigError(
            _describe_field_errors([detail], source), "validation", source, [detail]
        )

    try:
        config = BoxmakerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _field_errors(e)
        raise ConfigError(
            _describe_field_errors(details, source), "validation", source, details
        )

    logger.debug(f"Loaded {project_section(config)} configuration from {source or 'dict'}")
    return config


def load_config(path: Path) -> BoxmakerConfiguration:
    """Read, parse and validate a configuration file.

    Example:
        >>> try:
        ...     config = load_config(Path("my-box.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    return load_config_from_dict(read_config_data(path), source=path)


def project_section(config: BoxmakerConfiguration) -> str:
    """Name of the project section the configuration holds."""
    return "box" if config.box is not None else "drawer"


def require_section(
    config: BoxmakerConfiguration, section: str, source: Path | None = None
) -> BoxmakerConfiguration:
    """Check that ``config`` is for the ``box`` or ``drawer`` command.

    Raises:
        ConfigError: With ``error_type="wrong_section"`` otherwise.
    """
    found = project_section(config)
    if found != section:
        where = f"{source} " if source is not None else ""
        raise ConfigError(
            f"Configuration {where}does not describe a {section} "
            f"(it has a '{found}' section)",
            "wrong_section",
            source,
        )
    return config
