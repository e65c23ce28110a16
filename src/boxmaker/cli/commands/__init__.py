"""CLI command implementations for the boxmaker application.

This package contains:
- validate: Validate a configuration file
- output_handlers: Layout summaries and multi-format export
"""

from boxmaker.cli.commands.output_handlers import (
    handle_multi_format_export,
    parse_formats,
    print_layout_summary,
)
from boxmaker.cli.commands.validate import validate_command

__all__ = [
    "handle_multi_format_export",
    "parse_formats",
    "print_layout_summary",
    "validate_command",
]
