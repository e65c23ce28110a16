"""Shared plumbing for layout exporters.

Every format renders the same thing: the panels of one ``LayoutOutput``
at their packed positions. ``LayoutExporter`` owns the parts the formats
have in common (checking that the output was packed, picking the panels
that landed on the sheet, writing the file); subclasses only render.

Formats are looked up by name through ``EXPORT_FORMATS``, filled by the
``register_format`` class decorator when the format modules are imported.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from boxmaker.application.dtos import LayoutOutput
    from boxmaker.infrastructure.sheet_packer import PackedLayout, PlacedFace


logger = logging.getLogger(__name__)


class LayoutExporter(ABC):
    """Base class for SVG, DXF and JSON layout exporters.

    Attributes:
        format_name: Name used on the command line and in file names.
        file_extension: File extension without leading dot.
        needs_layout: Whether the format draws placed panels and so
            refuses output that was never packed.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    needs_layout: ClassVar[bool] = True

    @abstractmethod
    def render(self, output: LayoutOutput) -> str:
        """Render the whole document as text."""

    def export_string(self, output: LayoutOutput) -> str:
        """Check the output and render it.

        Raises:
            ValueError: If the format draws placements and the output
                has no packed layout.
        """
        if self.needs_layout:
            self.packed_layout(output)
        return self.render(output)

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Write the rendered document to ``path``."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Wrote {self.format_name} layout to {path}")

    def packed_layout(self, output: LayoutOutput) -> PackedLayout:
        """The packed layout of ``output``.

        Raises:
            ValueError: If the panels were never packed.
        """
        if output.layout is None:
            raise ValueError(
                f"{self.format_name.upper()} export requires a packed layout. "
                "Generate the panels with GenerateBoxCommand or GenerateDrawerCommand."
            )
        return output.layout

    def sheet_panels(self, output: LayoutOutput) -> tuple[PlacedFace, ...]:
        """Placements that fit on the sheet; overflowed panels are not drawn."""
        placed = self.packed_layout(output).placed
        if not placed:
            logger.warning(f"{output.kind} layout has no panels on the sheet")
        return placed


EXPORT_FORMATS: dict[str, type[LayoutExporter]] = {}


def register_format(cls: type[LayoutExporter]) -> type[LayoutExporter]:
    """Class decorator adding an exporter under its ``format_name``."""
    name = cls.format_name
    if name in EXPORT_FORMATS:
        logger.warning(f"Replacing exporter for format '{name}'")
    EXPORT_FORMATS[name] = cls
    return cls


def available_formats() -> list[str]:
    return sorted(EXPORT_FORMATS)


def exporter_class(format_name: str) -> type[LayoutExporter]:
    """Look up a registered format.

    Raises:
        KeyError: If the format is unknown; the message lists the known ones.
    """
    try:
        return EXPORT_FORMATS[format_name]
    except KeyError:
        known = ", ".join(available_formats()) or "none"
        raise KeyError(f"Unknown export format '{format_name}' (known: {known})") from None


class ExportManager:
    """Writes one layout into a directory in several formats.

    Files are named ``{project}_{format}.{ext}``. Formats are all checked
    before the first file is written, so a typo never leaves a partial set.

    Attributes:
        output_dir: Target directory, created on first export.
        exporter_options: Constructor keyword arguments per format
            (e.g. ``{"svg": {"show_labels": True}}``).
    """

    def __init__(
        self,
        output_dir: Path,
        exporter_options: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.exporter_options = exporter_options or {}

    def create_exporter(self, format_name: str) -> LayoutExporter:
        return exporter_class(format_name)(**self.exporter_options.get(format_name, {}))

    def file_path(self, format_name: str, project_name: str) -> Path:
        extension = exporter_class(format_name).file_extension
        return self.output_dir / f"{project_name}_{format_name}.{extension}"

    def export_all(
        self,
        formats: list[str],
        output: LayoutOutput,
        project_name: str = "box",
    ) -> dict[str, Path]:
        """Export ``output`` once per format.

        Returns:
            Written file per format name.

        Raises:
            KeyError: If any format is unknown.
            ValueError: If a drawing format gets an unpacked output.
        """
        exporters = {name: self.create_exporter(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.file_path(name, project_name)
            exporter.export(output, path)
            written[name] = path
        return written

    def export_single(
        self, format_name: str, output: LayoutOutput, project_name: str = "box"
    ) -> Path:
        return self.export_all([format_name], output, project_name)[format_name]
