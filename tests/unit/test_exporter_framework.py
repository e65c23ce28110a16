"""Unit tests for the format registry, LayoutExporter and ExportManager."""

from dataclasses import replace
from pathlib import Path
from typing import ClassVar

import pytest

from boxmaker.application.dtos import LayoutOutput
from boxmaker.infrastructure.exporters import (
    EXPORT_FORMATS,
    DxfExporter,
    ExportManager,
    JsonLayoutExporter,
    LayoutExporter,
    SvgExporter,
    available_formats,
    exporter_class,
    register_format,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def restore_formats():
    """Put the registered formats back after the test."""
    saved = dict(EXPORT_FORMATS)
    yield
    EXPORT_FORMATS.clear()
    EXPORT_FORMATS.update(saved)


class PanelListExporter(LayoutExporter):
    """Minimal drawing format listing the panels on the sheet."""

    format_name: ClassVar[str] = "txt"
    file_extension: ClassVar[str] = "txt"

    def render(self, output: LayoutOutput) -> str:
        return "\n".join(p.face.id for p in self.sheet_panels(output))


class TestFormatRegistry:
    """Tests for register_format and exporter_class."""

    def test_builtin_formats(self) -> None:
        """svg, dxf and json are registered on import."""
        assert available_formats() == ["dxf", "json", "svg"]
        assert exporter_class("svg") is SvgExporter
        assert exporter_class("dxf") is DxfExporter
        assert exporter_class("json") is JsonLayoutExporter

    def test_unknown_format(self) -> None:
        """Unknown formats raise KeyError listing the known ones."""
        with pytest.raises(KeyError, match=r"known: dxf, json, svg"):
            exporter_class("pdf")

    @pytest.mark.usefixtures("restore_formats")
    def test_register_uses_format_name(self) -> None:
        """The decorator registers a class under its own format_name."""
        assert register_format(PanelListExporter) is PanelListExporter
        assert exporter_class("txt") is PanelListExporter
        assert "txt" in available_formats()

    @pytest.mark.usefixtures("restore_formats")
    def test_empty_registry(self) -> None:
        """With nothing registered the message says so."""
        EXPORT_FORMATS.clear()

        with pytest.raises(KeyError, match="none"):
            exporter_class("svg")

    def test_builtin_exporters_share_base(self) -> None:
        """Every built-in format derives from LayoutExporter."""
        for cls in EXPORT_FORMATS.values():
            assert issubclass(cls, LayoutExporter)


class TestLayoutExporter:
    """Tests for the shared LayoutExporter behaviour."""

    def test_render_sees_sheet_panels(self, box_output: LayoutOutput) -> None:
        """sheet_panels yields the placed panels."""
        content = PanelListExporter().export_string(box_output)

        assert sorted(content.splitlines()) == sorted(f.id for f in box_output.faces)

    def test_unpacked_output_rejected(self, box_output: LayoutOutput) -> None:
        """Drawing formats name themselves when the layout is missing."""
        with pytest.raises(ValueError, match="TXT export requires a packed layout"):
            PanelListExporter().export_string(replace(box_output, layout=None))

    def test_json_accepts_unpacked_output(self, box_output: LayoutOutput) -> None:
        """JSON does not draw placements, so it needs no layout."""
        content = JsonLayoutExporter().export_string(replace(box_output, layout=None))

        assert '"placements": []' in content

    def test_export_writes_rendered_text(self, box_output: LayoutOutput, tmp_path: Path) -> None:
        """export() writes export_string() to disk."""
        path = tmp_path / "panels.txt"
        PanelListExporter().export(box_output, path)

        assert path.read_text(encoding="utf-8") == PanelListExporter().render(box_output)


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all(self, box_output: LayoutOutput, tmp_path: Path) -> None:
        """Each format is written as {project}_{format}.{ext}."""
        manager = ExportManager(output_dir=tmp_path / "out")
        results = manager.export_all(["svg", "dxf", "json"], box_output, project_name="tray")

        assert results == {
            "svg": tmp_path / "out" / "tray_svg.svg",
            "dxf": tmp_path / "out" / "tray_dxf.dxf",
            "json": tmp_path / "out" / "tray_json.json",
        }
        assert all(path.exists() for path in results.values())

    def test_export_single(self, box_output: LayoutOutput, tmp_path: Path) -> None:
        """A single format returns its path."""
        path = ExportManager(output_dir=tmp_path).export_single("json", box_output)

        assert path == tmp_path / "box_json.json"
        assert path.read_text(encoding="utf-8").startswith("{")

    def test_options_reach_constructor(self) -> None:
        """Per-format options are passed to the exporter."""
        manager = ExportManager(
            output_dir=Path("."),
            exporter_options={"svg": {"show_labels": True, "margin": 2.0}},
        )
        exporter = manager.create_exporter("svg")

        assert exporter.show_labels
        assert exporter.margin == 2.0
        assert manager.create_exporter("json").indent == 2

    def test_unknown_format_writes_nothing(
        self, box_output: LayoutOutput, tmp_path: Path
    ) -> None:
        """An unknown format in the list stops the export before any file."""
        out = tmp_path / "out"

        with pytest.raises(KeyError):
            ExportManager(output_dir=out).export_all(["svg", "pdf"], box_output)
        assert not out.exists()
