"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from boxmaker.application.config import (
    ConfigError,
    load_config,
    load_config_from_dict,
    project_section,
    read_config_data,
    require_section,
)
from boxmaker.application.config.loader import _format_json_path
from boxmaker.domain.value_objects import LidType

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


class TestFormatJsonPath:
    """Tests for _format_json_path."""

    def test_dotted(self) -> None:
        """Field names are joined with dots."""
        assert _format_json_path(("box", "material", "thickness")) == "box.material.thickness"

    def test_list_index(self) -> None:
        """Indices are attached in brackets."""
        assert _format_json_path(("box", "artwork", 0, "path")) == "box.artwork[0].path"

    def test_leading_index(self) -> None:
        """A leading index stands alone."""
        assert _format_json_path((2, "x")) == "[2].x"

    def test_empty(self) -> None:
        """An empty location is an empty path."""
        assert _format_json_path(()) == ""


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_box(self) -> None:
        """A valid box file loads."""
        config = load_config(FIXTURES_PATH / "valid_box.json")

        assert config.box.width == 100

    def test_valid_full(self) -> None:
        """Every section of the full fixture is read."""
        config = load_config(FIXTURES_PATH / "valid_full.json")

        assert config.box.lid.type is LidType.SLIDING_LID
        assert config.box.dividers.count_x == 3
        assert len(config.box.artwork) == 1
        assert config.layout.arrange_on_sheet
        assert config.output.formats == ["svg", "dxf", "json"]
        assert config.output.json_options.include_paths is False

    def test_valid_drawer(self) -> None:
        """A drawer file loads."""
        config = load_config(FIXTURES_PATH / "valid_drawer.json")

        assert config.drawer is not None
        assert config.drawer.clearance == 1

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Missing files raise file_not_found."""
        with pytest.raises(ConfigError) as exc:
            load_config(tmp_path / "missing.json")

        assert exc.value.error_type == "file_not_found"
        assert "not found" in str(exc.value)

    def test_invalid_json(self) -> None:
        """Syntax errors carry line and column."""
        with pytest.raises(ConfigError) as exc:
            load_config(FIXTURES_PATH / "invalid_json.json")

        assert exc.value.error_type == "json_parse"
        assert "line" in exc.value.details[0]
        assert "column" in exc.value.details[0]

    def test_unknown_field(self) -> None:
        """Unknown fields are validation errors with a path."""
        with pytest.raises(ConfigError) as exc:
            load_config(FIXTURES_PATH / "unknown_field.json")

        assert exc.value.error_type == "validation"
        assert any(d["path"] == "box.colour" for d in exc.value.details)

    def test_validation_error_path(self, tmp_path: Path) -> None:
        """Out-of-range values report their JSON path and value."""
        path = tmp_path / "thin.json"
        path.write_text(
            '{"schema_version": "1.0", "box": {"width": 100, "height": 60, "depth": 80,'
            ' "material": {"thickness": 0.1}}}'
        )

        with pytest.raises(ConfigError) as exc:
            load_config(path)

        (detail,) = exc.value.details
        assert detail["path"] == "box.material.thickness"
        assert detail["value"] == 0.1
        assert "box.material.thickness" in exc.value.message
        assert exc.value.path == path


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self) -> None:
        """A valid dictionary loads."""
        config = load_config_from_dict(
            {"schema_version": "1.0", "box": {"width": 10, "height": 10, "depth": 10}}
        )

        assert config.box.depth == 10

    def test_root_error(self) -> None:
        """Model-level errors have an empty path."""
        with pytest.raises(ConfigError) as exc:
            load_config_from_dict({"schema_version": "1.0"})

        assert exc.value.error_type == "validation"
        assert exc.value.path is None
        assert "<root>" in exc.value.message

    def test_not_an_object(self) -> None:
        """Top-level JSON that is not an object is a validation error."""
        with pytest.raises(ConfigError) as exc:
            load_config_from_dict([{"box": {}}])

        assert exc.value.error_type == "validation"
        assert "Expected a JSON object with a box or drawer section" in exc.value.message
        assert exc.value.details[0]["value"] == "list"


class TestReadConfigData:
    """Tests for read_config_data."""

    def test_parses_without_validating(self, tmp_path: Path) -> None:
        """Any JSON document is returned as parsed."""
        path = tmp_path / "any.json"
        path.write_text('{"anything": [1, 2]}')

        assert read_config_data(path) == {"anything": [1, 2]}

    def test_directory(self, tmp_path: Path) -> None:
        """Paths that cannot be read as files are read errors."""
        with pytest.raises(ConfigError) as exc:
            read_config_data(tmp_path)

        assert exc.value.error_type == "file_read_error"
        assert exc.value.path == tmp_path


class TestProjectSection:
    """Tests for project_section and require_section."""

    def test_project_section(self) -> None:
        """The section name follows the configured project."""
        assert project_section(load_config(FIXTURES_PATH / "valid_box.json")) == "box"
        assert project_section(load_config(FIXTURES_PATH / "valid_drawer.json")) == "drawer"

    def test_require_matching_section(self) -> None:
        """A matching configuration is returned unchanged."""
        config = load_config(FIXTURES_PATH / "valid_drawer.json")

        assert require_section(config, "drawer") is config

    def test_require_other_section(self) -> None:
        """A drawer file cannot be used as a box."""
        path = FIXTURES_PATH / "valid_drawer.json"

        with pytest.raises(ConfigError) as exc:
            require_section(load_config(path), "box", path)

        assert exc.value.error_type == "wrong_section"
        assert "does not describe a box (it has a 'drawer' section)" in exc.value.message
        assert exc.value.path == path
