"""Unit tests for layout metrics and settings advisories."""

import pytest

from boxmaker.domain.services import (
    compute_layout_metrics,
    path_length,
    validate_box_settings,
    validate_drawer_settings,
)
from boxmaker.domain.services.panel_assembler import add_extra_paths, create_rect_face
from boxmaker.domain.value_objects import (
    BoxSettings,
    DrawerSettings,
    FaceName,
    FacePath,
    PathOperation,
)


class TestPathLength:
    """Tests for path_length."""

    def test_closed_rectangle(self) -> None:
        """The closing edge counts."""
        assert path_length("M 0 0 H 10 V 5 H 0 Z") == pytest.approx(30.0)

    def test_open_line(self) -> None:
        """Open paths have no closing edge."""
        assert path_length("M 0 0 H 10") == pytest.approx(10.0)

    def test_multiple_subpaths(self) -> None:
        """Subpath lengths are summed."""
        assert path_length("M 0 0 H 10 M 0 5 V 10") == pytest.approx(15.0)

    def test_empty(self) -> None:
        """An empty path has no length."""
        assert path_length("") == 0.0


class TestComputeLayoutMetrics:
    """Tests for compute_layout_metrics."""

    def test_single_panel(self) -> None:
        """Cut length, area and utilisation of one rectangle."""
        face = create_rect_face(FaceName.FRONT, "front", 10.0, 5.0)
        metrics = compute_layout_metrics([face], layout_width=20.0, layout_height=10.0)

        assert metrics.cut_length == pytest.approx(30.0)
        assert metrics.panel_area == pytest.approx(50.0)
        assert metrics.layout_area == pytest.approx(200.0)
        assert metrics.utilization == pytest.approx(25.0)
        assert metrics.placed_count == 1

    def test_score_length_is_separate(self) -> None:
        """Score paths are totalled apart from cuts."""
        face = add_extra_paths(
            create_rect_face(FaceName.LEFT, "left", 10.0, 5.0),
            [FacePath(d="M 1 1 H 9", op=PathOperation.SCORE)],
        )
        metrics = compute_layout_metrics([face])

        assert metrics.cut_length == pytest.approx(30.0)
        assert metrics.score_length == pytest.approx(8.0)

    def test_engrave_not_counted(self) -> None:
        """Engraving contributes to neither total."""
        face = add_extra_paths(
            create_rect_face(FaceName.FRONT, "front", 10.0, 5.0),
            [FacePath(d="M 1 1 H 9", op=PathOperation.ENGRAVE)],
        )
        metrics = compute_layout_metrics([face])

        assert metrics.cut_length == pytest.approx(30.0)
        assert metrics.score_length == 0.0

    def test_overflow_excluded(self) -> None:
        """Overflowed panels are counted but not measured."""
        faces = [
            create_rect_face(FaceName.FRONT, "front", 10.0, 5.0),
            create_rect_face(FaceName.BACK, "back", 10.0, 5.0),
        ]
        metrics = compute_layout_metrics(faces, overflow_ids=["back"])

        assert metrics.panel_count == 2
        assert metrics.placed_count == 1
        assert metrics.overflow_count == 1
        assert metrics.cut_length == pytest.approx(30.0)

    def test_no_layout_area(self) -> None:
        """Utilisation is zero without layout bounds."""
        face = create_rect_face(FaceName.FRONT, "front", 10.0, 5.0)

        assert compute_layout_metrics([face]).utilization == 0.0


class TestValidateBoxSettings:
    """Tests for validate_box_settings."""

    def test_defaults_are_clean(self, default_box_settings: BoxSettings) -> None:
        """A sensible box raises nothing."""
        advisories = validate_box_settings(default_box_settings)

        assert advisories.is_valid
        assert advisories.errors == ()
        assert advisories.warnings == ()

    def test_kerf_exceeds_thickness(self) -> None:
        """Oversized kerf is an error and a warning."""
        advisories = validate_box_settings(BoxSettings(material_thickness=3, kerf=4))

        assert not advisories.is_valid
        assert advisories.errors == ("Kerf cannot exceed material thickness",)
        assert "Kerf > 2mm is unusually large" in advisories.warnings

    def test_negative_kerf(self) -> None:
        """Negative kerf is an error."""
        advisories = validate_box_settings(BoxSettings(kerf=-0.1))

        assert "Kerf cannot be negative" in advisories.errors

    def test_large_width(self) -> None:
        """Widths beyond a laser bed are flagged."""
        advisories = validate_box_settings(BoxSettings(width=1200))

        assert advisories.is_valid
        assert "Width exceeds 1000mm - may not fit on standard laser beds" in advisories.warnings

    def test_thick_material(self) -> None:
        """Thick stock is unusual."""
        advisories = validate_box_settings(
            BoxSettings(width=100, height=60, depth=80, material_thickness=12)
        )

        assert "Material thickness > 10mm is unusual for laser cutting" in advisories.warnings

    def test_fragile_box(self) -> None:
        """Small boxes relative to thickness are flagged."""
        advisories = validate_box_settings(BoxSettings(height=8, material_thickness=3))

        assert any("may be fragile" in w for w in advisories.warnings)

    def test_inverted_finger_range(self) -> None:
        """An inverted finger range is a warning."""
        advisories = validate_box_settings(BoxSettings(finger_min=20, finger_max=10))

        assert any("Minimum finger width" in w for w in advisories.warnings)


class TestValidateDrawerSettings:
    """Tests for validate_drawer_settings."""

    def test_defaults_are_clean(self) -> None:
        """Default drawer settings raise nothing."""
        advisories = validate_drawer_settings(DrawerSettings())

        assert advisories.errors == ()
        assert advisories.warnings == ()

    def test_tight_clearance(self) -> None:
        """Clearance below kerf may bind."""
        advisories = validate_drawer_settings(DrawerSettings(clearance=0.1, kerf=0.15))

        assert "Drawer clearance is less than kerf - drawer may bind" in advisories.warnings

    def test_loose_clearance(self) -> None:
        """Very loose clearances are flagged."""
        advisories = validate_drawer_settings(DrawerSettings(clearance=20))

        assert "Drawer clearance > 10mm may be too loose" in advisories.warnings

    def test_narrow_drawer(self) -> None:
        """A drawer narrower than 10 mm is flagged."""
        advisories = validate_drawer_settings(DrawerSettings(width=18, clearance=2))

        assert any("Drawer width too small" in w for w in advisories.warnings)
