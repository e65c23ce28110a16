"""Unit tests for sliding drawer composition."""

import pytest

from boxmaker.domain.services import (
    compute_drawer_dimensions,
    drawer_warnings,
    generate_sliding_drawer,
)
from boxmaker.domain.services.outline import is_simplified, polygon_area
from boxmaker.domain.value_objects import DrawerSettings, FaceName


class TestComputeDrawerDimensions:
    """Tests for compute_drawer_dimensions."""

    def test_defaults(self) -> None:
        """Drawer loses two clearances on width and one on depth and height."""
        dims = compute_drawer_dimensions(DrawerSettings())

        assert (dims.inner_width, dims.inner_depth, dims.inner_height) == (114, 74, 54)
        assert (dims.drawer_width, dims.drawer_depth, dims.drawer_height) == (112, 73, 53)
        assert dims.opening_width == 114
        assert dims.opening_height == 54

    def test_outer_size_is_clamped(self) -> None:
        """Outer sizes below 10 mm are raised to 10 mm."""
        dims = compute_drawer_dimensions(DrawerSettings(width=5))

        assert dims.outer_width == 10

    def test_thickness_is_clamped(self) -> None:
        """Thickness is at least 1 mm."""
        dims = compute_drawer_dimensions(DrawerSettings(material_thickness=0))

        assert dims.thickness == 1
        assert dims.inner_width == 118

    def test_negative_clearance_is_zero(self) -> None:
        """Clearance never goes negative."""
        dims = compute_drawer_dimensions(DrawerSettings(clearance=-1))

        assert dims.clearance == 0
        assert dims.drawer_width == dims.inner_width

    def test_bottom_offset_capped_at_half_cavity(self) -> None:
        """The drawer can be raised at most half the cavity height."""
        dims = compute_drawer_dimensions(DrawerSettings(bottom_offset=100))

        assert dims.bottom_offset == 27
        assert dims.drawer_height == pytest.approx(54 - 1 - 27)

    def test_bottom_offset_lowers_drawer(self) -> None:
        """A raised drawer is shorter by the offset."""
        dims = compute_drawer_dimensions(DrawerSettings(bottom_offset=5))

        assert dims.drawer_height == 48


class TestDrawerWarnings:
    """Tests for drawer_warnings."""

    def test_defaults_are_clean(self) -> None:
        """Default settings raise no warnings."""
        settings = DrawerSettings()

        assert drawer_warnings(settings, compute_drawer_dimensions(settings)) == []

    def test_clearance_below_kerf(self) -> None:
        """A clearance tighter than the beam binds."""
        settings = DrawerSettings(clearance=0.1, kerf=0.15)

        assert drawer_warnings(settings, compute_drawer_dimensions(settings)) == [
            "Drawer clearance is less than kerf. Drawer may bind."
        ]

    def test_invalid_dimensions(self) -> None:
        """Clearances larger than the cavity are reported."""
        settings = DrawerSettings(width=10, material_thickness=3, clearance=5)

        assert "Drawer dimensions are invalid. Check clearances and offsets." in (
            drawer_warnings(settings, compute_drawer_dimensions(settings))
        )

    @pytest.mark.parametrize("clearance", [0.0, 0.5, 4.0, 30.0])
    @pytest.mark.parametrize("bottom_offset", [0.0, 10.0, 200.0])
    def test_drawer_always_fits_its_opening(self, clearance: float, bottom_offset: float) -> None:
        """The opening is the drawer plus clearance, so only sizing problems are reported."""
        settings = DrawerSettings(height=40, clearance=clearance, bottom_offset=bottom_offset)
        dims = compute_drawer_dimensions(settings)

        assert dims.opening_height - dims.drawer_height == pytest.approx(dims.clearance)
        assert dims.opening_width - dims.drawer_width == pytest.approx(2 * dims.clearance)
        assert set(drawer_warnings(settings, dims)) <= {
            "Drawer clearance is less than kerf. Drawer may bind.",
            "Drawer dimensions are invalid. Check clearances and offsets.",
        }


class TestGenerateSlidingDrawer:
    """Tests for generate_sliding_drawer."""

    def test_panel_ids(self) -> None:
        """Shell and drawer panels carry prefixed ids."""
        result = generate_sliding_drawer(DrawerSettings())

        assert [f.id for f in result.shell_faces] == [
            "shell-back", "shell-left", "shell-right", "shell-bottom", "shell-top",
        ]
        assert [f.id for f in result.drawer_faces] == [
            "drawer-front", "drawer-back", "drawer-left", "drawer-right", "drawer-bottom",
        ]
        assert result.faces == result.shell_faces + result.drawer_faces

    def test_drawer_roles(self) -> None:
        """Drawer panels use the drawer face names."""
        result = generate_sliding_drawer(DrawerSettings())

        assert [f.name for f in result.drawer_faces] == [
            FaceName.DRAWER_FRONT,
            FaceName.DRAWER_BACK,
            FaceName.DRAWER_LEFT,
            FaceName.DRAWER_RIGHT,
            FaceName.DRAWER_BOTTOM,
        ]
        assert result.find(FaceName.DRAWER_FRONT).id == "drawer-front"

    def test_front_has_thumb_notch(self) -> None:
        """The notch removes material from the front only."""
        result = generate_sliding_drawer(DrawerSettings())
        front = result.find(FaceName.DRAWER_FRONT)
        back = result.find(FaceName.DRAWER_BACK)

        assert len(front.vertices) > len(back.vertices)
        assert polygon_area(front.vertices) < polygon_area(back.vertices)
        assert (front.width, front.height) == (back.width, back.height)

    def test_default_has_no_warnings(self) -> None:
        """Shell and drawer align under defaults."""
        result = generate_sliding_drawer(DrawerSettings())

        assert result.warnings == ()
        assert result.dimensions.drawer_width == 112

    def test_warnings_are_propagated(self) -> None:
        """Drawer advisories reach the result."""
        result = generate_sliding_drawer(DrawerSettings(clearance=0.1, kerf=0.15))

        assert "Drawer clearance is less than kerf. Drawer may bind." in result.warnings

    def test_invalid_settings_still_build(self) -> None:
        """Impossible clearances degrade to minimal geometry."""
        result = generate_sliding_drawer(
            DrawerSettings(width=10, material_thickness=3, clearance=5)
        )

        assert len(result.drawer_faces) == 5
        assert all(len(face.vertices) >= 3 for face in result.faces)

    def test_dividers(self) -> None:
        """Dividers are sized to the drawer cavity."""
        result = generate_sliding_drawer(
            DrawerSettings(dividers_enabled=True, divider_count_x=2, divider_count_z=1)
        )
        dividers = [f for f in result.drawer_faces if f.name is FaceName.DIVIDER_X]

        assert [f.id for f in dividers] == ["drawer-divider-x-1"]
        assert (dividers[0].width, dividers[0].height) == (67, 50)

    def test_outlines_are_simplified(self) -> None:
        """Every drawer panel outline is minimal."""
        result = generate_sliding_drawer(DrawerSettings(width=200, depth=150, height=90))

        for face in result.faces:
            assert is_simplified(face.vertices), face.id

    def test_deterministic(self) -> None:
        """Repeated generation is identical."""
        settings = DrawerSettings(width=150, bottom_offset=4)

        assert generate_sliding_drawer(settings) == generate_sliding_drawer(settings)
