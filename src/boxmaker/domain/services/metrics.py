"""Layout metrics and settings advisories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..value_objects import BoxSettings, DrawerSettings, GeneratedFace, PathOperation
from .outline import polygon_area, polyline_length
from .path_parser import parse_path

__all__ = [
    "LayoutMetrics",
    "SettingsAdvisories",
    "compute_layout_metrics",
    "path_length",
    "validate_box_settings",
    "validate_drawer_settings",
]


@dataclass(frozen=True)
class LayoutMetrics:
    """Aggregate figures for a set of panels.

    Attributes:
        panel_count: All panels, overflowed included.
        placed_count: Panels that fit within the layout bounds.
        overflow_count: Panels that could not be placed.
        cut_length: Total length of cut paths on placed panels, in mm.
        score_length: Total length of score paths on placed panels, in mm.
        panel_area: Sum of outline areas of placed panels, in mm².
        layout_area: Area of the layout bounds, in mm².
        utilization: ``panel_area / layout_area`` as a percentage.
    """

    panel_count: int
    placed_count: int
    overflow_count: int
    cut_length: float
    score_length: float
    panel_area: float
    layout_area: float
    utilization: float


@dataclass(frozen=True)
class SettingsAdvisories:
    """Errors and warnings raised by settings checks."""

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def path_length(d: str) -> float:
    """Length of a path string, curves flattened, closing edges included."""
    return sum(polyline_length(sub.points, closed=sub.closed) for sub in parse_path(d))


def compute_layout_metrics(
    faces: Sequence[GeneratedFace],
    overflow_ids: Iterable[str] = (),
    layout_width: float = 0.0,
    layout_height: float = 0.0,
) -> LayoutMetrics:
    """Summarise cut effort and material use of a layout.

    Overflowed panels are counted but excluded from lengths and areas.
    """
    overflow = set(overflow_ids)
    placed = [face for face in faces if face.id not in overflow]

    cut_length = 0.0
    score_length = 0.0
    panel_area = 0.0
    for face in placed:
        panel_area += polygon_area(face.vertices)
        for path in face.paths:
            if path.op is PathOperation.CUT:
                cut_length += path_length(path.d)
            elif path.op is PathOperation.SCORE:
                score_length += path_length(path.d)

    layout_area = max(layout_width, 0.0) * max(layout_height, 0.0)
    utilization = panel_area / layout_area * 100 if layout_area > 0 else 0.0
    return LayoutMetrics(
        panel_count=len(faces),
        placed_count=len(placed),
        overflow_count=len(faces) - len(placed),
        cut_length=cut_length,
        score_length=score_length,
        panel_area=panel_area,
        layout_area=layout_area,
        utilization=utilization,
    )


def _shared_checks(
    width: float, height: float, depth: float, thickness: float, kerf: float
) -> tuple[list[str], list[str]]:
    errors: list[str] = []
    warnings: list[str] = []

    if width > 1000:
        warnings.append("Width exceeds 1000mm - may not fit on standard laser beds")
    if depth > 1000:
        warnings.append("Depth exceeds 1000mm - may not fit on standard laser beds")
    if height > 500:
        warnings.append("Height exceeds 500mm - very tall box")
    if thickness > 10:
        warnings.append("Material thickness > 10mm is unusual for laser cutting")
    if kerf < 0:
        errors.append("Kerf cannot be negative")
    if kerf > 2:
        warnings.append("Kerf > 2mm is unusually large")
    if kerf > thickness:
        errors.append("Kerf cannot exceed material thickness")
    if min(width, height, depth) < thickness * 3:
        warnings.append(
            "Smallest dimension is less than 3x material thickness - box may be fragile"
        )
    return errors, warnings


def validate_box_settings(settings: BoxSettings) -> SettingsAdvisories:
    """Check box settings for values that build but are likely mistakes."""
    errors, warnings = _shared_checks(
        settings.width,
        settings.height,
        settings.depth,
        settings.material_thickness,
        settings.kerf,
    )
    if settings.finger_min > settings.finger_max:
        warnings.append("Minimum finger width is above maximum; the range will be widened")
    return SettingsAdvisories(errors=tuple(errors), warnings=tuple(warnings))


def validate_drawer_settings(settings: DrawerSettings) -> SettingsAdvisories:
    """Check drawer settings for values that build but are likely mistakes."""
    errors, warnings = _shared_checks(
        settings.width,
        settings.height,
        settings.depth,
        settings.material_thickness,
        settings.kerf,
    )
    if settings.clearance > 10:
        warnings.append("Drawer clearance > 10mm may be too loose")
    if settings.clearance < settings.kerf:
        warnings.append("Drawer clearance is less than kerf - drawer may bind")

    drawer_width = settings.width - 2 * settings.material_thickness - 2 * settings.clearance
    if drawer_width < 10:
        warnings.append("Drawer width too small. Increase box width or reduce clearance.")
    return SettingsAdvisories(errors=tuple(errors), warnings=tuple(warnings))
