"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from boxmaker.domain.services import LayoutMetrics
from boxmaker.domain.value_objects import (
    BoxDimensions,
    BoxSettings,
    DrawerDimensions,
    DrawerSettings,
    GeneratedFace,
)

if TYPE_CHECKING:
    from boxmaker.infrastructure.sheet_packer import PackedLayout


@dataclass
class LayoutOutput:
    """Output DTO containing generated panels and their sheet layout.

    Attributes:
        kind: "box" or "drawer".
        settings: Settings snapshot the panels were generated from.
        faces: All generated panels.
        dimensions: Derived box or drawer dimensions.
        layout: Packed placement of the panels, if packing ran.
        metrics: Cut length, area and utilisation figures.
        warnings: Geometry and packing warnings.
        advisories: Non-blocking settings advisories.
        errors: Blocking errors; when present no panels are generated.
    """

    kind: str
    settings: BoxSettings | DrawerSettings
    faces: list[GeneratedFace] = field(default_factory=list)
    dimensions: BoxDimensions | DrawerDimensions | None = None
    layout: PackedLayout | None = None
    metrics: LayoutMetrics | None = None
    warnings: list[str] = field(default_factory=list)
    advisories: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0

    @property
    def kerf_compensation(self) -> bool:
        """Whether downstream tooling should offset outlines by half the kerf."""
        return isinstance(self.settings, BoxSettings) and self.settings.apply_kerf_compensation
