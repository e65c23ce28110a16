"""Shelf packing of generated panels onto a stock sheet.

Panels are placed largest-first, left to right in rows, wrapping to a new
row when the current one is full. Panels that cannot be placed within a
finite sheet are kept in the result, flagged as overflow.

All dataclasses are frozen; packing never mutates the panels it is given.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Sequence

from boxmaker.domain.value_objects import GeneratedFace, Point2D

logger = logging.getLogger(__name__)

VIRTUAL_AREA_FACTOR = 1.5


@dataclass(frozen=True)
class SheetSettings:
    """Stock sheet and arrangement options, in millimetres.

    Attributes:
        width: Sheet width.
        height: Sheet height.
        spacing: Gap kept between panels and rows.
        arrange_on_sheet: Pack within the sheet bounds. When False the
            packer uses unconstrained preview bounds.
        auto_rotate: Allow 90 degree rotation of non-square panels.
    """

    width: float = 300.0
    height: float = 200.0
    spacing: float = 3.0
    arrange_on_sheet: bool = False
    auto_rotate: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")
        if self.height <= 0:
            raise ValueError("Sheet height must be positive")
        if self.spacing < 0:
            raise ValueError("Spacing must be non-negative")


@dataclass(frozen=True)
class PlacedFace:
    """A panel placed at a position on the sheet.

    Attributes:
        face: The placed panel.
        x: Left edge on the sheet.
        y: Top edge on the sheet (y-down, like the panel paths).
        rotated: True if the panel is turned 90 degrees.
        overflow: True if the panel could not be placed within bounds.
    """

    face: GeneratedFace
    x: float
    y: float
    rotated: bool = False
    overflow: bool = False

    @property
    def placed_width(self) -> float:
        """Width of the panel as placed (accounts for rotation)."""
        return self.face.height if self.rotated else self.face.width

    @property
    def placed_height(self) -> float:
        """Height of the panel as placed (accounts for rotation)."""
        return self.face.width if self.rotated else self.face.height

    @property
    def transform(self) -> str:
        """Transform mapping panel path coordinates onto the sheet."""
        if self.rotated:
            return f"translate({self.x + self.face.height:g} {self.y:g}) rotate(90)"
        return f"translate({self.x:g} {self.y:g})"

    def to_face(self) -> GeneratedFace:
        """Return the panel with its sheet position recorded as offset."""
        return replace(self.face, offset=Point2D(self.x, self.y))


@dataclass(frozen=True)
class PackedLayout:
    """Result of packing panels onto a sheet.

    Attributes:
        faces: All panels, in their original order.
        placements: One entry per panel, in packing order.
        width: Width enclosing all non-overflow placements plus spacing.
        height: Height enclosing all non-overflow placements plus spacing.
        warnings: Human-readable packing warnings.
    """

    faces: tuple[GeneratedFace, ...]
    placements: tuple[PlacedFace, ...]
    width: float
    height: float
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def placed(self) -> tuple[PlacedFace, ...]:
        return tuple(p for p in self.placements if not p.overflow)

    @property
    def overflowed(self) -> tuple[PlacedFace, ...]:
        return tuple(p for p in self.placements if p.overflow)


@dataclass(frozen=True)
class _Candidate:
    x: float
    y: float
    width: float
    height: float
    rotated: bool
    wraps: bool
    row_height: float


class ShelfPacker:
    """Greedy shelf packer.

    Panels are sorted by area, then height, then width, all descending.
    Each panel is tried unrotated and, with auto-rotate, turned 90
    degrees. A candidate that stays on the current row beats one that
    wraps; otherwise the smaller resulting row height wins and ties keep
    the unrotated orientation.
    """

    def __init__(self, settings: SheetSettings | None = None) -> None:
        self.settings = settings or SheetSettings()

    def _bounds(self, faces: Sequence[GeneratedFace]) -> tuple[float, float]:
        if self.settings.arrange_on_sheet:
            return self.settings.width, self.settings.height
        total_area = sum(face.width * face.height for face in faces)
        widest = max((face.width for face in faces), default=0.0)
        return max(math.sqrt(total_area * VIRTUAL_AREA_FACTOR), widest), math.inf

    def _candidates(
        self,
        face: GeneratedFace,
        cursor_x: float,
        cursor_y: float,
        row_height: float,
        bound_w: float,
        bound_h: float,
    ) -> list[_Candidate]:
        spacing = self.settings.spacing
        sizes = [(face.width, face.height, False)]
        if self.settings.auto_rotate and face.width != face.height:
            sizes.append((face.height, face.width, True))

        candidates = []
        for width, height, rotated in sizes:
            if math.isfinite(bound_w) and width > bound_w:
                continue
            if math.isfinite(bound_h) and height > bound_h:
                continue
            if cursor_x == 0 or cursor_x + width <= bound_w:
                candidate = _Candidate(
                    cursor_x, cursor_y, width, height, rotated,
                    wraps=False, row_height=max(row_height, height),
                )
            else:
                candidate = _Candidate(
                    0.0, cursor_y + row_height + spacing, width, height, rotated,
                    wraps=True, row_height=height,
                )
            if math.isfinite(bound_h) and candidate.y + height > bound_h:
                continue
            candidates.append(candidate)
        return candidates

    def pack(self, faces: Sequence[GeneratedFace]) -> PackedLayout:
        """Place panels and report overflow.

        Args:
            faces: Panels to place; not modified.

        Returns:
            PackedLayout with one placement per panel.
        """
        spacing = self.settings.spacing
        bound_w, bound_h = self._bounds(faces)
        ordered = sorted(faces, key=lambda f: (f.width * f.height, f.height, f.width), reverse=True)

        placements: list[PlacedFace] = []
        warnings: list[str] = []
        cursor_x = 0.0
        cursor_y = 0.0
        row_height = 0.0

        for face in ordered:
            candidates = self._candidates(face, cursor_x, cursor_y, row_height, bound_w, bound_h)
            if not candidates:
                message = (
                    f"Part '{face.id}' ({face.width:.1f} x {face.height:.1f} mm) "
                    "does not fit on the sheet"
                )
                logger.warning("%s", message)
                warnings.append(message)
                placements.append(PlacedFace(face=face, x=0.0, y=0.0, overflow=True))
                continue

            best = min(candidates, key=lambda c: (c.wraps, c.row_height, c.rotated))
            placements.append(PlacedFace(face=face, x=best.x, y=best.y, rotated=best.rotated))
            cursor_x = best.x + best.width + spacing
            cursor_y = best.y
            row_height = best.row_height
            logger.debug(
                "Placed %s at (%.2f, %.2f)%s", face.id, best.x, best.y,
                " rotated" if best.rotated else "",
            )

        placed = [p for p in placements if not p.overflow]
        width = max((p.x + p.placed_width for p in placed), default=0.0)
        height = max((p.y + p.placed_height for p in placed), default=0.0)
        if placed:
            width += spacing
            height += spacing

        return PackedLayout(
            faces=tuple(faces),
            placements=tuple(placements),
            width=width,
            height=height,
            warnings=tuple(warnings),
        )


def pack_faces(
    faces: Sequence[GeneratedFace], settings: SheetSettings | None = None
) -> PackedLayout:
    """Pack panels with a ShelfPacker."""
    return ShelfPacker(settings).pack(faces)
