"""Generated panel and dimension value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._geometry import FacePath, PathOperation, Point2D


class FaceName(str, Enum):
    """Functional role of a generated panel."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    LID = "lid"
    LID_LIP = "lid-lip"
    DIVIDER_X = "divider-x"
    DIVIDER_Z = "divider-z"
    DRAWER_FRONT = "drawer-front"
    DRAWER_BACK = "drawer-back"
    DRAWER_LEFT = "drawer-left"
    DRAWER_RIGHT = "drawer-right"
    DRAWER_BOTTOM = "drawer-bottom"


@dataclass(frozen=True)
class BoxDimensions:
    """Inner and outer envelope of a box, derived once from settings."""

    inner_width: float
    inner_height: float
    inner_depth: float
    outer_width: float
    outer_height: float
    outer_depth: float


@dataclass(frozen=True)
class DrawerDimensions:
    """Shell, drawer and opening sizes of a sliding drawer.

    Drawer sizes may be zero or negative when clearances exceed the shell;
    the composer reports that as a warning and builds a minimal drawer.
    """

    outer_width: float
    outer_depth: float
    outer_height: float
    inner_width: float
    inner_depth: float
    inner_height: float
    drawer_width: float
    drawer_depth: float
    drawer_height: float
    opening_width: float
    opening_height: float
    thickness: float
    clearance: float
    bottom_offset: float


@dataclass(frozen=True)
class GeneratedFace:
    """A flat, cuttable panel.

    Attributes:
        id: Identifier unique within one generation result.
        name: Functional role of the panel.
        width: Bounding width including finger protrusions.
        height: Bounding height including finger protrusions.
        vertices: Closed, simplified outline in the y-up panel frame,
            without a closing duplicate.
        outline_path: Outline as a path string in the y-down frame.
        paths: All paths of the panel; the outline cut comes first,
            followed by slots, grooves and merged artwork.
        offset: Optional sheet position when the panel is pre-placed.
    """

    id: str
    name: FaceName
    width: float
    height: float
    vertices: tuple[Point2D, ...]
    outline_path: str
    paths: tuple[FacePath, ...]
    offset: Point2D | None = None

    def paths_for(self, op: PathOperation) -> tuple[FacePath, ...]:
        """Return the paths tagged with the given operation."""
        return tuple(p for p in self.paths if p.op == op)

    @property
    def area(self) -> float:
        """Bounding-box area used for packing order."""
        return self.width * self.height


@dataclass(frozen=True)
class BoxGenerationResult:
    """Panels, dimensions and advisory warnings for one box."""

    faces: tuple[GeneratedFace, ...]
    dimensions: BoxDimensions
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def find(self, name: FaceName) -> GeneratedFace | None:
        """Return the first face with the given role, if any."""
        return next((f for f in self.faces if f.name == name), None)


@dataclass(frozen=True)
class DrawerGenerationResult:
    """Shell and drawer panels for a sliding drawer box."""

    shell_faces: tuple[GeneratedFace, ...]
    drawer_faces: tuple[GeneratedFace, ...]
    dimensions: DrawerDimensions
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def faces(self) -> tuple[GeneratedFace, ...]:
        """All panels, shell first."""
        return self.shell_faces + self.drawer_faces

    def find(self, name: FaceName) -> GeneratedFace | None:
        """Return the first face with the given role, if any."""
        return next((f for f in self.faces if f.name == name), None)
