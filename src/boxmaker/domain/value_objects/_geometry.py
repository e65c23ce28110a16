"""Planar geometry and finger-joint value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PathOperation(str, Enum):
    """Laser operation applied to a path.

    Attributes:
        CUT: Full-depth cut that separates material.
        SCORE: Shallow, non-through cut (grooves, guide lines).
        ENGRAVE: Raster/vector engraving, no material separation.
    """

    CUT = "cut"
    SCORE = "score"
    ENGRAVE = "engrave"


class EdgeDirection(str, Enum):
    """Axis along which an edge is walked."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class EdgeJoint(str, Enum):
    """Joint treatment of one panel edge.

    Attributes:
        TAB: Finger joint whose pattern starts with protruding material.
        SLOT: Finger joint with the complementary phase (starts recessed).
        PLAIN: Straight edge without any joint.
    """

    TAB = "tab"
    SLOT = "slot"
    PLAIN = "plain"

    @property
    def uses_fingers(self) -> bool:
        """True when the edge carries a finger pattern."""
        return self is not EdgeJoint.PLAIN

    @property
    def inverted(self) -> bool:
        """True when the finger pattern phase is flipped."""
        return self is EdgeJoint.SLOT


@dataclass(frozen=True)
class Point2D:
    """2D point in millimetres.

    Panel vertices use a y-up frame with the origin at the panel's
    bottom-left corner; path strings use the y-down frame of vector
    graphics.
    """

    x: float
    y: float

    def is_close(self, other: Point2D, eps: float = 1e-6) -> bool:
        """Check whether both coordinates differ by less than ``eps``."""
        return abs(self.x - other.x) < eps and abs(self.y - other.y) < eps


@dataclass(frozen=True)
class FingerSegment:
    """One tab or gap along an edge, as offsets from the edge start."""

    start: float
    end: float
    is_tab: bool

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class FingerPattern:
    """Alternating tab/gap segmentation of an edge.

    Attributes:
        length: Total edge length covered by the segments.
        finger_width: Nominal width of every segment.
        segments: Contiguous segments from 0 to ``length``, starting and
            ending with a tab.
    """

    length: float
    finger_width: float
    segments: tuple[FingerSegment, ...]

    def __post_init__(self) -> None:
        if len(self.segments) < 3:
            raise ValueError("Finger pattern needs at least 3 segments")
        if len(self.segments) % 2 == 0:
            raise ValueError("Finger pattern needs an odd number of segments")

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def tab_count(self) -> int:
        """Number of segments flagged as tabs."""
        return sum(1 for seg in self.segments if seg.is_tab)


@dataclass(frozen=True)
class FacePath:
    """A path string tagged with the operation used to produce it."""

    d: str
    op: PathOperation = PathOperation.CUT
