"""Path string parsing and flattening.

Parses the path-command syntax used for panel outlines and for artwork
handed in from outside the engine. Straight commands (M, L, H, V, Z) are
read exactly; cubic (C) and quadratic (Q) curves are flattened into
polylines. Anything else raises UnsupportedPathCommand.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Sequence

from ..exceptions import PathSyntaxError, UnsupportedPathCommand
from ..value_objects import Point2D
from .outline import polyline_to_path

MIN_FLATTEN_STEP = 0.25
DEFAULT_FLATTEN_STEP = 0.5

# operand count per command letter
_ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "Q": 4,
    "Z": 0,
}

_TOKEN_RE = re.compile(
    r"(?P<cmd>[A-Za-z])"
    r"|(?P<num>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<sep>[\s,]+)"
    r"|(?P<bad>.)"
)


@dataclass(frozen=True)
class Subpath:
    """One continuous run of a path.

    Attributes:
        points: Polyline points, without a closing duplicate when closed.
        closed: True if the run ends with Z or returns to its start.
    """

    points: tuple[Point2D, ...]
    closed: bool


def _tokenize(d: str) -> list[str | float]:
    tokens: list[str | float] = []
    for match in _TOKEN_RE.finditer(d):
        if match.group("cmd"):
            tokens.append(match.group("cmd"))
        elif match.group("num"):
            tokens.append(float(match.group("num")))
        elif match.group("bad"):
            raise PathSyntaxError(
                f"Unexpected character {match.group('bad')!r} in path",
                path=d,
                position=match.start(),
            )
    return tokens


def _flatten_cubic(
    p0: Point2D, p1: Point2D, p2: Point2D, p3: Point2D, step: float
) -> list[Point2D]:
    hull = (
        math.dist((p0.x, p0.y), (p1.x, p1.y))
        + math.dist((p1.x, p1.y), (p2.x, p2.y))
        + math.dist((p2.x, p2.y), (p3.x, p3.y))
    )
    count = max(1, math.ceil(hull / step))
    points = []
    for i in range(1, count + 1):
        t = i / count
        mt = 1 - t
        a = mt * mt * mt
        b = 3 * mt * mt * t
        c = 3 * mt * t * t
        e = t * t * t
        points.append(
            Point2D(
                a * p0.x + b * p1.x + c * p2.x + e * p3.x,
                a * p0.y + b * p1.y + c * p2.y + e * p3.y,
            )
        )
    return points


def _flatten_quadratic(p0: Point2D, p1: Point2D, p2: Point2D, step: float) -> list[Point2D]:
    hull = math.dist((p0.x, p0.y), (p1.x, p1.y)) + math.dist((p1.x, p1.y), (p2.x, p2.y))
    count = max(1, math.ceil(hull / step))
    points = []
    for i in range(1, count + 1):
        t = i / count
        mt = 1 - t
        points.append(
            Point2D(
                mt * mt * p0.x + 2 * mt * t * p1.x + t * t * p2.x,
                mt * mt * p0.y + 2 * mt * t * p1.y + t * t * p2.y,
            )
        )
    return points


def _finish(points: list[Point2D], closed: bool) -> Subpath | None:
    if not points:
        return None
    if len(points) >= 2:
        first, last = points[0], points[-1]
        returns_home = (first.x - last.x) ** 2 + (first.y - last.y) ** 2 < 1e-6
        if returns_home:
            points = points[:-1]
            closed = closed or len(points) >= 2
    return Subpath(points=tuple(points), closed=closed)


def parse_path(d: str, step: float = DEFAULT_FLATTEN_STEP) -> tuple[Subpath, ...]:
    """Parse a path string into flattened subpaths.

    Args:
        d: Path string using M/L/H/V/Z/C/Q commands, absolute or relative.
        step: Target chord length for curve flattening; values below
            0.25 mm are raised to 0.25 mm.

    Returns:
        Subpaths in the order they appear; empty for an empty string.

    Raises:
        UnsupportedPathCommand: If a command letter is not supported.
        PathSyntaxError: If operands are missing or the string does not
            start with a command.
    """
    step = max(step, MIN_FLATTEN_STEP)
    tokens = _tokenize(d)
    subpaths: list[Subpath] = []

    current: list[Point2D] = []
    x = y = 0.0
    start_x = start_y = 0.0
    command: str | None = None
    i = 0

    def operands(count: int) -> list[float]:
        nonlocal i
        values = tokens[i : i + count]
        if len(values) < count or any(isinstance(v, str) for v in values):
            raise PathSyntaxError(
                f"Command {command} expects {count} numbers", path=d, position=i
            )
        i += count
        return [float(v) for v in values]

    while i < len(tokens):
        token = tokens[i]
        if isinstance(token, str):
            if token.upper() not in _ARITY:
                raise UnsupportedPathCommand(token, path=d, position=i)
            command = token
            i += 1
            if command in "Zz":
                finished = _finish(current, closed=True)
                if finished is not None:
                    subpaths.append(finished)
                current = []
                x, y = start_x, start_y
                continue
        elif command is None:
            raise PathSyntaxError("Path must start with a command", path=d, position=i)
        elif command in "Zz":
            raise PathSyntaxError("Close command takes no numbers", path=d, position=i)

        upper = command.upper()
        relative = command.islower()
        base_x, base_y = (x, y) if relative else (0.0, 0.0)

        if upper == "M":
            mx, my = operands(2)
            finished = _finish(current, closed=False)
            if finished is not None:
                subpaths.append(finished)
            x, y = base_x + mx, base_y + my
            start_x, start_y = x, y
            current = [Point2D(x, y)]
            # extra coordinate pairs after a move are line-tos
            command = "l" if relative else "L"
            continue

        if not current:
            current = [Point2D(x, y)]

        if upper == "L":
            lx, ly = operands(2)
            x, y = base_x + lx, base_y + ly
            current.append(Point2D(x, y))
        elif upper == "H":
            (hx,) = operands(1)
            x = base_x + hx
            current.append(Point2D(x, y))
        elif upper == "V":
            (vy,) = operands(1)
            y = base_y + vy
            current.append(Point2D(x, y))
        elif upper == "C":
            x1, y1, x2, y2, ex, ey = operands(6)
            p0 = Point2D(x, y)
            p1 = Point2D(base_x + x1, base_y + y1)
            p2 = Point2D(base_x + x2, base_y + y2)
            p3 = Point2D(base_x + ex, base_y + ey)
            current.extend(_flatten_cubic(p0, p1, p2, p3, step))
            x, y = p3.x, p3.y
        elif upper == "Q":
            x1, y1, ex, ey = operands(4)
            p0 = Point2D(x, y)
            p1 = Point2D(base_x + x1, base_y + y1)
            p2 = Point2D(base_x + ex, base_y + ey)
            current.extend(_flatten_quadratic(p0, p1, p2, step))
            x, y = p2.x, p2.y

    finished = _finish(current, closed=False)
    if finished is not None:
        subpaths.append(finished)
    return tuple(subpaths)


def transform_subpaths(
    subpaths: Sequence[Subpath], fn: Callable[[Point2D], Point2D]
) -> tuple[Subpath, ...]:
    """Apply a point transform to every subpath."""
    return tuple(
        Subpath(points=tuple(fn(p) for p in sub.points), closed=sub.closed)
        for sub in subpaths
    )


def subpaths_to_path(subpaths: Sequence[Subpath]) -> str:
    """Emit subpaths as one absolute path string."""
    return " ".join(
        polyline_to_path(sub.points, closed=sub.closed) for sub in subpaths if sub.points
    )
