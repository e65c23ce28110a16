"""Domain exceptions.

The geometry core never raises for numeric input. The exceptions below
cover path strings handed in from outside the engine, where silently
dropping a command would corrupt the resulting geometry.
"""

from __future__ import annotations


class PathSyntaxError(ValueError):
    """Raised when a path string cannot be parsed.

    Attributes:
        path: The offending path string.
        position: Token index at which parsing failed, if known.
    """

    def __init__(self, message: str, path: str = "", position: int | None = None) -> None:
        self.path = path
        self.position = position
        super().__init__(message)


class UnsupportedPathCommand(PathSyntaxError):
    """Raised when a path string uses a command the parser does not handle.

    Attributes:
        command: The unsupported command letter.
    """

    def __init__(self, command: str, path: str = "", position: int | None = None) -> None:
        self.command = command
        super().__init__(
            f"Unsupported path command: {command}", path=path, position=position
        )
