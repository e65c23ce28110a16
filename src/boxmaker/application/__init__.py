"""Application layer - use cases and configuration."""

from .commands import GenerateBoxCommand, GenerateDrawerCommand
from .dtos import LayoutOutput

__all__ = [
    "GenerateBoxCommand",
    "GenerateDrawerCommand",
    "LayoutOutput",
]
