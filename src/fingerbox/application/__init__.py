"""Application layer - use cases and orchestration."""

from .commands import GenerateBoxCommand
from .dtos import BoxInput, BoxOutput

__all__ = [
    "BoxInput",
    "BoxOutput",
    "GenerateBoxCommand",
]
