"""FastAPI dependency injection for box services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from fingerbox.application import GenerateBoxCommand
from fingerbox.domain import FingerBoxGenerator


@lru_cache(maxsize=1)
def get_generator() -> FingerBoxGenerator:
    """Get the shared (stateless) generator instance."""
    return FingerBoxGenerator()


def get_generate_command(
    generator: Annotated[FingerBoxGenerator, Depends(get_generator)],
) -> GenerateBoxCommand:
    """Dependency for GenerateBoxCommand."""
    return GenerateBoxCommand(generator)


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateBoxCommand, Depends(get_generate_command)]
