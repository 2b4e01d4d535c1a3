"""Application commands (use cases) for box generation."""

from __future__ import annotations

import logging

from fingerbox.domain import BoxParameters, FingerBoxGenerator

from .dtos import BoxInput, BoxOutput

logger = logging.getLogger(__name__)


class GenerateBoxCommand:
    """Command to generate the panel layout for a finger-jointed box."""

    def __init__(self, generator: FingerBoxGenerator | None = None) -> None:
        self.generator = generator or FingerBoxGenerator()

    def execute(self, box_input: BoxInput) -> BoxOutput:
        """Validate the input and generate the layout.

        Args:
            box_input: Box dimensions, material and joint settings.

        Returns:
            BoxOutput with the layout, or with errors if the input is invalid.
        """
        errors = box_input.validate()
        if errors:
            return BoxOutput(layout=None, errors=errors)

        try:
            params = box_input.to_parameters()
        except ValueError as e:
            return BoxOutput(layout=None, errors=[str(e)])

        return self.execute_parameters(params)

    def execute_parameters(self, params: BoxParameters) -> BoxOutput:
        """Generate the layout from already-built parameters."""
        layout = self.generator.generate(params)
        logger.info(
            "Generated %s: %d panels, %d holes",
            params.slug,
            len(layout.panels),
            layout.total_holes,
        )
        return BoxOutput(layout=layout)
