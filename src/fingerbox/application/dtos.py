"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from fingerbox.domain import BoxLayout, BoxParameters, EdgeSelector


@dataclass
class BoxInput:
    """Input DTO for box parameters, as received from a CLI, API or config."""

    width: float = 100.0
    depth: float = 80.0
    height: float = 60.0
    thickness: float = 3.0
    finger_width: float = 10.0
    kerf: float = 0.15
    edge_width: float = 1.5
    surrounding_spaces: float = 1.0
    play: float = 0.0
    top_edge: str = EdgeSelector.OPEN.value
    bottom_edge: str = EdgeSelector.HOLE.value

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        non_finite = [
            name
            for name in (
                "width",
                "depth",
                "height",
                "thickness",
                "finger_width",
                "kerf",
                "play",
                "edge_width",
                "surrounding_spaces",
            )
            if not math.isfinite(getattr(self, name))
        ]
        if non_finite:
            return [f"{name} must be a finite number" for name in non_finite]
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.depth <= 0:
            errors.append("Depth must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.thickness <= 0:
            errors.append("Material thickness must be positive")
        elif self.depth > 0 and self.depth <= 2 * self.thickness:
            errors.append("Depth must be greater than twice the material thickness")
        if self.finger_width <= 0:
            errors.append("Finger width must be positive")
        if self.kerf < 0:
            errors.append("Kerf cannot be negative")
        if self.play < 0:
            errors.append("Play cannot be negative")
        if self.edge_width < 0:
            errors.append("Edge width cannot be negative")
        if self.surrounding_spaces < 0:
            errors.append("Surrounding spaces cannot be negative")
        for name in ("top_edge", "bottom_edge"):
            value = getattr(self, name)
            try:
                EdgeSelector(value)
            except ValueError:
                valid = ", ".join(s.value for s in EdgeSelector)
                errors.append(f"{name} must be one of: {valid} (got {value!r})")
        return errors

    def to_parameters(self) -> BoxParameters:
        """Convert to the BoxParameters value object."""
        return BoxParameters(
            width=self.width,
            depth=self.depth,
            height=self.height,
            thickness=self.thickness,
            finger_width=self.finger_width,
            kerf=self.kerf,
            edge_width=self.edge_width,
            surrounding_spaces=self.surrounding_spaces,
            play=self.play,
            top_edge=EdgeSelector(self.top_edge),
            bottom_edge=EdgeSelector(self.bottom_edge),
        )


@dataclass
class BoxOutput:
    """Output DTO containing the generated box layout.

    Attributes:
        layout: Generated layout, or None when the input was invalid.
        errors: List of error messages if generation failed.
    """

    layout: BoxLayout | None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0 and self.layout is not None
