"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from fingerbox.application.dtos import BoxInput
from fingerbox.domain import EdgeSelector


class BoxRequest(BaseModel):
    """Request for generating or exporting a box layout.

    Ranges match the configuration file limits.
    """

    width: float = Field(default=100.0, ge=30.0, le=500.0, description="Outer width in mm")
    depth: float = Field(default=80.0, ge=30.0, le=500.0, description="Outer depth in mm")
    height: float = Field(default=60.0, ge=20.0, le=300.0, description="Outer height in mm")
    thickness: float = Field(
        default=3.0, ge=1.0, le=12.0, description="Material thickness in mm"
    )
    finger_width: float = Field(
        default=10.0, ge=3.0, le=30.0, description="Desired finger width in mm"
    )
    kerf: float = Field(
        default=0.15, ge=0.0, le=0.5, description="Laser kerf in mm (not applied)"
    )
    edge_width: float = Field(
        default=1.5, ge=0.5, le=5.0, description="Hole inset in thicknesses"
    )
    surrounding_spaces: float = Field(
        default=1.0, ge=0.0, le=4.0, description="End margin in finger pitches"
    )
    play: float = Field(
        default=0.0, ge=0.0, le=0.5, description="Joint clearance in mm (not applied)"
    )
    top_edge: EdgeSelector = Field(
        default=EdgeSelector.OPEN, description="Joint between walls and top"
    )
    bottom_edge: EdgeSelector = Field(
        default=EdgeSelector.HOLE, description="Joint between walls and bottom"
    )

    @field_validator("top_edge", "bottom_edge", mode="before")
    @classmethod
    def parse_edge_alias(cls, v: object) -> object:
        """Accept legacy codes such as "F", "h", "s", "e"."""
        if isinstance(v, str):
            try:
                return EdgeSelector(v)
            except ValueError:
                return v
        return v

    def to_input(self) -> BoxInput:
        """Convert to the application input DTO."""
        return BoxInput(
            width=self.width,
            depth=self.depth,
            height=self.height,
            thickness=self.thickness,
            finger_width=self.finger_width,
            kerf=self.kerf,
            edge_width=self.edge_width,
            surrounding_spaces=self.surrounding_spaces,
            play=self.play,
            top_edge=self.top_edge.value,
            bottom_edge=self.bottom_edge.value,
        )


class GenerateFromConfigRequest(BaseModel):
    """Request for generating a box from a full configuration document."""

    config: dict[str, Any] = Field(..., description="Full box configuration JSON")
