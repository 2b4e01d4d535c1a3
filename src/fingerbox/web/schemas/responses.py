"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class HoleSchema(BaseModel):
    """Rectangular through-hole in absolute sheet coordinates."""

    x: float = Field(..., description="Left edge in mm")
    y: float = Field(..., description="Top edge in mm")
    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")


class BoundsSchema(BaseModel):
    """Sheet size needed to hold every panel."""

    width: float = Field(..., description="Sheet width in mm")
    height: float = Field(..., description="Sheet height in mm")


class PanelSchema(BaseModel):
    """One cut panel of the box."""

    id: str = Field(..., description="Panel identity (front, back, ...)")
    label: str = Field(..., description="Display label")
    color: str = Field(..., description="Preview color")
    x: float = Field(..., description="Sheet x of the panel origin in mm")
    y: float = Field(..., description="Sheet y of the panel origin in mm")
    width: float = Field(..., description="Nominal width in mm")
    height: float = Field(..., description="Nominal height in mm")
    edges: dict[str, str] = Field(..., description="Joint per side")
    outline: list[list[float]] = Field(..., description="Closed outline points")
    holes: list[HoleSchema] = Field(default_factory=list, description="Holes")


class BoxLayoutSchema(BaseModel):
    """Response for layout generation."""

    parameters: dict[str, Any] = Field(..., description="Parameters used")
    bounds: BoundsSchema = Field(..., description="Overall sheet bounds")
    panels: list[PanelSchema] = Field(..., description="Emitted panels")


class EdgeTypeSchema(BaseModel):
    """A selectable top or bottom joint type."""

    value: str = Field(..., description="Canonical selector value")
    code: str = Field(..., description="Short legacy code")
    label: str = Field(..., description="Display label")


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
