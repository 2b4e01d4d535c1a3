"""Pydantic schemas for the REST API."""

from fingerbox.web.schemas.requests import BoxRequest, GenerateFromConfigRequest
from fingerbox.web.schemas.responses import (
    BoundsSchema,
    BoxLayoutSchema,
    EdgeTypeSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    HoleSchema,
    PanelSchema,
)

__all__ = [
    # Requests
    "BoxRequest",
    "GenerateFromConfigRequest",
    # Responses
    "BoundsSchema",
    "BoxLayoutSchema",
    "EdgeTypeSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "HoleSchema",
    "PanelSchema",
]
