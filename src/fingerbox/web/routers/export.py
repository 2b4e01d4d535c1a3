"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from fingerbox.infrastructure.exporters import ExporterRegistry
from fingerbox.web.dependencies import GenerateCommandDep
from fingerbox.web.exceptions import (
    ERROR_RESPONSES,
    BoxGenerationError,
    UnsupportedFormatError,
)
from fingerbox.web.schemas.requests import BoxRequest
from fingerbox.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}", responses=ERROR_RESPONSES)
async def export_box(
    format_name: str,
    request: BoxRequest,
    command: GenerateCommandDep,
) -> Response:
    """Export a box layout in the requested format.

    Args:
        format_name: Registered format name (svg, dxf, json).
        request: Box dimensions, material and joint settings.
        command: Injected GenerateBoxCommand.

    Returns:
        The exported file as an attachment.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format.
        BoxGenerationError: If the parameters cannot form a box.
    """
    format_name = format_name.lower()
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = command.execute(request.to_input())
    if not output.is_valid:
        raise BoxGenerationError(output.errors)

    exporter = ExporterRegistry.get(format_name)()
    content = exporter.export_string(output.layout)
    filename = f"{output.layout.parameters.slug}.{exporter.file_extension}"

    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
