"""Box generation endpoints."""

from fastapi import APIRouter

from fingerbox.application.config import config_to_input, load_config_from_dict
from fingerbox.domain import BoxLayout
from fingerbox.infrastructure.exporters import layout_to_dict
from fingerbox.web.dependencies import GenerateCommandDep
from fingerbox.web.exceptions import ERROR_RESPONSES, BoxGenerationError
from fingerbox.web.schemas.requests import BoxRequest, GenerateFromConfigRequest
from fingerbox.web.schemas.responses import BoxLayoutSchema

router = APIRouter(prefix="/generate", tags=["generate"])


def _layout_to_schema(layout: BoxLayout) -> BoxLayoutSchema:
    """Convert a BoxLayout to the response schema."""
    return BoxLayoutSchema.model_validate(layout_to_dict(layout))


@router.post("", response_model=BoxLayoutSchema, responses=ERROR_RESPONSES)
async def generate_box(
    request: BoxRequest,
    command: GenerateCommandDep,
) -> BoxLayoutSchema:
    """Generate the panel layout for a box.

    Args:
        request: Box dimensions, material and joint settings.
        command: Injected GenerateBoxCommand.

    Returns:
        Panels with outlines, holes and sheet bounds.

    Raises:
        BoxGenerationError: If the parameters cannot form a box.
    """
    output = command.execute(request.to_input())
    if not output.is_valid:
        raise BoxGenerationError(output.errors)
    return _layout_to_schema(output.layout)


@router.post(
    "/from-config", response_model=BoxLayoutSchema, responses=ERROR_RESPONSES
)
async def generate_from_config(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> BoxLayoutSchema:
    """Generate a layout from a full configuration document.

    Accepts the same JSON as a configuration file. Configuration errors are
    reported with dotted field paths.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_input(config))
    if not output.is_valid:
        raise BoxGenerationError(output.errors)
    return _layout_to_schema(output.layout)
