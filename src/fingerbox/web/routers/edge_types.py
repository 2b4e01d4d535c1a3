"""Edge type listing endpoint."""

from fastapi import APIRouter

from fingerbox.domain import EdgeSelector
from fingerbox.web.schemas.responses import EdgeTypeSchema

router = APIRouter(prefix="/edge-types", tags=["edge-types"])


@router.get("", response_model=list[EdgeTypeSchema])
async def list_edge_types() -> list[EdgeTypeSchema]:
    """List the selectable top and bottom joint types."""
    return [
        EdgeTypeSchema(value=selector.value, code=selector.code, label=selector.label)
        for selector in EdgeSelector
    ]
