"""API routers for the REST API."""

from fingerbox.web.routers.edge_types import router as edge_types_router
from fingerbox.web.routers.export import router as export_router
from fingerbox.web.routers.generate import router as generate_router

__all__ = [
    "edge_types_router",
    "export_router",
    "generate_router",
]
