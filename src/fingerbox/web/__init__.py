"""FastAPI REST API for finger-jointed box generation.

This module provides a REST API for generating box layouts and exporting
them as SVG, DXF or JSON.

Usage:
    uvicorn fingerbox.web:app --reload
"""

from fingerbox.web.app import app, create_app

__all__ = ["app", "create_app"]
