"""Exporter framework for box layouts.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF R2010 drawing in millimetres
- json: Full layout geometry as JSON
- svg: Laser-ready SVG at 1:1 scale

Usage:
    from fingerbox.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    svg = ExporterRegistry.get("svg")(stroke_width=0.05).export_string(layout)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["svg", "dxf"], layout)
"""

from fingerbox.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from fingerbox.infrastructure.exporters.dxf import DxfExporter
from fingerbox.infrastructure.exporters.json_exporter import (
    JsonExporter,
    layout_to_dict,
    panel_to_dict,
)
from fingerbox.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "SvgExporter",
    "layout_to_dict",
    "panel_to_dict",
]
