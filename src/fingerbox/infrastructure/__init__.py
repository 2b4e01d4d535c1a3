"""Infrastructure layer - exporters and console formatters."""

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
)
from .formatters import PanelSummaryFormatter, SpacingInfoFormatter, format_edge_types

__all__ = [
    "DxfExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "PanelSummaryFormatter",
    "SpacingInfoFormatter",
    "SvgExporter",
    "format_edge_types",
]
