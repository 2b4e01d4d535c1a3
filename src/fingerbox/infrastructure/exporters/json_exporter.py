"""JSON exporter for box layouts.

Serializes the full layout (parameters, bounds, panel outlines, holes and
edge joints) for renderers and other tools that consume the geometry
directly instead of a vector file.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from fingerbox.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from fingerbox.domain.value_objects import BoxLayout, Panel


def panel_to_dict(panel: Panel) -> dict[str, Any]:
    """Convert a panel to a JSON-compatible dictionary."""
    return {
        "id": panel.panel_id.value,
        "label": panel.label,
        "color": panel.color,
        "x": panel.x,
        "y": panel.y,
        "width": panel.width,
        "height": panel.height,
        "edges": {side.value: joint.value for side, joint in panel.edges.items()},
        "outline": [[x, y] for x, y in panel.outline],
        "holes": [asdict(hole) for hole in panel.holes],
    }


def layout_to_dict(layout: BoxLayout) -> dict[str, Any]:
    """Convert a box layout to a JSON-compatible dictionary."""
    params = asdict(layout.parameters)
    params["top_edge"] = layout.parameters.top_edge.value
    params["bottom_edge"] = layout.parameters.bottom_edge.value
    return {
        "parameters": params,
        "bounds": {"width": layout.bounds.width, "height": layout.bounds.height},
        "panels": [panel_to_dict(panel) for panel in layout.panels],
    }


@ExporterRegistry.register("json")
class JsonExporter:
    """JSON exporter for box layouts.

    Attributes:
        format_name: "json"
        file_extension: "json"
        media_type: MIME type for HTTP responses.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, layout: BoxLayout, path: Path) -> None:
        path.write_text(self.export_string(layout), encoding="utf-8")

    def export_string(self, layout: BoxLayout) -> str:
        return json.dumps(layout_to_dict(layout), indent=self.indent)
