"""SVG exporter for laser cutting.

Writes a 1:1 document in millimetres: the root element's physical size is
the layout bounds, and the viewBox uses the same numbers so one user unit
is one millimetre. Each panel becomes one outline path plus, when it has
holes, one path holding every hole as an independent closed rectangle.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from fingerbox.domain.services import round3
from fingerbox.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from fingerbox.domain.value_objects import BoxLayout, Hole, Panel, Point


def fmt(n: float) -> str:
    """Format a coordinate with at most 3 decimals and no trailing zeros."""
    text = f"{n:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def outline_path_data(outline: tuple[Point, ...]) -> str:
    """Path data for a closed outline (``M ... L ... Z``)."""
    if not outline:
        return ""
    x0, y0 = outline[0]
    parts = [f"M {fmt(x0)} {fmt(y0)}"]
    parts.extend(f"L {fmt(x)} {fmt(y)}" for x, y in outline[1:])
    parts.append("Z")
    return " ".join(parts)


def hole_path_data(hole: Hole) -> str:
    """Path data for one hole: four line segments and a close."""
    x0 = fmt(hole.x)
    y0 = fmt(hole.y)
    x1 = fmt(round3(hole.x + hole.width))
    y1 = fmt(round3(hole.y + hole.height))
    return f"M {x0} {y0} L {x1} {y0} L {x1} {y1} L {x0} {y1} Z"


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for box cut sheets.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
        media_type: MIME type for HTTP responses.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, stroke_width: float = 0.1, stroke_color: str = "#000") -> None:
        """Initialize the SVG exporter.

        Args:
            stroke_width: Cut line width in mm (default 0.1, a hairline for
                most laser software).
            stroke_color: Cut line color (default black).
        """
        self.stroke_width = stroke_width
        self.stroke_color = stroke_color

    def export(self, layout: BoxLayout, path: Path) -> None:
        """Write the SVG document to ``path``."""
        path.write_text(self.export_string(layout), encoding="utf-8")

    def export_string(self, layout: BoxLayout) -> str:
        """Render the SVG document."""
        params = layout.parameters
        width = fmt(round3(layout.bounds.width))
        height = fmt(round3(layout.bounds.height))

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<svg xmlns="http://www.w3.org/2000/svg"',
            f'  width="{width}mm" height="{height}mm"',
            f'  viewBox="0 0 {width} {height}">',
            f"<title>Box {fmt(params.width)}x{fmt(params.depth)}x{fmt(params.height)}mm, "
            f"T{fmt(params.thickness)}mm</title>",
            "<!-- Generated by fingerbox -->",
            f"<!-- Material: {fmt(params.thickness)}mm, Kerf: {fmt(params.kerf)}mm, "
            f"Play: {fmt(params.play)}mm -->",
            f"<!-- Top: {params.top_edge.value}, Bottom: {params.bottom_edge.value}, "
            f"Finger width: {fmt(params.finger_width)}mm -->",
        ]

        for panel in layout.panels:
            lines.extend(self._render_panel(panel))

        lines.append("</svg>")
        return "\n".join(lines)

    def _render_panel(self, panel: Panel) -> list[str]:
        style = (
            f'fill="none" stroke="{self.stroke_color}" '
            f'stroke-width="{fmt(self.stroke_width)}"'
        )
        panel_id = panel.panel_id.value
        parts = [f'  <path d="{outline_path_data(panel.outline)}" {style} id="{panel_id}" />']
        if panel.holes:
            holes_d = " ".join(hole_path_data(hole) for hole in panel.holes)
            parts.append(f'  <path d="{holes_d}" {style} id="{panel_id}-holes" />')
        return parts
