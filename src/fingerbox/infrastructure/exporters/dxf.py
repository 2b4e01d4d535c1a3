"""DXF format exporter for box cut sheets.

Generates a 2D DXF file (R2010) in millimetres for laser and CNC software
that prefers DXF over SVG. Panel outlines and holes are closed
LWPOLYLINEs on separate layers.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from fingerbox.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from fingerbox.domain.value_objects import BoxLayout, Panel, Point


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7},  # White - panel outlines
    "HOLES": {"color": 3},  # Green - joint holes
    "LABELS": {"color": 5},  # Blue - text labels
}

# Label text height as a fraction of the smaller panel side
LABEL_HEIGHT_RATIO = 0.12
MAX_LABEL_HEIGHT = 8.0


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports box layouts to DXF.

    DXF uses a Y-up coordinate system, so Y is mirrored against the layout
    bounds; the sheet reads the same way as the SVG export.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
        media_type: MIME type for HTTP responses.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, include_labels: bool = True) -> None:
        """Initialize the DXF exporter.

        Args:
            include_labels: Whether to write panel names on the LABELS layer.
        """
        self.include_labels = include_labels

    def export(self, layout: BoxLayout, path: Path) -> None:
        """Write the layout to a DXF file."""
        doc = self.build_document(layout)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, layout: BoxLayout) -> str:
        """Return the DXF document as a string."""
        doc = self.build_document(layout)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, layout: BoxLayout) -> Drawing:
        """Create a DXF document containing every panel of the layout."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, props in LAYERS.items():
            doc.layers.add(name, color=props["color"])

        msp = doc.modelspace()
        sheet_height = layout.bounds.height
        for panel in layout.panels:
            self._draw_panel(msp, panel, sheet_height)
        return doc

    def _draw_panel(self, msp: Modelspace, panel: Panel, sheet_height: float) -> None:
        """Draw one panel outline, its holes and its label."""

        def flip(point: Point) -> Point:
            return (point[0], sheet_height - point[1])

        # The outline repeats its start point; a closed polyline does not need it.
        outline = [flip(p) for p in panel.outline[:-1]]
        msp.add_lwpolyline(outline, close=True, dxfattribs={"layer": "OUTLINE"})

        for hole in panel.holes:
            msp.add_lwpolyline(
                [flip(corner) for corner in hole.corners],
                close=True,
                dxfattribs={"layer": "HOLES"},
            )

        if self.include_labels:
            text_height = min(
                MAX_LABEL_HEIGHT, min(panel.width, panel.height) * LABEL_HEIGHT_RATIO
            )
            insert = flip(
                (
                    panel.x + panel.width / 2 - len(panel.label) * text_height * 0.3,
                    panel.y + panel.height / 2 + text_height / 2,
                )
            )
            msp.add_text(
                panel.label,
                dxfattribs={"layer": "LABELS", "height": text_height, "insert": insert},
            )
