"""Console formatters for box layouts."""

from __future__ import annotations

from fingerbox.domain import BoxLayout, BoxParameters, EdgeSelector
from fingerbox.domain.services import finger_spacing, round3


class PanelSummaryFormatter:
    """Formats the panels of a layout as a table."""

    def format(self, layout: BoxLayout) -> str:
        params = layout.parameters
        lines = [
            f"BOX {params.width:g} x {params.depth:g} x {params.height:g} mm "
            f"(T {params.thickness:g} mm)",
            "=" * 64,
            f"{'Panel':<8} {'Width':>9} {'Height':>9} {'X':>9} {'Y':>9} {'Holes':>6}",
            "-" * 64,
        ]
        for panel in layout.panels:
            lines.append(
                f"{panel.label:<8} {panel.width:>9.3f} {panel.height:>9.3f} "
                f"{panel.x:>9.3f} {panel.y:>9.3f} {len(panel.holes):>6}"
            )
        lines.append("-" * 64)
        lines.append(
            f"Sheet: {round3(layout.bounds.width):g} x "
            f"{round3(layout.bounds.height):g} mm, "
            f"{len(layout.panels)} panels, {layout.total_holes} holes"
        )
        return "\n".join(lines)


class SpacingInfoFormatter:
    """Formats finger spacing hints for a parameter set.

    Shows the resolved finger count and pitch for each distinct edge length,
    the flat margin in mm and the hole inset in mm.
    """

    def format(self, params: BoxParameters) -> str:
        edges = [
            ("Height", params.height),
            ("Width", params.width),
            ("Side", params.side_width),
        ]
        lines = ["FINGER SPACING", "=" * 64]
        for name, length in edges:
            spacing = finger_spacing(
                length, params.finger_width, params.surrounding_spaces
            )
            lines.append(
                f"{name:<7} {length:>8.3f} mm: {spacing.base_count} fingers @ "
                f"{round3(spacing.base_pitch):g} mm, margin {round3(spacing.margin):g} mm, "
                f"{spacing.inner_count} inner @ {round3(spacing.inner_pitch):g} mm"
            )
        lines.append("-" * 64)
        lines.append(
            f"Hole inset: {round3(params.edge_width * params.thickness):g} mm from panel edge"
        )
        lines.append(f"Top: {params.top_edge.label}, Bottom: {params.bottom_edge.label}")
        if params.kerf or params.play:
            lines.append(
                f"Note: kerf ({params.kerf:g} mm) and play ({params.play:g} mm) "
                "are recorded but not applied to the geometry"
            )
        return "\n".join(lines)


def format_edge_types() -> str:
    """List the edge selectors with their codes and labels."""
    return "\n".join(
        f"{selector.code}  {selector.value:<11} {selector.label}"
        for selector in EdgeSelector
    )
