"""Hole generator for hole-based edge joints.

With a hole-based joint the panel keeps a straight edge and the mating
panel's tabs go through rectangular holes cut into this panel's face. The
holes use the same spacing as the finger edge generator and sit where the
tab segments of the mating edge land.
"""

from __future__ import annotations

from ..value_objects import EdgeSide, Hole
from .geometry import finger_spacing, round3

__all__ = ["edge_holes"]


def edge_holes(
    panel_x: float,
    panel_y: float,
    panel_width: float,
    panel_height: float,
    side: EdgeSide,
    edge_length: float,
    finger_width: float,
    thickness: float,
    flush: bool,
    edge_width: float,
    surrounding_spaces: float,
) -> tuple[Hole, ...]:
    """Generate the holes along one edge of a panel.

    Args:
        panel_x: Panel origin X.
        panel_y: Panel origin Y.
        panel_width: Panel width.
        panel_height: Panel height.
        side: Which side of the panel the joint is on.
        edge_length: Nominal length of that side.
        finger_width: Desired finger width.
        thickness: Material thickness; the short side of every hole.
        flush: Place holes against the boundary instead of inset.
        edge_width: Inset from the boundary as a multiple of thickness.
        surrounding_spaces: Flat margin multiplier.

    Returns:
        Holes in edge order with rounded coordinates.
    """
    spacing = finger_spacing(edge_length, finger_width, surrounding_spaces)
    pitch = spacing.inner_pitch
    depth = thickness
    inset = 0.0 if flush else edge_width * thickness

    holes: list[Hole] = []
    for pos in spacing.tab_offsets(tabs=True):
        if side is EdgeSide.TOP:
            hx, hy, hw, hh = panel_x + pos, panel_y + inset, pitch, depth
        elif side is EdgeSide.BOTTOM:
            hx = panel_x + pos
            hy = panel_y + panel_height - inset - depth
            hw, hh = pitch, depth
        elif side is EdgeSide.LEFT:
            hx, hy, hw, hh = panel_x + inset, panel_y + pos, depth, pitch
        else:
            hx = panel_x + panel_width - inset - depth
            hy = panel_y + pos
            hw, hh = depth, pitch
        holes.append(
            Hole(x=round3(hx), y=round3(hy), width=round3(hw), height=round3(hh))
        )
    return tuple(holes)
