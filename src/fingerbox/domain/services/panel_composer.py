"""Compose four edges into a closed panel outline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..value_objects import EDGE_ORDER, Edge, EdgeJoint, EdgeSide, Hole, Point
from .edge_paths import EdgePath, finger_edge_path, straight_edge_path
from .geometry import round3
from .holes import edge_holes

__all__ = ["PanelGeometry", "compose_panel", "panel_edges"]


@dataclass(frozen=True)
class PanelGeometry:
    """Outline and holes for one panel, in absolute sheet coordinates."""

    outline: tuple[Point, ...]
    holes: tuple[Hole, ...]


def panel_edges(
    width: float, height: float, joints: Mapping[EdgeSide, EdgeJoint]
) -> tuple[Edge, ...]:
    """Build the four edges of a panel in traversal order.

    Top and bottom run along the panel width, left and right along its
    height. Sides missing from ``joints`` are open.
    """
    lengths = {
        EdgeSide.TOP: width,
        EdgeSide.RIGHT: height,
        EdgeSide.BOTTOM: width,
        EdgeSide.LEFT: height,
    }
    return tuple(
        Edge(side=side, length=lengths[side], joint=joints.get(side, EdgeJoint.OPEN))
        for side in EDGE_ORDER
    )


def compose_panel(
    x: float,
    y: float,
    width: float,
    height: float,
    joints: Mapping[EdgeSide, EdgeJoint],
    finger_width: float,
    thickness: float,
    edge_width: float,
    surrounding_spaces: float,
    play: float = 0.0,
) -> PanelGeometry:
    """Generate a panel outline and its holes.

    Walks top, right, bottom, left (clockwise from the top-left origin).
    Finger edges get tabs or slots; every other joint gets a straight
    perimeter, and hole-based joints add their holes on top of it. Each
    generator returns the exact end point the next edge starts from.

    ``play`` is accepted for API compatibility and does not change the
    geometry.

    Args:
        x: Panel origin X.
        y: Panel origin Y.
        width: Panel width.
        height: Panel height.
        joints: Resolved joint per side.
        finger_width: Desired finger width.
        thickness: Material thickness.
        edge_width: Hole inset multiplier.
        surrounding_spaces: Flat margin multiplier.
        play: Joint clearance (not applied).

    Returns:
        The panel geometry; the outline's last point repeats its first.
    """
    origin = (round3(x), round3(y))
    outline: list[Point] = [origin]
    holes: list[Hole] = []
    current: Point = (x, y)

    for edge in panel_edges(width, height, joints):
        direction = edge.side.direction
        path: EdgePath
        if edge.joint.is_finger:
            path = finger_edge_path(
                current,
                edge.length,
                direction,
                finger_width=finger_width,
                thickness=thickness,
                tabs=edge.joint is EdgeJoint.TAB,
                surrounding_spaces=surrounding_spaces,
            )
        else:
            path = straight_edge_path(current, edge.length, direction)

        outline.extend(path.points)
        current = path.end

        if edge.joint.has_holes:
            holes.extend(
                edge_holes(
                    x,
                    y,
                    width,
                    height,
                    side=edge.side,
                    edge_length=edge.length,
                    finger_width=finger_width,
                    thickness=thickness,
                    flush=edge.joint is EdgeJoint.FLUSH_HOLE,
                    edge_width=edge_width,
                    surrounding_spaces=surrounding_spaces,
                )
            )

    # The left edge ends at the origin; snap it so the outline closes exactly.
    outline[-1] = origin

    return PanelGeometry(outline=tuple(outline), holes=tuple(holes))
