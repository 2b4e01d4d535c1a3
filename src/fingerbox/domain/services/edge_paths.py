"""Edge path generators.

Each generator walks one edge of a panel from a start point in a travel
direction and returns the path points it visits plus the position it ends
at. Points are rounded for emission; the end position is kept unrounded so
that rounding error does not accumulate around the outline.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import DIRECTIONS, Direction, Point
from .geometry import finger_spacing, round3

__all__ = ["EdgePath", "finger_edge_path", "straight_edge_path"]


@dataclass(frozen=True)
class EdgePath:
    """Path segment for one edge.

    Attributes:
        points: Rounded points visited after the start point, in order.
        end: Exact position reached at the end of the edge.
    """

    points: tuple[Point, ...]
    end: Point


def _rounded(x: float, y: float) -> Point:
    return (round3(x), round3(y))


def finger_edge_path(
    start: Point,
    length: float,
    direction: Direction,
    finger_width: float,
    thickness: float,
    tabs: bool,
    surrounding_spaces: float,
) -> EdgePath:
    """Generate an interlocking finger edge.

    Tab segments step out by ``thickness`` along the protrusion vector, run
    one pitch along the edge and step back, leaving a rectangular finger.
    The tabs side starts the alternation on a tab and the slots side on a
    plain run, so generating the same edge both ways yields exact
    complements.

    Args:
        start: Current position.
        length: Nominal edge length.
        direction: Travel direction along the edge.
        finger_width: Desired finger width.
        thickness: Material thickness (finger depth).
        tabs: True for the tab side, False for the slot side.
        surrounding_spaces: Flat margin multiplier.

    Returns:
        The edge path.
    """
    vec = DIRECTIONS[direction]
    spacing = finger_spacing(length, finger_width, surrounding_spaces)
    cx, cy = start
    points: list[Point] = []

    if spacing.has_margin:
        cx += vec.ax * spacing.margin
        cy += vec.ay * spacing.margin
        points.append(_rounded(cx, cy))

    pitch = spacing.inner_pitch
    for i in range(spacing.inner_count):
        if spacing.is_tab(i, tabs):
            cx += vec.px * thickness
            cy += vec.py * thickness
            points.append(_rounded(cx, cy))
            cx += vec.ax * pitch
            cy += vec.ay * pitch
            points.append(_rounded(cx, cy))
            cx -= vec.px * thickness
            cy -= vec.py * thickness
            points.append(_rounded(cx, cy))
        else:
            cx += vec.ax * pitch
            cy += vec.ay * pitch
            points.append(_rounded(cx, cy))

    if spacing.has_margin:
        cx += vec.ax * spacing.margin
        cy += vec.ay * spacing.margin
        points.append(_rounded(cx, cy))

    return EdgePath(points=tuple(points), end=(cx, cy))


def straight_edge_path(start: Point, length: float, direction: Direction) -> EdgePath:
    """Generate a plain edge: one run of the full length."""
    vec = DIRECTIONS[direction]
    cx = start[0] + vec.ax * length
    cy = start[1] + vec.ay * length
    return EdgePath(points=(_rounded(cx, cy),), end=(cx, cy))
