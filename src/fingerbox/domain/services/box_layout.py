"""Six-panel box layout.

Panels are laid out in a cross so that none overlap on the cut sheet::

                  [Top]
    [Left] [Front] [Right] [Back]
                 [Bottom]

Sizing for outer dimensions W x D x H and thickness T:

- Front/Back: W x H, tabs on the vertical edges.
- Left/Right: (D - 2T) x H, fitted between front and back, slots on the
  vertical edges.
- Top/Bottom: W x (D - 2T). All slots for a finger joint; all tabs for a
  hole-based joint, since the walls then carry the holes.
"""

from __future__ import annotations

import logging

from ..value_objects import (
    Bounds,
    BoxLayout,
    BoxParameters,
    EdgeJoint,
    EdgeSelector,
    EdgeSide,
    Panel,
    PanelId,
    resolve_edge_joint,
)
from .panel_composer import compose_panel

__all__ = [
    "BOUNDS_SLACK",
    "PANEL_COLORS",
    "PANEL_PADDING",
    "FingerBoxGenerator",
    "cap_joints",
    "generate_box",
]

logger = logging.getLogger(__name__)

# Gap between neighbouring panels on the sheet (mm)
PANEL_PADDING = 12.0

# Extra room added past each panel's far corner when sizing the sheet (mm)
BOUNDS_SLACK = 5.0

PANEL_COLORS: dict[PanelId, str] = {
    PanelId.FRONT: "#e74c3c",
    PanelId.BACK: "#3498db",
    PanelId.LEFT: "#2ecc71",
    PanelId.RIGHT: "#f39c12",
    PanelId.TOP: "#9b59b6",
    PanelId.BOTTOM: "#1abc9c",
}


def _wall_joints(params: BoxParameters, primary: bool) -> dict[EdgeSide, EdgeJoint]:
    vertical = EdgeJoint.TAB if primary else EdgeJoint.SLOT
    return {
        EdgeSide.TOP: resolve_edge_joint(params.top_edge, primary),
        EdgeSide.RIGHT: vertical,
        EdgeSide.BOTTOM: resolve_edge_joint(params.bottom_edge, primary),
        EdgeSide.LEFT: vertical,
    }


def cap_joints(selector: EdgeSelector) -> dict[EdgeSide, EdgeJoint]:
    """Joints for all four edges of a top or bottom cap."""
    joint = EdgeJoint.SLOT if selector is EdgeSelector.FINGER else EdgeJoint.TAB
    return {side: joint for side in EdgeSide}


def _make_panel(
    panel_id: PanelId,
    x: float,
    y: float,
    width: float,
    height: float,
    joints: dict[EdgeSide, EdgeJoint],
    params: BoxParameters,
) -> Panel:
    geometry = compose_panel(
        x,
        y,
        width,
        height,
        joints,
        finger_width=params.finger_width,
        thickness=params.thickness,
        edge_width=params.edge_width,
        surrounding_spaces=params.surrounding_spaces,
        play=params.play,
    )
    return Panel(
        panel_id=panel_id,
        label=panel_id.value.capitalize(),
        color=PANEL_COLORS[panel_id],
        x=x,
        y=y,
        width=width,
        height=height,
        outline=geometry.outline,
        holes=geometry.holes,
        edges=dict(joints),
    )


def generate_box(params: BoxParameters) -> BoxLayout:
    """Generate every panel of a box and the sheet bounds.

    Pure and deterministic: the same parameters always give an equal
    layout, and nothing is retained between calls.

    Args:
        params: Box parameters.

    Returns:
        The box layout. Top and bottom panels are omitted when their joint
        is open.
    """
    w = params.width
    h = params.height
    t = params.thickness
    side_w = params.side_width
    cap_d = side_w
    pad = PANEL_PADDING

    front_x = side_w + pad
    front_y = cap_d + pad if params.has_top else 0.0
    right_x = front_x + w + pad
    back_x = front_x + w + side_w + pad * 2

    primary = _wall_joints(params, primary=True)
    secondary = _wall_joints(params, primary=False)

    panels = [
        _make_panel(PanelId.FRONT, front_x, front_y, w, h, primary, params),
        _make_panel(PanelId.BACK, back_x, front_y, w, h, primary, params),
        _make_panel(PanelId.LEFT, 0.0, front_y, side_w, h, secondary, params),
        _make_panel(PanelId.RIGHT, right_x, front_y, side_w, h, secondary, params),
    ]

    if params.has_top:
        panels.append(
            _make_panel(
                PanelId.TOP, front_x, 0.0, w, cap_d, cap_joints(params.top_edge), params
            )
        )

    if params.has_bottom:
        bottom_y = front_y + h + pad
        panels.append(
            _make_panel(
                PanelId.BOTTOM,
                front_x,
                bottom_y,
                w,
                cap_d,
                cap_joints(params.bottom_edge),
                params,
            )
        )

    max_x = 0.0
    max_y = 0.0
    for panel in panels:
        max_x = max(max_x, panel.x + panel.width + t + BOUNDS_SLACK)
        max_y = max(max_y, panel.y + panel.height + t + BOUNDS_SLACK)

    return BoxLayout(
        panels=tuple(panels),
        bounds=Bounds(width=max_x, height=max_y),
        parameters=params,
    )


class FingerBoxGenerator:
    """Service wrapper around :func:`generate_box`.

    Holds no state between calls; it exists so application code can inject
    and substitute the generator and to log a summary of each run.

    Example:
        >>> generator = FingerBoxGenerator()
        >>> layout = generator.generate(BoxParameters(width=120, depth=90, height=50))
        >>> [p.panel_id.value for p in layout.panels]
        ['front', 'back', 'left', 'right', 'bottom']
    """

    def generate(self, params: BoxParameters) -> BoxLayout:
        """Generate a box layout for the given parameters."""
        layout = generate_box(params)
        logger.debug(
            "Generated %d panels (%d holes) for %sx%sx%s mm, sheet %.3f x %.3f mm",
            len(layout.panels),
            layout.total_holes,
            params.width,
            params.depth,
            params.height,
            layout.bounds.width,
            layout.bounds.height,
        )
        return layout
