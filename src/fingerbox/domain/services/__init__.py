"""Domain services for box geometry.

This package provides the geometry engine, leaves first:
- Geometry primitives (rounding, finger counts, finger spacing)
- Edge path generators (finger and straight edges)
- Hole generator for hole-based joints
- Panel composer
- Box layout orchestration
"""

from .box_layout import (
    BOUNDS_SLACK,
    PANEL_COLORS,
    PANEL_PADDING,
    FingerBoxGenerator,
    cap_joints,
    generate_box,
)
from .edge_paths import EdgePath, finger_edge_path, straight_edge_path
from .geometry import (
    MARGIN_TOLERANCE,
    MIN_FINGERS,
    FingerSpacing,
    finger_count,
    finger_spacing,
    round3,
)
from .holes import edge_holes
from .panel_composer import PanelGeometry, compose_panel, panel_edges

__all__ = [
    # Box layout
    "BOUNDS_SLACK",
    "PANEL_COLORS",
    "PANEL_PADDING",
    "FingerBoxGenerator",
    "cap_joints",
    "generate_box",
    # Edge paths
    "EdgePath",
    "finger_edge_path",
    "straight_edge_path",
    # Geometry primitives
    "MARGIN_TOLERANCE",
    "MIN_FINGERS",
    "FingerSpacing",
    "finger_count",
    "finger_spacing",
    "round3",
    # Holes
    "edge_holes",
    # Panel composition
    "PanelGeometry",
    "compose_panel",
    "panel_edges",
]
