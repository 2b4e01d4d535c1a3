"""Value objects for the box domain.

This module provides immutable data types used throughout the box
generator. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    DIRECTIONS,
    Bounds,
    Direction,
    DirectionVector,
    Point,
)

# Panels, edges and joints
from ._panels import (
    EDGE_ORDER,
    Edge,
    EdgeJoint,
    EdgeSelector,
    EdgeSide,
    Hole,
    Panel,
    PanelId,
    resolve_edge_joint,
)

# Box parameters and layout
from ._box import (
    BoxLayout,
    BoxParameters,
)

__all__ = [
    # Core geometry
    "DIRECTIONS",
    "Bounds",
    "Direction",
    "DirectionVector",
    "Point",
    # Panels, edges and joints
    "EDGE_ORDER",
    "Edge",
    "EdgeJoint",
    "EdgeSelector",
    "EdgeSide",
    "Hole",
    "Panel",
    "PanelId",
    "resolve_edge_joint",
    # Box
    "BoxLayout",
    "BoxParameters",
]
