"""Domain layer - box geometry engine."""

from .services import (
    FingerBoxGenerator,
    FingerSpacing,
    compose_panel,
    edge_holes,
    finger_count,
    finger_edge_path,
    finger_spacing,
    generate_box,
    round3,
    straight_edge_path,
)
from .value_objects import (
    Bounds,
    BoxLayout,
    BoxParameters,
    Direction,
    Edge,
    EdgeJoint,
    EdgeSelector,
    EdgeSide,
    Hole,
    Panel,
    PanelId,
    resolve_edge_joint,
)

__all__ = [
    "Bounds",
    "BoxLayout",
    "BoxParameters",
    "Direction",
    "Edge",
    "EdgeJoint",
    "EdgeSelector",
    "EdgeSide",
    "FingerBoxGenerator",
    "FingerSpacing",
    "Hole",
    "Panel",
    "PanelId",
    "compose_panel",
    "edge_holes",
    "finger_count",
    "finger_edge_path",
    "finger_spacing",
    "generate_box",
    "resolve_edge_joint",
    "round3",
    "straight_edge_path",
]
