"""Panel identities, edge joint kinds and panel value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ._core_geometry import Direction, Point


class EdgeSelector(str, Enum):
    """User-facing joint choice for the top and bottom of the box.

    Attributes:
        FINGER: Tabs and slots interlock at the panel edges.
        HOLE: The cap carries tabs that go into holes cut in the side faces.
        FLUSH_HOLE: Like HOLE but the holes sit flush with the panel
            boundary, so boxes of the same footprint can be stacked.
        OPEN: No joint and no cap panel.
    """

    FINGER = "finger"
    HOLE = "hole"
    FLUSH_HOLE = "flush_hole"
    OPEN = "open"

    @classmethod
    def _missing_(cls, value: object) -> EdgeSelector | None:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        normalized = key.replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        return _SELECTOR_ALIASES.get(key)

    @property
    def code(self) -> str:
        """Single-letter code used on cut sheets and legacy configs."""
        return _SELECTOR_CODES[self]

    @property
    def label(self) -> str:
        """Human-readable label for pickers and legends."""
        return _SELECTOR_LABELS[self]


_SELECTOR_ALIASES: dict[str, EdgeSelector] = {
    "f": EdgeSelector.FINGER,
    "h": EdgeSelector.HOLE,
    "s": EdgeSelector.FLUSH_HOLE,
    "e": EdgeSelector.OPEN,
    "tabs-and-slots": EdgeSelector.FINGER,
    "holes": EdgeSelector.HOLE,
    "flush-holes": EdgeSelector.FLUSH_HOLE,
    "flush-hole": EdgeSelector.FLUSH_HOLE,
    "stackable": EdgeSelector.FLUSH_HOLE,
    "straight": EdgeSelector.OPEN,
}

_SELECTOR_CODES: dict[EdgeSelector, str] = {
    EdgeSelector.FINGER: "F",
    EdgeSelector.HOLE: "h",
    EdgeSelector.FLUSH_HOLE: "s",
    EdgeSelector.OPEN: "e",
}

_SELECTOR_LABELS: dict[EdgeSelector, str] = {
    EdgeSelector.FINGER: "Finger Joint",
    EdgeSelector.HOLE: "Finger Joint Holes",
    EdgeSelector.FLUSH_HOLE: "Stackable (flush)",
    EdgeSelector.OPEN: "Straight / Open",
}


class EdgeJoint(str, Enum):
    """Joint kind resolved for one edge of one panel.

    TAB and SLOT are the two faces of an interlocking finger joint: for any
    shared physical edge exactly one side is TAB and the other SLOT.
    """

    TAB = "tab"
    SLOT = "slot"
    HOLE = "hole"
    FLUSH_HOLE = "flush_hole"
    OPEN = "open"

    @property
    def is_finger(self) -> bool:
        return self in (EdgeJoint.TAB, EdgeJoint.SLOT)

    @property
    def has_holes(self) -> bool:
        return self in (EdgeJoint.HOLE, EdgeJoint.FLUSH_HOLE)


def resolve_edge_joint(selector: EdgeSelector, primary: bool) -> EdgeJoint:
    """Resolve a user-facing selector for one side of a shared edge.

    Front and back are primary and receive tabs for an interlocking joint;
    left, right and cap panels are secondary and receive the slots.

    Args:
        selector: The joint chosen for the edge.
        primary: Whether the panel is the primary side of the joint.

    Returns:
        The joint kind to generate for this panel's edge.
    """
    if selector is EdgeSelector.FINGER:
        return EdgeJoint.TAB if primary else EdgeJoint.SLOT
    if selector is EdgeSelector.HOLE:
        return EdgeJoint.HOLE
    if selector is EdgeSelector.FLUSH_HOLE:
        return EdgeJoint.FLUSH_HOLE
    return EdgeJoint.OPEN


class EdgeSide(str, Enum):
    """The four sides of a panel, in clockwise traversal order."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def direction(self) -> Direction:
        """Travel direction when this side is walked clockwise."""
        return _SIDE_DIRECTIONS[self]


_SIDE_DIRECTIONS: dict[EdgeSide, Direction] = {
    EdgeSide.TOP: Direction.RIGHT,
    EdgeSide.RIGHT: Direction.DOWN,
    EdgeSide.BOTTOM: Direction.LEFT,
    EdgeSide.LEFT: Direction.UP,
}

EDGE_ORDER: tuple[EdgeSide, ...] = (
    EdgeSide.TOP,
    EdgeSide.RIGHT,
    EdgeSide.BOTTOM,
    EdgeSide.LEFT,
)


class PanelId(str, Enum):
    """The six panels of a box."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Edge:
    """One side of a panel with its nominal length and resolved joint."""

    side: EdgeSide
    length: float
    joint: EdgeJoint


@dataclass(frozen=True)
class Hole:
    """Axis-aligned rectangular cutout in a panel face (absolute mm)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in clockwise order starting at (x, y)."""
        return (
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x, self.y + self.height),
        )


@dataclass(frozen=True)
class Panel:
    """A fully generated panel placed on the cut sheet.

    Attributes:
        panel_id: Which of the six box panels this is.
        label: Display name (e.g. "Front").
        color: Display color, opaque to the geometry.
        x: Placement origin X on the sheet.
        y: Placement origin Y on the sheet.
        width: Nominal panel width (tabs excluded).
        height: Nominal panel height (tabs excluded).
        outline: Closed outline; the last point repeats the first.
        holes: Rectangular cutouts for hole-based joints.
        edges: Resolved joint per side, as a read-only mapping.
    """

    panel_id: PanelId
    label: str
    color: str
    x: float
    y: float
    width: float
    height: float
    outline: tuple[Point, ...]
    holes: tuple[Hole, ...] = ()
    edges: Mapping[EdgeSide, EdgeJoint] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", MappingProxyType(dict(self.edges)))

    @property
    def is_closed(self) -> bool:
        return len(self.outline) > 1 and self.outline[0] == self.outline[-1]
