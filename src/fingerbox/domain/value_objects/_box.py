"""Box-level value objects: input parameters and the generated layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ._core_geometry import Bounds
from ._panels import EdgeSelector, Panel, PanelId


@dataclass(frozen=True)
class BoxParameters:
    """Immutable input for one box computation. All lengths in millimetres.

    Attributes:
        width: Outer width of the box.
        depth: Outer depth of the box.
        height: Outer height of the box.
        thickness: Material thickness.
        finger_width: Desired finger width; the actual pitch is adjusted so
            every jointed edge gets an odd number of fingers.
        kerf: Beam width. Recorded in exports, not applied to geometry.
        edge_width: Distance from the panel edge to hole-based joint holes,
            as a multiple of thickness.
        surrounding_spaces: Flat margin at both ends of a jointed edge, as a
            multiple of that edge's base finger pitch.
        play: Joint clearance per side. Recorded in exports, not applied to
            geometry.
        top_edge: Joint used between the walls and the top cap.
        bottom_edge: Joint used between the walls and the bottom cap.
    """

    width: float = 100.0
    depth: float = 80.0
    height: float = 60.0
    thickness: float = 3.0
    finger_width: float = 10.0
    kerf: float = 0.15
    edge_width: float = 1.5
    surrounding_spaces: float = 1.0
    play: float = 0.0
    top_edge: EdgeSelector = EdgeSelector.OPEN
    bottom_edge: EdgeSelector = EdgeSelector.HOLE

    def __post_init__(self) -> None:
        # Accept raw selector strings ("hole", "F", ...) from loose callers.
        if not isinstance(self.top_edge, EdgeSelector):
            object.__setattr__(self, "top_edge", EdgeSelector(self.top_edge))
        if not isinstance(self.bottom_edge, EdgeSelector):
            object.__setattr__(self, "bottom_edge", EdgeSelector(self.bottom_edge))

        for name in _NUMERIC_FIELDS:
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number")

        if self.width <= 0 or self.depth <= 0 or self.height <= 0:
            raise ValueError("All box dimensions must be positive")
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")
        if self.finger_width <= 0:
            raise ValueError("Finger width must be positive")
        if self.depth <= 2 * self.thickness:
            raise ValueError(
                "Depth must be greater than twice the material thickness"
            )
        if self.kerf < 0 or self.play < 0:
            raise ValueError("Kerf and play cannot be negative")
        if self.edge_width < 0 or self.surrounding_spaces < 0:
            raise ValueError("Edge width and surrounding spaces cannot be negative")

    @property
    def side_width(self) -> float:
        """Width of the left/right panels, which sit between front and back."""
        return self.depth - 2 * self.thickness

    @property
    def has_top(self) -> bool:
        return self.top_edge is not EdgeSelector.OPEN

    @property
    def has_bottom(self) -> bool:
        return self.bottom_edge is not EdgeSelector.OPEN

    @property
    def slug(self) -> str:
        """File-name friendly size tag, e.g. ``box-100x80x60``."""
        return f"box-{_num(self.width)}x{_num(self.depth)}x{_num(self.height)}"


_NUMERIC_FIELDS = (
    "width",
    "depth",
    "height",
    "thickness",
    "finger_width",
    "kerf",
    "edge_width",
    "surrounding_spaces",
    "play",
)


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class BoxLayout:
    """All panels for one parameter set plus the sheet bounds.

    Attributes:
        panels: Panels in generation order (front, back, left, right,
            then top and bottom when present).
        bounds: Size enclosing every panel with a fixed clearance.
        parameters: The parameters the layout was generated from.
    """

    panels: tuple[Panel, ...]
    bounds: Bounds
    parameters: BoxParameters

    def panel(self, panel_id: PanelId) -> Panel:
        """Return the panel with the given identity.

        Raises:
            KeyError: If the layout has no such panel (open top or bottom).
        """
        for panel in self.panels:
            if panel.panel_id is panel_id:
                return panel
        raise KeyError(f"Layout has no '{panel_id.value}' panel")

    def has_panel(self, panel_id: PanelId) -> bool:
        return any(panel.panel_id is panel_id for panel in self.panels)

    @property
    def total_holes(self) -> int:
        return sum(len(panel.holes) for panel in self.panels)
