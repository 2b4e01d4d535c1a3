"""Core geometry value objects: points, travel directions and bounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Point = tuple[float, float]


class Direction(str, Enum):
    """Cardinal travel directions used when walking a panel outline."""

    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"


@dataclass(frozen=True)
class DirectionVector:
    """Unit vectors for one travel direction.

    Coordinates follow the SVG convention (y grows downward).

    Attributes:
        ax: X component of the travel (axis) vector.
        ay: Y component of the travel (axis) vector.
        px: X component of the perpendicular along which tabs protrude.
        py: Y component of the perpendicular along which tabs protrude.
    """

    ax: int
    ay: int
    px: int
    py: int


# Clockwise traversal: the perpendicular always points out of the panel.
DIRECTIONS: dict[Direction, DirectionVector] = {
    Direction.RIGHT: DirectionVector(ax=1, ay=0, px=0, py=-1),
    Direction.DOWN: DirectionVector(ax=0, ay=1, px=1, py=0),
    Direction.LEFT: DirectionVector(ax=-1, ay=0, px=0, py=1),
    Direction.UP: DirectionVector(ax=0, ay=-1, px=-1, py=0),
}


@dataclass(frozen=True)
class Bounds:
    """Overall drawing size in millimetres."""

    width: float
    height: float
