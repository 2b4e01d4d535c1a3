"""Geometry primitives shared by the edge and hole generators.

Provides coordinate rounding, finger count resolution and the finger
spacing derivation. The edge path generator and the hole generator both
go through :func:`finger_spacing`, so holes on one panel always line up
with the tabs of the panel that meets it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "MIN_FINGERS",
    "MARGIN_TOLERANCE",
    "FingerSpacing",
    "finger_count",
    "finger_spacing",
    "round3",
]

MIN_FINGERS = 3

# Margins shorter than this are not emitted as separate path segments.
MARGIN_TOLERANCE = 0.01


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round3(value: float) -> float:
    """Round to 3 decimal places (0.001 mm), halves rounding up.

    Example:
        >>> round3(1.23456)
        1.235
        >>> round3(-1.23456)
        -1.235
    """
    return math.floor(value * 1000 + 0.5) / 1000


def finger_count(length: float, desired_width: float) -> int:
    """Number of fingers for an edge, always odd and at least 3.

    An odd count means the edge starts and ends with the same kind of
    segment, which keeps both ends of the joint symmetric. Very short edges
    or oversized finger widths fall back to 3.

    Args:
        length: Edge length in mm.
        desired_width: Desired finger width in mm.

    Returns:
        The finger count.
    """
    n = max(MIN_FINGERS, _round_half_up(length / desired_width))
    if n % 2 == 0:
        n += 1
    return n


@dataclass(frozen=True)
class FingerSpacing:
    """Resolved finger layout for one jointed edge.

    Attributes:
        length: Nominal edge length.
        base_count: Finger count over the full length.
        base_pitch: Finger pitch over the full length; sizes the margins.
        margin: Flat run left at each end of the edge.
        usable: Length left for fingers between the margins.
        inner_count: Finger count over the usable length.
        inner_pitch: Finger pitch over the usable length.
    """

    length: float
    base_count: int
    base_pitch: float
    margin: float
    usable: float
    inner_count: int
    inner_pitch: float

    @property
    def has_margin(self) -> bool:
        return self.margin > MARGIN_TOLERANCE

    def is_tab(self, index: int, tabs: bool = True) -> bool:
        """Whether segment ``index`` protrudes on the given side of the joint."""
        return index % 2 == 0 if tabs else index % 2 == 1

    def tab_offsets(self, tabs: bool = True) -> list[float]:
        """Offsets along the edge at which protruding segments begin."""
        return [
            self.margin + i * self.inner_pitch
            for i in range(self.inner_count)
            if self.is_tab(i, tabs)
        ]


def finger_spacing(
    length: float, finger_width: float, surrounding_spaces: float
) -> FingerSpacing:
    """Derive the finger layout for an edge.

    The base pitch is computed from the full edge length and fixes the margin
    size, so two panels meeting on the same edge agree on it. Fingers are then
    re-fitted over the usable length between the margins.

    A margin that swallows the whole edge leaves a zero or negative usable
    length; the count then falls back to the minimum and the pitch follows
    the usable length unchanged.

    Args:
        length: Nominal edge length in mm.
        finger_width: Desired finger width in mm.
        surrounding_spaces: Margin multiplier in units of the base pitch.

    Returns:
        The resolved spacing.
    """
    base_count = finger_count(length, finger_width)
    base_pitch = length / base_count
    margin = surrounding_spaces * base_pitch
    usable = length - 2 * margin
    inner_count = max(1, finger_count(usable, finger_width))
    return FingerSpacing(
        length=length,
        base_count=base_count,
        base_pitch=base_pitch,
        margin=margin,
        usable=usable,
        inner_count=inner_count,
        inner_pitch=usable / inner_count,
    )
