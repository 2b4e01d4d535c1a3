"""Tests for composing edges into closed panel outlines."""

from __future__ import annotations

import pytest

from fingerbox.domain import EdgeJoint, EdgeSide
from fingerbox.domain.services import compose_panel
from fingerbox.domain.services.panel_composer import panel_edges


def _compose(joints, x=0.0, y=0.0, width=100.0, height=60.0):
    return compose_panel(
        x,
        y,
        width,
        height,
        joints,
        finger_width=10.0,
        thickness=3.0,
        edge_width=1.5,
        surrounding_spaces=1.0,
    )


class TestPanelEdges:
    """Tests for panel_edges()."""

    def test_edges_in_clockwise_order(self) -> None:
        edges = panel_edges(100.0, 60.0, {EdgeSide.LEFT: EdgeJoint.TAB})

        assert [e.side for e in edges] == [
            EdgeSide.TOP,
            EdgeSide.RIGHT,
            EdgeSide.BOTTOM,
            EdgeSide.LEFT,
        ]
        assert [e.length for e in edges] == [100.0, 60.0, 100.0, 60.0]

    def test_missing_sides_are_open(self) -> None:
        edges = panel_edges(100.0, 60.0, {EdgeSide.LEFT: EdgeJoint.TAB})
        assert [e.joint for e in edges] == [
            EdgeJoint.OPEN,
            EdgeJoint.OPEN,
            EdgeJoint.OPEN,
            EdgeJoint.TAB,
        ]


class TestComposePanel:
    """Tests for compose_panel()."""

    def test_open_panel_is_a_rectangle(self) -> None:
        geometry = _compose({}, x=10.0, y=5.0, width=50.0, height=30.0)

        assert geometry.outline == (
            (10.0, 5.0),
            (60.0, 5.0),
            (60.0, 35.0),
            (10.0, 35.0),
            (10.0, 5.0),
        )
        assert geometry.holes == ()

    @pytest.mark.parametrize("joint", [EdgeJoint.TAB, EdgeJoint.SLOT])
    def test_finger_outline_is_closed(self, joint: EdgeJoint) -> None:
        geometry = _compose({side: joint for side in EdgeSide}, x=86.0, y=12.5)

        assert geometry.outline[0] == (86.0, 12.5)
        assert geometry.outline[-1] == geometry.outline[0]

    def test_outline_starts_with_top_edge(self) -> None:
        geometry = _compose({EdgeSide.TOP: EdgeJoint.TAB})
        assert geometry.outline[:3] == ((0.0, 0.0), (9.091, 0.0), (9.091, -3.0))

    def test_tabs_stay_within_one_thickness(self) -> None:
        geometry = _compose({side: EdgeJoint.TAB for side in EdgeSide})
        xs = [x for x, _ in geometry.outline]
        ys = [y for _, y in geometry.outline]

        assert min(xs) == -3.0
        assert max(xs) == 103.0
        assert min(ys) == -3.0
        assert max(ys) == 63.0

    def test_slots_never_leave_a_tab_corner(self) -> None:
        """With slots on every side the corners stay flat."""
        geometry = _compose({side: EdgeJoint.SLOT for side in EdgeSide})
        assert (0.0, 0.0) in geometry.outline
        assert (100.0, 0.0) in geometry.outline

    def test_holes_only_for_hole_edges(self) -> None:
        geometry = _compose(
            {
                EdgeSide.TOP: EdgeJoint.OPEN,
                EdgeSide.RIGHT: EdgeJoint.TAB,
                EdgeSide.BOTTOM: EdgeJoint.HOLE,
                EdgeSide.LEFT: EdgeJoint.TAB,
            }
        )

        assert len(geometry.holes) == 5
        assert all(hole.y == 52.5 for hole in geometry.holes)

    def test_flush_hole_edge(self) -> None:
        geometry = _compose({EdgeSide.TOP: EdgeJoint.FLUSH_HOLE})
        assert len(geometry.holes) == 5
        assert all(hole.y == 0.0 for hole in geometry.holes)

    def test_hole_edges_keep_a_straight_perimeter(self) -> None:
        with_holes = _compose({EdgeSide.BOTTOM: EdgeJoint.HOLE})
        without = _compose({})
        assert with_holes.outline == without.outline

    def test_play_does_not_change_geometry(self) -> None:
        joints = {side: EdgeJoint.TAB for side in EdgeSide}
        base = _compose(joints)
        with_play = compose_panel(
            0.0,
            0.0,
            100.0,
            60.0,
            joints,
            finger_width=10.0,
            thickness=3.0,
            edge_width=1.5,
            surrounding_spaces=1.0,
            play=0.3,
        )
        assert with_play == base
