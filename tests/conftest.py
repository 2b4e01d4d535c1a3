"""Pytest configuration and shared fixtures for fingerbox tests."""

from __future__ import annotations

import pytest

from fingerbox.domain import BoxLayout, BoxParameters, generate_box


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that exercise several layers together"
    )


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_params() -> BoxParameters:
    """100 x 80 x 60 mm box in 3 mm stock, open top and hole-jointed bottom."""
    return BoxParameters(
        width=100.0,
        depth=80.0,
        height=60.0,
        thickness=3.0,
        finger_width=10.0,
        top_edge="open",
        bottom_edge="hole",
    )


@pytest.fixture
def default_layout(default_params: BoxParameters) -> BoxLayout:
    """Layout generated from ``default_params``."""
    return generate_box(default_params)


@pytest.fixture
def closed_params() -> BoxParameters:
    """Box with interlocking finger joints at both top and bottom."""
    return BoxParameters(
        width=120.0,
        depth=90.0,
        height=50.0,
        thickness=4.0,
        finger_width=8.0,
        top_edge="finger",
        bottom_edge="finger",
    )


@pytest.fixture
def closed_layout(closed_params: BoxParameters) -> BoxLayout:
    """Layout generated from ``closed_params``."""
    return generate_box(closed_params)
