"""Shared pytest fixtures for boundary_foundry tests.

Provides reusable ways, click boxes and registries. All fixtures use explicit
values with documented layout.

COORDINATE SYSTEM:
    Tests work near the equator (lat~0) and prime meridian (lon~0), where the
    degree-space arithmetic is easy to check by hand. Click boxes use the
    default size of 0.002° (half-width 0.001°).

BASIC LAYOUT (lon grows to the right, lat upward):

        X                                    Y
     [-0.001, 0.001]                     [0.009, 0.011]
      11 ........... 12 (0.0005, 0.005) ......... 13        way A (north side)
      21 ........... 22 (-0.0005, 0.005) ........ 23        way B (south side)

    A: 11 (0.0002, -0.0005) in X, 12 outside, 13 (0.0002, 0.0105) in Y
    B: 21 (-0.0002, 0.0003) in X, 22 outside, 23 (-0.0002, 0.0098) in Y
"""

import pytest

from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.node import Node
from boundary_foundry.model.point import Point
from boundary_foundry.model.registry import BoundaryRegistry
from boundary_foundry.model.way import Way


# =============================================================================
# BOX FIXTURES
# =============================================================================


@pytest.fixture
def box_x() -> BoundingBox:
    """Click box around the origin: lat/lon [-0.001, 0.001]."""
    return BoundingBox.around(center=Point(lat=0.0, lon=0.0))


@pytest.fixture
def box_y() -> BoundingBox:
    """Click box 0.01° east of the origin: lon [0.009, 0.011]."""
    return BoundingBox.around(center=Point(lat=0.0, lon=0.01))


# =============================================================================
# WAY FIXTURES
# =============================================================================


@pytest.fixture
def way_a() -> Way:
    """North way from box X to box Y (nodes 11, 12, 13)."""
    return Way(
        id=1,
        name="North Rd",
        nodes=[
            Node.at(id=11, lat=0.0002, lon=-0.0005),
            Node.at(id=12, lat=0.0005, lon=0.005),
            Node.at(id=13, lat=0.0002, lon=0.0105),
        ],
    )


@pytest.fixture
def way_b() -> Way:
    """South way from box X to box Y (nodes 21, 22, 23)."""
    return Way(
        id=2,
        name="South Rd",
        nodes=[
            Node.at(id=21, lat=-0.0002, lon=0.0003),
            Node.at(id=22, lat=-0.0005, lon=0.005),
            Node.at(id=23, lat=-0.0002, lon=0.0098),
        ],
    )


@pytest.fixture
def way_eight_nodes() -> Way:
    """Straight line of 8 nodes with ids 100..107 along the equator."""
    return Way(
        id=8,
        name="Long Rd",
        nodes=[Node.at(id=100 + i, lat=0.0, lon=0.001 * i) for i in range(8)],
    )


# =============================================================================
# REGISTRY FIXTURES
# =============================================================================


def accept_all(registry: BoundaryRegistry) -> None:
    for way in registry.available_ways():
        way.accept()


@pytest.fixture
def empty_registry() -> BoundaryRegistry:
    """Registry with no ways and no boxes."""
    return BoundaryRegistry()


@pytest.fixture
def two_way_registry(way_a: Way, way_b: Way, box_x: BoundingBox, box_y: BoundingBox) -> BoundaryRegistry:
    """Ways A and B found under both clicks X and Y, both accepted.

    Forms a closed loop: A runs X -> Y along the north, B runs X -> Y along the south.
    """
    registry = BoundaryRegistry()
    registry.load_box_ways(ways=[way_a, way_b], box=box_x)
    registry.load_box_ways(ways=[way_a, way_b], box=box_y)
    accept_all(registry)
    return registry


@pytest.fixture
def one_box_registry(way_a: Way, way_b: Way, box_x: BoundingBox) -> BoundaryRegistry:
    """Ways A and B found under click X only, both accepted. Their Y ends are naked."""
    registry = BoundaryRegistry()
    registry.load_box_ways(ways=[way_a, way_b], box=box_x)
    accept_all(registry)
    return registry
