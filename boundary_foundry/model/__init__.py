"""Data model classes for boundary assembly.

Geometry first, then the fragments built on it:
- Point: Geometry atom (lat, lon)
- Node: Identified point on a way (wraps Point)
- BoundingBox: Antimeridian-aware lat/lon rectangle (click boxes, virtual boxes, extents)
- Way: Ordered node list that trims from either end, with lifecycle state
- WayState / WayLifecycle: Unavailable -> Available -> Accepted/Rejected
- Endpoint / EndpointSpan: Way terminus, optionally bound to a box, and its inward walk
- OrderedBoundary: Assembly result (ordered endpoints + closed-loop flag)
- BoundaryRegistry: Owner of ways and boxes collected from map clicks
"""

from boundary_foundry.model.boundary import OrderedBoundary
from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.endpoint import Endpoint, EndpointSpan
from boundary_foundry.model.node import Node
from boundary_foundry.model.point import Point
from boundary_foundry.model.registry import BoundaryRegistry, WayBoxRegistry
from boundary_foundry.model.way import Way, WayGeometryError
from boundary_foundry.model.way_state import WayLifecycle, WayState

__all__ = [
    "Point",
    "Node",
    "BoundingBox",
    "Way",
    "WayGeometryError",
    "WayState",
    "WayLifecycle",
    "Endpoint",
    "EndpointSpan",
    "OrderedBoundary",
    "WayBoxRegistry",
    "BoundaryRegistry",
]
