"""Core foundation classes for boundary assembly.

This module provides the arithmetic backbone:
- GeoMath: Antimeridian-aware latitude/longitude deltas, midpoints, distances
- DirectionalSpan: Bidirectional cursor with inclusive slicing (used for every trim)
"""

from boundary_foundry.core.directional_span import DirectionalSpan, SpanSide
from boundary_foundry.core.geo_math import GeoMath

__all__ = [
    # Geo math
    "GeoMath",
    # Directional span
    "DirectionalSpan",
    "SpanSide",
]
