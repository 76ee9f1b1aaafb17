"""Nearest node pair between two ways inside a shared box.

Two ways that both end in the same box usually overshoot each other a little.
The pair of in-box nodes (one from each way) with the smallest planar distance
is where they should be cut so their ends meet.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from boundary_foundry.core.geo_math import GeoMath
from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.endpoint import EndpointSpan


@dataclass(frozen=True)
class NodePairDistance:
    """Distance between node index_a of one way and node index_b of another.

    Indices are positions in each way's node list.
    """

    index_a: int
    index_b: int
    distance_deg: float


def _enclosed_indices(span: EndpointSpan, box: BoundingBox) -> list[int]:
    """Indices of span nodes inside box, in walk order."""
    return [index for index, node in span.walk() if box.encloses(node.location)]


def find_nearest_pair(span_a: EndpointSpan, span_b: EndpointSpan, box: BoundingBox) -> Optional[NodePairDistance]:
    """Find the closest pair of in-box nodes between two ways.

    Every in-box node of span_a is compared with every in-box node of span_b.
    Ties resolve to the first pair in walk order, a-nodes outer and b-nodes
    inner.

    Args:
        span_a: Span from the endpoint of way A bound to box
        span_b: Span from the endpoint of way B bound to box
        box: The shared box

    Returns:
        The nearest pair, or None if either way has no node inside box.
        Both spans are left with an invalid cursor.
    """
    indices_a = _enclosed_indices(span=span_a, box=box)
    indices_b = _enclosed_indices(span=span_b, box=box)
    if not indices_a or not indices_b:
        return None

    nodes_a = [span_a.items[i] for i in indices_a]
    nodes_b = [span_b.items[i] for i in indices_b]
    distances = GeoMath.pairwise_distance_deg(
        lats_a=np.array([node.lat for node in nodes_a]),
        lons_a=np.array([node.lon for node in nodes_a]),
        lats_b=np.array([node.lat for node in nodes_b]),
        lons_b=np.array([node.lon for node in nodes_b]),
    )
    # argmin returns the first minimum in row-major order
    row, col = np.unravel_index(int(np.argmin(distances)), distances.shape)
    return NodePairDistance(
        index_a=indices_a[row],
        index_b=indices_b[col],
        distance_deg=float(distances[row, col]),
    )
