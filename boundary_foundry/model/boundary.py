"""OrderedBoundary - Result of boundary assembly.

The endpoints come in boundary order and alternate between the two kinds of
link the cycle is built from:

    endpoints[0] --same way--> endpoints[1] --same box--> endpoints[2] --same way--> ...

so endpoints[0::2] are the entry ends of the ways, each followed by that way's
exit end. Walking every way from its entry end yields the boundary nodes.
"""

from dataclasses import dataclass, field

from shapely.geometry import Polygon

from boundary_foundry.core.geo_math import GeoMath
from boundary_foundry.model.endpoint import Endpoint, EndpointSpan
from boundary_foundry.model.node import Node
from boundary_foundry.model.point import Point


@dataclass
class OrderedBoundary:
    """Ordered way endpoints plus whether they close into a loop.

    Attributes:
        endpoints: Endpoints in boundary order (partial when incomplete)
        complete: True if the cycle returned to the first endpoint
    """

    endpoints: list[Endpoint] = field(default_factory=list)
    complete: bool = False

    @property
    def entry_endpoints(self) -> list[Endpoint]:
        return self.endpoints[0::2]

    def nodes(self) -> list[Node]:
        """Every way's nodes, each way walked from its entry endpoint."""
        nodes = []
        for endpoint in self.entry_endpoints:
            nodes.extend(node for _, node in EndpointSpan(endpoint=endpoint).walk())
        return nodes

    def node_ids(self, close_loop: bool = False) -> list[int]:
        """Node ids in boundary order.

        Args:
            close_loop: Repeat the first id at the end (closed OSM way form).
                Only applied to complete boundaries.
        """
        ids = [node.id for node in self.nodes()]
        if close_loop and self.complete and ids:
            ids.append(ids[0])
        return ids

    def points(self) -> list[Point]:
        return [node.location for node in self.nodes()]

    def to_polygon(self) -> Polygon:
        """Boundary as a shapely Polygon in (lon, lat) order.

        Longitudes are unwrapped so a boundary crossing the antimeridian stays
        one contiguous ring (values may leave [-180, 180]).

        Raises:
            ValueError: If the boundary is incomplete or has fewer than 3 points.
        """
        if not self.complete:
            raise ValueError("Cannot build a polygon from an incomplete boundary")
        points = self.points()
        if len(points) < 3:
            raise ValueError(f"A polygon needs at least 3 points, boundary has {len(points)}")

        coords = [points[0].lon_lat]
        lon = points[0].lon
        for previous, point in zip(points, points[1:]):
            lon += GeoMath.lon_delta_minimal(lon_ref=previous.lon, lon_compare=point.lon)
            coords.append((lon, point.lat))
        return Polygon(coords)

    def __repr__(self) -> str:
        return f"OrderedBoundary(endpoints={len(self.endpoints)}, complete={self.complete})"
