"""Node - An identified point on a way.

Nodes are owned by the registry that loaded them; boundary assembly only
reads their ids and coordinates. The same node id may appear on several ways.
"""

from dataclasses import dataclass
from typing import Any

from boundary_foundry.model.point import Point


@dataclass(frozen=True)
class Node:
    """An immutable way node.

    Attributes:
        id: Node identifier (OSM node id)
        location: Point containing the geographic coordinates
    """

    id: int
    location: Point

    @property
    def lat(self) -> float:
        """Latitude delegated from location."""
        return self.location.lat

    @property
    def lon(self) -> float:
        """Longitude delegated from location."""
        return self.location.lon

    @classmethod
    def at(cls, id: int, lat: float, lon: float) -> "Node":
        """Create a Node directly from coordinates."""
        return cls(id=id, location=Point(lat=lat, lon=lon))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        """Create Node from dictionary."""
        return cls(
            id=data["id"],
            location=Point(**data["location"]),
        )

    def __repr__(self) -> str:
        return f"Node({self.id}, {self.location})"
