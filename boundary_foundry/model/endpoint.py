"""Endpoint - One terminus of a way, optionally bound to a box.

Endpoints are transient: the assembler rebuilds them after each group of
trims instead of keeping them in sync with the node lists. A naked endpoint
(box is None) is one that no box encloses yet.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from boundary_foundry.core.directional_span import DirectionalSpan
from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.node import Node
from boundary_foundry.model.point import Point
from boundary_foundry.model.way import Way

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Endpoint:
    """A way terminus.

    Attributes:
        way: The way this endpoint belongs to
        index: 0 or way.last_index
        box: Box enclosing the terminal node, None while naked
    """

    way: Way
    index: int
    box: Optional[BoundingBox] = None

    @classmethod
    def first_of(cls, way: Way) -> "Endpoint":
        return cls(way=way, index=0)

    @classmethod
    def last_of(cls, way: Way) -> "Endpoint":
        return cls(way=way, index=way.last_index)

    @property
    def point(self) -> Point:
        return self.way.point_at(self.index)

    @property
    def node(self) -> Node:
        return self.way.nodes[self.index]

    @property
    def is_naked(self) -> bool:
        return self.box is None

    def bind_to_box(self, box: BoundingBox) -> bool:
        """Bind to box if it encloses either terminus of the way.

        The first node is tried before the last one; the index moves to
        whichever terminus matched. Nothing changes when neither is enclosed.

        Returns:
            True if the endpoint is now bound to box.
        """
        if box.encloses(self.way.point_at(0)):
            self.index = 0
        elif box.encloses(self.way.point_at(self.way.last_index)):
            self.index = self.way.last_index
        else:
            return False
        self.box = box
        logger.debug(f"Bound way {self.way.id} index {self.index} to {box}")
        return True

    def follow_trim(self) -> None:
        """Re-anchor a last-node endpoint after its way has been trimmed."""
        if self.index != 0:
            self.index = self.way.last_index

    def span(self) -> "EndpointSpan":
        return EndpointSpan(endpoint=self)

    def __repr__(self) -> str:
        return f"Endpoint(way={self.way.id}, index={self.index}, box={'naked' if self.is_naked else self.box})"


class EndpointSpan(DirectionalSpan[Node]):
    """Walks a way's nodes from an endpoint toward the opposite terminus.

    Built over the way's node list as it is at construction; after a trim,
    build a new span.
    """

    def __init__(self, endpoint: Endpoint) -> None:
        nodes = endpoint.way.nodes
        last_index = len(nodes) - 1 if endpoint.index == 0 else 0
        super().__init__(items=nodes, start_index=endpoint.index, last_index=last_index)
        self.endpoint = endpoint

    @property
    def way(self) -> Way:
        return self.endpoint.way
