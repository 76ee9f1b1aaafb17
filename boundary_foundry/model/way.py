"""Way - An ordered line of nodes the user can pick for a boundary.

A Way is one fragment of a boundary (a road, a river bank, an administrative
line). During assembly its node list is only ever shortened from one end or
the other via trim_toward(); nodes are never reordered or inserted.

Every applied trim calls the registered listeners synchronously with the way,
so a renderer can redraw it before assembly continues.

A Way also carries its lifecycle state (see way_state.py); only accepted ways
take part in boundary assembly.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from statemachine.exceptions import TransitionNotAllowed

from boundary_foundry.constants import WayConfig
from boundary_foundry.core.directional_span import DirectionalSpan, SpanSide
from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.node import Node
from boundary_foundry.model.point import Point
from boundary_foundry.model.way_state import EVENT_FOR_TARGET, WayLifecycle, WayState

logger = logging.getLogger(__name__)

NodesChangedListener = Callable[["Way"], None]


class WayGeometryError(ValueError):
    """A way is structurally unusable, e.g. too few nodes to have an extent."""


@dataclass(eq=False)
class Way:
    """A boundary fragment: an ordered node sequence plus lifecycle state.

    Ways compare by identity; two Way objects with the same id are still
    different objects to the assembler. The registry keeps one per id.

    Attributes:
        id: Way identifier (OSM way id)
        nodes: Ordered nodes; replaced (not mutated) by each trim
        name: Display name
        state: WayState value, written by the lifecycle state machine

    Example:
        way = Way(id=7, nodes=[Node.at(1, 0.0, 0.0), Node.at(2, 0.0, 0.01)], name="Mill Rd")
        way.make_available()
        way.accept()
    """

    id: int
    nodes: list[Node]
    name: str = WayConfig.DEFAULT_NAME
    state: Optional[str] = None
    _listeners: list[NodesChangedListener] = field(default_factory=list, init=False, repr=False)
    _lifecycle: WayLifecycle = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.nodes = list(self.nodes)
        self._lifecycle = WayLifecycle(way=self)

    # =========================================================================
    # Geometry
    # =========================================================================

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def last_index(self) -> int:
        return len(self.nodes) - 1

    @property
    def node_ids(self) -> list[int]:
        return [node.id for node in self.nodes]

    def point_at(self, index: int) -> Point:
        """Location of the node at index (negative indices count from the end)."""
        return self.nodes[index].location

    def require_min_nodes(self) -> None:
        """Raise WayGeometryError unless the way has at least WayConfig.MIN_NODES nodes."""
        if len(self.nodes) < WayConfig.MIN_NODES:
            raise WayGeometryError(
                f"Way {self.id} ({self.name}) needs at least {WayConfig.MIN_NODES} nodes, got {len(self.nodes)}"
            )

    def bounding_box(self) -> BoundingBox:
        """Smallest box enclosing all nodes.

        Seeded from the first two nodes, then grown by the rest.

        Raises:
            WayGeometryError: If the way has fewer than two nodes.
        """
        self.require_min_nodes()
        box = BoundingBox.from_corners(corner1=self.point_at(0), corner2=self.point_at(1))
        for node in self.nodes[2:]:
            box.grow_to_include(node.location)
        return box

    # =========================================================================
    # Trimming
    # =========================================================================

    def trim_toward(
        self,
        span: DirectionalSpan[Node],
        side: SpanSide = SpanSide.FAR,
        keep_current: bool = True,
    ) -> bool:
        """Cut the node list down to one side of the span's cursor.

        Args:
            span: Span over this way's current node list, cursor positioned
            side: NEAR keeps span start .. cursor, FAR keeps cursor .. span last
            keep_current: If False, the cursor node is dropped as well

        Returns:
            True if the trim was applied. A trim that would leave fewer than
            WayConfig.MIN_NODES nodes is refused and returns False.

        Raises:
            ValueError: If the span does not walk this way's current node list
                (e.g. it was built before an earlier trim).
        """
        if span.items is not self.nodes:
            raise ValueError(f"Span {span!r} does not walk the current nodes of way {self.id}")

        exclude_current = not keep_current
        if side is SpanSide.NEAR:
            kept = span.near_slice(exclude_current=exclude_current)
        else:
            kept = span.far_slice(exclude_current=exclude_current)

        if len(kept) < WayConfig.MIN_NODES:
            logger.warning(
                f"Refused trim of way {self.id}: {side.value} side at index {span.current_index} "
                f"would leave {len(kept)} node(s)"
            )
            return False

        removed = len(self.nodes) - len(kept)
        self.nodes = kept
        logger.debug(f"Trimmed way {self.id} to {side.value} side: removed {removed}, kept {len(kept)}")
        self._notify_nodes_changed()
        return True

    # =========================================================================
    # Node-change listeners
    # =========================================================================

    def add_listener(self, listener: NodesChangedListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: NodesChangedListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_nodes_changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_unavailable(self) -> bool:
        return self.state == WayState.UNAVAILABLE

    @property
    def is_available(self) -> bool:
        return self.state == WayState.AVAILABLE

    @property
    def is_accepted(self) -> bool:
        return self.state == WayState.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.state == WayState.REJECTED

    def make_available(self) -> None:
        self._lifecycle.make_available()

    def accept(self) -> None:
        self._lifecycle.accept()

    def reject(self) -> None:
        self._lifecycle.reject()

    def change_state(self, target: str) -> bool:
        """Move the way to target state.

        Args:
            target: One of WayState.AVAILABLE, ACCEPTED, REJECTED

        Returns:
            True if the state changed, False if the way was already in target.

        Raises:
            ValueError: If target is not a state a way can be moved to.
            TransitionNotAllowed: If the move is not legal from the current state.
        """
        if self.state == target:
            return False
        event = EVENT_FOR_TARGET.get(target)
        if event is None:
            raise ValueError(f"Way cannot be moved to state {target!r}")
        self._lifecycle.send(event)
        return True

    def try_change_state(self, target: str) -> bool:
        """Like change_state(), but reports illegal moves as False instead of raising."""
        try:
            return self.change_state(target=target)
        except TransitionNotAllowed:
            logger.warning(f"Way {self.id} cannot move from {self.state} to {target}")
            return False

    def __repr__(self) -> str:
        return f"Way({self.id}, {self.name!r}, nodes={len(self.nodes)}, state={self.state})"
