"""BoundaryRegistry - Owner of the ways and boxes collected from map clicks.

Every map click yields a click box and the ways found under it. The registry
records each (way, box) pair, keeps one Way per id and one box per key(), and
answers the questions boundary assembly asks:

- which ways are accepted
- which boxes exist, in click order
- which boxes a given way was found in

The assembler only depends on the WayBoxRegistry protocol, so any object with
those four methods can feed it.
"""

import logging
from typing import Iterable, Optional, Protocol, runtime_checkable

from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.way import NodesChangedListener, Way
from boundary_foundry.model.way_state import WayState

logger = logging.getLogger(__name__)


# =============================================================================
# Assembly Interface
# =============================================================================


@runtime_checkable
class WayBoxRegistry(Protocol):
    """
    Responsibilities:
      • List the accepted ways, in registration order.
      • List every box, click boxes and virtual boxes alike, in registration order.
      • Report and record which boxes a way belongs to.
    """

    def accepted_ways(self) -> list[Way]: ...
    def click_boxes(self) -> list[BoundingBox]: ...
    def boxes_for_way(self, way: Way) -> list[BoundingBox]: ...
    def register_box(self, way: Way, box: BoundingBox) -> None: ...


# =============================================================================
# In-Memory Registry
# =============================================================================


class BoundaryRegistry:
    """In-memory WayBoxRegistry used by the application.

    Example:
        registry = BoundaryRegistry()
        click = BoundingBox.around(center=Point(lat=46.5, lon=7.9))
        registry.load_box_ways(ways=ways_under_click, box=click)
        registry.way_by_id(way_id=123).accept()
    """

    def __init__(self) -> None:
        self._ways: list[Way] = []
        self._ways_by_id: dict[int, Way] = {}
        self._boxes: list[BoundingBox] = []
        self._boxes_by_key: dict[float, BoundingBox] = {}
        self._pairs: list[tuple[Way, BoundingBox]] = []
        self._nodes_listeners: list[NodesChangedListener] = []

    # =========================================================================
    # Registration
    # =========================================================================

    def add_way_box(self, way: Way, box: BoundingBox) -> tuple[Way, BoundingBox]:
        """Record that way was found in box.

        A way whose id is already known is replaced by the registered one, and
        a box whose key() is already known by the registered box.

        Returns:
            The (way, box) pair as stored.
        """
        registered_way = self._ways_by_id.get(way.id)
        if registered_way is None:
            registered_way = way
            self._ways_by_id[way.id] = way
            self._ways.append(way)
            for listener in self._nodes_listeners:
                way.add_listener(listener)

        box_key = box.key()
        registered_box = self._boxes_by_key.get(box_key)
        if registered_box is None:
            registered_box = box
            self._boxes_by_key[box_key] = box
            self._boxes.append(box)

        if not any(w is registered_way and b is registered_box for w, b in self._pairs):
            self._pairs.append((registered_way, registered_box))
        return registered_way, registered_box

    def register_box(self, way: Way, box: BoundingBox) -> None:
        """Attach a (virtual) box to a way."""
        way, box = self.add_way_box(way=way, box=box)
        logger.debug(f"Registered {box} for way {way.id}")

    def load_box_ways(self, ways: Iterable[Way], box: BoundingBox) -> list[Way]:
        """Register the ways found under one click box.

        Ways still unavailable afterwards are made available, so the user can
        pick from them.

        Returns:
            The registered way for each input way.
        """
        loaded = []
        for way in ways:
            registered_way, _ = self.add_way_box(way=way, box=box)
            if registered_way.is_unavailable:
                registered_way.make_available()
            loaded.append(registered_way)
        logger.info(f"Loaded {len(loaded)} ways for {box}")
        return loaded

    def add_nodes_listener(self, listener: NodesChangedListener) -> None:
        """Call listener whenever any registered way (present or future) is trimmed."""
        if listener not in self._nodes_listeners:
            self._nodes_listeners.append(listener)
        for way in self._ways:
            way.add_listener(listener)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def ways(self) -> list[Way]:
        return list(self._ways)

    def way_by_id(self, way_id: int) -> Optional[Way]:
        return self._ways_by_id.get(way_id)

    def ways_in_state(self, state: str) -> list[Way]:
        if state not in WayState.ALL:
            raise ValueError(f"Unknown way state {state!r}")
        return [way for way in self._ways if way.state == state]

    def accepted_ways(self) -> list[Way]:
        return self.ways_in_state(state=WayState.ACCEPTED)

    def available_ways(self) -> list[Way]:
        return self.ways_in_state(state=WayState.AVAILABLE)

    def unavailable_ways(self) -> list[Way]:
        return self.ways_in_state(state=WayState.UNAVAILABLE)

    def click_boxes(self) -> list[BoundingBox]:
        return list(self._boxes)

    def boxes_for_way(self, way: Way) -> list[BoundingBox]:
        """Boxes the way was found in, in registration order."""
        return [box for registered_way, box in self._pairs if registered_way is way]

    def box_union(self) -> Optional[BoundingBox]:
        """Smallest box enclosing every registered box, None when there are none."""
        if not self._boxes:
            return None
        union = self._boxes[0].copy()
        for box in self._boxes[1:]:
            union.grow_to_include(box)
        return union

    # =========================================================================
    # Cleanup
    # =========================================================================

    def clear_all(self) -> None:
        """Forget every way and box. Node listeners stay registered for future ways."""
        for way in self._ways:
            for listener in self._nodes_listeners:
                way.remove_listener(listener)
        self._ways = []
        self._ways_by_id = {}
        self._boxes = []
        self._boxes_by_key = {}
        self._pairs = []

    def clear_non_accepted_ways(self) -> None:
        """Drop every way that is not accepted, and boxes only those ways used."""
        accepted_pairs = [(way, box) for way, box in self._pairs if way.is_accepted]
        dropped = len(self._ways) - len({id(way) for way, _ in accepted_pairs})
        self.clear_all()
        for way, box in accepted_pairs:
            self.add_way_box(way=way, box=box)
        logger.info(f"Cleared {dropped} non-accepted ways, {len(self._ways)} remain")
