"""BoundaryAssembler - Stitch accepted ways into one ordered boundary.

The user clicks along a boundary; each click leaves a small box and the ways
found under it. Accepted ways overshoot each other, stop short of each other,
or wander outside the clicked area. calculate() runs ten phases that trim them
to fit and then chains them into a cycle:

    1. Collect accepted ways
    2. Union of all click boxes
    3. Build endpoints, binding each to the first box that encloses it
    4. Give pairs of nearby naked endpoints a shared virtual box
    5. Trim ends that stick out of the union back to one of the way's boxes
    6. Rebuild endpoints
    7. Trim naked ends back to the first box they reach
    8. Rebuild endpoints
    9. Trim way pairs sharing a box to their nearest pair of nodes
   10. Rebuild endpoints and chain them: same way, same box, same way, ...

Absent matches never raise; they show up as naked endpoints or as an
incomplete result.
"""

import logging
from typing import Optional

from boundary_foundry.assembly.nearest_pair import find_nearest_pair
from boundary_foundry.constants import BoundaryConfig
from boundary_foundry.core.directional_span import SpanSide
from boundary_foundry.model.boundary import OrderedBoundary
from boundary_foundry.model.bounding_box import BoundingBox
from boundary_foundry.model.endpoint import Endpoint
from boundary_foundry.model.registry import WayBoxRegistry
from boundary_foundry.model.way import Way

logger = logging.getLogger(__name__)


class BoundaryAssembler:
    """Runs one boundary calculation against a registry.

    Construct one per calculation. Trims are applied to the registry's Way
    objects in place, and virtual boxes are registered with it.

    Attributes:
        registry: Source of ways and boxes
        proximity_threshold_deg: Naked endpoints closer than this on both axes
            get a virtual box; also the side of that box
        ways: Accepted ways of the current calculation
        boxes: Boxes known to the current calculation, in registry order
        union_bounds: Union of the click boxes, None when there are none
        endpoints: Endpoints as last built

    Example:
        boundary = BoundaryAssembler(registry=registry).calculate()
        if boundary.complete:
            polygon = boundary.to_polygon()
    """

    def __init__(
        self,
        registry: WayBoxRegistry,
        proximity_threshold_deg: float = BoundaryConfig.PROXIMITY_THRESHOLD_DEG,
    ) -> None:
        if proximity_threshold_deg <= 0:
            raise ValueError(f"proximity_threshold_deg must be positive, got {proximity_threshold_deg}")
        self.registry = registry
        self.proximity_threshold_deg = proximity_threshold_deg
        self.ways: list[Way] = []
        self.boxes: list[BoundingBox] = []
        self.union_bounds: Optional[BoundingBox] = None
        self.endpoints: list[Endpoint] = []
        self._calculating = False

    def calculate(self) -> OrderedBoundary:
        """Trim the accepted ways and assemble them into a boundary.

        Returns:
            OrderedBoundary; empty and incomplete when no way is accepted.

        Raises:
            WayGeometryError: If an accepted way has fewer than two nodes.
            RuntimeError: If called again while a calculation is running
                (e.g. from a node-change listener).
        """
        if self._calculating:
            raise RuntimeError("BoundaryAssembler.calculate() is already running")
        self._calculating = True
        try:
            return self._run_phases()
        finally:
            self._calculating = False

    def _run_phases(self) -> OrderedBoundary:
        self._collect_ways()
        if not self.ways:
            logger.info("No accepted ways, nothing to assemble")
            return OrderedBoundary(endpoints=[], complete=False)

        self._compute_union_bounds()
        self.endpoints = self._build_endpoints()
        self._add_near_endpoint_boxes()
        self.boxes = self.registry.click_boxes()
        self._trim_outliers()
        self.endpoints = self._build_endpoints()
        self._trim_naked_endpoints()
        self.endpoints = self._build_endpoints()
        self._trim_shared_box_pairs()
        self.endpoints = self._build_endpoints()
        return self._assemble_cycle()

    # =========================================================================
    # Phases 1-3: Inputs and endpoints
    # =========================================================================

    def _collect_ways(self) -> None:
        self.ways = list(self.registry.accepted_ways())
        for way in self.ways:
            way.require_min_nodes()
        logger.info(f"Phase 1: {len(self.ways)} accepted ways")

    def _compute_union_bounds(self) -> None:
        self.boxes = self.registry.click_boxes()
        self.union_bounds = None
        if self.boxes:
            self.union_bounds = self.boxes[0].copy()
            for box in self.boxes[1:]:
                self.union_bounds.grow_to_include(box)
        logger.info(f"Phase 2: union of {len(self.boxes)} boxes is {self.union_bounds}")

    def _build_endpoints(self) -> list[Endpoint]:
        """Two endpoints per way, each bound to the first box enclosing its node."""
        endpoints = []
        for way in self.ways:
            endpoints.append(Endpoint.first_of(way=way))
            endpoints.append(Endpoint.last_of(way=way))
        for endpoint in endpoints:
            point = endpoint.point
            endpoint.box = next((box for box in self.boxes if box.encloses(point)), None)
        naked = sum(1 for endpoint in endpoints if endpoint.is_naked)
        logger.debug(f"Built {len(endpoints)} endpoints, {naked} naked")
        return endpoints

    # =========================================================================
    # Phase 4: Virtual boxes
    # =========================================================================

    def _add_near_endpoint_boxes(self) -> None:
        """Pair up naked endpoints that nearly touch and give each pair a box.

        Greedy in endpoint order: each naked endpoint takes the first later
        naked endpoint within the threshold.
        """
        naked = [endpoint for endpoint in self.endpoints if endpoint.is_naked]
        added = 0
        for i, endpoint in enumerate(naked):
            if not endpoint.is_naked:
                continue
            for other in naked[i + 1 :]:
                if not other.is_naked:
                    continue
                if not endpoint.point.is_near(other.point, threshold_deg=self.proximity_threshold_deg):
                    continue
                box = BoundingBox.around(
                    center=endpoint.point.midpoint(other.point),
                    size_deg=self.proximity_threshold_deg,
                )
                endpoint.box = box
                other.box = box
                self.registry.register_box(way=endpoint.way, box=box)
                self.registry.register_box(way=other.way, box=box)
                added += 1
                break
        logger.info(f"Phase 4: added {added} virtual boxes")

    # =========================================================================
    # Phase 5: Outliers
    # =========================================================================

    def _trim_outliers(self) -> None:
        if self.union_bounds is None:
            logger.info("Phase 5: skipped, no boxes")
            return
        trimmed = 0
        for way in self.ways:
            way_boxes = self.registry.boxes_for_way(way)
            # Last endpoint is built after the first trim so its index is current
            for make_endpoint in (Endpoint.first_of, Endpoint.last_of):
                endpoint = make_endpoint(way=way)
                if self.union_bounds.encloses(endpoint.point):
                    continue
                if self._trim_to_first_enclosing(endpoint=endpoint, boxes=way_boxes) is not None:
                    trimmed += 1
        logger.info(f"Phase 5: trimmed {trimmed} outlying ends")

    def _trim_to_first_enclosing(self, endpoint: Endpoint, boxes: list[BoundingBox]) -> Optional[BoundingBox]:
        """Walk inward from endpoint to the first node some box encloses and keep the far side.

        Returns:
            The enclosing box if a trim was applied, else None.
        """
        span = endpoint.span()
        for index, node in span.walk():
            box = next((box for box in boxes if box.encloses(node.location)), None)
            if box is None:
                continue
            if endpoint.way.trim_toward(span, side=SpanSide.FAR, keep_current=True):
                logger.debug(f"Way {endpoint.way.id} cut at index {index} into {box}")
                return box
            return None
        return None

    # =========================================================================
    # Phase 7: Naked endpoints
    # =========================================================================

    def _trim_naked_endpoints(self) -> None:
        naked = [endpoint for endpoint in self.endpoints if endpoint.is_naked]
        bound = 0
        for endpoint in naked:
            # An earlier trim of the same way may have moved its last index
            endpoint.follow_trim()
            way_extent = endpoint.way.bounding_box()
            candidates = [box for box in self.boxes if box.intersects(way_extent)]
            box = self._trim_to_first_enclosing(endpoint=endpoint, boxes=candidates)
            if box is None:
                continue
            endpoint.follow_trim()
            endpoint.box = box
            bound += 1
        logger.info(f"Phase 7: {bound} of {len(naked)} naked endpoints trimmed into a box")

    # =========================================================================
    # Phase 9: Shared boxes
    # =========================================================================

    def _trim_shared_box_pairs(self) -> None:
        pairs = 0
        for i, way_a in enumerate(self.ways):
            for box_a in self.registry.boxes_for_way(way_a):
                for way_b in self.ways[i + 1 :]:
                    for box_b in self.registry.boxes_for_way(way_b):
                        if box_a == box_b:
                            self._trim_pair_to_nearest(way_a=way_a, way_b=way_b, box=box_a)
                            pairs += 1
        logger.info(f"Phase 9: examined {pairs} way pairs sharing a box")

    def _trim_pair_to_nearest(self, way_a: Way, way_b: Way, box: BoundingBox) -> None:
        endpoint_a = Endpoint.first_of(way=way_a)
        endpoint_b = Endpoint.first_of(way=way_b)
        if not (endpoint_a.bind_to_box(box) and endpoint_b.bind_to_box(box)):
            return
        span_a = endpoint_a.span()
        span_b = endpoint_b.span()
        pair = find_nearest_pair(span_a=span_a, span_b=span_b, box=box)
        if pair is None:
            return
        span_a.seek(pair.index_a)
        span_b.seek(pair.index_b)
        way_a.trim_toward(span_a, side=SpanSide.FAR, keep_current=True)
        way_b.trim_toward(span_b, side=SpanSide.FAR, keep_current=True)
        logger.debug(
            f"Ways {way_a.id}/{way_b.id} cut at nodes {pair.index_a}/{pair.index_b} "
            f"({pair.distance_deg:.6f}°) in {box}"
        )

    # =========================================================================
    # Phase 10: Cycle
    # =========================================================================

    def find_endpoint_by_way(self, way: Way, skip_index: int) -> Optional[int]:
        """Index of the first endpoint on way other than skip_index."""
        for index, endpoint in enumerate(self.endpoints):
            if index != skip_index and endpoint.way is way:
                return index
        return None

    def find_endpoint_by_box(self, box: Optional[BoundingBox], skip_index: int) -> Optional[int]:
        """Index of the first endpoint other than skip_index bound to a box with the same key().

        Naked endpoints never match, and a naked search box matches nothing.
        """
        if box is None:
            return None
        key = box.key()
        for index, endpoint in enumerate(self.endpoints):
            if index == skip_index or endpoint.is_naked:
                continue
            if endpoint.box.key() == key:
                return index
        return None

    def _assemble_cycle(self) -> OrderedBoundary:
        """Chain endpoints from endpoint 0, alternating way and box links.

        Each endpoint appears at most once; a link back to an endpoint other
        than 0 that is already chained ends the chain incomplete.
        """
        ordered: list[Endpoint] = []
        visited: set[int] = set()
        found: Optional[int] = 0
        by_way = True
        complete = False
        while True:
            if found in visited:
                logger.warning(f"Endpoint chain revisits endpoint {found} without returning to the start")
                break
            visited.add(found)
            current = self.endpoints[found]
            ordered.append(current)
            if by_way:
                found = self.find_endpoint_by_way(way=current.way, skip_index=found)
            else:
                found = self.find_endpoint_by_box(box=current.box, skip_index=found)
            by_way = not by_way
            if found is None:
                break
            if found == 0:
                complete = True
                break

        logger.info(f"Phase 10: {len(ordered)} of {len(self.endpoints)} endpoints chained, complete={complete}")
        return OrderedBoundary(endpoints=ordered, complete=complete)
