"""BoundingBox - Axis-aligned lat/lon region with antimeridian support.

A box is (min_lat, min_lon, max_lat, max_lon). Latitude is always ordered
(min_lat <= max_lat). Longitude is read west-to-east: when min_lon > max_lon
the box straddles the antimeridian, e.g. min_lon=170, max_lon=-170 is a 20°
wide box centered on 180. That is a valid state, not an error.

Click boxes (placed by the user), virtual boxes (synthesized during assembly),
the union of all click boxes and the extent of a way are all BoundingBoxes.
"""

from dataclasses import dataclass
from typing import Union

from boundary_foundry.constants import BoxConfig, GeoConfig
from boundary_foundry.core.geo_math import GeoMath
from boundary_foundry.model.point import Point


@dataclass
class BoundingBox:
    """A lat/lon rectangle, possibly straddling the antimeridian.

    Equality (==) compares exact coordinates. key() is a cheaper scalar
    identity that can collide; see key().

    Attributes:
        min_lat: South edge (decimal degrees)
        min_lon: West edge (decimal degrees)
        max_lat: North edge (decimal degrees)
        max_lon: East edge (decimal degrees)
    """

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_coordinates(cls, min_lat: float, min_lon: float, max_lat: float, max_lon: float) -> "BoundingBox":
        """Create a box from two corners given as raw numbers, in any order.

        Latitudes are sorted. Longitudes are ordered by the sign of the minimal
        delta between them, so the box always spans the shorter arc. Exactly
        opposite longitudes have no shorter arc; the box then runs east from
        the smaller one.
        """
        if min_lat > max_lat:
            min_lat, max_lat = max_lat, min_lat
        delta = GeoMath.lon_delta_minimal(lon_ref=min_lon, lon_compare=max_lon)
        if delta < 0 or (delta == GeoConfig.LON_HALF_TURN_DEG and min_lon > max_lon):
            min_lon, max_lon = max_lon, min_lon
        return cls(min_lat=min_lat, min_lon=min_lon, max_lat=max_lat, max_lon=max_lon)

    @classmethod
    def from_corners(cls, corner1: Point, corner2: Point) -> "BoundingBox":
        """Create the box spanned by two points. from_corners(a, b) == from_corners(b, a)."""
        return cls.from_coordinates(
            min_lat=corner1.lat,
            min_lon=corner1.lon,
            max_lat=corner2.lat,
            max_lon=corner2.lon,
        )

    @classmethod
    def around(cls, center: Point, size_deg: float = BoxConfig.CLICK_BOX_SIZE_DEG) -> "BoundingBox":
        """Create a square box of side size_deg centered on a point.

        Longitudes wrap at the antimeridian, so a box centered on lon=180
        comes out straddling (min_lon > max_lon).
        """
        offset = size_deg / 2.0
        return cls(
            min_lat=center.lat - offset,
            min_lon=GeoMath.lon_add(lon=center.lon, degrees=-offset),
            max_lat=center.lat + offset,
            max_lon=GeoMath.lon_add(lon=center.lon, degrees=offset),
        )

    def copy(self) -> "BoundingBox":
        return BoundingBox(min_lat=self.min_lat, min_lon=self.min_lon, max_lat=self.max_lat, max_lon=self.max_lon)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def straddles_antimeridian(self) -> bool:
        return self.min_lon > self.max_lon

    @property
    def center(self) -> Point:
        return Point(
            lat=GeoMath.lat_midpoint(lat_ref=self.min_lat, lat_compare=self.max_lat),
            lon=GeoMath.lon_midpoint(lon_ref=self.min_lon, lon_compare=self.max_lon),
        )

    def contains_lat(self, lat: float) -> bool:
        return self.min_lat <= lat <= self.max_lat

    def contains_lon(self, lon: float) -> bool:
        """True if lon falls between the west and east edges.

        A straddling box contains everything east of min_lon or west of max_lon.
        """
        if self.straddles_antimeridian:
            return lon >= self.min_lon or lon <= self.max_lon
        return self.min_lon <= lon <= self.max_lon

    def encloses(self, point: Point) -> bool:
        """True if the point lies inside the box (edges inclusive)."""
        return self.contains_lat(point.lat) and self.contains_lon(point.lon)

    def intersects(self, other: "BoundingBox") -> bool:
        """True if the two boxes overlap (touching edges count).

        Latitude uses plain interval overlap. Longitude measures the minimal
        delta from each box's west edge to the other's east edge; when both
        deltas point the same way the boxes are disjoint.
        """
        lats_overlap = self.min_lat <= other.max_lat and other.min_lat <= self.max_lat
        if not lats_overlap:
            return False
        west_to_east = GeoMath.lon_delta_minimal(lon_ref=self.min_lon, lon_compare=other.max_lon)
        east_to_west = GeoMath.lon_delta_minimal(lon_ref=self.max_lon, lon_compare=other.min_lon)
        return west_to_east * east_to_west <= 0

    def key(self) -> float:
        """Scalar identity built from the south-west corner.

        min_lon * 1e9 + min_lat. Fast to compare and sort, but two boxes with
        different extents and the same south-west corner share a key, and
        floating point rounding can merge nearby corners too. Use == when
        exact identity matters.
        """
        return self.min_lon * BoxConfig.KEY_LON_SCALE + self.min_lat

    # =========================================================================
    # Growth
    # =========================================================================

    def grow_to_include(self, other: Union[Point, "BoundingBox"]) -> None:
        """Expand in place so that other is enclosed. Never shrinks.

        Args:
            other: A Point, or a BoundingBox whose corners should be enclosed
        """
        if isinstance(other, BoundingBox):
            south, west, north, east = other.min_lat, other.min_lon, other.max_lat, other.max_lon
        else:
            south = north = other.lat
            west = east = other.lon

        if GeoMath.lat_delta(lat_ref=self.max_lat, lat_compare=north) > 0:
            self.max_lat = north
        if GeoMath.lat_delta(lat_ref=self.min_lat, lat_compare=south) < 0:
            self.min_lat = south
        if GeoMath.lon_delta_minimal(lon_ref=self.max_lon, lon_compare=east) > 0:
            self.max_lon = east
        if GeoMath.lon_delta_minimal(lon_ref=self.min_lon, lon_compare=west) < 0:
            self.min_lon = west

    def __repr__(self) -> str:
        return (
            f"BoundingBox(lat=[{self.min_lat:.6f}, {self.max_lat:.6f}], "
            f"lon=[{self.min_lon:.6f}, {self.max_lon:.6f}])"
        )
