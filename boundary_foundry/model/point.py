"""Point - The geometry atom for boundary assembly.

A Point is a (lat, lon) value in decimal degrees with no identity of its own.
Nodes wrap a Point; bounding boxes are built from and tested against Points.
"""

from dataclasses import dataclass

import numpy as np

from boundary_foundry.core.geo_math import GeoMath


@dataclass(frozen=True)
class Point:
    """A geographic coordinate.

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees, (-180, 180]

    Example:
        point = Point(lat=40.0195, lon=-75.5215)
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if np.isnan(self.lat) or np.isnan(self.lon):
            raise ValueError(f"Point cannot have NaN coordinates: ({self.lat}, {self.lon})")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Shapely order."""
        return (self.lon, self.lat)

    def distance_to(self, other: "Point") -> float:
        """Planar distance in degrees to another point (see GeoMath.distance_deg)."""
        return GeoMath.distance_deg(lat1=self.lat, lon1=self.lon, lat2=other.lat, lon2=other.lon)

    def is_near(self, other: "Point", threshold_deg: float) -> bool:
        """True if other lies within threshold_deg on both axes."""
        return GeoMath.is_near(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
            threshold_deg=threshold_deg,
        )

    def midpoint(self, other: "Point") -> "Point":
        """Point halfway between self and other, taking the shorter longitude arc."""
        return Point(
            lat=GeoMath.lat_midpoint(lat_ref=self.lat, lat_compare=other.lat),
            lon=GeoMath.lon_midpoint(lon_ref=self.lon, lon_compare=other.lon),
        )

    def __repr__(self) -> str:
        return f"Point(lat={self.lat:.6f}, lon={self.lon:.6f})"
