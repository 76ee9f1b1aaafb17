"""Signed angular arithmetic on latitude/longitude values.

Provides degree-space helpers for boundary assembly:
- Latitude and longitude deltas (longitude takes the shortest way around)
- Longitude addition with wraparound at the antimeridian
- Midpoints
- Planar distance and proximity tests for short local comparisons

Longitudes are normalized into the half-open range (-180, 180].
Nothing here is geodesic: distances are in degrees, not meters.
"""

import numpy as np

from boundary_foundry.constants import GeoConfig

HALF_TURN = GeoConfig.LON_HALF_TURN_DEG
FULL_TURN = GeoConfig.LON_FULL_TURN_DEG


class GeoMath:
    """Static methods for latitude/longitude arithmetic in decimal degrees.

    Sign conventions:
        Latitude delta: positive = compare point is north of reference.
        Longitude delta: positive = east, negative = west, always the
        shorter way around the globe.
    """

    @staticmethod
    def lat_delta(lat_ref: float, lat_compare: float) -> float:
        """Degrees from lat_ref to lat_compare (negative = south)."""
        return lat_compare - lat_ref

    @staticmethod
    def lon_delta_minimal(lon_ref: float, lon_compare: float) -> float:
        """Signed shortest angular separation from lon_ref to lon_compare.

        Args:
            lon_ref: Reference longitude (decimal degrees)
            lon_compare: Comparison longitude (decimal degrees)

        Returns:
            Degrees in (-180, 180]. Negative means lon_compare lies west of lon_ref.
        """
        delta = lon_compare - lon_ref
        if delta > HALF_TURN:
            delta -= FULL_TURN
        elif delta <= -HALF_TURN:
            delta += FULL_TURN
        return delta

    @staticmethod
    def normalize_lon(lon: float) -> float:
        """Wrap a longitude that is at most one turn out of range into (-180, 180]."""
        if lon > HALF_TURN:
            return lon - FULL_TURN
        if lon <= -HALF_TURN:
            return lon + FULL_TURN
        return lon

    @staticmethod
    def lon_add(lon: float, degrees: float) -> float:
        """Return lon moved by degrees (east positive), wrapped at the antimeridian."""
        return GeoMath.normalize_lon(lon + degrees)

    @staticmethod
    def lat_midpoint(lat_ref: float, lat_compare: float) -> float:
        """Latitude halfway between two latitudes."""
        return lat_ref + GeoMath.lat_delta(lat_ref, lat_compare) / 2.0

    @staticmethod
    def lon_midpoint(lon_ref: float, lon_compare: float) -> float:
        """Longitude halfway along the shorter arc between two longitudes.

        Example:
            lon_midpoint(-170.0, 170.0) -> 180.0 (crosses the antimeridian,
            not 0.0 through Greenwich)
        """
        delta = GeoMath.lon_delta_minimal(lon_ref, lon_compare)
        return GeoMath.normalize_lon(lon_ref + delta / 2.0)

    @staticmethod
    def distance_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Pythagorean distance in degrees between two points.

        Treats degrees of latitude and longitude as equal planar units, which is
        only good enough for ranking short distances (well under a kilometer)
        against each other.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in degrees.
        """
        d_lat = GeoMath.lat_delta(lat1, lat2)
        d_lon = GeoMath.lon_delta_minimal(lon1, lon2)
        return float(np.hypot(d_lat, d_lon))

    @staticmethod
    def is_near(lat1: float, lon1: float, lat2: float, lon2: float, threshold_deg: float) -> bool:
        """True if both the latitude and the longitude separation are within threshold_deg.

        This is a square (Chebyshev) test, not a radius test.
        """
        d_lat = GeoMath.lat_delta(lat1, lat2)
        d_lon = GeoMath.lon_delta_minimal(lon1, lon2)
        return abs(d_lat) <= threshold_deg and abs(d_lon) <= threshold_deg

    @staticmethod
    def pairwise_distance_deg(
        lats_a: np.ndarray,
        lons_a: np.ndarray,
        lats_b: np.ndarray,
        lons_b: np.ndarray,
    ) -> np.ndarray:
        """Vectorized distance_deg for every combination of a-points and b-points.

        Args:
            lats_a, lons_a: Coordinates of the a-points, shape (n,)
            lats_b, lons_b: Coordinates of the b-points, shape (m,)

        Returns:
            Array of shape (n, m) where [i, j] == distance_deg(a[i], b[j]).
        """
        d_lat = lats_b[np.newaxis, :] - lats_a[:, np.newaxis]
        d_lon = lons_b[np.newaxis, :] - lons_a[:, np.newaxis]
        d_lon = np.where(d_lon > HALF_TURN, d_lon - FULL_TURN, d_lon)
        d_lon = np.where(d_lon <= -HALF_TURN, d_lon + FULL_TURN, d_lon)
        return np.hypot(d_lat, d_lon)
