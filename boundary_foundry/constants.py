"""Configuration constants for Boundary Foundry.

All configurable parameters are centralized here for easy tuning.

Classes:
    GeoConfig: Angular constants for latitude/longitude arithmetic
    BoxConfig: Click-box sizing and box identity key scaling
    BoundaryConfig: Boundary assembly parameters
    WayConfig: Way structure limits and defaults
"""


class GeoConfig:
    """Angular constants (decimal degrees)."""

    # Longitudes are kept in the half-open range (-180, 180]
    LON_HALF_TURN_DEG = 180.0
    LON_FULL_TURN_DEG = 360.0
    LAT_MAX_DEG = 90.0


class BoxConfig:
    """Click-box sizing and identity key parameters."""

    # Side length of the square box placed around a map click
    # 0.002° ≈ 220m of latitude, enough to catch the ways under a click
    CLICK_BOX_SIZE_DEG = 0.002

    # key() = min_lon * KEY_LON_SCALE + min_lat
    # Distinct boxes can share a key (e.g. float rounding at large |min_lon|),
    # callers that compare by key inherit that risk.
    KEY_LON_SCALE = 1_000_000_000.0


class BoundaryConfig:
    """Boundary assembly parameters."""

    # Two naked endpoints closer than this on both axes get a virtual box
    PROXIMITY_THRESHOLD_DEG = 0.002


class WayConfig:
    """Way structure limits and defaults."""

    # Fewest nodes a way can have and still yield a bounding box
    MIN_NODES = 2
    DEFAULT_NAME = "unnamed"


assert BoundaryConfig.PROXIMITY_THRESHOLD_DEG > 0, "Proximity threshold must be positive"
assert BoxConfig.CLICK_BOX_SIZE_DEG < GeoConfig.LON_HALF_TURN_DEG, "Click boxes must be smaller than a half turn"
