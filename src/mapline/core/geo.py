from __future__ import annotations
from dataclasses import dataclass
from math import asin, cos, degrees, isfinite, nan, radians, sin, sqrt

"""
Geospatial helpers.

A spherical-Earth geometry layer: coordinates, angular conversions and
haversine distances. Nothing here validates ranges; out-of-range values are
used as-is and non-finite values produce NaN.
"""

EARTH_RADIUS_M = 6_371_000


@dataclass(frozen=True)
class GeoCoordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def to_radians(deg: float) -> float:
    return radians(deg)


def to_degrees(rad: float) -> float:
    return degrees(rad)


def haversine_m(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Compute great-circle distance in meters between two points."""
    if not all(isfinite(v) for v in (a.lat, a.lon, b.lat, b.lon)):
        return nan

    lat1 = to_radians(a.lat)
    lon1 = to_radians(a.lon)
    lat2 = to_radians(b.lat)
    lon2 = to_radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Out-of-range latitudes can push h outside [0, 1].
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_M * asin(sqrt(h))


def round_distance(meters: float, decimals: int = 2) -> float:
    """Round a distance for display; callers keep the full-precision value."""
    return round(float(meters), int(decimals))


def circle_radius_m(center: GeoCoordinate, edge: GeoCoordinate) -> float:
    """Radius of a circle centered at `center` passing through `edge` (2 decimals)."""
    return round_distance(haversine_m(center, edge), 2)
