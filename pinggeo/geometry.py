"""Spherical Earth geometry helpers."""

import math

EARTH_RADIUS_KM = 6371.0


def great_circle_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in kilometres between two points given in degrees.

    Coordinates are not range-checked; out-of-range input gives a finite but
    meaningless result.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def geo_to_cartesian(lat: float, lon: float) -> tuple[float, float, float]:
    """Map a point on the sphere surface to Earth-centred x, y, z in kilometres."""
    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)

    x = EARTH_RADIUS_KM * math.cos(lat_rad) * math.cos(lon_rad)
    y = EARTH_RADIUS_KM * math.cos(lat_rad) * math.sin(lon_rad)
    z = EARTH_RADIUS_KM * math.sin(lat_rad)
    return x, y, z


def cartesian_to_geo(x: float, y: float, z: float) -> tuple[float, float]:
    """Inverse of geo_to_cartesian; returns (latitude, longitude) in degrees."""
    lon = math.degrees(math.atan2(y, x))
    lat = math.degrees(math.atan2(z, math.hypot(x, y)))
    return lat, lon
