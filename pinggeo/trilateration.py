"""Three-point position estimate from weighted Earth-centred coordinates.

This is not a true sphere intersection. Each of the three nodes is placed on
the sphere, weighted by 1 / (distance_km + 1), averaged, and the average is
projected back onto the surface. Nearer nodes pull the estimate harder.
"""

import logging
import math
from typing import Sequence

from pinggeo.geometry import EARTH_RADIUS_KM, cartesian_to_geo, geo_to_cartesian
from pinggeo.models import SENTINEL_LOCATION, Location, RankedSet, ReferenceNode

logger = logging.getLogger(__name__)

MIN_POINTS = 3


def distance_weight(distance_km: float) -> float:
    """Weight of a node at an estimated distance; the +1 keeps zero distances finite."""
    return 1.0 / (distance_km + 1.0)


def trilaterate(points: Sequence[tuple[ReferenceNode, float]]) -> Location:
    """Estimate a position from the first three (node, distance_km) pairs.

    Returns SENTINEL_LOCATION when fewer than three pairs are given or when
    the weighted centroid sits at the Earth's centre.
    """
    if len(points) < MIN_POINTS:
        logger.debug("Trilateration skipped: %d points", len(points))
        return SENTINEL_LOCATION

    sum_x = sum_y = sum_z = total_weight = 0.0
    for node, distance_km in points[:MIN_POINTS]:
        x, y, z = geo_to_cartesian(node.latitude, node.longitude)
        weight = distance_weight(distance_km)
        sum_x += x * weight
        sum_y += y * weight
        sum_z += z * weight
        total_weight += weight

    x_est = sum_x / total_weight
    y_est = sum_y / total_weight
    z_est = sum_z / total_weight

    norm = math.sqrt(x_est * x_est + y_est * y_est + z_est * z_est)
    if norm == 0.0:
        logger.warning("Trilateration centroid is degenerate (nodes cancel out)")
        return SENTINEL_LOCATION

    # Back onto the sphere surface
    scale = EARTH_RADIUS_KM / norm
    lat, lon = cartesian_to_geo(x_est * scale, y_est * scale, z_est * scale)
    return Location(lat, lon)


def trilaterate_ranked(ranked: RankedSet) -> Location:
    """Trilaterate from the three lowest-delta entries of a ranked set."""
    return trilaterate([(m.node, m.distance_km) for m in ranked[:MIN_POINTS]])
