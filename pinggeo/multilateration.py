"""N-point weighted position estimate in plain latitude/longitude space."""

import logging
import math

from pinggeo.models import SENTINEL_LOCATION, Location, RankedSet

logger = logging.getLogger(__name__)

DEFAULT_NODE_COUNT = 10
MIN_ENTRIES = 3


def delta_weight(delta_ms: float) -> float:
    """Weight of a node by latency delta in whole milliseconds.

    Sub-millisecond remainders are dropped, so 0.9 ms and 0 ms weigh the same.
    The +1 keeps a zero delta finite.
    """
    return 1.0 / (math.floor(delta_ms) + 1.0)


def multilaterate(ranked: RankedSet, count: int = DEFAULT_NODE_COUNT) -> Location:
    """Weighted mean of latitude and longitude over the top ``count`` entries.

    Averaging degrees directly is a flat approximation. It holds up only while
    the best-matching nodes sit close together, and breaks across the
    antimeridian.

    Args:
        ranked: Measurements in ascending delta order
        count: Number of leading entries to use, clamped to len(ranked)

    Returns:
        The estimate, or SENTINEL_LOCATION if ranked has fewer than three entries
    """
    if count <= 0:
        raise ValueError("count must be positive")

    if len(ranked) < MIN_ENTRIES:
        logger.debug("Multilateration skipped: %d entries", len(ranked))
        return SENTINEL_LOCATION

    total_lat = total_lon = total_weight = 0.0
    for measurement in ranked[:count]:
        weight = delta_weight(measurement.delta_ms)
        total_lat += measurement.node.latitude * weight
        total_lon += measurement.node.longitude * weight
        total_weight += weight

    return Location(total_lat / total_weight, total_lon / total_weight)
