"""Latency-to-distance conversion.

The model attributes the whole latency difference to propagation through
optical fibre at 67% of the speed of light. Processing, queueing and routing
detours are ignored, so the result is a rough proxy for distance rather than
a measurement, and outliers are passed through uncorrected.
"""

SPEED_OF_LIGHT_KM_S = 299792.458
FIBER_VELOCITY_FACTOR = 0.67
FIBER_SPEED_KM_S = SPEED_OF_LIGHT_KM_S * FIBER_VELOCITY_FACTOR


def rtt_to_distance(delta_ms: float) -> float:
    """Convert a round-trip latency delta in milliseconds to one-way kilometres.

    Args:
        delta_ms: Round-trip time difference in milliseconds (non-negative)

    Returns:
        Estimated distance in kilometres

    Examples:
        >>> round(rtt_to_distance(10.0), 1)
        1004.3
    """
    seconds = delta_ms / 1000.0
    # Halved because the delay covers the path twice
    return seconds * FIBER_SPEED_KM_S / 2
