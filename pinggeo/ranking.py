"""Ranking and aggregation of probe measurements."""

from collections import Counter

from pinggeo.models import Coherence, Measurement, RankedSet, Stats

COHERENCE_WINDOW = 5


def rank(measurements: list[Measurement]) -> RankedSet:
    """Sort measurements by ascending delta.

    The sort is stable: equal deltas keep their input (catalog) order.
    """
    return sorted(measurements, key=lambda m: m.delta_ms)


def summarize(ranked: RankedSet) -> Stats | None:
    """Per-country counts and mean RTT over a ranked set.

    Countries are ordered by descending count; ties keep first-seen order.
    Returns None for an empty set.
    """
    if not ranked:
        return None

    counts = Counter(m.node.country for m in ranked)
    # Counter preserves insertion order, sorted() is stable
    country_counts = sorted(counts.items(), key=lambda item: item[1], reverse=True)

    total_rtt = sum(m.node.avg_rtt_ms for m in ranked)
    return Stats(
        country_counts=country_counts,
        mean_rtt_ms=total_rtt / len(ranked),
        count=len(ranked),
    )


def proximity_indicator(delta_ms: float) -> str:
    """Four-level marker for how closely a node's latency matches the target."""
    if delta_ms > 200:
        return "[   ]"
    if delta_ms > 100:
        return "[+  ]"
    if delta_ms > 50:
        return "[++ ]"
    return "[+++]"


def assess_coherence(ranked: RankedSet) -> Coherence:
    """Grade the agreement of the best matches and estimate precision.

    The mean delta is taken over the top five entries, always dividing by
    five, so short ranked sets grade better than their raw average.
    """
    top = ranked[:COHERENCE_WINDOW]
    mean_delta = sum(m.delta_ms for m in top) / COHERENCE_WINDOW

    if mean_delta > 200:
        label = "POOR"
    elif mean_delta > 100:
        label = "FAIR"
    elif mean_delta > 50:
        label = "GOOD"
    else:
        label = "EXCELLENT"

    if mean_delta < 20:
        precision_km = 100.0
    elif mean_delta < 50:
        precision_km = 200.0
    elif mean_delta < 100:
        precision_km = 300.0
    else:
        precision_km = 500.0

    return Coherence(label=label, mean_delta_ms=mean_delta, precision_km=precision_km)
