"""Plain-text rendering of geolocation results."""

from pinggeo.geometry import great_circle_distance
from pinggeo.models import Location, RankedSet, Stats
from pinggeo.orchestrator import GeolocationReport
from pinggeo.ranking import proximity_indicator

WIDTH = 80
TOP_NODES = 15
TOP_COUNTRIES = 10
MAPS_URL = "https://www.google.com/maps?q={lat:.4f},{lon:.4f}"


def _banner(title: str) -> list[str]:
    return ["", "=" * WIDTH, title, "=" * WIDTH]


def _section(title: str) -> list[str]:
    return ["", title, "-" * WIDTH]


def format_progress(done: int, total: int, name: str, ok: bool) -> str:
    """One-line progress update, e.g. ``[ 12/167] [OK] Cloudflare``."""
    status = "[OK]" if ok else "[X] "
    return f"[{done:3d}/{total:3d}] {status} {name}"


def format_location(location: Location) -> list[str]:
    """Estimate plus map link; the sentinel is rendered as missing data."""
    if location.is_sentinel:
        return ["Estimated position: unavailable (insufficient data)"]
    return [
        f"Estimated position: {location.latitude:.4f}, {location.longitude:.4f}",
        "Map: " + MAPS_URL.format(lat=location.latitude, lon=location.longitude),
    ]


def render_ranking(ranked: RankedSet, target: str, target_rtt_ms: float) -> list[str]:
    """Closest nodes by latency similarity."""
    lines = _banner(f"RESULTS - target: {target} (RTT: {target_rtt_ms:.2f} ms)")
    lines += _section(f"TOP {TOP_NODES} NODES BY LATENCY SIMILARITY")

    for position, measurement in enumerate(ranked[:TOP_NODES], start=1):
        node = measurement.node
        lines.append(
            f"{proximity_indicator(measurement.delta_ms)} {position:2d}) "
            f"{node.name:<20} | {node.country:<15} | {node.city:<12}"
        )
        lines.append(
            f"        RTT: {node.avg_rtt_ms:7.2f} ms | Delta: {measurement.delta_ms:7.2f} ms"
            f" | Estimated distance: {measurement.distance_km:.0f} km"
        )
    return lines


def render_estimates(report: GeolocationReport) -> list[str]:
    """Both position estimates, node separations and the coherence grade."""
    ranked = report.ranked
    lines = _banner("POSITION ESTIMATES")

    if len(ranked) < 3:
        lines.append("")
        lines.append(f"Not enough reference nodes for an estimate ({len(ranked)} of 3 needed)")
        return lines

    first, second, third = ranked[:3]
    lines += _section("METHOD 1: 3-point trilateration")
    for number, measurement in enumerate((first, second, third), start=1):
        lines.append(
            f"Node {number}: {measurement.node.name} ({measurement.node.city})"
            f" - distance: {measurement.distance_km:.0f} km"
        )
    lines.append("")
    lines += format_location(report.trilateration)

    lines += _section(f"METHOD 2: weighted multilateration (top {report.multilateration_count} nodes)")
    lines += format_location(report.multilateration)

    lines += _section("GREAT-CIRCLE DISTANCES BETWEEN NODES")
    for a, b in ((first, second), (first, third), (second, third)):
        km = great_circle_distance(a.node.latitude, a.node.longitude, b.node.latitude, b.node.longitude)
        lines.append(f"{a.node.name} <-> {b.node.name}: {km:.0f} km")

    coherence = report.coherence
    lines += _section("COHERENCE")
    lines.append(f"Coherence: {coherence.label}")
    lines.append(f"Mean delta (top 5): {coherence.mean_delta_ms:.2f} ms")
    lines.append(f"Nodes analysed: {len(ranked)}")
    lines.append(f"Estimated precision: +/- {coherence.precision_km:.0f} km")
    return lines


def render_statistics(stats: Stats | None) -> list[str]:
    """Country histogram and mean RTT."""
    if stats is None:
        return []

    lines = _banner("STATISTICS")
    lines.append("")
    lines.append(f"Nodes per country (top {TOP_COUNTRIES}):")
    for country, count in stats.country_counts[:TOP_COUNTRIES]:
        lines.append(f"  {country:<20} {'#' * count} {count}")
    lines.append("")
    lines.append(f"Mean RTT over all nodes: {stats.mean_rtt_ms:.2f} ms")
    lines.append(f"Nodes answering: {stats.count}")
    return lines


def render_report(report: GeolocationReport) -> str:
    """Render a full run as text."""
    lines = render_ranking(report.ranked, report.target, report.target_rtt_ms)
    lines += render_estimates(report)
    lines += render_statistics(report.stats)

    if report.failed:
        lines.append(f"Nodes not answering: {report.failed} of {report.attempted}")
    for note in report.notes:
        lines.append(f"Note: {note}")

    lines += _banner("ANALYSIS COMPLETE")
    return "\n".join(lines) + "\n"
