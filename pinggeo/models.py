"""Data models for pinggeo reference nodes, measurements and estimates."""

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class ReferenceNode:
    """A reference host with a known geographic position.

    Catalog entries carry ``avg_rtt_ms=None``. A probe that succeeds produces a
    private copy with the measured round-trip time filled in (see
    ``with_rtt``), so the shared catalog is never written to.
    """

    name: str
    address: str
    country: str
    city: str
    latitude: float
    longitude: float
    avg_rtt_ms: float | None = None

    def with_rtt(self, avg_rtt_ms: float) -> "ReferenceNode":
        """Return a copy of this node carrying a measured average RTT."""
        return ReferenceNode(
            name=self.name,
            address=self.address,
            country=self.country,
            city=self.city,
            latitude=self.latitude,
            longitude=self.longitude,
            avg_rtt_ms=avg_rtt_ms,
        )


@dataclass(frozen=True)
class Measurement:
    """One successful probe of a reference node, compared with the target."""

    node: ReferenceNode
    delta_ms: float  # |node RTT - target RTT|
    distance_km: float  # estimated from delta_ms

    def __post_init__(self):
        """Reject negative deltas and distances."""
        if self.delta_ms < 0:
            raise ValueError("delta_ms must be non-negative")
        if self.distance_km < 0:
            raise ValueError("distance_km must be non-negative")
        if self.node.avg_rtt_ms is None:
            raise ValueError("measurement node must carry a measured RTT")


# Ascending by delta_ms; see pinggeo.ranking.rank
RankedSet = list[Measurement]


class Location(NamedTuple):
    """A (latitude, longitude) position estimate in degrees."""

    latitude: float
    longitude: float

    @property
    def is_sentinel(self) -> bool:
        """True for the (0, 0) placeholder returned on insufficient data.

        (0, 0) is also a valid point in the Gulf of Guinea; solvers only
        return it as a placeholder, so callers that got it from a solver
        should treat it as "no estimate".
        """
        return self.latitude == 0.0 and self.longitude == 0.0


SENTINEL_LOCATION = Location(0.0, 0.0)


@dataclass
class Stats:
    """Summary statistics over a ranked set."""

    country_counts: list[tuple[str, int]] = field(default_factory=list)
    mean_rtt_ms: float = 0.0
    count: int = 0


@dataclass
class Coherence:
    """How tightly the best matches agree with the target's latency."""

    label: str
    mean_delta_ms: float
    precision_km: float
