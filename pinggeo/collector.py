"""Probe transport abstraction for pinggeo latency sources."""

from typing import Protocol


class Prober(Protocol):
    """Protocol defining the interface for latency probe transports."""

    def measure(self, address: str, count: int, timeout_s: float) -> float:
        """Send ``count`` echo probes to ``address`` and return the average RTT in ms.

        Raises:
            ProbeError: if no measurement could be obtained for any reason
                (unreachable host, no reply within ``timeout_s``, DNS or
                permission failure).
        """
        ...


def make_prober(kind: str) -> Prober:
    """Build a prober by name: ``"ping"`` for the system command, ``"fake"`` for simulation.

    Raises:
        ValueError: for an unknown kind
        OSError: if the system ping command is unavailable
    """
    kind = kind.strip().lower()
    if kind == "fake":
        from pinggeo.fake_collector import FakeProber

        return FakeProber()
    if kind == "ping":
        from pinggeo.collector_ping import PingProber

        return PingProber()
    raise ValueError(f"unknown prober kind: {kind!r}")
