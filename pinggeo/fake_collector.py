"""Simulated latency prober for pinggeo testing and offline runs."""

import random
import threading

from pinggeo.errors import ProbeError


class FakeProber:
    """Generates fake average round-trip times instead of sending packets."""

    def __init__(
        self,
        seed: int | None = None,
        latencies: dict[str, float] | None = None,
        unreachable: set[str] | None = None,
    ):
        """Initialize the simulated transport.

        Args:
            seed: Random seed for deterministic behaviour
            latencies: Fixed average RTT in ms per address (no jitter applied)
            unreachable: Addresses that always fail
        """
        # Isolated random instance; probes run on pool threads
        self._random = random.Random(seed)
        self._lock = threading.Lock()
        self._latencies = dict(latencies or {})
        self._unreachable = set(unreachable or ())

        # Simulation parameters
        self.base_latency = 60.0  # Base latency in ms
        self.latency_variance = 40.0  # Spread between hosts
        self.loss_probability = 0.05  # 5% chance a host never answers

        self.calls: list[str] = []

    def measure(self, address: str, count: int, timeout_s: float) -> float:
        """Return a simulated average RTT in milliseconds for ``address``."""
        if not address or not address.strip():
            raise ProbeError(address, "empty address")
        if count <= 0:
            raise ValueError("count must be positive")

        with self._lock:
            self.calls.append(address)

            if address in self._unreachable:
                raise ProbeError(address, "no response")
            if address in self._latencies:
                return self._latencies[address]

            if self._random.random() < self.loss_probability:
                raise ProbeError(address, "no response")

            samples = [
                max(0.1, self.base_latency + self._random.gauss(0, self.latency_variance))
                for _ in range(count)
            ]

        return round(sum(samples) / len(samples), 3)
