"""Runtime configuration for pinggeo."""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Probe and estimation parameters.

    Environment Variables:
        PINGGEO_PROBER: "ping" (default) or "fake" for simulated latencies
        PINGGEO_TIMEOUT_S: Per-probe timeout in seconds (default 10)
        PINGGEO_TARGET_SAMPLES: Echo requests sent to the target (default 5)
        PINGGEO_NODE_SAMPLES: Echo requests per reference node (default 3)
        PINGGEO_MAX_CONCURRENT: Probe pool size (default 32)
        PINGGEO_LAUNCH_INTERVAL_MS: Pause between probe launches (default 10)
        PINGGEO_MULTILATERATION_COUNT: Nodes used by multilateration (default 10)
    """

    prober: str = "ping"
    timeout_s: float = 10.0
    target_samples: int = 5
    node_samples: int = 3
    max_concurrent: int = 32
    launch_interval_ms: int = 10
    multilateration_count: int = 10

    def __post_init__(self):
        """Validate numeric ranges."""
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        if self.target_samples <= 0 or self.node_samples <= 0:
            raise ValueError("sample counts must be positive")
        if self.max_concurrent <= 0:
            raise ValueError("max_concurrent must be positive")
        if self.launch_interval_ms < 0:
            raise ValueError("launch_interval_ms must not be negative")
        if self.multilateration_count <= 0:
            raise ValueError("multilateration_count must be positive")
        if self.prober not in ("ping", "fake"):
            raise ValueError(f"unknown prober: {self.prober!r}")

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from PINGGEO_* environment variables.

        Raises:
            ValueError: if a variable holds an unparsable or out-of-range value
        """
        if environ is None:
            environ = os.environ

        def read(name, convert, default):
            raw = environ.get(name, "").strip()
            if not raw:
                return default
            try:
                return convert(raw)
            except ValueError:
                raise ValueError(f"{name}: invalid value {raw!r}") from None

        return cls(
            prober=environ.get("PINGGEO_PROBER", "").strip().lower() or cls.prober,
            timeout_s=read("PINGGEO_TIMEOUT_S", float, cls.timeout_s),
            target_samples=read("PINGGEO_TARGET_SAMPLES", int, cls.target_samples),
            node_samples=read("PINGGEO_NODE_SAMPLES", int, cls.node_samples),
            max_concurrent=read("PINGGEO_MAX_CONCURRENT", int, cls.max_concurrent),
            launch_interval_ms=read("PINGGEO_LAUNCH_INTERVAL_MS", int, cls.launch_interval_ms),
            multilateration_count=read(
                "PINGGEO_MULTILATERATION_COUNT", int, cls.multilateration_count
            ),
        )
