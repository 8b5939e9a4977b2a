"""Exception types raised by pinggeo."""


class PingGeoError(Exception):
    """Base class for pinggeo errors."""


class ProbeError(PingGeoError):
    """A single latency probe produced no measurement."""

    def __init__(self, address: str, reason: str):
        super().__init__(f"{address}: {reason}")
        self.address = address
        self.reason = reason


class TargetUnreachableError(PingGeoError):
    """The target could not be probed, so there is nothing to compare against."""

    def __init__(self, address: str, cause: Exception | None = None):
        message = f"target {address} is unreachable"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)
        self.address = address
        self.cause = cause


class NoUsableDataError(PingGeoError):
    """No reference node produced a measurement (empty catalog or all probes failed)."""

    def __init__(self, attempted: int):
        if attempted == 0:
            message = "reference catalog is empty"
        else:
            message = f"none of {attempted} reference nodes responded"
        super().__init__(message)
        self.attempted = attempted
