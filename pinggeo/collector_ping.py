"""Real ICMP probe transport for pinggeo using the system ping command."""

import logging
import platform
import re
import shutil
import subprocess
from math import ceil

from pinggeo.errors import ProbeError

logger = logging.getLogger(__name__)

# Linux: "rtt min/avg/max/mdev = 12.1/12.3/12.6/0.2 ms"
# macOS/BSD: "round-trip min/avg/max/stddev = 8.1/8.3/8.5/0.1 ms"
_SUMMARY_PATTERN = re.compile(
    r"min/avg/max/(?:mdev|stddev)\s*=\s*[\d.]+/([\d.]+)/", re.IGNORECASE
)
# Windows: "Minimum = 14ms, Maximum = 16ms, Average = 15ms"
_WINDOWS_AVERAGE_PATTERN = re.compile(r"Average\s*=\s*(\d+(?:\.\d+)?)\s*ms", re.IGNORECASE)
_REPLY_PATTERN = re.compile(r"time\s*([=<])\s*(\d+(?:\.\d+)?)\s*ms", re.IGNORECASE)


def parse_ping_average_ms(output: str) -> float | None:
    """Parse the average round-trip time from ping command output (pure function).

    Tries, in order:
    - the Linux/macOS summary line "min/avg/max/... = a/b/c/d ms"
    - the Windows summary "Average = Nms"
    - the mean of per-reply "time=N ms" values (Windows "time<N" counts as N/2)

    Args:
        output: Raw ping command output

    Returns:
        Average latency in milliseconds, or None if nothing could be parsed

    Examples:
        >>> parse_ping_average_ms("rtt min/avg/max/mdev = 1.0/2.5/4.0/0.3 ms")
        2.5
        >>> parse_ping_average_ms("Request timed out.") is None
        True
    """
    if not output:
        return None

    match = _SUMMARY_PATTERN.search(output)
    if match:
        return float(match.group(1))

    match = _WINDOWS_AVERAGE_PATTERN.search(output)
    if match:
        return float(match.group(1))

    replies = []
    for operator, value in _REPLY_PATTERN.findall(output):
        latency = float(value)
        if operator == "<":
            latency /= 2.0
        replies.append(latency)
    if replies:
        return sum(replies) / len(replies)

    return None


class PingProber:
    """Probe transport that shells out to the OS ping command.

    Cross-platform: Windows, Linux and macOS argument conventions are
    supported. ICMP normally needs elevated privileges; the system ping binary
    holds them, so pinggeo itself can run unprivileged.

    Parsing relies on the English summary and "time" keywords. On localized
    systems the output may not parse and every probe is reported as failed.
    """

    def __init__(self, executable: str = "ping"):
        """Initialize the prober.

        Args:
            executable: Name or path of the ping binary

        Raises:
            OSError: if the ping binary cannot be found
        """
        resolved = shutil.which(executable)
        if resolved is None:
            raise OSError(f"ping command not found: {executable}")

        self.executable = resolved
        self.system = platform.system()

        logger.debug("PingProber initialized: executable=%s, system=%s", resolved, self.system)

    def measure(self, address: str, count: int, timeout_s: float) -> float:
        """Ping ``address`` ``count`` times and return the average RTT in ms.

        Raises:
            ValueError: if count or timeout_s is not positive
            ProbeError: if no reply arrived, on timeout, unparsable output or
                OS error. A non-zero exit with at least one reply is a success.
        """
        if count <= 0:
            raise ValueError("count must be positive")
        if timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        if not address or not address.strip():
            raise ProbeError(address, "empty address")

        cmd = self._build_ping_command(address, count, timeout_s)
        logger.debug("Executing ping: address=%s, count=%d, timeout=%.1fs", address, count, timeout_s)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._subprocess_timeout(count, timeout_s),
                shell=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Ping timeout: address=%s", address)
            raise ProbeError(address, "timed out") from None
        except OSError as e:
            logger.warning("Ping error: address=%s, error=%s", address, e)
            raise ProbeError(address, str(e)) from e

        average = parse_ping_average_ms(result.stdout)

        # ping exits non-zero when some echoes were lost; any reply still counts
        if result.returncode != 0:
            if average is not None:
                logger.debug(
                    "Partial replies: address=%s, returncode=%d, avg=%.2fms",
                    address,
                    result.returncode,
                    average,
                )
                return average
            logger.debug(
                "Ping failed (non-zero returncode): address=%s, returncode=%d",
                address,
                result.returncode,
            )
            detail = (result.stderr or "").strip().splitlines()
            reason = detail[-1] if detail else f"exit status {result.returncode}"
            raise ProbeError(address, reason)

        if average is None:
            logger.debug(
                "Parse failed: address=%s, output_preview=%s",
                address,
                result.stdout[:100] if result.stdout else "(empty)",
            )
            raise ProbeError(address, "no round-trip time in ping output")

        logger.debug("Parsed average: address=%s, avg=%.2fms", address, average)
        return average

    def _build_ping_command(self, address: str, count: int, timeout_s: float) -> list[str]:
        """Build the platform-specific ping command line."""
        if self.system == "Windows":
            # -w is the per-reply wait in milliseconds
            return [self.executable, "-n", str(count), "-w", str(int(timeout_s * 1000)), address]

        deadline = str(max(1, ceil(timeout_s)))
        if self.system == "Linux":
            # -w is the overall deadline in seconds
            return [self.executable, "-c", str(count), "-w", deadline, address]

        # macOS/BSD: -t is the overall timeout in seconds
        return [self.executable, "-c", str(count), "-t", deadline, address]

    def _subprocess_timeout(self, count: int, timeout_s: float) -> float:
        if self.system == "Windows":
            return count * timeout_s + 1.0
        return timeout_s + 1.0
