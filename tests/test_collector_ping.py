"""Unit tests for PingProber."""

import subprocess

import pytest

from pinggeo import collector_ping
from pinggeo.collector_ping import PingProber
from pinggeo.errors import ProbeError

LINUX_OK = """
PING 1.1.1.1 (1.1.1.1) 56(84) bytes of data.
64 bytes from 1.1.1.1: icmp_seq=1 ttl=57 time=11.8 ms
64 bytes from 1.1.1.1: icmp_seq=2 ttl=57 time=12.4 ms
64 bytes from 1.1.1.1: icmp_seq=3 ttl=57 time=12.1 ms

--- 1.1.1.1 ping statistics ---
3 packets transmitted, 3 received, 0% packet loss, time 2003ms
rtt min/avg/max/mdev = 11.800/12.100/12.400/0.245 ms
"""

LINUX_PARTIAL = """
PING 1.1.1.1 (1.1.1.1) 56(84) bytes of data.
64 bytes from 1.1.1.1: icmp_seq=1 ttl=57 time=11.8 ms
64 bytes from 1.1.1.1: icmp_seq=3 ttl=57 time=12.6 ms

--- 1.1.1.1 ping statistics ---
3 packets transmitted, 2 received, 33.3333% packet loss, time 2003ms
rtt min/avg/max/mdev = 11.800/12.200/12.600/0.400 ms
"""

LINUX_NO_REPLY = """
PING 192.0.2.1 (192.0.2.1) 56(84) bytes of data.

--- 192.0.2.1 ping statistics ---
3 packets transmitted, 0 received, 100% packet loss, time 2040ms
"""


@pytest.fixture
def prober(monkeypatch):
    """PingProber with a fake ping binary on the PATH."""
    monkeypatch.setattr(collector_ping.shutil, "which", lambda name: "/bin/ping")
    return PingProber()


def fake_run(returncode=0, stdout="", stderr="", calls=None):
    """Build a subprocess.run replacement returning a fixed result."""

    def run(cmd, **kwargs):
        if calls is not None:
            calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    return run


class TestPingProberInitialization:
    """Test PingProber initialization."""

    def test_init_resolves_executable(self, prober):
        """Test the resolved binary path is used for commands."""
        assert prober.executable == "/bin/ping"

    def test_init_missing_binary(self, monkeypatch):
        """Test a missing ping binary raises OSError."""
        monkeypatch.setattr(collector_ping.shutil, "which", lambda name: None)
        with pytest.raises(OSError, match="ping command not found"):
            PingProber()


class TestPingProberBuildCommand:
    """Test platform-specific command building."""

    def test_build_command_linux(self, prober):
        """Test Linux uses -c count and -w deadline."""
        prober.system = "Linux"
        cmd = prober._build_ping_command("example.com", 3, 10.0)
        assert cmd == ["/bin/ping", "-c", "3", "-w", "10", "example.com"]

    def test_build_command_linux_fractional_timeout(self, prober):
        """Test fractional timeouts round up to whole seconds."""
        prober.system = "Linux"
        cmd = prober._build_ping_command("example.com", 5, 1.5)
        assert cmd == ["/bin/ping", "-c", "5", "-w", "2", "example.com"]

    def test_build_command_macos(self, prober):
        """Test macOS uses -t for the overall timeout."""
        prober.system = "Darwin"
        cmd = prober._build_ping_command("example.com", 3, 10.0)
        assert cmd == ["/bin/ping", "-c", "3", "-t", "10", "example.com"]

    def test_build_command_windows(self, prober):
        """Test Windows uses -n count and -w milliseconds."""
        prober.system = "Windows"
        cmd = prober._build_ping_command("8.8.8.8", 3, 2.5)
        assert cmd == ["/bin/ping", "-n", "3", "-w", "2500", "8.8.8.8"]


class TestPingProberMeasure:
    """Test measure() with subprocess.run replaced."""

    def test_measure_returns_average(self, prober, monkeypatch):
        """Test the summary average is returned."""
        calls = []
        monkeypatch.setattr(collector_ping.subprocess, "run", fake_run(stdout=LINUX_OK, calls=calls))
        prober.system = "Linux"

        assert prober.measure("1.1.1.1", 3, 10.0) == pytest.approx(12.1)

        cmd, kwargs = calls[0]
        assert cmd[-1] == "1.1.1.1"
        assert kwargs["shell"] is False
        assert kwargs["timeout"] == pytest.approx(11.0)

    def test_measure_non_zero_exit(self, prober, monkeypatch):
        """Test a failing ping raises ProbeError with stderr detail."""
        monkeypatch.setattr(
            collector_ping.subprocess,
            "run",
            fake_run(returncode=2, stderr="ping: unknown host nowhere.invalid\n"),
        )

        with pytest.raises(ProbeError) as excinfo:
            prober.measure("nowhere.invalid", 3, 1.0)
        assert excinfo.value.address == "nowhere.invalid"
        assert "unknown host" in excinfo.value.reason

    def test_measure_partial_replies(self, prober, monkeypatch):
        """Test lost echoes with a non-zero exit still return the average."""
        monkeypatch.setattr(collector_ping.subprocess, "run", fake_run(returncode=1, stdout=LINUX_PARTIAL))
        prober.system = "Linux"

        assert prober.measure("1.1.1.1", 3, 10.0) == pytest.approx(12.2)

    def test_measure_all_echoes_lost(self, prober, monkeypatch):
        """Test a non-zero exit with no replies raises ProbeError."""
        monkeypatch.setattr(collector_ping.subprocess, "run", fake_run(returncode=1, stdout=LINUX_NO_REPLY))
        prober.system = "Linux"

        with pytest.raises(ProbeError, match="exit status 1"):
            prober.measure("192.0.2.1", 3, 10.0)

    def test_measure_no_reply_exit_status(self, prober, monkeypatch):
        """Test a silent non-zero exit reports the exit status."""
        monkeypatch.setattr(collector_ping.subprocess, "run", fake_run(returncode=1))

        with pytest.raises(ProbeError, match="exit status 1"):
            prober.measure("192.0.2.1", 3, 1.0)

    def test_measure_timeout(self, prober, monkeypatch):
        """Test a hung subprocess raises ProbeError."""

        def run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(collector_ping.subprocess, "run", run)

        with pytest.raises(ProbeError, match="timed out"):
            prober.measure("192.0.2.1", 3, 1.0)

    def test_measure_os_error(self, prober, monkeypatch):
        """Test OS errors (e.g. permission denied) become ProbeError."""

        def run(cmd, **kwargs):
            raise PermissionError("operation not permitted")

        monkeypatch.setattr(collector_ping.subprocess, "run", run)

        with pytest.raises(ProbeError, match="operation not permitted"):
            prober.measure("1.1.1.1", 3, 1.0)

    def test_measure_unparsable_output(self, prober, monkeypatch):
        """Test output without round-trip times raises ProbeError."""
        monkeypatch.setattr(collector_ping.subprocess, "run", fake_run(stdout="Antwort von 8.8.8.8"))

        with pytest.raises(ProbeError, match="no round-trip time"):
            prober.measure("8.8.8.8", 3, 1.0)

    def test_measure_empty_address(self, prober):
        """Test an empty address fails without running ping."""
        with pytest.raises(ProbeError):
            prober.measure("  ", 3, 1.0)

    def test_measure_invalid_arguments(self, prober):
        """Test non-positive count or timeout is a configuration error."""
        with pytest.raises(ValueError, match="count must be positive"):
            prober.measure("1.1.1.1", 0, 1.0)
        with pytest.raises(ValueError, match="timeout_s must be positive"):
            prober.measure("1.1.1.1", 3, 0)
