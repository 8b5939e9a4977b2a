"""Tests for the simulated prober and prober selection."""

import pytest

from pinggeo import collector_ping
from pinggeo.collector import make_prober
from pinggeo.collector_ping import PingProber
from pinggeo.errors import ProbeError
from pinggeo.fake_collector import FakeProber


class TestFakeProber:
    """Test FakeProber behavior and contracts."""

    def test_fixed_latency(self):
        """Test explicit per-address latencies are returned unchanged."""
        prober = FakeProber(latencies={"10.0.0.1": 42.5})
        assert prober.measure("10.0.0.1", 3, 10.0) == 42.5

    def test_unreachable_raises(self):
        """Test unreachable addresses raise ProbeError."""
        prober = FakeProber(unreachable={"10.0.0.2"})
        with pytest.raises(ProbeError) as excinfo:
            prober.measure("10.0.0.2", 3, 10.0)
        assert excinfo.value.address == "10.0.0.2"

    def test_deterministic_with_seed(self):
        """Test two probers with the same seed agree."""
        first = FakeProber(seed=42)
        second = FakeProber(seed=42)
        first.loss_probability = second.loss_probability = 0.0

        assert first.measure("host", 3, 10.0) == second.measure("host", 3, 10.0)

    def test_simulated_latency_positive(self):
        """Test simulated latencies stay positive."""
        prober = FakeProber(seed=7)
        prober.loss_probability = 0.0
        for i in range(50):
            assert prober.measure(f"host{i}", 3, 10.0) > 0

    def test_loss_probability(self):
        """Test a certain loss always fails."""
        prober = FakeProber(seed=1)
        prober.loss_probability = 1.0
        with pytest.raises(ProbeError):
            prober.measure("host", 3, 10.0)

    def test_records_calls(self):
        """Test every probed address is recorded."""
        prober = FakeProber(latencies={"a": 1.0, "b": 2.0})
        prober.measure("a", 1, 1.0)
        prober.measure("b", 1, 1.0)
        assert prober.calls == ["a", "b"]

    def test_empty_address(self):
        """Test empty address raises ProbeError."""
        with pytest.raises(ProbeError):
            FakeProber().measure("", 3, 10.0)

    def test_invalid_count(self):
        """Test non-positive sample count is rejected."""
        with pytest.raises(ValueError):
            FakeProber().measure("host", 0, 10.0)


class TestMakeProber:
    """Test prober selection by name."""

    def test_fake(self):
        """Test "fake" builds a FakeProber."""
        assert isinstance(make_prober("fake"), FakeProber)

    def test_ping(self, monkeypatch):
        """Test "ping" builds a PingProber."""
        monkeypatch.setattr(collector_ping.shutil, "which", lambda name: "/bin/ping")
        assert isinstance(make_prober(" Ping "), PingProber)

    def test_unknown(self):
        """Test unknown names are rejected."""
        with pytest.raises(ValueError, match="unknown prober kind"):
            make_prober("carrier-pigeon")
