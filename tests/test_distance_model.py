"""Tests for the latency-to-distance model."""

import pytest

from pinggeo.distance_model import FIBER_SPEED_KM_S, SPEED_OF_LIGHT_KM_S, rtt_to_distance


class TestRttToDistance:
    """Test rtt_to_distance conversion."""

    def test_fiber_speed(self):
        """Test fibre propagation is 67% of light speed."""
        assert FIBER_SPEED_KM_S == pytest.approx(SPEED_OF_LIGHT_KM_S * 0.67)

    def test_zero_delta(self):
        """Test no latency difference means no distance."""
        assert rtt_to_distance(0.0) == 0.0

    def test_ten_milliseconds(self):
        """Test 10 ms round trip is about 1004 km one way."""
        assert rtt_to_distance(10.0) == pytest.approx(0.010 * 299792.458 * 0.67 / 2)
        assert rtt_to_distance(10.0) == pytest.approx(1004.3, abs=0.1)

    def test_linear(self):
        """Test the model scales linearly."""
        assert rtt_to_distance(40.0) == pytest.approx(4 * rtt_to_distance(10.0))
