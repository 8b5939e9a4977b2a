"""Shared fixtures for pinggeo tests."""

import pytest

from pinggeo.distance_model import rtt_to_distance
from pinggeo.models import Measurement, ReferenceNode


@pytest.fixture
def make_measurement():
    """Factory for measurements of synthetic reference nodes."""

    def make(name, lat, lon, delta_ms, rtt_ms=None, country="Testland", distance_km=None):
        node = ReferenceNode(name, f"{name}.example", country, "Testville", lat, lon)
        if rtt_ms is None:
            rtt_ms = 20.0 + delta_ms
        if distance_km is None:
            distance_km = rtt_to_distance(delta_ms)
        return Measurement(node=node.with_rtt(rtt_ms), delta_ms=delta_ms, distance_km=distance_km)

    return make
