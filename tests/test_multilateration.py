"""Tests for weighted N-point multilateration."""

import pytest

from pinggeo.models import SENTINEL_LOCATION
from pinggeo.multilateration import delta_weight, multilaterate


class TestMultilaterate:
    """Test the weighted lat/lon mean."""

    def test_top_two_weighted_mean(self, make_measurement):
        """Test deltas 10 and 40 ms weigh Paris 1/11 and London 1/41."""
        ranked = [
            make_measurement("paris", 48.8566, 2.3522, 10.0),
            make_measurement("london", 51.5074, -0.1278, 40.0),
            make_measurement("tokyo", 35.6762, 139.6503, 90.0),
        ]
        location = multilaterate(ranked, count=2)

        w1, w2 = 1 / 11, 1 / 41
        assert location.latitude == pytest.approx((48.8566 * w1 + 51.5074 * w2) / (w1 + w2))
        assert location.longitude == pytest.approx((2.3522 * w1 - 0.1278 * w2) / (w1 + w2))
        # (48.8566 * 41 + 51.5074 * 11) / 52 and (2.3522 * 41 - 0.1278 * 11) / 52
        assert location.latitude == pytest.approx(49.41735, abs=1e-4)
        assert location.longitude == pytest.approx(1.82758, abs=1e-4)

    def test_count_clamped(self, make_measurement):
        """Test a count beyond the set length uses every entry."""
        ranked = [make_measurement(str(i), float(i), 0.0, 0.0) for i in range(3)]
        assert multilaterate(ranked, count=10) == pytest.approx((1.0, 0.0))

    def test_default_count_is_ten(self, make_measurement):
        """Test the eleventh entry is ignored by default."""
        ranked = [make_measurement(str(i), 10.0, 10.0, 0.0) for i in range(10)]
        ranked.append(make_measurement("outlier", -80.0, -170.0, 0.0))
        assert multilaterate(ranked) == pytest.approx((10.0, 10.0))

    def test_weight_monotonic(self):
        """Test a smaller whole-millisecond delta gives a larger weight."""
        assert delta_weight(0.0) == 1.0
        assert delta_weight(5.0) > delta_weight(6.0)
        assert delta_weight(5.0) >= delta_weight(5.5)

    def test_weight_drops_sub_millisecond_part(self):
        """Test deltas are counted in whole milliseconds."""
        assert delta_weight(0.9) == 1.0
        assert delta_weight(1.0) == delta_weight(1.9) == 0.5

    def test_sub_millisecond_deltas(self, make_measurement):
        """Test 0.9, 1.0 and 1.9 ms weigh 1, 1/2 and 1/2."""
        ranked = [
            make_measurement("a", 0.0, 0.0, 0.9),
            make_measurement("b", 10.0, 10.0, 1.0),
            make_measurement("c", 20.0, 20.0, 1.9),
        ]
        assert multilaterate(ranked) == pytest.approx((7.5, 7.5))

    def test_smaller_delta_pulls_harder(self, make_measurement):
        """Test lowering one entry's delta moves the estimate toward it."""

        def estimate(delta_a):
            return multilaterate(
                [
                    make_measurement("a", 10.0, 0.0, delta_a),
                    make_measurement("b", -10.0, 0.0, 20.0),
                    make_measurement("c", 0.0, 10.0, 20.0),
                ]
            )

        assert estimate(5.0).latitude > estimate(15.0).latitude

    @pytest.mark.parametrize("size", [0, 1, 2])
    def test_too_few_entries_sentinel(self, make_measurement, size):
        """Test fewer than three entries return the sentinel without raising."""
        ranked = [make_measurement(str(i), 10.0, 10.0, 1.0) for i in range(size)]
        assert multilaterate(ranked, count=size or 1) == SENTINEL_LOCATION

    def test_invalid_count(self, make_measurement):
        """Test a non-positive count is rejected."""
        ranked = [make_measurement(str(i), 0.0, 0.0, 1.0) for i in range(3)]
        with pytest.raises(ValueError):
            multilaterate(ranked, count=0)
