"""
Tests for Estimate construction and accessors.

estimate_from_interval converts absolute endpoints to deltas:
    ConfInt(x - low, high - x, cl)
confidence_interval converts back:
    (x - lower, x + upper)
"""

import pytest
import numpy as np

from statypes.confidence import CL90, CL95, CL99
from statypes.estimate import (
    Estimate,
    NormalErr,
    ConfInt,
    estimate_norm_err,
    pm,
    estimate_from_err,
    estimate_from_interval,
    normal_to_conf_int,
    confidence_interval,
    asym_errors,
)


@pytest.mark.tier2
class TestConstructors:
    """Tests for the Estimate constructors."""

    def test_norm_err(self):
        """Test estimate_norm_err wraps the error in NormalErr."""
        est = estimate_norm_err(10.0, 0.5)
        assert est == Estimate(10.0, NormalErr(0.5))
        assert est.point == 10.0
        assert est.error.normal_error == 0.5

    def test_pm_is_norm_err(self):
        """Test pm is the plus-or-minus alias."""
        assert pm(3.0, 0.1) == estimate_norm_err(3.0, 0.1)

    def test_norm_err_not_validated(self):
        """Test a negative error is stored as given."""
        assert pm(1.0, -0.5).error == NormalErr(-0.5)

    def test_from_err(self):
        """Test estimate_from_err stores the deltas directly."""
        est = estimate_from_err(5.0, (1.0, 2.0), CL90)
        assert est == Estimate(5.0, ConfInt(1.0, 2.0, CL90))

    def test_from_interval(self):
        """Test estimate_from_interval turns endpoints into deltas."""
        est = estimate_from_interval(5.0, (4.0, 7.0), CL95)
        assert est.error == ConfInt(1.0, 2.0, CL95)

    def test_from_interval_not_validated(self):
        """Test a point outside its interval gives a negative delta."""
        est = estimate_from_interval(10.0, (11.0, 12.0), CL95)
        assert est.error.lower == -1.0
        assert est.error.upper == 2.0

    def test_is_immutable(self):
        """Test estimates cannot be modified in place."""
        est = pm(1.0, 0.1)
        with pytest.raises(AttributeError):
            est.point = 2.0


@pytest.mark.tier2
class TestAccessors:
    """Tests for confidence_interval and asym_errors."""

    @pytest.mark.parametrize("x, interval", [
        (0.0, (-1.0, 1.0)),
        (5.0, (4.0, 7.0)),
        (-3.0, (-3.5, -1.0)),
        (2.0, (2.0, 2.0)),
    ])
    def test_interval_round_trip(self, x, interval, standard_cl):
        """Test confidence_interval(estimate_from_interval(x, I, cl)) = I."""
        est = estimate_from_interval(x, interval, standard_cl)
        assert confidence_interval(est) == interval
        assert est.error.cl == standard_cl

    def test_interval_from_err(self):
        """Test endpoints from deltas are (x - lower, x + upper)."""
        est = estimate_from_err(10.0, (1.0, 3.0), CL90)
        assert confidence_interval(est) == (9.0, 13.0)

    def test_asym_errors(self):
        """Test asym_errors returns (lower, upper) deltas."""
        est = estimate_from_err(10.0, (1.0, 3.0), CL90)
        assert asym_errors(est) == (1.0, 3.0)

    def test_accessors_need_conf_int(self):
        """Test interval accessors reject normal-error estimates."""
        est = pm(10.0, 0.5)
        with pytest.raises(TypeError):
            confidence_interval(est)
        with pytest.raises(TypeError):
            asym_errors(est)

    def test_array_points(self):
        """Test estimates built from arrays work elementwise."""
        x = np.array([1.0, 2.0, 3.0])
        est = estimate_from_interval(x, (x - 0.5, x + 1.0), CL95)
        low, high = confidence_interval(est)
        np.testing.assert_allclose(low, x - 0.5)
        np.testing.assert_allclose(high, x + 1.0)


@pytest.mark.tier2
class TestNormalToConfInt:
    """Tests for recomputing a normal error at a confidence level."""

    def test_95_percent_half_width(self):
        """Test 1 sigma becomes +/- 1.96 at 95%."""
        est = normal_to_conf_int(pm(10.0, 1.0), CL95)
        lower, upper = asym_errors(est)
        assert np.isclose(lower, 1.959963984540054, atol=1e-9)
        assert lower == upper
        assert est.point == 10.0
        assert est.error.cl == CL95

    def test_width_grows_with_confidence(self):
        """Test the 99% interval is wider than the 90% interval."""
        e90 = normal_to_conf_int(pm(0.0, 2.0), CL90)
        e99 = normal_to_conf_int(pm(0.0, 2.0), CL99)
        assert e99.error.upper > e90.error.upper

    def test_requires_normal_err(self):
        """Test a ConfInt estimate is rejected."""
        with pytest.raises(TypeError):
            normal_to_conf_int(estimate_from_err(0.0, (1.0, 1.0), CL90), CL95)


@pytest.mark.tier2
class TestDisplay:
    """Tests for the human-readable rendering."""

    def test_normal_err_str(self):
        assert str(pm(10.0, 0.5)) == "10 ± 0.5"

    def test_conf_int_str(self):
        est = estimate_from_err(10.0, (1.0, 3.0), CL90)
        assert str(est) == "10 (-1, +3) @ 90% CL"
