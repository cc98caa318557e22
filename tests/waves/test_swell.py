# ABOUTME: Tests for period-based swell classification
# ABOUTME: Validates ground/mixed/wind swell breakpoints at 13s, 10s, and 8s

from surfmetrics.waves.swell import classify_swell_quality


def test_long_period_is_excellent_groundswell():
    """13s and up is premium groundswell"""
    swell = classify_swell_quality(13)

    assert swell.swell_type == "ground_swell"
    assert swell.quality == "excellent"
    assert "groundswell" in swell.description


def test_just_under_thirteen_is_good_groundswell():
    """12.9s drops a bracket"""
    swell = classify_swell_quality(12.9)

    assert swell.swell_type == "ground_swell"
    assert swell.quality == "good"


def test_lower_bounds_are_inclusive():
    """Exactly 10s is good, exactly 8s is fair"""
    assert classify_swell_quality(10).quality == "good"
    assert classify_swell_quality(9.99).quality == "fair"
    assert classify_swell_quality(8).quality == "fair"
    assert classify_swell_quality(8).swell_type == "mixed"


def test_short_period_is_poor_wind_swell():
    """Under 8s is choppy wind swell"""
    swell = classify_swell_quality(7.9)

    assert swell.swell_type == "wind_swell"
    assert swell.quality == "poor"


def test_zero_and_negative_periods_fall_through_to_wind_swell():
    """Bad periods don't raise"""
    assert classify_swell_quality(0).quality == "poor"
    assert classify_swell_quality(-5).swell_type == "wind_swell"
    assert classify_swell_quality(float("nan")).quality == "poor"
