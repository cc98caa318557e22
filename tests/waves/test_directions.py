# ABOUTME: Tests for compass direction lookups and shore orientation
# ABOUTME: Validates the degree table, north fallback, and offshore/onshore classification

from surfmetrics.waves.directions import (
    COMPASS_POINTS,
    degrees_to_compass,
    get_direction_degrees,
    shore_relation,
)


class TestGetDirectionDegrees:
    """Tests for compass -> degrees lookup"""

    def test_cardinal_and_intercardinal_points(self):
        """Table covers all 16 points at 22.5 degree steps"""
        assert get_direction_degrees("N") == 0
        assert get_direction_degrees("NNE") == 22.5
        assert get_direction_degrees("E") == 90
        assert get_direction_degrees("S") == 180
        assert get_direction_degrees("W") == 270
        assert get_direction_degrees("NNW") == 337.5

    def test_unknown_direction_defaults_to_north(self):
        """Garbage, empty, and missing directions are 0 degrees"""
        assert get_direction_degrees("garbage") == 0
        assert get_direction_degrees("") == 0
        assert get_direction_degrees(None) == 0

    def test_lookup_is_case_sensitive(self):
        """Lowercase isn't a compass point"""
        assert get_direction_degrees("s") == 0


class TestDegreesToCompass:
    """Tests for degrees -> compass lookup"""

    def test_round_trips_all_points(self):
        """Every compass point maps back to itself"""
        for point in COMPASS_POINTS:
            assert degrees_to_compass(get_direction_degrees(point)) == point

    def test_snaps_to_nearest_point(self):
        """Bearings snap to the nearest 22.5 degree point"""
        assert degrees_to_compass(350) == "N"
        assert degrees_to_compass(11.25) == "NNE"
        assert degrees_to_compass(100) == "E"
        assert degrees_to_compass(359.9) == "N"

    def test_wraps_out_of_range_bearings(self):
        """Negative and >360 bearings wrap around"""
        assert degrees_to_compass(-22.5) == "NNW"
        assert degrees_to_compass(450) == "E"


class TestShoreRelation:
    """Tests for wind-vs-shore classification"""

    def test_south_facing_beach(self):
        """South-facing beach: northerlies offshore, southerlies onshore"""
        assert shore_relation("N", "S") == "offshore"
        assert shore_relation("NE", "S") == "offshore"
        assert shore_relation("NNE", "S") == "offshore"
        assert shore_relation("S", "S") == "onshore"
        assert shore_relation("SE", "S") == "onshore"
        assert shore_relation("E", "S") == "cross_shore"
        assert shore_relation("W", "S") == "cross_shore"

    def test_west_facing_beach(self):
        """West-facing beach: easterlies are offshore"""
        assert shore_relation("E", "W") == "offshore"
        assert shore_relation("W", "W") == "onshore"
        assert shore_relation("N", "W") == "cross_shore"

    def test_unknown_directions(self):
        """Either side unknown means no call"""
        assert shore_relation("XYZ", "S") == "unknown"
        assert shore_relation("N", "bogus") == "unknown"
        assert shore_relation(None, "S") == "unknown"
