# ABOUTME: Core surf scoring logic for waves, wind, tide, and the overall rating
# ABOUTME: Converts raw measurements into 1-10 component scores and a weighted composite

import logging
from typing import Optional

from surfmetrics.config import Config
from surfmetrics.scoring.models import SurfScore
from surfmetrics.waves.directions import shore_relation
from surfmetrics.waves.models import SwellClassification
from surfmetrics.waves.swell import classify_swell_quality
from surfmetrics.waves.units import calculate_wave_energy, round_half_up

log = logging.getLogger(__name__)

MIN_SCORE = 1.0
MAX_SCORE = 10.0

# Must sum to 1.0 - that's what keeps the overall score inside 1-10
SCORE_WEIGHTS = {
    "wave": 0.4,
    "wind": 0.3,
    "tide": 0.2,
    "consistency": 0.1,
}

# (energy must be above, bonus)
WAVE_ENERGY_BONUSES = [
    (400, 4.0),
    (200, 3.0),
    (100, 2.5),
    (50, 2.0),
    (20, 1.5),
]
SWELL_QUALITY_BONUSES = {
    "excellent": 3.0,
    "good": 2.0,
    "fair": 1.0,
    "poor": 0.0,
}

# (wind km/h at most, adjustment)
WIND_SPEED_ADJUSTMENTS = [
    (5, 3.0),    # glassy
    (10, 2.0),   # clean
    (15, 1.0),   # acceptable
    (20, 0.0),   # choppy
    (30, -2.0),  # poor
]
BLOWN_OUT_ADJUSTMENT = -4.0

OFFSHORE_DIRECTIONS = {"N", "NE", "NW"}
ONSHORE_DIRECTIONS = {"S", "SE", "SW"}
OFFSHORE_BONUS = 2.0
ONSHORE_PENALTY = -1.0

# Tide height brackets (meters) per optimal-tide label
LOW_TIDE_MAX = 1.5
HIGH_TIDE_MIN = 2.5


def _clamp(score: float) -> float:
    return max(min(score, MAX_SCORE), MIN_SCORE)


class ScoreCalculator:
    """Calculates 1-10 ratings for surf conditions"""

    def __init__(self, spot_relative_wind: Optional[bool] = None):
        """
        Args:
            spot_relative_wind: Score wind direction against the shore_direction
                passed to calculate_wind_score() instead of the fixed
                offshore/onshore tables. Defaults to Config.SPOT_RELATIVE_WIND.
        """
        if spot_relative_wind is None:
            spot_relative_wind = Config.SPOT_RELATIVE_WIND
        self.spot_relative_wind = spot_relative_wind

    def calculate_wave_score(self, height: float, period: float) -> float:
        """
        Calculate wave quality score from height and period

        Energy sets the base and the swell period adds a quality bonus.
        Base plus bonuses never drops below 1.0, so only the top is capped.

        Args:
            height: Wave height in meters
            period: Wave period in seconds

        Returns:
            Score from 1.0-10.0
        """
        return self.score_wave(calculate_wave_energy(height, period), classify_swell_quality(period))

    def score_wave(self, energy: float, swell: SwellClassification) -> float:
        """Wave quality score from an already computed energy and swell classification"""
        score = 1.0  # Base score

        for threshold, bonus in WAVE_ENERGY_BONUSES:
            if energy > threshold:
                score += bonus
                break
        else:
            score += 1.0  # Tiny but something

        score += SWELL_QUALITY_BONUSES[swell.quality]

        return min(round_half_up(score, 1), MAX_SCORE)

    def calculate_wind_score(
        self,
        wind_speed: float,
        wind_direction: str,
        shore_direction: str = "S"
    ) -> float:
        """
        Calculate wind quality score from speed and direction

        By default direction uses fixed tables (N/NE/NW offshore, S/SE/SW
        onshore) and shore_direction is ignored. With spot_relative_wind
        enabled the wind is compared against shore_direction instead.

        Args:
            wind_speed: Wind speed in km/h
            wind_direction: Compass direction the wind blows from
            shore_direction: Compass direction the beach faces

        Returns:
            Score from 1.0-10.0
        """
        score = 5.0  # Neutral

        for max_speed, adjustment in WIND_SPEED_ADJUSTMENTS:
            if wind_speed <= max_speed:
                score += adjustment
                break
        else:
            score += BLOWN_OUT_ADJUSTMENT

        if self.spot_relative_wind:
            relation = shore_relation(wind_direction, shore_direction)
            if relation == "offshore":
                score += OFFSHORE_BONUS
            elif relation == "onshore":
                score += ONSHORE_PENALTY
            elif relation == "unknown":
                log.debug(f"Can't place wind {wind_direction!r} against shore {shore_direction!r}")
        elif wind_direction in OFFSHORE_DIRECTIONS:
            score += OFFSHORE_BONUS
        elif wind_direction in ONSHORE_DIRECTIONS:
            score += ONSHORE_PENALTY

        return _clamp(round_half_up(score, 1))

    def calculate_tide_score(self, current_tide_height: float, spot_optimal_tide: str = "mid") -> float:
        """
        Calculate tide score (placeholder heuristic)

        Only checks which bracket the tide height is in. Real tide scoring
        needs spot-specific ranges and whether the tide is rising or falling.

        Args:
            current_tide_height: Tide height in meters
            spot_optimal_tide: "low", "mid", or "high"

        Returns:
            Score from 1.0-10.0
        """
        score = 5.0

        if spot_optimal_tide == "low" and current_tide_height < LOW_TIDE_MAX:
            score += 3.0
        elif spot_optimal_tide == "mid" and LOW_TIDE_MAX <= current_tide_height <= HIGH_TIDE_MIN:
            score += 3.0
        elif spot_optimal_tide == "high" and current_tide_height > HIGH_TIDE_MIN:
            score += 3.0
        else:
            score += 1.0

        return _clamp(round_half_up(score, 1))

    def calculate_surf_score(
        self,
        wave_height: float,
        wave_period: float,
        wind_speed: float,
        wind_direction: str,
        tide_height: float = 2.0,
        shore_direction: str = "S",
        optimal_tide: str = "mid"
    ) -> SurfScore:
        """
        Calculate overall surf score from all components

        Weighted 40% waves, 30% wind, 20% tide, 10% consistency. The overall
        score isn't clamped; the weights summing to 1.0 keep it within 1-10.

        Args:
            wave_height: Wave height in meters
            wave_period: Wave period in seconds
            wind_speed: Wind speed in km/h
            wind_direction: Compass direction the wind blows from
            tide_height: Tide height in meters
            shore_direction: Compass direction the beach faces
            optimal_tide: "low", "mid", or "high"

        Returns:
            SurfScore with the overall rating and its components
        """
        wave_quality = self.calculate_wave_score(wave_height, wave_period)
        wind_quality = self.calculate_wind_score(wind_speed, wind_direction, shore_direction)
        tide_optimal = self.calculate_tide_score(tide_height, optimal_tide)

        return self.combine_scores(wave_quality, wind_quality, tide_optimal)

    def combine_scores(self, wave_quality: float, wind_quality: float, tide_optimal: float) -> SurfScore:
        """Weighted overall score from the three component scores"""
        # Placeholder - would come from forecast variance
        consistency_score = Config.CONSISTENCY_SCORE

        overall_score = (
            wave_quality * SCORE_WEIGHTS["wave"]
            + wind_quality * SCORE_WEIGHTS["wind"]
            + tide_optimal * SCORE_WEIGHTS["tide"]
            + consistency_score * SCORE_WEIGHTS["consistency"]
        )

        return SurfScore(
            overall_score=round_half_up(overall_score, 1),
            wave_quality=wave_quality,
            wind_quality=wind_quality,
            tide_optimal=tide_optimal,
            consistency_score=consistency_score,
        )
