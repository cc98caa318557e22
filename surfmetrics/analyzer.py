# ABOUTME: Conditions analyzer combining every metric for a single observation
# ABOUTME: Validates raw measurements, then runs conversion, scoring, and swell analysis

import logging
from dataclasses import dataclass, replace
from typing import Optional

from surfmetrics.config import Config
from surfmetrics.debug import debug_log
from surfmetrics.scoring.calculator import ScoreCalculator
from surfmetrics.scoring.models import SurfScore, SwellDominance
from surfmetrics.scoring.swell_analysis import SwellAnalyzer
from surfmetrics.validation import InvalidMeasurementError
from surfmetrics.waves.directions import degrees_to_compass
from surfmetrics.waves.models import MarineConditions, SwellClassification, WaveMetrics
from surfmetrics.waves.swell import classify_swell_quality
from surfmetrics.waves.units import calculate_wave_energy, convert_wave_height, interpret_energy_level

log = logging.getLogger(__name__)

DIRECTION_FIELDS = ("wind_direction", "wave_direction", "secondary_swell_direction")


@dataclass(frozen=True)
class ConditionsReport:
    """Everything the conditions panel shows for one observation"""
    conditions: MarineConditions
    metrics: WaveMetrics
    energy_label: str
    swell: SwellClassification
    surf_score: SurfScore
    interaction: str
    dominance: SwellDominance

    def __str__(self) -> str:
        return (
            f"Score: {self.surf_score.overall_score}/10 ({self.surf_score.rating}), "
            f"{self.swell.quality} {self.swell.swell_type}, "
            f"Energy: {self.metrics.wave_energy} ({self.energy_label}), "
            f"Swells: {self.interaction}"
        )


class ConditionsAnalyzer:
    """Runs the full scoring pipeline for a spot"""

    def __init__(
        self,
        score_calculator: Optional[ScoreCalculator] = None,
        swell_analyzer: Optional[SwellAnalyzer] = None,
        shore_direction: Optional[str] = None,
        optimal_tide: Optional[str] = None
    ):
        self.score_calculator = score_calculator or ScoreCalculator()
        self.swell_analyzer = swell_analyzer or SwellAnalyzer()
        self.shore_direction = shore_direction or Config.DEFAULT_SHORE_DIRECTION
        self.optimal_tide = optimal_tide or Config.DEFAULT_OPTIMAL_TIDE

    def analyze(self, conditions: MarineConditions) -> ConditionsReport:
        """
        Build a full report from validated conditions.

        Args:
            conditions: Validated raw measurements

        Returns:
            ConditionsReport with metrics, classifications, and scores
        """
        energy = calculate_wave_energy(conditions.wave_height_m, conditions.wave_period_s)
        swell = classify_swell_quality(conditions.wave_period_s)
        metrics = replace(convert_wave_height(conditions.wave_height_m), wave_energy=energy)

        calculator = self.score_calculator
        surf_score = calculator.combine_scores(
            wave_quality=calculator.score_wave(energy, swell),
            wind_quality=calculator.calculate_wind_score(
                conditions.wind_speed_kmh,
                conditions.wind_direction,
                self.shore_direction,
            ),
            tide_optimal=calculator.calculate_tide_score(conditions.tide_height_m, self.optimal_tide),
        )

        if conditions.has_secondary_swell:
            interaction = self.swell_analyzer.analyze_swell_interaction(
                conditions.wave_height_m,
                conditions.wave_period_s,
                conditions.wave_direction,
                conditions.secondary_swell_height_m,
                conditions.secondary_swell_period_s,
                conditions.secondary_swell_direction,
            )
        else:
            interaction = "single_swell"

        # Dominance only needs height and period, so it runs without a direction too
        dominance = self.swell_analyzer.calculate_swell_dominance(
            conditions.wave_height_m,
            conditions.wave_period_s,
            conditions.secondary_swell_height_m,
            conditions.secondary_swell_period_s,
        )

        report = ConditionsReport(
            conditions=conditions,
            metrics=metrics,
            energy_label=interpret_energy_level(energy),
            swell=swell,
            surf_score=surf_score,
            interaction=interaction,
            dominance=dominance,
        )
        debug_log(f"{conditions} -> {report}", "ANALYZER")
        return report

    def analyze_raw(self, **measurements) -> Optional[ConditionsReport]:
        """
        Validate raw measurements and analyze them.

        Accepts the same keyword arguments as MarineConditions. Directions may
        be compass strings or bearings in degrees, as forecast feeds send them.

        Returns:
            ConditionsReport on success, None if the measurements are invalid.
        """
        for field in DIRECTION_FIELDS:
            bearing = measurements.get(field)
            if isinstance(bearing, (int, float)) and not isinstance(bearing, bool):
                measurements[field] = degrees_to_compass(bearing)

        try:
            conditions = MarineConditions(**measurements)
        except InvalidMeasurementError as e:
            log.error(f"Rejected measurements: {e}")
            return None
        except TypeError as e:
            log.error(f"Incomplete measurements: {e}")
            return None

        return self.analyze(conditions)
