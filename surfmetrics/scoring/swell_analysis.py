# ABOUTME: Multi-swell analysis comparing a primary and secondary swell train
# ABOUTME: Works out how two swells combine and how the energy splits between them

import logging
import math
from typing import Literal, Optional

from surfmetrics.scoring.models import SwellDominance
from surfmetrics.waves.directions import get_direction_degrees
from surfmetrics.waves.units import calculate_wave_energy, round_half_up

log = logging.getLogger(__name__)

SwellInteraction = Literal["single_swell", "neutral", "constructive", "destructive"]

# Secondary swell below this share of primary energy doesn't change much
NEGLIGIBLE_ENERGY_RATIO = 0.3

CONSTRUCTIVE_MAX_DIFF = 45.0
DESTRUCTIVE_MIN_DIFF = 135.0
DESTRUCTIVE_MAX_DIFF = 225.0


def _share(energy: float, total_energy: float) -> int:
    """Percent of total energy, NaN passes through"""
    percent = round_half_up(energy / total_energy * 100)
    return int(percent) if math.isfinite(percent) else percent


class SwellAnalyzer:
    """Compares primary and secondary swell trains"""

    def analyze_swell_interaction(
        self,
        primary_height: float,
        primary_period: float,
        primary_direction: str,
        secondary_height: Optional[float] = None,
        secondary_period: Optional[float] = None,
        secondary_direction: Optional[str] = None
    ) -> SwellInteraction:
        """
        Classify how a secondary swell interacts with the primary

        Swells from similar directions (within 45 degrees) stack up, swells
        from roughly opposite directions (135-225 degrees apart) break each
        other up. Directions are compared as raw degree differences, so
        N vs NNW (337.5 apart) counts as constructive via the >= 315 check.

        Args:
            primary_height: Primary swell height in meters
            primary_period: Primary swell period in seconds
            primary_direction: Primary swell compass direction
            secondary_height: Secondary swell height, if there is one
            secondary_period: Secondary swell period, if there is one
            secondary_direction: Secondary swell compass direction, if there is one

        Returns:
            "single_swell", "neutral", "constructive", or "destructive"
        """
        # Zero height/period or an empty direction means there's no second swell
        if not secondary_height or not secondary_period or not secondary_direction:
            return "single_swell"

        primary_energy = calculate_wave_energy(primary_height, primary_period)
        secondary_energy = calculate_wave_energy(secondary_height, secondary_period)

        if secondary_energy < primary_energy * NEGLIGIBLE_ENERGY_RATIO:
            return "neutral"

        direction_difference = abs(
            get_direction_degrees(primary_direction) - get_direction_degrees(secondary_direction)
        )

        if direction_difference <= CONSTRUCTIVE_MAX_DIFF or direction_difference >= 360 - CONSTRUCTIVE_MAX_DIFF:
            return "constructive"
        if DESTRUCTIVE_MIN_DIFF <= direction_difference <= DESTRUCTIVE_MAX_DIFF:
            return "destructive"
        return "neutral"

    def calculate_swell_dominance(
        self,
        primary_height: float,
        primary_period: float,
        secondary_height: Optional[float] = None,
        secondary_period: Optional[float] = None
    ) -> SwellDominance:
        """
        Split total wave energy between the two swells.

        Each percentage is rounded on its own, so the pair can come out at
        99 or 101.
        """
        if not secondary_height or not secondary_period:
            return SwellDominance(primary=100, secondary=0)

        primary_energy = calculate_wave_energy(primary_height, primary_period)
        secondary_energy = calculate_wave_energy(secondary_height, secondary_period)
        total_energy = primary_energy + secondary_energy

        if not total_energy:
            log.debug("Both swells round to zero energy, treating primary as dominant")
            return SwellDominance(primary=100, secondary=0)

        return SwellDominance(
            primary=_share(primary_energy, total_energy),
            secondary=_share(secondary_energy, total_energy),
        )
