# ABOUTME: Wave height unit conversion and wave energy calculations
# ABOUTME: Energy (height squared x period) is the power proxy the scorers build on

import math

from surfmetrics.config import Config
from surfmetrics.waves.models import WaveMetrics

FEET_PER_METER = 3.28084
SWELL_HEIGHT_FACTOR = 1.15    # open-water swell runs 10-20% bigger than the break
BREAKING_HEIGHT_FACTOR = 0.9  # energy lost before the wave breaks

# (threshold, label) - energy must be strictly above the threshold
ENERGY_LEVELS = [
    (500, "Massive - Expert only"),
    (300, "Powerful - Advanced surfers"),
    (150, "Solid - Intermediate+"),
    (50, "Moderate - All levels"),
]
SMALL_ENERGY_LABEL = "Small - Beginners welcome"


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() sends halves to the even neighbour, which would move
    energy tiers and displayed scores at exact .5 boundaries.
    NaN, infinities, and values too large to scale pass through untouched.
    """
    factor = 10 ** digits
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def convert_wave_height(height_meters: float) -> WaveMetrics:
    """
    Derive display heights from a single wave height in meters.

    Energy isn't known without a period, so it's left at 0 here; callers
    that have one use calculate_wave_energy().

    Args:
        height_meters: Wave height in meters (not validated)

    Returns:
        WaveMetrics with feet/swell/breaking heights rounded to one decimal
    """
    return WaveMetrics(
        height_meters=height_meters,
        height_feet=round_half_up(height_meters * FEET_PER_METER, 1),
        swell_height=round_half_up(height_meters * SWELL_HEIGHT_FACTOR, 1),
        breaking_height=round_half_up(height_meters * BREAKING_HEIGHT_FACTOR, 1),
        wave_energy=0,
        confidence=Config.WAVE_CONFIDENCE,
    )


def calculate_wave_energy(height: float, period: float) -> int:
    """Wave energy proxy: height^2 x period, rounded to a whole number"""
    energy = round_half_up(height * height * period)
    if not math.isfinite(energy):
        return energy
    return int(energy)


def interpret_energy_level(energy: float) -> str:
    """Human-readable label for a wave energy value"""
    for threshold, label in ENERGY_LEVELS:
        if energy > threshold:
            return label
    return SMALL_ENERGY_LABEL
