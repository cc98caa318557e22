# ABOUTME: Data models for wave measurements and swell classification
# ABOUTME: Provides structured representation of wave heights, energy, and raw marine conditions

from dataclasses import dataclass
from typing import Literal, Optional

from surfmetrics.validation import validate_measurement

SwellType = Literal["ground_swell", "wind_swell", "mixed"]
SwellQuality = Literal["excellent", "good", "fair", "poor"]


@dataclass(frozen=True)
class WaveMetrics:
    """Wave height in the units surfers care about"""
    height_meters: float
    height_feet: float
    swell_height: float      # open-water swell, meters
    breaking_height: float   # at the break, meters
    wave_energy: int
    confidence: int          # percent, placeholder

    def __str__(self) -> str:
        return (
            f"Waves: {self.height_meters}m ({self.height_feet}ft), "
            f"Swell: {self.swell_height}m, Breaking: {self.breaking_height}m, "
            f"Energy: {self.wave_energy}"
        )


@dataclass(frozen=True)
class SwellClassification:
    """Period-based swell bucket"""
    swell_type: SwellType
    quality: SwellQuality
    description: str

    def __str__(self) -> str:
        return f"{self.quality} {self.swell_type}: {self.description}"


@dataclass(frozen=True)
class MarineConditions:
    """
    Raw measurements for one observation, validated on construction.

    Heights are meters, periods seconds, wind speed km/h. Directions are
    16-point compass strings and are not validated (unknown ones score neutral).
    """
    wave_height_m: float
    wave_period_s: float
    wind_speed_kmh: float
    wind_direction: str
    tide_height_m: float = 2.0
    wave_direction: Optional[str] = None
    secondary_swell_height_m: Optional[float] = None
    secondary_swell_period_s: Optional[float] = None
    secondary_swell_direction: Optional[str] = None

    def __post_init__(self):
        for name in ("wave_height_m", "wave_period_s", "wind_speed_kmh", "tide_height_m"):
            object.__setattr__(self, name, validate_measurement(name, getattr(self, name)))

        # Secondary swell is optional - only check what was given
        for name in ("secondary_swell_height_m", "secondary_swell_period_s"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, validate_measurement(name, value))

    @property
    def has_secondary_swell(self) -> bool:
        return bool(
            self.secondary_swell_height_m
            and self.secondary_swell_period_s
            and self.secondary_swell_direction
        )

    def __str__(self) -> str:
        return (
            f"Waves: {self.wave_height_m}m @ {self.wave_period_s}s, "
            f"Wind: {self.wind_speed_kmh}km/h {self.wind_direction}, "
            f"Tide: {self.tide_height_m}m"
        )
