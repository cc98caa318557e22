# ABOUTME: Data models for surf scores and multi-swell breakdowns
# ABOUTME: Provides structured representation of composite ratings and swell dominance

from dataclasses import dataclass

# (minimum score, band) - checked top-down
SCORE_BANDS = [
    (8.0, "excellent"),
    (6.0, "good"),
    (4.0, "fair"),
]


def describe_score(score: float) -> str:
    """Rating band for a 1-10 score: excellent, good, fair, or poor"""
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return "poor"


@dataclass(frozen=True)
class SurfScore:
    """Composite surf rating, every component on a 1.0-10.0 scale"""
    overall_score: float
    wave_quality: float
    wind_quality: float
    tide_optimal: float
    consistency_score: float

    @property
    def rating(self) -> str:
        return describe_score(self.overall_score)

    def __str__(self) -> str:
        return (
            f"{self.overall_score}/10 ({self.rating}) - "
            f"Waves: {self.wave_quality}, Wind: {self.wind_quality}, "
            f"Tide: {self.tide_optimal}"
        )


@dataclass(frozen=True)
class SwellDominance:
    """Share of total wave energy per swell train, in percent"""
    primary: int
    secondary: int

    def __str__(self) -> str:
        return f"Primary {self.primary}% / Secondary {self.secondary}%"
