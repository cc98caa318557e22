# ABOUTME: Swell classification from wave period
# ABOUTME: Buckets swell into ground/mixed/wind swell with a quality label

from surfmetrics.waves.models import SwellClassification

GROUND_SWELL = "ground_swell"
WIND_SWELL = "wind_swell"
MIXED_SWELL = "mixed"

# Checked top-down, lower bound inclusive
SWELL_CLASSES = [
    (13.0, SwellClassification(
        swell_type=GROUND_SWELL,
        quality="excellent",
        description="Long-period groundswell - premium surf conditions",
    )),
    (10.0, SwellClassification(
        swell_type=GROUND_SWELL,
        quality="good",
        description="Medium-period groundswell - quality waves",
    )),
    (8.0, SwellClassification(
        swell_type=MIXED_SWELL,
        quality="fair",
        description="Mixed swell - average conditions",
    )),
]

CHOPPY_WIND_SWELL = SwellClassification(
    swell_type=WIND_SWELL,
    quality="poor",
    description="Wind swell - choppy conditions",
)


def classify_swell_quality(period: float) -> SwellClassification:
    """
    Classify swell by period.

    Args:
        period: Wave period in seconds

    Returns:
        SwellClassification. Anything under 8s (including zero, negative,
        or NaN periods) is choppy wind swell.
    """
    for min_period, classification in SWELL_CLASSES:
        if period >= min_period:
            return classification
    return CHOPPY_WIND_SWELL
