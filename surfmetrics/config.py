# ABOUTME: Engine configuration for spot defaults and scoring placeholders
# ABOUTME: Centralized config so callers can tune spot behaviour from the environment

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Engine configuration"""

    # Spot defaults used when a caller doesn't know better
    # Shore direction is the way the beach faces ("S" = south-facing beach)
    DEFAULT_SHORE_DIRECTION = os.getenv("SURF_SHORE_DIRECTION", "S")
    DEFAULT_OPTIMAL_TIDE = os.getenv("SURF_OPTIMAL_TIDE", "mid")  # low, mid, high
    DEFAULT_TIDE_HEIGHT_M = float(os.getenv("SURF_DEFAULT_TIDE_HEIGHT", "2.0"))

    # Score wind direction against the spot's shore instead of the fixed N/S tables
    SPOT_RELATIVE_WIND = os.getenv("SPOT_RELATIVE_WIND", "false").lower() == "true"

    # Placeholders until there's a real uncertainty model / forecast variance
    WAVE_CONFIDENCE = 85
    CONSISTENCY_SCORE = 7.0

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
