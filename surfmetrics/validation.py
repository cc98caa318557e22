# ABOUTME: Input validation boundary for raw oceanographic measurements
# ABOUTME: Rejects negative, NaN, and infinite values before they reach the scoring engine

import math
from typing import Any


class InvalidMeasurementError(ValueError):
    """Raised when a raw measurement can't be scored"""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r} ({reason})")


def validate_measurement(field: str, value: Any) -> float:
    """
    Check that a measurement is a finite, non-negative number.

    Args:
        field: Name of the measurement, used in the error message
        value: Raw value from the caller

    Returns:
        The value as a float

    Raises:
        InvalidMeasurementError: If the value is missing, not numeric,
            NaN, infinite, or negative
    """
    if value is None:
        raise InvalidMeasurementError(field, value, "missing")

    if isinstance(value, bool):
        raise InvalidMeasurementError(field, value, "not a number")

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidMeasurementError(field, value, "not a number")

    if math.isnan(number):
        raise InvalidMeasurementError(field, value, "NaN")
    if math.isinf(number):
        raise InvalidMeasurementError(field, value, "infinite")
    if number < 0:
        raise InvalidMeasurementError(field, value, "negative")

    return number
