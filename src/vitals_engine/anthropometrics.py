"""Body-composition metrics: BMI and its WHO category."""

import math
from numbers import Real
from typing import Optional

from .errors import InvalidInput
from .models import BMICategory

# WHO cut-points
UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0

MIN_HEIGHT_CM = 50
MAX_HEIGHT_CM = 300
MAX_WEIGHT_KG = 500
UNUSUAL_WEIGHT_KG = 300


def require_positive(field: str, value) -> float:
    """Return value as float, or raise InvalidInput if it is not a finite positive number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(field, value)
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(field, value)
    return value


def calculate_bmi(height_cm, weight_kg) -> float:
    """
    Calculate body-mass index.

    Args:
        height_cm: Height in centimetres
        weight_kg: Weight in kilograms

    Returns:
        weight_kg / (height_cm / 100) ** 2

    Raises:
        InvalidInput: if either argument is non-numeric or not positive
    """
    height_m = require_positive("height_cm", height_cm) / 100
    weight = require_positive("weight_kg", weight_kg)
    return weight / (height_m * height_m)


def classify_bmi(bmi: float) -> BMICategory:
    """Bucket a BMI value into its WHO category."""
    if bmi < UNDERWEIGHT_BELOW:
        return BMICategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BMICategory.NORMAL
    if bmi < OBESE_FROM:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def check_height(height_cm: float) -> Optional[str]:
    """Return a warning for an implausible height, or None."""
    if height_cm > MAX_HEIGHT_CM:
        return f"Please enter a valid height (maximum {MAX_HEIGHT_CM}cm)"
    if height_cm < MIN_HEIGHT_CM:
        return f"Please enter a valid height (minimum {MIN_HEIGHT_CM}cm)"
    return None


def check_weight(weight_kg: float) -> Optional[str]:
    """Return a warning for an implausible weight, or None."""
    if weight_kg > MAX_WEIGHT_KG:
        return f"Please enter a valid weight (maximum {MAX_WEIGHT_KG}kg)"
    if weight_kg > UNUSUAL_WEIGHT_KG:
        return "Weight seems unusually high. Please confirm and proceed."
    return None
