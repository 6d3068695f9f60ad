"""
Engine facade.

The entry points the rest of the application calls. Every call is
independent and side-effect free; nothing is memoized.
"""

import logging
from typing import List

from . import risk_scoring, validator
from .anthropometrics import calculate_bmi, classify_bmi, require_positive
from .models import HealthAssessment, RiskPrediction, UserProfile, ValidationResult, VitalsReading

logger = logging.getLogger(__name__)

__all__ = ["assess_vitals", "score_risks", "calculate_bmi", "assess"]


def assess_vitals(reading: VitalsReading, country_code: str) -> ValidationResult:
    """Validate a reading and detect crises for a country."""
    return validator.validate(reading, country_code)


def score_risks(reading: VitalsReading, profile: UserProfile, bmi: float) -> List[RiskPrediction]:
    """
    Score disease risks for a reading.

    Raises:
        InvalidInput: if bmi is not a finite positive number
    """
    bmi = require_positive("bmi", bmi)
    return risk_scoring.score_risks(reading, profile, bmi)


def assess(reading: VitalsReading, profile: UserProfile) -> HealthAssessment:
    """
    Run the full pipeline for one reading.

    BMI is derived from the profile, the reading is validated first so any
    emergency alert is available before scoring, then risks are scored.

    Raises:
        InvalidInput: if the profile's height or weight is malformed
    """
    bmi = calculate_bmi(profile.height_cm, profile.weight_kg)
    validation = assess_vitals(reading, profile.country_code)
    risks = risk_scoring.score_risks(reading, profile, bmi)

    logger.debug(
        f"[ENGINE] Assessed reading: bmi={bmi:.1f}, valid={validation.is_valid}, "
        f"emergency={validation.emergency_alert is not None}"
    )

    return HealthAssessment(
        country_code=profile.country_code,
        bmi=bmi,
        bmi_category=classify_bmi(bmi),
        validation=validation,
        risks=risks,
    )
