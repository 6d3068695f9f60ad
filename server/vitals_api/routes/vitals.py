"""Vitals validation and BMI API routes."""
from fastapi import APIRouter

from vitals_engine import assess_vitals, calculate_bmi, classify_bmi
from vitals_engine.anthropometrics import check_height, check_weight
from vitals_engine.formatting import format_alert_for_notification
from vitals_engine.models import ValidationResult

from ..config import get_settings
from ..models.vitals import AssessVitalsRequest, BMIOut, BMIRequest, ValidationResultOut

router = APIRouter(prefix="/api", tags=["Vitals"])


def to_validation_out(result: ValidationResult) -> ValidationResultOut:
    """Convert an engine ValidationResult, attaching the notification text."""
    out = ValidationResultOut.model_validate(result.to_dict())
    if result.emergency_alert and out.emergency_alert:
        out.emergency_alert.notification = format_alert_for_notification(result.emergency_alert)
    return out


@router.post("/vitals/assess", response_model=ValidationResultOut)
async def assess_vitals_route(request: AssessVitalsRequest):
    """
    Validate a vitals reading.

    Returns plausibility warnings, per-vital status and, when a crisis
    threshold is crossed, an emergency alert with the number to call for
    the requested country (or the configured default country).
    """
    country_code = request.country_code or get_settings().default_country_code
    result = assess_vitals(request.reading.to_reading(), country_code)
    return to_validation_out(result)


@router.post("/bmi", response_model=BMIOut)
async def calculate_bmi_route(request: BMIRequest):
    """Calculate BMI and its WHO category from height and weight."""
    bmi = calculate_bmi(request.height_cm, request.weight_kg)
    warnings = [
        w for w in (check_height(request.height_cm), check_weight(request.weight_kg)) if w
    ]
    return BMIOut(bmi=round(bmi, 2), category=classify_bmi(bmi).value, warnings=warnings)
