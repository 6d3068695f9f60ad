"""Risk scoring and full assessment API routes."""
import logging

from fastapi import APIRouter

from vitals_engine import assess, calculate_bmi, score_risks
from vitals_engine.formatting import format_assessment_report

from ..models.risk import AssessmentOut, AssessmentRequest, RiskPredictionOut, ScoreRisksRequest
from .vitals import to_validation_out

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Risks"])


@router.post("/risks/score", response_model=list[RiskPredictionOut])
async def score_risks_route(request: ScoreRisksRequest):
    """
    Score Type 2 Diabetes, Cardiovascular Disease and Hypertension risk.

    Uses the supplied BMI, or derives it from the profile's height and weight.
    """
    profile = request.profile.to_profile()
    bmi = request.bmi if request.bmi is not None else calculate_bmi(profile.height_cm, profile.weight_kg)
    predictions = score_risks(request.reading.to_reading(), profile, bmi)
    return [RiskPredictionOut.model_validate(p.to_dict()) for p in predictions]


@router.post("/assessments", response_model=AssessmentOut)
async def create_assessment(request: AssessmentRequest):
    """
    Run BMI, validation and risk scoring for one reading.

    The markdown report in the response is rendered from the same result.
    """
    assessment = assess(request.reading.to_reading(), request.profile.to_profile())
    if assessment.has_emergency:
        log.warning(f"[API] Emergency alert returned: {assessment.validation.emergency_alert.title}")

    return AssessmentOut(
        country_code=assessment.country_code,
        bmi=round(assessment.bmi, 2),
        bmi_category=assessment.bmi_category.value,
        validation=to_validation_out(assessment.validation),
        risks=[RiskPredictionOut.model_validate(r.to_dict()) for r in assessment.risks],
        report=format_assessment_report(assessment),
    )
