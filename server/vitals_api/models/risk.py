"""Risk scoring and combined assessment models."""
from typing import Literal, Optional

from pydantic import Field

from .vitals import CamelModel, UserProfileIn, ValidationResultOut, VitalsReadingIn

RiskLevel = Literal["Low", "Medium", "High"]


class ScoreRisksRequest(CamelModel):
    """Request body for risk scoring. BMI is derived from the profile when omitted."""

    reading: VitalsReadingIn
    profile: UserProfileIn
    bmi: Optional[float] = None


class RiskPredictionOut(CamelModel):
    """Risk score for one condition."""

    condition: str
    score: int = Field(ge=0, le=95)
    risk_level: RiskLevel
    contributing_factors: list[str]


class AssessmentRequest(CamelModel):
    """Request body for a full assessment."""

    reading: VitalsReadingIn
    profile: UserProfileIn


class AssessmentOut(CamelModel):
    """Combined BMI, validation and risk result."""

    country_code: str
    bmi: float
    bmi_category: Literal["underweight", "normal", "overweight", "obese"]
    validation: ValidationResultOut
    risks: list[RiskPredictionOut]
    report: str
