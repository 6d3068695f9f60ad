"""Pydantic models for the vitals API requests and responses."""
from .vitals import (
    AssessVitalsRequest,
    BMIOut,
    BMIRequest,
    EmergencyAlertOut,
    UserProfileIn,
    ValidationResultOut,
    VitalsReadingIn,
)
from .risk import AssessmentOut, AssessmentRequest, RiskPredictionOut, ScoreRisksRequest
from .standard import CountryListOut, RegionalStandardOut

__all__ = [
    "AssessVitalsRequest",
    "BMIOut",
    "BMIRequest",
    "EmergencyAlertOut",
    "UserProfileIn",
    "ValidationResultOut",
    "VitalsReadingIn",
    "AssessmentOut",
    "AssessmentRequest",
    "RiskPredictionOut",
    "ScoreRisksRequest",
    "CountryListOut",
    "RegionalStandardOut",
]
