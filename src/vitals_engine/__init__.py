"""
Vitals Engine.

Validates vital-sign readings, raises emergency alerts localized by
country, computes BMI and scores multi-factor disease risk.
"""

from .anthropometrics import calculate_bmi, classify_bmi
from .engine import assess, assess_vitals, score_risks
from .errors import InvalidInput
from .models import (
    BMICategory,
    CrisisType,
    EmergencyAlert,
    HealthAssessment,
    RiskLevel,
    RiskPrediction,
    TimeOfDay,
    UserProfile,
    ValidationResult,
    Vital,
    VitalsReading,
    VitalStatus,
)
from .standards import RegionalStandard, resolve_standard

__all__ = [
    "assess",
    "assess_vitals",
    "score_risks",
    "calculate_bmi",
    "classify_bmi",
    "resolve_standard",
    "InvalidInput",
    "BMICategory",
    "CrisisType",
    "EmergencyAlert",
    "HealthAssessment",
    "RegionalStandard",
    "RiskLevel",
    "RiskPrediction",
    "TimeOfDay",
    "UserProfile",
    "ValidationResult",
    "Vital",
    "VitalsReading",
    "VitalStatus",
]
