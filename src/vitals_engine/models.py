"""
Value types consumed and produced by the vitals engine.

Readings and profiles are frozen: callers build them and hand them to the
engine by value. Results are created fresh for every call and are never
retained by the engine.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple


class Vital(str, Enum):
    """Measured physiological quantities, in declaration order."""

    SYSTOLIC_BP = "systolic_bp"
    DIASTOLIC_BP = "diastolic_bp"
    HEART_RATE = "heart_rate"
    BLOOD_GLUCOSE = "blood_glucose"
    CHOLESTEROL = "cholesterol"
    BODY_TEMPERATURE = "body_temperature"

    @property
    def label(self) -> str:
        return VITAL_LABELS[self]

    @property
    def unit(self) -> str:
        return VITAL_UNITS[self]


VITAL_LABELS = {
    Vital.SYSTOLIC_BP: "Systolic blood pressure",
    Vital.DIASTOLIC_BP: "Diastolic blood pressure",
    Vital.HEART_RATE: "Heart rate",
    Vital.BLOOD_GLUCOSE: "Blood glucose",
    Vital.CHOLESTEROL: "Cholesterol",
    Vital.BODY_TEMPERATURE: "Body temperature",
}

VITAL_UNITS = {
    Vital.SYSTOLIC_BP: "mmHg",
    Vital.DIASTOLIC_BP: "mmHg",
    Vital.HEART_RATE: "bpm",
    Vital.BLOOD_GLUCOSE: "mg/dL",
    Vital.CHOLESTEROL: "mg/dL",
    Vital.BODY_TEMPERATURE: "°C",
}


class TimeOfDay(str, Enum):
    """When during the day a reading was taken."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class VitalStatus(str, Enum):
    """Gauge status of a single vital against a regional standard."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class CrisisType(str, Enum):
    """Crisis conditions, listed in alert priority order."""

    HYPERTENSIVE_CRISIS = "hypertensive_crisis"
    SEVERE_HYPOGLYCEMIA = "severe_hypoglycemia"
    SEVERE_HYPERGLYCEMIA = "severe_hyperglycemia"
    CRITICAL_HEART_RATE = "critical_heart_rate"


class RiskLevel(str, Enum):
    """Risk bucket derived from a risk score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class BMICategory(str, Enum):
    """WHO body-mass index categories."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


@dataclass(frozen=True)
class VitalsReading:
    """One measurement event. Any vital may be missing (None)."""

    systolic_bp: Optional[int] = None
    diastolic_bp: Optional[int] = None
    heart_rate: Optional[float] = None
    blood_glucose: Optional[float] = None
    cholesterol: Optional[float] = None
    body_temperature: Optional[float] = None
    time_of_day: TimeOfDay = TimeOfDay.MORNING
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def value_of(self, vital: Vital) -> Optional[float]:
        """Return the value recorded for a vital, or None if missing."""
        return getattr(self, vital.value)

    def present_vitals(self) -> Iterator[Tuple[Vital, float]]:
        """Yield (vital, value) for every vital present in the reading."""
        for vital in Vital:
            value = self.value_of(vital)
            if value is not None:
                yield vital, value

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {vital.value: self.value_of(vital) for vital in Vital}
        result["time_of_day"] = self.time_of_day.value
        result["timestamp"] = self.timestamp.isoformat()
        return result


@dataclass(frozen=True)
class UserProfile:
    """The subset of a user's profile the engine reads."""

    age: int
    height_cm: float
    weight_kg: float
    country_code: str = ""
    family_history_markers: FrozenSet[str] = frozenset()

    def __post_init__(self):
        # Accept any iterable of marker names from callers
        if not isinstance(self.family_history_markers, frozenset):
            object.__setattr__(
                self, "family_history_markers", frozenset(self.family_history_markers)
            )

    def has_family_history(self, marker: str) -> bool:
        """Exact, case-sensitive marker membership."""
        return marker in self.family_history_markers


@dataclass
class EmergencyAlert:
    """Actionable guidance attached when a crisis threshold is crossed."""

    crisis: CrisisType
    title: str
    message: str
    instructions: List[str]
    emergency_number: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "crisis": self.crisis.value,
            "title": self.title,
            "message": self.message,
            "instructions": list(self.instructions),
            "emergency_number": self.emergency_number,
        }


@dataclass
class ValidationResult:
    """Outcome of validating one reading."""

    is_valid: bool
    warnings: List[str] = field(default_factory=list)
    emergency_alert: Optional[EmergencyAlert] = None
    vital_statuses: Dict[Vital, VitalStatus] = field(default_factory=dict)
    crises: List[CrisisType] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "warnings": list(self.warnings),
            "emergency_alert": self.emergency_alert.to_dict() if self.emergency_alert else None,
            "vital_statuses": {v.value: s.value for v, s in self.vital_statuses.items()},
            "crises": [c.value for c in self.crises],
        }


@dataclass
class RiskPrediction:
    """Risk score for one condition."""

    condition: str
    score: int
    risk_level: RiskLevel
    contributing_factors: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "condition": self.condition,
            "score": self.score,
            "risk_level": self.risk_level.value,
            "contributing_factors": list(self.contributing_factors),
        }


@dataclass
class HealthAssessment:
    """Combined result of BMI, validation and risk scoring for one reading."""

    country_code: str
    bmi: float
    bmi_category: BMICategory
    validation: ValidationResult
    risks: List[RiskPrediction]

    @property
    def has_emergency(self) -> bool:
        return self.validation.emergency_alert is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "country_code": self.country_code,
            "bmi": self.bmi,
            "bmi_category": self.bmi_category.value,
            "validation": self.validation.to_dict(),
            "risks": [r.to_dict() for r in self.risks],
        }
