"""Vitals reading, profile and validation models."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vitals_engine import TimeOfDay, UserProfile, VitalsReading


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


# Blood pressure keeps the upper-case "BP" clients already send
VITAL_ALIASES = {"systolic_bp": "systolicBP", "diastolic_bp": "diastolicBP"}


def vital_key(name: str) -> str:
    """JSON key for a vital name, matching the reading's field aliases."""
    return VITAL_ALIASES.get(name, to_camel(name))


def camel_vital_keys(value):
    """Re-key a vital-name mapping with vital_key; other values pass through."""
    if isinstance(value, dict):
        return {vital_key(k): v for k, v in value.items()}
    return value


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VitalsReadingIn(CamelModel):
    """One measurement event. Omitted vitals are treated as missing; NaN and infinity are rejected."""

    model_config = ConfigDict(allow_inf_nan=False)

    systolic_bp: Optional[int] = Field(default=None, alias=VITAL_ALIASES["systolic_bp"])
    diastolic_bp: Optional[int] = Field(default=None, alias=VITAL_ALIASES["diastolic_bp"])
    heart_rate: Optional[float] = None
    blood_glucose: Optional[float] = None
    cholesterol: Optional[float] = None
    body_temperature: Optional[float] = None
    time_of_day: Literal["morning", "afternoon", "evening"] = "morning"
    timestamp: Optional[datetime] = None

    def to_reading(self) -> VitalsReading:
        """Convert to the engine's reading type."""
        optional = {"timestamp": self.timestamp} if self.timestamp else {}
        return VitalsReading(
            systolic_bp=self.systolic_bp,
            diastolic_bp=self.diastolic_bp,
            heart_rate=self.heart_rate,
            blood_glucose=self.blood_glucose,
            cholesterol=self.cholesterol,
            body_temperature=self.body_temperature,
            time_of_day=TimeOfDay(self.time_of_day),
            **optional,
        )


class UserProfileIn(CamelModel):
    """Profile fields read by the engine."""

    age: int = Field(gt=0)
    height_cm: float
    weight_kg: float
    country_code: str = ""
    family_history_markers: list[str] = Field(default_factory=list)

    def to_profile(self) -> UserProfile:
        """Convert to the engine's profile type."""
        return UserProfile(
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            country_code=self.country_code,
            family_history_markers=frozenset(self.family_history_markers),
        )


class AssessVitalsRequest(CamelModel):
    """Request body for vitals validation."""

    reading: VitalsReadingIn
    country_code: Optional[str] = None


class EmergencyAlertOut(CamelModel):
    """Emergency guidance for a detected crisis."""

    crisis: str
    title: str
    message: str
    instructions: list[str]
    emergency_number: str
    notification: Optional[str] = None


class ValidationResultOut(CamelModel):
    """Validation outcome for one reading."""

    is_valid: bool
    warnings: list[str]
    emergency_alert: Optional[EmergencyAlertOut] = None
    vital_statuses: dict[str, Literal["normal", "warning", "critical"]] = Field(default_factory=dict)
    crises: list[str] = Field(default_factory=list)

    @field_validator("vital_statuses", mode="before")
    @classmethod
    def camel_status_keys(cls, v):
        return camel_vital_keys(v)


class BMIRequest(CamelModel):
    """Request body for BMI calculation."""

    height_cm: float
    weight_kg: float


class BMIOut(CamelModel):
    """BMI with its WHO category and any height/weight warnings."""

    bmi: float
    category: Literal["underweight", "normal", "overweight", "obese"]
    warnings: list[str] = Field(default_factory=list)
