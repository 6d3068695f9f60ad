"""Regional standard models."""
from typing import Optional

from pydantic import field_validator

from .vitals import CamelModel, camel_vital_keys


class RangeOut(CamelModel):
    low: float
    high: float


class WarningBandOut(CamelModel):
    high: Optional[float] = None
    low: Optional[float] = None


class CrisisThresholdsOut(CamelModel):
    systolic: float
    diastolic: float
    glucose_low: float
    glucose_high: float
    heart_rate_low: float
    heart_rate_high: float


class RegionalStandardOut(CamelModel):
    """Bands and emergency number for one country (or the global default)."""

    country_code: str
    country_name: str
    emergency_number: str
    is_default: bool
    normal: dict[str, RangeOut]
    warning: dict[str, WarningBandOut]
    crisis: CrisisThresholdsOut

    @field_validator("normal", "warning", mode="before")
    @classmethod
    def camel_band_keys(cls, v):
        return camel_vital_keys(v)


class CountryListOut(CamelModel):
    country_codes: list[str]
    default: RegionalStandardOut
