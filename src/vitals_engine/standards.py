"""
Regional Standards Table.

Per-country normal/warning bands and emergency numbers, with one
WHO-derived global default. The table is built once at import and is
read-only afterwards, so it can be shared across threads without locking.

Crisis thresholds are the same for every entry; countries only differ in
their normal/warning cut-points and emergency number.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from .models import Vital

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Range:
    """Closed interval [low, high]."""

    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def to_dict(self) -> dict:
        return {"low": self.low, "high": self.high}


@dataclass(frozen=True)
class WarningBand:
    """Warning cut-points: crossed when value >= high or value < low."""

    high: Optional[float] = None
    low: Optional[float] = None

    def crossed(self, value: float) -> bool:
        if self.high is not None and value >= self.high:
            return True
        return self.low is not None and value < self.low

    def to_dict(self) -> dict:
        return {"high": self.high, "low": self.low}


@dataclass(frozen=True)
class CrisisThresholds:
    """Values beyond which immediate medical attention is advised."""

    systolic: float = 180
    diastolic: float = 120
    glucose_low: float = 60
    glucose_high: float = 300
    heart_rate_low: float = 50
    heart_rate_high: float = 150

    def to_dict(self) -> dict:
        return {
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "glucose_low": self.glucose_low,
            "glucose_high": self.glucose_high,
            "heart_rate_low": self.heart_rate_low,
            "heart_rate_high": self.heart_rate_high,
        }


@dataclass(frozen=True)
class RegionalStandard:
    """Band definitions and emergency contact for one country."""

    country_code: str
    country_name: str
    emergency_number: str
    normal: Mapping[Vital, Range]
    warning: Mapping[Vital, WarningBand]
    crisis: CrisisThresholds = field(default_factory=CrisisThresholds)
    is_default: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "country_code": self.country_code,
            "country_name": self.country_name,
            "emergency_number": self.emergency_number,
            "is_default": self.is_default,
            "normal": {v.value: r.to_dict() for v, r in self.normal.items()},
            "warning": {v.value: w.to_dict() for v, w in self.warning.items()},
            "crisis": self.crisis.to_dict(),
        }


# WHO reference bands
WHO_NORMAL_RANGES = MappingProxyType({
    Vital.SYSTOLIC_BP: Range(90, 120),
    Vital.DIASTOLIC_BP: Range(60, 80),
    Vital.HEART_RATE: Range(60, 100),
    Vital.BLOOD_GLUCOSE: Range(70, 100),
    Vital.CHOLESTEROL: Range(125, 200),
    Vital.BODY_TEMPERATURE: Range(36.1, 37.2),
})

WHO_WARNING_BANDS = MappingProxyType({
    Vital.SYSTOLIC_BP: WarningBand(high=140, low=90),
    Vital.DIASTOLIC_BP: WarningBand(high=90, low=60),
    Vital.HEART_RATE: WarningBand(high=100, low=60),
    Vital.BLOOD_GLUCOSE: WarningBand(high=126, low=70),
    Vital.CHOLESTEROL: WarningBand(high=240),
    Vital.BODY_TEMPERATURE: WarningBand(high=38, low=36),
})

# ACC/AHA 2017: stage 1 hypertension starts at 130/80
ACC_AHA_WARNING_BANDS = MappingProxyType({
    **WHO_WARNING_BANDS,
    Vital.SYSTOLIC_BP: WarningBand(high=130, low=90),
    Vital.DIASTOLIC_BP: WarningBand(high=80, low=60),
})

GLOBAL_EMERGENCY_NUMBER = "112"

GLOBAL_DEFAULT = RegionalStandard(
    country_code="GLOBAL",
    country_name="Global (WHO)",
    emergency_number=GLOBAL_EMERGENCY_NUMBER,
    normal=WHO_NORMAL_RANGES,
    warning=WHO_WARNING_BANDS,
    is_default=True,
)


def _standard(code: str, name: str, emergency_number: str, warning=WHO_WARNING_BANDS) -> RegionalStandard:
    return RegionalStandard(
        country_code=code,
        country_name=name,
        emergency_number=emergency_number,
        normal=WHO_NORMAL_RANGES,
        warning=warning,
    )


STANDARDS: Mapping[str, RegionalStandard] = MappingProxyType({
    s.country_code: s
    for s in (
        _standard("US", "United States", "911", warning=ACC_AHA_WARNING_BANDS),
        _standard("CA", "Canada", "911", warning=ACC_AHA_WARNING_BANDS),
        _standard("GB", "United Kingdom", "999"),
        _standard("IN", "India", "112"),
        _standard("AU", "Australia", "000"),
        _standard("DE", "Germany", "112"),
        _standard("FR", "France", "112"),
        _standard("JP", "Japan", "119"),
        _standard("CN", "China", "120"),
        _standard("BR", "Brazil", "192"),
    )
})

# Profile forms store the English country name; accept it as an exact alias
COUNTRY_NAME_ALIASES: Mapping[str, str] = MappingProxyType({
    s.country_name: code for code, s in STANDARDS.items()
})


def resolve_standard(country_code: Optional[str]) -> RegionalStandard:
    """
    Resolve the regional standard for a country.

    Lookup is exact and case-sensitive, by ISO 3166-1 alpha-2 code or by
    English country name. Never fails: unknown or missing codes resolve to
    the global default.
    """
    if country_code:
        standard = STANDARDS.get(country_code)
        if standard is not None:
            return standard
        alias = COUNTRY_NAME_ALIASES.get(country_code)
        if alias is not None:
            return STANDARDS[alias]

    logger.debug(f"[STANDARDS] No standard for {country_code!r}, using global default")
    return GLOBAL_DEFAULT


def known_country_codes() -> List[str]:
    """Country codes with an explicit entry in the table."""
    return list(STANDARDS.keys())
