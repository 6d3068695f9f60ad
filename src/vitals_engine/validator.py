"""
Vitals Validator.

Validates a raw reading in two steps:

1. Plausibility screen: each present vital is checked against an absolute
   physiological envelope. Values outside it produce a soft warning asking
   the user to verify the reading.
2. Crisis detection: the reading is checked against the crisis thresholds
   of the resolved regional standard. Checks run in a fixed priority order
   and the first triggered check builds the single emergency alert.

Missing vitals are skipped by both steps.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Tuple

from .models import (
    CrisisType,
    EmergencyAlert,
    ValidationResult,
    Vital,
    VitalsReading,
    VitalStatus,
)
from .standards import CrisisThresholds, Range, RegionalStandard, WarningBand, resolve_standard

logger = logging.getLogger(__name__)


# Country-independent physiological envelopes (inclusive)
PLAUSIBILITY_ENVELOPES = MappingProxyType({
    Vital.SYSTOLIC_BP: Range(50, 300),
    Vital.DIASTOLIC_BP: Range(30, 200),
    Vital.HEART_RATE: Range(30, 220),
    Vital.BLOOD_GLUCOSE: Range(20, 800),
    Vital.CHOLESTEROL: Range(50, 500),
    Vital.BODY_TEMPERATURE: Range(30, 45),
})

# Gauge-only critical cut-points; temperature never raises an emergency alert
TEMPERATURE_CRITICAL = WarningBand(high=39.5, low=35)


def check_plausibility(reading: VitalsReading) -> List[str]:
    """Return a verification warning for each present vital outside its envelope."""
    warnings = []
    for vital, value in reading.present_vitals():
        envelope = PLAUSIBILITY_ENVELOPES[vital]
        # NaN falls outside every envelope and is reported as high
        if envelope.contains(value):
            continue
        direction = "low" if value < envelope.low else "high"
        warnings.append(f"{vital.label} reading seems unusually {direction}. Please verify.")
    return warnings


def _is_hypertensive_crisis(reading: VitalsReading, crisis: CrisisThresholds) -> bool:
    return (
        (reading.systolic_bp is not None and reading.systolic_bp >= crisis.systolic)
        or (reading.diastolic_bp is not None and reading.diastolic_bp >= crisis.diastolic)
    )


def _is_severe_hypoglycemia(reading: VitalsReading, crisis: CrisisThresholds) -> bool:
    return reading.blood_glucose is not None and reading.blood_glucose < crisis.glucose_low


def _is_severe_hyperglycemia(reading: VitalsReading, crisis: CrisisThresholds) -> bool:
    return reading.blood_glucose is not None and reading.blood_glucose > crisis.glucose_high


def _is_critical_heart_rate(reading: VitalsReading, crisis: CrisisThresholds) -> bool:
    return reading.heart_rate is not None and (
        reading.heart_rate >= crisis.heart_rate_high
        or reading.heart_rate < crisis.heart_rate_low
    )


@dataclass(frozen=True)
class CrisisCheck:
    """A crisis predicate paired with the alert it produces."""

    crisis: CrisisType
    predicate: Callable[[VitalsReading, CrisisThresholds], bool]
    title: str
    message: str
    instructions: Tuple[str, ...]

    def triggered(self, reading: VitalsReading, standard: RegionalStandard) -> bool:
        return self.predicate(reading, standard.crisis)

    def build_alert(self, standard: RegionalStandard) -> EmergencyAlert:
        return EmergencyAlert(
            crisis=self.crisis,
            title=self.title,
            message=self.message,
            instructions=list(self.instructions),
            emergency_number=standard.emergency_number,
        )


# Evaluated in this order; the first triggered check owns the alert
CRISIS_CHECKS: Tuple[CrisisCheck, ...] = (
    CrisisCheck(
        crisis=CrisisType.HYPERTENSIVE_CRISIS,
        predicate=_is_hypertensive_crisis,
        title="Hypertensive Crisis Detected",
        message="Your blood pressure is in a dangerous range that requires immediate medical attention.",
        instructions=(
            "Sit down and remain calm",
            "Take deep, slow breaths",
            "Do not take additional blood pressure medication",
            "Call emergency services immediately",
        ),
    ),
    CrisisCheck(
        crisis=CrisisType.SEVERE_HYPOGLYCEMIA,
        predicate=_is_severe_hypoglycemia,
        title="Severe Hypoglycemia Detected",
        message="Your blood sugar is dangerously low.",
        instructions=(
            "Consume 15g of fast-acting carbohydrates immediately",
            "Examples: glucose tablets, fruit juice, or candy",
            "Wait 15 minutes and recheck blood sugar",
            "Call emergency services if symptoms persist",
        ),
    ),
    CrisisCheck(
        crisis=CrisisType.SEVERE_HYPERGLYCEMIA,
        predicate=_is_severe_hyperglycemia,
        title="Severe Hyperglycemia Detected",
        message="Your blood sugar is dangerously high.",
        instructions=(
            "Check for ketones if possible",
            "Drink water to prevent dehydration",
            "Do not exercise",
            "Seek immediate medical attention",
        ),
    ),
    CrisisCheck(
        crisis=CrisisType.CRITICAL_HEART_RATE,
        predicate=_is_critical_heart_rate,
        title="Critical Heart Rate Detected",
        message="Your heart rate is outside the safe range and needs immediate medical attention.",
        instructions=(
            "Stop any physical activity and sit or lie down",
            "Stay calm and breathe slowly",
            "Do not drive yourself to a hospital",
            "Call emergency services immediately",
        ),
    ),
)


def detect_crises(reading: VitalsReading, standard: RegionalStandard) -> List[CrisisType]:
    """Return every crisis the reading triggers, in priority order."""
    return [check.crisis for check in CRISIS_CHECKS if check.triggered(reading, standard)]


def _crosses_crisis(vital: Vital, value: float, crisis: CrisisThresholds) -> bool:
    if vital is Vital.SYSTOLIC_BP:
        return value >= crisis.systolic
    if vital is Vital.DIASTOLIC_BP:
        return value >= crisis.diastolic
    if vital is Vital.BLOOD_GLUCOSE:
        return value < crisis.glucose_low or value > crisis.glucose_high
    if vital is Vital.HEART_RATE:
        return value >= crisis.heart_rate_high or value < crisis.heart_rate_low
    if vital is Vital.BODY_TEMPERATURE:
        return TEMPERATURE_CRITICAL.crossed(value)
    return False


def classify_vital(vital: Vital, value: float, standard: RegionalStandard) -> VitalStatus:
    """
    Gauge status of one vital.

    Critical when it crosses a crisis threshold, warning when it crosses a
    warning cut-point or lies outside the normal range, otherwise normal.
    """
    if _crosses_crisis(vital, value, standard.crisis):
        return VitalStatus.CRITICAL
    if standard.warning[vital].crossed(value) or not standard.normal[vital].contains(value):
        return VitalStatus.WARNING
    return VitalStatus.NORMAL


def validate(reading: VitalsReading, country_code: str) -> ValidationResult:
    """
    Validate a reading against the standard for a country.

    Args:
        reading: The raw vitals reading
        country_code: Country used to resolve thresholds and emergency number

    Returns:
        ValidationResult; is_valid is False once any warning or alert exists
    """
    standard = resolve_standard(country_code)
    warnings = check_plausibility(reading)

    triggered = [check for check in CRISIS_CHECKS if check.triggered(reading, standard)]
    emergency_alert = triggered[0].build_alert(standard) if triggered else None

    vital_statuses = {
        vital: classify_vital(vital, value, standard)
        for vital, value in reading.present_vitals()
    }

    if emergency_alert:
        logger.warning(
            f"[VALIDATOR] {emergency_alert.title} "
            f"(country={standard.country_code}, call {emergency_alert.emergency_number})"
        )
    if warnings:
        logger.info(f"[VALIDATOR] {len(warnings)} implausible value(s) in reading")

    return ValidationResult(
        is_valid=not warnings and emergency_alert is None,
        warnings=warnings,
        emergency_alert=emergency_alert,
        vital_statuses=vital_statuses,
        crises=[check.crisis for check in triggered],
    )
