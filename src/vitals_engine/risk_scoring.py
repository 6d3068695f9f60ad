"""
Risk Scoring Engine.

Each condition is an additive weighted-factor model: every rule that
applies adds its fixed weight to the score and its reason to the factor
list, in declaration order. Scores are capped at MAX_SCORE and banded into
Low/Medium/High by per-condition cut-points.

The weights and cut-points are fixed behavioural constants. Changing them
changes externally visible risk outputs.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from .models import RiskLevel, RiskPrediction, UserProfile, VitalsReading

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 95

DIABETES = "Type 2 Diabetes"
CARDIOVASCULAR = "Cardiovascular Disease"
HYPERTENSION = "Hypertension"


@dataclass(frozen=True)
class ScoringInput:
    """Everything a rule may look at."""

    reading: VitalsReading
    profile: UserProfile
    bmi: float


@dataclass(frozen=True)
class RiskRule:
    """One weighted risk factor."""

    reason: str
    weight: int
    applies: Callable[[ScoringInput], bool]


@dataclass(frozen=True)
class ConditionModel:
    """Rule set and band cut-points for one condition."""

    name: str
    rules: Tuple[RiskRule, ...]
    high_at: int
    medium_at: int

    def risk_level(self, score: int) -> RiskLevel:
        if score >= self.high_at:
            return RiskLevel.HIGH
        if score >= self.medium_at:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


def _above(value, threshold) -> bool:
    # Missing vitals never satisfy a threshold
    return value is not None and value > threshold


def _family_history(marker: str) -> Callable[[ScoringInput], bool]:
    return lambda data: data.profile.has_family_history(marker)


DIABETES_MODEL = ConditionModel(
    name=DIABETES,
    rules=(
        RiskRule("Elevated fasting glucose", 40, lambda d: _above(d.reading.blood_glucose, 125)),
        RiskRule("Overweight BMI", 25, lambda d: d.bmi > 25),
        RiskRule("Age over 45", 20, lambda d: d.profile.age > 45),
        RiskRule("Family history", 30, _family_history("Diabetes (Type 2)")),
    ),
    high_at=60,
    medium_at=30,
)

CARDIOVASCULAR_MODEL = ConditionModel(
    name=CARDIOVASCULAR,
    rules=(
        RiskRule("Elevated blood pressure", 30, lambda d: _above(d.reading.systolic_bp, 130)),
        RiskRule("High cholesterol", 25, lambda d: _above(d.reading.cholesterol, 200)),
        RiskRule("Age factor", 20, lambda d: d.profile.age > 50),
        RiskRule("Obesity", 20, lambda d: d.bmi > 30),
        RiskRule("Family history", 35, _family_history("Heart Disease")),
    ),
    high_at=65,
    medium_at=35,
)

HYPERTENSION_MODEL = ConditionModel(
    name=HYPERTENSION,
    rules=(
        RiskRule(
            "Elevated blood pressure readings",
            40,
            lambda d: _above(d.reading.systolic_bp, 120) or _above(d.reading.diastolic_bp, 80),
        ),
        RiskRule("Excess weight", 20, lambda d: d.bmi > 25),
        RiskRule("Age factor", 15, lambda d: d.profile.age > 40),
        RiskRule("Genetic predisposition", 30, _family_history("High Blood Pressure")),
    ),
    high_at=60,
    medium_at=30,
)

# Output order of score_risks
CONDITION_MODELS: Tuple[ConditionModel, ...] = (
    DIABETES_MODEL,
    CARDIOVASCULAR_MODEL,
    HYPERTENSION_MODEL,
)

_MODELS_BY_NAME = {model.name: model for model in CONDITION_MODELS}


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(score, MAX_SCORE))


def risk_level_for(condition: str, score: int) -> RiskLevel:
    """Band a score for a named condition. Raises KeyError for unknown conditions."""
    return _MODELS_BY_NAME[condition].risk_level(score)


def score_condition(model: ConditionModel, data: ScoringInput) -> RiskPrediction:
    """Apply one condition's rules and band the capped score."""
    score = 0
    factors = []
    for rule in model.rules:
        if rule.applies(data):
            score += rule.weight
            factors.append(rule.reason)

    score = clamp_score(score)
    return RiskPrediction(
        condition=model.name,
        score=score,
        risk_level=model.risk_level(score),
        contributing_factors=factors,
    )


def score_risks(reading: VitalsReading, profile: UserProfile, bmi: float) -> List[RiskPrediction]:
    """
    Score every condition for one reading.

    Args:
        reading: Vitals reading
        profile: User profile (age and family history are used)
        bmi: Pre-computed body-mass index

    Returns:
        One RiskPrediction per condition, in CONDITION_MODELS order
    """
    data = ScoringInput(reading=reading, profile=profile, bmi=bmi)
    predictions = [score_condition(model, data) for model in CONDITION_MODELS]

    logger.debug(
        "[RISK] " + ", ".join(f"{p.condition}={p.score} ({p.risk_level.value})" for p in predictions)
    )
    return predictions
