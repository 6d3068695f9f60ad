"""
Pytest fixtures for Vitals Engine tests.
"""
import sys
import pytest
from pathlib import Path

# Ensure src/ and the repo root are on sys.path so tests can import
# vitals_engine and the server package without installing.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from vitals_engine import UserProfile, VitalsReading


# ============================================================================
# Readings and Profiles
# ============================================================================

@pytest.fixture
def healthy_reading():
    """Reading with every measured vital in its normal range."""
    return VitalsReading(systolic_bp=118, diastolic_bp=76, heart_rate=70, blood_glucose=90)


@pytest.fixture
def crisis_reading():
    """Reading in the hypertensive-crisis range."""
    return VitalsReading(systolic_bp=185, diastolic_bp=125, heart_rate=72, blood_glucose=95)


@pytest.fixture
def empty_reading():
    """Reading with no vitals recorded."""
    return VitalsReading()


@pytest.fixture
def young_profile():
    """30-year-old, BMI about 24.2, no family history."""
    return UserProfile(age=30, height_cm=170, weight_kg=70, country_code="US")


@pytest.fixture
def high_risk_profile():
    """50-year-old, BMI about 31.1, family history of type 2 diabetes."""
    return UserProfile(
        age=50,
        height_cm=170,
        weight_kg=90,
        country_code="US",
        family_history_markers={"Diabetes (Type 2)"},
    )
