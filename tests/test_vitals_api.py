"""
Tests for the Vitals Engine API routes.

Uses FastAPI's TestClient, so no running server is required.

Usage:
    pytest tests/test_vitals_api.py -v
"""
import pytest
from fastapi.testclient import TestClient

from server.vitals_api.main import app


@pytest.fixture(scope="module")
def client():
    """HTTP client bound to the application."""
    with TestClient(app) as test_client:
        yield test_client


HEALTHY_READING = {"systolicBP": 118, "diastolicBP": 76, "heartRate": 70, "bloodGlucose": 90}
CRISIS_READING = {"systolicBP": 185, "diastolicBP": 125, "heartRate": 72, "bloodGlucose": 95}
HIGH_RISK_PROFILE = {
    "age": 50,
    "heightCm": 170,
    "weightKg": 90,
    "countryCode": "US",
    "familyHistoryMarkers": ["Diabetes (Type 2)"],
}


class TestHealthEndpoint:

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAssessVitals:
    """POST /api/vitals/assess"""

    def test_healthy_reading(self, client):
        response = client.post("/api/vitals/assess", json={"reading": HEALTHY_READING, "countryCode": "US"})

        assert response.status_code == 200
        body = response.json()
        assert body["isValid"] is True
        assert body["warnings"] == []
        assert body["emergencyAlert"] is None
        assert body["vitalStatuses"] == {
            "systolicBP": "normal", "diastolicBP": "normal", "heartRate": "normal", "bloodGlucose": "normal",
        }

    def test_crisis_reading_localized(self, client):
        response = client.post("/api/vitals/assess", json={"reading": CRISIS_READING, "countryCode": "GB"})

        body = response.json()
        alert = body["emergencyAlert"]
        assert body["isValid"] is False
        assert alert["title"] == "Hypertensive Crisis Detected"
        assert alert["emergencyNumber"] == "999"
        assert "**Emergency number:** 999" in alert["notification"]
        assert body["crises"] == ["hypertensive_crisis"]

    def test_default_country_from_settings(self, client):
        """Without a country code the configured default (US) is used."""
        response = client.post("/api/vitals/assess", json={"reading": CRISIS_READING})

        assert response.json()["emergencyAlert"]["emergencyNumber"] == "911"

    def test_empty_reading(self, client):
        response = client.post("/api/vitals/assess", json={"reading": {}})

        assert response.status_code == 200
        assert response.json()["isValid"] is True

    def test_nan_vital_rejected(self, client):
        """Non-finite vitals never reach the engine."""
        response = client.post(
            "/api/vitals/assess",
            content='{"reading": {"bloodGlucose": NaN}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_fever_status_is_critical(self, client):
        response = client.post("/api/vitals/assess", json={"reading": {"bodyTemperature": 40}})

        body = response.json()
        assert body["vitalStatuses"] == {"bodyTemperature": "critical"}
        assert body["emergencyAlert"] is None

    def test_invalid_time_of_day(self, client):
        response = client.post(
            "/api/vitals/assess",
            json={"reading": {**HEALTHY_READING, "timeOfDay": "midnight"}},
        )

        assert response.status_code == 422


class TestBMI:
    """POST /api/bmi"""

    def test_calculate_bmi(self, client):
        response = client.post("/api/bmi", json={"heightCm": 170, "weightKg": 70})

        assert response.status_code == 200
        assert response.json() == {"bmi": 24.22, "category": "normal", "warnings": []}

    def test_non_positive_height_rejected(self, client):
        response = client.post("/api/bmi", json={"heightCm": 0, "weightKg": 70})

        assert response.status_code == 422
        assert response.json()["field"] == "height_cm"

    def test_implausible_weight_warns(self, client):
        response = client.post("/api/bmi", json={"heightCm": 180, "weightKg": 320})

        assert response.status_code == 200
        assert response.json()["warnings"] == ["Weight seems unusually high. Please confirm and proceed."]


class TestScoreRisks:
    """POST /api/risks/score"""

    def test_high_diabetes_risk(self, client):
        response = client.post(
            "/api/risks/score",
            json={"reading": {"bloodGlucose": 130}, "profile": HIGH_RISK_PROFILE},
        )

        assert response.status_code == 200
        diabetes, cvd, htn = response.json()
        assert diabetes["condition"] == "Type 2 Diabetes"
        assert diabetes["score"] == 95
        assert diabetes["riskLevel"] == "High"
        assert len(diabetes["contributingFactors"]) == 4
        assert cvd["condition"] == "Cardiovascular Disease"
        assert htn["riskLevel"] == "Medium"

    def test_explicit_bmi_used(self, client):
        """A supplied BMI overrides the profile-derived one."""
        response = client.post(
            "/api/risks/score",
            json={"reading": {"bloodGlucose": 90}, "profile": HIGH_RISK_PROFILE, "bmi": 22.0},
        )

        diabetes = response.json()[0]
        assert "Overweight BMI" not in diabetes["contributingFactors"]

    def test_invalid_bmi_rejected(self, client):
        response = client.post(
            "/api/risks/score",
            json={"reading": {}, "profile": HIGH_RISK_PROFILE, "bmi": -1},
        )

        assert response.status_code == 422

    def test_non_positive_age_rejected(self, client):
        response = client.post(
            "/api/risks/score",
            json={"reading": {}, "profile": {**HIGH_RISK_PROFILE, "age": 0}},
        )

        assert response.status_code == 422


class TestAssessments:
    """POST /api/assessments"""

    def test_full_assessment(self, client):
        response = client.post(
            "/api/assessments",
            json={"reading": CRISIS_READING, "profile": HIGH_RISK_PROFILE},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["bmiCategory"] == "obese"
        assert body["bmi"] == pytest.approx(31.14, abs=0.01)
        assert body["validation"]["emergencyAlert"]["emergencyNumber"] == "911"
        assert len(body["risks"]) == 3
        assert body["report"].startswith("# Health Assessment Report")


class TestStandards:
    """GET /api/standards"""

    def test_list_standards(self, client):
        response = client.get("/api/standards")

        body = response.json()
        assert "US" in body["countryCodes"]
        assert body["default"]["isDefault"] is True

    def test_known_country(self, client):
        body = client.get("/api/standards/JP").json()

        assert body["emergencyNumber"] == "119"
        assert body["isDefault"] is False
        assert body["crisis"]["glucoseLow"] == 60

    def test_unknown_country_falls_back(self, client):
        body = client.get("/api/standards/Atlantis").json()

        assert body["isDefault"] is True
        assert body["emergencyNumber"] == "112"
        assert body["normal"]["systolicBP"] == {"low": 90, "high": 120}
        assert body["warning"]["bodyTemperature"] == {"high": 38, "low": 36}
