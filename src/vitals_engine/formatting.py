"""
Markdown rendering of engine results for notifications and reports.

Output is deterministic so downstream report text is stable.
"""

from typing import List

from .models import (
    EmergencyAlert,
    HealthAssessment,
    RiskLevel,
    ValidationResult,
    VitalStatus,
)

RISK_EMOJI = {
    RiskLevel.LOW: "✅",
    RiskLevel.MEDIUM: "⚠️",
    RiskLevel.HIGH: "🚨",
}

STATUS_EMOJI = {
    VitalStatus.NORMAL: "✅",
    VitalStatus.WARNING: "⚠️",
    VitalStatus.CRITICAL: "🚨",
}


def format_alert_for_notification(alert: EmergencyAlert) -> str:
    """
    Format an emergency alert for user notification.

    Returns:
        Markdown with the title, message, numbered instructions and the
        number to call
    """
    lines = [
        f"🚨 **{alert.title}**",
        "",
        alert.message,
        "",
    ]
    lines.extend(f"{i}. {step}" for i, step in enumerate(alert.instructions, start=1))
    lines.append("")
    lines.append(f"**Emergency number:** {alert.emergency_number}")
    return "\n".join(lines)


def _format_validation(validation: ValidationResult) -> List[str]:
    lines = ["## Vitals"]
    if not validation.vital_statuses:
        lines.append("No vitals recorded.")
    for vital, status in validation.vital_statuses.items():
        lines.append(f"- {STATUS_EMOJI[status]} **{vital.label}**: {status.value}")

    if validation.warnings:
        lines.append("")
        lines.append("### Please verify")
        lines.extend(f"- {warning}" for warning in validation.warnings)
    return lines


def format_assessment_report(assessment: HealthAssessment) -> str:
    """Render a full assessment as a markdown health report."""
    lines = ["# Health Assessment Report", ""]

    if assessment.validation.emergency_alert:
        lines.append(format_alert_for_notification(assessment.validation.emergency_alert))
        lines.append("")

    lines.append(
        f"**BMI**: {assessment.bmi:.1f} - {assessment.bmi_category.value.title()}"
    )
    lines.append("")
    lines.extend(_format_validation(assessment.validation))
    lines.append("")
    lines.append("## Risk Assessment")

    for risk in assessment.risks:
        line = f"- {RISK_EMOJI[risk.risk_level]} **{risk.condition}**: {risk.risk_level.value} ({risk.score}/100)"
        if risk.contributing_factors:
            line += f" - {', '.join(risk.contributing_factors)}"
        lines.append(line)

    return "\n".join(lines).strip()
