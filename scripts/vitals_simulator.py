#!/usr/bin/env python3
"""
Vitals Device Simulator for the Vitals Engine.

Generates simulated readings from home health devices (blood pressure
monitor, glucose meter, smartwatch, thermometer) and runs them through the
engine, printing the assessment as JSON or as a markdown report.

Usage:
    python scripts/vitals_simulator.py --scenario normal
    python scripts/vitals_simulator.py --scenario hypertensive-crisis --country GB
    python scripts/vitals_simulator.py --scenario random --count 5 --format report
    python scripts/vitals_simulator.py --once --systolic 185 --diastolic 125
"""

import os
import sys
import json
import random
import argparse
from pathlib import Path
from dotenv import load_dotenv

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from vitals_engine import InvalidInput, TimeOfDay, UserProfile, VitalsReading, assess
from vitals_engine.formatting import format_assessment_report


# Load environment variables
load_dotenv()

# Simulated device sources
VITALS_DEVICES = ["HealthWatch Pro", "BP Monitor X1", "Glucose Meter Plus", "Smart Thermometer"]

# Value ranges per scenario; vitals not listed fall back to the normal scenario
SCENARIO_SPECS = {
    "normal": {
        "systolic_bp": (105, 119),
        "diastolic_bp": (65, 79),
        "heart_rate": (60, 90),
        "blood_glucose": (75, 99),
        "cholesterol": (150, 199),
        "body_temperature": (36.2, 37.1),
    },
    "hypertensive-crisis": {
        "systolic_bp": (180, 210),
        "diastolic_bp": (120, 135),
    },
    "hypoglycemia": {
        "blood_glucose": (35, 59),
    },
    "hyperglycemia": {
        "blood_glucose": (301, 450),
    },
    "critical-hr": {
        "heart_rate": (150, 190),
    },
}

SCENARIOS = list(SCENARIO_SPECS) + ["random"]

INTEGER_VITALS = {"systolic_bp", "diastolic_bp", "heart_rate", "blood_glucose", "cholesterol"}


def _sample(name: str, bounds: tuple):
    low, high = bounds
    if name in INTEGER_VITALS:
        return random.randint(low, high)
    return round(random.uniform(low, high), 1)


def generate_reading(scenario: str = "normal", time_of_day: str = None) -> VitalsReading:
    """Generate a simulated reading for a scenario."""
    if scenario == "random":
        scenario = random.choice(list(SCENARIO_SPECS))
    if scenario not in SCENARIO_SPECS:
        raise ValueError(f"Unknown scenario: {scenario}")

    specs = {**SCENARIO_SPECS["normal"], **SCENARIO_SPECS[scenario]}
    values = {name: _sample(name, bounds) for name, bounds in specs.items()}

    if time_of_day is None:
        time_of_day = random.choice([t.value for t in TimeOfDay])

    return VitalsReading(time_of_day=TimeOfDay(time_of_day), **values)


def build_profile(args) -> UserProfile:
    """Build the profile used for every simulated reading."""
    return UserProfile(
        age=args.age,
        height_cm=args.height,
        weight_kg=args.weight,
        country_code=args.country,
        family_history_markers=frozenset(args.family_history or []),
    )


def create_assessment_event(reading: VitalsReading, profile: UserProfile, source_device: str = None) -> dict:
    """Assess a reading and wrap the result in an event payload."""
    if source_device is None:
        source_device = random.choice(VITALS_DEVICES)

    assessment = assess(reading, profile)
    return {
        "event_type": "vitals_assessment",
        "source_device": source_device,
        "source": "simulator",
        "reading": reading.to_dict(),
        "assessment": assessment.to_dict(),
        "report": format_assessment_report(assessment),
    }


def print_event(event: dict, output_format: str = "json"):
    """Print an assessment event."""
    if output_format == "report":
        print(f"\n[DEVICE] {event['source_device']}")
        print(event["report"])
    else:
        payload = {k: v for k, v in event.items() if k != "report"}
        print(json.dumps(payload, indent=2, ensure_ascii=False))


def run_scenario(profile: UserProfile, scenario: str, count: int = 1, output_format: str = "json") -> list:
    """Generate, assess and print `count` readings for a scenario."""
    events = []
    for _ in range(count):
        event = create_assessment_event(generate_reading(scenario), profile)
        print_event(event, output_format)
        events.append(event)
    return events


def run_single_reading(profile: UserProfile, args, output_format: str = "json") -> dict:
    """Assess one explicitly specified reading."""
    reading = VitalsReading(
        systolic_bp=args.systolic,
        diastolic_bp=args.diastolic,
        heart_rate=args.heart_rate,
        blood_glucose=args.glucose,
        cholesterol=args.cholesterol,
        body_temperature=args.temperature,
        time_of_day=TimeOfDay(args.time_of_day),
    )
    event = create_assessment_event(reading, profile)
    print_event(event, output_format)
    return event


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vitals Device Simulator for the Vitals Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Healthy reading for the default profile
  python scripts/vitals_simulator.py --scenario normal

  # Hypertensive crisis for a UK user
  python scripts/vitals_simulator.py --scenario hypertensive-crisis --country GB

  # Five random readings rendered as markdown reports
  python scripts/vitals_simulator.py --scenario random --count 5 --format report

  # Single explicit reading
  python scripts/vitals_simulator.py --once --systolic 185 --diastolic 125
        """,
    )

    parser.add_argument(
        "--scenario",
        choices=SCENARIOS,
        default="normal",
        help="Scenario to run (default: normal)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of readings to generate (default: 1)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "report"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Assess a single reading built from the vital flags and exit",
    )
    parser.add_argument("--systolic", type=int, help="Systolic blood pressure (mmHg)")
    parser.add_argument("--diastolic", type=int, help="Diastolic blood pressure (mmHg)")
    parser.add_argument("--heart-rate", type=float, help="Heart rate (bpm)")
    parser.add_argument("--glucose", type=float, help="Blood glucose (mg/dL)")
    parser.add_argument("--cholesterol", type=float, help="Total cholesterol (mg/dL)")
    parser.add_argument("--temperature", type=float, help="Body temperature (°C)")
    parser.add_argument(
        "--time-of-day",
        choices=[t.value for t in TimeOfDay],
        default="morning",
        help="Time of day for a single reading (default: morning)",
    )

    # Profile
    parser.add_argument("--age", type=int, default=35, help="Age in years (default: 35)")
    parser.add_argument("--height", type=float, default=170.0, help="Height in cm (default: 170)")
    parser.add_argument("--weight", type=float, default=70.0, help="Weight in kg (default: 70)")
    parser.add_argument(
        "--country",
        default=os.getenv("VITALS_DEFAULT_COUNTRY_CODE", "US"),
        help="Country code for thresholds and emergency number (default: $VITALS_DEFAULT_COUNTRY_CODE or US)",
    )
    parser.add_argument(
        "--family-history",
        action="append",
        help='Family history marker, e.g. "Heart Disease" (repeatable)',
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate arguments
    vital_flags = [args.systolic, args.diastolic, args.heart_rate, args.glucose, args.cholesterol, args.temperature]
    if args.once and all(v is None for v in vital_flags):
        parser.error("--once requires at least one vital flag")
    if args.count < 1:
        parser.error("--count must be at least 1")

    try:
        profile = build_profile(args)
        if args.once:
            run_single_reading(profile, args, args.format)
        else:
            run_scenario(profile, args.scenario, args.count, args.format)
    except InvalidInput as e:
        print(f"\n[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n[INFO] Interrupted by user")


if __name__ == "__main__":
    main()
