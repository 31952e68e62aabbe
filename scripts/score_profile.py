#!/usr/bin/env python3
"""
Score a health profile from the command line.

Examples:
    # Baseline profile with a preset applied
    python scripts/score_profile.py --age 45 --sex male --height 175 --weight 70 --preset active

    # Fully specified profile, JSON output
    python scripts/score_profile.py --age 52 --sex female --height 165 --weight 68 \\
        --sleep-hours 6.5 --sleep-quality fair --activity light --stress high --diet good \\
        --hrv 38 --json
"""
import argparse
import json
import sys
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR / "src"))

from bioage import apply_preset, build_report, list_presets, score  # noqa: E402
from bioage.scorer import (  # noqa: E402
    ActivityLevel,
    BioAgeInput,
    DietQuality,
    Sex,
    SleepQuality,
    StressLevel,
)

# Form fields filled from command line flags (camelCase, as presets use)
DEFAULTS = {
    "sleepHours": 7.5,
    "sleepQuality": "good",
    "activityLevel": "moderate",
    "stressLevel": "moderate",
    "dietQuality": "good",
}


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def build_input(fields: dict) -> BioAgeInput:
    """Build a BioAgeInput from camelCase form fields."""
    return BioAgeInput(
        chrono_age=int(fields["chronoAge"]),
        sex=Sex(fields["sex"]),
        height=float(fields["height"]),
        weight=float(fields["weight"]),
        sleep_hours=float(fields["sleepHours"]),
        sleep_quality=SleepQuality(fields["sleepQuality"]),
        hrv=fields.get("hrv"),
        vo2max=fields.get("vo2max"),
        grip_strength=fields.get("gripStrength"),
        walk_speed=fields.get("walkSpeed"),
        activity_level=ActivityLevel(fields["activityLevel"]),
        stress_level=StressLevel(fields["stressLevel"]),
        diet_quality=DietQuality(fields["dietQuality"]),
    )


def main():
    parser = argparse.ArgumentParser(
        description="Score a health profile with the BioAge calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--age", type=int, required=True, help="Chronological age (18-100)")
    parser.add_argument("--sex", choices=_choices(Sex), required=True)
    parser.add_argument("--height", type=float, required=True, help="Height in cm")
    parser.add_argument("--weight", type=float, required=True, help="Weight in kg")
    parser.add_argument("--sleep-hours", type=float)
    parser.add_argument("--sleep-quality", choices=_choices(SleepQuality))
    parser.add_argument("--activity", choices=_choices(ActivityLevel))
    parser.add_argument("--stress", choices=_choices(StressLevel))
    parser.add_argument("--diet", choices=_choices(DietQuality))
    parser.add_argument("--hrv", type=float, help="HRV in ms (optional)")
    parser.add_argument("--vo2max", type=float, help="VO2max in ml/kg/min (optional)")
    parser.add_argument("--grip", type=float, help="Grip strength in kg (optional)")
    parser.add_argument("--walk-speed", type=float, help="Walk speed in m/s (optional)")
    parser.add_argument(
        "--preset",
        choices=list_presets(),
        help="Apply a quick-fill preset before explicit flags",
    )
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    args = parser.parse_args()

    fields = dict(DEFAULTS)
    fields.update({
        "chronoAge": args.age,
        "sex": args.sex,
        "height": args.height,
        "weight": args.weight,
    })
    if args.preset:
        fields = apply_preset(args.preset, fields)

    overrides = {
        "sleepHours": args.sleep_hours,
        "sleepQuality": args.sleep_quality,
        "activityLevel": args.activity,
        "stressLevel": args.stress,
        "dietQuality": args.diet,
        "hrv": args.hrv,
        "vo2max": args.vo2max,
        "gripStrength": args.grip,
        "walkSpeed": args.walk_speed,
    }
    fields.update({key: value for key, value in overrides.items() if value is not None})

    report = build_report(score(build_input(fields)))

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return

    result = report.result
    print(f"Biological age: {result.bio_age} (chronological {result.chrono_age}, "
          f"gap {report.age_gap:+d}, {report.status.value})")
    print(f"  Metabolic: {result.metabolic_score}")
    print(f"  Cardio:    {result.cardio_score}")
    print(f"  Strength:  {result.strength_score}")
    print(f"  Recovery:  {result.recovery_score}")
    for rec in report.recommendations:
        print(f"  [{rec.priority.value.upper()}] {rec.text}")


if __name__ == "__main__":
    main()
