"""
Biological Age Scoring.

Estimates a "biological age" from self-reported health metrics using a fixed
additive model. Each metric nudges the chronological age up or down and moves
one of four sub-scores (metabolic, cardio, strength, recovery) away from a
neutral 50.

The scorer is a pure function: no I/O, no logging, no retained state.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class SleepQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"


class StressLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class DietQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# Years added to bio age per category
SLEEP_QUALITY_IMPACT = MappingProxyType({
    SleepQuality.EXCELLENT: -2,
    SleepQuality.GOOD: -1,
    SleepQuality.FAIR: 1,
    SleepQuality.POOR: 3,
})

ACTIVITY_IMPACT = MappingProxyType({
    ActivityLevel.SEDENTARY: 4,
    ActivityLevel.LIGHT: 2,
    ActivityLevel.MODERATE: 0,
    ActivityLevel.ACTIVE: -2,
    ActivityLevel.VERY_ACTIVE: -3,
})

STRESS_IMPACT = MappingProxyType({
    StressLevel.LOW: -1,
    StressLevel.MODERATE: 0,
    StressLevel.HIGH: 2,
    StressLevel.VERY_HIGH: 4,
})

DIET_IMPACT = MappingProxyType({
    DietQuality.EXCELLENT: -2,
    DietQuality.GOOD: -1,
    DietQuality.FAIR: 1,
    DietQuality.POOR: 3,
})

BASE_SUBSCORE = 50
SCORE_MIN = 0
SCORE_MAX = 100


@dataclass(frozen=True)
class BioAgeInput:
    """
    Health metrics collected by the calculator form.

    The optional measurements (hrv, vo2max, grip_strength, walk_speed) skip
    their adjustment when None or 0. A reported 0 cannot be told apart from
    "not provided"; this mirrors how the form has always submitted blanks.
    """

    chrono_age: int
    sex: Sex
    height: float  # cm
    weight: float  # kg
    sleep_hours: float
    sleep_quality: SleepQuality
    activity_level: ActivityLevel
    stress_level: StressLevel
    diet_quality: DietQuality
    hrv: Optional[float] = None  # ms
    vo2max: Optional[float] = None  # ml/kg/min
    grip_strength: Optional[float] = None  # kg
    walk_speed: Optional[float] = None  # m/s


@dataclass(frozen=True)
class BioAgeResult:
    """Scored output. Sub-scores are clamped to 0-100, bio_age is not."""

    bio_age: int
    chrono_age: int
    metabolic_score: int
    cardio_score: int
    strength_score: int
    recovery_score: int

    def to_dict(self) -> dict:
        """Convert to the camelCase record used by the API."""
        return {
            "bioAge": self.bio_age,
            "chronoAge": self.chrono_age,
            "metabolicScore": self.metabolic_score,
            "cardioScore": self.cardio_score,
            "strengthScore": self.strength_score,
            "recoveryScore": self.recovery_score,
        }


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Body Mass Index, kg/m^2."""
    return weight_kg / (height_cm / 100) ** 2


def round_half_up(value: float) -> int:
    """Round .5 toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    return int(max(SCORE_MIN, min(SCORE_MAX, value)))


def _provided(value: Optional[float]) -> float:
    return value or 0


def score(data: BioAgeInput) -> BioAgeResult:
    """
    Score a set of health metrics.

    Adjustments are applied in a fixed order: sleep duration, sleep quality,
    HRV, VO2max, grip strength, walk speed, BMI, activity, stress, diet.

    Args:
        data: Validated input metrics. Height must be positive.

    Returns:
        BioAgeResult with the rounded bio age and clamped sub-scores.
    """
    chrono_age = data.chrono_age
    male = Sex(data.sex) == Sex.MALE

    bio_age = chrono_age
    metabolic = cardio = strength = recovery = BASE_SUBSCORE

    # Sleep duration: 7-9h inclusive is good, under 6h or over 10h is bad
    if 7 <= data.sleep_hours <= 9:
        bio_age -= 2
        recovery += 20
    elif data.sleep_hours < 6 or data.sleep_hours > 10:
        bio_age += 3
        recovery -= 20

    # Sleep quality
    impact = SLEEP_QUALITY_IMPACT[SleepQuality(data.sleep_quality)]
    bio_age += impact
    recovery += impact * -10

    # HRV
    hrv = _provided(data.hrv)
    if hrv > 0:
        expected_hrv = 100 - chrono_age * 0.8
        if hrv > expected_hrv:
            bio_age -= min(3, (hrv - expected_hrv) / 10)
            recovery += 15
        else:
            bio_age += min(3, (expected_hrv - hrv) / 10)
            recovery -= 15

    # VO2max
    vo2max = _provided(data.vo2max)
    if vo2max > 0:
        expected_vo2 = 50 - chrono_age * 0.4 if male else 45 - chrono_age * 0.35
        if vo2max > expected_vo2:
            bio_age -= min(4, (vo2max - expected_vo2) / 5)
            cardio += 25
        else:
            bio_age += min(4, (expected_vo2 - vo2max) / 5)
            cardio -= 20

    # Grip strength: gains capped at 2 years, losses at 3
    grip = _provided(data.grip_strength)
    if grip > 0:
        expected_grip = 45 - chrono_age * 0.2 if male else 30 - chrono_age * 0.15
        if grip > expected_grip:
            bio_age -= min(2, (grip - expected_grip) / 10)
            strength += 20
        else:
            bio_age += min(3, (expected_grip - grip) / 10)
            strength -= 20

    # Walk speed
    walk_speed = _provided(data.walk_speed)
    if walk_speed > 0:
        if walk_speed >= 1.2:
            bio_age -= 2
            strength += 15
        elif walk_speed < 0.8:
            bio_age += 3
            strength -= 20

    # BMI: 25-30 is left alone
    bmi = calculate_bmi(data.weight, data.height)
    if 18.5 <= bmi <= 25:
        bio_age -= 1
        metabolic += 20
    elif bmi > 30:
        bio_age += 3
        metabolic -= 25

    # Activity level
    impact = ACTIVITY_IMPACT[ActivityLevel(data.activity_level)]
    bio_age += impact
    cardio += impact * -8
    strength += impact * -5

    # Stress
    impact = STRESS_IMPACT[StressLevel(data.stress_level)]
    bio_age += impact
    recovery += impact * -10

    # Diet quality
    impact = DIET_IMPACT[DietQuality(data.diet_quality)]
    bio_age += impact
    metabolic += impact * -10

    return BioAgeResult(
        bio_age=round_half_up(bio_age),
        chrono_age=chrono_age,
        metabolic_score=clamp_score(metabolic),
        cardio_score=clamp_score(cardio),
        strength_score=clamp_score(strength),
        recovery_score=clamp_score(recovery),
    )
