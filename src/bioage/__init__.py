"""
BioAge Calculator core.

Scores self-reported health metrics into a biological age estimate and
builds the report shown on the results page.
"""

from .scorer import (
    ActivityLevel,
    BioAgeInput,
    BioAgeResult,
    DietQuality,
    Sex,
    SleepQuality,
    StressLevel,
    calculate_bmi,
    score,
)
from .presets import UnknownPresetError, apply_preset, get_preset, list_presets
from .report import AgeStatus, BioAgeReport, Recommendation, build_report

__all__ = [
    "ActivityLevel",
    "BioAgeInput",
    "BioAgeResult",
    "DietQuality",
    "Sex",
    "SleepQuality",
    "StressLevel",
    "calculate_bmi",
    "score",
    "UnknownPresetError",
    "apply_preset",
    "get_preset",
    "list_presets",
    "AgeStatus",
    "BioAgeReport",
    "Recommendation",
    "build_report",
]
