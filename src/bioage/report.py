"""
Report building for scored results.

Turns a BioAgeResult into what the results page shows: the gap between
biological and chronological age, a status band, and recommendations for
weak sub-scores. Recommendations are only released after the lead step.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .scorer import BioAgeResult

# Sub-scores below this get a recommendation
RECOMMENDATION_THRESHOLD = 60

# Gap (years) within which the result counts as on track
GAP_TOLERANCE = 2


class AgeStatus(str, Enum):
    """Status band for the bio/chrono age gap."""
    EXCELLENT = "excellent"
    GOOD = "good"
    ATTENTION = "attention"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


@dataclass(frozen=True)
class Recommendation:
    """Suggested focus area for a weak sub-score."""

    area: str
    priority: Priority
    text: str

    def to_dict(self) -> dict:
        return {"area": self.area, "priority": self.priority.value, "text": self.text}


# (area, result attribute, priority, text), in display order
_RECOMMENDATION_RULES = (
    (
        "metabolic",
        "metabolic_score",
        Priority.HIGH,
        "Optimize your nutrition with a focus on anti-inflammatory foods and meal timing.",
    ),
    (
        "cardio",
        "cardio_score",
        Priority.HIGH,
        "Improve your VO2max with interval training, 3 sessions a week of 20 minutes.",
    ),
    (
        "strength",
        "strength_score",
        Priority.MEDIUM,
        "Build functional strength with work on grip strength and walking speed.",
    ),
    (
        "recovery",
        "recovery_score",
        Priority.HIGH,
        "Prioritize recovery to raise your HRV and get more deep sleep.",
    ),
)

YOUNGER_MESSAGE = (
    "Your body is aging slower than the calendar. Keep your current habits "
    "to hold on to that advantage."
)
IMPROVE_MESSAGE = (
    "Small, consistent changes in sleep, training and diet can lower your "
    "biological age within a few months."
)


@dataclass
class BioAgeReport:
    """Full results view for a scored input."""

    result: BioAgeResult
    age_gap: int
    status: AgeStatus
    recommendations: List[Recommendation] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = self.result.to_dict()
        data.update({
            "ageGap": self.age_gap,
            "status": self.status.value,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "message": self.message,
        })
        return data


def age_gap(result: BioAgeResult) -> int:
    """Biological minus chronological age. Negative means younger."""
    return result.bio_age - result.chrono_age


def classify_age_gap(gap: int) -> AgeStatus:
    if gap < -GAP_TOLERANCE:
        return AgeStatus.EXCELLENT
    if gap <= GAP_TOLERANCE:
        return AgeStatus.GOOD
    return AgeStatus.ATTENTION


def build_recommendations(result: BioAgeResult) -> List[Recommendation]:
    """One recommendation per sub-score below the threshold."""
    return [
        Recommendation(area=area, priority=priority, text=text)
        for area, attr, priority, text in _RECOMMENDATION_RULES
        if getattr(result, attr) < RECOMMENDATION_THRESHOLD
    ]


def build_report(result: BioAgeResult) -> BioAgeReport:
    gap = age_gap(result)
    return BioAgeReport(
        result=result,
        age_gap=gap,
        status=classify_age_gap(gap),
        recommendations=build_recommendations(result),
        message=YOUNGER_MESSAGE if gap < 0 else IMPROVE_MESSAGE,
    )
