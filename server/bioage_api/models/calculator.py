"""Calculator request and response models."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal, Optional

from bioage import (
    ActivityLevel,
    BioAgeInput,
    BioAgeReport,
    DietQuality,
    Sex,
    SleepQuality,
    StressLevel,
)
from bioage.report import AgeStatus

from .lead import LeadPayload


class BioAgeInputModel(BaseModel):
    """Calculator form submission. Ranges match the form widgets."""

    model_config = ConfigDict(populate_by_name=True)

    chrono_age: int = Field(alias="chronoAge", ge=18, le=100)
    sex: Sex
    height: float = Field(ge=140, le=220, description="Height in cm")
    weight: float = Field(ge=40, le=200, description="Weight in kg")
    sleep_hours: float = Field(alias="sleepHours", ge=4, le=12)
    sleep_quality: SleepQuality = Field(alias="sleepQuality")
    hrv: Optional[float] = Field(default=None, ge=10, le=150, description="HRV in ms")
    vo2max: Optional[float] = Field(default=None, ge=15, le=80, description="VO2max in ml/kg/min")
    grip_strength: Optional[float] = Field(default=None, alias="gripStrength", ge=10, le=100)
    walk_speed: Optional[float] = Field(default=None, alias="walkSpeed", ge=0.5, le=2.5)
    activity_level: ActivityLevel = Field(alias="activityLevel")
    stress_level: StressLevel = Field(alias="stressLevel")
    diet_quality: DietQuality = Field(alias="dietQuality")

    @field_validator("hrv", "vo2max", "grip_strength", "walk_speed", mode="before")
    @classmethod
    def _blank_as_missing(cls, value):
        # The form submits 0 (number or string) for fields left blank
        if isinstance(value, str):
            value = value.strip()
        if value in (None, "", 0, "0"):
            return None
        return value

    def to_domain(self) -> BioAgeInput:
        return BioAgeInput(
            chrono_age=self.chrono_age,
            sex=self.sex,
            height=self.height,
            weight=self.weight,
            sleep_hours=self.sleep_hours,
            sleep_quality=self.sleep_quality,
            hrv=self.hrv,
            vo2max=self.vo2max,
            grip_strength=self.grip_strength,
            walk_speed=self.walk_speed,
            activity_level=self.activity_level,
            stress_level=self.stress_level,
            diet_quality=self.diet_quality,
        )


class BioAgeScoreResponse(BioAgeInputModel):
    """Scored result merged with the submitted input."""

    bio_age: int = Field(alias="bioAge")
    metabolic_score: int = Field(alias="metabolicScore", ge=0, le=100)
    cardio_score: int = Field(alias="cardioScore", ge=0, le=100)
    strength_score: int = Field(alias="strengthScore", ge=0, le=100)
    recovery_score: int = Field(alias="recoveryScore", ge=0, le=100)
    age_gap: int = Field(alias="ageGap")
    status: AgeStatus

    @classmethod
    def from_report(cls, payload: BioAgeInputModel, report: BioAgeReport, **extra):
        result = report.result
        return cls(
            **payload.model_dump(),
            bio_age=result.bio_age,
            metabolic_score=result.metabolic_score,
            cardio_score=result.cardio_score,
            strength_score=result.strength_score,
            recovery_score=result.recovery_score,
            age_gap=report.age_gap,
            status=report.status,
            **extra,
        )


class RecommendationModel(BaseModel):
    """Recommendation for a sub-score below 60."""

    area: Literal["metabolic", "cardio", "strength", "recovery"]
    priority: Literal["high", "medium"]
    text: str


class BioAgeReportResponse(BioAgeScoreResponse):
    """Full report, released after the lead step."""

    recommendations: list[RecommendationModel] = []
    message: str = ""


class UnlockRequest(LeadPayload):
    """Email capture plus the input to build the full report for."""

    input: BioAgeInputModel
