"""
Unit tests for report building and quick-fill presets.

Usage:
    pytest tests/test_report.py -v
"""
import pytest

from bioage.presets import (
    PRESETS,
    UnknownPresetError,
    apply_preset,
    get_preset,
    list_presets,
)
from bioage.report import (
    IMPROVE_MESSAGE,
    YOUNGER_MESSAGE,
    AgeStatus,
    Priority,
    age_gap,
    build_recommendations,
    build_report,
    classify_age_gap,
)
from bioage.scorer import BioAgeResult


def make_result(bio_age=40, chrono_age=45, metabolic=80, cardio=80, strength=80, recovery=80):
    return BioAgeResult(
        bio_age=bio_age,
        chrono_age=chrono_age,
        metabolic_score=metabolic,
        cardio_score=cardio,
        strength_score=strength,
        recovery_score=recovery,
    )


# ============================================================================
# Age Gap
# ============================================================================


class TestAgeGap:

    def test_gap_is_bio_minus_chrono(self):
        assert age_gap(make_result(bio_age=38, chrono_age=45)) == -7
        assert age_gap(make_result(bio_age=50, chrono_age=45)) == 5

    @pytest.mark.parametrize("gap,status", [
        (-10, AgeStatus.EXCELLENT),
        (-3, AgeStatus.EXCELLENT),
        (-2, AgeStatus.GOOD),
        (0, AgeStatus.GOOD),
        (2, AgeStatus.GOOD),
        (3, AgeStatus.ATTENTION),
    ])
    def test_status_bands(self, gap, status):
        assert classify_age_gap(gap) == status


# ============================================================================
# Recommendations
# ============================================================================


class TestRecommendations:

    def test_no_recommendations_for_strong_scores(self):
        assert build_recommendations(make_result()) == []

    def test_threshold_is_exclusive(self):
        """A score of exactly 60 gets no recommendation."""
        result = make_result(metabolic=60, cardio=59)
        areas = [r.area for r in build_recommendations(result)]
        assert areas == ["cardio"]

    def test_all_weak_scores_in_display_order(self):
        result = make_result(metabolic=10, cardio=20, strength=30, recovery=0)
        recs = build_recommendations(result)

        assert [r.area for r in recs] == ["metabolic", "cardio", "strength", "recovery"]
        assert [r.priority for r in recs] == [
            Priority.HIGH, Priority.HIGH, Priority.MEDIUM, Priority.HIGH,
        ]
        assert all(r.text for r in recs)

    def test_recommendation_dict(self):
        rec = build_recommendations(make_result(strength=40))[0]
        assert rec.to_dict() == {"area": "strength", "priority": "medium", "text": rec.text}


# ============================================================================
# Report
# ============================================================================


class TestBuildReport:

    def test_younger_report(self):
        report = build_report(make_result(bio_age=40, chrono_age=45, cardio=50))

        assert report.age_gap == -5
        assert report.status == AgeStatus.EXCELLENT
        assert [r.area for r in report.recommendations] == ["cardio"]
        assert report.message == YOUNGER_MESSAGE

    def test_same_age_gets_improve_message(self):
        report = build_report(make_result(bio_age=45, chrono_age=45))
        assert report.status == AgeStatus.GOOD
        assert report.message == IMPROVE_MESSAGE

    def test_report_dict_extends_result(self):
        data = build_report(make_result(bio_age=52, chrono_age=45, recovery=30)).to_dict()

        assert data["bioAge"] == 52
        assert data["chronoAge"] == 45
        assert data["ageGap"] == 7
        assert data["status"] == "attention"
        assert data["recommendations"][0]["area"] == "recovery"
        assert data["message"] == IMPROVE_MESSAGE


# ============================================================================
# Presets
# ============================================================================


class TestPresets:

    def test_known_presets(self):
        assert list_presets() == ["active", "sedentary", "sleep", "diet"]

    def test_get_preset_returns_copy(self):
        fields = get_preset("diet")
        fields["dietQuality"] = "poor"
        assert PRESETS["diet"]["dietQuality"] == "excellent"

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError):
            get_preset("marathon")

    def test_unknown_preset_is_key_error(self):
        with pytest.raises(KeyError):
            apply_preset("marathon", {})

    def test_apply_preset_overrides_only_named_fields(self, baseline_fields):
        merged = apply_preset("sleep", baseline_fields)

        assert merged["sleepHours"] == 8
        assert merged["sleepQuality"] == "excellent"
        assert merged["stressLevel"] == "low"
        assert merged["dietQuality"] == baseline_fields["dietQuality"]
        assert merged["chronoAge"] == 45
        # Input not modified
        assert baseline_fields["sleepHours"] == 7.5

    def test_sedentary_preset_values(self):
        assert get_preset("sedentary") == {
            "activityLevel": "sedentary",
            "vo2max": 28,
            "walkSpeed": 0.9,
            "gripStrength": 22,
            "sleepHours": 6,
            "sleepQuality": "fair",
            "stressLevel": "high",
            "dietQuality": "fair",
        }
