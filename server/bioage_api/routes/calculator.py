"""BioAge calculator API routes.

The score endpoint returns the headline numbers. Recommendations are
released by the unlock endpoint once an email address has been captured.
"""
import logging
import sqlite3

from fastapi import APIRouter, HTTPException

from bioage import build_report, get_preset, list_presets, score, UnknownPresetError

from ..config import get_settings
from ..models.calculator import (
    BioAgeInputModel,
    BioAgeReportResponse,
    BioAgeScoreResponse,
    RecommendationModel,
    UnlockRequest,
)
from ..services.lead_store import capture_lead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bioage", tags=["Calculator"])


@router.post("/score", response_model=BioAgeScoreResponse)
async def score_bioage(payload: BioAgeInputModel):
    """Score the submitted metrics. Recommendations are withheld."""
    report = build_report(score(payload.to_domain()))
    logger.info(
        f"[BIOAGE] Scored chrono_age={payload.chrono_age} "
        f"bio_age={report.result.bio_age} status={report.status.value}"
    )
    return BioAgeScoreResponse.from_report(payload, report)


@router.post("/unlock", response_model=BioAgeReportResponse)
async def unlock_report(body: UnlockRequest):
    """
    Capture the lead and return the full report.
    Responds 500 if the lead cannot be stored.
    """
    try:
        capture_lead(body, get_settings().calculator_lead_source)
    except sqlite3.Error:
        logger.exception("[LEAD] Failed to store lead on unlock")
        raise HTTPException(status_code=500, detail="Lead could not be stored")

    report = build_report(score(body.input.to_domain()))
    logger.info(
        f"[BIOAGE] Report unlocked: bio_age={report.result.bio_age} "
        f"recommendations={len(report.recommendations)}"
    )
    return BioAgeReportResponse.from_report(
        body.input,
        report,
        recommendations=[RecommendationModel(**r.to_dict()) for r in report.recommendations],
        message=report.message,
    )


@router.get("/presets")
async def get_presets() -> dict[str, dict]:
    """All quick-fill presets keyed by name."""
    return {name: get_preset(name) for name in list_presets()}


@router.get("/presets/{name}")
async def get_preset_fields(name: str) -> dict:
    """Fields for a single preset."""
    try:
        return get_preset(name)
    except UnknownPresetError:
        raise HTTPException(status_code=404, detail=f"Unknown preset: {name}")
