"""Pydantic models for calculator and lead API requests/responses."""
from .calculator import (
    BioAgeInputModel,
    BioAgeScoreResponse,
    BioAgeReportResponse,
    RecommendationModel,
    UnlockRequest,
)
from .lead import LeadPayload, LeadRecord, LeadResponse

__all__ = [
    "BioAgeInputModel",
    "BioAgeScoreResponse",
    "BioAgeReportResponse",
    "RecommendationModel",
    "UnlockRequest",
    "LeadPayload",
    "LeadRecord",
    "LeadResponse",
]
