"""Lead capture API routes."""
import logging
import sqlite3

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..config import get_settings
from ..models.lead import LeadPayload, LeadResponse
from ..services.lead_store import capture_lead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Leads"])


@router.post("/lead", response_model=LeadResponse, response_model_exclude_none=True)
async def create_lead(request: Request):
    """
    Capture an email address with optional attribution.

    Returns {"ok": true} on success, {"ok": false, "error": "invalid"} with
    400 for a malformed body, and {"ok": false} with 500 if storage fails.
    """
    try:
        body = await request.json()
        payload = LeadPayload.model_validate(body)
    except (ValueError, ValidationError):
        # ValueError covers malformed JSON and bodies that are not UTF-8
        return JSONResponse({"ok": False, "error": "invalid"}, status_code=400)

    try:
        capture_lead(payload, get_settings().default_lead_source)
    except sqlite3.Error:
        logger.exception("[LEAD] Failed to store lead")
        return JSONResponse({"ok": False}, status_code=500)

    return LeadResponse(ok=True)
