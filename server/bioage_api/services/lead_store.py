"""Lead persistence for the email-capture step.

Leads are written to the SQLite leads database when one is configured.
Without a database the lead is logged and still acknowledged, so the
calculator keeps working in environments with no storage.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Mapping, Optional

from ..database import DatabaseManager, db_manager
from ..models.lead import LeadPayload, LeadRecord

logger = logging.getLogger(__name__)

UTM_KEYS = ("utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content")


def extract_utm(params: Mapping[str, str]) -> dict[str, str]:
    """Pick the UTM attribution tags out of query parameters.

    Args:
        params: Query parameters (any mapping).

    Returns:
        Only the known UTM keys that carry a non-empty value.
    """
    return {key: params[key] for key in UTM_KEYS if params.get(key)}


class LeadStore:
    """Writes captured leads to the leads table."""

    def __init__(self, manager: Optional[DatabaseManager] = None):
        self._manager = manager

    @property
    def db(self) -> DatabaseManager:
        return self._manager or db_manager

    def add(self, lead: LeadRecord) -> Optional[int]:
        """Persist a lead.

        Returns:
            Row id of the stored lead, or None when no database is
            configured and the lead was only logged.

        Raises:
            sqlite3.Error: If the write fails.
        """
        if not self.db.leads_enabled:
            logger.info(
                f"[LEAD] No lead store configured, lead not persisted: "
                f"{lead.model_dump(by_alias=True)}"
            )
            return None

        with self.db.get_leads_conn() as conn:
            cursor = conn.execute(
                "INSERT INTO leads (email, source, utm, created_at) VALUES (?, ?, ?, ?)",
                (
                    lead.email,
                    lead.source,
                    json.dumps(lead.utm) if lead.utm is not None else None,
                    lead.created_at,
                ),
            )
            lead_id = cursor.lastrowid

        logger.info(f"[LEAD] Stored lead {lead_id} from source={lead.source}")
        return lead_id

    def count(self) -> int:
        with self.db.get_leads_conn() as conn:
            row = conn.execute("SELECT COUNT(*) AS total FROM leads").fetchone()
        return row["total"]

    def list_recent(self, limit: int = 50) -> list[LeadRecord]:
        """Most recent leads first."""
        with self.db.get_leads_conn() as conn:
            rows = conn.execute(
                "SELECT * FROM leads ORDER BY id DESC LIMIT ?", (limit,)
            ).fetchall()
        return [_row_to_lead(row) for row in rows]


def _row_to_lead(row) -> LeadRecord:
    """Convert SQLite row to LeadRecord model."""
    return LeadRecord(
        email=row["email"],
        source=row["source"],
        utm=json.loads(row["utm"]) if row["utm"] else None,
        created_at=row["created_at"],
    )


def capture_lead(payload: LeadPayload, default_source: str) -> LeadRecord:
    """Stamp a lead payload and hand it to the store.

    Args:
        payload: Validated email capture request.
        default_source: Source used when the payload names none.

    Returns:
        The record as stored (or logged).
    """
    lead = LeadRecord(
        email=payload.email,
        source=payload.source or default_source,
        utm=payload.utm,
        created_at=datetime.now(timezone.utc).isoformat(),
    )
    lead_store.add(lead)
    return lead


# Singleton instance
lead_store = LeadStore()
