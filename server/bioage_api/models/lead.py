"""Lead capture models."""
from email_validator import validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class LeadPayload(BaseModel):
    """Email capture request body."""

    email: str
    source: Optional[str] = None
    utm: Optional[dict[str, str]] = None

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        # Validate only; the address is stored exactly as submitted
        validate_email(value, check_deliverability=False)
        return value


class LeadRecord(BaseModel):
    """Lead as persisted, with server-assigned timestamp."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    source: str
    utm: Optional[dict[str, str]] = None
    created_at: str = Field(alias="createdAt")


class LeadResponse(BaseModel):
    """Success/failure envelope returned to the form."""

    ok: bool
    error: Optional[str] = None
