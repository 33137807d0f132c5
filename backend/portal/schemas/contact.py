"""Contact Schemas: website contact form and the caseworker status update.

Invariants:
    - ContactSubmissionCreate requires name, a valid email and a non-empty message
    - Whitespace-only name/message rejected
    - ContactSubmissionStatusUpdate fields are both optional; no status vocabulary enforced
    - Scalar statuses (numbers, booleans) are stored as their string form,
      matching what the text column would hold; objects and lists are rejected

Design Decisions:
    - Explicit optional-fields update model instead of an open dict, so the
      storage call signature stays statically checkable
"""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from portal.schemas.base import CamelModel


class ContactSubmissionCreate(CamelModel):
    """Contact form payload."""
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    company: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    service: str | None = Field(None, max_length=100)
    message: str = Field(min_length=1, max_length=5000)

    @field_validator("name", "message")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class ContactSubmissionRead(CamelModel):
    id: int
    name: str
    email: str
    company: str | None = None
    phone: str | None = None
    service: str | None = None
    message: str
    status: str
    assigned_to: int | None = None
    created_at: datetime
    updated_at: datetime


class ContactSubmissionStatusUpdate(CamelModel):
    """Caseworker update: new status and optionally who owns the submission."""
    status: str | None = None
    assigned_to: int | None = None

    @field_validator("status", mode="before")
    @classmethod
    def stringify_scalar_status(cls, v):
        if isinstance(v, (bool, int, float)):
            return str(v).lower() if isinstance(v, bool) else str(v)
        return v
