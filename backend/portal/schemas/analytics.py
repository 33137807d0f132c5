"""Analytics Schemas: tracking payloads and the dashboard summary.

Invariants:
    - page_views == total_visitors (same count; distinct visitors not tracked)
    - monthly_stats is always empty until date bucketing exists
"""

from typing import Any

from pydantic import Field

from portal.schemas.base import CamelModel
from portal.schemas.contact import ContactSubmissionRead


class PageViewCreate(CamelModel):
    path: str = Field(min_length=1, max_length=2000)
    referrer: str | None = Field(None, max_length=2000)
    user_agent: str | None = Field(None, max_length=500)
    session_id: str | None = Field(None, max_length=100)


class EventCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    path: str | None = Field(None, max_length=2000)
    properties: dict[str, Any] = Field(default_factory=dict)
    session_id: str | None = Field(None, max_length=100)


class TopPage(CamelModel):
    path: str
    views: int


class AnalyticsDashboard(CamelModel):
    """Aggregate numbers for the admin dashboard."""
    total_visitors: int
    page_views: int
    contact_forms: int
    conversion_rate: float
    top_pages: list[TopPage]
    recent_submissions: list[ContactSubmissionRead]
    monthly_stats: list[dict[str, Any]] = Field(default_factory=list)
