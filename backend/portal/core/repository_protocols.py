"""Boundary Protocols: the storage contract routes depend on.

Invariants:
    - Routes never import the SQLAlchemy implementation, only this Protocol
    - Reads return None / empty lists for "not found"; they never raise for it
    - Writes return the fully-populated row or raise (StorageError,
      ResourceNotFoundError)

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can pass any stub
    - Async throughout: implementations do IO against the relational store
"""

from typing import Protocol, Sequence

from portal.core.domain_types import ClientId, SubmissionId, UserId
from portal.models import (
    Client, ContactSubmission, Engineer, Event, PageView, Project, User,
)
from portal.schemas.analytics import AnalyticsDashboard, EventCreate, PageViewCreate
from portal.schemas.client_portal import ClientCreate, ProjectCreate
from portal.schemas.contact import ContactSubmissionCreate
from portal.schemas.user import UserCreate


class Storage(Protocol):
    """Contract for portal persistence, implemented by infrastructure/storage.py."""

    # Users
    async def get_user(self, user_id: UserId) -> User | None: ...
    async def get_user_by_username(self, username: str) -> User | None: ...
    async def create_user(self, data: UserCreate) -> User: ...

    # Contact / CRM
    async def create_contact_submission(
        self, data: ContactSubmissionCreate,
    ) -> ContactSubmission: ...
    async def get_contact_submissions(self) -> Sequence[ContactSubmission]: ...
    async def update_contact_submission_status(
        self,
        submission_id: SubmissionId,
        status: str | None,
        assigned_to: UserId | None = None,
    ) -> ContactSubmission: ...

    # Analytics
    async def create_page_view(self, data: PageViewCreate) -> PageView: ...
    async def create_event(self, data: EventCreate) -> Event: ...
    async def get_analytics_dashboard(self) -> AnalyticsDashboard: ...

    # Client portal
    async def create_client(self, data: ClientCreate) -> Client: ...
    async def get_client_projects(self, client_id: ClientId) -> Sequence[Project]: ...
    async def create_project(self, data: ProjectCreate) -> Project: ...
    async def get_available_engineers(self) -> Sequence[Engineer]: ...

    async def health_check(self) -> bool: ...
