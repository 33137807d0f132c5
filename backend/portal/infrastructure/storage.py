"""Database Storage: SQLAlchemy implementation of the Storage protocol.

Invariants:
    - One session per operation; every write is a single statement + commit
    - Reads never raise for "not found": None or an empty list
    - Store failures surface as StorageError (mapped by DatabaseSessionManager)
    - update_contact_submission_status raises ResourceNotFoundError when no row matches

Design Decisions:
    - Receives its DatabaseSessionManager through the constructor; main.create_app
      wires it, tests substitute an in-memory one
    - Dashboard counts run as separate statements against the same session;
      no snapshot isolation is attempted
    - total_visitors deliberately reuses the page view count (distinct visitors
      are not tracked yet)
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import func, select, update

from portal.core.analytics import (
    RECENT_SUBMISSIONS_LIMIT, TOP_PAGES_LIMIT, compute_conversion_rate,
)
from portal.core.domain_types import (
    ClientId, EngineerAvailability, SubmissionId, UserId,
)
from portal.core.errors import ResourceNotFoundError
from portal.infrastructure.database import DatabaseSessionManager
from portal.models import (
    Client, ContactSubmission, Engineer, Event, PageView, Project, User,
)
from portal.schemas.analytics import (
    AnalyticsDashboard, EventCreate, PageViewCreate, TopPage,
)
from portal.schemas.client_portal import ClientCreate, ProjectCreate
from portal.schemas.contact import ContactSubmissionCreate, ContactSubmissionRead
from portal.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class DatabaseStorage:
    """Relational persistence for users, contact CRM, analytics and the client portal."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def _insert(self, row):
        async with self._db.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return row

    # ─── Users ───────────────────────────────────────────────────

    async def get_user(self, user_id: UserId) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def get_user_by_username(self, username: str) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(User).where(User.username == username),
            )
            return result.scalar_one_or_none()

    async def create_user(self, data: UserCreate) -> User:
        return await self._insert(User(**data.model_dump()))

    # ─── Contact / CRM ───────────────────────────────────────────

    async def create_contact_submission(
        self, data: ContactSubmissionCreate,
    ) -> ContactSubmission:
        submission = await self._insert(ContactSubmission(**data.model_dump()))
        logger.info(
            "Contact submission stored",
            extra={"submission_id": submission.id},
        )
        return submission

    async def get_contact_submissions(self) -> Sequence[ContactSubmission]:
        """All submissions, newest first."""
        async with self._db.session() as db:
            result = await db.execute(
                select(ContactSubmission).order_by(
                    ContactSubmission.created_at.desc(),
                    ContactSubmission.id.desc(),
                ),
            )
            return result.scalars().all()

    async def update_contact_submission_status(
        self,
        submission_id: SubmissionId,
        status: str | None,
        assigned_to: UserId | None = None,
    ) -> ContactSubmission:
        """Set status (and assignee when given) in one UPDATE ... RETURNING.

        A falsy assigned_to leaves the current assignee untouched; status=None
        leaves the status untouched. updated_at always moves.
        """
        values: dict = {"updated_at": datetime.now(timezone.utc)}
        if status is not None:
            values["status"] = status
        if assigned_to:
            values["assigned_to"] = assigned_to

        async with self._db.session() as db:
            result = await db.execute(
                update(ContactSubmission)
                .where(ContactSubmission.id == submission_id)
                .values(**values)
                .returning(ContactSubmission),
            )
            updated = result.scalar_one_or_none()
            if updated is None:
                await db.rollback()
                raise ResourceNotFoundError(
                    "ContactSubmission", str(submission_id),
                )
            await db.commit()
            logger.info(
                f"Contact submission status set to {updated.status!r}",
                extra={"submission_id": updated.id},
            )
            return updated

    # ─── Analytics ───────────────────────────────────────────────

    async def create_page_view(self, data: PageViewCreate) -> PageView:
        return await self._insert(PageView(**data.model_dump()))

    async def create_event(self, data: EventCreate) -> Event:
        return await self._insert(Event(**data.model_dump()))

    async def get_analytics_dashboard(self) -> AnalyticsDashboard:
        async with self._db.session() as db:
            total_visitors = (await db.execute(
                select(func.count()).select_from(PageView),
            )).scalar_one()
            page_views = (await db.execute(
                select(func.count()).select_from(PageView),
            )).scalar_one()
            contact_forms = (await db.execute(
                select(func.count()).select_from(ContactSubmission),
            )).scalar_one()

            views = func.count().label("views")
            top_rows = (await db.execute(
                select(PageView.path, views)
                .group_by(PageView.path)
                .order_by(views.desc(), PageView.path.asc())
                .limit(TOP_PAGES_LIMIT),
            )).all()

            recent = (await db.execute(
                select(ContactSubmission)
                .order_by(
                    ContactSubmission.created_at.desc(),
                    ContactSubmission.id.desc(),
                )
                .limit(RECENT_SUBMISSIONS_LIMIT),
            )).scalars().all()

        return AnalyticsDashboard(
            total_visitors=total_visitors,
            page_views=page_views,
            contact_forms=contact_forms,
            conversion_rate=compute_conversion_rate(contact_forms, total_visitors),
            top_pages=[TopPage(path=path, views=count) for path, count in top_rows],
            recent_submissions=[
                ContactSubmissionRead.model_validate(s) for s in recent
            ],
            monthly_stats=[],  # date bucketing not implemented
        )

    # ─── Client portal ───────────────────────────────────────────

    async def create_client(self, data: ClientCreate) -> Client:
        return await self._insert(Client(**data.model_dump()))

    async def get_client_projects(self, client_id: ClientId) -> Sequence[Project]:
        async with self._db.session() as db:
            result = await db.execute(
                select(Project)
                .where(Project.client_id == client_id)
                .order_by(Project.id),
            )
            return result.scalars().all()

    async def create_project(self, data: ProjectCreate) -> Project:
        project = await self._insert(Project(**data.model_dump()))
        logger.info(
            "Project created",
            extra={"project_id": project.id, "client_id": project.client_id},
        )
        return project

    async def get_available_engineers(self) -> Sequence[Engineer]:
        async with self._db.session() as db:
            result = await db.execute(
                select(Engineer)
                .where(Engineer.availability == EngineerAvailability.AVAILABLE.value)
                .order_by(Engineer.id),
            )
            return result.scalars().all()

    async def health_check(self) -> bool:
        return await self._db.health_check()
