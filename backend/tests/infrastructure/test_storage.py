"""DatabaseStorage against an in-memory SQLite store.

Invariants:
    - Creates return the row with generated id and timestamps
    - Reads return None / [] for missing data instead of raising
    - Submissions come back newest first
    - Projects are scoped to their client
    - Only engineers with availability == "available" are listed
    - Status update without assignee keeps the current assignee and moves updated_at
    - Unknown submission id on update raises ResourceNotFoundError
    - Store rejections surface as StorageError
"""

import pytest

from portal.core.errors import ResourceNotFoundError, StorageError
from portal.models import Engineer
from portal.schemas.analytics import EventCreate, PageViewCreate
from portal.schemas.client_portal import ClientCreate, ProjectCreate
from portal.schemas.contact import ContactSubmissionCreate
from portal.schemas.user import UserCreate


def _submission(name="Grace Hopper", **overrides):
    data = {
        "name": name,
        "email": "grace@example.com",
        "message": "Please quote a structural survey.",
    }
    data.update(overrides)
    return ContactSubmissionCreate.model_validate(data)


def _naive(dt):
    return dt.replace(tzinfo=None)


# --- Users --------------------------------------------------------------------

async def test_create_and_get_user(storage):
    user = await storage.create_user(UserCreate(username="caseworker", password="s3cret"))
    assert user.id is not None

    by_id = await storage.get_user(user.id)
    by_name = await storage.get_user_by_username("caseworker")
    assert by_id.id == user.id
    assert by_name.id == user.id


async def test_missing_user_is_none(storage):
    assert await storage.get_user(999) is None
    assert await storage.get_user_by_username("nobody") is None


async def test_duplicate_username_raises_storage_error(storage):
    await storage.create_user(UserCreate(username="dup", password="a"))
    with pytest.raises(StorageError):
        await storage.create_user(UserCreate(username="dup", password="b"))


# --- Contact submissions ------------------------------------------------------

async def test_create_submission_populates_defaults(storage):
    submission = await storage.create_contact_submission(_submission())
    assert submission.id is not None
    assert submission.status == "new"
    assert submission.assigned_to is None
    assert submission.created_at is not None
    assert submission.updated_at is not None


async def test_submissions_newest_first(storage):
    first = await storage.create_contact_submission(_submission("first"))
    second = await storage.create_contact_submission(_submission("second"))
    third = await storage.create_contact_submission(_submission("third"))

    submissions = await storage.get_contact_submissions()

    assert [s.id for s in submissions] == [third.id, second.id, first.id]


async def test_no_submissions_is_empty_list(storage):
    assert list(await storage.get_contact_submissions()) == []


async def test_update_status_sets_assignee(storage):
    user = await storage.create_user(UserCreate(username="owner", password="x"))
    submission = await storage.create_contact_submission(_submission())

    updated = await storage.update_contact_submission_status(
        submission.id, "in-progress", user.id,
    )

    assert updated.id == submission.id
    assert updated.status == "in-progress"
    assert updated.assigned_to == user.id


async def test_update_status_without_assignee_keeps_previous(storage):
    user = await storage.create_user(UserCreate(username="keeper", password="x"))
    submission = await storage.create_contact_submission(_submission())
    assigned = await storage.update_contact_submission_status(
        submission.id, "in-progress", user.id,
    )

    closed = await storage.update_contact_submission_status(submission.id, "closed")

    assert closed.status == "closed"
    assert closed.assigned_to == user.id
    assert _naive(closed.updated_at) > _naive(assigned.updated_at)
    assert _naive(closed.updated_at) > _naive(submission.updated_at)


async def test_update_status_accepts_any_string(storage):
    submission = await storage.create_contact_submission(_submission())
    updated = await storage.update_contact_submission_status(
        submission.id, "waiting-on-customer",
    )
    assert updated.status == "waiting-on-customer"


async def test_update_without_status_keeps_status(storage):
    submission = await storage.create_contact_submission(_submission())
    updated = await storage.update_contact_submission_status(submission.id, None)
    assert updated.status == "new"


async def test_update_unknown_submission_raises(storage):
    with pytest.raises(ResourceNotFoundError):
        await storage.update_contact_submission_status(12345, "closed")


# --- Analytics ----------------------------------------------------------------

async def test_create_page_view_and_event(storage):
    view = await storage.create_page_view(PageViewCreate(path="/about"))
    event = await storage.create_event(
        EventCreate(name="cta_click", properties={"button": "quote"}),
    )
    assert view.id is not None
    assert view.timestamp is not None
    assert event.id is not None
    assert event.properties == {"button": "quote"}


async def test_dashboard_on_empty_store(storage):
    dashboard = await storage.get_analytics_dashboard()
    assert dashboard.total_visitors == 0
    assert dashboard.page_views == 0
    assert dashboard.contact_forms == 0
    assert dashboard.conversion_rate == 0
    assert dashboard.top_pages == []
    assert dashboard.recent_submissions == []
    assert dashboard.monthly_stats == []


async def test_dashboard_zero_views_means_zero_conversion(storage):
    await storage.create_contact_submission(_submission())
    await storage.create_contact_submission(_submission())

    dashboard = await storage.get_analytics_dashboard()

    assert dashboard.contact_forms == 2
    assert dashboard.conversion_rate == 0


async def test_dashboard_top_pages_ordered_by_count(storage):
    for _ in range(4):
        await storage.create_page_view(PageViewCreate(path="/a"))
    for _ in range(2):
        await storage.create_page_view(PageViewCreate(path="/b"))
    await storage.create_contact_submission(_submission())

    dashboard = await storage.get_analytics_dashboard()

    assert [(p.path, p.views) for p in dashboard.top_pages] == [("/a", 4), ("/b", 2)]
    assert dashboard.page_views == dashboard.total_visitors == 6
    assert dashboard.conversion_rate == 16.67


async def test_dashboard_top_pages_capped_at_five_with_path_tiebreak(storage):
    for path in ["/f", "/e", "/d", "/c", "/b", "/a"]:
        await storage.create_page_view(PageViewCreate(path=path))

    dashboard = await storage.get_analytics_dashboard()

    assert [p.path for p in dashboard.top_pages] == ["/a", "/b", "/c", "/d", "/e"]


async def test_dashboard_recent_submissions_limited_to_five(storage):
    created = [
        await storage.create_contact_submission(_submission(f"n{i}"))
        for i in range(7)
    ]

    dashboard = await storage.get_analytics_dashboard()

    assert [s.id for s in dashboard.recent_submissions] == [
        s.id for s in reversed(created[-5:])
    ]


# --- Client portal ------------------------------------------------------------

async def test_client_projects_scoped_to_client(storage):
    acme = await storage.create_client(ClientCreate(name="Acme", email="ops@acme.example.com"))
    globex = await storage.create_client(ClientCreate(name="Globex", email="it@globex.example.com"))
    mine = await storage.create_project(ProjectCreate(client_id=acme.id, name="Bridge"))
    await storage.create_project(ProjectCreate(client_id=globex.id, name="Tower"))

    projects = await storage.get_client_projects(acme.id)

    assert [p.id for p in projects] == [mine.id]
    assert projects[0].status == "planning"


async def test_client_without_projects_is_empty(storage):
    client = await storage.create_client(ClientCreate(name="Solo", email="solo@example.com"))
    assert list(await storage.get_client_projects(client.id)) == []


async def test_project_for_missing_client_raises_storage_error(storage):
    with pytest.raises(StorageError):
        await storage.create_project(ProjectCreate(client_id=777, name="Orphan"))


async def test_available_engineers_excludes_busy(storage, test_db):
    test_db.add_all([
        Engineer(name="Free", email="free@example.com", availability="available"),
        Engineer(name="Booked", email="booked@example.com", availability="busy"),
        Engineer(name="Shouty", email="shouty@example.com", availability="AVAILABLE"),
    ])
    await test_db.commit()

    engineers = await storage.get_available_engineers()

    assert [e.name for e in engineers] == ["Free"]


async def test_health_check(storage):
    assert await storage.health_check() is True
