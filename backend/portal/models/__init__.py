"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer primary keys, generated by the store

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and Base.metadata is complete before create_all/autogenerate
"""

from portal.models.user import User  # noqa: F401
from portal.models.contact_submission import ContactSubmission  # noqa: F401
from portal.models.page_view import PageView  # noqa: F401
from portal.models.event import Event  # noqa: F401
from portal.models.client import Client  # noqa: F401
from portal.models.project import Project  # noqa: F401
from portal.models.engineer import Engineer  # noqa: F401
from portal.models.project_assignment import ProjectAssignment  # noqa: F401
