"""Client Portal Schemas: clients, projects and engineers.

Invariants:
    - ProjectRequest is what the portal user sends; client_id and status are
      never taken from the body, they come from AuthContext and the lifecycle
    - ProjectCreate is the fully-populated insert payload
"""

from datetime import datetime

from pydantic import EmailStr, Field

from portal.core.domain_types import ProjectStatus
from portal.schemas.base import CamelModel


class ClientCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    company: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)


class ClientRead(CamelModel):
    id: int
    name: str
    email: str
    company: str | None = None
    phone: str | None = None
    created_at: datetime


class ProjectRequest(CamelModel):
    """Project fields a client may set."""
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    budget: str | None = Field(None, max_length=100)
    timeline: str | None = Field(None, max_length=100)


class ProjectCreate(ProjectRequest):
    client_id: int = Field(ge=1)
    status: str = Field(ProjectStatus.PLANNING.value, min_length=1, max_length=50)


class ProjectRead(CamelModel):
    id: int
    client_id: int
    name: str
    description: str | None = None
    status: str
    budget: str | None = None
    timeline: str | None = None
    created_at: datetime
    updated_at: datetime


class EngineerRead(CamelModel):
    id: int
    name: str
    email: str
    specialization: str | None = None
    availability: str
    created_at: datetime
