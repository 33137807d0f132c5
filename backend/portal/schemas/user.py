"""User Schemas."""

from pydantic import Field

from portal.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=255)
