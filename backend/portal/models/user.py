"""User ORM: staff accounts that can be assigned contact submissions."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
