"""ProjectAssignment ORM: join row linking an engineer to a project.

Invariants:
    - Both project_id and engineer_id are required FKs
    - (project_id, engineer_id) is unique
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.db.base import Base


class ProjectAssignment(Base):
    __tablename__ = "project_assignments"
    __table_args__ = (
        UniqueConstraint("project_id", "engineer_id", name="uq_project_engineer"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id"), nullable=False,
    )
    engineer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("engineers.id"), nullable=False,
    )
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    project: Mapped["Project"] = relationship(
        "Project", back_populates="assignments", lazy="noload",
    )
    engineer: Mapped["Engineer"] = relationship(
        "Engineer", back_populates="assignments", lazy="noload",
    )
