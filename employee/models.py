from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

if TYPE_CHECKING:
    from assignment.models import ProjectEmployee


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # None = not measured yet, 0 = measured and zero
    completed_task_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overdue_task_count: Mapped[int | None] = mapped_column(Integer, nullable=True)

    project_links: Mapped[list["ProjectEmployee"]] = relationship(
        "ProjectEmployee",
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
