from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

if TYPE_CHECKING:
    from employee.models import Employee
    from project.models import Project

# the only status value any computation looks at; status is otherwise free text
TASK_STATUS_COMPLETED = "Completed"


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), index=True
    )
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(), nullable=False)

    # relationships
    project: Mapped["Project"] = relationship("Project", back_populates="tasks")
    employee: Mapped["Employee"] = relationship("Employee")

Index("ix_tasks_employee_status", Task.employee_id, Task.status)
