from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

if TYPE_CHECKING:
    from employee.models import Employee
    from project.models import Project


class ProjectEmployee(Base):
    __tablename__ = "project_employees"
    # composite PK
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True
    )
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    project: Mapped["Project"] = relationship("Project", back_populates="employee_links")
    employee: Mapped["Employee"] = relationship("Employee", back_populates="project_links")
