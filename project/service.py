from __future__ import annotations
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import and_

from core.clock import Clock, system_clock
from core.context import AppDbContext, storage_errors
from core.exceptions import NotFoundError, ValidationError
from core.logging_config import get_logger
from task.models import Task, TASK_STATUS_COMPLETED
from .models import Project
from .schema import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)

PROJECT_INCLUDES = ("employee_links", "tasks")


def get_projects(ctx: AppDbContext) -> List[Project]:
    with storage_errors("Error retrieving projects"):
        return ctx.projects.all(include=PROJECT_INCLUDES)


def get_project(ctx: AppDbContext, project_id: int) -> Optional[Project]:
    with storage_errors(f"Error retrieving project with ID {project_id}"):
        return ctx.projects.first(Project.id == project_id, include=PROJECT_INCLUDES)


def create_project(ctx: AppDbContext, dto: ProjectCreate) -> Project:
    if not dto.name or not dto.name.strip():
        raise ValidationError("Project name is required", field="name")
    if dto.start_date >= dto.end_date:
        raise ValidationError("Start date must be before end date", field="start_date")

    row = Project(
        name=dto.name,
        start_date=dto.start_date,
        end_date=dto.end_date,
        delay_amount=dto.delay_amount,
    )
    with storage_errors("Error creating project"):
        ctx.projects.add(row)
        ctx.save_changes()
        ctx.refresh(row)

    logger.info(f"Created project: id={row.id} name='{row.name}'")
    return row


def update_project(ctx: AppDbContext, project_id: int, dto: ProjectUpdate) -> Project:
    with storage_errors("Error updating project"):
        row = ctx.projects.find(project_id)
        if not row:
            raise NotFoundError("Project", project_id)

        # delay_amount is stored as given; calculate_delay is independent of it
        row.name = dto.name
        row.start_date = dto.start_date
        row.end_date = dto.end_date
        row.delay_amount = dto.delay_amount

        ctx.save_changes()
        ctx.refresh(row)

    logger.info(f"Updated project {project_id}")
    return row


def delete_project(ctx: AppDbContext, project_id: int) -> bool:
    with storage_errors(f"Error deleting project with ID {project_id}"):
        row = ctx.projects.find(project_id)
        if not row:
            return False
        ctx.projects.remove(row)
        ctx.save_changes()

    logger.info(f"Deleted project {project_id}")
    return True


def get_overdue_projects(ctx: AppDbContext, *, clock: Clock = system_clock) -> List[Project]:
    now = clock()
    with storage_errors("Error retrieving overdue projects"):
        return ctx.projects.filter(Project.end_date < now, include=("tasks",))


def get_active_projects(ctx: AppDbContext, *, clock: Clock = system_clock) -> List[Project]:
    now = clock()
    with storage_errors("Error retrieving active projects"):
        return ctx.projects.filter(
            and_(Project.start_date <= now, Project.end_date >= now),
            include=("tasks",),
        )


def calculate_delay(ctx: AppDbContext, project_id: int, *, clock: Clock = system_clock) -> int:
    """
    Whole days elapsed since the project's end date.

    0 while the end date has not passed. Partial days are dropped, so an
    end date 10 days and 3 hours ago gives 10.
    """
    with storage_errors(f"Error calculating delay for project {project_id}"):
        row = ctx.projects.find(project_id)
    if not row:
        raise NotFoundError("Project", project_id)

    now = clock()
    if now <= row.end_date:
        return 0
    return (now - row.end_date).days


def get_completion_percentage(ctx: AppDbContext, project_id: int) -> Decimal:
    with storage_errors(f"Error calculating completion percentage for project {project_id}"):
        total = ctx.tasks.count(Task.project_id == project_id)
        if total == 0:
            return Decimal(0)
        completed = ctx.tasks.count(
            Task.project_id == project_id,
            Task.status == TASK_STATUS_COMPLETED,
        )
    return Decimal(completed) / Decimal(total) * 100
