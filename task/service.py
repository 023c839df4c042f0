from __future__ import annotations
from typing import List, Optional

from core.context import AppDbContext, storage_errors
from core.exceptions import NotFoundError, ValidationError
from core.logging_config import get_logger
from .models import Task
from .schema import TaskCreate, TaskUpdate

logger = get_logger(__name__)


def get_tasks(
    ctx: AppDbContext,
    *,
    project_id: Optional[int] = None,
    employee_id: Optional[int] = None,
    status: Optional[str] = None,
) -> List[Task]:
    criteria = []
    if project_id is not None:
        criteria.append(Task.project_id == project_id)
    if employee_id is not None:
        criteria.append(Task.employee_id == employee_id)
    if status is not None:
        criteria.append(Task.status == status)
    with storage_errors("Error retrieving tasks"):
        return ctx.tasks.filter(*criteria)


def get_task(ctx: AppDbContext, task_id: int) -> Optional[Task]:
    with storage_errors(f"Error retrieving task with ID {task_id}"):
        return ctx.tasks.find(task_id)


def create_task(ctx: AppDbContext, dto: TaskCreate) -> Task:
    if not dto.status or not dto.status.strip():
        raise ValidationError("Task status is required", field="status")

    with storage_errors("Error creating task"):
        if not ctx.projects.find(dto.project_id):
            raise NotFoundError("Project", dto.project_id)
        if not ctx.employees.find(dto.employee_id):
            raise NotFoundError("Employee", dto.employee_id)

        row = Task(
            project_id=dto.project_id,
            employee_id=dto.employee_id,
            title=dto.title,
            status=dto.status,
            end_date=dto.end_date,
        )
        ctx.tasks.add(row)
        ctx.save_changes()
        ctx.refresh(row)

    logger.info(f"Created task: id={row.id} project={row.project_id} employee={row.employee_id}")
    return row


def update_task(ctx: AppDbContext, task_id: int, dto: TaskUpdate) -> Task:
    if not dto.status or not dto.status.strip():
        raise ValidationError("Task status is required", field="status")

    with storage_errors("Error updating task"):
        row = ctx.tasks.find(task_id)
        if not row:
            raise NotFoundError("Task", task_id)

        row.title = dto.title
        row.status = dto.status
        row.end_date = dto.end_date

        ctx.save_changes()
        ctx.refresh(row)

    logger.info(f"Updated task {task_id}: status='{row.status}'")
    return row


def delete_task(ctx: AppDbContext, task_id: int) -> bool:
    with storage_errors(f"Error deleting task with ID {task_id}"):
        row = ctx.tasks.find(task_id)
        if not row:
            return False
        ctx.tasks.remove(row)
        ctx.save_changes()

    logger.info(f"Deleted task {task_id}")
    return True
