from __future__ import annotations
from typing import Optional, List

from core.context import AppDbContext, storage_errors
from core.exceptions import NotFoundError
from core.logging_config import get_logger
from .models import ProjectEmployee
from .schema import AssignmentCreate

logger = get_logger(__name__)


def get_assignments(
    ctx: AppDbContext,
    *,
    project_id: Optional[int] = None,
    employee_id: Optional[int] = None,
) -> List[ProjectEmployee]:
    criteria = []
    if project_id is not None:
        criteria.append(ProjectEmployee.project_id == project_id)
    if employee_id is not None:
        criteria.append(ProjectEmployee.employee_id == employee_id)
    with storage_errors("Error retrieving assignments"):
        return ctx.assignments.filter(*criteria)


def assign_employee(ctx: AppDbContext, dto: AssignmentCreate) -> ProjectEmployee:
    with storage_errors("Error assigning employee to project"):
        if not ctx.projects.find(dto.project_id):
            raise NotFoundError("Project", dto.project_id)
        if not ctx.employees.find(dto.employee_id):
            raise NotFoundError("Employee", dto.employee_id)

        row = ProjectEmployee(project_id=dto.project_id, employee_id=dto.employee_id)
        ctx.assignments.add(row)
        # duplicate composite key surfaces here as StorageError
        ctx.save_changes()

    logger.info(f"Assigned employee {dto.employee_id} to project {dto.project_id}")
    return row


def unassign_employee(ctx: AppDbContext, project_id: int, employee_id: int) -> bool:
    with storage_errors("Error removing assignment"):
        row = ctx.assignments.find((project_id, employee_id))
        if not row:
            return False
        ctx.assignments.remove(row)
        ctx.save_changes()

    logger.info(f"Removed employee {employee_id} from project {project_id}")
    return True
