from __future__ import annotations
from decimal import Decimal
from typing import List, Optional

from core.clock import Clock, system_clock
from core.context import AppDbContext, storage_errors
from core.exceptions import NotFoundError, ValidationError
from core.logging_config import get_logger
from task.models import Task, TASK_STATUS_COMPLETED
from .models import Employee
from .schema import EmployeeCreate, EmployeeUpdate

logger = get_logger(__name__)

EMPLOYEE_INCLUDES = ("project_links",)


def get_employees(ctx: AppDbContext) -> List[Employee]:
    with storage_errors("Error retrieving employees"):
        return ctx.employees.all(include=EMPLOYEE_INCLUDES)


def get_employee(ctx: AppDbContext, employee_id: int) -> Optional[Employee]:
    with storage_errors(f"Error retrieving employee with ID {employee_id}"):
        return ctx.employees.first(Employee.id == employee_id, include=EMPLOYEE_INCLUDES)


def create_employee(ctx: AppDbContext, dto: EmployeeCreate) -> Employee:
    if not dto.first_name or not dto.first_name.strip():
        raise ValidationError("Employee first name is required", field="first_name")
    if not dto.last_name or not dto.last_name.strip():
        raise ValidationError("Employee last name is required", field="last_name")

    row = Employee(
        first_name=dto.first_name,
        last_name=dto.last_name,
        completed_task_count=dto.completed_task_count,
        overdue_task_count=dto.overdue_task_count,
    )
    with storage_errors("Error creating employee"):
        ctx.employees.add(row)
        ctx.save_changes()
        ctx.refresh(row)

    logger.info(f"Created employee: id={row.id} name='{row.first_name} {row.last_name}'")
    return row


def update_employee(ctx: AppDbContext, employee_id: int, dto: EmployeeUpdate) -> Employee:
    with storage_errors("Error updating employee"):
        row = ctx.employees.find(employee_id)
        if not row:
            raise NotFoundError("Employee", employee_id)

        # assignment links are left alone
        row.first_name = dto.first_name
        row.last_name = dto.last_name
        row.completed_task_count = dto.completed_task_count
        row.overdue_task_count = dto.overdue_task_count

        ctx.save_changes()
        ctx.refresh(row)

    logger.info(f"Updated employee {employee_id}")
    return row


def delete_employee(ctx: AppDbContext, employee_id: int) -> bool:
    with storage_errors(f"Error deleting employee with ID {employee_id}"):
        row = ctx.employees.find(employee_id)
        if not row:
            return False
        ctx.employees.remove(row)
        ctx.save_changes()

    logger.info(f"Deleted employee {employee_id}")
    return True


def get_completed_task_count(ctx: AppDbContext, employee_id: int) -> int:
    with storage_errors(f"Error getting completed tasks count for employee {employee_id}"):
        return ctx.tasks.count(
            Task.employee_id == employee_id,
            Task.status == TASK_STATUS_COMPLETED,
        )


def get_overdue_task_count(
    ctx: AppDbContext,
    employee_id: int,
    *,
    clock: Clock = system_clock,
) -> int:
    now = clock()
    with storage_errors(f"Error getting overdue tasks count for employee {employee_id}"):
        return ctx.tasks.count(
            Task.employee_id == employee_id,
            Task.end_date < now,
            Task.status != TASK_STATUS_COMPLETED,
        )


def get_performance_score(
    ctx: AppDbContext,
    employee_id: int,
    *,
    clock: Clock = system_clock,
) -> Decimal:
    """
    Share of an employee's finished-or-late tasks that were completed, as a percentage.

    completed / (completed + overdue) * 100, or 0 when the employee has
    neither completed nor overdue tasks.
    """
    completed = get_completed_task_count(ctx, employee_id)
    overdue = get_overdue_task_count(ctx, employee_id, clock=clock)
    total = completed + overdue
    if total == 0:
        return Decimal(0)
    return Decimal(completed) / Decimal(total) * 100
