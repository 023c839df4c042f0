from fastapi import APIRouter, Depends, HTTPException, status

from core.context import AppDbContext, get_context
from .schema import EmployeeSchema, EmployeeCreate, EmployeeUpdate, EmployeeStatsSchema
from . import service

employee_router = APIRouter(prefix="/employees", tags=["Employees"])

# List all employees
@employee_router.get("", response_model=list[EmployeeSchema])
def list_employees(ctx: AppDbContext = Depends(get_context)):
    return service.get_employees(ctx)

# Get employee by id
@employee_router.get("/{employee_id}", response_model=EmployeeSchema)
def employee_detail(employee_id: int, ctx: AppDbContext = Depends(get_context)):
    obj = service.get_employee(ctx, employee_id)
    if not obj:
        raise HTTPException(status_code=404, detail="employee not found")
    return obj

# Create employee
@employee_router.post("", response_model=EmployeeSchema, status_code=status.HTTP_201_CREATED)
def employee_post(payload: EmployeeCreate, ctx: AppDbContext = Depends(get_context)):
    return service.create_employee(ctx, payload)

# Overwrite employee fields
@employee_router.put("/{employee_id}", response_model=EmployeeSchema)
def employee_put(employee_id: int, payload: EmployeeUpdate, ctx: AppDbContext = Depends(get_context)):
    return service.update_employee(ctx, employee_id, payload)

# Delete employee
@employee_router.delete("/{employee_id}")
def employee_delete(employee_id: int, ctx: AppDbContext = Depends(get_context)):
    if not service.delete_employee(ctx, employee_id):
        raise HTTPException(status_code=404, detail="employee not found")
    return {"message": "employee deleted"}

# Task counts and performance score
@employee_router.get("/{employee_id}/stats", response_model=EmployeeStatsSchema)
def employee_stats(employee_id: int, ctx: AppDbContext = Depends(get_context)):
    completed = service.get_completed_task_count(ctx, employee_id)
    overdue = service.get_overdue_task_count(ctx, employee_id)
    score = service.get_performance_score(ctx, employee_id)
    return EmployeeStatsSchema(
        employee_id=employee_id,
        completed_task_count=completed,
        overdue_task_count=overdue,
        performance_score=float(score),
    )
