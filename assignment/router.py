from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.context import AppDbContext, get_context
from .schema import AssignmentSchema, AssignmentCreate
from . import service

assignment_router = APIRouter(prefix="/assignments", tags=["Assignments"])


# LIST (optionally by project or employee)
@assignment_router.get("", response_model=list[AssignmentSchema])
def list_assignments(
    project_id: Optional[int] = Query(None),
    employee_id: Optional[int] = Query(None),
    ctx: AppDbContext = Depends(get_context),
):
    return service.get_assignments(ctx, project_id=project_id, employee_id=employee_id)


# CREATE
@assignment_router.post("", response_model=AssignmentSchema, status_code=status.HTTP_201_CREATED)
def assignment_post(payload: AssignmentCreate, ctx: AppDbContext = Depends(get_context)):
    return service.assign_employee(ctx, payload)


# DELETE
@assignment_router.delete("/{project_id}/{employee_id}")
def assignment_delete(project_id: int, employee_id: int, ctx: AppDbContext = Depends(get_context)):
    if not service.unassign_employee(ctx, project_id, employee_id):
        raise HTTPException(status_code=404, detail="assignment not found")
    return {"message": "assignment deleted"}
