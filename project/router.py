from fastapi import APIRouter, Depends, HTTPException, status

from core.context import AppDbContext, get_context
from .schema import (
    ProjectSchema,
    ProjectCreate,
    ProjectUpdate,
    ProjectDelaySchema,
    ProjectCompletionSchema,
)
from . import service

project_router = APIRouter(prefix="/projects", tags=["Projects"])


@project_router.get("", response_model=list[ProjectSchema])
def list_projects(ctx: AppDbContext = Depends(get_context)):
    return service.get_projects(ctx)

# Past their end date
@project_router.get("/overdue", response_model=list[ProjectSchema])
def overdue_projects(ctx: AppDbContext = Depends(get_context)):
    return service.get_overdue_projects(ctx)

# Running right now
@project_router.get("/active", response_model=list[ProjectSchema])
def active_projects(ctx: AppDbContext = Depends(get_context)):
    return service.get_active_projects(ctx)


@project_router.get("/{project_id}", response_model=ProjectSchema)
def project_detail(project_id: int, ctx: AppDbContext = Depends(get_context)):
    obj = service.get_project(ctx, project_id)
    if not obj:
        raise HTTPException(status_code=404, detail="project not found")
    return obj


@project_router.post("", response_model=ProjectSchema, status_code=status.HTTP_201_CREATED)
def project_post(payload: ProjectCreate, ctx: AppDbContext = Depends(get_context)):
    return service.create_project(ctx, payload)


@project_router.put("/{project_id}", response_model=ProjectSchema)
def project_put(project_id: int, payload: ProjectUpdate, ctx: AppDbContext = Depends(get_context)):
    return service.update_project(ctx, project_id, payload)


@project_router.delete("/{project_id}")
def project_delete(project_id: int, ctx: AppDbContext = Depends(get_context)):
    if not service.delete_project(ctx, project_id):
        raise HTTPException(status_code=404, detail="project not found")
    return {"message": "project deleted"}


@project_router.get("/{project_id}/delay", response_model=ProjectDelaySchema)
def project_delay(project_id: int, ctx: AppDbContext = Depends(get_context)):
    days = service.calculate_delay(ctx, project_id)
    return ProjectDelaySchema(project_id=project_id, delay_days=days)


@project_router.get("/{project_id}/completion", response_model=ProjectCompletionSchema)
def project_completion(project_id: int, ctx: AppDbContext = Depends(get_context)):
    pct = service.get_completion_percentage(ctx, project_id)
    return ProjectCompletionSchema(project_id=project_id, completion_percentage=float(pct))
