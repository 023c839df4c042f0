from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.context import AppDbContext, get_context
from .schema import TaskSchema, TaskCreate, TaskUpdate
from . import service

task_router = APIRouter(prefix="/tasks", tags=["Tasks"])


@task_router.get("", response_model=list[TaskSchema])
def list_tasks(
    project_id: Optional[int] = Query(None),
    employee_id: Optional[int] = Query(None),
    status: Optional[str] = Query(None),
    ctx: AppDbContext = Depends(get_context),
):
    return service.get_tasks(ctx, project_id=project_id, employee_id=employee_id, status=status)


@task_router.get("/{task_id}", response_model=TaskSchema)
def task_detail(task_id: int, ctx: AppDbContext = Depends(get_context)):
    obj = service.get_task(ctx, task_id)
    if not obj:
        raise HTTPException(status_code=404, detail="task not found")
    return obj


@task_router.post("", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def task_post(payload: TaskCreate, ctx: AppDbContext = Depends(get_context)):
    return service.create_task(ctx, payload)


@task_router.put("/{task_id}", response_model=TaskSchema)
def task_put(task_id: int, payload: TaskUpdate, ctx: AppDbContext = Depends(get_context)):
    return service.update_task(ctx, task_id, payload)


@task_router.delete("/{task_id}")
def task_delete(task_id: int, ctx: AppDbContext = Depends(get_context)):
    if not service.delete_task(ctx, task_id):
        raise HTTPException(status_code=404, detail="task not found")
    return {"message": "task deleted"}
