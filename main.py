from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.database import init_db
from core.exceptions import register_exception_handlers
from core.logging_config import get_logger, setup_logging

from employee.router import employee_router
from project.router import project_router
from task.router import task_router
from assignment.router import assignment_router
import models_bootstrap

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting WorkerApp")
    init_db()
    yield
    logger.info("WorkerApp stopped")


openapi_tags = [
    {
        "name": "Employees",
        "description": "Employee records, task counts and performance score",
    },
    {
        "name": "Projects",
        "description": "Projects, delay and completion",
    },
    {
        "name": "Tasks",
        "description": "Tasks assigned to employees within projects",
    },
    {
        "name": "Assignments",
        "description": "Employee to project assignments",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title="WorkerApp", openapi_tags=openapi_tags, lifespan=lifespan)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(employee_router, prefix="/api")
app.include_router(project_router, prefix="/api")
app.include_router(task_router, prefix="/api")
app.include_router(assignment_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
