from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator

from core.clock import to_local_naive
from assignment.schema import AssignmentSchema
from task.schema import TaskSchema


class ProjectSchema(BaseModel):
    id: int
    name: str
    start_date: datetime
    end_date: datetime
    delay_amount: Optional[int] = None
    employee_links: List[AssignmentSchema] = []
    tasks: List[TaskSchema] = []
    model_config = ConfigDict(from_attributes=True)


# date order and name are checked by the service, not here
class ProjectCreate(BaseModel):
    name: str
    start_date: datetime
    end_date: datetime
    delay_amount: Optional[int] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator("start_date", "end_date")
    @classmethod
    def to_local_time(cls, v: datetime) -> datetime:
        return to_local_naive(v)


# start/end are not re-validated on update
class ProjectUpdate(BaseModel):
    name: str
    start_date: datetime
    end_date: datetime
    delay_amount: Optional[int] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator("start_date", "end_date")
    @classmethod
    def to_local_time(cls, v: datetime) -> datetime:
        return to_local_naive(v)


class ProjectDelaySchema(BaseModel):
    project_id: int
    delay_days: int


class ProjectCompletionSchema(BaseModel):
    project_id: int
    completion_percentage: float
