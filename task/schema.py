from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from core.clock import to_local_naive


class TaskSchema(BaseModel):
    id: int
    project_id: int
    employee_id: int
    title: Optional[str] = None
    status: str
    end_date: datetime
    model_config = ConfigDict(from_attributes=True)


class TaskCreate(BaseModel):
    project_id: int
    employee_id: int
    title: Optional[str] = None
    status: str
    end_date: datetime
    model_config = ConfigDict(extra="forbid")

    @field_validator("end_date")
    @classmethod
    def to_local_time(cls, v: datetime) -> datetime:
        return to_local_naive(v)


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    status: str
    end_date: datetime
    model_config = ConfigDict(extra="forbid")

    @field_validator("end_date")
    @classmethod
    def to_local_time(cls, v: datetime) -> datetime:
        return to_local_naive(v)
