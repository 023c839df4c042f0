from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from assignment.schema import AssignmentSchema


class EmployeeSchema(BaseModel):
    id: int
    first_name: str
    last_name: str
    completed_task_count: Optional[int] = None
    overdue_task_count: Optional[int] = None
    project_links: List[AssignmentSchema] = []
    model_config = ConfigDict(from_attributes=True)


# names are checked by the service so blank values get the domain error
class EmployeeCreate(BaseModel):
    first_name: str
    last_name: str
    completed_task_count: Optional[int] = None
    overdue_task_count: Optional[int] = None
    model_config = ConfigDict(extra="forbid")


# full overwrite of the four scalar fields
class EmployeeUpdate(BaseModel):
    first_name: str
    last_name: str
    completed_task_count: Optional[int] = None
    overdue_task_count: Optional[int] = None
    model_config = ConfigDict(extra="forbid")


class EmployeeStatsSchema(BaseModel):
    employee_id: int
    completed_task_count: int
    overdue_task_count: int
    performance_score: float
