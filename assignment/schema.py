from pydantic import BaseModel, ConfigDict


class AssignmentSchema(BaseModel):
    project_id: int
    employee_id: int
    model_config = ConfigDict(from_attributes=True)


class AssignmentCreate(BaseModel):
    project_id: int
    employee_id: int
    model_config = ConfigDict(extra="forbid")
