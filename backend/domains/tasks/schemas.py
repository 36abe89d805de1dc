"""Task request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import TASK_NOT_FOUND_MESSAGE

TASK_BODY_EXAMPLE = {"name": "task name", "description": "description task"}


class TaskBase(BaseModel):
    name: str = Field(..., description="task name")
    description: str = Field(..., description="task description")


class TaskCreate(TaskBase):
    """Body of ``POST /tasks``. A client-supplied ``id`` is ignored."""

    model_config = ConfigDict(json_schema_extra={"example": TASK_BODY_EXAMPLE})


class TaskUpdate(TaskBase):
    """Body of ``PUT /tasks/{id}``; both fields replace the stored values."""

    model_config = ConfigDict(json_schema_extra={"example": TASK_BODY_EXAMPLE})


class Task(TaskBase):
    id: str = Field(..., description="id autogenerated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"id": "WfXYoXkFnuGKCL3S3hjdo", **TASK_BODY_EXAMPLE}
        },
    )


class TaskNotFound(BaseModel):
    msg: str = Field(..., description="a message for not found tasks")

    model_config = ConfigDict(json_schema_extra={"example": {"msg": TASK_NOT_FOUND_MESSAGE}})
