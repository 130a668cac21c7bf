"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, List


class TaskBase(BaseModel):
    # JSON en camelCase (dueDate, createdAt...), attributs Python en snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(TaskBase):
    user: str
    name: str
    description: Optional[str] = None
    state: str
    priority: str
    due_date: str


class TaskUpdate(TaskBase):
    """Partial update: only the fields present in the body are applied."""

    user: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    state: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[str] = None


class TaskResponse(TaskBase):
    id: str
    user: str
    name: str
    description: Optional[str]
    state: str
    priority: str
    due_date: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class TaskCreatedResponse(TaskBase):
    message: str
    task: TaskResponse


class TaskListResponse(TaskBase):
    tasks: List[TaskResponse]


class TaskDeletedResponse(TaskBase):
    message: str
    task_deleted: TaskResponse


class TaskUpdatedResponse(TaskBase):
    message: str
    updated_task: TaskResponse
