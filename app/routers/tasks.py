from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.core.database import get_db
from app.core.errors import TaskNotFoundError
from app.core.security import require_valid_token
from app.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskResponse,
    TaskCreatedResponse,
    TaskListResponse,
    TaskDeletedResponse,
    TaskUpdatedResponse,
    MessageResponse,
)
from app.services.task_service import TaskService, TaskServiceProtocol

# Toutes les routes passent par la validation du token avant d'arriver au service
router = APIRouter(
    tags=["tasks"],
    dependencies=[Depends(require_valid_token)],
    responses={
        401: {"description": "Missing or invalid token"},
        500: {"model": MessageResponse},
    },
)


def get_task_service(db: Session = Depends(get_db)) -> TaskServiceProtocol:
    return TaskService(db)


@router.post("/create", response_model=TaskCreatedResponse)
def create_task(
    task_data: TaskCreate,
    service: TaskServiceProtocol = Depends(get_task_service)
):
    task = service.create_task(task_data)
    return {"message": "Task Successfully Created", "task": task}


@router.get("/pending", response_model=TaskListResponse)
def pending(
    user_id: Optional[str] = Query(None, alias="userID"),
    service: TaskServiceProtocol = Depends(get_task_service)
):
    return {"tasks": service.get_pending_tasks(user_id)}


@router.get("/high", response_model=TaskListResponse)
def high(
    user_id: Optional[str] = Query(None, alias="userID"),
    service: TaskServiceProtocol = Depends(get_task_service)
):
    return {"tasks": service.get_high_priority_tasks(user_id)}


@router.get("/mean", response_model=TaskListResponse)
def mean(
    user_id: Optional[str] = Query(None, alias="userID"),
    service: TaskServiceProtocol = Depends(get_task_service)
):
    return {"tasks": service.get_medium_priority_tasks(user_id)}


@router.get("/low", response_model=TaskListResponse)
def low(
    user_id: Optional[str] = Query(None, alias="userID"),
    service: TaskServiceProtocol = Depends(get_task_service)
):
    return {"tasks": service.get_low_priority_tasks(user_id)}


@router.get("/complete", response_model=TaskListResponse)
def complete(
    user_id: Optional[str] = Query(None, alias="userID"),
    service: TaskServiceProtocol = Depends(get_task_service)
):
    return {"tasks": service.get_completed_tasks(user_id)}


@router.get("/{taskID}", response_model=TaskResponse, responses={404: {"model": MessageResponse}})
def get_task(
    taskID: str,
    service: TaskServiceProtocol = Depends(get_task_service)
):
    # Renvoie la tâche directement, sans enveloppe
    task = service.get_task(taskID)
    if not task:
        raise TaskNotFoundError(taskID)
    return task


@router.delete("/{taskID}", response_model=TaskDeletedResponse, responses={404: {"model": MessageResponse}})
def delete_task(
    taskID: str,
    service: TaskServiceProtocol = Depends(get_task_service)
):
    task_deleted = service.delete_task(taskID)
    if not task_deleted:
        raise TaskNotFoundError(taskID)
    return {"message": "Task Deleted Successfully", "task_deleted": task_deleted}


@router.put("/{taskID}", response_model=TaskUpdatedResponse, responses={404: {"model": MessageResponse}})
def update_task(
    taskID: str,
    task_data: TaskUpdate,
    service: TaskServiceProtocol = Depends(get_task_service)
):
    updated_task = service.update_task(taskID, task_data)
    if not updated_task:
        raise TaskNotFoundError(taskID)
    return {"message": "Task Updated Successfully", "updated_task": updated_task}
