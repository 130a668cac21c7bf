"""Task service"""

from sqlalchemy.orm import Session
from datetime import datetime
from typing import List, Optional, Protocol
import logging
import uuid

from app.core.errors import TaskOperationError
from app.models.task import Task, TaskState, TaskPriority
from app.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskServiceProtocol(Protocol):
    """Operations the task routes rely on."""

    def create_task(self, data: TaskCreate) -> Task: ...

    def get_task(self, task_id: str) -> Optional[Task]: ...

    def update_task(self, task_id: str, data: TaskUpdate) -> Optional[Task]: ...

    def delete_task(self, task_id: str) -> Optional[Task]: ...

    def get_pending_tasks(self, user_id: str) -> List[Task]: ...

    def get_completed_tasks(self, user_id: str) -> List[Task]: ...

    def get_high_priority_tasks(self, user_id: str) -> List[Task]: ...

    def get_medium_priority_tasks(self, user_id: str) -> List[Task]: ...

    def get_low_priority_tasks(self, user_id: str) -> List[Task]: ...


def _parse_task_id(task_id: str) -> str:
    # Les ids sont des UUID, un id mal formé est une erreur et pas un "not found"
    return str(uuid.UUID(task_id))


class TaskService:
    """SQLAlchemy-backed implementation of TaskServiceProtocol.

    Store errors never leave this class untranslated: they are rolled back and
    re-raised as TaskOperationError carrying the operation description. A missing
    record is not an error, get/update/delete return None instead.
    """

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, error: Exception) -> TaskOperationError:
        self.db.rollback()
        logger.warning(f"{operation}: {error}")
        return TaskOperationError(operation, str(error))

    def create_task(self, data: TaskCreate) -> Task:
        operation = "Error creating task"
        try:
            task = Task(**data.model_dump())
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        except Exception as e:
            raise self._fail(operation, e) from e
        logger.info(f"Task {task.id} created for user {task.user}")
        return task

    def get_task(self, task_id: str) -> Optional[Task]:
        operation = "Error fetching task"
        try:
            return self.db.get(Task, _parse_task_id(task_id))
        except Exception as e:
            raise self._fail(operation, e) from e

    def update_task(self, task_id: str, data: TaskUpdate) -> Optional[Task]:
        operation = "Error updating task"
        try:
            task = self.db.get(Task, _parse_task_id(task_id))
            if task is None:
                return None

            update_data = data.model_dump(exclude_unset=True)
            for field, value in update_data.items():
                setattr(task, field, value)
            task.updated_at = datetime.utcnow()

            self.db.commit()
            self.db.refresh(task)
        except Exception as e:
            raise self._fail(operation, e) from e
        return task

    def delete_task(self, task_id: str) -> Optional[Task]:
        operation = "Error deleting task"
        try:
            task = self.db.get(Task, _parse_task_id(task_id))
            if task is None:
                return None

            # Copie détachée, renvoyée à l'appelant après la suppression
            snapshot = Task(**{c.name: getattr(task, c.name) for c in Task.__table__.columns})

            self.db.delete(task)
            self.db.commit()
        except Exception as e:
            raise self._fail(operation, e) from e
        logger.info(f"Task {snapshot.id} deleted")
        return snapshot

    def _list(self, operation: str, *criteria) -> List[Task]:
        try:
            return (
                self.db.query(Task)
                .filter(*criteria)
                .order_by(Task.created_at.desc())
                .all()
            )
        except Exception as e:
            raise self._fail(operation, e) from e

    def get_pending_tasks(self, user_id: str) -> List[Task]:
        return self._list(
            "Error fetching pending tasks",
            Task.user == user_id,
            Task.state == TaskState.PENDING,
        )

    def get_completed_tasks(self, user_id: str) -> List[Task]:
        return self._list(
            "Error fetching completed tasks",
            Task.user == user_id,
            Task.state == TaskState.COMPLETED,
        )

    # Les listes par priorité ne contiennent que les tâches en attente
    def get_high_priority_tasks(self, user_id: str) -> List[Task]:
        return self._list(
            "Error fetching pending high priority tasks",
            Task.user == user_id,
            Task.priority == TaskPriority.HIGH,
            Task.state == TaskState.PENDING,
        )

    def get_medium_priority_tasks(self, user_id: str) -> List[Task]:
        return self._list(
            "Error fetching pending medium priority tasks",
            Task.user == user_id,
            Task.priority == TaskPriority.MEDIUM,
            Task.state == TaskState.PENDING,
        )

    def get_low_priority_tasks(self, user_id: str) -> List[Task]:
        return self._list(
            "Error fetching pending low priority tasks",
            Task.user == user_id,
            Task.priority == TaskPriority.LOW,
            Task.state == TaskState.PENDING,
        )
