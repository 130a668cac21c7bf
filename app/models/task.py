"""Task model"""

from sqlalchemy import Column, String, DateTime
from datetime import datetime
import uuid
from app.core.database import Base


class TaskState:
    PENDING = "pending"
    COMPLETED = "completed"


class TaskPriority:
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def new_task_id() -> str:
    return str(uuid.uuid4())


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=new_task_id)
    user = Column(String, nullable=False, index=True)

    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    state = Column(String, nullable=False, index=True)
    priority = Column(String, nullable=False)
    due_date = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
