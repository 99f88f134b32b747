"""Task domain model"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel


class TaskType(str, Enum):
    """Kinds of follow-up work a task can represent"""
    CALL = "call"
    EMAIL = "email"
    REVIEW = "review"


class TaskStatus(str, Enum):
    """Task status enum (pending -> completed only)"""
    PENDING = "pending"
    COMPLETED = "completed"


class TaskBase(BaseModel):
    """Base task fields"""
    title: Optional[str] = None
    related_id: str
    type: TaskType
    due_at: datetime
    status: TaskStatus = TaskStatus.PENDING


class TaskCreate(TaskBase):
    """Task creation model"""
    tenant_id: str


class TaskUpdate(BaseModel):
    """Task update model - only the status is mutable"""
    status: Optional[TaskStatus] = None


class Task(TaskBase):
    """Complete task model from database"""
    id: str
    tenant_id: Optional[str] = None

    class Config:
        from_attributes = True

    def display_title(self) -> str:
        return self.title or self.type.value.upper()

    def short_related_id(self) -> str:
        return f"{self.related_id[:8]}..."


class CreateTaskResponse(BaseModel):
    success: bool = True
    task_id: str


class CompleteTaskResponse(BaseModel):
    success: bool = True


class TaskListResponse(BaseModel):
    tasks: List[Task]
    count: int
