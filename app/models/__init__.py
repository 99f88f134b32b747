"""Domain models for the application"""
from .task import (
    Task,
    TaskCreate,
    TaskUpdate,
    TaskType,
    TaskStatus,
    CreateTaskResponse,
    CompleteTaskResponse,
    TaskListResponse,
)

__all__ = [
    'Task', 'TaskCreate', 'TaskUpdate', 'TaskType', 'TaskStatus',
    'CreateTaskResponse', 'CompleteTaskResponse', 'TaskListResponse',
]
