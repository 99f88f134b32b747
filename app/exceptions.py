"""Errors raised by the task services and their collaborators"""


class TaskServiceError(Exception):
    """Base error for task operations"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskServiceError):
    """Client-caused failure (bad method, body or fields)"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class StoreError(TaskServiceError):
    """Record store query/update/insert failure"""


class NotificationError(TaskServiceError):
    """Realtime publish failure; never fails the calling operation"""
