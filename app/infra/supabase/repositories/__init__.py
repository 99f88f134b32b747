"""Repository factory and exports"""
from supabase import Client
from .tasks import TaskRepository


class RepositoryFactory:
    """Factory for creating repository instances"""

    def __init__(self, client: Client):
        self._client = client
        self._tasks: TaskRepository = None

    @property
    def tasks(self) -> TaskRepository:
        """Get task repository"""
        if self._tasks is None:
            self._tasks = TaskRepository(self._client)
        return self._tasks


__all__ = [
    'RepositoryFactory',
    'TaskRepository',
]
