"""Base repository with common CRUD operations"""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel, ValidationError
from supabase import Client

from app.exceptions import StoreError

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Base repository providing common database operations.
    Hides Supabase implementation details from the rest of the application.
    Store failures surface as StoreError carrying the store's message.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        try:
            return self._model_class(**data)
        except ValidationError as e:
            raise StoreError(f"Unexpected {self._table_name} row: {str(e)}") from e

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of database dicts to domain models"""
        return [self._to_model(item) for item in data]

    def _execute(self, query) -> Any:
        """Run a PostgREST query, translating client errors to StoreError"""
        try:
            return query.execute()
        except APIError as e:
            raise StoreError(e.message or str(e)) from e
        except httpx.HTTPError as e:
            raise StoreError(str(e)) from e

    async def create(self, data: CreateT) -> T:
        """Create a new record"""
        data_dict = data.model_dump(exclude_unset=False, mode='json')
        response = self._execute(self._client.table(self._table_name).insert(data_dict))

        if not response.data:
            raise StoreError("Failed to create record")

        return self._to_model(response.data[0])

    async def update(self, id: str, data: UpdateT) -> Optional[T]:
        """Update a record by ID"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')

        response = self._execute(
            self._client.table(self._table_name).update(data_dict).eq("id", id)
        )

        if not response.data:
            return None

        return self._to_model(response.data[0])
