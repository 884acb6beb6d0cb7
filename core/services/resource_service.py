# =============================================================================
# core/services/resource_service.py - Shared CRUD Logic
# =============================================================================
# The list/get/create/update/delete protocol shared by movies, actors and
# ratings. Separates HTTP concerns from database logic:
# - missing records raise the resource's NotFound error
# - a missing create body raises MissingBodyError
# - writes return the store's WriteResult untouched, conflicts included
# =============================================================================

import logging
from typing import Generic

from pydantic import BaseModel

from app.exceptions import MissingBodyError, ResourceNotFoundError
from lib.store import EntityStore, ModelT, WriteResult

logger = logging.getLogger(__name__)


class ResourceService(Generic[ModelT]):
    """
    CRUD operations over one EntityStore.

    Subclasses set:
        resource_name: Used in error messages
        update_fields: Attributes copied from the body on update; anything
            else in the body is ignored
        not_found_error: Raised when an id has no record
    """

    resource_name: str = "record"
    update_fields: tuple[str, ...] = ()
    not_found_error: type[ResourceNotFoundError] = ResourceNotFoundError

    def __init__(self, store: EntityStore[ModelT]):
        self.store = store

    def list_all(self) -> list[ModelT]:
        """Return the whole collection, unpaginated."""
        return self.store.list()

    def get(self, record_id: int) -> ModelT:
        """
        Get a record by ID.

        Raises:
            ResourceNotFoundError: If no record has this id
        """
        record = self.store.get(record_id)
        if record is None:
            raise self.not_found_error(record_id)
        return record

    def create(self, payload: BaseModel | None) -> WriteResult[ModelT]:
        """
        Persist a new record from the request body.

        Raises:
            MissingBodyError: If the body was absent or null
        """
        if payload is None:
            raise MissingBodyError(self.resource_name)

        return self.store.insert(payload.model_dump())

    def update(self, record_id: int, payload: BaseModel) -> WriteResult[ModelT]:
        """
        Copy `update_fields` from the body onto an existing record.

        Raises:
            ResourceNotFoundError: If no record has this id
        """
        self.get(record_id)

        values = {field: getattr(payload, field) for field in self.update_fields}
        return self.store.update(record_id, values)

    def delete(self, record_id: int) -> WriteResult[ModelT]:
        """
        Remove an existing record.

        Raises:
            ResourceNotFoundError: If no record has this id
        """
        self.get(record_id)
        return self.store.delete(record_id)
