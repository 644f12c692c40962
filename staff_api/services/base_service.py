"""
Base service.
CRUD flow shared by the entity services; subclasses plug in their
reference validation and delete guards.
"""
from typing import Any, Dict, Optional, Tuple, Union
import logging

from pydantic import BaseModel

from staff_api.exceptions import NotFoundError, validate_required_fields
from staff_api.repositories import BaseRepository

logger = logging.getLogger(__name__)

Payload = Union[BaseModel, Dict[str, Any]]


def service_result(status: int, data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Build the result envelope returned by every service operation."""
    return {"status": status, "message": message, "data": data}


class CrudService:
    """Service for the create/read/update/delete flow of one collection."""

    resource: str = "Record"
    required_fields: Tuple[str, ...] = ()

    def __init__(self, repo: BaseRepository):
        """
        Initialize service.

        Args:
            repo: Repository of the managed collection
        """
        self.repo = repo

    @staticmethod
    def _to_document(data: Payload, partial: bool = False, full: bool = False) -> Dict[str, Any]:
        """
        Turn a request model (or plain dict) into storage fields.

        ``full`` keeps model defaults (create); otherwise only the fields the
        caller actually sent are kept. ``partial`` also drops explicit nulls.
        """
        if isinstance(data, BaseModel):
            document = data.model_dump(exclude_unset=not full)
        else:
            document = dict(data)
        if partial:
            document = {key: value for key, value in document.items() if value is not None}
        return document

    async def _validate_references(self, document: Dict[str, Any], creating: bool) -> None:
        """Hook: check the by-name references held in ``document``."""

    async def _guard_delete(self, record: Dict[str, Any]) -> None:
        """Hook: refuse the delete while ``record`` is still referenced."""

    async def _load(self, doc_id: str) -> Dict[str, Any]:
        record = await self.repo.find_by_id(doc_id)
        if not record:
            raise NotFoundError(self.resource, doc_id)
        return record

    async def create(self, data: Payload) -> Dict[str, Any]:
        """
        Create a record.

        Raises:
            ValidationError: If a required field is missing or a reference does not resolve
        """
        document = self._to_document(data, full=True)
        validate_required_fields(document, list(self.required_fields))
        await self._validate_references(document, creating=True)

        record = await self.repo.create(document)
        logger.info(f"{self.resource} created: {record['id']}")
        return service_result(201, record, f"{self.resource} created successfully")

    async def get_all(self, skip: int = 0, limit: Optional[int] = None) -> Dict[str, Any]:
        """List records."""
        records = await self.repo.find_all(skip=skip, limit=limit)
        return service_result(200, records)

    async def get_by_id(self, doc_id: str) -> Dict[str, Any]:
        """
        Get record by ID.

        Raises:
            NotFoundError: If no record has that id
        """
        return service_result(200, await self._load(doc_id))

    async def update(self, doc_id: str, data: Payload) -> Dict[str, Any]:
        """
        Update a record with a complete set of required fields.

        Raises:
            ValidationError: If a required field is missing or a reference does not resolve
            NotFoundError: If no record has that id
        """
        changes = self._to_document(data)
        validate_required_fields(changes, list(self.required_fields))
        return await self._apply(doc_id, changes, f"{self.resource} updated successfully")

    async def update_partial(self, doc_id: str, data: Payload) -> Dict[str, Any]:
        """
        Merge the given fields into a record.

        Raises:
            ValidationError: If a reference in the change set does not resolve
            NotFoundError: If no record has that id
        """
        changes = self._to_document(data, partial=True)
        return await self._apply(doc_id, changes, f"{self.resource} partially updated")

    async def _apply(self, doc_id: str, changes: Dict[str, Any], message: str) -> Dict[str, Any]:
        # References are checked before the id is resolved
        await self._validate_references(changes, creating=False)

        record = await self.repo.update(doc_id, changes)
        if not record:
            raise NotFoundError(self.resource, doc_id)

        logger.info(f"{self.resource} updated: {doc_id}", extra={"details": sorted(changes)})
        return service_result(200, record, message)

    async def delete(self, doc_id: str) -> Dict[str, Any]:
        """
        Delete a record once its delete guards pass.

        Raises:
            NotFoundError: If no record has that id
            ConflictError: If the record is still referenced
        """
        record = await self._load(doc_id)
        await self._guard_delete(record)

        removed = await self.repo.delete(doc_id)
        if not removed:
            raise NotFoundError(self.resource, doc_id)

        logger.info(f"{self.resource} deleted: {doc_id}")
        return service_result(200, removed, f"{self.resource} deleted successfully")
