"""
Base repository with generic CRUD operations for MongoDB.
All entity-specific repositories inherit from this.
"""
from typing import Optional, List, Dict, Any, Iterable
from datetime import datetime, timezone
import logging

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from staff_api.utils.logger import log_database_operation

logger = logging.getLogger(__name__)


def _to_object_id(doc_id: Any) -> Optional[ObjectId]:
    """Convert a string id to ObjectId; None if it is not a valid id."""
    if isinstance(doc_id, ObjectId):
        return doc_id
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        return None


def _serialize(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Replace the Mongo _id with a string id."""
    if document and '_id' in document:
        document['id'] = str(document.pop('_id'))
    return document


class BaseRepository:
    """
    Generic repository for MongoDB CRUD operations.

    Provides standard methods: create, find_by_id, find_all, update, delete, etc.
    Documents are returned with a string ``id`` instead of ``_id``.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.name

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document.

        Args:
            document: Document data

        Returns:
            The stored document, including its generated id
        """
        now = datetime.now(timezone.utc)
        document = dict(document)
        document.setdefault('created_at', now)
        document.setdefault('updated_at', now)

        result = await self.collection.insert_one(document)
        document['_id'] = result.inserted_id
        log_database_operation(logger, "insert", self.name, str(result.inserted_id))
        return _serialize(document)

    async def find_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Args:
            doc_id: Document ID (string or ObjectId)

        Returns:
            Document data or None if not found or the id is malformed
        """
        object_id = _to_object_id(doc_id)
        if object_id is None:
            return None

        document = await self.collection.find_one({"_id": object_id})
        return _serialize(document)

    async def find_one(self, filter_query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document matching filter.

        Args:
            filter_query: MongoDB filter query

        Returns:
            Document data or None if not found
        """
        document = await self.collection.find_one(filter_query)
        return _serialize(document)

    async def find_all(
        self,
        filter_query: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Find all documents matching filter.

        Args:
            filter_query: MongoDB filter query (None for all documents)
            skip: Number of documents to skip
            limit: Maximum number of documents to return (None for no limit)

        Returns:
            List of documents
        """
        cursor = self.collection.find(filter_query or {})

        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        documents = await cursor.to_list(length=limit)
        return [_serialize(doc) for doc in documents]

    async def count(self, filter_query: Optional[Dict[str, Any]] = None) -> int:
        """
        Count documents matching filter.

        Args:
            filter_query: MongoDB filter query

        Returns:
            Number of matching documents
        """
        return await self.collection.count_documents(filter_query or {})

    async def count_in(self, field: str, values: Iterable[Any]) -> int:
        """Count documents whose ``field`` equals any of ``values``."""
        return await self.count({field: {"$in": list(values)}})

    async def update(self, doc_id: str, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Merge fields into the document with the given id.

        Args:
            doc_id: Document ID
            update_data: Fields to set

        Returns:
            The updated document, or None if no document has that id
        """
        object_id = _to_object_id(doc_id)
        if object_id is None:
            return None

        changes = dict(update_data)
        changes['updated_at'] = datetime.now(timezone.utc)

        document = await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        if document:
            log_database_operation(logger, "update", self.name, doc_id)
        return _serialize(document)

    async def delete(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete document by ID.

        Args:
            doc_id: Document ID

        Returns:
            The removed document, or None if no document has that id
        """
        object_id = _to_object_id(doc_id)
        if object_id is None:
            return None

        document = await self.collection.find_one_and_delete({"_id": object_id})
        if document:
            log_database_operation(logger, "delete", self.name, doc_id)
        return _serialize(document)
