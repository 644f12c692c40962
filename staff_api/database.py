"""
MongoDB connection management.
One motor client per process, opened at startup and closed at shutdown.
"""
from typing import Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from staff_api.config import settings
from staff_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class Collections:
    """
    Central definition of the MongoDB collection names.
    Routers and scripts must take collection names from here.
    """

    AREAS = "areas"
    MANAGERS = "managers"
    DEPARTMENTS = "departments"
    EMPLOYEES = "employees"

    ALL = (AREAS, MANAGERS, DEPARTMENTS, EMPLOYEES)


class Database:
    """Holds the shared motor client and database handle."""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    async def connect_db(cls, mongo_url: Optional[str] = None, db_name: Optional[str] = None) -> None:
        """
        Open the MongoDB connection.

        Args:
            mongo_url: Connection string (defaults to settings.MONGO_URL)
            db_name: Database name (defaults to settings.DB_NAME)
        """
        url = mongo_url or settings.MONGO_URL
        name = db_name or settings.DB_NAME

        cls.client = AsyncIOMotorClient(url)
        cls.db = cls.client[name]
        logger.info(f"Connected to MongoDB database '{name}'")

    @classmethod
    async def close_db(cls) -> None:
        """Close the MongoDB connection."""
        if cls.client is not None:
            cls.client.close()
            logger.info("MongoDB connection closed")
        cls.client = None
        cls.db = None

    @classmethod
    def get_db(cls) -> AsyncIOMotorDatabase:
        """
        Get the database handle.

        Raises:
            DatabaseError: If connect_db has not been called
        """
        if cls.db is None:
            raise DatabaseError("Database not connected")
        return cls.db

    @classmethod
    async def ping(cls) -> bool:
        """Return True if the server answers a ping."""
        if cls.db is None:
            return False
        try:
            await cls.db.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False
