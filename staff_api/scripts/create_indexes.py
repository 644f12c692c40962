"""
Script to create the MongoDB indexes used by the name lookups.

Run with: python -m staff_api.scripts.create_indexes
"""
import asyncio
import logging

from pymongo.errors import OperationFailure

from staff_api.database import Database, Collections
from staff_api.repositories import DEPARTMENT_FIELDS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Reference lookups are equality matches on these fields
INDEXES = {
    Collections.AREAS: ["name"],
    Collections.MANAGERS: ["name"],
    Collections.DEPARTMENTS: ["name", "manager_name", "area_name"],
    Collections.EMPLOYEES: list(DEPARTMENT_FIELDS),
}


async def safe_create_index(collection, *args, **kwargs):
    """Create an index, skipping conflicts with an existing index definition."""
    try:
        return await collection.create_index(*args, **kwargs)
    except OperationFailure as e:
        if e.code == 86:  # IndexKeySpecsConflict
            logger.warning(f"Index already exists with a different definition, skipped: {args}")
            return None
        raise


async def create_indexes() -> list:
    """Create every index in INDEXES and return their names."""
    await Database.connect_db()
    db = Database.get_db()
    created = []

    try:
        for collection_name, fields in INDEXES.items():
            for field in fields:
                name = await safe_create_index(db[collection_name], field)
                if name:
                    created.append(f"{collection_name}.{name}")
            logger.info(f"Indexes for {collection_name}: {', '.join(fields)}")
    finally:
        await Database.close_db()

    return created


if __name__ == "__main__":
    indexes = asyncio.run(create_indexes())
    logger.info(f"{len(indexes)} indexes created or confirmed")
