"""
Area repository.
Data access layer for area operations.
"""
from typing import Dict, Any, Optional

from .base_repository import BaseRepository


class AreaRepository(BaseRepository):
    """Repository for area operations."""

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Find the first area with exactly this name."""
        return await self.find_one({"name": name})
