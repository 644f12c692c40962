"""
Manager repository.
Data access layer for manager (encargado) operations.
"""
from typing import Dict, Any, Optional

from .base_repository import BaseRepository


class ManagerRepository(BaseRepository):
    """Repository for manager operations."""

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Find the first manager with exactly this name."""
        return await self.find_one({"name": name})
