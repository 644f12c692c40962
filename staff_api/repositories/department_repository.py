"""
Department repository.
Data access layer for department operations.
"""
from typing import Dict, Any, Optional, Iterable

from .base_repository import BaseRepository


class DepartmentRepository(BaseRepository):
    """Repository for department operations."""

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Find the first department with exactly this name."""
        return await self.find_one({"name": name})

    async def count_by_names(self, names: Iterable[str]) -> int:
        """
        Count departments whose name is one of ``names``.

        Args:
            names: Department names to look up

        Returns:
            Number of matching department documents (not distinct names)
        """
        return await self.count_in("name", names)

    async def find_by_manager_name(self, manager_name: str) -> Optional[Dict[str, Any]]:
        """Find a department whose manager field names this manager."""
        return await self.find_one({"manager_name": manager_name})

    async def find_by_area_name(self, area_name: str) -> Optional[Dict[str, Any]]:
        """Find a department located in the named area."""
        return await self.find_one({"area_name": area_name})
