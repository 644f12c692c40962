"""
Employee repository.
Data access layer for employee operations.
"""
from typing import Dict, Any, Optional

from .base_repository import BaseRepository

DEPARTMENT_FIELDS = ("department_name_1", "department_name_2", "department_name_3")


class EmployeeRepository(BaseRepository):
    """Repository for employee operations."""

    async def find_by_department_name(self, department_name: str) -> Optional[Dict[str, Any]]:
        """
        Find an employee assigned to the named department.

        Args:
            department_name: Department name

        Returns:
            First employee listing the department in any of its three slots
        """
        return await self.find_one({
            "$or": [{field: department_name} for field in DEPARTMENT_FIELDS]
        })
