"""
Area service.
Areas are referenced by departments through their name.
"""
from typing import Dict, Any
import logging

from staff_api.repositories import AreaRepository, DepartmentRepository
from staff_api.utils.referential_integrity import guard_unreferenced
from .base_service import CrudService

logger = logging.getLogger(__name__)


class AreaService(CrudService):
    """Service for area operations."""

    resource = "Area"
    required_fields = ("name", "building")

    def __init__(
        self,
        area_repo: AreaRepository,
        department_repo: DepartmentRepository,
        guard_delete: bool = False
    ):
        """
        Initialize area service.

        Args:
            area_repo: Area repository instance
            department_repo: Department repository instance
            guard_delete: Refuse deleting an area a department still names
        """
        super().__init__(area_repo)
        self.department_repo = department_repo
        self.guard_delete = guard_delete

    async def _guard_delete(self, record: Dict[str, Any]) -> None:
        department = await self.department_repo.find_by_area_name(record["name"])
        if department is None:
            return

        if self.guard_delete:
            guard_unreferenced(
                department,
                "area is assigned to a department",
                area=record["name"],
                department=department.get("name")
            )
        else:
            logger.warning(
                f"Deleting area '{record['name']}' still named by department '{department.get('name')}'"
            )
