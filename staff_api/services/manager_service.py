"""
Manager service.
A manager cannot be deleted while a department names it.
"""
from typing import Dict, Any

from staff_api.repositories import ManagerRepository, DepartmentRepository
from staff_api.utils.referential_integrity import guard_unreferenced
from .base_service import CrudService


class ManagerService(CrudService):
    """Service for manager (encargado) operations."""

    resource = "Manager"
    required_fields = ("name", "field_of_study", "shift")

    def __init__(
        self,
        manager_repo: ManagerRepository,
        department_repo: DepartmentRepository
    ):
        """
        Initialize manager service.

        Args:
            manager_repo: Manager repository instance
            department_repo: Department repository instance
        """
        super().__init__(manager_repo)
        self.department_repo = department_repo

    async def _guard_delete(self, record: Dict[str, Any]) -> None:
        department = await self.department_repo.find_by_manager_name(record["name"])
        guard_unreferenced(
            department,
            "manager is assigned to a department",
            manager=record["name"],
            department=department.get("name") if department else None
        )
