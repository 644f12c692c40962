"""
Department service.
Business rules:
- the area name must resolve to an existing area when the department is
  created, and whenever an update carries it;
- a non-empty manager name must resolve to an existing manager;
- a department can only be deleted once no employee lists it and its
  manager has been unassigned.
"""
from typing import Dict, Any

from staff_api.repositories import (
    AreaRepository,
    DepartmentRepository,
    EmployeeRepository,
    ManagerRepository
)
from staff_api.utils.referential_integrity import guard_unreferenced, require_reference
from staff_api.exceptions import ConflictError
from .base_service import CrudService


class DepartmentService(CrudService):
    """Service for department operations."""

    resource = "Department"
    required_fields = ("name",)

    def __init__(
        self,
        department_repo: DepartmentRepository,
        area_repo: AreaRepository,
        manager_repo: ManagerRepository,
        employee_repo: EmployeeRepository
    ):
        """
        Initialize department service.

        Args:
            department_repo: Department repository instance
            area_repo: Area repository instance
            manager_repo: Manager repository instance
            employee_repo: Employee repository instance
        """
        super().__init__(department_repo)
        self.area_repo = area_repo
        self.manager_repo = manager_repo
        self.employee_repo = employee_repo

    async def _validate_references(self, document: Dict[str, Any], creating: bool) -> None:
        # On update only the fields present in the change set are checked
        if creating or "area_name" in document:
            await require_reference(self.area_repo, document.get("area_name", ""), "Area")

        # An empty manager name means "no manager"
        if document.get("manager_name"):
            await require_reference(self.manager_repo, document["manager_name"], "Manager")

    async def _guard_delete(self, record: Dict[str, Any]) -> None:
        employee = await self.employee_repo.find_by_department_name(record["name"])
        guard_unreferenced(
            employee,
            "department has assigned employees",
            department=record["name"]
        )

        if record.get("manager_name"):
            raise ConflictError(
                "department has an assigned manager",
                details={"department": record["name"], "manager": record["manager_name"]}
            )
