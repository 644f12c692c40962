"""
Employee service.
Employees name up to three departments; every non-empty name must
resolve, and an employee is only deleted once none of its departments
exist any more.
"""
from typing import Dict, Any

from staff_api.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    DEPARTMENT_FIELDS
)
from staff_api.utils.referential_integrity import (
    collect_names,
    guard_unreferenced,
    require_all_names
)
from .base_service import CrudService


class EmployeeService(CrudService):
    """Service for employee operations."""

    resource = "Employee"
    required_fields = ("first_name", "last_name", "age", "gender")

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        department_repo: DepartmentRepository
    ):
        """
        Initialize employee service.

        Args:
            employee_repo: Employee repository instance
            department_repo: Department repository instance
        """
        super().__init__(employee_repo)
        self.department_repo = department_repo

    async def _validate_references(self, document: Dict[str, Any], creating: bool) -> None:
        names = collect_names(document, DEPARTMENT_FIELDS)
        await require_all_names(self.department_repo, names, "departments")

    async def _guard_delete(self, record: Dict[str, Any]) -> None:
        names = collect_names(record, DEPARTMENT_FIELDS)
        if not names:
            return

        department = await self.department_repo.find_one({"name": {"$in": names}})
        guard_unreferenced(
            department,
            "employee still assigned to existing departments",
            departments=names
        )
