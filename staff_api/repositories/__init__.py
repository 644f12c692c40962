"""
Repository package.
Provides data access layer for all entities.
"""
from .base_repository import BaseRepository
from .area_repository import AreaRepository
from .manager_repository import ManagerRepository
from .department_repository import DepartmentRepository
from .employee_repository import EmployeeRepository, DEPARTMENT_FIELDS

__all__ = [
    "BaseRepository",
    "AreaRepository",
    "ManagerRepository",
    "DepartmentRepository",
    "EmployeeRepository",
    "DEPARTMENT_FIELDS",
]
