"""
Services package.
Business logic layer for all operations.
"""
from .base_service import CrudService, service_result
from .area_service import AreaService
from .manager_service import ManagerService
from .department_service import DepartmentService
from .employee_service import EmployeeService

__all__ = [
    "CrudService",
    "service_result",
    "AreaService",
    "ManagerService",
    "DepartmentService",
    "EmployeeService",
]
