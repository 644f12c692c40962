"""
Pydantic models for request and response payloads.
"""
from .common import ApiResponse, StoredRecord
from .area import AreaCreate, AreaUpdate, AreaResponse
from .manager import ManagerCreate, ManagerUpdate, ManagerResponse
from .department import DepartmentCreate, DepartmentUpdate, DepartmentResponse
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse

__all__ = [
    "ApiResponse",
    "StoredRecord",
    "AreaCreate",
    "AreaUpdate",
    "AreaResponse",
    "ManagerCreate",
    "ManagerUpdate",
    "ManagerResponse",
    "DepartmentCreate",
    "DepartmentUpdate",
    "DepartmentResponse",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
]
