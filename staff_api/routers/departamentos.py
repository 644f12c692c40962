"""
Departments (departamentos) router.
Handles department CRUD operations.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from staff_api.database import Database, Collections
from staff_api.models import ApiResponse, DepartmentCreate, DepartmentUpdate, DepartmentResponse
from staff_api.repositories import (
    AreaRepository,
    DepartmentRepository,
    EmployeeRepository,
    ManagerRepository
)
from staff_api.services import DepartmentService
from staff_api.utils.dependencies import pagination_params

router = APIRouter(prefix="/departamentos", tags=["Departamentos"])


async def get_department_service() -> DepartmentService:
    """Get department service with injected dependencies."""
    db = Database.get_db()
    return DepartmentService(
        DepartmentRepository(db[Collections.DEPARTMENTS]),
        AreaRepository(db[Collections.AREAS]),
        ManagerRepository(db[Collections.MANAGERS]),
        EmployeeRepository(db[Collections.EMPLOYEES])
    )


@router.get(
    "",
    response_model=ApiResponse[List[DepartmentResponse]],
    summary="List departments"
)
async def list_departments(
    pagination: Dict[str, Any] = Depends(pagination_params),
    service: DepartmentService = Depends(get_department_service)
):
    return await service.get_all(skip=pagination["skip"], limit=pagination["limit"])


@router.get(
    "/{department_id}",
    response_model=ApiResponse[DepartmentResponse],
    summary="Get a department by ID",
    responses={404: {"description": "Department not found"}}
)
async def get_department(department_id: str, service: DepartmentService = Depends(get_department_service)):
    return await service.get_by_id(department_id)


@router.post(
    "",
    response_model=ApiResponse[DepartmentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a department",
    responses={400: {"description": "Invalid data, unknown area or manager"}}
)
async def create_department(
    department: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service)
):
    """
    Create a department.

    - **areaName**: must be the name of an existing area
    - **managerName**: optional, must be the name of an existing manager
    """
    return await service.create(department)


@router.put(
    "/{department_id}",
    response_model=ApiResponse[DepartmentResponse],
    summary="Update a department",
    responses={400: {"description": "Unknown area or manager"}, 404: {"description": "Department not found"}}
)
async def update_department(
    department_id: str,
    department: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service)
):
    """Only the area and manager fields present in the body are re-validated."""
    return await service.update(department_id, department)


@router.patch(
    "/{department_id}",
    response_model=ApiResponse[DepartmentResponse],
    summary="Partially update a department",
    responses={400: {"description": "Unknown area or manager"}, 404: {"description": "Department not found"}}
)
async def patch_department(
    department_id: str,
    changes: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service)
):
    """Send an empty **managerName** to unassign the manager."""
    return await service.update_partial(department_id, changes)


@router.delete(
    "/{department_id}",
    response_model=ApiResponse[DepartmentResponse],
    summary="Delete a department",
    responses={
        404: {"description": "Department not found"},
        409: {"description": "Department has employees or an assigned manager"}
    }
)
async def delete_department(department_id: str, service: DepartmentService = Depends(get_department_service)):
    """
    Delete a department.

    Refused with 409 while an employee lists the department or a manager is assigned to it.
    """
    return await service.delete(department_id)
