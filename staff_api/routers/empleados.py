"""
Employees (empleados) router.
Handles employee CRUD operations.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from staff_api.database import Database, Collections
from staff_api.models import ApiResponse, EmployeeCreate, EmployeeUpdate, EmployeeResponse
from staff_api.repositories import DepartmentRepository, EmployeeRepository
from staff_api.services import EmployeeService
from staff_api.utils.dependencies import pagination_params

router = APIRouter(prefix="/empleados", tags=["Empleados"])


async def get_employee_service() -> EmployeeService:
    """Get employee service with injected dependencies."""
    db = Database.get_db()
    return EmployeeService(
        EmployeeRepository(db[Collections.EMPLOYEES]),
        DepartmentRepository(db[Collections.DEPARTMENTS])
    )


@router.get(
    "",
    response_model=ApiResponse[List[EmployeeResponse]],
    summary="List employees"
)
async def list_employees(
    pagination: Dict[str, Any] = Depends(pagination_params),
    service: EmployeeService = Depends(get_employee_service)
):
    return await service.get_all(skip=pagination["skip"], limit=pagination["limit"])


@router.get(
    "/{employee_id}",
    response_model=ApiResponse[EmployeeResponse],
    summary="Get an employee by ID",
    responses={404: {"description": "Employee not found"}}
)
async def get_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    return await service.get_by_id(employee_id)


@router.post(
    "",
    response_model=ApiResponse[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    responses={400: {"description": "Invalid data or unknown department"}}
)
async def create_employee(
    employee: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Create an employee.

    - **departmentName1..3**: optional, each non-empty value must name an existing department
    """
    return await service.create(employee)


@router.put(
    "/{employee_id}",
    response_model=ApiResponse[EmployeeResponse],
    summary="Update an employee",
    responses={400: {"description": "Unknown department"}, 404: {"description": "Employee not found"}}
)
async def update_employee(
    employee_id: str,
    employee: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service)
):
    return await service.update(employee_id, employee)


@router.patch(
    "/{employee_id}",
    response_model=ApiResponse[EmployeeResponse],
    summary="Partially update an employee",
    responses={400: {"description": "Unknown department"}, 404: {"description": "Employee not found"}}
)
async def patch_employee(
    employee_id: str,
    changes: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service)
):
    return await service.update_partial(employee_id, changes)


@router.delete(
    "/{employee_id}",
    response_model=ApiResponse[EmployeeResponse],
    summary="Delete an employee",
    responses={
        404: {"description": "Employee not found"},
        409: {"description": "Employee still assigned to existing departments"}
    }
)
async def delete_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    """
    Delete an employee.

    Refused with 409 while any department the employee names still exists.
    """
    return await service.delete(employee_id)
