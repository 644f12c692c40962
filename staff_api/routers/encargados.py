"""
Managers (encargados) router.
Handles manager CRUD operations.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from staff_api.database import Database, Collections
from staff_api.models import ApiResponse, ManagerCreate, ManagerUpdate, ManagerResponse
from staff_api.repositories import ManagerRepository, DepartmentRepository
from staff_api.services import ManagerService
from staff_api.utils.dependencies import pagination_params

router = APIRouter(prefix="/encargados", tags=["Encargados"])


async def get_manager_service() -> ManagerService:
    """Get manager service with injected dependencies."""
    db = Database.get_db()
    return ManagerService(
        ManagerRepository(db[Collections.MANAGERS]),
        DepartmentRepository(db[Collections.DEPARTMENTS])
    )


@router.get(
    "",
    response_model=ApiResponse[List[ManagerResponse]],
    summary="List managers"
)
async def list_managers(
    pagination: Dict[str, Any] = Depends(pagination_params),
    service: ManagerService = Depends(get_manager_service)
):
    return await service.get_all(skip=pagination["skip"], limit=pagination["limit"])


@router.get(
    "/{manager_id}",
    response_model=ApiResponse[ManagerResponse],
    summary="Get a manager by ID",
    responses={404: {"description": "Manager not found"}}
)
async def get_manager(manager_id: str, service: ManagerService = Depends(get_manager_service)):
    return await service.get_by_id(manager_id)


@router.post(
    "",
    response_model=ApiResponse[ManagerResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a manager",
    responses={400: {"description": "Invalid data"}}
)
async def create_manager(manager: ManagerCreate, service: ManagerService = Depends(get_manager_service)):
    return await service.create(manager)


@router.put(
    "/{manager_id}",
    response_model=ApiResponse[ManagerResponse],
    summary="Update a manager",
    responses={404: {"description": "Manager not found"}}
)
async def update_manager(
    manager_id: str,
    manager: ManagerCreate,
    service: ManagerService = Depends(get_manager_service)
):
    return await service.update(manager_id, manager)


@router.patch(
    "/{manager_id}",
    response_model=ApiResponse[ManagerResponse],
    summary="Partially update a manager",
    responses={404: {"description": "Manager not found"}}
)
async def patch_manager(
    manager_id: str,
    changes: ManagerUpdate,
    service: ManagerService = Depends(get_manager_service)
):
    return await service.update_partial(manager_id, changes)


@router.delete(
    "/{manager_id}",
    response_model=ApiResponse[ManagerResponse],
    summary="Delete a manager",
    responses={404: {"description": "Manager not found"}, 409: {"description": "Manager assigned to a department"}}
)
async def delete_manager(manager_id: str, service: ManagerService = Depends(get_manager_service)):
    """
    Delete a manager.

    Refused with 409 while any department names this manager.
    """
    return await service.delete(manager_id)
