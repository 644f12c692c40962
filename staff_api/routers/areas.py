"""
Areas router.
Handles area CRUD operations.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from staff_api.config import settings
from staff_api.database import Database, Collections
from staff_api.models import ApiResponse, AreaCreate, AreaUpdate, AreaResponse
from staff_api.repositories import AreaRepository, DepartmentRepository
from staff_api.services import AreaService
from staff_api.utils.dependencies import pagination_params

router = APIRouter(prefix="/areas", tags=["Áreas"])


async def get_area_service() -> AreaService:
    """Get area service with injected dependencies."""
    db = Database.get_db()
    return AreaService(
        AreaRepository(db[Collections.AREAS]),
        DepartmentRepository(db[Collections.DEPARTMENTS]),
        guard_delete=settings.AREA_DELETE_GUARD
    )


@router.get(
    "",
    response_model=ApiResponse[List[AreaResponse]],
    summary="List areas"
)
async def list_areas(
    pagination: Dict[str, Any] = Depends(pagination_params),
    service: AreaService = Depends(get_area_service)
):
    return await service.get_all(skip=pagination["skip"], limit=pagination["limit"])


@router.get(
    "/{area_id}",
    response_model=ApiResponse[AreaResponse],
    summary="Get an area by ID",
    responses={404: {"description": "Area not found"}}
)
async def get_area(area_id: str, service: AreaService = Depends(get_area_service)):
    return await service.get_by_id(area_id)


@router.post(
    "",
    response_model=ApiResponse[AreaResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create an area",
    responses={400: {"description": "Invalid data"}}
)
async def create_area(area: AreaCreate, service: AreaService = Depends(get_area_service)):
    return await service.create(area)


@router.put(
    "/{area_id}",
    response_model=ApiResponse[AreaResponse],
    summary="Update an area",
    responses={404: {"description": "Area not found"}}
)
async def update_area(
    area_id: str,
    area: AreaCreate,
    service: AreaService = Depends(get_area_service)
):
    return await service.update(area_id, area)


@router.patch(
    "/{area_id}",
    response_model=ApiResponse[AreaResponse],
    summary="Partially update an area",
    responses={404: {"description": "Area not found"}}
)
async def patch_area(
    area_id: str,
    changes: AreaUpdate,
    service: AreaService = Depends(get_area_service)
):
    return await service.update_partial(area_id, changes)


@router.delete(
    "/{area_id}",
    response_model=ApiResponse[AreaResponse],
    summary="Delete an area",
    responses={404: {"description": "Area not found"}, 409: {"description": "Area still assigned to a department"}}
)
async def delete_area(area_id: str, service: AreaService = Depends(get_area_service)):
    """
    Delete an area.

    Departments naming the area are not checked unless AREA_DELETE_GUARD is set.
    """
    return await service.delete(area_id)
