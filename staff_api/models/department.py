"""
Department models.
A department names one area and optionally one manager.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import StoredRecord


class DepartmentCreate(BaseModel):
    """Department creation (and full update) request."""

    name: str = Field(..., min_length=1, description="Department name, referenced by employees")
    manager_name: str = Field(
        "",
        alias="managerName",
        description="Name of an existing manager, empty when unassigned"
    )
    area_name: str = Field(
        "",
        alias="areaName",
        description="Name of an existing area"
    )

    model_config = ConfigDict(populate_by_name=True)


class DepartmentUpdate(BaseModel):
    """
    Department partial update request.

    Only the references present in the body are checked. A present
    ``areaName`` must name an existing area even when it is empty, so an
    update cannot leave a department without an area; omit the field to keep
    the current one. An empty ``managerName`` is accepted and unassigns the
    manager.
    """

    name: Optional[str] = Field(None, min_length=1)
    manager_name: Optional[str] = Field(None, alias="managerName")
    area_name: Optional[str] = Field(None, alias="areaName")

    model_config = ConfigDict(populate_by_name=True)


class DepartmentResponse(StoredRecord):
    """Department response model."""

    name: str
    manager_name: str = Field("", alias="managerName")
    area_name: str = Field("", alias="areaName")

    model_config = ConfigDict(populate_by_name=True)
