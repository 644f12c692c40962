"""
Manager models.
A manager (encargado) can be assigned to a department by name.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import StoredRecord


class ManagerCreate(BaseModel):
    """Manager creation (and full update) request."""

    name: str = Field(..., min_length=1, description="Manager name, referenced by departments")
    field_of_study: str = Field(
        ...,
        alias="fieldOfStudy",
        min_length=1,
        description="Area of study or qualification"
    )
    shift: str = Field(..., min_length=1, description="Work shift, e.g. morning or evening")

    model_config = ConfigDict(populate_by_name=True)


class ManagerUpdate(BaseModel):
    """Manager partial update request."""

    name: Optional[str] = Field(None, min_length=1)
    field_of_study: Optional[str] = Field(None, alias="fieldOfStudy", min_length=1)
    shift: Optional[str] = Field(None, min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class ManagerResponse(StoredRecord):
    """Manager response model."""

    name: str
    field_of_study: str = Field(..., alias="fieldOfStudy")
    shift: str

    model_config = ConfigDict(populate_by_name=True)
