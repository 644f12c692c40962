"""
Area models.
An area is a physical location (building) grouping departments.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import StoredRecord


class AreaCreate(BaseModel):
    """Area creation (and full update) request."""

    name: str = Field(..., min_length=1, description="Area name, referenced by departments")
    building: str = Field(..., min_length=1, description="Building associated with the area")


class AreaUpdate(BaseModel):
    """Area partial update request."""

    name: Optional[str] = Field(None, min_length=1)
    building: Optional[str] = Field(None, min_length=1)


class AreaResponse(StoredRecord):
    """Area response model."""

    name: str
    building: str

    model_config = ConfigDict(populate_by_name=True)
