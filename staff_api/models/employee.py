"""
Employee models.
An employee can belong to up to three departments, named in fixed slots.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import StoredRecord


class EmployeeCreate(BaseModel):
    """Employee creation (and full update) request."""

    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)
    age: float = Field(..., ge=0, description="Age in years, fractions allowed")
    gender: str = Field(..., min_length=1)

    department_name_1: str = Field("", alias="departmentName1", description="First department")
    department_name_2: str = Field("", alias="departmentName2", description="Second department")
    department_name_3: str = Field("", alias="departmentName3", description="Third department")

    model_config = ConfigDict(populate_by_name=True)


class EmployeeUpdate(BaseModel):
    """Employee partial update request."""

    first_name: Optional[str] = Field(None, alias="firstName", min_length=1)
    last_name: Optional[str] = Field(None, alias="lastName", min_length=1)
    age: Optional[float] = Field(None, ge=0)
    gender: Optional[str] = Field(None, min_length=1)

    department_name_1: Optional[str] = Field(None, alias="departmentName1")
    department_name_2: Optional[str] = Field(None, alias="departmentName2")
    department_name_3: Optional[str] = Field(None, alias="departmentName3")

    model_config = ConfigDict(populate_by_name=True)


class EmployeeResponse(StoredRecord):
    """Employee response model."""

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    age: float
    gender: str

    department_name_1: str = Field("", alias="departmentName1")
    department_name_2: str = Field("", alias="departmentName2")
    department_name_3: str = Field("", alias="departmentName3")

    model_config = ConfigDict(populate_by_name=True)
