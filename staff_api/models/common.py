"""
Shared response models.
"""
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every resource endpoint."""

    status: int = Field(..., description="HTTP-style result code")
    message: Optional[str] = Field(None, description="Human readable outcome")
    data: Optional[T] = None


class StoredRecord(BaseModel):
    """Fields the repository layer adds to every stored document."""

    id: str = Field(..., description="Generated document identifier")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)
