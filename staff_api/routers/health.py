"""
Liveness and health endpoints.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from staff_api.database import Database

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse, summary="Liveness check")
async def root() -> str:
    return "Staff Directory API is running"


@router.get("/health", summary="Health check")
async def health():
    """Report API status and MongoDB connectivity."""
    connected = await Database.ping()
    return {
        "status": "healthy",
        "database": "connected" if connected else "disconnected"
    }
