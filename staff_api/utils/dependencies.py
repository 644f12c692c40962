"""
FastAPI dependencies shared by the routers.
"""
from typing import Any, Dict, Optional

from fastapi import Query

MAX_PAGE_SIZE = 1000


def pagination_params(
    skip: int = Query(0, description="Number of records to skip"),
    limit: Optional[int] = Query(None, description="Maximum number of records to return (max 1000)")
) -> Dict[str, Any]:
    """
    Dependency for pagination parameters.

    Returns:
        Dictionary with ``skip`` and ``limit``; ``limit`` is None when the
        caller wants every record

    Usage:
        @router.get("")
        async def list_items(pagination: dict = Depends(pagination_params)):
            skip = pagination['skip']
            limit = pagination['limit']
            ...
    """
    if skip < 0:
        skip = 0

    if limit is not None:
        limit = max(1, min(limit, MAX_PAGE_SIZE))

    return {
        "skip": skip,
        "limit": limit
    }
