"""
Referential integrity checks.
References between collections are by name, so every check is an
equality (or $in) lookup on the referenced collection.
Checks are best-effort: nothing locks the referenced document between
the check and the write that follows it.
"""
from typing import Any, Dict, Iterable, List, Optional
import logging

from staff_api.exceptions import ValidationError, ConflictError

logger = logging.getLogger(__name__)


def collect_names(document: Dict[str, Any], fields: Iterable[str]) -> List[str]:
    """
    Collect the non-empty name references held in ``fields``.

    Args:
        document: Stored document or change set
        fields: Reference field names to read

    Returns:
        Names in field order, empty and missing slots skipped
    """
    return [document[field] for field in fields if document.get(field)]


async def require_reference(repo, name: str, resource: str) -> Dict[str, Any]:
    """
    Resolve a by-name reference.

    Args:
        repo: Repository exposing ``find_by_name``
        name: Referenced name (an empty name never resolves)
        resource: Referenced entity label for the error message

    Returns:
        The referenced document

    Raises:
        ValidationError: If no document has that name
    """
    document = await repo.find_by_name(name) if name else None
    if document is None:
        raise ValidationError(
            f"{resource} not found",
            details={"resource": resource, "name": name}
        )
    return document


async def require_all_names(repo, names: List[str], resource: str) -> None:
    """
    Count-based existence check for a set of names.

    Duplicated names count once. The check compares the number of matching
    documents with the number of distinct names, so two documents sharing
    one requested name can mask another name that does not exist.

    Raises:
        ValidationError: If fewer documents match than names were requested
    """
    distinct = list(dict.fromkeys(names))
    if not distinct:
        return

    found = await repo.count_by_names(distinct)
    if found < len(distinct):
        raise ValidationError(
            f"one or more {resource} do not exist",
            details={"resource": resource, "names": distinct, "found": found}
        )


def guard_unreferenced(reference: Optional[Dict[str, Any]], message: str, **details: Any) -> None:
    """
    Refuse a delete while another document still references the target.

    Args:
        reference: The referencing document found, or None
        message: Conflict message
        details: Extra context for the error payload

    Raises:
        ConflictError: If ``reference`` is not None
    """
    if reference is not None:
        logger.warning(f"Delete blocked: {message}", extra={"details": details})
        raise ConflictError(message, details={**details, "referenced_by": reference.get("id")})
