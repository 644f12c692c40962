"""
Tests for the by-name reference helpers.
"""
import pytest

from staff_api.exceptions import ConflictError, ValidationError
from staff_api.repositories import DepartmentRepository, DEPARTMENT_FIELDS
from staff_api.utils.referential_integrity import (
    collect_names,
    guard_unreferenced,
    require_all_names,
    require_reference
)


def test_collect_names_skips_empty_slots():
    document = {"department_name_1": "Ventas", "department_name_2": "", "department_name_3": "Compras"}
    assert collect_names(document, DEPARTMENT_FIELDS) == ["Ventas", "Compras"]


def test_collect_names_ignores_missing_fields():
    assert collect_names({"department_name_2": "Ventas"}, DEPARTMENT_FIELDS) == ["Ventas"]


def test_guard_unreferenced_passes_without_reference():
    guard_unreferenced(None, "still referenced")


def test_guard_unreferenced_raises_conflict():
    with pytest.raises(ConflictError) as exc_info:
        guard_unreferenced({"id": "abc", "name": "Ventas"}, "still referenced", target="X")
    assert exc_info.value.details == {"target": "X", "referenced_by": "abc"}


@pytest.mark.asyncio
async def test_require_reference(fake_db):
    repo = DepartmentRepository(fake_db["departments"])
    await repo.create({"name": "Ventas"})

    found = await require_reference(repo, "Ventas", "Department")
    assert found["name"] == "Ventas"

    with pytest.raises(ValidationError):
        await require_reference(repo, "Compras", "Department")
    with pytest.raises(ValidationError):
        await require_reference(repo, "", "Department")


@pytest.mark.asyncio
async def test_require_all_names(fake_db):
    repo = DepartmentRepository(fake_db["departments"])
    await repo.create({"name": "Ventas"})

    await require_all_names(repo, [], "departments")
    await require_all_names(repo, ["Ventas", "Ventas"], "departments")
    with pytest.raises(ValidationError) as exc_info:
        await require_all_names(repo, ["Ventas", "Compras"], "departments")
    assert exc_info.value.details["found"] == 1
