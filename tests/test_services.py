"""
Service layer tests, run directly against the repositories.
"""
import pytest

from staff_api.database import Collections
from staff_api.exceptions import ConflictError, NotFoundError, ValidationError
from staff_api.models import DepartmentUpdate
from staff_api.repositories import (
    AreaRepository,
    DepartmentRepository,
    EmployeeRepository,
    ManagerRepository
)
from staff_api.services import AreaService, DepartmentService, EmployeeService, ManagerService


@pytest.fixture
def repos(fake_db):
    return {
        "areas": AreaRepository(fake_db[Collections.AREAS]),
        "managers": ManagerRepository(fake_db[Collections.MANAGERS]),
        "departments": DepartmentRepository(fake_db[Collections.DEPARTMENTS]),
        "employees": EmployeeRepository(fake_db[Collections.EMPLOYEES]),
    }


@pytest.fixture
def services(repos):
    return {
        "areas": AreaService(repos["areas"], repos["departments"]),
        "managers": ManagerService(repos["managers"], repos["departments"]),
        "departments": DepartmentService(
            repos["departments"], repos["areas"], repos["managers"], repos["employees"]
        ),
        "employees": EmployeeService(repos["employees"], repos["departments"]),
    }


class TestCrudFlow:

    @pytest.mark.asyncio
    async def test_create_returns_201_envelope(self, services):
        result = await services["areas"].create({"name": "Norte", "building": "A"})
        assert result["status"] == 201
        assert result["data"]["name"] == "Norte"
        assert result["data"]["id"]

    @pytest.mark.asyncio
    async def test_create_with_missing_field_fails(self, services):
        with pytest.raises(ValidationError) as exc_info:
            await services["managers"].create({"name": "Laura", "shift": "Noche"})
        assert exc_info.value.details["missing_fields"] == ["field_of_study"]

    @pytest.mark.asyncio
    async def test_full_update_with_missing_field_fails(self, services):
        created = await services["areas"].create({"name": "Norte", "building": "A"})
        with pytest.raises(ValidationError):
            await services["areas"].update(created["data"]["id"], {"name": "Sur"})

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, services):
        with pytest.raises(NotFoundError):
            await services["employees"].get_by_id("0123456789abcdef01234567")

    @pytest.mark.asyncio
    async def test_partial_update_ignores_nulls(self, services):
        await services["areas"].create({"name": "Norte", "building": "A"})
        created = await services["departments"].create({"name": "Ventas", "area_name": "Norte"})

        result = await services["departments"].update_partial(
            created["data"]["id"], DepartmentUpdate(name="Ventas 2", areaName=None)
        )
        assert result["data"]["name"] == "Ventas 2"
        assert result["data"]["area_name"] == "Norte"


class TestReferenceRules:

    @pytest.mark.asyncio
    async def test_count_check_accepts_duplicate_department_documents(self, services, repos):
        # Two departments named "Sales" make up for the missing "Marketing":
        # the check compares counts, not individual names
        await repos["departments"].create({"name": "Sales", "manager_name": "", "area_name": ""})
        await repos["departments"].create({"name": "Sales", "manager_name": "", "area_name": ""})

        result = await services["employees"].create({
            "first_name": "Ana", "last_name": "Ruiz", "age": 30, "gender": "F",
            "department_name_1": "Sales", "department_name_2": "Marketing",
        })
        assert result["status"] == 201

    @pytest.mark.asyncio
    async def test_manager_guard_compares_names(self, services, repos):
        manager = await services["managers"].create(
            {"name": "Laura", "field_of_study": "Ing", "shift": "Noche"}
        )
        await repos["departments"].create({"name": "Ventas", "manager_name": "Laura", "area_name": ""})

        with pytest.raises(ConflictError):
            await services["managers"].delete(manager["data"]["id"])

    @pytest.mark.asyncio
    async def test_department_guard_checks_employees_before_manager(self, services, repos):
        department = await repos["departments"].create(
            {"name": "Ventas", "manager_name": "Laura", "area_name": ""}
        )
        await repos["employees"].create({
            "first_name": "Ana", "last_name": "Ruiz", "age": 30, "gender": "F",
            "department_name_1": "", "department_name_2": "", "department_name_3": "Ventas",
        })

        with pytest.raises(ConflictError) as exc_info:
            await services["departments"].delete(department["id"])
        assert exc_info.value.message == "department has assigned employees"

    @pytest.mark.asyncio
    async def test_area_guard_flag(self, repos):
        service = AreaService(repos["areas"], repos["departments"], guard_delete=True)
        area = await service.create({"name": "Norte", "building": "A"})
        await repos["departments"].create({"name": "Ventas", "manager_name": "", "area_name": "Norte"})

        with pytest.raises(ConflictError) as exc_info:
            await service.delete(area["data"]["id"])
        assert exc_info.value.status_code == 409
