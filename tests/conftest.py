"""
Test configuration and fixtures for pytest.

The API runs against an in-memory stand-in for the motor database so the
suite needs no MongoDB server. Only the collection methods the repositories
call are provided.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from staff_api.config import settings
from staff_api.database import Database
from staff_api.main import app

API = settings.API_PREFIX


def _matches(document, filter_query):
    for key, condition in filter_query.items():
        if key == "$or":
            if not any(_matches(document, sub) for sub in condition):
                return False
            continue

        value = document.get(key)
        if isinstance(condition, dict):
            if "$in" in condition and value not in condition["$in"]:
                return False
            if "$ne" in condition and value == condition["$ne"]:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    """Subset of AsyncIOMotorCursor: skip, limit, to_list."""

    def __init__(self, documents):
        self._documents = documents

    def skip(self, count):
        self._documents = self._documents[count:]
        return self

    def limit(self, count):
        if count:
            self._documents = self._documents[:count]
        return self

    async def to_list(self, length=None):
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """Subset of AsyncIOMotorCollection backed by a list."""

    def __init__(self, name):
        self.name = name
        self.documents = []

    def _find(self, filter_query):
        return [doc for doc in self.documents if _matches(doc, filter_query)]

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, filter_query):
        found = self._find(filter_query)
        return copy.deepcopy(found[0]) if found else None

    def find(self, filter_query):
        return FakeCursor([copy.deepcopy(doc) for doc in self._find(filter_query)])

    async def count_documents(self, filter_query):
        return len(self._find(filter_query))

    async def find_one_and_update(self, filter_query, update, return_document=None):
        found = self._find(filter_query)
        if not found:
            return None
        found[0].update(update.get("$set", {}))
        return copy.deepcopy(found[0])

    async def find_one_and_delete(self, filter_query):
        found = self._find(filter_query)
        if not found:
            return None
        self.documents.remove(found[0])
        return copy.deepcopy(found[0])


class FakeDatabase:
    """Subset of AsyncIOMotorDatabase: item access and ping."""

    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name):
        return {"ok": 1.0}


@pytest.fixture
def fake_db():
    """Install an empty in-memory database for the duration of a test."""
    db = FakeDatabase()
    Database.db = db
    yield db
    Database.db = None


@pytest.fixture
def client(fake_db):
    """HTTP client for API testing (lifespan is not run)."""
    return TestClient(app)


@pytest.fixture
def api(client):
    """Helpers creating records through the API."""

    class Api:
        def create(self, resource, payload):
            response = client.post(f"{API}/{resource}", json=payload)
            assert response.status_code == 201, response.text
            return response.json()["data"]

        def area(self, name="Planta Norte", building="Edificio A"):
            return self.create("areas", {"name": name, "building": building})

        def manager(self, name="Laura Gomez", field_of_study="Ingenieria", shift="Mañana"):
            return self.create("encargados", {"name": name, "fieldOfStudy": field_of_study, "shift": shift})

        def department(self, name="Ventas", area_name="Planta Norte", manager_name=""):
            return self.create(
                "departamentos",
                {"name": name, "areaName": area_name, "managerName": manager_name}
            )

        def employee(self, *departments, first_name="Ana", last_name="Ruiz", age=30, gender="F"):
            payload = {"firstName": first_name, "lastName": last_name, "age": age, "gender": gender}
            for slot, department in enumerate(departments, start=1):
                payload[f"departmentName{slot}"] = department
            return self.create("empleados", payload)

    return Api()
