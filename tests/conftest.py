"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from errors import DatabaseConnectionError  # noqa: E402
from services.students import StudentRecordService  # noqa: E402


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    def sort(self, key, direction=1):
        self.docs = sorted(self.docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return self.docs if length is None else self.docs[:length]


class FakeCollection:
    """In-memory stand-in for the handful of Motor collection calls the service makes."""

    def __init__(self):
        self.docs = []
        self.fail_with = None
        self.skip_inserted_id = False

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _match(self, query):
        return [d for d in self.docs if all(d.get(k) == v for k, v in query.items())]

    def find(self, query=None):
        self._check()
        return FakeCursor([dict(d) for d in self._match(query or {})])

    async def insert_one(self, document):
        self._check()
        doc = dict(document)
        doc["_id"] = ObjectId()
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=None if self.skip_inserted_id else doc["_id"])

    async def delete_one(self, query):
        self._check()
        matches = self._match(query)
        if matches:
            self.docs.remove(matches[0])
        return SimpleNamespace(deleted_count=len(matches[:1]))

    async def update_one(self, query, update):
        self._check()
        matches = self._match(query)
        if matches:
            matches[0].update(update["$set"])
        return SimpleNamespace(matched_count=len(matches[:1]), modified_count=len(matches[:1]))


class FakeConnector:
    def __init__(self, collection):
        self.collection = collection
        self.requested = []
        self.unreachable = False

    async def get_handle(self, database_name):
        self.requested.append(database_name)
        if self.unreachable:
            raise DatabaseConnectionError("connection refused")
        return {"alunos": self.collection}


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def connector(collection):
    return FakeConnector(collection)


@pytest.fixture
def service(connector):
    return StudentRecordService(connector, "escola_test")


@pytest.fixture
def storage_failure():
    return ServerSelectionTimeoutError("No servers found yet")


@pytest.fixture
def client(service):
    """Create a test client wired to the in-memory collection"""
    from main import app
    from routes.students import get_student_service

    app.dependency_overrides[get_student_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
