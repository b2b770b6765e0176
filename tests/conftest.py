"""Shared fixtures: a MagicMock standing in for the pymongo Database."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.db import get_db
from app.main import create_app



@pytest.fixture
def mock_db():
    """Database mock; each collection name maps to its own stable MagicMock."""
    collections = {}
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections.setdefault(name, MagicMock(name=name))
    db.collections = collections
    return db


@pytest.fixture
def client(mock_db):
    """TestClient with get_db overridden by the mock database."""
    app = create_app()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def oid():
    return ObjectId.from_datetime(datetime(2023, 3, 1, 8, 30, tzinfo=timezone.utc))


@pytest.fixture
def set_find_result():
    """Wire collection.find(...).sort(...).skip(...).limit(...) to return docs."""

    def _set(collection, docs):
        collection.find.return_value.sort.return_value.skip.return_value.limit.return_value = list(docs)

    return _set
