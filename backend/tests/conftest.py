"""
Children's Church API — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test gets its own JSON document on a temporary path; nothing
       touches the real data file.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── data_file: Path of a not-yet-existing document in tmp_path
    ├── store: JsonDocumentStore on data_file
    ├── seeded_store: store pre-filled with one question and one note
    └── test_client: HTTPX AsyncClient wired to the app with `store` injected
"""

import json
import os
import tempfile
from pathlib import Path

# Override settings for testing BEFORE any church_api imports
os.environ["DATA_FILE"] = str(Path(tempfile.mkdtemp(prefix="church_api_test_")) / "data.json")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from church_api.store import JsonDocumentStore, get_document_store  # noqa: E402


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file) -> JsonDocumentStore:
    return JsonDocumentStore(data_file)


@pytest.fixture
def seeded_document() -> dict:
    """A document as the previous service wrote it."""
    return {
        "qanda_questions": [
            {
                "id": 1700000000000,
                "name": "Sam",
                "text": "Who built the ark?",
                "isRead": False,
                "timestamp": 1700000000000,
            }
        ],
        "scripture_notes": [
            {
                "id": 1700000001000,
                "title": "Creation",
                "verse": "Genesis 1:1",
                "content": "In the beginning...",
                "createdAt": "2023-11-14T22:13:21.000Z",
                "updatedAt": "2023-11-14T22:13:21.000Z",
            }
        ],
    }


@pytest.fixture
def seeded_store(data_file, seeded_document) -> JsonDocumentStore:
    data_file.write_text(json.dumps(seeded_document, indent=2), encoding="utf-8")
    return JsonDocumentStore(data_file)


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from church_api.main import app

    app.dependency_overrides[get_document_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
