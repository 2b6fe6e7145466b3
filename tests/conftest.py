"""Shared pytest fixtures.

Fixture overview
----------------
memory_store         - empty in-memory key-value store
sample_applications  - three stored applications across two courses
seeded_store         - memory store holding ``sample_applications``
app / client         - the Flask app bound to an in-memory SQLite database
db_store             - the app's database-backed store (needs ``app``)
"""

from __future__ import annotations

import json
import os

# Must be set before ``app`` is imported: Config reads it at import time.
os.environ["DATABASE_URI"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest

from app import app as flask_app
from models.models import db
from services.storage import DatabaseStore, MemoryStore


class FakeUpload:
    """Stands in for a werkzeug FileStorage; only the filename is ever used."""

    def __init__(self, filename: str) -> None:
        self.filename = filename


@pytest.fixture
def valid_form() -> dict:
    return {
        "name": "Jane Q Doe",
        "dateOfBirth": "2004-05-17",
        "email": "jane.doe@example.com",
        "contactNumber": "(555) 123-4567",
        "selectedCourse": "Data Science",
    }


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def sample_applications() -> list[dict]:
    return [
        {
            "id": 1,
            "name": "A",
            "dateOfBirth": "2001-01-01",
            "email": "a@x.com",
            "contactNumber": "5551234567",
            "selectedCourse": "Data Science",
            "photo": "",
            "documents": "",
            "submittedAt": "2024-03-15T12:00:00.000Z",
        },
        {
            "id": 2,
            "name": "Bob Builder",
            "dateOfBirth": "2002-02-02",
            "email": "bob@example.org",
            "contactNumber": "5559876543",
            "selectedCourse": "Business Administration",
            "photo": "bob.png",
            "documents": "transcript.pdf",
            "submittedAt": "2024-04-01T12:00:00.000Z",
        },
        {
            "id": 3,
            "name": "Carla Diaz",
            "dateOfBirth": "2003-03-03",
            "email": "carla@example.org",
            "contactNumber": "5550001111",
            "selectedCourse": "Data Science",
            "photo": "",
            "documents": "",
            "submittedAt": "2024-05-20T12:00:00.000Z",
        },
    ]


@pytest.fixture
def seeded_store(sample_applications) -> MemoryStore:
    return MemoryStore({"studentApplications": json.dumps(sample_applications)})


# ── Flask app ────────────────────────────────────────────────────────────────


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_store(app) -> DatabaseStore:
    return app.extensions["kv_store"]
