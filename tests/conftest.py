import itertools
import os

# Settings are read once, on first import of the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"
os.environ["TIMEZONE"] = "UTC"

import pytest
from fastapi.testclient import TestClient

from academix.infrastructure.database import Base, SessionLocal, engine
from academix.main import app


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    # Not used as a context manager: the schema is managed by the database fixture
    return TestClient(app)


@pytest.fixture
def register_user(client):
    """Register a user through the API and return (body, auth headers)."""
    counter = itertools.count(1)

    def _register(role="Student", **overrides):
        n = next(counter)
        payload = {
            "name": f"User {n}",
            "email": f"user{n}@academix.edu",
            "password": "secret123",
            "role": role,
        }
        if role == "Student":
            payload["studentId"] = f"S{n:03d}"
        payload.update(overrides)
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return body, {"Authorization": f"Bearer {body['token']}"}

    return _register


@pytest.fixture
def coordinator(register_user):
    return register_user("Club Coordinator", name="Coral Coordinator")


@pytest.fixture
def student(register_user):
    return register_user("Student", name="Sam Student", studentId="S100")


@pytest.fixture
def create_club(client):
    def _create(headers, name="Chess Club", description="Weekly games"):
        response = client.post(
            "/api/clubs", json={"name": name, "description": description}, headers=headers
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
