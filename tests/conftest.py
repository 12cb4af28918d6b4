import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATA_DIR", str(ROOT / "data"))
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from equiptrack.db.session import Base, get_db
from equiptrack.main import app

# Ensure models are registered so metadata tables are created
from equiptrack.models import category as category_model  # noqa: F401
from equiptrack.models import equipment as equipment_model  # noqa: F401
from equiptrack.models import faculty as faculty_model  # noqa: F401
from equiptrack.models import password_request as password_request_model  # noqa: F401
from equiptrack.models import room as room_model  # noqa: F401
from equiptrack.models import user as user_model  # noqa: F401

ADMIN_EMAIL = "admin@lnu.local"
ADMIN_PASSWORD = "admin12345"
FACULTY_EMPLOYEE_ID = "EMP-001"
FACULTY_PASSWORD = "faculty12345"


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def admin(db_session):
    from equiptrack.crud.users import create_admin

    return create_admin(db_session, name="Administrator", email=ADMIN_EMAIL, password=ADMIN_PASSWORD)


@pytest.fixture()
def faculty_member(db_session):
    from equiptrack.crud.faculty import create_faculty

    return create_faculty(
        db_session,
        {
            "name": "Dr. Santos",
            "employee_id": FACULTY_EMPLOYEE_ID,
            "password": FACULTY_PASSWORD,
            "department": "IT",
        },
    )


@pytest.fixture()
def admin_headers(client, admin):
    response = client.post("/auth/login/admin", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def faculty_headers(client, faculty_member):
    response = client.post(
        "/auth/login/faculty",
        json={"employeeId": FACULTY_EMPLOYEE_ID, "password": FACULTY_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
