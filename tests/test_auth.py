"""Login, bearer validation and role checks."""

from jose import jwt

from equiptrack.core.security import (
    ALGORITHM,
    AUDIENCE,
    decode_token,
    hash_password,
    issue_access_token,
    verify_password,
)

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, FACULTY_EMPLOYEE_ID, FACULTY_PASSWORD


def test_password_hashing_round_trip():
    hashed = hash_password("correct horse", rounds=4)
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
    assert not verify_password("anything", None)
    assert not verify_password("anything", "not-a-bcrypt-hash")


def test_token_carries_role_and_subject():
    token = issue_access_token(7, "SUPER_ADMIN", name="Admin", email="a@b.c")
    payload = decode_token(token.access_token)
    assert payload.subject_id == 7
    assert payload.role == "SUPER_ADMIN"
    assert payload.email == "a@b.c"
    assert token.expires_in == 3600


def test_decode_rejects_foreign_audience():
    forged = jwt.encode(
        {"sub": "1", "role": "SUPER_ADMIN", "aud": "someone-else", "iss": "equiptrack", "iat": 0, "exp": 4102444800},
        "test-secret",
        algorithm=ALGORITHM,
    )
    try:
        decode_token(forged)
    except ValueError as exc:
        assert str(exc) == "Invalid token"
    else:
        raise AssertionError("token with the wrong audience was accepted")
    assert AUDIENCE == "equiptrack-dashboard"


def test_admin_login_and_me(client, admin):
    response = client.post("/auth/login/admin", json={"email": "ADMIN@lnu.local", "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 3600

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    data = me.json()["data"]
    assert data["role"] == "SUPER_ADMIN"
    assert data["email"] == ADMIN_EMAIL
    assert data["id"] == admin.id


def test_admin_login_with_wrong_password(client, admin):
    response = client.post("/auth/login/admin", json={"email": ADMIN_EMAIL, "password": "not-the-password"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "code": "unauthorized", "message": "Invalid credentials"}


def test_faculty_login_normalises_employee_id(client, faculty_member):
    response = client.post(
        "/auth/login/faculty",
        json={"employeeId": FACULTY_EMPLOYEE_ID.lower(), "password": FACULTY_PASSWORD},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"}).json()["data"]
    assert me["role"] == "USER"
    assert me["employeeId"] == FACULTY_EMPLOYEE_ID


def test_inactive_faculty_cannot_log_in(client, db_session, faculty_member):
    faculty_member.status = "INACTIVE"
    db_session.commit()
    response = client.post(
        "/auth/login/faculty",
        json={"employeeId": FACULTY_EMPLOYEE_ID, "password": FACULTY_PASSWORD},
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Account is inactive"


def test_protected_routes_require_a_bearer_token(client):
    response = client.get("/categories")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"

    response = client.get("/categories", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_faculty_principal_cannot_reach_admin_routes(client, faculty_headers):
    assert client.get("/categories", headers=faculty_headers).status_code == 200
    response = client.get("/users", headers=faculty_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Administrator access required"


def test_login_payload_validation(client):
    response = client.post("/auth/login/admin", json={"email": "admin@lnu.local", "password": "short"})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "validation_error"
    assert body["message"].startswith("password:")


def test_health_is_public(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "ok"
    assert data["timestamp"].endswith("Z")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Request-ID"]

    db_check = client.get("/health/db")
    assert db_check.json()["data"] == {"message": "Database connection successful", "count": 0}


def test_login_response_uses_plain_token_keys(client, admin):
    response = client.post("/auth/login/admin", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert set(response.json()) == {"access_token", "token_type", "expires_in"}
