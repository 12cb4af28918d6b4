import pytest

from equiptrack.core.errors import DuplicateError
from equiptrack.core.security import verify_password
from equiptrack.crud.faculty import create_faculty, get_faculty_by_employee_id, update_faculty
from equiptrack.crud.password_requests import submit_request


def test_employee_id_is_normalised(db_session):
    faculty = create_faculty(
        db_session,
        {"name": "Prof. Cruz", "employee_id": " emp-002 ", "password": "secret-pass", "status": "inactive"},
    )
    assert faculty.employee_id == "EMP-002"
    assert faculty.status == "INACTIVE"
    assert get_faculty_by_employee_id(db_session, "emp-002").id == faculty.id


def test_duplicate_employee_id(db_session, faculty_member):
    with pytest.raises(DuplicateError):
        create_faculty(db_session, {"name": "Someone", "employee_id": "emp-001", "password": "secret-pass"})


def test_update_rehashes_password(db_session, faculty_member):
    old_hash = faculty_member.password_hash
    updated = update_faculty(db_session, faculty_member, {"password": "brand-new-pass", "department": None})
    assert updated.password_hash != old_hash
    assert verify_password("brand-new-pass", updated.password_hash)
    assert updated.department is None


def test_faculty_api_crud(client, admin_headers):
    created = client.post(
        "/faculty",
        json={"name": "Dr. Reyes", "employeeId": "emp-100", "password": "secret-pass", "department": "Math"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    data = created.json()["data"]
    assert data["employeeId"] == "EMP-100"
    assert data["status"] == "ACTIVE"
    assert "password" not in data and "passwordHash" not in data

    # Both mount points serve the same handlers.
    assert client.get(f"/faculties/{data['id']}", headers=admin_headers).json()["data"]["name"] == "Dr. Reyes"

    put = client.put(f"/faculty/{data['id']}", json={"status": "inactive"}, headers=admin_headers)
    assert put.json()["data"]["status"] == "INACTIVE"

    bad_status = client.patch(f"/faculty/{data['id']}", json={"status": "RETIRED"}, headers=admin_headers)
    assert bad_status.status_code == 422

    missing = client.get("/faculty/999", headers=admin_headers)
    assert missing.json()["message"] == "Faculty with ID 999 not found"


def test_reset_password_endpoint(client, admin_headers, faculty_member):
    response = client.patch(
        f"/faculty/{faculty_member.id}/reset-password",
        json={"password": "reset-pass-1"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    login = client.post("/auth/login/faculty", json={"employeeId": "EMP-001", "password": "reset-pass-1"})
    assert login.status_code == 200


def test_deleting_faculty_removes_their_reset_requests(client, admin_headers, db_session, faculty_member):
    submit_request(db_session, faculty_member.employee_id)
    response = client.delete(f"/faculty/{faculty_member.id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["employeeId"] == "EMP-001"
    requests = client.get("/password-requests", headers=admin_headers).json()["data"]
    assert requests == []


def test_faculty_owning_equipment_cannot_be_deleted(client, admin_headers, db_session, faculty_member):
    from equiptrack.crud.categories import create_category
    from equiptrack.crud.equipment import create_equipment

    category = create_category(db_session, {"name": "Computer"})
    create_equipment(
        db_session,
        {
            "serial_number": "PC-001",
            "name": "Dell Optiplex",
            "category_id": category.id,
            "faculty_id": faculty_member.id,
            "date_purchased": "2024-01-15T00:00:00Z",
        },
    )

    response = client.delete(f"/faculty/{faculty_member.id}", headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete this faculty because it is referenced by other records"
    assert client.get(f"/faculty/{faculty_member.id}", headers=admin_headers).status_code == 200
