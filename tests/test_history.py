import pytest

from equiptrack.crud.categories import create_category
from equiptrack.crud.equipment import create_equipment
from equiptrack.crud.history import list_status_entries, record_location, record_status
from equiptrack.crud.rooms import create_room


@pytest.fixture()
def item(db_session, faculty_member):
    category = create_category(db_session, {"name": "Computer"})
    return create_equipment(
        db_session,
        {
            "serial_number": "PC-001",
            "name": "Dell Optiplex",
            "category_id": category.id,
            "faculty_id": faculty_member.id,
            "date_purchased": "2024-01-15T00:00:00Z",
        },
    )


@pytest.fixture()
def room(db_session):
    return create_room(db_session, {"name": "ComLab 1", "building": "Main", "floor": "2"})


def test_status_entries_newest_first_with_id_tiebreak(db_session, item):
    first = record_status(db_session, equipment_id=item.id, status="Working", changed_at="2024-02-01T00:00:00Z")
    second = record_status(db_session, equipment_id=item.id, status="Assigned", changed_at="2024-02-01T00:00:00Z")
    latest = record_status(db_session, equipment_id=item.id, status="Defective", changed_at="2024-03-01T00:00:00Z")
    assert [entry.id for entry in list_status_entries(db_session, item.id)] == [latest.id, second.id, first.id]


def test_status_requires_existing_user(db_session, item):
    with pytest.raises(ValueError) as excinfo:
        record_status(db_session, equipment_id=item.id, status="Working", changed_by_id=42)
    assert str(excinfo.value) == "User with ID 42 does not exist"


def test_location_rejects_same_room_twice(db_session, item, room):
    record_location(db_session, equipment_id=item.id, room_id=room.id)
    with pytest.raises(ValueError) as excinfo:
        record_location(db_session, equipment_id=item.id, room_id=room.id)
    assert str(excinfo.value) == f"Equipment {item.id} is already assigned to room {room.id}"


def test_status_api_defaults_changed_by_to_admin(client, admin_headers, admin, item):
    response = client.post(
        "/status-history",
        json={"equipmentId": item.id, "status": "Maintenance", "notes": "Fan replaced"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    entry = response.json()["data"]
    assert entry["changedById"] == admin.id
    assert entry["changedBy"]["email"] == admin.email
    assert entry["changedAt"].endswith("Z")

    listing = client.get(f"/status-history/equipment/{item.id}", headers=admin_headers).json()["data"]
    assert [row["status"] for row in listing] == ["Maintenance"]

    equipment = client.get(f"/equipment/{item.id}", headers=admin_headers).json()["data"]
    assert equipment["currentStatus"]["status"] == "Maintenance"


def test_status_api_from_faculty_leaves_changed_by_empty(client, faculty_headers, item):
    response = client.post(
        "/status-history",
        json={"equipmentId": item.id, "status": "Defective"},
        headers=faculty_headers,
    )
    assert response.status_code == 201
    assert response.json()["data"]["changedById"] is None


def test_status_api_errors(client, admin_headers, item):
    missing = client.post("/status-history", json={"equipmentId": 999, "status": "Working"}, headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Equipment with ID 999 not found"

    bad_user = client.post(
        "/status-history",
        json={"equipmentId": item.id, "status": "Working", "changedById": 77},
        headers=admin_headers,
    )
    assert bad_user.status_code == 400

    assert client.get("/status-history/equipment/999", headers=admin_headers).status_code == 404


def test_location_api(client, admin_headers, admin, item, room):
    response = client.post(
        "/location-history",
        json={"equipmentId": item.id, "roomId": room.id},
        headers=admin_headers,
    )
    assert response.status_code == 201
    entry = response.json()["data"]
    assert entry["room"]["name"] == "ComLab 1"
    assert entry["assignedById"] == admin.id

    again = client.post("/location-history", json={"equipmentId": item.id, "roomId": room.id}, headers=admin_headers)
    assert again.status_code == 400
    assert again.json()["message"] == f"Equipment {item.id} is already assigned to room {room.id}"

    no_room = client.post("/location-history", json={"equipmentId": item.id, "roomId": 999}, headers=admin_headers)
    assert no_room.status_code == 404
    assert no_room.json()["message"] == "Room with ID 999 not found"

    listing = client.get(f"/location-history/equipment/{item.id}", headers=admin_headers).json()["data"]
    assert [row["roomId"] for row in listing] == [room.id]

    equipment = client.get(f"/equipment/{item.id}", headers=admin_headers).json()["data"]
    assert equipment["currentRoom"]["name"] == "ComLab 1"
