"""Per-equipment timeline and the recent activity feed."""

from datetime import timedelta

import pytest

from equiptrack.core.timestamps import to_iso, utcnow
from equiptrack.crud.categories import create_category
from equiptrack.crud.equipment import create_equipment
from equiptrack.crud.history import record_location, record_status
from equiptrack.crud.rooms import create_room
from equiptrack.services.timeline import equipment_timeline, merge_events, recent_activities, resolve_range


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


def _ago(**kwargs):
    return to_iso(utcnow() - timedelta(**kwargs))


def test_resolve_range():
    assert resolve_range(None) == timedelta(hours=24)
    assert resolve_range("7D") == timedelta(days=7)
    with pytest.raises(ValueError):
        resolve_range("1y")


def test_merge_is_stable_on_equal_timestamps():
    status = [{"id": "status-2", "created_at": "2024-01-01T00:00:00Z"}]
    location = [
        {"id": "location-5", "created_at": "2024-01-02T00:00:00Z"},
        {"id": "location-4", "created_at": "2024-01-01T00:00:00Z"},
    ]
    merged = merge_events(status, location)
    assert [event["id"] for event in merged] == ["location-5", "status-2", "location-4"]
    assert len(merge_events(status, location, limit=1)) == 1


def test_timeline_event_types_and_window(db_session, item):
    room = create_room(db_session, {"name": "ComLab 1", "building": "Main"})
    record_status(db_session, equipment_id=item.id, status="Working", changed_at=_ago(days=3))
    record_status(
        db_session,
        equipment_id=item.id,
        status="Assigned",
        notes="Faculty reassigned to Prof. Cruz",
        changed_at=_ago(hours=5),
    )
    record_status(db_session, equipment_id=item.id, status="maintenance", notes="Fan", changed_at=_ago(hours=2))
    record_location(db_session, equipment_id=item.id, room_id=room.id, assigned_at=_ago(hours=1))

    day = equipment_timeline(db_session, item.id, "24h")
    assert [event["type"] for event in day] == ["LOCATION", "MAINTENANCE", "FACULTY"]
    assert day[0]["description"] == "Moved to ComLab 1 (Main)"
    assert day[1]["description"] == "Status changed to maintenance: Fan"

    week = equipment_timeline(db_session, item.id, "7d")
    assert [event["type"] for event in week][-1] == "STATUS"
    assert week[-1]["description"] == "Status changed to Working"


def test_recent_activities_across_equipment(db_session, item):
    room = create_room(db_session, {"name": "ComLab 1"})
    record_status(db_session, equipment_id=item.id, status="Working", changed_at=_ago(minutes=30))
    record_location(db_session, equipment_id=item.id, room_id=room.id, assigned_at=_ago(minutes=10))

    activities = recent_activities(db_session, limit=5)
    assert [activity["description"] for activity in activities] == [
        "Dell Optiplex (PC-001) assigned to ComLab 1",
        "Status updated to Working for Dell Optiplex (PC-001)",
    ]
    assert len(recent_activities(db_session, limit=1)) == 1


def test_timeline_api(client, admin_headers, db_session, item):
    record_status(db_session, equipment_id=item.id, status="Working")
    response = client.get(f"/equipment/{item.id}/timeline?range=30d", headers=admin_headers)
    assert response.status_code == 200
    events = response.json()["data"]
    assert events[0]["id"].startswith("status-")
    assert events[0]["createdAt"].endswith("Z")

    bad_range = client.get(f"/equipment/{item.id}/timeline?range=1y", headers=admin_headers)
    assert bad_range.status_code == 400

    assert client.get("/equipment/999/timeline", headers=admin_headers).status_code == 404


def test_recent_activities_api_limit(client, admin_headers):
    assert client.get("/activities/recent", headers=admin_headers).json()["data"] == []
    assert client.get("/activities/recent?limit=0", headers=admin_headers).status_code == 422
