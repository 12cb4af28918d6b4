from equiptrack.crud.categories import create_category
from equiptrack.crud.equipment import create_equipment
from equiptrack.crud.history import record_status
from equiptrack.services.summary import dashboard_stats, equipment_summary, summarize_statuses


def test_summarize_statuses_buckets():
    counts = summarize_statuses(["Assigned", " working ", "ACTIVE", "Maintenance", "defective", "Retired", None])
    assert counts == {
        "total_equipment": 7,
        "active_equipment": 3,
        "maintenance_count": 1,
        "defective_count": 1,
        "assigned_count": 1,
        "available_count": 2,
        "uncategorized_count": 2,
    }


def _make(db_session, category, faculty, serial, status=None):
    item = create_equipment(
        db_session,
        {
            "serial_number": serial,
            "name": f"Item {serial}",
            "category_id": category.id,
            "faculty_id": faculty.id,
            "date_purchased": "2024-01-15T00:00:00Z",
        },
    )
    if status:
        record_status(db_session, equipment_id=item.id, status=status)
    return item


def test_summary_uses_latest_status_only(db_session, faculty_member):
    category = create_category(db_session, {"name": "Computer"})
    first = _make(db_session, category, faculty_member, "PC-001", "Working")
    record_status(db_session, equipment_id=first.id, status="Maintenance", changed_at="2999-01-01T00:00:00Z")
    _make(db_session, category, faculty_member, "PC-002", "Assigned")
    _make(db_session, category, faculty_member, "PC-003")

    summary = equipment_summary(db_session)
    assert summary["total_equipment"] == 3
    assert summary["maintenance_count"] == 1
    assert summary["assigned_count"] == 1
    assert summary["available_count"] == 0
    assert summary["uncategorized_count"] == 1
    assert dashboard_stats(db_session) == {
        "total_equipment": 3,
        "active_equipment": 1,
        "maintenance_count": 1,
    }


def test_summary_and_dashboard_api(client, admin_headers, db_session, faculty_member):
    category = create_category(db_session, {"name": "Computer"})
    _make(db_session, category, faculty_member, "PC-001", "Working")

    summary = client.get("/equipment/summary", headers=admin_headers)
    assert summary.status_code == 200
    assert summary.json()["data"]["availableCount"] == 1
    assert summary.json()["data"]["activeEquipment"] == 1

    stats = client.get("/dashboard/stats", headers=admin_headers).json()["data"]
    assert stats == {"totalEquipment": 1, "activeEquipment": 1, "maintenanceCount": 0}
