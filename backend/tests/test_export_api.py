from __future__ import annotations

from helpers import create_day, create_plan, create_task

from studysprint.core.config import settings as app_settings


def _seed(test_client) -> dict:
    test_client.put("/settings", json={"start_date": "2024-01-01", "weekly_goal_applications": 15})
    plan = create_plan(test_client, "Exported", active=True)
    day = create_day(test_client, plan["id"], "Day one", theme="sql")
    task = create_task(test_client, day["id"], "Joins", minutes=40, required=True, category="SQL/DB", tags=["sql"])
    create_plan(test_client, "Spare")
    test_client.put(
        "/logs/2024-01-01",
        json={"completed_task_ids": [task["id"]], "hours_spent": 2, "reflection_text": "solid"},
    )
    return {"plan": plan, "day": day, "task": task}


def test_export_contains_plans_settings_and_logs(client):
    test_client, _ = client
    seeded = _seed(test_client)

    resp = test_client.get("/export")

    assert resp.status_code == 200
    document = resp.json()
    assert document["version"] == app_settings.export_version
    assert document["exported_at"]
    assert document["settings"]["weekly_goal_applications"] == 15
    by_name = {plan["name"]: plan for plan in document["plans"]}
    assert set(by_name) == {"Exported", "Spare"}
    exported_task = by_name["Exported"]["days"][0]["tasks"][0]
    assert exported_task["id"] == seeded["task"]["id"]
    assert exported_task["tags"] == ["sql"]
    assert document["logs"][0]["completed_task_ids"] == [seeded["task"]["id"]]


def test_import_round_trip_remaps_task_ids(client):
    test_client, _ = client
    seeded = _seed(test_client)
    document = test_client.get("/export").json()
    assert test_client.post("/reset").status_code == 200

    resp = test_client.post("/import", json=document)

    assert resp.status_code == 200
    counts = resp.json()
    assert (counts["plans_imported"], counts["days_imported"], counts["tasks_imported"], counts["logs_imported"]) == (
        2,
        1,
        1,
        1,
    )

    plans = {plan["name"]: plan for plan in test_client.get("/plans").json()}
    assert plans["Exported"]["is_active"] is True
    assert plans["Spare"]["is_active"] is False
    new_task = test_client.get(f"/plans/{plans['Exported']['id']}/days").json()[0]["tasks"][0]
    assert new_task["id"] != seeded["task"]["id"]

    log = test_client.get("/logs/2024-01-01").json()
    assert log["completed_task_ids"] == [new_task["id"]]
    assert log["reflection_text"] == "solid"
    assert test_client.get("/settings").json()["weekly_goal_applications"] == 15

    generated = test_client.get("/plan/active/generated").json()
    assert generated["days"][0]["progress"]["percent"] == 100


def test_import_replaces_existing_data(client):
    test_client, _ = client
    _seed(test_client)

    resp = test_client.post(
        "/import",
        json={"version": "1.0.0", "exported_at": "2024-02-01T10:00:00Z", "plans": [], "logs": []},
    )

    assert resp.status_code == 200
    assert test_client.get("/plans").json() == []
    assert test_client.get("/logs").json() == []


def test_import_keeps_only_first_active_plan(client):
    test_client, _ = client
    document = {
        "version": "1.0.0",
        "exported_at": "2024-02-01T10:00:00Z",
        "plans": [
            {"name": "One", "is_active": True, "days": []},
            {"name": "Two", "is_active": True, "days": []},
        ],
    }

    assert test_client.post("/import", json=document).status_code == 200

    active = {plan["name"]: plan["is_active"] for plan in test_client.get("/plans").json()}
    assert active == {"One": True, "Two": False}


def test_import_rejects_inconsistent_documents(client):
    test_client, _ = client
    _seed(test_client)
    duplicate_logs = {
        "version": "1.0.0",
        "exported_at": "2024-02-01T10:00:00Z",
        "logs": [{"date": "2024-01-01"}, {"date": "2024-01-01"}],
    }
    duplicate_days = {
        "version": "1.0.0",
        "exported_at": "2024-02-01T10:00:00Z",
        "plans": [{"name": "Bad", "days": [{"day_index": 1, "title": "a"}, {"day_index": 1, "title": "b"}]}],
    }

    assert test_client.post("/import", json=duplicate_logs).status_code == 422
    assert test_client.post("/import", json=duplicate_days).status_code == 422
    assert {plan["name"] for plan in test_client.get("/plans").json()} == {"Exported", "Spare"}


def test_reset_clears_data_and_restores_settings(client):
    test_client, _ = client
    _seed(test_client)

    resp = test_client.post("/reset")

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert test_client.get("/plans").json() == []
    assert test_client.get("/logs").json() == []
    restored = test_client.get("/settings").json()
    assert restored["weekly_goal_applications"] == 10
    assert restored["start_date"] == "2024-01-01"
