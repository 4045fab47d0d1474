"""Request helpers shared by the API tests."""
from __future__ import annotations

from typing import Optional

from fastapi.testclient import TestClient


def create_plan(client: TestClient, name: str = "Backend sprint", *, active: bool = False) -> dict:
    response = client.post("/plans", json={"name": name})
    assert response.status_code == 201
    plan = response.json()
    if active:
        activated = client.post(f"/plans/{plan['id']}/set-active")
        assert activated.status_code == 200
        plan = activated.json()
    return plan


def create_day(client: TestClient, plan_id: str, title: str, theme: Optional[str] = None) -> dict:
    response = client.post(f"/plans/{plan_id}/days", json={"title": title, "theme": theme})
    assert response.status_code == 201
    return response.json()


def create_task(
    client: TestClient,
    day_id: str,
    title: str,
    *,
    minutes: int = 30,
    required: bool = False,
    category: str = "Backend",
    tags: Optional[list] = None,
) -> dict:
    response = client.post(
        f"/days/{day_id}/tasks",
        json={
            "title": title,
            "category": category,
            "estimated_minutes": minutes,
            "required": required,
            "tags": tags or [],
        },
    )
    assert response.status_code == 201
    return response.json()
