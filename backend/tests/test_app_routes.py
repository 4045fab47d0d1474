"""Regression tests for application route registration."""
from fastapi.routing import APIRoute

from studysprint.main import app


def _routes(path: str, method: str) -> list[APIRoute]:
    return [
        route
        for route in app.routes
        if isinstance(route, APIRoute) and route.path == path and method in route.methods
    ]


def test_dashboard_route_registered_once() -> None:
    assert len(_routes("/dashboard", "GET")) == 1


def test_core_routes_registered() -> None:
    expected = [
        ("/settings", "PUT"),
        ("/plans", "POST"),
        ("/plans/{plan_id}/set-active", "POST"),
        ("/plans/{plan_id}/duplicate", "POST"),
        ("/plan/active/generated", "GET"),
        ("/plans/{plan_id}/days/reorder", "POST"),
        ("/days/{day_id}/tasks/reorder", "POST"),
        ("/logs/{date}", "PUT"),
        ("/charts", "GET"),
        ("/export", "GET"),
        ("/import", "POST"),
        ("/reset", "POST"),
    ]
    for path, method in expected:
        assert _routes(path, method), f"{method} {path} is not mounted"
