"""Tests for metrics helpers."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict

import pytest

from studysprint.observability import metrics
from studysprint.observability import tracing


class _DummyTrace:
    def __init__(self, name: str, metadata: Dict[str, Any]):
        self.name = name
        self.metadata = metadata
        self.ended = False

    def update(self, **kwargs) -> None:
        self.metadata.update(kwargs)

    def end(self) -> None:
        self.ended = True


class _DummyClient:
    def __init__(self):
        self.traces: list[_DummyTrace] = []

    def trace(self, name: str, metadata: Dict[str, Any] | None = None):
        trace = _DummyTrace(name, metadata or {})
        self.traces.append(trace)
        return trace


def test_log_metric_closes_trace(monkeypatch) -> None:
    dummy_client = _DummyClient()
    monkeypatch.setattr(tracing, "get_opik_client", lambda: dummy_client)

    metrics.log_metric("streak", 4, metadata={"user_id": "u-1"})

    assert dummy_client.traces, "Metric call should record a trace"
    assert dummy_client.traces[0].name == "metric:streak"
    assert dummy_client.traces[0].metadata["value"] == 4
    assert dummy_client.traces[0].metadata["user_id"] == "u-1"
    assert dummy_client.traces[0].ended is True


def test_log_metric_is_noop_without_client(monkeypatch) -> None:
    monkeypatch.setattr(tracing, "get_opik_client", lambda: None)

    metrics.log_metric("streak", 1)


def test_log_latency_reports_milliseconds(monkeypatch) -> None:
    dummy_client = _DummyClient()
    monkeypatch.setattr(tracing, "get_opik_client", lambda: dummy_client)

    latency = metrics.log_latency("dashboard.get", perf_counter())

    assert latency >= 0
    assert dummy_client.traces[0].name == "metric:dashboard.get.latency_ms"


def test_trace_drops_empty_metadata_and_reraises(monkeypatch) -> None:
    dummy_client = _DummyClient()
    monkeypatch.setattr(tracing, "get_opik_client", lambda: dummy_client)

    class _Boom(RuntimeError):
        pass

    with pytest.raises(_Boom):
        with tracing.trace("plan.create", metadata={"route": "/plans", "plan_id": None}, request_id="req-1"):
            raise _Boom("nope")

    recorded = dummy_client.traces[0]
    assert recorded.metadata["route"] == "/plans"
    assert recorded.metadata["request_id"] == "req-1"
    assert "plan_id" not in recorded.metadata
    assert recorded.metadata["error_info"]["exception_type"] == "_Boom"
    assert recorded.ended is True


def test_trace_logs_client_errors_below_warning(monkeypatch, caplog) -> None:
    from fastapi import HTTPException

    monkeypatch.setattr(tracing, "get_opik_client", lambda: None)
    caplog.set_level(logging.DEBUG, logger=tracing.__name__)

    with pytest.raises(HTTPException):
        with tracing.trace("task.get"):
            raise HTTPException(status_code=404, detail="Task not found")
    with pytest.raises(RuntimeError):
        with tracing.trace("task.update"):
            raise RuntimeError("database went away")

    warnings = [record.getMessage() for record in caplog.records if record.levelno >= logging.WARNING]
    assert warnings == ["task.update failed: database went away"]
    assert any("HTTP 404" in record.getMessage() for record in caplog.records if record.levelno == logging.DEBUG)
