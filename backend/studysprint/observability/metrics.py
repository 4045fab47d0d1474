"""Lightweight metrics helpers."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, Optional

from studysprint.observability import tracing

logger = logging.getLogger(__name__)


def log_metric(name: str, value: float | int, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Record a metric as a short-lived Opik trace when Opik is enabled."""
    if not tracing.get_opik_client():
        return

    payload: Dict[str, Any] = {"value": value}
    if metadata:
        payload.update(metadata)

    try:
        with tracing.trace(f"metric:{name}", metadata=payload):
            pass
    except Exception as exc:  # pragma: no cover - metrics never break requests
        logger.debug("Unable to record metric %s: %s", name, exc)


def log_latency(name: str, started_at: float, metadata: Optional[Dict[str, Any]] = None) -> float:
    """Emit ``<name>.latency_ms`` measured from a ``perf_counter`` start mark."""
    latency_ms = (perf_counter() - started_at) * 1000
    log_metric(f"{name}.latency_ms", latency_ms, metadata=metadata)
    return latency_ms
