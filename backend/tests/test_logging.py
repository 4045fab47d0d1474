from __future__ import annotations

import logging

from studysprint.core.context import request_id_ctx_var, user_id_ctx_var
from studysprint.core.logging import RequestContextFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("studysprint.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_uses_placeholders_outside_requests() -> None:
    record = _record()

    assert RequestContextFilter().filter(record) is True
    assert record.request_id == "-"
    assert record.user_id == "-"


def test_filter_stamps_current_request_and_user() -> None:
    request_token = request_id_ctx_var.set("req-7")
    user_token = user_id_ctx_var.set("user-7")
    try:
        record = _record()
        RequestContextFilter().filter(record)
    finally:
        user_id_ctx_var.reset(user_token)
        request_id_ctx_var.reset(request_token)

    assert record.request_id == "req-7"
    assert record.user_id == "user-7"
