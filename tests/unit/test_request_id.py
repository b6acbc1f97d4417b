from __future__ import annotations

import logging

import pytest

from mitrai_chat.api.middleware.correlation_id import resolve_request_id
from mitrai_chat.logging_setup import RequestIdFilter, request_id_ctx


def test_well_formed_id_is_kept():
    assert resolve_request_id("req-42.a_b") == "req-42.a_b"


@pytest.mark.parametrize("raw", [None, "", "two words", "x" * 65, "id\nFAKE LOG LINE"])
def test_missing_or_unsafe_id_is_replaced(raw):
    request_id = resolve_request_id(raw)

    assert request_id != raw
    assert len(request_id) == 32


def test_filter_stamps_current_request_id():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = request_id_ctx.set("req-7")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)

    assert record.request_id == "req-7"


def test_filter_uses_dash_outside_requests():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

    RequestIdFilter().filter(record)

    assert record.request_id == "-"
