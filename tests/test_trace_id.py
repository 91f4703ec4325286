import uuid

import pytest

from app.navguard.middleware.trace import resolve_trace_id


def test_plain_trace_id_is_kept():
    assert resolve_trace_id("req-42:retry.1") == "req-42:retry.1"


@pytest.mark.parametrize("raw", [None, "", "has space", "x" * 129, "line\nbreak", '{"json": 1}'])
def test_unusable_trace_id_is_replaced(raw):
    trace_id = resolve_trace_id(raw)

    assert trace_id != raw
    assert uuid.UUID(trace_id).version == 4


def test_unusable_header_gets_fresh_id_in_body_and_header(client):
    response = client.get("/navguard/navigation", headers={"X-Trace-ID": "bad trace id"})

    trace_id = response.headers["X-Trace-ID"]
    assert trace_id != "bad trace id"
    assert response.json()["trace_id"] == trace_id
