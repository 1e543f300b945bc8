import json

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_index_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert 'id="compare-button"' in response.text
    assert "/api/diff/render" in response.text


def test_compare(client):
    response = client.post("/api/diff/compare", json={"text1": "foo bar", "text2": "foo baz"})

    assert response.status_code == 200
    body = response.json()
    assert body["algorithm"] == "hirschberg"
    assert body["identical"] is False
    assert body["operations"] == [
        {"operation": "equal", "text": "foo "},
        {"operation": "delete", "text": "bar"},
        {"operation": "insert", "text": "baz"},
    ]


def test_compare_with_algorithm_override(client):
    response = client.post(
        "/api/diff/compare",
        json={"text1": "a b", "text2": "b a", "algorithm": "candidates"},
    )

    assert response.status_code == 200
    assert response.json()["algorithm"] == "candidates"


def test_compare_unknown_algorithm_is_rejected(client):
    response = client.post(
        "/api/diff/compare", json={"text1": "a", "text2": "b", "algorithm": "myers"}
    )

    assert response.status_code == 422


def test_render_escapes_markup(client):
    response = client.post("/api/diff/render", json={"text1": "x", "text2": "<b>x</b>"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] is None
    assert "&lt;" in body["inserted_html"]
    assert "<b>" not in body["html"]


def test_render_identical(client):
    response = client.post("/api/diff/render", json={"text1": "same", "text2": "same"})

    assert response.json()["message"] == "Strings are identical."


def test_engine_failure_is_reported_generically(client, monkeypatch):
    from services.diff_generator import DiffGenerator

    def explode(self, text1, text2):
        raise MemoryError

    monkeypatch.setattr(DiffGenerator, "generate_diff", explode)
    response = client.post("/api/diff/compare", json={"text1": "a", "text2": "b"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Could not compute differences"


# Both streaming tests share one client (one event loop) for the SSE app status.
@pytest.fixture(scope="module")
def stream_client():
    with TestClient(app) as test_client:
        yield test_client


def _stream_events(client, payload):
    response = client.post("/api/diff/stream", json=payload)
    assert response.status_code == 200
    return [
        json.loads(line[len("data:"):].strip())
        for line in response.text.splitlines()
        if line.startswith("data:")
    ]


def test_stream_emits_operations_then_done(stream_client):
    events = _stream_events(stream_client, {"text1": "a b", "text2": "a c"})

    assert [e["type"] for e in events] == ["operation", "operation", "operation", "done"]
    assert events[0]["operation"] == {"operation": "equal", "text": "a "}
    assert events[-1]["stats"]["lcs_length"] == 2


def test_stream_reports_engine_failure_as_error_event(stream_client, monkeypatch):
    from services.diff_generator import DiffGenerator

    def explode(self, text1, text2):
        raise RuntimeError("boom")

    monkeypatch.setattr(DiffGenerator, "generate_diff", explode)
    events = _stream_events(stream_client, {"text1": "a", "text2": "b"})

    assert events == [
        {
            "type": "error",
            "operation": None,
            "elapsed_ms": None,
            "stats": None,
            "error": "Could not compute differences",
        }
    ]


def test_config_roundtrip(client):
    response = client.get("/api/config")
    assert response.status_code == 200
    assert response.json()["engine"]["algorithm"] == "hirschberg"

    response = client.put("/api/config", json={"engine": {"algorithm": "candidates"}})
    assert response.status_code == 200

    response = client.post("/api/diff/compare", json={"text1": "a", "text2": "b"})
    assert response.json()["algorithm"] == "candidates"


def test_config_update_rejects_invalid_engine(client):
    response = client.put("/api/config", json={"engine": {"algorithm": "nope"}})

    assert response.status_code == 422
    assert client.get("/api/config").json()["engine"]["algorithm"] == "hirschberg"


def test_config_update_parses_boolean_strings(client):
    response = client.put("/api/config", json={"engine": {"trimAffixes": "false"}})
    assert response.status_code == 200

    engine = client.get("/api/config").json()["engine"]
    assert engine["trimAffixes"] is False
    # Fields not sent keep their stored values.
    assert engine["algorithm"] == "hirschberg"


def test_config_update_rejects_non_boolean_trim(client):
    response = client.put("/api/config", json={"engine": {"trimAffixes": "sometimes"}})

    assert response.status_code == 422
    assert client.get("/api/config").json()["engine"]["trimAffixes"] is True


def test_malformed_stored_engine_section_falls_back_to_defaults(client, isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(json.dumps({"engine": "candidates"}))

    response = client.post("/api/diff/compare", json={"text1": "a", "text2": "b"})

    assert response.status_code == 200
    assert response.json()["algorithm"] == "hirschberg"


def test_invalid_stored_engine_values_are_a_client_error(client, isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(json.dumps({"engine": {"maxWorkers": 0}}))

    response = client.post("/api/diff/compare", json={"text1": "a", "text2": "b"})

    assert response.status_code == 400
    assert "Invalid engine configuration" in response.json()["detail"]
