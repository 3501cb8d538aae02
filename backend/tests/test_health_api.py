"""
Tests for GET /api/db/health.
"""
from conftest import TEST_API_KEY


def test_health_ok_with_store(client):
    resp = client.get("/api/db/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["openai"] is True
    assert body["supabase"] is False
    assert body["store"] == "memory"
    assert body["persistence"] == {"writes": 0, "failures": 0}
    assert "timestamp" in body
    assert TEST_API_KEY not in resp.text


def test_health_without_store(stateless_client):
    resp = stateless_client.get("/api/db/health")

    assert resp.status_code == 200
    assert resp.json()["ok"] is True
    assert resp.json()["store"] == "none"
    assert resp.json()["persistence"] is None


def test_health_reports_unreachable_store(client, store):
    store.fail_ping = True

    resp = client.get("/api/db/health")

    assert resp.status_code == 503
    body = resp.json()
    assert body["ok"] is False
    assert "connection refused" in body["error"]


def test_health_survives_unexpected_store_error(client, store, monkeypatch):
    async def explode():
        raise ConnectionResetError("socket closed")

    monkeypatch.setattr(store, "ping", explode)

    resp = client.get("/api/db/health")

    assert resp.status_code == 503
    assert resp.json()["ok"] is False


def test_health_counts_persistence_failures(client, store):
    store.fail_appends = True
    client.post(
        "/api/chat",
        json={"messages": [{"role": "user", "content": "Hallo"}], "conversationId": "conv-1"},
    )

    resp = client.get("/api/db/health")

    assert resp.json()["persistence"] == {"writes": 0, "failures": 2}
