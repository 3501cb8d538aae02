"""
Tests for POST /api/auth/register.
"""
import bcrypt
import pytest


def register(client, **overrides):
    payload = {"name": "Anna", "email": "anna@example.com", "password": "geheim123"}
    payload.update(overrides)
    return client.post("/api/auth/register", json=payload)


def test_register_creates_user(client, store):
    resp = register(client)

    assert resp.status_code == 201
    body = resp.json()
    assert set(body) == {"userId", "name", "email"}
    assert body["name"] == "Anna"
    assert body["email"] == "anna@example.com"
    assert len(store.users) == 1
    assert store.users[0].id == body["userId"]


def test_register_hashes_password(client, store):
    register(client)

    stored = store.users[0].password_hash
    assert stored != "geheim123"
    assert bcrypt.checkpw(b"geheim123", stored.encode("utf-8"))
    assert "geheim123" not in register(client, email="other@example.com").text


def test_register_duplicate_email_conflicts(client, store):
    assert register(client).status_code == 201

    resp = register(client, name="Anna B.", email="  Anna@Example.com ")

    assert resp.status_code == 409
    assert resp.json()["error"] == "Conflict"
    assert len(store.users) == 1


@pytest.mark.parametrize("missing", ["name", "email", "password"])
def test_register_requires_all_fields(client, store, missing):
    payload = {"name": "Anna", "email": "anna@example.com", "password": "geheim123"}
    del payload[missing]

    resp = client.post("/api/auth/register", json=payload)

    assert resp.status_code == 400
    assert store.users == []


def test_register_rejects_blank_name(client, store):
    resp = register(client, name="   ")

    assert resp.status_code == 400
    assert store.users == []


def test_register_without_store(stateless_client):
    assert register(stateless_client).status_code == 503


def test_register_rejects_password_over_bcrypt_limit(client, store):
    resp = register(client, password="x" * 80)

    assert resp.status_code == 400
    assert "72 bytes" in resp.json()["message"]
    assert store.users == []


def test_register_accepts_password_at_bcrypt_limit(client, store):
    # 36 two-byte characters fill the 72 byte limit exactly
    resp = register(client, password="ä" * 36)

    assert resp.status_code == 201
    assert len(store.users) == 1
