from datetime import datetime, timedelta, timezone
import pytest
from fastapi.testclient import TestClient

from app.core.database import get_db
from app.core.security import create_access_token, get_password_hash
from app.main import app

@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

def auth(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}

def booking_body(world, *pairs, days=3):
    return {
        "booking_date": (datetime.now(timezone.utc).date() + timedelta(days=days)).isoformat(),
        "roomslots": [
            {"room_id": world.rooms[r].id, "slot_id": world.slots[s].id} for r, s in pairs
        ],
    }

def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}

def test_register_then_login(client, db_session):
    response = client.post("/api/v1/auth/register", json={
        "full_name": "Lee Lecturer", "email": "lee@example.com", "password": "pw-123", "is_lecturer": True
    })
    assert response.status_code == 200
    assert response.json()["role"] == 2

    response = client.post("/api/v1/auth/login", json={"email": "lee@example.com", "password": "pw-123"})
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "lee@example.com"

    response = client.post("/api/v1/auth/login", json={"email": "lee@example.com", "password": "wrong"})
    assert response.status_code == 401

def test_register_duplicate_email(client, world):
    response = client.post("/api/v1/auth/register", json={
        "full_name": "Copy", "email": world.student.email, "password": "pw"
    })
    assert response.status_code == 400

def test_booking_requires_token(client, world):
    response = client.post("/api/v1/bookings/", json=booking_body(world, (0, 0)))
    assert response.status_code in (401, 403)

def test_bad_token_is_rejected(client, world):
    response = client.get("/api/v1/bookings/history", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401

def test_booking_lifecycle(client, world):
    created = client.post("/api/v1/bookings/", json=booking_body(world, (0, 0)), headers=auth(world.student))
    assert created.status_code == 201
    booking = created.json()
    assert booking["status"] == "Pending"
    assert booking["roomslots"][0]["room"]["code"] == "A101"
    assert booking["roomslots"][0]["slot"]["slot_number"] == 1

    clash = client.post("/api/v1/bookings/", json=booking_body(world, (0, 0)), headers=auth(world.other))
    assert clash.status_code == 409

    other_slot = client.post("/api/v1/bookings/", json=booking_body(world, (0, 1)), headers=auth(world.other))
    assert other_slot.status_code == 201

    assert client.get("/api/v1/bookings/pending", headers=auth(world.student)).status_code == 403
    pending = client.get("/api/v1/bookings/pending", headers=auth(world.manager))
    assert pending.status_code == 200
    assert pending.json()["total_items"] == 2

    url = f"/api/v1/bookings/{booking['id']}"
    assert client.post(f"{url}/approve", headers=auth(world.student)).status_code == 403
    assert client.post(f"{url}/approve", headers=auth(world.manager)).status_code == 200
    assert client.post(f"{url}/approve", headers=auth(world.manager)).status_code == 400
    assert client.post(f"{url}/reject", headers=auth(world.manager)).status_code == 400

    assert client.get(url, headers=auth(world.other)).status_code == 403
    fetched = client.get(url, headers=auth(world.student))
    assert fetched.json()["status"] == "Approved"

    assert client.post(f"{url}/cancel", headers=auth(world.student)).status_code == 200
    assert client.post(f"{url}/cancel", headers=auth(world.student)).status_code == 400

    history = client.get("/api/v1/bookings/history", headers=auth(world.student))
    assert history.json()["items"][0]["status"] == "Canceled"

def test_unknown_booking(client, world):
    response = client.post("/api/v1/bookings/4242/approve", headers=auth(world.manager))
    assert response.status_code == 404

def test_deactivated_user_cannot_book(client, world, db_session):
    world.student.is_active = False
    db_session.commit()

    response = client.post("/api/v1/bookings/", json=booking_body(world, (0, 0)), headers=auth(world.student))
    assert response.status_code == 401

def test_rooms_are_paginated(client, world):
    response = client.get("/api/v1/rooms/", params={"page": 2, "page_size": 2})
    body = response.json()
    assert body["total_items"] == 3
    assert body["total_pages"] == 2
    assert [r["code"] for r in body["items"]] == ["LAB1"]

def test_only_managers_create_campuses(client, world):
    payload = {"name": "North Campus"}
    assert client.post("/api/v1/campuses/", json=payload, headers=auth(world.student)).status_code == 403

    response = client.post("/api/v1/campuses/", json=payload, headers=auth(world.manager))
    assert response.status_code == 201
    assert client.get(f"/api/v1/campuses/{response.json()['id']}").json()["name"] == "North Campus"

def test_slots_are_listed_in_order(client, world):
    response = client.get("/api/v1/slots/")
    assert [s["slot_number"] for s in response.json()] == [1, 2, 3]

def test_manager_lists_users(client, world):
    response = client.get("/api/v1/users/", headers=auth(world.manager))
    assert response.status_code == 200
    assert response.json()["total_items"] == 3
    assert client.get("/api/v1/users/", headers=auth(world.student)).status_code == 403

def test_deactivated_user_cannot_log_in(client, world, db_session):
    world.student.password_hash = get_password_hash("pw-123")
    db_session.commit()
    credentials = {"email": world.student.email, "password": "pw-123"}
    assert client.post("/api/v1/auth/login", json=credentials).status_code == 200

    world.student.is_active = False
    db_session.commit()

    response = client.post("/api/v1/auth/login", json=credentials)
    assert response.status_code == 401
    assert response.json()["detail"] == "User is deactivated."

def test_manager_cannot_deactivate_self_through_update(client, world):
    url = f"/api/v1/users/{world.manager.id}"
    assert client.put(f"{url}/deactivate", headers=auth(world.manager)).status_code == 400

    payload = {
        "full_name": world.manager.full_name, "email": world.manager.email, "role": 3, "is_active": False
    }
    assert client.put(url, json=payload, headers=auth(world.manager)).status_code == 400

    demote = dict(payload, role=1, is_active=True)
    assert client.put(url, json=demote, headers=auth(world.manager)).status_code == 400

    me = client.get("/api/v1/users/me", headers=auth(world.manager))
    assert me.status_code == 200
    assert me.json()["is_active"] is True
    assert me.json()["role"] == 3

def test_manager_can_deactivate_someone_else_through_update(client, world):
    payload = {
        "full_name": world.other.full_name, "email": world.other.email, "role": 2, "is_active": False
    }
    response = client.put(f"/api/v1/users/{world.other.id}", json=payload, headers=auth(world.manager))
    assert response.status_code == 200
    assert response.json()["is_active"] is False
