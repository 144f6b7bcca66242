"""
tests.test_events

Calendar events: ordering, validation and owner-only updates.
"""

from __future__ import annotations

import uuid

import pytest

FOCUS = {
    "name": "deep work",
    "startTime": "2026-10-20T09:00:00",
    "endTime": "2026-10-20T11:00:00",
    "type": "focus",
}
LUNCH = {
    "name": "lunch with bob",
    "startTime": "2026-10-20T12:00:00+00:00",
    "endTime": "2026-10-20T13:00:00+00:00",
    "type": "social",
}


async def _create(client, payload: dict) -> str:
    r = await client.post("/events", json=payload)
    assert r.status_code == 200, r.text
    return r.json()["event"]["_id"]


@pytest.mark.asyncio
async def test_create_and_list_events_in_start_order(login_as) -> None:
    alice = await login_as("alice")
    r = await alice.post("/events", json=LUNCH)
    assert r.status_code == 200
    event = r.json()["event"]
    assert r.json()["msg"] == "Event successfully created!"
    assert event["owner"] == "alice"
    assert event["type"] == "social"
    assert event["startTime"] == "2026-10-20T12:00:00Z"

    await _create(alice, FOCUS)

    names = [e["name"] for e in (await alice.get("/events")).json()]
    assert names == ["deep work", "lunch with bob"]


@pytest.mark.asyncio
async def test_events_are_private_to_owner(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")
    await _create(alice, FOCUS)
    assert (await bob.get("/events")).json() == []


@pytest.mark.asyncio
async def test_event_validation(login_as) -> None:
    alice = await login_as("alice")

    r = await alice.post("/events", json={**FOCUS, "type": "party"})
    assert r.status_code == 422

    r = await alice.post("/events", json={**FOCUS, "endTime": FOCUS["startTime"]})
    assert r.status_code == 400
    assert r.json()["msg"] == "Event start time must be before its end time!"


@pytest.mark.asyncio
async def test_owner_updates_event(login_as) -> None:
    alice = await login_as("alice")
    event_id = await _create(alice, FOCUS)

    r = await alice.patch(f"/events/{event_id}", json={"name": "deeper work", "type": "social"})
    assert r.status_code == 200
    assert r.json() == {"msg": "Event successfully updated!"}

    # Moving only the start past the stored end is rejected.
    r = await alice.patch(f"/events/{event_id}", json={"startTime": "2026-10-20T12:00:00"})
    assert r.status_code == 400

    r = await alice.patch(
        f"/events/{event_id}",
        json={"startTime": "2026-10-20T12:00:00", "endTime": "2026-10-20T14:00:00"},
    )
    assert r.status_code == 200

    [event] = (await alice.get("/events")).json()
    assert event["name"] == "deeper work"
    assert event["type"] == "social"
    assert event["startTime"] == "2026-10-20T12:00:00Z"
    assert event["endTime"] == "2026-10-20T14:00:00Z"


@pytest.mark.asyncio
async def test_non_owner_cannot_mutate_event(login_as) -> None:
    alice = await login_as("alice")
    mallory = await login_as("mallory")
    event_id = await _create(alice, FOCUS)

    r = await mallory.patch(f"/events/{event_id}", json={"name": "cancelled"})
    assert r.status_code == 403
    assert "is not the owner of event" in r.json()["msg"]

    r = await mallory.delete(f"/events/{event_id}")
    assert r.status_code == 403

    assert [e["name"] for e in (await alice.get("/events")).json()] == ["deep work"]


@pytest.mark.asyncio
async def test_owner_deletes_event(login_as) -> None:
    alice = await login_as("alice")
    event_id = await _create(alice, FOCUS)

    r = await alice.delete(f"/events/{event_id}")
    assert r.status_code == 200
    assert r.json() == {"msg": "Event deleted successfully!"}
    assert (await alice.get("/events")).json() == []

    r = await alice.delete(f"/events/{uuid.uuid4()}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_event_times_carry_utc_offset(login_as) -> None:
    alice = await login_as("alice")
    await _create(alice, FOCUS)
    [event] = (await alice.get("/events")).json()
    assert event["startTime"] == "2026-10-20T09:00:00Z"
    assert event["endTime"] == "2026-10-20T11:00:00Z"
    assert event["dateCreated"].endswith("Z")
