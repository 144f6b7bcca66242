"""
tests.test_friends

Friend requests and friendships, plus cleanup on account deletion.
"""

from __future__ import annotations

import pytest


def _pending(requests: list[dict]) -> list[dict]:
    return [r for r in requests if r["status"] == "pending"]


@pytest.mark.asyncio
async def test_send_then_accept_makes_mutual_friends(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")

    r = await alice.post("/friend/requests/bob")
    assert r.status_code == 200
    assert r.json() == {"msg": "Sent request!"}

    incoming = (await bob.get("/friend/requests")).json()
    assert [(x["from"], x["to"], x["status"]) for x in incoming] == [("alice", "bob", "pending")]

    r = await bob.put("/friend/accept/alice")
    assert r.status_code == 200
    assert r.json() == {"msg": "Accepted request!"}

    assert (await alice.get("/friends")).json() == ["bob"]
    assert (await bob.get("/friends")).json() == ["alice"]
    assert _pending((await alice.get("/friend/requests")).json()) == []


@pytest.mark.asyncio
async def test_send_then_reject_leaves_no_friendship(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")

    await alice.post("/friend/requests/bob")
    r = await bob.put("/friend/reject/alice")
    assert r.status_code == 200
    assert r.json() == {"msg": "Rejected request!"}

    assert (await alice.get("/friends")).json() == []
    assert (await bob.get("/friends")).json() == []
    requests = (await alice.get("/friend/requests")).json()
    assert _pending(requests) == []
    assert [x["status"] for x in requests] == ["rejected"]

    # A rejected request does not block asking again.
    r = await alice.post("/friend/requests/bob")
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_duplicate_and_reverse_requests_are_rejected(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")

    await alice.post("/friend/requests/bob")
    r = await alice.post("/friend/requests/bob")
    assert r.status_code == 403
    r = await bob.post("/friend/requests/alice")
    assert r.status_code == 403
    assert "already exists" in r.json()["msg"]


@pytest.mark.asyncio
async def test_cannot_request_existing_friend_or_self(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")
    await alice.post("/friend/requests/bob")
    await bob.put("/friend/accept/alice")

    r = await bob.post("/friend/requests/alice")
    assert r.status_code == 403
    assert "already friends" in r.json()["msg"]

    r = await alice.post("/friend/requests/alice")
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_accept_without_request_is_404(login_as) -> None:
    await login_as("alice")
    bob = await login_as("bob")
    r = await bob.put("/friend/accept/alice")
    assert r.status_code == 404

    r = await bob.post("/friend/requests/ghost")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_sender_can_withdraw_request(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")
    await alice.post("/friend/requests/bob")

    r = await alice.delete("/friend/requests/bob")
    assert r.status_code == 200
    assert r.json() == {"msg": "Removed request!"}
    assert (await bob.get("/friend/requests")).json() == []

    r = await alice.delete("/friend/requests/bob")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_unfriend(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")
    await alice.post("/friend/requests/bob")
    await bob.put("/friend/accept/alice")

    r = await bob.delete("/friends/alice")
    assert r.status_code == 200
    assert r.json() == {"msg": "Unfriended!"}
    assert (await alice.get("/friends")).json() == []

    r = await bob.delete("/friends/alice")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_deleting_account_clears_friend_graph(login_as) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")
    carol = await login_as("carol")

    await alice.post("/friend/requests/bob")
    await bob.put("/friend/accept/alice")
    await alice.post("/friend/requests/carol")

    r = await alice.delete("/users")
    assert r.status_code == 200

    assert (await bob.get("/friends")).json() == []
    assert _pending((await carol.get("/friend/requests")).json()) == []


@pytest.mark.asyncio
async def test_placeholder_username_is_reserved(login_as, client) -> None:
    r = await client.post("/users", json={"username": "DELETED_USER", "password": "pw"})
    assert r.status_code == 403

    alice = await login_as("alice")
    r = await alice.patch("/users/username", json={"username": "DELETED_USER"})
    assert r.status_code == 403
