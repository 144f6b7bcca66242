"""
tests.test_comments

Comments on posts, including the legacy create path.
"""

from __future__ import annotations

import uuid

import pytest


@pytest.fixture
def post_content() -> str:
    return "a post worth discussing"


async def _post(client, content: str) -> str:
    r = await client.post("/posts", json={"content": content})
    assert r.status_code == 200, r.text
    return r.json()["post"]["_id"]


@pytest.mark.asyncio
async def test_comment_on_post(login_as, client, post_content) -> None:
    alice = await login_as("alice")
    bob = await login_as("bob")
    post_id = await _post(alice, post_content)

    r = await bob.post(f"/posts/{post_id}/comments", json={"content": "agreed"})
    assert r.status_code == 200
    body = r.json()
    assert body["msg"] == "Comment successfully created!"
    assert body["comment"]["author"] == "bob"
    assert body["comment"]["post"] == post_id

    # Older path for the same operation.
    r = await alice.post(f"/comments/{post_id}", json={"content": "thanks"})
    assert r.status_code == 200

    r = await client.get(f"/posts/{post_id}/comments")
    assert sorted((c["author"], c["content"]) for c in r.json()) == [
        ("alice", "thanks"),
        ("bob", "agreed"),
    ]


@pytest.mark.asyncio
async def test_comment_requires_existing_post(login_as) -> None:
    alice = await login_as("alice")
    r = await alice.post(f"/posts/{uuid.uuid4()}/comments", json={"content": "hello?"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_comment_requires_login(login_as, client, post_content) -> None:
    alice = await login_as("alice")
    post_id = await _post(alice, post_content)
    r = await client.post(f"/posts/{post_id}/comments", json={"content": "anon"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_author_can_edit_and_delete_comment(login_as, client, post_content) -> None:
    alice = await login_as("alice")
    post_id = await _post(alice, post_content)
    r = await alice.post(f"/posts/{post_id}/comments", json={"content": "typo"})
    comment_id = r.json()["comment"]["_id"]

    r = await alice.patch(f"/comments/{comment_id}", json={"content": "fixed"})
    assert r.status_code == 200
    assert r.json() == {"msg": "Comment successfully updated!"}
    comments = (await client.get(f"/posts/{post_id}/comments")).json()
    assert [c["content"] for c in comments] == ["fixed"]

    r = await alice.delete(f"/comments/{comment_id}")
    assert r.status_code == 200
    assert r.json() == {"msg": "Comment deleted successfully!"}
    assert (await client.get(f"/posts/{post_id}/comments")).json() == []


@pytest.mark.asyncio
async def test_non_author_cannot_mutate_comment(login_as, client, post_content) -> None:
    alice = await login_as("alice")
    mallory = await login_as("mallory")
    post_id = await _post(alice, post_content)
    r = await alice.post(f"/posts/{post_id}/comments", json={"content": "original"})
    comment_id = r.json()["comment"]["_id"]

    r = await mallory.patch(f"/comments/{comment_id}", json={"content": "defaced"})
    assert r.status_code == 403
    assert "is not the author of comment" in r.json()["msg"]

    r = await mallory.delete(f"/comments/{comment_id}")
    assert r.status_code == 403

    comments = (await client.get(f"/posts/{post_id}/comments")).json()
    assert [c["content"] for c in comments] == ["original"]


@pytest.mark.asyncio
async def test_missing_comment_is_404(login_as) -> None:
    alice = await login_as("alice")
    r = await alice.delete(f"/comments/{uuid.uuid4()}")
    assert r.status_code == 404
