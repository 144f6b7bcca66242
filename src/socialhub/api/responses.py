"""
socialhub.api.responses

Shape concept results for the wire.

Concepts store user ids; clients see usernames. Every formatter here swaps
ids for usernames in one batched lookup and returns the response models from
`socialhub.api.schemas`.
"""

from __future__ import annotations

from collections.abc import Sequence

from socialhub.api.schemas import CommentOut, EventOut, FriendRequestOut, PostOut, UserOut
from socialhub.concepts.authing import Authing
from socialhub.db.models import Comment, Event, FriendRequest, Post, User


def user(u: User) -> UserOut:
    # Password hashes never leave the service.
    return UserOut(
        id=u.id,
        username=u.username,
        date_created=u.created_at,
        date_updated=u.updated_at,
    )


def users(us: Sequence[User]) -> list[UserOut]:
    return [user(u) for u in us]


async def post(authing: Authing, p: Post) -> PostOut:
    return (await posts(authing, [p]))[0]


async def posts(authing: Authing, ps: Sequence[Post]) -> list[PostOut]:
    authors = await authing.ids_to_usernames(p.author for p in ps)
    return [
        PostOut(
            id=p.id,
            author=author,
            content=p.content,
            options=p.options or {},
            date_created=p.created_at,
            date_updated=p.updated_at,
        )
        for p, author in zip(ps, authors, strict=True)
    ]


async def comment(authing: Authing, c: Comment) -> CommentOut:
    return (await comments(authing, [c]))[0]


async def comments(authing: Authing, cs: Sequence[Comment]) -> list[CommentOut]:
    authors = await authing.ids_to_usernames(c.author for c in cs)
    return [
        CommentOut(
            id=c.id,
            post=c.post,
            author=author,
            content=c.content,
            options=c.options or {},
            date_created=c.created_at,
            date_updated=c.updated_at,
        )
        for c, author in zip(cs, authors, strict=True)
    ]


async def event(authing: Authing, e: Event) -> EventOut:
    return (await events(authing, [e]))[0]


async def events(authing: Authing, es: Sequence[Event]) -> list[EventOut]:
    owners = await authing.ids_to_usernames(e.owner for e in es)
    return [
        EventOut(
            id=e.id,
            owner=owner,
            name=e.name,
            start_time=e.start_time,
            end_time=e.end_time,
            type=e.type,
            date_created=e.created_at,
            date_updated=e.updated_at,
        )
        for e, owner in zip(es, owners, strict=True)
    ]


async def friend_requests(authing: Authing, rs: Sequence[FriendRequest]) -> list[FriendRequestOut]:
    senders = await authing.ids_to_usernames(r.from_id for r in rs)
    recipients = await authing.ids_to_usernames(r.to_id for r in rs)
    return [
        FriendRequestOut(
            id=r.id,
            from_=sender,
            to=recipient,
            status=r.status,
            date_created=r.created_at,
            date_updated=r.updated_at,
        )
        for r, sender, recipient in zip(rs, senders, recipients, strict=True)
    ]


# --- Module Notes -----------------------------------------------------------
# Ids that no longer resolve to a user render as DELETED_USER.
