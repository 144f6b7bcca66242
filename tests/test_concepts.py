"""
tests.test_concepts

Concept behaviour that is awkward to reach through HTTP: expired sessions,
deleted-user placeholders, timezone normalisation and password storage.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta, timezone

import pytest
from sqlalchemy import select, update

from socialhub.auth.models import ANONYMOUS, SessionDoc
from socialhub.concepts.authing import DELETED_USER, Authing
from socialhub.concepts.errors import BadValuesError, NotAllowedError, UnauthenticatedError
from socialhub.concepts.scheduling import Scheduling
from socialhub.concepts.sessioning import Sessioning
from socialhub.db.models import EventType, Session, User


@pytest.mark.asyncio
async def test_passwords_are_hashed(app) -> None:
    async with app.state.sessionmaker() as session:
        await Authing(session).create("alice", "hunter2")
        await session.commit()
        stored = (await session.execute(select(User.password))).scalar_one()
    assert stored != "hunter2"
    assert stored.startswith("$pbkdf2-sha256$")


@pytest.mark.asyncio
async def test_ids_to_usernames_keeps_order_and_marks_missing(app) -> None:
    async with app.state.sessionmaker() as session:
        authing = Authing(session)
        alice = (await authing.create("alice", "pw"))["user"]
        bob = (await authing.create("bob", "pw"))["user"]
        names = await authing.ids_to_usernames([bob.id, uuid.uuid4(), alice.id])
    assert names == ["bob", DELETED_USER, "alice"]


@pytest.mark.asyncio
async def test_session_guards() -> None:
    with pytest.raises(UnauthenticatedError):
        Sessioning.get_user(ANONYMOUS)
    user_id = uuid.uuid4()
    doc = SessionDoc(session_id=uuid.uuid4(), user_id=user_id)
    assert Sessioning.get_user(doc) == user_id
    with pytest.raises(NotAllowedError):
        Sessioning.is_logged_out(doc)


@pytest.mark.asyncio
async def test_expired_session_resolves_anonymous(app, settings) -> None:
    async with app.state.sessionmaker() as session:
        sessioning = Sessioning(session, settings)
        user_id = uuid.uuid4()
        token = await sessioning.start(ANONYMOUS, user_id)
        await session.commit()

        doc = await sessioning.resolve(token)
        assert doc.user_id == user_id

        past = datetime.now(UTC).replace(tzinfo=None) - timedelta(minutes=1)
        await session.execute(update(Session).values(expires_at=past))
        await session.commit()

        assert await sessioning.resolve(token) == ANONYMOUS
        assert await sessioning.resolve(None) == ANONYMOUS


@pytest.mark.asyncio
async def test_starting_a_session_purges_expired_rows(app, settings) -> None:
    async with app.state.sessionmaker() as session:
        sessioning = Sessioning(session, settings)
        stale_user = uuid.uuid4()
        await sessioning.start(ANONYMOUS, stale_user)
        past = datetime.now(UTC).replace(tzinfo=None) - timedelta(minutes=1)
        await session.execute(update(Session).values(expires_at=past))
        await session.commit()

        fresh_user = uuid.uuid4()
        await sessioning.start(ANONYMOUS, fresh_user)
        await session.commit()

        owners = (await session.execute(select(Session.user_id))).scalars().all()
    assert owners == [fresh_user]


@pytest.mark.asyncio
async def test_scheduling_normalises_timezones(app) -> None:
    plus_two = timezone(timedelta(hours=2))
    async with app.state.sessionmaker() as session:
        created = await Scheduling(session).create(
            uuid.uuid4(),
            "standup",
            datetime(2026, 10, 20, 11, 0, tzinfo=plus_two),
            datetime(2026, 10, 20, 11, 15, tzinfo=plus_two),
            EventType.focus,
        )
    event = created["event"]
    assert event.start_time == datetime(2026, 10, 20, 9, 0)
    assert event.end_time == datetime(2026, 10, 20, 9, 15)


@pytest.mark.asyncio
async def test_scheduling_rejects_blank_name(app) -> None:
    async with app.state.sessionmaker() as session:
        with pytest.raises(BadValuesError):
            await Scheduling(session).create(
                uuid.uuid4(),
                "",
                datetime(2026, 10, 20, 9, 0),
                datetime(2026, 10, 20, 10, 0),
                EventType.social,
            )
