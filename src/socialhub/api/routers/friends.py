"""
socialhub.api.routers.friends

Friend list and friend-request lifecycle.

Path segments carry usernames; each is resolved to a user id through Authing
before Friending is called.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.api import responses
from socialhub.api.deps import db_session
from socialhub.api.schemas import FriendRequestOut, MsgOut
from socialhub.auth.deps import get_session_doc
from socialhub.auth.models import SessionDoc
from socialhub.concepts.authing import Authing
from socialhub.concepts.friending import Friending
from socialhub.concepts.sessioning import Sessioning

router = APIRouter(tags=["friends"])


@router.get("/friends", response_model=list[str])
async def get_friends(
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> list[str]:
    user = Sessioning.get_user(doc)
    return await Authing(session).ids_to_usernames(await Friending(session).get_friends(user))


@router.delete("/friends/{friend}", response_model=MsgOut)
async def remove_friend(
    friend: str,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    friend_id = (await Authing(session).get_user_by_username(friend)).id
    result = await Friending(session).remove_friend(user, friend_id)
    await session.commit()
    return result


@router.get("/friend/requests", response_model=list[FriendRequestOut])
async def get_requests(
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> list[FriendRequestOut]:
    user = Sessioning.get_user(doc)
    requests = await Friending(session).get_requests(user)
    return await responses.friend_requests(Authing(session), requests)


@router.post("/friend/requests/{to}", response_model=MsgOut)
async def send_friend_request(
    to: str,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    to_id = (await Authing(session).get_user_by_username(to)).id
    result = await Friending(session).send_request(user, to_id)
    await session.commit()
    return result


@router.delete("/friend/requests/{to}", response_model=MsgOut)
async def remove_friend_request(
    to: str,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    to_id = (await Authing(session).get_user_by_username(to)).id
    result = await Friending(session).remove_request(user, to_id)
    await session.commit()
    return result


@router.put("/friend/accept/{from_username}", response_model=MsgOut)
async def accept_friend_request(
    from_username: str,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    from_id = (await Authing(session).get_user_by_username(from_username)).id
    result = await Friending(session).accept_request(from_id, user)
    await session.commit()
    return result


@router.put("/friend/reject/{from_username}", response_model=MsgOut)
async def reject_friend_request(
    from_username: str,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    from_id = (await Authing(session).get_user_by_username(from_username)).id
    result = await Friending(session).reject_request(from_id, user)
    await session.commit()
    return result


# --- Module Notes -----------------------------------------------------------
# Usernames resolve through Authing first, so unknown names 404 before Friending runs.
