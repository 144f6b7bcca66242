"""
socialhub.api.routers.users

Account and session endpoints.

Responsibilities:
- Current-session lookup, login and logout (cookie lifecycle).
- Account creation, lookup, rename, password change and deletion.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.api import responses
from socialhub.api.deps import db_session, settings_dep
from socialhub.api.schemas import MsgOut, UserCreated, UserOut
from socialhub.auth.deps import clear_session_cookie, get_session_doc, set_session_cookie
from socialhub.auth.models import SessionDoc
from socialhub.concepts.authing import Authing
from socialhub.concepts.friending import Friending
from socialhub.concepts.sessioning import Sessioning
from socialhub.settings import Settings

router = APIRouter(tags=["users"])


class Credentials(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1)


class UsernameUpdate(BaseModel):
    username: str = Field(min_length=1, max_length=128)


class PasswordUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(alias="currentPassword")
    new_password: str = Field(alias="newPassword", min_length=1)


@router.get("/session", response_model=UserOut)
async def get_session_user(
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> UserOut:
    user = Sessioning.get_user(doc)
    return responses.user(await Authing(session).get_user_by_id(user))


@router.get("/users", response_model=list[UserOut])
async def get_users(
    username: str | None = None,
    session: AsyncSession = Depends(db_session),
) -> list[UserOut]:
    return responses.users(await Authing(session).get_users(username))


@router.get("/users/{username}", response_model=UserOut)
async def get_user(
    username: str,
    session: AsyncSession = Depends(db_session),
) -> UserOut:
    return responses.user(await Authing(session).get_user_by_username(username))


@router.post("/users", response_model=UserCreated)
async def create_user(
    body: Credentials,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> UserCreated:
    Sessioning.is_logged_out(doc)
    created = await Authing(session).create(body.username, body.password)
    await session.commit()
    return UserCreated(msg=created["msg"], user=responses.user(created["user"]))


@router.patch("/users/username", response_model=MsgOut)
async def update_username(
    body: UsernameUpdate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    result = await Authing(session).update_username(user, body.username)
    await session.commit()
    return result


@router.patch("/users/password", response_model=MsgOut)
async def update_password(
    body: PasswordUpdate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    result = await Authing(session).update_password(user, body.current_password, body.new_password)
    await session.commit()
    return result


@router.delete("/users", response_model=MsgOut)
async def delete_user(
    response: Response,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    # Every device the user is logged in on goes with the account.
    await Sessioning(session, settings).end_all(user)
    await Friending(session).remove_all_for(user)
    result = await Authing(session).delete(user)
    await session.commit()
    clear_session_cookie(response, settings)
    return result


@router.post("/login", response_model=MsgOut)
async def log_in(
    body: Credentials,
    response: Response,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    authenticated = await Authing(session).authenticate(body.username, body.password)
    token = await Sessioning(session, settings).start(doc, authenticated["_id"])
    await session.commit()
    set_session_cookie(response, settings, token)
    return {"msg": "Logged in!"}


@router.post("/logout", response_model=MsgOut)
async def log_out(
    response: Response,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    await Sessioning(session, settings).end(doc)
    await session.commit()
    clear_session_cookie(response, settings)
    return {"msg": "Logged out!"}


# --- Module Notes -----------------------------------------------------------
# Account deletion ends every session and clears the friend graph before the
# user row is removed, all in one commit.
