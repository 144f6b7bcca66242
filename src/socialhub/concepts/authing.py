"""
socialhub.concepts.authing

User accounts: registration, credential checks, lookups, renames and deletion.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.auth.passwords import hash_password, verify_password
from socialhub.concepts.errors import BadValuesError, NotAllowedError, NotFoundError
from socialhub.db.models import User
from socialhub.observability.logging import get_logger

log = get_logger(__name__)

DELETED_USER = "DELETED_USER"


class Authing:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, username: str, password: str) -> dict[str, Any]:
        self._assert_good_credentials(username, password)
        await self._assert_username_unique(username)
        user = User(username=username, password=hash_password(password))
        self._session.add(user)
        await self._session.flush()
        log.info("user_created", user_id=str(user.id), username=username)
        return {"msg": "User created successfully!", "user": user}

    async def get_user_by_id(self, user_id: uuid.UUID) -> User:
        user = await self._session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found!")
        return user

    async def get_user_by_username(self, username: str) -> User:
        stmt = select(User).where(User.username == username)
        user = (await self._session.execute(stmt)).scalar_one_or_none()
        if user is None:
            raise NotFoundError(f"User with username {username} not found!")
        return user

    async def get_users(self, username: str | None = None) -> list[User]:
        stmt = select(User).order_by(User.username)
        if username:
            stmt = stmt.where(func.lower(User.username).contains(username.lower()))
        return list((await self._session.execute(stmt)).scalars().all())

    async def ids_to_usernames(self, ids: Iterable[uuid.UUID]) -> list[str]:
        ids = list(ids)
        if not ids:
            return []
        stmt = select(User.id, User.username).where(User.id.in_(set(ids)))
        names = {row.id: row.username for row in await self._session.execute(stmt)}
        return [names.get(i, DELETED_USER) for i in ids]

    async def authenticate(self, username: str, password: str) -> dict[str, Any]:
        stmt = select(User).where(User.username == username)
        user = (await self._session.execute(stmt)).scalar_one_or_none()
        if user is None or not verify_password(password, user.password):
            raise NotAllowedError("Username or password is incorrect.")
        return {"msg": "Successfully authenticated.", "_id": user.id}

    async def update_username(self, user_id: uuid.UUID, username: str) -> dict[str, Any]:
        if not username:
            raise BadValuesError("Username must be non-empty!")
        user = await self.get_user_by_id(user_id)
        if user.username != username:
            await self._assert_username_unique(username)
            user.username = username
            await self._session.flush()
        return {"msg": "Updated username successfully!"}

    async def update_password(
        self, user_id: uuid.UUID, current_password: str, new_password: str
    ) -> dict[str, Any]:
        user = await self.get_user_by_id(user_id)
        if not verify_password(current_password, user.password):
            raise NotAllowedError("The given current password is wrong!")
        if not new_password:
            raise BadValuesError("Password must be non-empty!")
        user.password = hash_password(new_password)
        await self._session.flush()
        return {"msg": "Updated password successfully!"}

    async def delete(self, user_id: uuid.UUID) -> dict[str, Any]:
        await self._session.execute(delete(User).where(User.id == user_id))
        log.info("user_deleted", user_id=str(user_id))
        return {"msg": "User deleted!"}

    @staticmethod
    def _assert_good_credentials(username: str, password: str) -> None:
        if not username or not password:
            raise BadValuesError("Username and password must be non-empty!")

    async def _assert_username_unique(self, username: str) -> None:
        if username == DELETED_USER:
            raise NotAllowedError(f"Username {username} is reserved!")
        stmt = select(User.id).where(User.username == username)
        if (await self._session.execute(stmt)).first() is not None:
            raise NotAllowedError(f"User with username {username} already exists!")


# --- Module Notes -----------------------------------------------------------
# DELETED_USER is reserved: no account may register or rename to it.
