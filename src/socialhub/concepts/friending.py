"""
socialhub.concepts.friending

Social graph: friend requests and the symmetric friendships they produce.

Request lifecycle (per ordered pair from -> to):

    (none) --send--> pending --accept--> accepted  + friendship(from, to)
                        |----reject--> rejected
                        |----remove--> (none)

Accepted and rejected requests stay on record; only pending requests block
a new send in either direction.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import and_, delete, desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.concepts.errors import BadValuesError, NotAllowedError, NotFoundError
from socialhub.db.models import FriendRequest, FriendRequestStatus, Friendship
from socialhub.observability.logging import get_logger

log = get_logger(__name__)


class Friending:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_requests(self, user: uuid.UUID) -> list[FriendRequest]:
        stmt = (
            select(FriendRequest)
            .where(or_(FriendRequest.from_id == user, FriendRequest.to_id == user))
            .order_by(desc(FriendRequest.created_at))
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def send_request(self, from_id: uuid.UUID, to_id: uuid.UUID) -> dict[str, Any]:
        await self._can_send_request(from_id, to_id)
        self._session.add(
            FriendRequest(from_id=from_id, to_id=to_id, status=FriendRequestStatus.pending)
        )
        await self._session.flush()
        log.info("friend_request_sent", from_id=str(from_id), to_id=str(to_id))
        return {"msg": "Sent request!"}

    async def accept_request(self, from_id: uuid.UUID, to_id: uuid.UUID) -> dict[str, Any]:
        await self._remove_pending_request(from_id, to_id)
        self._session.add(
            FriendRequest(from_id=from_id, to_id=to_id, status=FriendRequestStatus.accepted)
        )
        await self._add_friend(from_id, to_id)
        log.info("friend_request_accepted", from_id=str(from_id), to_id=str(to_id))
        return {"msg": "Accepted request!"}

    async def reject_request(self, from_id: uuid.UUID, to_id: uuid.UUID) -> dict[str, Any]:
        await self._remove_pending_request(from_id, to_id)
        self._session.add(
            FriendRequest(from_id=from_id, to_id=to_id, status=FriendRequestStatus.rejected)
        )
        await self._session.flush()
        return {"msg": "Rejected request!"}

    async def remove_request(self, from_id: uuid.UUID, to_id: uuid.UUID) -> dict[str, Any]:
        await self._remove_pending_request(from_id, to_id)
        return {"msg": "Removed request!"}

    async def remove_friend(self, user: uuid.UUID, friend: uuid.UUID) -> dict[str, Any]:
        stmt = select(Friendship).where(self._pair(user, friend))
        friendship = (await self._session.execute(stmt)).scalar_one_or_none()
        if friendship is None:
            raise NotFoundError(f"Friendship between {user} and {friend} not found!")
        await self._session.delete(friendship)
        await self._session.flush()
        log.info("friend_removed", user=str(user), friend=str(friend))
        return {"msg": "Unfriended!"}

    async def remove_all_for(self, user: uuid.UUID) -> None:
        """Drop every friendship and pending request that involves `user`."""
        await self._session.execute(
            delete(Friendship).where(or_(Friendship.user1 == user, Friendship.user2 == user))
        )
        await self._session.execute(
            delete(FriendRequest).where(
                FriendRequest.status == FriendRequestStatus.pending,
                or_(FriendRequest.from_id == user, FriendRequest.to_id == user),
            )
        )
        log.info("friend_graph_cleared", user=str(user))

    async def get_friends(self, user: uuid.UUID) -> list[uuid.UUID]:
        stmt = select(Friendship).where(or_(Friendship.user1 == user, Friendship.user2 == user))
        friendships = (await self._session.execute(stmt)).scalars().all()
        return [f.user2 if f.user1 == user else f.user1 for f in friendships]

    async def is_friends(self, user1: uuid.UUID, user2: uuid.UUID) -> bool:
        stmt = select(Friendship.id).where(self._pair(user1, user2))
        return (await self._session.execute(stmt)).first() is not None

    async def _add_friend(self, user1: uuid.UUID, user2: uuid.UUID) -> None:
        self._session.add(Friendship(user1=user1, user2=user2))
        await self._session.flush()

    async def _remove_pending_request(self, from_id: uuid.UUID, to_id: uuid.UUID) -> None:
        stmt = select(FriendRequest).where(
            FriendRequest.from_id == from_id,
            FriendRequest.to_id == to_id,
            FriendRequest.status == FriendRequestStatus.pending,
        )
        request = (await self._session.execute(stmt)).scalar_one_or_none()
        if request is None:
            raise NotFoundError(f"Friend request from {from_id} to {to_id} does not exist!")
        await self._session.delete(request)
        await self._session.flush()

    async def _can_send_request(self, u1: uuid.UUID, u2: uuid.UUID) -> None:
        if u1 == u2:
            raise BadValuesError("Cannot send a friend request to yourself!")
        if await self.is_friends(u1, u2):
            raise NotAllowedError(f"{u1} and {u2} are already friends!")
        stmt = select(FriendRequest.id).where(
            FriendRequest.status == FriendRequestStatus.pending,
            or_(
                and_(FriendRequest.from_id == u1, FriendRequest.to_id == u2),
                and_(FriendRequest.from_id == u2, FriendRequest.to_id == u1),
            ),
        )
        if (await self._session.execute(stmt)).first() is not None:
            raise NotAllowedError(f"Friend request between {u1} and {u2} already exists!")

    @staticmethod
    def _pair(u1: uuid.UUID, u2: uuid.UUID):
        return or_(
            and_(Friendship.user1 == u1, Friendship.user2 == u2),
            and_(Friendship.user1 == u2, Friendship.user2 == u1),
        )


# --- Module Notes -----------------------------------------------------------
# Friendship rows are unordered pairs; lookups always check both orientations.
