"""
socialhub.concepts.sessioning

Session lifecycle: binds a browser cookie to a logged-in user.

Responsibilities:
- Guard helpers (`get_user`, `is_logged_in`, `is_logged_out`) used by routes.
- Start/end server-side sessions and mint the signed cookie token.
- Resolve an incoming cookie token into a `SessionDoc`.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.auth.jwt import (
    TokenConfig,
    TokenValidationError,
    decode_session_token,
    issue_session_token,
)
from socialhub.auth.models import ANONYMOUS, SessionDoc
from socialhub.concepts.errors import NotAllowedError, UnauthenticatedError
from socialhub.db.models import Session
from socialhub.observability.logging import get_logger
from socialhub.settings import Settings

log = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class Sessioning:
    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._cfg = TokenConfig.from_settings(settings)
        self._ttl = timedelta(minutes=settings.session_ttl_minutes)

    @staticmethod
    def get_user(doc: SessionDoc) -> uuid.UUID:
        if doc.user_id is None:
            raise UnauthenticatedError("Must be logged in!")
        return doc.user_id

    @staticmethod
    def is_logged_in(doc: SessionDoc) -> None:
        if not doc.is_authenticated:
            raise UnauthenticatedError("Must be logged in!")

    @staticmethod
    def is_logged_out(doc: SessionDoc) -> None:
        if doc.is_authenticated:
            raise NotAllowedError("Must be logged out!")

    async def start(self, doc: SessionDoc, user_id: uuid.UUID) -> str:
        """Open a session for `user_id` and return the token for the cookie."""
        self.is_logged_out(doc)
        now = _utcnow()
        # Expired rows can never resolve again.
        await self._session.execute(delete(Session).where(Session.expires_at <= now))
        row = Session(user_id=user_id, expires_at=now + self._ttl)
        self._session.add(row)
        await self._session.flush()
        log.info("session_started", session_id=str(row.id), user_id=str(user_id))
        return issue_session_token(cfg=self._cfg, session_id=row.id, ttl=self._ttl)

    async def end(self, doc: SessionDoc) -> None:
        self.is_logged_in(doc)
        await self._session.execute(delete(Session).where(Session.id == doc.session_id))
        log.info("session_ended", session_id=str(doc.session_id))

    async def end_all(self, user_id: uuid.UUID) -> None:
        await self._session.execute(delete(Session).where(Session.user_id == user_id))

    async def resolve(self, token: str | None) -> SessionDoc:
        if not token:
            return ANONYMOUS
        try:
            session_id = decode_session_token(cfg=self._cfg, token=token)
        except TokenValidationError as e:
            log.info("session_token_rejected", reason=str(e))
            return ANONYMOUS

        stmt = select(Session).where(Session.id == session_id, Session.expires_at > _utcnow())
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        if row is None:
            return ANONYMOUS
        return SessionDoc(session_id=row.id, user_id=row.user_id)


# --- Module Notes -----------------------------------------------------------
# Starting a session purges rows whose expires_at has passed.
