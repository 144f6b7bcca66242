"""
socialhub.auth.jwt

Session token issuing and validation.

The session cookie holds a short JWT whose subject is the id of a
server-side `Session` row. Revoking the row ends the session even while the
token itself is still within its expiry.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from socialhub.settings import Settings


@dataclass(frozen=True, slots=True)
class TokenConfig:
    alg: str
    issuer: str
    audience: str
    secret: str

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenConfig:
        return cls(
            alg=settings.session_alg,
            issuer=settings.session_issuer,
            audience=settings.session_audience,
            secret=settings.session_secret,
        )


class TokenValidationError(Exception):
    pass


def issue_session_token(*, cfg: TokenConfig, session_id: uuid.UUID, ttl: timedelta) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": str(session_id),
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_session_token(*, cfg: TokenConfig, token: str) -> uuid.UUID:
    try:
        payload = jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={"require": ["exp", "iat", "iss", "aud", "sub"]},
        )
    except InvalidTokenError as e:
        raise TokenValidationError(str(e)) from e

    try:
        return uuid.UUID(str(payload["sub"]))
    except ValueError as e:
        raise TokenValidationError("Invalid session subject") from e


# --- Module Notes -----------------------------------------------------------
# Token expiry mirrors the session row's expires_at; either one lapsing logs the user out.
