"""
socialhub.auth.deps

FastAPI dependencies for the cookie session.

Responsibilities:
- Turn the session cookie into a typed `SessionDoc` for route handlers.
- Write and clear the cookie on login/logout.
"""

from __future__ import annotations

from fastapi import Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.api.deps import db_session, settings_dep
from socialhub.auth.models import SessionDoc
from socialhub.concepts.sessioning import Sessioning
from socialhub.settings import Settings


async def get_session_doc(
    request: Request,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> SessionDoc:
    # Anonymous callers get an empty SessionDoc; routes decide whether login is required.
    token = request.cookies.get(settings.session_cookie_name)
    return await Sessioning(session, settings).resolve(token)


def set_session_cookie(response: Response, settings: Settings, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


# --- Module Notes -----------------------------------------------------------
# Cookie flags on set and delete must match or browsers keep the old cookie.
