"""
socialhub.auth.models

Auth domain models.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionDoc:
    """
    The caller's session as seen by one request.

    Both fields are None for an anonymous caller (no cookie, or a cookie whose
    server-side session has expired or been ended).
    """

    session_id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = SessionDoc()


# --- Module Notes -----------------------------------------------------------
# SessionDoc is frozen, so the shared ANONYMOUS instance is safe to hand out.
