"""
socialhub.concepts.errors

Error types raised by concept modules.

Each error carries the HTTP status the API layer should answer with, so a
single exception handler (see `socialhub.api.app`) can translate any concept
failure into a `{"msg": ...}` response.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)


class ConceptError(Exception):
    status_code: int = HTTP_400_BAD_REQUEST

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class BadValuesError(ConceptError):
    status_code = HTTP_400_BAD_REQUEST


class UnauthenticatedError(ConceptError):
    status_code = HTTP_401_UNAUTHORIZED


class NotAllowedError(ConceptError):
    status_code = HTTP_403_FORBIDDEN


class NotFoundError(ConceptError):
    status_code = HTTP_404_NOT_FOUND


# --- Module Notes -----------------------------------------------------------
# msg is the exact text returned to clients.
