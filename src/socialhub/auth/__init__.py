"""
socialhub.auth

Authentication helpers.

Responsibilities:
- Signed session-cookie tokens (PyJWT).
- Password hashing (passlib).
- FastAPI dependency resolving the request's session.
"""


# --- Module Notes -----------------------------------------------------------
# Cookie tokens carry a session row id, never the user id.
