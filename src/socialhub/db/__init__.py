"""
socialhub.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models and engine/session setup used by the concept modules.
"""


# --- Module Notes -----------------------------------------------------------
# Schema changes go through Alembic (alembic/versions).
