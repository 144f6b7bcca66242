"""
socialhub.db.init_db

Create tables for local development and tests. Production runs Alembic.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from socialhub.db import models  # noqa: F401  # registers tables on Base.metadata
from socialhub.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# --- Module Notes -----------------------------------------------------------
# create_all only adds missing tables; it never alters existing ones.
