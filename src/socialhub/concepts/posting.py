"""
socialhub.concepts.posting

Posts owned by their author.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.concepts.errors import BadValuesError, NotAllowedError, NotFoundError
from socialhub.db.models import Post
from socialhub.observability.logging import get_logger

log = get_logger(__name__)


class Posting:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self, author: uuid.UUID, content: str, options: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        if not content:
            raise BadValuesError("Post content must be non-empty!")
        post = Post(author=author, content=content, options=options or {})
        self._session.add(post)
        await self._session.flush()
        log.info("post_created", post_id=str(post.id), author=str(author))
        return {"msg": "Post successfully created!", "post": post}

    async def get_posts(self) -> list[Post]:
        stmt = select(Post).order_by(desc(Post.created_at))
        return list((await self._session.execute(stmt)).scalars().all())

    async def get_by_author(self, author: uuid.UUID) -> list[Post]:
        stmt = select(Post).where(Post.author == author).order_by(desc(Post.created_at))
        return list((await self._session.execute(stmt)).scalars().all())

    async def get_post(self, post_id: uuid.UUID) -> Post:
        post = await self._session.get(Post, post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} does not exist!")
        return post

    async def update(
        self,
        post_id: uuid.UUID,
        content: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        post = await self.get_post(post_id)
        if content is not None:
            if not content:
                raise BadValuesError("Post content must be non-empty!")
            post.content = content
        if options is not None:
            post.options = options
        await self._session.flush()
        return {"msg": "Post successfully updated!"}

    async def delete(self, post_id: uuid.UUID) -> dict[str, Any]:
        await self._session.execute(delete(Post).where(Post.id == post_id))
        log.info("post_deleted", post_id=str(post_id))
        return {"msg": "Post deleted successfully!"}

    async def assert_author_is_user(self, post_id: uuid.UUID, user: uuid.UUID) -> None:
        post = await self.get_post(post_id)
        if post.author != user:
            raise NotAllowedError(f"{user} is not the author of post {post_id}!")


# --- Module Notes -----------------------------------------------------------
# Posts are listed newest first.
