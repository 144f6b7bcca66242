"""
socialhub.concepts.commenting

Comments attached to a parent post, owned by their author.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.concepts.errors import BadValuesError, NotAllowedError, NotFoundError
from socialhub.db.models import Comment
from socialhub.observability.logging import get_logger

log = get_logger(__name__)


class Commenting:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        post: uuid.UUID,
        author: uuid.UUID,
        content: str,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        if not content:
            raise BadValuesError("Comment content must be non-empty!")
        comment = Comment(post=post, author=author, content=content, options=options or {})
        self._session.add(comment)
        await self._session.flush()
        log.info("comment_created", comment_id=str(comment.id), post_id=str(post))
        return {"msg": "Comment successfully created!", "comment": comment}

    async def get_comments_for_post(self, post: uuid.UUID) -> list[Comment]:
        stmt = select(Comment).where(Comment.post == post).order_by(Comment.created_at)
        return list((await self._session.execute(stmt)).scalars().all())

    async def get_comment(self, comment_id: uuid.UUID) -> Comment:
        comment = await self._session.get(Comment, comment_id)
        if comment is None:
            raise NotFoundError(f"Comment {comment_id} does not exist!")
        return comment

    async def update(
        self,
        comment_id: uuid.UUID,
        content: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        comment = await self.get_comment(comment_id)
        if content is not None:
            if not content:
                raise BadValuesError("Comment content must be non-empty!")
            comment.content = content
        if options is not None:
            comment.options = options
        await self._session.flush()
        return {"msg": "Comment successfully updated!"}

    async def delete(self, comment_id: uuid.UUID) -> dict[str, Any]:
        await self._session.execute(delete(Comment).where(Comment.id == comment_id))
        return {"msg": "Comment deleted successfully!"}

    async def delete_for_post(self, post: uuid.UUID) -> None:
        await self._session.execute(delete(Comment).where(Comment.post == post))

    async def assert_author_is_user(self, comment_id: uuid.UUID, user: uuid.UUID) -> None:
        comment = await self.get_comment(comment_id)
        if comment.author != user:
            raise NotAllowedError(f"{user} is not the author of comment {comment_id}!")


# --- Module Notes -----------------------------------------------------------
# Comments are listed oldest first within a post.
