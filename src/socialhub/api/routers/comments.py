"""
socialhub.api.routers.comments

Comments on posts. Mutations are restricted to the comment's author.
"""

from __future__ import annotations

import uuid
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.api import responses
from socialhub.api.deps import db_session
from socialhub.api.schemas import CommentCreated, CommentOut, MsgOut
from socialhub.auth.deps import get_session_doc
from socialhub.auth.models import SessionDoc
from socialhub.concepts.authing import Authing
from socialhub.concepts.commenting import Commenting
from socialhub.concepts.posting import Posting
from socialhub.concepts.sessioning import Sessioning

router = APIRouter(tags=["comments"])


class CommentOptions(BaseModel):
    backgroundColor: str | None = None


class CommentCreate(BaseModel):
    content: str = Field(min_length=1)
    options: CommentOptions | None = None


class CommentUpdate(BaseModel):
    content: str | None = Field(default=None, min_length=1)
    options: CommentOptions | None = None


def _options(options: CommentOptions | None) -> dict[str, Any] | None:
    return options.model_dump(exclude_none=True) if options is not None else None


@router.get("/posts/{post_id}/comments", response_model=list[CommentOut])
async def get_comments(
    post_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> list[CommentOut]:
    comments = await Commenting(session).get_comments_for_post(post_id)
    return await responses.comments(Authing(session), comments)


# `/comments/{post_id}` is the older path for the same operation; both stay routable.
@router.post("/posts/{post_id}/comments", response_model=CommentCreated)
@router.post("/comments/{post_id}", response_model=CommentCreated, include_in_schema=False)
async def create_comment(
    post_id: uuid.UUID,
    body: CommentCreate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> CommentCreated:
    user = Sessioning.get_user(doc)
    await Posting(session).get_post(post_id)
    created = await Commenting(session).create(post_id, user, body.content, _options(body.options))
    await session.commit()
    return CommentCreated(
        msg=created["msg"],
        comment=await responses.comment(Authing(session), created["comment"]),
    )


@router.patch("/comments/{comment_id}", response_model=MsgOut)
async def update_comment(
    comment_id: uuid.UUID,
    body: CommentUpdate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    commenting = Commenting(session)
    await commenting.assert_author_is_user(comment_id, user)
    result = await commenting.update(comment_id, body.content, _options(body.options))
    await session.commit()
    return result


@router.delete("/comments/{comment_id}", response_model=MsgOut)
async def delete_comment(
    comment_id: uuid.UUID,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    commenting = Commenting(session)
    await commenting.assert_author_is_user(comment_id, user)
    result = await commenting.delete(comment_id)
    await session.commit()
    return result


# --- Module Notes -----------------------------------------------------------
# Creating a comment 404s when the post does not exist.
