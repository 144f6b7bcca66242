"""
socialhub.api.routers.posts

Post CRUD. Mutations are restricted to the post's author.
"""

from __future__ import annotations

import uuid
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.api import responses
from socialhub.api.deps import db_session
from socialhub.api.schemas import MsgOut, PostCreated, PostOut
from socialhub.auth.deps import get_session_doc
from socialhub.auth.models import SessionDoc
from socialhub.concepts.authing import Authing
from socialhub.concepts.commenting import Commenting
from socialhub.concepts.posting import Posting
from socialhub.concepts.sessioning import Sessioning

router = APIRouter(prefix="/posts", tags=["posts"])


class PostOptions(BaseModel):
    backgroundColor: str | None = None


class PostCreate(BaseModel):
    content: str = Field(min_length=1)
    options: PostOptions | None = None


class PostUpdate(BaseModel):
    content: str | None = Field(default=None, min_length=1)
    options: PostOptions | None = None


def _options(options: PostOptions | None) -> dict[str, Any] | None:
    return options.model_dump(exclude_none=True) if options is not None else None


@router.get("", response_model=list[PostOut])
async def get_posts(
    author: str | None = None,
    session: AsyncSession = Depends(db_session),
) -> list[PostOut]:
    authing, posting = Authing(session), Posting(session)
    if author:
        author_id = (await authing.get_user_by_username(author)).id
        posts = await posting.get_by_author(author_id)
    else:
        posts = await posting.get_posts()
    return await responses.posts(authing, posts)


@router.post("", response_model=PostCreated)
async def create_post(
    body: PostCreate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> PostCreated:
    user = Sessioning.get_user(doc)
    created = await Posting(session).create(user, body.content, _options(body.options))
    await session.commit()
    return PostCreated(
        msg=created["msg"], post=await responses.post(Authing(session), created["post"])
    )


@router.patch("/{post_id}", response_model=MsgOut)
async def update_post(
    post_id: uuid.UUID,
    body: PostUpdate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    posting = Posting(session)
    await posting.assert_author_is_user(post_id, user)
    result = await posting.update(post_id, body.content, _options(body.options))
    await session.commit()
    return result


@router.delete("/{post_id}", response_model=MsgOut)
async def delete_post(
    post_id: uuid.UUID,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    posting = Posting(session)
    await posting.assert_author_is_user(post_id, user)
    await Commenting(session).delete_for_post(post_id)
    result = await posting.delete(post_id)
    await session.commit()
    return result


# --- Module Notes -----------------------------------------------------------
# Deleting a post deletes its comments in the same transaction.
