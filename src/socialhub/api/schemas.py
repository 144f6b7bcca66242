"""
socialhub.api.schemas

Response models for the HTTP surface.

Responsibilities:
- Fix the wire shape of every entity (`_id`, `dateCreated`, `dateUpdated`, camelCase times).
- Render stored naive-UTC datetimes with an explicit UTC offset.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from socialhub.db.models import EventType, FriendRequestStatus


def _as_utc(value: datetime) -> datetime:
    # The DB hands back naive datetimes that are UTC by construction.
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class _Out(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MsgOut(_Out):
    msg: str


class UserOut(_Out):
    id: uuid.UUID = Field(alias="_id")
    username: str
    date_created: UtcDatetime = Field(alias="dateCreated")
    date_updated: UtcDatetime = Field(alias="dateUpdated")


class PostOut(_Out):
    id: uuid.UUID = Field(alias="_id")
    author: str
    content: str
    options: dict[str, Any] = Field(default_factory=dict)
    date_created: UtcDatetime = Field(alias="dateCreated")
    date_updated: UtcDatetime = Field(alias="dateUpdated")


class CommentOut(_Out):
    id: uuid.UUID = Field(alias="_id")
    post: uuid.UUID
    author: str
    content: str
    options: dict[str, Any] = Field(default_factory=dict)
    date_created: UtcDatetime = Field(alias="dateCreated")
    date_updated: UtcDatetime = Field(alias="dateUpdated")


class EventOut(_Out):
    id: uuid.UUID = Field(alias="_id")
    owner: str
    name: str
    start_time: UtcDatetime = Field(alias="startTime")
    end_time: UtcDatetime = Field(alias="endTime")
    type: EventType
    date_created: UtcDatetime = Field(alias="dateCreated")
    date_updated: UtcDatetime = Field(alias="dateUpdated")


class FriendRequestOut(_Out):
    id: uuid.UUID = Field(alias="_id")
    from_: str = Field(alias="from")
    to: str
    status: FriendRequestStatus
    date_created: UtcDatetime = Field(alias="dateCreated")
    date_updated: UtcDatetime = Field(alias="dateUpdated")


class UserCreated(MsgOut):
    user: UserOut


class PostCreated(MsgOut):
    post: PostOut


class CommentCreated(MsgOut):
    comment: CommentOut


class EventCreated(MsgOut):
    event: EventOut


# --- Module Notes -----------------------------------------------------------
# FastAPI serializes response models by alias, so handlers build these with
# field names and clients receive `_id` / `dateCreated` / `startTime` keys.
