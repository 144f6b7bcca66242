"""
socialhub.api.routers.events

The caller's calendar. Mutations are restricted to the event's owner.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.api import responses
from socialhub.api.deps import db_session
from socialhub.api.schemas import EventCreated, EventOut, MsgOut
from socialhub.auth.deps import get_session_doc
from socialhub.auth.models import SessionDoc
from socialhub.concepts.authing import Authing
from socialhub.concepts.scheduling import Scheduling
from socialhub.concepts.sessioning import Sessioning
from socialhub.db.models import EventType

router = APIRouter(prefix="/events", tags=["events"])


class EventCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=256)
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    type: EventType


class EventUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, min_length=1, max_length=256)
    start_time: datetime | None = Field(default=None, alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")
    type: EventType | None = None


@router.get("", response_model=list[EventOut])
async def get_events(
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> list[EventOut]:
    user = Sessioning.get_user(doc)
    events = await Scheduling(session).get_events_by_user(user)
    return await responses.events(Authing(session), events)


@router.post("", response_model=EventCreated)
async def create_event(
    body: EventCreate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> EventCreated:
    user = Sessioning.get_user(doc)
    created = await Scheduling(session).create(
        user, body.name, body.start_time, body.end_time, body.type
    )
    await session.commit()
    return EventCreated(
        msg=created["msg"], event=await responses.event(Authing(session), created["event"])
    )


@router.patch("/{event_id}", response_model=MsgOut)
async def update_event(
    event_id: uuid.UUID,
    body: EventUpdate,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    scheduling = Scheduling(session)
    await scheduling.assert_user_is_owner(event_id, user)
    result = await scheduling.update(
        event_id, body.name, body.start_time, body.end_time, body.type
    )
    await session.commit()
    return result


@router.delete("/{event_id}", response_model=MsgOut)
async def delete_event(
    event_id: uuid.UUID,
    doc: SessionDoc = Depends(get_session_doc),
    session: AsyncSession = Depends(db_session),
) -> dict[str, Any]:
    user = Sessioning.get_user(doc)
    scheduling = Scheduling(session)
    await scheduling.assert_user_is_owner(event_id, user)
    result = await scheduling.delete(event_id)
    await session.commit()
    return result


# --- Module Notes -----------------------------------------------------------
# Naive request datetimes are read as UTC; responses carry a Z suffix.
