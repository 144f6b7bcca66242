"""
socialhub.concepts.scheduling

Calendar events (focus or social blocks) owned by their creator.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.concepts.errors import BadValuesError, NotAllowedError, NotFoundError
from socialhub.db.models import Event, EventType
from socialhub.observability.logging import get_logger

log = get_logger(__name__)


def _naive_utc(value: datetime) -> datetime:
    # Stored times are naive UTC; convert offset-aware input before comparing.
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class Scheduling:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        owner: uuid.UUID,
        name: str,
        start_time: datetime,
        end_time: datetime,
        type: EventType,
    ) -> dict[str, Any]:
        if not name:
            raise BadValuesError("Event name must be non-empty!")
        start_time, end_time = _naive_utc(start_time), _naive_utc(end_time)
        self._assert_time_range(start_time, end_time)
        event = Event(owner=owner, name=name, start_time=start_time, end_time=end_time, type=type)
        self._session.add(event)
        await self._session.flush()
        log.info("event_created", event_id=str(event.id), owner=str(owner), type=type.value)
        return {"msg": "Event successfully created!", "event": event}

    async def get_events_by_user(self, owner: uuid.UUID) -> list[Event]:
        stmt = select(Event).where(Event.owner == owner).order_by(Event.start_time)
        return list((await self._session.execute(stmt)).scalars().all())

    async def get_event(self, event_id: uuid.UUID) -> Event:
        event = await self._session.get(Event, event_id)
        if event is None:
            raise NotFoundError(f"Event {event_id} does not exist!")
        return event

    async def update(
        self,
        event_id: uuid.UUID,
        name: str | None = None,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
        type: EventType | None = None,
    ) -> dict[str, Any]:
        event = await self.get_event(event_id)
        if name is not None:
            if not name:
                raise BadValuesError("Event name must be non-empty!")
            event.name = name

        new_start = _naive_utc(start_time) if start_time is not None else event.start_time
        new_end = _naive_utc(end_time) if end_time is not None else event.end_time
        self._assert_time_range(new_start, new_end)
        event.start_time, event.end_time = new_start, new_end

        if type is not None:
            event.type = type
        await self._session.flush()
        return {"msg": "Event successfully updated!"}

    async def delete(self, event_id: uuid.UUID) -> dict[str, Any]:
        await self._session.execute(delete(Event).where(Event.id == event_id))
        return {"msg": "Event deleted successfully!"}

    async def assert_user_is_owner(self, event_id: uuid.UUID, user: uuid.UUID) -> None:
        event = await self.get_event(event_id)
        if event.owner != user:
            raise NotAllowedError(f"{user} is not the owner of event {event_id}!")

    @staticmethod
    def _assert_time_range(start_time: datetime, end_time: datetime) -> None:
        if start_time >= end_time:
            raise BadValuesError("Event start time must be before its end time!")


# --- Module Notes -----------------------------------------------------------
# Times are stored as naive UTC; aware inputs are converted on the way in.
