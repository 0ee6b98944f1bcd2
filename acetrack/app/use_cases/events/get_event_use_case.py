"""
Get Event Use Case
"""

from typing import Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor, is_event_visible

from .dtos import EventResponse


class GetEventUseCase:
    """
    Use case for reading a single event.

    Business Rules:
    - Events outside the caller's visible scope are reported as not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Optional[Actor], event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or not is_event_visible(actor, event):
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            return Return.ok(EventResponse.model_validate(event))
