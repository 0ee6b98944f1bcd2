"""
Get Event Stats Use Case

Counters over the events visible to the caller.
"""

from dataclasses import replace
from datetime import date, timedelta
from typing import Optional
from uuid import UUID

from acetrack.libs.result import Result, Return
from acetrack.app.repositories.event_repository import EventQuery
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor, scope_events
from acetrack.domain.entities import EventStatus

from .dtos import EventStatsResponse


class GetEventStatsUseCase:
    """
    Use case for event statistics.

    Business Rules:
    - Scoped exactly like the event list; soft-deleted events never count
    - upcoming: published and dated today or later
    - past: dated before today
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[Actor],
        organization_id: Optional[UUID] = None,
        today: Optional[date] = None,
    ) -> Result[EventStatsResponse]:
        scope = scope_events(actor, organization_id=organization_id)
        if scope.empty:
            return Return.ok(EventStatsResponse())

        today = today or date.today()
        base = EventQuery(organization_id=scope.organization_id, status=scope.status)

        async with self.uow:
            by_status = await self.uow.events.count_by_status(base)
            mandatory = await self.uow.events.count(replace(base, is_mandatory=True))
            upcoming = await self.uow.events.count(
                replace(base, status=EventStatus.published.value, date_from=today)
            )
            past = await self.uow.events.count(
                replace(base, date_to=today - timedelta(days=1))
            )

            total = sum(by_status.values())
            return Return.ok(
                EventStatsResponse(
                    total=total,
                    mandatory=mandatory,
                    optional=total - mandatory,
                    upcoming=upcoming,
                    past=past,
                    **{status.value: by_status.get(status.value, 0) for status in EventStatus},
                )
            )
