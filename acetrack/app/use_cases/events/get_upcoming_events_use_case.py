"""
Get Upcoming Events Use Case

Next published events of one organization.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor, is_organization_visible

from .dtos import EventResponse


class GetUpcomingEventsUseCase:
    """
    Use case for an organization's upcoming events.

    Business Rules:
    - Organization must exist and be visible to the caller
    - Only published, not deleted events dated today or later
    - Soonest first, at most `limit` events
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[Actor],
        organization_id: UUID,
        limit: int = 5,
        today: Optional[date] = None,
    ) -> Result[List[EventResponse]]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None or not is_organization_visible(actor, organization):
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            events = await self.uow.events.get_upcoming(
                organization_id, today or date.today(), limit=limit
            )
            return Return.ok([EventResponse.model_validate(e) for e in events])
