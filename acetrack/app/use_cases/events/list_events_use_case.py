"""
List Events Use Case

Paginated, role-scoped event listing.
"""

from typing import Optional

from acetrack.libs.result import Result, Return
from acetrack.app.repositories.event_repository import EventQuery
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.pagination import Pagination, page_window
from acetrack.domain.access_control import Actor, scope_events

from .dtos import EventListResponse, EventResponse, ListEventsQuery


class ListEventsUseCase:
    """
    Use case for listing events.

    Business Rules:
    - Anonymous callers and members only see published events
    - An org_admin only sees their own organization's events,
      whatever organization filter they pass (none if they own none)
    - Soft-deleted events are hidden unless an admin asks for them
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[Actor], query: ListEventsQuery
    ) -> Result[EventListResponse]:
        scope = scope_events(
            actor,
            organization_id=query.organization_id,
            status=query.status.value if query.status else None,
            include_deleted=query.include_deleted,
        )
        if scope.empty:
            return Return.ok(
                EventListResponse(
                    events=[], pagination=Pagination.of(query.page, query.limit, 0)
                )
            )

        async with self.uow:
            offset, limit = page_window(query.page, query.limit)
            events, total = await self.uow.events.list(
                EventQuery(
                    organization_id=scope.organization_id,
                    status=scope.status,
                    is_mandatory=query.is_mandatory,
                    date_from=query.date_from,
                    date_to=query.date_to,
                    search=query.search,
                    include_deleted=scope.include_deleted,
                ),
                offset=offset,
                limit=limit,
            )

            return Return.ok(
                EventListResponse(
                    events=[EventResponse.model_validate(e) for e in events],
                    pagination=Pagination.of(query.page, query.limit, total),
                )
            )
