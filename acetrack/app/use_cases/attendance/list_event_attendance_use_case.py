"""
List Event Attendance Use Case
"""

from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.pagination import Pagination, page_window
from acetrack.domain.access_control import Action, Actor, authorize

from .dtos import AttendanceListResponse, AttendanceResponse


class ListEventAttendanceUseCase:
    """
    Use case for an event's attendance sheet.

    Business Rules:
    - Admins, or the org_admin of the event's organization
    - Ordered by check-in time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, event_id: UUID, page: int = 1, limit: int = 10
    ) -> Result[AttendanceListResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            decision = authorize(actor, Action.view_attendance, event)
            if not decision.allowed:
                return Return.err(decision.as_error())

            offset, size = page_window(page, limit)
            records, total = await self.uow.attendances.list_by_event(
                event.id, offset=offset, limit=size
            )

            return Return.ok(
                AttendanceListResponse(
                    attendance=[AttendanceResponse.model_validate(a) for a in records],
                    pagination=Pagination.of(page, limit, total),
                )
            )
