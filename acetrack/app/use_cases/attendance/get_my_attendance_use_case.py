"""
Get My Attendance Use Case
"""

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.pagination import Pagination, page_window
from acetrack.domain.access_control import Actor

from .dtos import AttendanceListResponse, AttendanceResponse


class GetMyAttendanceUseCase:
    """The caller's own attendance history, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, page: int = 1, limit: int = 10
    ) -> Result[AttendanceListResponse]:
        async with self.uow:
            offset, size = page_window(page, limit)
            records, total = await self.uow.attendances.list_by_user(
                actor.user_id, offset=offset, limit=size
            )

            return Return.ok(
                AttendanceListResponse(
                    attendance=[AttendanceResponse.model_validate(a) for a in records],
                    pagination=Pagination.of(page, limit, total),
                )
            )
