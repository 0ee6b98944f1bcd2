"""
Check In Use Case

Records a user's arrival at an event, by QR scan or manual entry.
"""

import logging
from datetime import datetime
from typing import Optional

from acetrack.libs.result import Error, Result, Return
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import (
    Attendance,
    AttendanceStatus,
    CheckInMethod,
    EventStatus,
    MemberStatus,
)

from .attendance_windows import check_in_closed, is_late
from .dtos import AttendanceResponse, CheckInCommand

logger = logging.getLogger(__name__)

OPEN_STATUSES = (EventStatus.published, EventStatus.ongoing)


class CheckInUseCase:
    """
    Use case for checking in to an event.

    Business Rules:
    - Event must exist, not be soft-deleted, and be published or ongoing
    - Self check-in requires an active membership in the event's
      organization, except for admins
    - Checking in someone else (or any manual entry) requires an admin
      or the org_admin of the event's organization
    - On the event day the check-in window, when set, must be open
    - Arriving after the start time on the event day is recorded as late
    - One attendance record per user and event (ALREADY_CHECKED_IN)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        command: CheckInCommand,
        now: Optional[datetime] = None,
    ) -> Result[AttendanceResponse]:
        """
        Execute check in use case.

        Args:
            actor: Resolved caller
            command: Event, optional target user and check-in details
            now: Check-in time (defaults to now, UTC)

        Returns:
            Result with AttendanceResponse, or Error
        """
        now = now or datetime.utcnow()
        target_user_id = command.user_id or actor.user_id
        on_behalf = target_user_id != actor.user_id or command.method == CheckInMethod.manual

        async with self.uow:
            event = await self.uow.events.get_by_id(command.event_id)
            if event is None or event.is_deleted:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            if on_behalf:
                decision = authorize(actor, Action.record_attendance, event)
                if not decision.allowed:
                    return Return.err(decision.as_error())

                if await self.uow.users.get_by_id(target_user_id) is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))
            elif not actor.is_admin:
                membership = await self.uow.members.get_by_organization_and_user(
                    event.organization_id, actor.user_id
                )
                if membership is None or membership.status != MemberStatus.active:
                    return Return.err(
                        Error(
                            "PERMISSION_DENIED",
                            "You must be an active member of this organization",
                        )
                    )

            if event.status not in OPEN_STATUSES:
                return Return.err(
                    Error("EVENT_NOT_OPEN", "Event is not open for attendance")
                )

            existing = await self.uow.attendances.get_by_event_and_user(
                event.id, target_user_id
            )
            if existing is not None:
                return Return.err(
                    Error("ALREADY_CHECKED_IN", "Already checked in to this event")
                )

            if check_in_closed(event, now):
                return Return.err(
                    Error("CHECK_IN_WINDOW_CLOSED", "Check-in window is closed")
                )

            try:
                attendance = await self.uow.attendances.create(
                    Attendance(
                        event_id=event.id,
                        user_id=target_user_id,
                        check_in_time=now,
                        status=AttendanceStatus.late if is_late(event, now) else AttendanceStatus.present,
                        check_in_method=CheckInMethod.manual if on_behalf else command.method,
                        notes=command.notes,
                        user_agent=command.user_agent,
                        location=command.location,
                    )
                )
            except DuplicateRecordError:
                return Return.err(
                    Error("ALREADY_CHECKED_IN", "Already checked in to this event")
                )

            await self.uow.commit()

            logger.info(f"Checked in: user {target_user_id} to event {event.id} by {actor.user_id}")

            return Return.ok(AttendanceResponse.model_validate(attendance))
