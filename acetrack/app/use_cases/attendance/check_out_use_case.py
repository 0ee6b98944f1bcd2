"""
Check Out Use Case
"""

import logging
from datetime import datetime
from typing import Optional

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize

from .attendance_windows import check_out_closed
from .dtos import AttendanceResponse, CheckOutCommand

logger = logging.getLogger(__name__)


class CheckOutUseCase:
    """
    Use case for checking out of an event.

    Business Rules:
    - Event must exist and not be soft-deleted
    - Checking out someone else requires an admin or the org_admin of
      the event's organization
    - The user must have checked in and not yet checked out
    - On the event day the check-out window, when set, must be open
    - Check-out time must be after check-in time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        command: CheckOutCommand,
        now: Optional[datetime] = None,
    ) -> Result[AttendanceResponse]:
        now = now or datetime.utcnow()
        target_user_id = command.user_id or actor.user_id

        async with self.uow:
            event = await self.uow.events.get_by_id(command.event_id)
            if event is None or event.is_deleted:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            if target_user_id != actor.user_id:
                decision = authorize(actor, Action.record_attendance, event)
                if not decision.allowed:
                    return Return.err(decision.as_error())

            attendance = await self.uow.attendances.get_by_event_and_user(
                event.id, target_user_id
            )
            if attendance is None or attendance.check_in_time is None:
                return Return.err(Error("NOT_CHECKED_IN", "Not checked in to this event"))

            if attendance.check_out_time is not None:
                return Return.err(
                    Error("ALREADY_CHECKED_OUT", "Already checked out of this event")
                )

            if check_out_closed(event, now):
                return Return.err(
                    Error("CHECK_OUT_WINDOW_CLOSED", "Check-out window is closed")
                )

            if now <= attendance.check_in_time:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "Check-out time must be after check-in time",
                        reason="check_out_time",
                    )
                )

            attendance.check_out_time = now
            if command.notes is not None:
                attendance.notes = command.notes
            attendance = await self.uow.attendances.update(attendance)

            await self.uow.commit()

            logger.info(f"Checked out: user {target_user_id} from event {event.id}")

            return Return.ok(AttendanceResponse.model_validate(attendance))
