"""
Create Event Use Case

Schedules a new draft event for an organization.
"""

import logging
from datetime import date
from typing import Optional

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import Event, EventStatus
from acetrack.domain.event_lifecycle import Schedule, validate_schedule

from .dtos import CreateEventCommand, EventResponse

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """
    Use case for creating an event.

    Business Rules:
    - Only admins, or the org_admin of the target organization, can create events
    - Organization must exist
    - Schedule must pass every time-window rule and not be in the past
    - New events start as draft; the caller is recorded as creator
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        command: CreateEventCommand,
        today: Optional[date] = None,
    ) -> Result[EventResponse]:
        """
        Execute create event use case.

        Args:
            actor: Resolved caller
            command: Event fields
            today: Reference date for the past-date rule (defaults to today)

        Returns:
            Result with EventResponse, or Error
        """
        async with self.uow:
            decision = authorize(actor, Action.create_event, command.organization_id)
            if not decision.allowed:
                return Return.err(decision.as_error())

            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            schedule = Schedule(
                event_date=command.event_date,
                start_time=command.start_time,
                end_time=command.end_time,
                check_in_start_time=command.check_in_start_time,
                check_in_end_time=command.check_in_end_time,
                check_out_start_time=command.check_out_start_time,
                check_out_end_time=command.check_out_end_time,
            )
            validation = validate_schedule(schedule, today=today)
            if validation.is_err():
                return Return.err(validation.error)

            event = Event(
                **command.model_dump(),
                status=EventStatus.draft,
                created_by=actor.user_id,
            )
            event = await self.uow.events.create(event)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=event.organization_id,
                user_id=actor.user_id,
                action="event_created",
                event_metadata={"event_id": str(event.id), "title": event.title},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Event created: {event.id} by {actor.user_id}")

            return Return.ok(EventResponse.model_validate(event))
