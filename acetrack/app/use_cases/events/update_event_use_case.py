"""
Update Event Use Case

Partial update of an event's details and schedule.
"""

import logging
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.event_lifecycle import validate_schedule_update

from .dtos import EventResponse, UpdateEventCommand

logger = logging.getLogger(__name__)


class UpdateEventUseCase:
    """
    Use case for updating an event.

    Business Rules:
    - Event must exist and not be soft-deleted
    - Allowed for admins, the org_admin of the event's organization,
      and the event's creator
    - Date/time of ongoing or completed events is frozen for non-admins
    - The merged schedule (stored event + changes) must stay valid;
      the past-date rule only applies when event_date is changed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        event_id: UUID,
        command: UpdateEventCommand,
        today: Optional[date] = None,
    ) -> Result[EventResponse]:
        """
        Execute update event use case.

        Args:
            actor: Resolved caller
            event_id: Event to update
            command: Fields to change; None means unchanged
            today: Reference date for the past-date rule

        Returns:
            Result with the updated EventResponse, or Error
        """
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.is_deleted:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            decision = authorize(actor, Action.update_event, event)
            if not decision.allowed:
                return Return.err(decision.as_error())

            changes = {k: v for k, v in command.model_dump().items() if v is not None}

            validation = validate_schedule_update(event, changes, actor, today=today)
            if validation.is_err():
                return Return.err(validation.error)

            for field, value in changes.items():
                setattr(event, field, value)
            event.updated_at = datetime.utcnow()
            event = await self.uow.events.update(event)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=event.organization_id,
                user_id=actor.user_id,
                action="event_updated",
                event_metadata={
                    "event_id": str(event.id),
                    "fields": sorted(changes),
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Event updated: {event.id} by {actor.user_id}")

            return Return.ok(EventResponse.model_validate(event))
