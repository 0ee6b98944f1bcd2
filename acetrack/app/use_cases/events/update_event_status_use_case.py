"""
Update Event Status Use Case

Moves an event through its lifecycle.
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import EventStatus
from acetrack.domain.event_lifecycle import transition

from .dtos import EventResponse, EventStatusChangeResponse

logger = logging.getLogger(__name__)


class UpdateEventStatusUseCase:
    """
    Use case for changing an event's status.

    Business Rules:
    - Event must exist and not be soft-deleted
    - Only admins and the org_admin of the event's organization
    - Transition must be allowed by the lifecycle table
    - Nothing is persisted when any check fails
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, event_id: UUID, status: EventStatus
    ) -> Result[EventStatusChangeResponse]:
        """
        Execute update event status use case.

        Args:
            actor: Resolved caller
            event_id: Event to transition
            status: Requested status

        Returns:
            Result with the updated event and its previous status, or Error
        """
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            previous_status = EventStatus(event.status)

            result = transition(event, status, actor)
            if result.is_err():
                return Return.err(result.error)

            event.updated_at = datetime.utcnow()
            event = await self.uow.events.update(event)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=event.organization_id,
                user_id=actor.user_id,
                action="event_status_changed",
                event_metadata={
                    "event_id": str(event.id),
                    "from": previous_status.value,
                    "to": EventStatus(event.status).value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Event status updated: {event.id} from {previous_status.value} "
                f"to {EventStatus(event.status).value} by {actor.user_id}"
            )

            return Return.ok(
                EventStatusChangeResponse(
                    event=EventResponse.model_validate(event),
                    previous_status=previous_status,
                )
            )
