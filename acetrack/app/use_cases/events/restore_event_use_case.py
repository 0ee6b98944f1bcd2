"""
Restore Event Use Case
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize

from .dtos import EventResponse

logger = logging.getLogger(__name__)


class RestoreEventUseCase:
    """
    Use case for undoing a soft delete.

    Business Rules:
    - Admins only
    - Event must currently be soft-deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            decision = authorize(actor, Action.restore_event)
            if not decision.allowed:
                return Return.err(decision.as_error())

            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            if not event.is_deleted:
                return Return.err(Error("EVENT_NOT_DELETED", "Event is not deleted"))

            event.deleted_at = None
            event.updated_at = datetime.utcnow()
            event = await self.uow.events.update(event)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=event.organization_id,
                user_id=actor.user_id,
                action="event_restored",
                event_metadata={"event_id": str(event.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Event restored: {event.id} by {actor.user_id}")

            return Return.ok(EventResponse.model_validate(event))
