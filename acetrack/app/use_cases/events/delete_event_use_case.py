"""
Delete Event Use Case

Soft delete by default; permanent deletion of already soft-deleted
events for admins.
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.event_lifecycle import check_deletable

from .dtos import DeleteEventResponse

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    """
    Use case for deleting an event.

    Business Rules:
    - Soft delete: admins, the org_admin of the event's organization,
      or the creator; sets deleted_at
    - Ongoing and completed events can only be deleted by admins
    - Permanent delete: admins only, and only once the event is soft-deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, event_id: UUID, permanently: bool = False
    ) -> Result[DeleteEventResponse]:
        """
        Execute delete event use case.

        Args:
            actor: Resolved caller
            event_id: Event to delete
            permanently: Remove the row instead of marking it deleted

        Returns:
            Result with DeleteEventResponse, or Error
        """
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

            from acetrack.domain.entities import AuditEvent

            if permanently:
                decision = authorize(actor, Action.purge_event, event)
                if not decision.allowed:
                    return Return.err(decision.as_error())

                if not event.is_deleted:
                    return Return.err(
                        Error(
                            "EVENT_NOT_DELETED",
                            "Event must be soft-deleted before permanent deletion",
                        )
                    )

                await self.uow.events.delete(event)
                action, outcome = "event_purged", "purged"
            else:
                if event.is_deleted:
                    return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

                decision = authorize(actor, Action.delete_event, event)
                if not decision.allowed:
                    return Return.err(decision.as_error())

                denial = check_deletable(event, actor)
                if denial is not None:
                    return Return.err(denial)

                event.deleted_at = datetime.utcnow()
                await self.uow.events.update(event)
                action, outcome = "event_deleted", "deleted"

            audit = AuditEvent(
                organization_id=event.organization_id,
                user_id=actor.user_id,
                action=action,
                event_metadata={"event_id": str(event_id), "title": event.title},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Event {outcome}: {event_id} by {actor.user_id}")

            return Return.ok(DeleteEventResponse(status=outcome, event_id=event_id))
