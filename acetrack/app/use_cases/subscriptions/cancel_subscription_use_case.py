"""
Cancel Subscription Use Case
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import SubscriptionStatus

from .dtos import SubscriptionResponse

logger = logging.getLogger(__name__)

CLOSED_STATUSES = (SubscriptionStatus.cancelled, SubscriptionStatus.expired)


class CancelSubscriptionUseCase:
    """
    Use case for cancelling a subscription.

    Business Rules:
    - Admins, or the org_admin of the subscription's organization
    - Cancelled or expired subscriptions cannot be cancelled again
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, subscription_id: UUID) -> Result[SubscriptionResponse]:
        async with self.uow:
            subscription = await self.uow.subscriptions.get_by_id(subscription_id)
            if subscription is None:
                return Return.err(Error("SUBSCRIPTION_NOT_FOUND", "Subscription not found"))

            decision = authorize(actor, Action.cancel_subscription, subscription)
            if not decision.allowed:
                return Return.err(decision.as_error())

            if subscription.status in CLOSED_STATUSES:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        f"Subscription is already {subscription.status.value}",
                        reason="status",
                    )
                )

            subscription.status = SubscriptionStatus.cancelled
            subscription.updated_at = datetime.utcnow()
            subscription = await self.uow.subscriptions.update(subscription)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=subscription.organization_id,
                user_id=actor.user_id,
                action="subscription_cancelled",
                event_metadata={"subscription_id": str(subscription.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Subscription cancelled: {subscription.id} by {actor.user_id}")

            return Return.ok(SubscriptionResponse.from_entity(subscription))
