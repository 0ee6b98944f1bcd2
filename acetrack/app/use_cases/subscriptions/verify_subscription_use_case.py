"""
Verify Subscription Use Case

Admin review of a pending subscription's payment.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import SubscriptionStatus

from .dtos import SubscriptionResponse, VerifySubscriptionCommand

logger = logging.getLogger(__name__)


class VerifySubscriptionUseCase:
    """
    Use case for verifying a subscription payment.

    Business Rules:
    - Admins only
    - Subscription must be pending
    - verified=true activates it, verified=false cancels it
    - Records who verified and when
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        subscription_id: UUID,
        command: VerifySubscriptionCommand,
        now: Optional[datetime] = None,
    ) -> Result[SubscriptionResponse]:
        now = now or datetime.utcnow()

        async with self.uow:
            decision = authorize(actor, Action.verify_subscription)
            if not decision.allowed:
                return Return.err(decision.as_error())

            subscription = await self.uow.subscriptions.get_by_id(subscription_id)
            if subscription is None:
                return Return.err(Error("SUBSCRIPTION_NOT_FOUND", "Subscription not found"))

            if subscription.status != SubscriptionStatus.pending:
                return Return.err(
                    Error("NOT_PENDING", "Only pending subscriptions can be verified")
                )

            subscription.status = (
                SubscriptionStatus.active if command.verified else SubscriptionStatus.cancelled
            )
            subscription.verified_by = actor.user_id
            subscription.verified_at = now
            if command.notes is not None:
                subscription.notes = command.notes
            subscription.updated_at = now
            subscription = await self.uow.subscriptions.update(subscription)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=subscription.organization_id,
                user_id=actor.user_id,
                action="subscription_verified" if command.verified else "subscription_rejected",
                event_metadata={"subscription_id": str(subscription.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Subscription {subscription.status.value}: {subscription.id} by {actor.user_id}"
            )

            return Return.ok(SubscriptionResponse.from_entity(subscription, now))
