"""
Update Subscription Use Case
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.subscription_terms import calculate_end_date

from .dtos import SubscriptionResponse, UpdateSubscriptionCommand

logger = logging.getLogger(__name__)


class UpdateSubscriptionUseCase:
    """
    Use case for updating a subscription.

    Business Rules:
    - Admins may change any field
    - The org_admin of the organization may only change payment_method
      and notes; any other field rejects the whole update
    - Changing duration or start_date without an explicit end_date
      recomputes end_date
    - end_date must stay after start_date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, subscription_id: UUID, command: UpdateSubscriptionCommand
    ) -> Result[SubscriptionResponse]:
        """
        Execute update subscription use case.

        Args:
            actor: Resolved caller
            subscription_id: Subscription to update
            command: Fields to change; None means unchanged

        Returns:
            Result with the updated SubscriptionResponse, or Error
        """
        async with self.uow:
            subscription = await self.uow.subscriptions.get_by_id(subscription_id)
            if subscription is None:
                return Return.err(Error("SUBSCRIPTION_NOT_FOUND", "Subscription not found"))

            changes = {k: v for k, v in command.model_dump().items() if v is not None}

            decision = authorize(
                actor, Action.update_subscription, subscription, fields=changes.keys()
            )
            if not decision.allowed:
                return Return.err(decision.as_error())

            for field, value in changes.items():
                setattr(subscription, field, value)

            if ("duration" in changes or "start_date" in changes) and "end_date" not in changes:
                subscription.end_date = calculate_end_date(
                    subscription.start_date, subscription.duration
                )

            if subscription.end_date <= subscription.start_date:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "End date must be after start date",
                        reason="end_date",
                    )
                )

            subscription.updated_at = datetime.utcnow()
            subscription = await self.uow.subscriptions.update(subscription)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=subscription.organization_id,
                user_id=actor.user_id,
                action="subscription_updated",
                event_metadata={
                    "subscription_id": str(subscription.id),
                    "fields": sorted(changes),
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Subscription updated: {subscription.id} by {actor.user_id}")

            return Return.ok(SubscriptionResponse.from_entity(subscription))
