"""
Create Subscription Use Case

Opens a new pending subscription for an organization.
"""

import logging
from datetime import datetime
from typing import Optional

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import Subscription, SubscriptionStatus
from acetrack.domain.subscription_terms import calculate_end_date

from .dtos import CreateSubscriptionCommand, SubscriptionResponse

logger = logging.getLogger(__name__)


class CreateSubscriptionUseCase:
    """
    Use case for creating a subscription.

    Business Rules:
    - Organization must exist
    - Admins, or the org_admin of that organization
    - At most one active or pending subscription per organization
    - start_date defaults to now; end_date defaults to start + duration
    - end_date must be after start_date
    - Always created pending until an admin verifies payment
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        command: CreateSubscriptionCommand,
        now: Optional[datetime] = None,
    ) -> Result[SubscriptionResponse]:
        """
        Execute create subscription use case.

        Args:
            actor: Resolved caller
            command: Subscription terms
            now: Reference time for the default start date

        Returns:
            Result with SubscriptionResponse, or Error
        """
        now = now or datetime.utcnow()

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            decision = authorize(actor, Action.create_subscription, organization)
            if not decision.allowed:
                return Return.err(decision.as_error())

            existing = await self.uow.subscriptions.get_open_by_organization(organization.id)
            if existing is not None:
                return Return.err(
                    Error(
                        "SUBSCRIPTION_EXISTS",
                        "Organization already has an active or pending subscription",
                    )
                )

            start_date = command.start_date or now
            end_date = command.end_date or calculate_end_date(start_date, command.duration)
            if end_date <= start_date:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "End date must be after start date",
                        reason="end_date",
                    )
                )

            subscription = Subscription(
                organization_id=organization.id,
                duration=command.duration,
                start_date=start_date,
                end_date=end_date,
                status=SubscriptionStatus.pending,
                payment_amount=command.payment_amount,
                payment_method=command.payment_method,
                receipt_file=command.receipt_file,
                notes=command.notes,
            )
            subscription = await self.uow.subscriptions.create(subscription)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=actor.user_id,
                action="subscription_created",
                event_metadata={
                    "subscription_id": str(subscription.id),
                    "duration": subscription.duration.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Subscription created: {subscription.id} for organization {organization.id}"
            )

            return Return.ok(SubscriptionResponse.from_entity(subscription, now))
