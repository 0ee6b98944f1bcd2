"""
Get Organization Subscription Use Case

Current active subscription of one organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize

from .dtos import SubscriptionResponse


class GetOrganizationSubscriptionUseCase:
    """
    Use case for an organization's current subscription.

    Business Rules:
    - Admins, or the org_admin of that organization
    - Latest active subscription whose term covers now
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, organization_id: UUID, now: Optional[datetime] = None
    ) -> Result[SubscriptionResponse]:
        now = now or datetime.utcnow()

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            decision = authorize(actor, Action.view_subscription, organization)
            if not decision.allowed:
                return Return.err(decision.as_error())

            subscription = await self.uow.subscriptions.get_current_by_organization(
                organization_id, now
            )
            if subscription is None:
                return Return.err(
                    Error("SUBSCRIPTION_NOT_FOUND", "No active subscription found")
                )

            return Return.ok(SubscriptionResponse.from_entity(subscription, now))
