"""
Get Subscription Use Case
"""

from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize

from .dtos import SubscriptionResponse


class GetSubscriptionUseCase:
    """
    Use case for reading a single subscription.

    Business Rules:
    - Admins, or the org_admin of the subscription's organization
    - Anything else is reported as not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, subscription_id: UUID) -> Result[SubscriptionResponse]:
        async with self.uow:
            subscription = await self.uow.subscriptions.get_by_id(subscription_id)
            if subscription is None or not authorize(
                actor, Action.view_subscription, subscription
            ).allowed:
                return Return.err(Error("SUBSCRIPTION_NOT_FOUND", "Subscription not found"))

            return Return.ok(SubscriptionResponse.from_entity(subscription))
