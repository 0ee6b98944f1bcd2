"""
Get Expiring Subscriptions Use Case
"""

from datetime import datetime, timedelta
from typing import List, Optional

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities.subscription import EXPIRING_SOON_DAYS

from .dtos import SubscriptionResponse


class GetExpiringSubscriptionsUseCase:
    """
    Use case for subscriptions about to lapse.

    Business Rules:
    - Admins only
    - Active subscriptions that have started and end within `days`
    - Soonest expiry first, each with days_remaining
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        days: int = EXPIRING_SOON_DAYS,
        now: Optional[datetime] = None,
    ) -> Result[List[SubscriptionResponse]]:
        decision = authorize(actor, Action.list_expiring_subscriptions)
        if not decision.allowed:
            return Return.err(decision.as_error())

        now = now or datetime.utcnow()

        async with self.uow:
            subscriptions = await self.uow.subscriptions.get_expiring(
                now, now + timedelta(days=days)
            )
            return Return.ok([SubscriptionResponse.from_entity(s, now) for s in subscriptions])
