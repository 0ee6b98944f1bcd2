"""
List Subscriptions Use Case
"""

from datetime import datetime, timedelta
from typing import Optional

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.pagination import Pagination, page_window
from acetrack.domain.access_control import Actor, scope_subscriptions
from acetrack.domain.entities import SubscriptionStatus
from acetrack.domain.entities.subscription import EXPIRING_SOON_DAYS

from .dtos import ListSubscriptionsQuery, SubscriptionListResponse, SubscriptionResponse


class ListSubscriptionsUseCase:
    """
    Use case for listing subscriptions.

    Business Rules:
    - Admins see every organization; an org_admin only their own,
      overriding any organization filter; plain members are refused
    - expiring=true narrows to active subscriptions ending within 30 days
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[Actor],
        query: ListSubscriptionsQuery,
        now: Optional[datetime] = None,
    ) -> Result[SubscriptionListResponse]:
        scoped = scope_subscriptions(actor, query.organization_id)
        if scoped.is_err():
            return Return.err(scoped.error)

        scope = scoped.value
        if scope.empty:
            return Return.ok(
                SubscriptionListResponse(
                    subscriptions=[], pagination=Pagination.of(query.page, query.limit, 0)
                )
            )

        now = now or datetime.utcnow()
        status = query.status.value if query.status else None
        ending_between = None
        if query.expiring:
            status = SubscriptionStatus.active.value
            ending_between = (now, now + timedelta(days=EXPIRING_SOON_DAYS))

        async with self.uow:
            offset, limit = page_window(query.page, query.limit)
            subscriptions, total = await self.uow.subscriptions.list(
                organization_id=scope.organization_id,
                status=status,
                ending_between=ending_between,
                offset=offset,
                limit=limit,
            )

            return Return.ok(
                SubscriptionListResponse(
                    subscriptions=[
                        SubscriptionResponse.from_entity(s, now) for s in subscriptions
                    ],
                    pagination=Pagination.of(query.page, query.limit, total),
                )
            )
