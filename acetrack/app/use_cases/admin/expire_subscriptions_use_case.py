"""
Use Case: Expire Subscriptions

Maintenance sweep for an external scheduler: persists the expiry of
active subscriptions whose term has ended.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.entities import SubscriptionStatus

logger = logging.getLogger(__name__)


class ExpireSubscriptionsResponse(BaseModel):
    """Response DTO for ExpireSubscriptionsUseCase"""

    expired: int
    subscription_ids: List[UUID]


class ExpireSubscriptionsUseCase:
    """
    Flip lapsed subscriptions to expired.

    Business Logic:
    1. Find active subscriptions whose end_date is before now
    2. Set each to expired
    3. Create one audit event per subscription (system action)
    4. Commit once

    Idempotent: a second run finds nothing and expires 0
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, now: Optional[datetime] = None) -> Result[ExpireSubscriptionsResponse]:
        """
        Execute expire subscriptions use case.

        Args:
            now: Reference time (defaults to now, UTC)

        Returns:
            Result[ExpireSubscriptionsResponse] with the expired ids
        """
        now = now or datetime.utcnow()

        async with self.uow:
            # 1. Find lapsed subscriptions
            lapsed = await self.uow.subscriptions.get_lapsed(now)

            from acetrack.domain.entities import AuditEvent

            expired_ids = []
            for subscription in lapsed:
                # 2. Expire
                subscription.status = SubscriptionStatus.expired
                subscription.updated_at = now
                await self.uow.subscriptions.update(subscription)
                expired_ids.append(subscription.id)

                # 3. Audit
                audit_event = AuditEvent(
                    organization_id=subscription.organization_id,
                    user_id=None,  # System action, no specific user
                    action="subscription_expired",
                    event_metadata={
                        "subscription_id": str(subscription.id),
                        "end_date": subscription.end_date.isoformat(),
                    },
                )
                await self.uow.audit_events.create(audit_event)

            # 4. Commit transaction
            await self.uow.commit()

            logger.info(f"Subscription expiry sweep: {len(expired_ids)} expired")

            return Return.ok(
                ExpireSubscriptionsResponse(expired=len(expired_ids), subscription_ids=expired_ids)
            )
