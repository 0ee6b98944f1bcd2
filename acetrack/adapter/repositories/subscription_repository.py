from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from acetrack.app.repositories.subscription_repository import ISubscriptionRepository
from acetrack.domain.entities import Subscription, SubscriptionStatus


class SubscriptionRepository(ISubscriptionRepository):
    """Subscription repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """Get subscription by ID"""
        stmt = select(Subscription).where(Subscription.id == subscription_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_open_by_organization(self, organization_id: UUID) -> Optional[Subscription]:
        """Get the active or pending subscription of an organization"""
        stmt = select(Subscription).where(
            Subscription.organization_id == organization_id,
            col(Subscription.status).in_(
                [SubscriptionStatus.active, SubscriptionStatus.pending]
            ),
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_current_by_organization(
        self, organization_id: UUID, now: datetime
    ) -> Optional[Subscription]:
        """Get the latest active subscription whose term covers `now`"""
        stmt = (
            select(Subscription)
            .where(
                Subscription.organization_id == organization_id,
                Subscription.status == SubscriptionStatus.active,
                col(Subscription.start_date) <= now,
                col(Subscription.end_date) >= now,
            )
            .order_by(col(Subscription.start_date).desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        organization_id: Optional[UUID] = None,
        status: Optional[str] = None,
        ending_between: Optional[Tuple[datetime, datetime]] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Subscription], int]:
        """List subscriptions newest first, with the total matching count"""
        stmt = select(Subscription)

        if organization_id:
            stmt = stmt.where(Subscription.organization_id == organization_id)
        if status:
            stmt = stmt.where(Subscription.status == SubscriptionStatus(status))
        if ending_between:
            start, end = ending_between
            stmt = stmt.where(
                col(Subscription.end_date) > start, col(Subscription.end_date) <= end
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = stmt.order_by(col(Subscription.created_at).desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_expiring(self, now: datetime, until: datetime) -> List[Subscription]:
        """Active, started subscriptions ending in (now, until], soonest first"""
        stmt = (
            select(Subscription)
            .where(
                Subscription.status == SubscriptionStatus.active,
                col(Subscription.start_date) <= now,
                col(Subscription.end_date) > now,
                col(Subscription.end_date) <= until,
            )
            .order_by(col(Subscription.end_date).asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_lapsed(self, now: datetime) -> List[Subscription]:
        """Active subscriptions whose end_date is before `now`"""
        stmt = select(Subscription).where(
            Subscription.status == SubscriptionStatus.active,
            col(Subscription.end_date) < now,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, subscription: Subscription) -> Subscription:
        """Create a new subscription"""
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def update(self, subscription: Subscription) -> Subscription:
        """Update existing subscription"""
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription
