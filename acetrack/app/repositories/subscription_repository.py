from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from acetrack.domain.entities import Subscription


class ISubscriptionRepository(ABC):
    """Subscription repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """Get subscription by ID"""
        pass

    @abstractmethod
    async def get_open_by_organization(self, organization_id: UUID) -> Optional[Subscription]:
        """Get the active or pending subscription of an organization, if any"""
        pass

    @abstractmethod
    async def get_current_by_organization(
        self, organization_id: UUID, now: datetime
    ) -> Optional[Subscription]:
        """Get the latest active subscription whose term covers `now`"""
        pass

    @abstractmethod
    async def list(
        self,
        organization_id: Optional[UUID] = None,
        status: Optional[str] = None,
        ending_between: Optional[Tuple[datetime, datetime]] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Subscription], int]:
        """
        List subscriptions newest first.

        Args:
            ending_between: Only subscriptions whose end_date falls in (start, end]

        Returns:
            Tuple of (page of subscriptions, total matching count)
        """
        pass

    @abstractmethod
    async def get_expiring(self, now: datetime, until: datetime) -> List[Subscription]:
        """Active, started subscriptions ending in (now, until], soonest first"""
        pass

    @abstractmethod
    async def get_lapsed(self, now: datetime) -> List[Subscription]:
        """Active subscriptions whose end_date is before `now`"""
        pass

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """Create a new subscription"""
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """Update existing subscription"""
        pass
