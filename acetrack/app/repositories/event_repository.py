from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from acetrack.domain.entities import Event


@dataclass(frozen=True)
class EventQuery:
    """Filters shared by event listing, counting and statistics"""

    organization_id: Optional[UUID] = None
    status: Optional[str] = None
    is_mandatory: Optional[bool] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    search: Optional[str] = None
    include_deleted: bool = False


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID, soft-deleted events included"""
        pass

    @abstractmethod
    async def list(
        self, query: EventQuery, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Event], int]:
        """
        List events by date ascending.

        Returns:
            Tuple of (page of events, total matching count)
        """
        pass

    @abstractmethod
    async def count(self, query: EventQuery) -> int:
        """Count events matching the query"""
        pass

    @abstractmethod
    async def count_by_status(self, query: EventQuery) -> Dict[str, int]:
        """Count events matching the query grouped by status value"""
        pass

    @abstractmethod
    async def get_upcoming(
        self, organization_id: UUID, today: date, limit: int = 5
    ) -> List[Event]:
        """Published, not deleted events on or after `today`, soonest first"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Update existing event"""
        pass

    @abstractmethod
    async def delete(self, event: Event) -> None:
        """Permanently delete an event"""
        pass
