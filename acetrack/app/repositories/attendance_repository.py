from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from acetrack.domain.entities import Attendance


class IAttendanceRepository(ABC):
    """Attendance repository interface - application layer"""

    @abstractmethod
    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[Attendance]:
        """Get a user's attendance record for an event"""
        pass

    @abstractmethod
    async def list_by_event(
        self, event_id: UUID, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Attendance], int]:
        """List attendance of an event by check-in time"""
        pass

    @abstractmethod
    async def list_by_user(
        self, user_id: UUID, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Attendance], int]:
        """List a user's attendance records, newest first"""
        pass

    @abstractmethod
    async def create(self, attendance: Attendance) -> Attendance:
        """
        Create a new attendance record.

        Raises:
            DuplicateRecordError: the user already checked in to the event
        """
        pass

    @abstractmethod
    async def update(self, attendance: Attendance) -> Attendance:
        """Update existing attendance record"""
        pass
