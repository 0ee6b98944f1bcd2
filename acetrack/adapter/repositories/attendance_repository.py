from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from acetrack.app.repositories.attendance_repository import IAttendanceRepository
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.domain.entities import Attendance


class AttendanceRepository(IAttendanceRepository):
    """Attendance repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[Attendance]:
        """Get a user's attendance record for an event"""
        stmt = select(Attendance).where(
            Attendance.event_id == event_id, Attendance.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_event(
        self, event_id: UUID, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Attendance], int]:
        """List attendance of an event by check-in time"""
        stmt = select(Attendance).where(Attendance.event_id == event_id)
        total = await self._count(stmt)
        stmt = stmt.order_by(col(Attendance.check_in_time).asc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def list_by_user(
        self, user_id: UUID, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Attendance], int]:
        """List a user's attendance records, newest first"""
        stmt = select(Attendance).where(Attendance.user_id == user_id)
        total = await self._count(stmt)
        stmt = stmt.order_by(col(Attendance.check_in_time).desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, attendance: Attendance) -> Attendance:
        """Create a new attendance record"""
        self.session.add(attendance)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateRecordError(
                f"User {attendance.user_id} already checked in to event {attendance.event_id}"
            ) from e
        await self.session.refresh(attendance)
        return attendance

    async def update(self, attendance: Attendance) -> Attendance:
        """Update existing attendance record"""
        self.session.add(attendance)
        await self.session.flush()
        await self.session.refresh(attendance)
        return attendance

    async def _count(self, stmt) -> int:
        count_stmt = select(func.count()).select_from(stmt.subquery())
        result = await self.session.execute(count_stmt)
        return result.scalar_one()
