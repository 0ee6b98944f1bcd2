from datetime import date
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from acetrack.app.repositories.event_repository import EventQuery, IEventRepository
from acetrack.domain.entities import Event, EventStatus


def _apply_query(stmt, query: EventQuery):
    if not query.include_deleted:
        stmt = stmt.where(col(Event.deleted_at).is_(None))
    if query.organization_id:
        stmt = stmt.where(Event.organization_id == query.organization_id)
    if query.status:
        stmt = stmt.where(Event.status == EventStatus(query.status))
    if query.is_mandatory is not None:
        stmt = stmt.where(Event.is_mandatory == query.is_mandatory)
    if query.date_from:
        stmt = stmt.where(Event.event_date >= query.date_from)
    if query.date_to:
        stmt = stmt.where(Event.event_date <= query.date_to)
    if query.search:
        pattern = f"%{query.search}%"
        stmt = stmt.where(
            or_(
                col(Event.title).ilike(pattern),
                col(Event.description).ilike(pattern),
                col(Event.location).ilike(pattern),
            )
        )
    return stmt


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self, query: EventQuery, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Event], int]:
        """List events by date ascending, with the total matching count"""
        stmt = _apply_query(select(Event), query)

        total = await self._count(stmt)

        stmt = (
            stmt.order_by(col(Event.event_date).asc(), col(Event.start_time).asc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def count(self, query: EventQuery) -> int:
        """Count events matching the query"""
        return await self._count(_apply_query(select(Event), query))

    async def count_by_status(self, query: EventQuery) -> Dict[str, int]:
        """Count events matching the query grouped by status value"""
        stmt = _apply_query(select(Event.status, func.count()), query).group_by(Event.status)
        result = await self.session.execute(stmt)
        return {EventStatus(status).value: count for status, count in result.all()}

    async def get_upcoming(
        self, organization_id: UUID, today: date, limit: int = 5
    ) -> List[Event]:
        """Published, not deleted events on or after `today`, soonest first"""
        stmt = (
            select(Event)
            .where(
                Event.organization_id == organization_id,
                Event.status == EventStatus.published,
                Event.event_date >= today,
                col(Event.deleted_at).is_(None),
            )
            .order_by(col(Event.event_date).asc(), col(Event.start_time).asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, event: Event) -> Event:
        """Create a new event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: Event) -> Event:
        """Update existing event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def delete(self, event: Event) -> None:
        """Permanently delete an event"""
        await self.session.delete(event)
        await self.session.flush()

    async def _count(self, stmt) -> int:
        count_stmt = select(func.count()).select_from(stmt.subquery())
        result = await self.session.execute(count_stmt)
        return result.scalar_one()
