from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.repositories.organization_member_repository import (
    IOrganizationMemberRepository,
)
from acetrack.domain.entities import MemberRole, MemberStatus, OrganizationMember


class OrganizationMemberRepository(IOrganizationMemberRepository):
    """OrganizationMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, member_id: UUID) -> Optional[OrganizationMember]:
        """Get member record by ID"""
        stmt = select(OrganizationMember).where(OrganizationMember.id == member_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_organization_and_user(
        self, organization_id: UUID, user_id: UUID
    ) -> Optional[OrganizationMember]:
        """Get the member record of a user in an organization"""
        stmt = select(OrganizationMember).where(
            OrganizationMember.organization_id == organization_id,
            OrganizationMember.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(
        self, user_id: UUID, status: Optional[str] = None
    ) -> List[OrganizationMember]:
        """Get all member records of a user"""
        stmt = select(OrganizationMember).where(OrganizationMember.user_id == user_id)
        if status:
            stmt = stmt.where(OrganizationMember.status == MemberStatus(status))
        stmt = stmt.order_by(col(OrganizationMember.join_date).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list(
        self,
        organization_id: Optional[UUID] = None,
        role: Optional[str] = None,
        status: Optional[str] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[List[OrganizationMember], int]:
        """List member records, most recent join first, with the total count"""
        stmt = select(OrganizationMember)

        if organization_id:
            stmt = stmt.where(OrganizationMember.organization_id == organization_id)
        if role:
            stmt = stmt.where(OrganizationMember.role == MemberRole(role))
        if status:
            stmt = stmt.where(OrganizationMember.status == MemberStatus(status))

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            stmt.order_by(col(OrganizationMember.join_date).desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def count_by_organization(
        self, organization_id: UUID, statuses: Sequence[str]
    ) -> int:
        """Count member records of an organization in the given statuses"""
        stmt = select(func.count()).where(
            OrganizationMember.organization_id == organization_id,
            col(OrganizationMember.status).in_([MemberStatus(s) for s in statuses]),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, member: OrganizationMember) -> OrganizationMember:
        """Create a new member record"""
        self.session.add(member)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateRecordError(
                f"User {member.user_id} already has a record in organization {member.organization_id}"
            ) from e
        await self.session.refresh(member)
        return member

    async def update(self, member: OrganizationMember) -> OrganizationMember:
        """Update existing member record"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def delete(self, member: OrganizationMember) -> None:
        """Delete a member record"""
        await self.session.delete(member)
        await self.session.flush()

    async def deactivate_by_organization(self, organization_id: UUID) -> int:
        """Set every member record of an organization to inactive"""
        stmt = (
            update(OrganizationMember)
            .where(OrganizationMember.organization_id == organization_id)
            .values(status=MemberStatus.inactive)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
