from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.repositories.organization_repository import IOrganizationRepository
from acetrack.domain.entities import Organization, OrganizationStatus


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        stmt = select(Organization).where(Organization.id == organization_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_admin_user_id(self, user_id: UUID) -> Optional[Organization]:
        """Get the organization a user administers"""
        stmt = select(Organization).where(Organization.admin_user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Organization]:
        """Get organization by name, case-insensitively"""
        stmt = select(Organization).where(
            func.lower(Organization.name) == name.strip().lower()
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_ids(self, organization_ids: Sequence[UUID]) -> List[Organization]:
        """Get several organizations by ID"""
        if not organization_ids:
            return []
        stmt = select(Organization).where(col(Organization.id).in_(list(organization_ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Organization], int]:
        """List organizations newest first, with the total matching count"""
        stmt = select(Organization)

        if status:
            stmt = stmt.where(Organization.status == OrganizationStatus(status))

        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(Organization.name).ilike(pattern),
                    col(Organization.description).ilike(pattern),
                )
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = stmt.order_by(col(Organization.created_at).desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        self.session.add(organization)
        await self._flush(organization)
        await self.session.refresh(organization)
        return organization

    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        self.session.add(organization)
        await self._flush(organization)
        await self.session.refresh(organization)
        return organization

    async def _flush(self, organization: Organization) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            # admin_user_id and lower(name) carry the unique indexes
            field = "admin_user_id" if "admin_user_id" in str(e.orig) else "name"
            raise DuplicateRecordError(
                f"Organization {organization.name} violates a uniqueness constraint",
                field=field,
            ) from e
