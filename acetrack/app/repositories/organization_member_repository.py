from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from acetrack.domain.entities import OrganizationMember


class IOrganizationMemberRepository(ABC):
    """OrganizationMember repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: UUID) -> Optional[OrganizationMember]:
        """Get member record by ID"""
        pass

    @abstractmethod
    async def get_by_organization_and_user(
        self, organization_id: UUID, user_id: UUID
    ) -> Optional[OrganizationMember]:
        """Get the member record of a user in an organization"""
        pass

    @abstractmethod
    async def get_by_user_id(
        self, user_id: UUID, status: Optional[str] = None
    ) -> List[OrganizationMember]:
        """Get all member records of a user"""
        pass

    @abstractmethod
    async def list(
        self,
        organization_id: Optional[UUID] = None,
        role: Optional[str] = None,
        status: Optional[str] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[List[OrganizationMember], int]:
        """
        List member records, most recent join first.

        Returns:
            Tuple of (page of members, total matching count)
        """
        pass

    @abstractmethod
    async def count_by_organization(
        self, organization_id: UUID, statuses: Sequence[str]
    ) -> int:
        """Count member records of an organization in the given statuses"""
        pass

    @abstractmethod
    async def create(self, member: OrganizationMember) -> OrganizationMember:
        """
        Create a new member record.

        Raises:
            DuplicateRecordError: the user already has a record in the organization
        """
        pass

    @abstractmethod
    async def update(self, member: OrganizationMember) -> OrganizationMember:
        """Update existing member record"""
        pass

    @abstractmethod
    async def delete(self, member: OrganizationMember) -> None:
        """Delete a member record"""
        pass

    @abstractmethod
    async def deactivate_by_organization(self, organization_id: UUID) -> int:
        """Set every member record of an organization to inactive; returns the row count"""
        pass
