from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from acetrack.domain.entities import Organization


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def get_by_admin_user_id(self, user_id: UUID) -> Optional[Organization]:
        """Get the organization a user administers"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Organization]:
        """Get organization by name, case-insensitively"""
        pass

    @abstractmethod
    async def get_by_ids(self, organization_ids: Sequence[UUID]) -> List[Organization]:
        """Get several organizations by ID"""
        pass

    @abstractmethod
    async def list(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Organization], int]:
        """
        List organizations newest first.

        Returns:
            Tuple of (page of organizations, total matching count)
        """
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass

    @abstractmethod
    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        pass
