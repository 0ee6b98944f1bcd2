"""
Get Organization Use Case
"""

from typing import Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor, is_organization_visible
from acetrack.domain.entities import MemberStatus

from .dtos import OrganizationResponse


class GetOrganizationUseCase:
    """
    Use case for reading one organization with its active member count.

    Business Rules:
    - Non-active organizations are not found for non-admins
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[Actor], organization_id: UUID
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None or not is_organization_visible(actor, organization):
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            member_count = await self.uow.members.count_by_organization(
                organization.id, [MemberStatus.active.value]
            )

            response = OrganizationResponse.model_validate(organization)
            response.member_count = member_count
            return Return.ok(response)
