"""
Get My Organizations Use Case
"""

from typing import List

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.members.dtos import MemberResponse
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import MemberStatus, OrganizationStatus

from .dtos import MyOrganizationResponse, OrganizationResponse


class GetMyOrganizationsUseCase:
    """
    Use case for the organizations the caller belongs to.

    Business Rules:
    - Active memberships in active organizations only
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[List[MyOrganizationResponse]]:
        async with self.uow:
            memberships = await self.uow.members.get_by_user_id(
                actor.user_id, status=MemberStatus.active.value
            )
            organizations = await self.uow.organizations.get_by_ids(
                [m.organization_id for m in memberships]
            )
            by_id = {o.id: o for o in organizations if o.status == OrganizationStatus.active}

            return Return.ok(
                [
                    MyOrganizationResponse(
                        organization=OrganizationResponse.model_validate(by_id[m.organization_id]),
                        membership=MemberResponse.model_validate(m),
                    )
                    for m in memberships
                    if m.organization_id in by_id
                ]
            )
