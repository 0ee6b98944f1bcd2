"""
Get My Memberships Use Case
"""

from typing import List

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor

from .dtos import MemberResponse


class GetMyMembershipsUseCase:
    """Every member record of the caller, pending requests included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[List[MemberResponse]]:
        async with self.uow:
            members = await self.uow.members.get_by_user_id(actor.user_id)
            return Return.ok([MemberResponse.model_validate(m) for m in members])
