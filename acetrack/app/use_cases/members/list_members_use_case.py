"""
List Members Use Case
"""

from typing import Optional

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.pagination import Pagination, page_window
from acetrack.domain.access_control import Actor, scope_members

from .dtos import ListMembersQuery, MemberListResponse, MemberResponse


class ListMembersUseCase:
    """
    Use case for listing member records.

    Business Rules:
    - Admins see every organization
    - An org_admin only sees their own organization, whatever filter is
      passed; nothing when they administer none
    - Plain members are refused
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[Actor], query: ListMembersQuery
    ) -> Result[MemberListResponse]:
        scoped = scope_members(actor, query.organization_id)
        if scoped.is_err():
            return Return.err(scoped.error)

        scope = scoped.value
        if scope.empty:
            return Return.ok(
                MemberListResponse(members=[], pagination=Pagination.of(query.page, query.limit, 0))
            )

        async with self.uow:
            offset, limit = page_window(query.page, query.limit)
            members, total = await self.uow.members.list(
                organization_id=scope.organization_id,
                role=query.role.value if query.role else None,
                status=query.status.value if query.status else None,
                offset=offset,
                limit=limit,
            )

            return Return.ok(
                MemberListResponse(
                    members=[MemberResponse.model_validate(m) for m in members],
                    pagination=Pagination.of(query.page, query.limit, total),
                )
            )
