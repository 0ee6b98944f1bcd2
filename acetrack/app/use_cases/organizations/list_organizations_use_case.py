"""
List Organizations Use Case
"""

from typing import Optional

from acetrack.libs.result import Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.pagination import Pagination, page_window
from acetrack.domain.access_control import Actor, scope_organizations

from .dtos import ListOrganizationsQuery, OrganizationListResponse, OrganizationResponse


class ListOrganizationsUseCase:
    """
    Use case for listing organizations.

    Business Rules:
    - Non-admin callers only see active organizations
    - search matches name or description, case-insensitively
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[Actor], query: ListOrganizationsQuery
    ) -> Result[OrganizationListResponse]:
        scope = scope_organizations(actor, query.status.value if query.status else None)

        async with self.uow:
            offset, limit = page_window(query.page, query.limit)
            organizations, total = await self.uow.organizations.list(
                status=scope.status, search=query.search, offset=offset, limit=limit
            )

            return Return.ok(
                OrganizationListResponse(
                    organizations=[OrganizationResponse.model_validate(o) for o in organizations],
                    pagination=Pagination.of(query.page, query.limit, total),
                )
            )
