"""
Load Actor Use Case

Resolves the authenticated user into an Actor once per request.
"""

from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import UserRole, UserStatus


class LoadActorUseCase:
    """
    Use case for building the caller's Actor from a token's user_id.

    Business Rules:
    - User must exist
    - User must be active
    - org_admins carry the organization they administer, if any
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[Actor]:
        """
        Execute load actor use case.

        Args:
            user_id: User UUID from JWT

        Returns:
            Result with Actor, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.status != UserStatus.active:
                return Return.err(Error("USER_INACTIVE", "User account is not active"))

            organization_id = None
            if user.role == UserRole.org_admin:
                organization = await self.uow.organizations.get_by_admin_user_id(user.id)
                if organization is not None:
                    organization_id = organization.id

            return Return.ok(
                Actor(user_id=user.id, role=UserRole(user.role), organization_id=organization_id)
            )
