"""
Add Member Use Case

Adds a user to an organization directly, bypassing join approval.
"""

import logging

from acetrack.libs.result import Error, Result, Return
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import MemberRole, MemberStatus, OrganizationMember

from .dtos import AddMemberCommand, MemberResponse
from .role_sync import promote_to_org_admin

logger = logging.getLogger(__name__)

SEAT_STATUSES = (MemberStatus.active.value, MemberStatus.pending.value)


class AddMemberUseCase:
    """
    Use case for adding a member to an organization.

    Business Rules:
    - Admins, or the org_admin of the organization; plain members never
    - Organization and user must exist
    - A user has at most one record per organization (ALREADY_MEMBER)
    - max_members, when set, caps active and pending records
    - Direct adds are immediately active
    - Adding as org_admin promotes a plain member's global role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, command: AddMemberCommand) -> Result[MemberResponse]:
        """
        Execute add member use case.

        Args:
            actor: Resolved caller
            command: Target organization, user and role

        Returns:
            Result with MemberResponse, or Error
        """
        async with self.uow:
            decision = authorize(actor, Action.manage_members, command.organization_id)
            if not decision.allowed:
                return Return.err(decision.as_error())

            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            existing = await self.uow.members.get_by_organization_and_user(
                organization.id, user.id
            )
            if existing is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this organization")
                )

            if organization.max_members is not None:
                seats = await self.uow.members.count_by_organization(
                    organization.id, SEAT_STATUSES
                )
                if seats >= organization.max_members:
                    return Return.err(
                        Error("ORGANIZATION_FULL", "Organization has reached its member limit")
                    )

            try:
                member = await self.uow.members.create(
                    OrganizationMember(
                        organization_id=organization.id,
                        user_id=user.id,
                        role=command.role,
                        status=MemberStatus.active,
                        notes=command.notes,
                    )
                )
            except DuplicateRecordError:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this organization")
                )

            if command.role == MemberRole.org_admin:
                await promote_to_org_admin(self.uow, user.id)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=actor.user_id,
                action="member_added",
                event_metadata={"member_user_id": str(user.id), "role": command.role.value},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Member added: {user.id} to organization {organization.id} by {actor.user_id}")

            return Return.ok(MemberResponse.model_validate(member))
