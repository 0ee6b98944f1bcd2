"""
Remove Member Use Case

Deletes a member record from an organization.
"""

import logging
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize

from .dtos import RemoveMemberResponse
from .role_sync import revert_to_member

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing a member from an organization.

    Business Rules:
    - Admins, or the org_admin of the organization; plain members never
    - The organization's designated admin cannot be removed
    - The record is deleted
    - A removed org_admin reverts to member unless they still
      administer an organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, member_id: UUID) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            actor: Resolved caller
            member_id: Member record to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            decision = authorize(actor, Action.manage_members, member)
            if not decision.allowed:
                return Return.err(decision.as_error())

            organization = await self.uow.organizations.get_by_id(member.organization_id)
            if organization is not None and organization.admin_user_id == member.user_id:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "Cannot remove the organization administrator",
                    )
                )

            await self.uow.members.delete(member)
            await revert_to_member(self.uow, member.user_id)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=member.organization_id,
                user_id=actor.user_id,
                action="member_removed",
                event_metadata={
                    "removed_user_id": str(member.user_id),
                    "removed_user_role": member.role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Member removed: {member_id} by {actor.user_id}")

            return Return.ok(RemoveMemberResponse(status="removed"))
