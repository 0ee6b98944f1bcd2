"""
Update Member Use Case

Changes a member's role, status or notes.
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import MemberRole

from .dtos import MemberResponse, UpdateMemberCommand
from .role_sync import promote_to_org_admin, revert_to_member

logger = logging.getLogger(__name__)


class UpdateMemberUseCase:
    """
    Use case for updating a member record.

    Business Rules:
    - Admins, or the org_admin of the organization
    - Becoming org_admin promotes a plain member's global role
    - Leaving org_admin reverts the global role to member unless the
      user still administers an organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, member_id: UUID, command: UpdateMemberCommand
    ) -> Result[MemberResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            decision = authorize(actor, Action.manage_members, member)
            if not decision.allowed:
                return Return.err(decision.as_error())

            changes = {k: v for k, v in command.model_dump().items() if v is not None}
            for field, value in changes.items():
                setattr(member, field, value)
            member.updated_at = datetime.utcnow()
            member = await self.uow.members.update(member)

            if command.role == MemberRole.org_admin:
                await promote_to_org_admin(self.uow, member.user_id)
            elif command.role is not None:
                await revert_to_member(self.uow, member.user_id)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=member.organization_id,
                user_id=actor.user_id,
                action="member_updated",
                event_metadata={
                    "member_user_id": str(member.user_id),
                    "changes": {k: str(getattr(v, "value", v)) for k, v in changes.items()},
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Member updated: {member_id} by {actor.user_id}")

            return Return.ok(MemberResponse.model_validate(member))
