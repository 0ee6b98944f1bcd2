"""
Decide Join Request Use Case

Approves or rejects a pending join request.
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import MemberRole, MemberStatus

from .dtos import MemberDecisionCommand, MemberDecisionResponse, MemberResponse
from .role_sync import promote_to_org_admin

logger = logging.getLogger(__name__)


class DecideJoinRequestUseCase:
    """
    Use case for deciding on a join request.

    Business Rules:
    - Admins, or the org_admin of the organization
    - The record must be pending (NOT_PENDING otherwise)
    - approve: status active, role as given (default member);
      approving as org_admin promotes a plain member's global role
    - reject: the pending record is deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, member_id: UUID, command: MemberDecisionCommand
    ) -> Result[MemberDecisionResponse]:
        """
        Execute decide join request use case.

        Args:
            actor: Resolved caller
            member_id: Pending member record
            command: approve/reject with optional role and notes

        Returns:
            Result with MemberDecisionResponse, or Error
        """
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member request not found"))

            decision = authorize(actor, Action.manage_members, member)
            if not decision.allowed:
                return Return.err(decision.as_error())

            if member.status != MemberStatus.pending:
                return Return.err(Error("NOT_PENDING", "Member request is not pending"))

            from acetrack.domain.entities import AuditEvent

            if command.action == "approve":
                member.status = MemberStatus.active
                member.role = command.role or MemberRole.member
                if command.notes is not None:
                    member.notes = command.notes
                member.updated_at = datetime.utcnow()
                member = await self.uow.members.update(member)

                if member.role == MemberRole.org_admin:
                    await promote_to_org_admin(self.uow, member.user_id)

                response = MemberDecisionResponse(
                    status="approved", member=MemberResponse.model_validate(member)
                )
            else:
                await self.uow.members.delete(member)
                response = MemberDecisionResponse(status="rejected")

            audit = AuditEvent(
                organization_id=member.organization_id,
                user_id=actor.user_id,
                action=f"join_request_{response.status}",
                event_metadata={"member_user_id": str(member.user_id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Join request {response.status}: {member_id} by {actor.user_id}")

            return Return.ok(response)
