"""
Request To Join Use Case

Self-service join request for organizations that allow it.
"""

import logging

from acetrack.libs.result import Error, Result, Return
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import (
    MemberRole,
    MemberStatus,
    OrganizationMember,
    OrganizationStatus,
)

from .add_member_use_case import SEAT_STATUSES
from .dtos import JoinRequestCommand, MemberResponse

logger = logging.getLogger(__name__)


class RequestToJoinUseCase:
    """
    Use case for requesting membership.

    Business Rules:
    - Organization must exist and be active
    - An existing pending record gives JOIN_REQUEST_PENDING,
      any other existing record gives ALREADY_MEMBER
    - Organization must allow public join (PUBLIC_JOIN_DISABLED)
    - max_members, when set, caps active and pending records
    - Pending when the organization requires approval, else active
    - The request message is stored as notes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, command: JoinRequestCommand) -> Result[MemberResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None or organization.status != OrganizationStatus.active:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            existing = await self.uow.members.get_by_organization_and_user(
                organization.id, actor.user_id
            )
            if existing is not None:
                if existing.status == MemberStatus.pending:
                    return Return.err(
                        Error("JOIN_REQUEST_PENDING", "Join request already pending")
                    )
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this organization")
                )

            if not organization.allow_public_join:
                return Return.err(
                    Error(
                        "PUBLIC_JOIN_DISABLED",
                        "This organization does not allow public join requests",
                    )
                )

            if organization.max_members is not None:
                seats = await self.uow.members.count_by_organization(
                    organization.id, SEAT_STATUSES
                )
                if seats >= organization.max_members:
                    return Return.err(
                        Error("ORGANIZATION_FULL", "Organization has reached its member limit")
                    )

            status = (
                MemberStatus.pending if organization.require_approval else MemberStatus.active
            )
            try:
                member = await self.uow.members.create(
                    OrganizationMember(
                        organization_id=organization.id,
                        user_id=actor.user_id,
                        role=MemberRole.member,
                        status=status,
                        notes=command.message,
                    )
                )
            except DuplicateRecordError:
                return Return.err(Error("JOIN_REQUEST_PENDING", "Join request already pending"))

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=actor.user_id,
                action="join_requested",
                event_metadata={"status": status.value},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Join request created: {actor.user_id} for organization {organization.id}")

            return Return.ok(MemberResponse.model_validate(member))
