"""
Delete Organization Use Case

Soft delete: the organization and every membership become inactive.
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import OrganizationStatus, UserRole

from .dtos import DeleteOrganizationResponse

logger = logging.getLogger(__name__)


class DeleteOrganizationUseCase:
    """
    Use case for deleting an organization.

    Business Rules:
    - Admins, or the organization's own admin user
    - Organization status becomes inactive (soft delete)
    - All member records become inactive
    - When the organization's admin deletes it themselves, their global
      role reverts to member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, organization_id: UUID
    ) -> Result[DeleteOrganizationResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            decision = authorize(actor, Action.delete_organization, organization)
            if not decision.allowed:
                return Return.err(decision.as_error())

            organization.status = OrganizationStatus.inactive
            organization.updated_at = datetime.utcnow()
            await self.uow.organizations.update(organization)

            deactivated = await self.uow.members.deactivate_by_organization(organization.id)

            if actor.user_id == organization.admin_user_id:
                user = await self.uow.users.get_by_id(actor.user_id)
                if user is not None and user.role == UserRole.org_admin:
                    user.role = UserRole.member
                    await self.uow.users.update(user)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=actor.user_id,
                action="organization_deleted",
                event_metadata={"members_deactivated": deactivated},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Organization deleted: {organization.id} by {actor.user_id}")

            return Return.ok(
                DeleteOrganizationResponse(status="inactive", members_deactivated=deactivated)
            )
