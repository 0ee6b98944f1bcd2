"""
Update Organization Use Case
"""

import logging
from datetime import datetime
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize

from .dtos import OrganizationResponse, UpdateOrganizationCommand

logger = logging.getLogger(__name__)


class UpdateOrganizationUseCase:
    """
    Use case for updating an organization.

    Business Rules:
    - Admins, or the organization's own admin user
    - A new name must not collide case-insensitively with another organization
    - Only admins may change status
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, organization_id: UUID, command: UpdateOrganizationCommand
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            decision = authorize(actor, Action.update_organization, organization)
            if not decision.allowed:
                return Return.err(decision.as_error())

            changes = {k: v for k, v in command.model_dump().items() if v is not None}

            if "status" in changes and not actor.is_admin:
                return Return.err(
                    Error("PERMISSION_DENIED", "Only administrators can change organization status")
                )

            if "name" in changes and changes["name"].lower() != organization.name.lower():
                clash = await self.uow.organizations.get_by_name(changes["name"])
                if clash is not None and clash.id != organization.id:
                    return Return.err(
                        Error("ORGANIZATION_NAME_EXISTS", "Organization name already exists")
                    )

            for field, value in changes.items():
                setattr(organization, field, value)
            organization.updated_at = datetime.utcnow()
            try:
                organization = await self.uow.organizations.update(organization)
            except DuplicateRecordError:
                return Return.err(
                    Error("ORGANIZATION_NAME_EXISTS", "Organization name already exists")
                )

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=actor.user_id,
                action="organization_updated",
                event_metadata={"fields": sorted(changes)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Organization updated: {organization.id} by {actor.user_id}")

            return Return.ok(OrganizationResponse.model_validate(organization))
