"""
Create Organization Use Case

Founds an organization with its first subscription and admin membership.
"""

import logging
from datetime import datetime
from typing import Optional

from acetrack.libs.result import Error, Result, Return
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.members.role_sync import promote_to_org_admin
from acetrack.app.use_cases.subscriptions.dtos import SubscriptionResponse
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import (
    MemberRole,
    MemberStatus,
    Organization,
    OrganizationMember,
    OrganizationStatus,
    Subscription,
    SubscriptionStatus,
    UserStatus,
)
from acetrack.domain.subscription_terms import calculate_end_date

from .dtos import CreateOrganizationCommand, CreateOrganizationResponse, OrganizationResponse

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    """
    Use case for creating an organization.

    Business Rules:
    - Founder must exist and be active
    - A user administers at most one organization
    - Names are unique case-insensitively
    - Organization starts active with the founder as admin_user_id
    - A pending subscription is opened (start defaults to now)
    - Founder gets an active org_admin membership
    - A plain member founder is promoted to global org_admin
    - All of the above commit together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        command: CreateOrganizationCommand,
        now: Optional[datetime] = None,
    ) -> Result[CreateOrganizationResponse]:
        """
        Execute create organization use case.

        Args:
            actor: Resolved caller, the founder
            command: Organization details and initial subscription terms
            now: Reference time for the default subscription start

        Returns:
            Result with CreateOrganizationResponse, or Error
        """
        now = now or datetime.utcnow()

        async with self.uow:
            user = await self.uow.users.get_by_id(actor.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if user.status != UserStatus.active:
                return Return.err(Error("USER_INACTIVE", "User account is not active"))

            owned = await self.uow.organizations.get_by_admin_user_id(user.id)
            if owned is not None:
                return Return.err(
                    Error("ALREADY_OWNS_ORGANIZATION", "User already owns an organization")
                )

            if await self.uow.organizations.get_by_name(command.name) is not None:
                return Return.err(
                    Error("ORGANIZATION_NAME_EXISTS", "Organization name already exists")
                )

            try:
                organization = await self.uow.organizations.create(
                    Organization(
                        **command.model_dump(exclude={"subscription"}),
                        admin_user_id=user.id,
                        status=OrganizationStatus.active,
                    )
                )
            except DuplicateRecordError as e:
                if e.field == "admin_user_id":
                    return Return.err(
                        Error("ALREADY_OWNS_ORGANIZATION", "User already owns an organization")
                    )
                return Return.err(
                    Error("ORGANIZATION_NAME_EXISTS", "Organization name already exists")
                )

            terms = command.subscription
            start_date = terms.start_date or now
            subscription = await self.uow.subscriptions.create(
                Subscription(
                    organization_id=organization.id,
                    duration=terms.duration,
                    start_date=start_date,
                    end_date=calculate_end_date(start_date, terms.duration),
                    status=SubscriptionStatus.pending,
                    payment_amount=terms.payment_amount,
                    payment_method=terms.payment_method,
                    notes=terms.notes,
                )
            )

            await self.uow.members.create(
                OrganizationMember(
                    organization_id=organization.id,
                    user_id=user.id,
                    role=MemberRole.org_admin,
                    status=MemberStatus.active,
                )
            )

            await promote_to_org_admin(self.uow, user.id)

            from acetrack.domain.entities import AuditEvent

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=user.id,
                action="organization_created",
                event_metadata={
                    "name": organization.name,
                    "subscription_id": str(subscription.id),
                    "duration": terms.duration.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Organization created: {organization.name} with {terms.duration.value} "
                f"subscription by user {user.id}"
            )

            return Return.ok(
                CreateOrganizationResponse(
                    organization=OrganizationResponse.model_validate(organization),
                    subscription=SubscriptionResponse.from_entity(subscription, now),
                )
            )
