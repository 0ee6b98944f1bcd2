"""
Access Control

Role-scoped authorization shared by every use case.

Two kinds of answers:
- Write path: `authorize(actor, action, resource)` returns a Decision.
  A denial is always surfaced to the caller as PERMISSION_DENIED.
- Read path: `scope_*` functions narrow a list query. Visibility gaps
  produce an empty or narrowed Scope instead of an error, except for
  member and subscription lists which have no self-service read path.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.domain.entities import (
    Event,
    EventStatus,
    Organization,
    OrganizationStatus,
    UserRole,
)

PERMISSION_DENIED = "PERMISSION_DENIED"

# Fields an organization admin may change on their own subscription
ORG_ADMIN_SUBSCRIPTION_FIELDS = frozenset({"payment_method", "notes"})


class Action(str, Enum):
    """Mutations and privileged reads guarded by `authorize`"""

    create_event = "create_event"
    update_event = "update_event"
    delete_event = "delete_event"
    change_event_status = "change_event_status"
    restore_event = "restore_event"
    purge_event = "purge_event"
    manage_members = "manage_members"
    create_organization = "create_organization"
    update_organization = "update_organization"
    delete_organization = "delete_organization"
    create_subscription = "create_subscription"
    view_subscription = "view_subscription"
    update_subscription = "update_subscription"
    verify_subscription = "verify_subscription"
    cancel_subscription = "cancel_subscription"
    list_expiring_subscriptions = "list_expiring_subscriptions"
    record_attendance = "record_attendance"
    view_attendance = "view_attendance"
    view_audit_log = "view_audit_log"


@dataclass(frozen=True)
class Actor:
    """
    Authenticated caller, resolved once per request.

    organization_id is the organization this user administers
    (Organization.admin_user_id == user_id), or None.
    """

    user_id: UUID
    role: UserRole
    organization_id: Optional[UUID] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin

    def administers(self, organization_id: Optional[UUID]) -> bool:
        return (
            self.role == UserRole.org_admin
            and self.organization_id is not None
            and self.organization_id == organization_id
        )


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str = ""

    @classmethod
    def allow(cls) -> "Decision":
        return cls(True)

    @classmethod
    def deny(cls, reason: str) -> "Decision":
        return cls(False, reason)

    def as_error(self) -> Error:
        return Error(PERMISSION_DENIED, self.reason)


@dataclass(frozen=True)
class Scope:
    """Narrowing applied to a list query before it reaches a repository"""

    organization_id: Optional[UUID] = None
    status: Optional[str] = None
    include_deleted: bool = False
    empty: bool = False


Resource = Union[Organization, Event, UUID, object, None]


def _organization_of(resource: Resource) -> Optional[UUID]:
    if isinstance(resource, Organization):
        return resource.id
    if isinstance(resource, UUID):
        return resource
    return getattr(resource, "organization_id", None)


def _admin_or_org_admin(actor: Actor, resource: Resource, denial: str) -> Decision:
    if actor.is_admin or actor.administers(_organization_of(resource)):
        return Decision.allow()
    return Decision.deny(denial)


def authorize(
    actor: Optional[Actor],
    action: Action,
    resource: Resource = None,
    *,
    fields: Iterable[str] = (),
) -> Decision:
    """
    Decide whether `actor` may perform `action` on `resource`.

    Args:
        actor: Resolved caller, None for anonymous requests
        action: The guarded operation
        resource: Target entity, or an organization id for creations
        fields: Field names being changed (subscription updates only)

    Returns:
        Decision; `Decision.as_error()` gives the PERMISSION_DENIED Error
    """
    if actor is None:
        return Decision.deny("Authentication required")

    if action == Action.create_event:
        if actor.role not in (UserRole.admin, UserRole.org_admin):
            return Decision.deny("Insufficient permissions to create events")
        return _admin_or_org_admin(
            actor, resource, "Insufficient permissions to create events for this organization"
        )

    if action in (Action.update_event, Action.delete_event):
        # The creator keeps edit rights regardless of current role
        if isinstance(resource, Event) and resource.created_by == actor.user_id:
            return Decision.allow()
        verb = "update" if action == Action.update_event else "delete"
        return _admin_or_org_admin(
            actor, resource, f"Insufficient permissions to {verb} this event"
        )

    if action == Action.change_event_status:
        return _admin_or_org_admin(
            actor, resource, "Insufficient permissions to update event status"
        )

    if action in (Action.restore_event, Action.purge_event):
        if actor.is_admin:
            return Decision.allow()
        return Decision.deny("Only administrators can restore or permanently delete events")

    if action == Action.manage_members:
        if actor.role == UserRole.member:
            return Decision.deny("Insufficient permissions to manage members")
        return _admin_or_org_admin(
            actor, resource, "Insufficient permissions to manage members of this organization"
        )

    if action == Action.create_organization:
        return Decision.allow()

    if action in (Action.update_organization, Action.delete_organization):
        admin_user_id = getattr(resource, "admin_user_id", None)
        if actor.is_admin or admin_user_id == actor.user_id:
            return Decision.allow()
        return Decision.deny("Not authorized to modify this organization")

    if action in (Action.create_subscription, Action.view_subscription, Action.cancel_subscription):
        if actor.role == UserRole.member:
            return Decision.deny("Insufficient permissions for subscriptions")
        return _admin_or_org_admin(
            actor, resource, "Insufficient permissions for this organization's subscriptions"
        )

    if action == Action.update_subscription:
        if actor.is_admin:
            return Decision.allow()
        if not actor.administers(_organization_of(resource)):
            return Decision.deny("Insufficient permissions to update this subscription")
        disallowed = sorted(set(fields) - ORG_ADMIN_SUBSCRIPTION_FIELDS)
        if disallowed:
            return Decision.deny(
                "Organization admins can only update payment method and notes"
            )
        return Decision.allow()

    if action in (Action.verify_subscription, Action.list_expiring_subscriptions):
        if actor.is_admin:
            return Decision.allow()
        return Decision.deny("Only administrators can verify subscriptions")

    if action in (Action.record_attendance, Action.view_attendance, Action.view_audit_log):
        return _admin_or_org_admin(
            actor, resource, "Insufficient permissions for this organization"
        )

    return Decision.deny(f"Unknown action: {action}")


def scope_events(
    actor: Optional[Actor],
    organization_id: Optional[UUID] = None,
    status: Optional[str] = None,
    include_deleted: bool = False,
) -> Scope:
    """
    Narrow an event list query.

    - admin: unrestricted; soft-deleted rows only when requested
    - org_admin: forced to their own organization (empty if none)
    - member and anonymous: published only, never soft-deleted
    """
    if actor is None or actor.role == UserRole.member:
        return Scope(organization_id=organization_id, status=EventStatus.published.value)
    if actor.is_admin:
        return Scope(
            organization_id=organization_id, status=status, include_deleted=include_deleted
        )
    if actor.organization_id is None:
        return Scope(empty=True)
    return Scope(organization_id=actor.organization_id, status=status)


def _scope_organization_records(
    actor: Optional[Actor], organization_id: Optional[UUID], denial: str
) -> Result[Scope]:
    if actor is not None and actor.is_admin:
        return Return.ok(Scope(organization_id=organization_id))
    if actor is not None and actor.role == UserRole.org_admin:
        if actor.organization_id is None:
            return Return.ok(Scope(empty=True))
        return Return.ok(Scope(organization_id=actor.organization_id))
    return Return.err(Error(PERMISSION_DENIED, denial))


def scope_members(actor: Optional[Actor], organization_id: Optional[UUID] = None) -> Result[Scope]:
    """Narrow a member list query; plain members are rejected outright"""
    return _scope_organization_records(
        actor, organization_id, "Insufficient permissions to view members"
    )


def scope_subscriptions(
    actor: Optional[Actor], organization_id: Optional[UUID] = None
) -> Result[Scope]:
    """Narrow a subscription list query; plain members are rejected outright"""
    return _scope_organization_records(
        actor, organization_id, "Insufficient permissions to view subscriptions"
    )


def scope_organizations(actor: Optional[Actor], status: Optional[str] = None) -> Scope:
    """Only admins see non-active organizations"""
    if actor is not None and actor.is_admin:
        return Scope(status=status)
    return Scope(status=OrganizationStatus.active.value)


def is_event_visible(actor: Optional[Actor], event: Event) -> bool:
    if actor is not None and actor.is_admin:
        return True
    if event.is_deleted:
        return False
    if actor is not None and actor.role == UserRole.org_admin:
        return actor.administers(event.organization_id)
    return event.status == EventStatus.published


def is_organization_visible(actor: Optional[Actor], organization: Organization) -> bool:
    if actor is not None and actor.is_admin:
        return True
    return organization.status == OrganizationStatus.active
