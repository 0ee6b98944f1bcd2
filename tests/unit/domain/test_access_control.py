from datetime import datetime
from uuid import uuid4

import pytest

from acetrack.domain.access_control import (
    Action,
    Actor,
    authorize,
    is_event_visible,
    is_organization_visible,
    scope_events,
    scope_members,
    scope_organizations,
    scope_subscriptions,
)
from acetrack.domain.entities import EventStatus, OrganizationStatus, UserRole


def test_anonymous_is_denied_every_action():
    assert not authorize(None, Action.create_organization).allowed


def test_member_cannot_create_events(member):
    decision = authorize(member, Action.create_event, uuid4())

    assert not decision.allowed
    assert decision.as_error().code == "PERMISSION_DENIED"


def test_org_admin_creates_events_only_for_own_organization(org_admin, organization):
    assert authorize(org_admin, Action.create_event, organization.id).allowed
    assert not authorize(org_admin, Action.create_event, uuid4()).allowed


def test_org_admin_without_organization_is_denied():
    actor = Actor(user_id=uuid4(), role=UserRole.org_admin)

    assert not authorize(actor, Action.create_event, uuid4()).allowed


def test_creator_keeps_edit_rights(make_event, member):
    event = make_event(uuid4(), created_by=member.user_id)

    assert authorize(member, Action.update_event, event).allowed
    assert authorize(member, Action.delete_event, event).allowed
    assert not authorize(member, Action.change_event_status, event).allowed


@pytest.mark.parametrize("action", [Action.restore_event, Action.purge_event])
def test_restore_and_purge_are_admin_only(action, admin, org_admin, make_event):
    event = make_event(org_admin.organization_id)

    assert authorize(admin, action, event).allowed
    assert not authorize(org_admin, action, event).allowed


def test_organization_update_by_its_admin_user(organization, org_admin, member):
    assert authorize(org_admin, Action.update_organization, organization).allowed
    assert not authorize(member, Action.update_organization, organization).allowed


def test_org_admin_subscription_update_restricted_fields(org_admin, make_subscription):
    subscription = make_subscription(org_admin.organization_id)

    assert authorize(
        org_admin, Action.update_subscription, subscription, fields=["notes", "payment_method"]
    ).allowed
    denied = authorize(
        org_admin, Action.update_subscription, subscription, fields=["notes", "payment_amount"]
    )
    assert not denied.allowed
    assert "payment method and notes" in denied.reason


def test_verify_subscription_admin_only(admin, org_admin):
    assert authorize(admin, Action.verify_subscription).allowed
    assert not authorize(org_admin, Action.verify_subscription).allowed


class TestScopes:
    def test_events_anonymous_and_member_see_published(self, member):
        for actor in (None, member):
            scope = scope_events(actor, status=EventStatus.draft.value, include_deleted=True)
            assert scope.status == EventStatus.published.value
            assert scope.include_deleted is False

    def test_events_org_admin_forced_to_own_organization(self, org_admin):
        scope = scope_events(org_admin, organization_id=uuid4(), status="draft")

        assert scope.organization_id == org_admin.organization_id
        assert scope.status == "draft"

    def test_events_org_admin_without_organization_is_empty(self):
        actor = Actor(user_id=uuid4(), role=UserRole.org_admin)

        assert scope_events(actor).empty

    def test_events_admin_unrestricted(self, admin):
        organization_id = uuid4()

        scope = scope_events(admin, organization_id=organization_id, include_deleted=True)

        assert scope.organization_id == organization_id
        assert scope.include_deleted is True

    @pytest.mark.parametrize("scope_fn", [scope_members, scope_subscriptions])
    def test_member_lists_rejected_for_members(self, scope_fn, member):
        result = scope_fn(member, uuid4())

        assert result.is_err()
        assert result.error.code == "PERMISSION_DENIED"

    @pytest.mark.parametrize("scope_fn", [scope_members, scope_subscriptions])
    def test_org_admin_filter_overridden(self, scope_fn, org_admin):
        result = scope_fn(org_admin, uuid4())

        assert result.value.organization_id == org_admin.organization_id

    def test_organizations_non_admin_sees_active_only(self, member, admin):
        assert scope_organizations(member, "pending").status == OrganizationStatus.active.value
        assert scope_organizations(admin, "pending").status == "pending"


class TestVisibility:
    def test_published_event_visible_to_anyone(self, make_event):
        event = make_event(uuid4(), status=EventStatus.published)

        assert is_event_visible(None, event)

    def test_draft_hidden_from_members(self, make_event, member):
        event = make_event(uuid4(), status=EventStatus.draft)

        assert not is_event_visible(member, event)

    def test_deleted_event_visible_only_to_admin(self, make_event, admin, org_admin):
        event = make_event(
            org_admin.organization_id,
            status=EventStatus.published,
            deleted_at=datetime(2025, 1, 1),
        )

        assert is_event_visible(admin, event)
        assert not is_event_visible(org_admin, event)

    def test_inactive_organization_hidden(self, organization, member, admin):
        organization.status = OrganizationStatus.inactive

        assert not is_organization_visible(member, organization)
        assert is_organization_visible(admin, organization)
