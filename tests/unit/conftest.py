from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from acetrack.domain.access_control import Actor
from acetrack.domain.entities import (
    Event,
    EventStatus,
    Organization,
    OrganizationStatus,
    Subscription,
    SubscriptionDuration,
    SubscriptionStatus,
    User,
    UserRole,
)

REPOSITORY_METHODS = {
    "users": ["get_by_id", "create", "update"],
    "organizations": [
        "get_by_id",
        "get_by_admin_user_id",
        "get_by_name",
        "get_by_ids",
        "list",
        "create",
        "update",
    ],
    "members": [
        "get_by_id",
        "get_by_organization_and_user",
        "get_by_user_id",
        "list",
        "count_by_organization",
        "create",
        "update",
        "delete",
        "deactivate_by_organization",
    ],
    "events": ["get_by_id", "list", "count", "count_by_status", "get_upcoming", "create", "update", "delete"],
    "subscriptions": [
        "get_by_id",
        "get_open_by_organization",
        "get_current_by_organization",
        "list",
        "get_expiring",
        "get_lapsed",
        "create",
        "update",
    ],
    "attendances": ["get_by_event_and_user", "list_by_event", "list_by_user", "create", "update"],
    "audit_events": ["create", "get_paginated"],
}


async def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repository, methods in REPOSITORY_METHODS.items():
        repo = MagicMock()
        for method in methods:
            setattr(repo, method, AsyncMock(return_value=None))
        setattr(uow, repository, repo)

    # create/update hand back what they were given
    for repository in REPOSITORY_METHODS:
        repo = getattr(uow, repository)
        for method in ("create", "update"):
            if hasattr(repo, method):
                getattr(repo, method).side_effect = _echo

    return uow


@pytest.fixture
def admin():
    return Actor(user_id=uuid4(), role=UserRole.admin)


@pytest.fixture
def organization():
    return Organization(
        id=uuid4(),
        name="Chess Club",
        admin_user_id=uuid4(),
        status=OrganizationStatus.active,
        allow_public_join=True,
        require_approval=True,
        created_at=datetime(2025, 1, 1),
    )


@pytest.fixture
def org_admin(organization):
    return Actor(
        user_id=organization.admin_user_id,
        role=UserRole.org_admin,
        organization_id=organization.id,
    )


@pytest.fixture
def member():
    return Actor(user_id=uuid4(), role=UserRole.member)


def _make_event(organization_id, status=EventStatus.draft, **overrides):
    fields = dict(
        id=uuid4(),
        organization_id=organization_id,
        title="Weekly Meetup",
        event_date=date(2030, 6, 1),
        banner="banner.png",
        start_time="09:00",
        end_time="11:00",
        status=status,
        is_mandatory=False,
        created_by=uuid4(),
        created_at=datetime(2025, 1, 1),
    )
    fields.update(overrides)
    return Event(**fields)


def _make_subscription(organization_id, status=SubscriptionStatus.pending, **overrides):
    fields = dict(
        id=uuid4(),
        organization_id=organization_id,
        duration=SubscriptionDuration.one_year,
        start_date=datetime(2025, 1, 1),
        end_date=datetime(2026, 1, 1),
        status=status,
        payment_amount=120.0,
        created_at=datetime(2025, 1, 1),
    )
    fields.update(overrides)
    return Subscription(**fields)


def _make_user(role=UserRole.member, **overrides):
    fields = dict(
        id=uuid4(),
        email=f"{uuid4().hex[:8]}@example.com",
        first_name="Ada",
        last_name="Lovelace",
        role=role,
        created_at=datetime(2025, 1, 1),
    )
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def make_event():
    return _make_event


@pytest.fixture
def make_subscription():
    return _make_subscription


@pytest.fixture
def make_user():
    return _make_user
