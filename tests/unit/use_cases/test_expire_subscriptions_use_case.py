from datetime import datetime
from uuid import uuid4

import pytest

from acetrack.app.use_cases.admin import ExpireSubscriptionsUseCase
from acetrack.domain.entities import SubscriptionStatus

NOW = datetime(2026, 3, 1)


@pytest.mark.asyncio
async def test_lapsed_active_subscriptions_expire(mock_uow, make_subscription):
    """Each lapsed subscription is expired and audited; one commit"""
    # Arrange
    lapsed = [
        make_subscription(uuid4(), status=SubscriptionStatus.active),
        make_subscription(uuid4(), status=SubscriptionStatus.active),
    ]
    mock_uow.subscriptions.get_lapsed.return_value = lapsed

    # Act
    result = await ExpireSubscriptionsUseCase(mock_uow).execute(now=NOW)

    # Assert
    assert result.is_ok()
    assert result.value.expired == 2
    assert result.value.subscription_ids == [s.id for s in lapsed]
    assert all(s.status == SubscriptionStatus.expired for s in lapsed)
    mock_uow.subscriptions.get_lapsed.assert_called_once_with(NOW)
    assert mock_uow.audit_events.create.call_count == 2
    audit = mock_uow.audit_events.create.call_args[0][0]
    assert audit.action == "subscription_expired"
    assert audit.user_id is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_nothing_to_expire(mock_uow):
    mock_uow.subscriptions.get_lapsed.return_value = []

    result = await ExpireSubscriptionsUseCase(mock_uow).execute(now=NOW)

    assert result.value.expired == 0
    mock_uow.audit_events.create.assert_not_called()
