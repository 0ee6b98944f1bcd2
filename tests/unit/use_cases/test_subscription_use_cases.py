from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from acetrack.app.use_cases.subscriptions import (
    CreateSubscriptionCommand,
    CreateSubscriptionUseCase,
    ListSubscriptionsQuery,
    ListSubscriptionsUseCase,
    UpdateSubscriptionCommand,
    UpdateSubscriptionUseCase,
    VerifySubscriptionCommand,
    VerifySubscriptionUseCase,
)
from acetrack.domain.entities import SubscriptionStatus

NOW = datetime(2025, 6, 1, 12, 0)


class TestCreateSubscription:
    @pytest.mark.asyncio
    async def test_end_date_computed_from_duration(self, mock_uow, org_admin, organization):
        mock_uow.organizations.get_by_id.return_value = organization
        command = CreateSubscriptionCommand(
            organization_id=organization.id,
            duration="6months",
            payment_amount=60,
            start_date=datetime(2024, 8, 31),
        )

        result = await CreateSubscriptionUseCase(mock_uow).execute(org_admin, command, now=NOW)

        assert result.is_ok()
        assert result.value.status == SubscriptionStatus.pending
        assert result.value.end_date == datetime(2025, 2, 28)
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_open_subscription_conflict(
        self, mock_uow, org_admin, organization, make_subscription
    ):
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.subscriptions.get_open_by_organization.return_value = make_subscription(
            organization.id
        )
        command = CreateSubscriptionCommand(
            organization_id=organization.id, duration="1year", payment_amount=100
        )

        result = await CreateSubscriptionUseCase(mock_uow).execute(org_admin, command, now=NOW)

        assert result.error.code == "SUBSCRIPTION_EXISTS"
        mock_uow.subscriptions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_end_before_start_rejected(self, mock_uow, admin, organization):
        mock_uow.organizations.get_by_id.return_value = organization
        command = CreateSubscriptionCommand(
            organization_id=organization.id,
            duration="1year",
            payment_amount=100,
            start_date=NOW,
            end_date=NOW - timedelta(days=1),
        )

        result = await CreateSubscriptionUseCase(mock_uow).execute(admin, command, now=NOW)

        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.reason == "end_date"


class TestUpdateSubscription:
    @pytest.mark.asyncio
    async def test_org_admin_updates_notes(self, mock_uow, org_admin, make_subscription):
        subscription = make_subscription(org_admin.organization_id)
        mock_uow.subscriptions.get_by_id.return_value = subscription

        result = await UpdateSubscriptionUseCase(mock_uow).execute(
            org_admin,
            subscription.id,
            UpdateSubscriptionCommand(notes="Paid by transfer", payment_method="bank"),
        )

        assert result.is_ok()
        assert subscription.notes == "Paid by transfer"
        assert subscription.payment_method == "bank"

    @pytest.mark.asyncio
    async def test_org_admin_restricted_field_rejects_whole_update(
        self, mock_uow, org_admin, make_subscription
    ):
        subscription = make_subscription(org_admin.organization_id)
        mock_uow.subscriptions.get_by_id.return_value = subscription

        result = await UpdateSubscriptionUseCase(mock_uow).execute(
            org_admin,
            subscription.id,
            UpdateSubscriptionCommand(notes="x", payment_amount=1),
        )

        assert result.error.code == "PERMISSION_DENIED"
        assert subscription.notes is None
        assert subscription.payment_amount == 120.0
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_admin_duration_change_recomputes_end(self, mock_uow, admin, make_subscription):
        subscription = make_subscription(uuid4())
        mock_uow.subscriptions.get_by_id.return_value = subscription

        result = await UpdateSubscriptionUseCase(mock_uow).execute(
            admin, subscription.id, UpdateSubscriptionCommand(duration="2years")
        )

        assert result.is_ok()
        assert subscription.end_date == datetime(2027, 1, 1)


class TestVerifySubscription:
    @pytest.mark.asyncio
    async def test_verified_activates(self, mock_uow, admin, make_subscription):
        subscription = make_subscription(uuid4())
        mock_uow.subscriptions.get_by_id.return_value = subscription

        result = await VerifySubscriptionUseCase(mock_uow).execute(
            admin, subscription.id, VerifySubscriptionCommand(verified=True), now=NOW
        )

        assert result.value.status == SubscriptionStatus.active
        assert subscription.verified_by == admin.user_id
        assert subscription.verified_at == NOW

    @pytest.mark.asyncio
    async def test_rejected_cancels(self, mock_uow, admin, make_subscription):
        subscription = make_subscription(uuid4())
        mock_uow.subscriptions.get_by_id.return_value = subscription

        result = await VerifySubscriptionUseCase(mock_uow).execute(
            admin, subscription.id, VerifySubscriptionCommand(verified=False), now=NOW
        )

        assert result.value.status == SubscriptionStatus.cancelled

    @pytest.mark.asyncio
    async def test_only_pending(self, mock_uow, admin, make_subscription):
        subscription = make_subscription(uuid4(), status=SubscriptionStatus.active)
        mock_uow.subscriptions.get_by_id.return_value = subscription

        result = await VerifySubscriptionUseCase(mock_uow).execute(
            admin, subscription.id, VerifySubscriptionCommand(verified=True), now=NOW
        )

        assert result.error.code == "NOT_PENDING"

    @pytest.mark.asyncio
    async def test_org_admin_cannot_verify(self, mock_uow, org_admin):
        result = await VerifySubscriptionUseCase(mock_uow).execute(
            org_admin, uuid4(), VerifySubscriptionCommand(verified=True), now=NOW
        )

        assert result.error.code == "PERMISSION_DENIED"
        mock_uow.subscriptions.get_by_id.assert_not_called()


class TestListSubscriptions:
    @pytest.mark.asyncio
    async def test_org_admin_filter_is_overridden(self, mock_uow, org_admin):
        mock_uow.subscriptions.list.return_value = ([], 0)

        result = await ListSubscriptionsUseCase(mock_uow).execute(
            org_admin, ListSubscriptionsQuery(organization_id=uuid4()), now=NOW
        )

        assert result.is_ok()
        kwargs = mock_uow.subscriptions.list.call_args.kwargs
        assert kwargs["organization_id"] == org_admin.organization_id

    @pytest.mark.asyncio
    async def test_expiring_filter_window(self, mock_uow, admin):
        mock_uow.subscriptions.list.return_value = ([], 0)

        await ListSubscriptionsUseCase(mock_uow).execute(
            admin, ListSubscriptionsQuery(expiring=True), now=NOW
        )

        kwargs = mock_uow.subscriptions.list.call_args.kwargs
        assert kwargs["status"] == "active"
        assert kwargs["ending_between"] == (NOW, NOW + timedelta(days=30))

    @pytest.mark.asyncio
    async def test_member_rejected(self, mock_uow, member):
        result = await ListSubscriptionsUseCase(mock_uow).execute(
            member, ListSubscriptionsQuery(), now=NOW
        )

        assert result.error.code == "PERMISSION_DENIED"
        mock_uow.subscriptions.list.assert_not_called()
