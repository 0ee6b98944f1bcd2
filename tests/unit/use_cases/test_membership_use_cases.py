from datetime import datetime
from uuid import uuid4

import pytest

from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.use_cases.members import (
    AddMemberCommand,
    AddMemberUseCase,
    DecideJoinRequestUseCase,
    JoinRequestCommand,
    MemberDecisionCommand,
    RemoveMemberUseCase,
    RequestToJoinUseCase,
)
from acetrack.domain.entities import (
    MemberRole,
    MemberStatus,
    OrganizationMember,
    UserRole,
)


def make_member(organization_id, user_id=None, status=MemberStatus.active, role=MemberRole.member):
    return OrganizationMember(
        id=uuid4(),
        organization_id=organization_id,
        user_id=user_id or uuid4(),
        role=role,
        status=status,
        join_date=datetime(2025, 1, 1),
    )


class TestAddMember:
    @pytest.mark.asyncio
    async def test_adds_active_member(self, mock_uow, org_admin, organization, make_user):
        user = make_user()
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.users.get_by_id.return_value = user

        result = await AddMemberUseCase(mock_uow).execute(
            org_admin, AddMemberCommand(organization_id=organization.id, user_id=user.id)
        )

        assert result.is_ok()
        assert result.value.status == MemberStatus.active
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_existing_member_conflict(self, mock_uow, org_admin, organization, make_user):
        user = make_user()
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.users.get_by_id.return_value = user
        mock_uow.members.get_by_organization_and_user.return_value = make_member(
            organization.id, user.id
        )

        result = await AddMemberUseCase(mock_uow).execute(
            org_admin, AddMemberCommand(organization_id=organization.id, user_id=user.id)
        )

        assert result.error.code == "ALREADY_MEMBER"
        mock_uow.members.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_maps_to_conflict(
        self, mock_uow, org_admin, organization, make_user
    ):
        user = make_user()
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.users.get_by_id.return_value = user
        mock_uow.members.create.side_effect = DuplicateRecordError("organization_members")

        result = await AddMemberUseCase(mock_uow).execute(
            org_admin, AddMemberCommand(organization_id=organization.id, user_id=user.id)
        )

        assert result.error.code == "ALREADY_MEMBER"
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_full_organization(self, mock_uow, org_admin, organization, make_user):
        organization.max_members = 2
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.users.get_by_id.return_value = make_user()
        mock_uow.members.count_by_organization.return_value = 2

        result = await AddMemberUseCase(mock_uow).execute(
            org_admin, AddMemberCommand(organization_id=organization.id, user_id=uuid4())
        )

        assert result.error.code == "ORGANIZATION_FULL"

    @pytest.mark.asyncio
    async def test_member_cannot_add(self, mock_uow, member, organization):
        result = await AddMemberUseCase(mock_uow).execute(
            member, AddMemberCommand(organization_id=organization.id, user_id=uuid4())
        )

        assert result.error.code == "PERMISSION_DENIED"


class TestRequestToJoin:
    @pytest.mark.asyncio
    async def test_pending_when_approval_required(self, mock_uow, member, organization):
        mock_uow.organizations.get_by_id.return_value = organization

        result = await RequestToJoinUseCase(mock_uow).execute(
            member, JoinRequestCommand(organization_id=organization.id)
        )

        assert result.value.status == MemberStatus.pending
        assert result.value.role == MemberRole.member

    @pytest.mark.asyncio
    async def test_active_when_no_approval(self, mock_uow, member, organization):
        organization.require_approval = False
        mock_uow.organizations.get_by_id.return_value = organization

        result = await RequestToJoinUseCase(mock_uow).execute(
            member, JoinRequestCommand(organization_id=organization.id)
        )

        assert result.value.status == MemberStatus.active

    @pytest.mark.asyncio
    async def test_public_join_disabled(self, mock_uow, member, organization):
        organization.allow_public_join = False
        mock_uow.organizations.get_by_id.return_value = organization

        result = await RequestToJoinUseCase(mock_uow).execute(
            member, JoinRequestCommand(organization_id=organization.id)
        )

        assert result.error.code == "PUBLIC_JOIN_DISABLED"

    @pytest.mark.asyncio
    async def test_second_request_while_pending(self, mock_uow, member, organization):
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.members.get_by_organization_and_user.return_value = make_member(
            organization.id, member.user_id, status=MemberStatus.pending
        )

        result = await RequestToJoinUseCase(mock_uow).execute(
            member, JoinRequestCommand(organization_id=organization.id)
        )

        assert result.error.code == "JOIN_REQUEST_PENDING"


class TestDecideJoinRequest:
    @pytest.mark.asyncio
    async def test_reject_deletes_pending_record(self, mock_uow, org_admin, organization):
        pending = make_member(organization.id, status=MemberStatus.pending)
        mock_uow.members.get_by_id.return_value = pending
        mock_uow.organizations.get_by_id.return_value = organization

        result = await DecideJoinRequestUseCase(mock_uow).execute(
            org_admin, pending.id, MemberDecisionCommand(action="reject")
        )

        assert result.is_ok()
        mock_uow.members.delete.assert_called_once_with(pending)
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_approve_activates(self, mock_uow, org_admin, organization):
        pending = make_member(organization.id, status=MemberStatus.pending)
        mock_uow.members.get_by_id.return_value = pending
        mock_uow.organizations.get_by_id.return_value = organization

        result = await DecideJoinRequestUseCase(mock_uow).execute(
            org_admin, pending.id, MemberDecisionCommand(action="approve", role="officer")
        )

        assert result.is_ok()
        assert pending.status == MemberStatus.active
        assert pending.role == MemberRole.officer


class TestRemoveMember:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("own_organization", [True, False])
    async def test_plain_member_cannot_remove(
        self, mock_uow, member, organization, own_organization
    ):
        organization_id = organization.id if own_organization else uuid4()
        if own_organization:
            mock_uow.members.get_by_organization_and_user.return_value = make_member(
                organization.id, member.user_id
            )
        record = make_member(organization_id)
        mock_uow.members.get_by_id.return_value = record
        mock_uow.organizations.get_by_id.return_value = organization

        result = await RemoveMemberUseCase(mock_uow).execute(member, record.id)

        assert result.is_err()
        assert result.error.code == "PERMISSION_DENIED"
        mock_uow.members.delete.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_cannot_remove_designated_admin(self, mock_uow, admin, organization):
        record = make_member(organization.id, organization.admin_user_id, role=MemberRole.org_admin)
        mock_uow.members.get_by_id.return_value = record
        mock_uow.organizations.get_by_id.return_value = organization

        result = await RemoveMemberUseCase(mock_uow).execute(admin, record.id)

        assert result.error.code == "PERMISSION_DENIED"
        mock_uow.members.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_removing_co_admin_reverts_global_role(
        self, mock_uow, org_admin, organization, make_user
    ):
        co_admin = make_user(role=UserRole.org_admin)
        record = make_member(organization.id, co_admin.id, role=MemberRole.org_admin)
        mock_uow.members.get_by_id.return_value = record
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.users.get_by_id.return_value = co_admin

        result = await RemoveMemberUseCase(mock_uow).execute(org_admin, record.id)

        assert result.value.status == "removed"
        assert co_admin.role == UserRole.member
        mock_uow.members.delete.assert_called_once_with(record)
