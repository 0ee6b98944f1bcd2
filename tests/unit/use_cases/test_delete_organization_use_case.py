import pytest

from acetrack.app.use_cases.organizations import DeleteOrganizationUseCase
from acetrack.domain.entities import OrganizationStatus, UserRole


@pytest.mark.asyncio
async def test_self_service_delete_deactivates_and_demotes(
    mock_uow, org_admin, organization, make_user
):
    founder = make_user(id=org_admin.user_id, role=UserRole.org_admin)
    mock_uow.organizations.get_by_id.return_value = organization
    mock_uow.members.deactivate_by_organization.return_value = 4
    mock_uow.users.get_by_id.return_value = founder

    result = await DeleteOrganizationUseCase(mock_uow).execute(org_admin, organization.id)

    assert result.is_ok()
    assert result.value.status == "inactive"
    assert result.value.members_deactivated == 4
    assert organization.status == OrganizationStatus.inactive
    assert founder.role == UserRole.member
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_delete_leaves_founder_role(mock_uow, admin, organization):
    mock_uow.organizations.get_by_id.return_value = organization
    mock_uow.members.deactivate_by_organization.return_value = 0

    result = await DeleteOrganizationUseCase(mock_uow).execute(admin, organization.id)

    assert result.is_ok()
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_member_cannot_delete(mock_uow, member, organization):
    mock_uow.organizations.get_by_id.return_value = organization

    result = await DeleteOrganizationUseCase(mock_uow).execute(member, organization.id)

    assert result.error.code == "PERMISSION_DENIED"
    assert organization.status == OrganizationStatus.active
    mock_uow.members.deactivate_by_organization.assert_not_called()
