from uuid import uuid4

import pytest

from acetrack.app.use_cases.users import LoadActorUseCase
from acetrack.domain.entities import UserRole, UserStatus


@pytest.mark.asyncio
async def test_org_admin_carries_organization(mock_uow, make_user, organization):
    user = make_user(role=UserRole.org_admin)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.organizations.get_by_admin_user_id.return_value = organization

    result = await LoadActorUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    assert result.value.role == UserRole.org_admin
    assert result.value.organization_id == organization.id


@pytest.mark.asyncio
async def test_member_has_no_organization(mock_uow, make_user):
    user = make_user(role=UserRole.member)
    mock_uow.users.get_by_id.return_value = user

    result = await LoadActorUseCase(mock_uow).execute(user.id)

    assert result.value.organization_id is None
    mock_uow.organizations.get_by_admin_user_id.assert_not_called()


@pytest.mark.asyncio
async def test_inactive_user(mock_uow, make_user):
    mock_uow.users.get_by_id.return_value = make_user(status=UserStatus.suspended)

    result = await LoadActorUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "USER_INACTIVE"


@pytest.mark.asyncio
async def test_unknown_user(mock_uow):
    result = await LoadActorUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "USER_NOT_FOUND"
