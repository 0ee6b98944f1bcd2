import pytest

from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.app.use_cases.organizations import (
    UpdateOrganizationCommand,
    UpdateOrganizationUseCase,
)


@pytest.mark.asyncio
async def test_org_admin_renames_organization(mock_uow, organization, org_admin):
    mock_uow.organizations.get_by_id.return_value = organization

    result = await UpdateOrganizationUseCase(mock_uow).execute(
        org_admin, organization.id, UpdateOrganizationCommand(name="Chess Society")
    )

    assert result.is_ok()
    assert result.value.name == "Chess Society"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_rename_racing_another_organization(mock_uow, organization, org_admin):
    """The lower(name) index catches a rename that slipped past the lookup"""
    mock_uow.organizations.get_by_id.return_value = organization
    mock_uow.organizations.update.side_effect = DuplicateRecordError("duplicate", field="name")

    result = await UpdateOrganizationUseCase(mock_uow).execute(
        org_admin, organization.id, UpdateOrganizationCommand(name="Go Club")
    )

    assert result.is_err()
    assert result.error.code == "ORGANIZATION_NAME_EXISTS"
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_member_cannot_update(mock_uow, organization, member):
    mock_uow.organizations.get_by_id.return_value = organization

    result = await UpdateOrganizationUseCase(mock_uow).execute(
        member, organization.id, UpdateOrganizationCommand(description="Hijacked")
    )

    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.organizations.update.assert_not_called()
