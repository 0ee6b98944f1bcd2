from datetime import datetime
from uuid import uuid4

import pytest

from acetrack.app.use_cases.events import DeleteEventUseCase, RestoreEventUseCase
from acetrack.domain.entities import EventStatus


@pytest.mark.asyncio
async def test_soft_delete_sets_deleted_at(mock_uow, org_admin, make_event):
    event = make_event(org_admin.organization_id, status=EventStatus.published)
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(org_admin, event.id)

    assert result.is_ok()
    assert result.value.status == "deleted"
    assert event.deleted_at is not None
    mock_uow.events.delete.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_ongoing_event_not_deletable_by_org_admin(mock_uow, org_admin, make_event):
    event = make_event(org_admin.organization_id, status=EventStatus.ongoing)
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(org_admin, event.id)

    assert result.error.code == "PERMISSION_DENIED"
    assert event.deleted_at is None
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_purge_requires_soft_delete_first(mock_uow, admin, make_event):
    event = make_event(uuid4())
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(admin, event.id, permanently=True)

    assert result.error.code == "EVENT_NOT_DELETED"
    mock_uow.events.delete.assert_not_called()


@pytest.mark.asyncio
async def test_admin_purges_soft_deleted_event(mock_uow, admin, make_event):
    event = make_event(uuid4(), deleted_at=datetime(2025, 1, 1))
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(admin, event.id, permanently=True)

    assert result.value.status == "purged"
    mock_uow.events.delete.assert_called_once_with(event)


@pytest.mark.asyncio
async def test_org_admin_cannot_purge(mock_uow, org_admin, make_event):
    event = make_event(org_admin.organization_id, deleted_at=datetime(2025, 1, 1))
    mock_uow.events.get_by_id.return_value = event

    result = await DeleteEventUseCase(mock_uow).execute(org_admin, event.id, permanently=True)

    assert result.error.code == "PERMISSION_DENIED"


@pytest.mark.asyncio
async def test_restore_clears_deleted_at(mock_uow, admin, make_event):
    event = make_event(uuid4(), deleted_at=datetime(2025, 1, 1))
    mock_uow.events.get_by_id.return_value = event

    result = await RestoreEventUseCase(mock_uow).execute(admin, event.id)

    assert result.is_ok()
    assert event.deleted_at is None
    mock_uow.commit.assert_called_once()
