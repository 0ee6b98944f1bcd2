from uuid import uuid4

import pytest

from acetrack.app.use_cases.events import UpdateEventStatusUseCase
from acetrack.domain.entities import AuditEvent, EventStatus


@pytest.mark.asyncio
async def test_org_admin_publishes_draft(mock_uow, org_admin, make_event):
    """Publishing a draft records the previous status and an audit event"""
    # Arrange
    event = make_event(org_admin.organization_id, status=EventStatus.draft)
    mock_uow.events.get_by_id.return_value = event

    # Act
    result = await UpdateEventStatusUseCase(mock_uow).execute(
        org_admin, event.id, EventStatus.published
    )

    # Assert
    assert result.is_ok()
    assert result.value.previous_status == EventStatus.draft
    assert result.value.event.status == EventStatus.published
    mock_uow.events.update.assert_called_once()
    mock_uow.commit.assert_called_once()

    audit = mock_uow.audit_events.create.call_args[0][0]
    assert isinstance(audit, AuditEvent)
    assert audit.action == "event_status_changed"
    assert audit.event_metadata == {
        "event_id": str(event.id),
        "from": "draft",
        "to": "published",
    }


@pytest.mark.asyncio
async def test_invalid_transition_not_persisted(mock_uow, admin, make_event):
    event = make_event(uuid4(), status=EventStatus.completed)
    mock_uow.events.get_by_id.return_value = event

    result = await UpdateEventStatusUseCase(mock_uow).execute(admin, event.id, EventStatus.ongoing)

    assert result.is_err()
    assert result.error.code == "INVALID_TRANSITION"
    assert event.status == EventStatus.completed
    mock_uow.events.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_member_cannot_change_status(mock_uow, member, make_event):
    event = make_event(uuid4(), status=EventStatus.draft)
    mock_uow.events.get_by_id.return_value = event

    result = await UpdateEventStatusUseCase(mock_uow).execute(member, event.id, EventStatus.published)

    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_missing_event(mock_uow, admin):
    result = await UpdateEventStatusUseCase(mock_uow).execute(admin, uuid4(), EventStatus.published)

    assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_cancelled_event_returns_to_draft(mock_uow, org_admin, make_event):
    event = make_event(org_admin.organization_id, status=EventStatus.cancelled)
    mock_uow.events.get_by_id.return_value = event

    result = await UpdateEventStatusUseCase(mock_uow).execute(org_admin, event.id, EventStatus.draft)

    assert result.is_ok()
    assert result.value.event.status == EventStatus.draft
