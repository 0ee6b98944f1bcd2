"""
Event API Routes

Event scheduling, lifecycle transitions and statistics.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from acetrack.api.error import to_http_error
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.events import (
    CreateEventCommand,
    CreateEventUseCase,
    DeleteEventResponse,
    DeleteEventUseCase,
    EventListResponse,
    EventResponse,
    EventStatsResponse,
    EventStatusChangeResponse,
    GetEventStatsUseCase,
    GetEventUseCase,
    ListEventsQuery,
    ListEventsUseCase,
    RestoreEventUseCase,
    UpdateEventCommand,
    UpdateEventStatusUseCase,
    UpdateEventUseCase,
)
from acetrack.depends import get_current_actor, get_optional_actor, get_unit_of_work
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import EventStatus
from config import ApplicationConfig

router = APIRouter(prefix="/events", tags=["Events"])


class UpdateEventStatusRequest(BaseModel):
    """PATCH /events/{event_id}/status payload"""

    status: EventStatus = Field(..., description="Requested lifecycle status")


@router.get("", status_code=status.HTTP_200_OK, response_model=EventListResponse)
async def list_events(
    organization_id: Optional[UUID] = Query(None),
    event_status: Optional[EventStatus] = Query(None, alias="status"),
    is_mandatory: Optional[bool] = Query(None),
    date_from: Optional[date] = Query(None),
    date_to: Optional[date] = Query(None),
    search: Optional[str] = Query(None),
    include_deleted: bool = Query(False),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: Optional[Actor] = Depends(get_optional_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Events

    Anonymous callers and members see published events only; organization
    admins see their own organization's events in any status.
    """
    query = ListEventsQuery(
        organization_id=organization_id,
        status=event_status,
        is_mandatory=is_mandatory,
        date_from=date_from,
        date_to=date_to,
        search=search,
        include_deleted=include_deleted,
        page=page,
        limit=limit,
    )
    result = await ListEventsUseCase(uow).execute(actor, query)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventResponse)
async def create_event(
    request: CreateEventCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Event

    Created in draft. Requires admin, or org_admin of the target organization.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (schedule rules)
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    result = await CreateEventUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=EventStatsResponse)
async def get_event_stats(
    organization_id: Optional[UUID] = Query(None),
    actor: Optional[Actor] = Depends(get_optional_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEventStatsUseCase(uow).execute(actor, organization_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/{event_id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    actor: Optional[Actor] = Depends(get_optional_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEventUseCase(uow).execute(actor, event_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch("/{event_id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def update_event(
    event_id: UUID,
    request: UpdateEventCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Event

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: PERMISSION_DENIED, including date/time edits of
          ongoing or completed events by non-admins
        - 404 Not Found: EVENT_NOT_FOUND
    """
    result = await UpdateEventUseCase(uow).execute(actor, event_id, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch(
    "/{event_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=EventStatusChangeResponse,
)
async def update_event_status(
    event_id: UUID,
    request: UpdateEventStatusRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Event Status

    Raises:
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: INVALID_TRANSITION
    """
    result = await UpdateEventStatusUseCase(uow).execute(actor, event_id, request.status)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/{event_id}", status_code=status.HTTP_200_OK, response_model=DeleteEventResponse)
async def delete_event(
    event_id: UUID,
    permanently: bool = Query(False, description="Purge an already soft-deleted event"),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Event

    Soft delete by default. `permanently=true` purges an event that is
    already soft-deleted (admins only).

    Raises:
        - 400 Bad Request: EVENT_NOT_DELETED
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: EVENT_NOT_FOUND
    """
    result = await DeleteEventUseCase(uow).execute(actor, event_id, permanently=permanently)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("/{event_id}/restore", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def restore_event(
    event_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RestoreEventUseCase(uow).execute(actor, event_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
