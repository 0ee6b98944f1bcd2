"""
Attendance API Routes

Check-in, check-out and attendance history.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from acetrack.api.error import to_http_error
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.attendance import (
    AttendanceListResponse,
    AttendanceResponse,
    CheckInCommand,
    CheckInUseCase,
    CheckOutCommand,
    CheckOutUseCase,
    GetMyAttendanceUseCase,
    ListEventAttendanceUseCase,
)
from acetrack.depends import get_current_actor, get_unit_of_work
from acetrack.domain.access_control import Actor
from config import ApplicationConfig

router = APIRouter(tags=["Attendance"])


@router.post(
    "/attendance/check-in",
    status_code=status.HTTP_201_CREATED,
    response_model=AttendanceResponse,
)
async def check_in(
    request: CheckInCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Check In

    Self check-in, or a manual entry for another user by an administrator
    of the event's organization.

    Raises:
        - 400 Bad Request: EVENT_NOT_OPEN or CHECK_IN_WINDOW_CLOSED
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: EVENT_NOT_FOUND or USER_NOT_FOUND
        - 409 Conflict: ALREADY_CHECKED_IN
    """
    result = await CheckInUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/attendance/check-out",
    status_code=status.HTTP_200_OK,
    response_model=AttendanceResponse,
)
async def check_out(
    request: CheckOutCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Check Out

    Raises:
        - 400 Bad Request: NOT_CHECKED_IN, CHECK_OUT_WINDOW_CLOSED or VALIDATION_ERROR
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: EVENT_NOT_FOUND
        - 409 Conflict: ALREADY_CHECKED_OUT
    """
    result = await CheckOutUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/attendance/mine", status_code=status.HTTP_200_OK, response_model=AttendanceListResponse
)
async def get_my_attendance(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetMyAttendanceUseCase(uow).execute(actor, page=page, limit=limit)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/events/{event_id}/attendance",
    status_code=status.HTTP_200_OK,
    response_model=AttendanceListResponse,
)
async def list_event_attendance(
    event_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListEventAttendanceUseCase(uow).execute(
        actor, event_id, page=page, limit=limit
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
