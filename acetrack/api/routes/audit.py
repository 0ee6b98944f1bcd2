"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from acetrack.api.error import to_http_error
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.audit import GetAuditEventsUseCase
from acetrack.depends import get_current_actor, get_unit_of_work
from acetrack.domain.access_control import Actor

router = APIRouter(prefix="/audit", tags=["Audit"])


class AuditEventResponse(BaseModel):
    """Single audit event in response"""

    action: str
    organization_id: Optional[str]
    user_email: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    """GET /audit/events response payload"""

    events: List[AuditEventResponse]
    next_cursor: Optional[str]


@router.get(
    "/events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    organization_id: Optional[UUID] = Query(None, description="Organization filter (admins)"),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Audit Events

    Admins read any organization's log; an organization admin reads only
    their own organization's log.

    Query Parameters:
        - organization_id: Organization filter (ignored for organization admins)
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Returns:
        - events: List of audit events ordered by newest first
        - next_cursor: Cursor for next page (null if no more events)

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: PERMISSION_DENIED
        - 500 Internal Server Error: Server error
    """
    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(
        actor,
        organization_id=organization_id,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
