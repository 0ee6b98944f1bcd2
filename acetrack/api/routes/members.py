"""
Member API Routes

Organization membership: direct adds, join requests and their review.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from acetrack.api.error import to_http_error
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.members import (
    AddMemberCommand,
    AddMemberUseCase,
    DecideJoinRequestUseCase,
    GetMyMembershipsUseCase,
    JoinRequestCommand,
    ListMembersQuery,
    ListMembersUseCase,
    MemberDecisionCommand,
    MemberDecisionResponse,
    MemberListResponse,
    MemberResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    RequestToJoinUseCase,
    UpdateMemberCommand,
    UpdateMemberUseCase,
)
from acetrack.depends import get_current_actor, get_unit_of_work
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import MemberRole, MemberStatus
from config import ApplicationConfig

router = APIRouter(prefix="/members", tags=["Members"])


@router.get("", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(
    organization_id: Optional[UUID] = Query(None),
    role: Optional[MemberRole] = Query(None),
    member_status: Optional[MemberStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Members

    Organization admins only see their own organization's members.

    Raises:
        - 403 Forbidden: PERMISSION_DENIED for plain members
    """
    query = ListMembersQuery(
        organization_id=organization_id,
        role=role,
        status=member_status,
        page=page,
        limit=limit,
    )
    result = await ListMembersUseCase(uow).execute(actor, query)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MemberResponse)
async def add_member(
    request: AddMemberCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Member

    Raises:
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: ORGANIZATION_NOT_FOUND or USER_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER or ORGANIZATION_FULL
    """
    result = await AddMemberUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=List[MemberResponse])
async def get_my_memberships(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetMyMembershipsUseCase(uow).execute(actor)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("/join", status_code=status.HTTP_201_CREATED, response_model=MemberResponse)
async def request_to_join(
    request: JoinRequestCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request To Join

    Pending when the organization requires approval, active otherwise.

    Raises:
        - 403 Forbidden: PUBLIC_JOIN_DISABLED
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, JOIN_REQUEST_PENDING or ORGANIZATION_FULL
    """
    result = await RequestToJoinUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{member_id}/decision",
    status_code=status.HTTP_200_OK,
    response_model=MemberDecisionResponse,
)
async def decide_join_request(
    member_id: UUID,
    request: MemberDecisionCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DecideJoinRequestUseCase(uow).execute(actor, member_id, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch("/{member_id}", status_code=status.HTTP_200_OK, response_model=MemberResponse)
async def update_member(
    member_id: UUID,
    request: UpdateMemberCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateMemberUseCase(uow).execute(actor, member_id, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/{member_id}", status_code=status.HTTP_200_OK, response_model=RemoveMemberResponse
)
async def remove_member(
    member_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Raises:
        - 403 Forbidden: PERMISSION_DENIED, including removal of the
          organization's designated administrator
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await RemoveMemberUseCase(uow).execute(actor, member_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
