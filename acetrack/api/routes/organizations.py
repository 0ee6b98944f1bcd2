"""
Organization API Routes

Organization management, plus the organization-scoped event and
subscription views.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from acetrack.api.error import to_http_error
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.events import EventResponse, GetUpcomingEventsUseCase
from acetrack.app.use_cases.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
    DeleteOrganizationResponse,
    DeleteOrganizationUseCase,
    GetMyOrganizationsUseCase,
    GetOrganizationUseCase,
    ListOrganizationsQuery,
    ListOrganizationsUseCase,
    MyOrganizationResponse,
    OrganizationListResponse,
    OrganizationResponse,
    UpdateOrganizationCommand,
    UpdateOrganizationUseCase,
)
from acetrack.app.use_cases.subscriptions import (
    GetOrganizationSubscriptionUseCase,
    SubscriptionResponse,
)
from acetrack.depends import get_current_actor, get_optional_actor, get_unit_of_work
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import OrganizationStatus
from config import ApplicationConfig

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.get("", status_code=status.HTTP_200_OK, response_model=OrganizationListResponse)
async def list_organizations(
    organization_status: Optional[OrganizationStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: Optional[Actor] = Depends(get_optional_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Organizations

    Only admins see organizations that are not active.
    """
    query = ListOrganizationsQuery(
        status=organization_status, search=search, page=page, limit=limit
    )
    result = await ListOrganizationsUseCase(uow).execute(actor, query)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=CreateOrganizationResponse
)
async def create_organization(
    request: CreateOrganizationCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    Creates the organization, its pending subscription and the founder's
    org_admin membership in one transaction.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: USER_INACTIVE
        - 409 Conflict: ALREADY_OWNS_ORGANIZATION or ORGANIZATION_NAME_EXISTS
    """
    result = await CreateOrganizationUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/mine", status_code=status.HTTP_200_OK, response_model=List[MyOrganizationResponse]
)
async def get_my_organizations(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetMyOrganizationsUseCase(uow).execute(actor)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/{organization_id}", status_code=status.HTTP_200_OK, response_model=OrganizationResponse
)
async def get_organization(
    organization_id: UUID,
    actor: Optional[Actor] = Depends(get_optional_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOrganizationUseCase(uow).execute(actor, organization_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch(
    "/{organization_id}", status_code=status.HTTP_200_OK, response_model=OrganizationResponse
)
async def update_organization(
    organization_id: UUID,
    request: UpdateOrganizationCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Organization

    Raises:
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: ORGANIZATION_NAME_EXISTS
    """
    result = await UpdateOrganizationUseCase(uow).execute(actor, organization_id, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteOrganizationResponse,
)
async def delete_organization(
    organization_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Organization

    Deactivates the organization and all of its memberships.
    """
    result = await DeleteOrganizationUseCase(uow).execute(actor, organization_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/{organization_id}/subscription",
    status_code=status.HTTP_200_OK,
    response_model=SubscriptionResponse,
)
async def get_organization_subscription(
    organization_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current active subscription of an organization"""
    result = await GetOrganizationSubscriptionUseCase(uow).execute(actor, organization_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/{organization_id}/events/upcoming",
    status_code=status.HTTP_200_OK,
    response_model=List[EventResponse],
)
async def get_upcoming_events(
    organization_id: UUID,
    limit: int = Query(5, ge=1, le=50),
    actor: Optional[Actor] = Depends(get_optional_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUpcomingEventsUseCase(uow).execute(actor, organization_id, limit=limit)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
