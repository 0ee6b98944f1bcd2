"""
Subscription API Routes

Paid subscription terms, payment verification and cancellation.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from acetrack.api.error import to_http_error
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.subscriptions import (
    CancelSubscriptionUseCase,
    CreateSubscriptionCommand,
    CreateSubscriptionUseCase,
    GetExpiringSubscriptionsUseCase,
    GetSubscriptionUseCase,
    ListSubscriptionsQuery,
    ListSubscriptionsUseCase,
    SubscriptionListResponse,
    SubscriptionResponse,
    UpdateSubscriptionCommand,
    UpdateSubscriptionUseCase,
    VerifySubscriptionCommand,
    VerifySubscriptionUseCase,
)
from acetrack.depends import get_current_actor, get_unit_of_work
from acetrack.domain.access_control import Actor
from acetrack.domain.entities import SubscriptionStatus
from config import ApplicationConfig

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.get("", status_code=status.HTTP_200_OK, response_model=SubscriptionListResponse)
async def list_subscriptions(
    organization_id: Optional[UUID] = Query(None),
    subscription_status: Optional[SubscriptionStatus] = Query(None, alias="status"),
    expiring: bool = Query(False, description="Only active terms ending soon"),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Subscriptions

    Organization admins only see their own organization's subscriptions,
    whatever organization_id is requested.
    """
    query = ListSubscriptionsQuery(
        organization_id=organization_id,
        status=subscription_status,
        expiring=expiring,
        page=page,
        limit=limit,
    )
    result = await ListSubscriptionsUseCase(uow).execute(actor, query)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SubscriptionResponse)
async def create_subscription(
    request: CreateSubscriptionCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Subscription

    Created pending; end_date is computed from the duration when omitted.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: SUBSCRIPTION_EXISTS
    """
    result = await CreateSubscriptionUseCase(uow).execute(actor, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/expiring", status_code=status.HTTP_200_OK, response_model=List[SubscriptionResponse]
)
async def get_expiring_subscriptions(
    days: int = Query(ApplicationConfig.EXPIRING_WINDOW_DAYS, ge=1, le=365),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active subscriptions ending within `days` (admins only)"""
    result = await GetExpiringSubscriptionsUseCase(uow).execute(actor, days=days)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/{subscription_id}", status_code=status.HTTP_200_OK, response_model=SubscriptionResponse
)
async def get_subscription(
    subscription_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetSubscriptionUseCase(uow).execute(actor, subscription_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch(
    "/{subscription_id}", status_code=status.HTTP_200_OK, response_model=SubscriptionResponse
)
async def update_subscription(
    subscription_id: UUID,
    request: UpdateSubscriptionCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Subscription

    Organization admins may only change payment_method and notes; any
    other field rejects the whole request.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: SUBSCRIPTION_NOT_FOUND
    """
    result = await UpdateSubscriptionUseCase(uow).execute(actor, subscription_id, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{subscription_id}/verify",
    status_code=status.HTTP_200_OK,
    response_model=SubscriptionResponse,
)
async def verify_subscription(
    subscription_id: UUID,
    request: VerifySubscriptionCommand,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Subscription Payment

    verified=true activates the subscription, false cancels it.

    Raises:
        - 400 Bad Request: NOT_PENDING
        - 403 Forbidden: PERMISSION_DENIED (admins only)
        - 404 Not Found: SUBSCRIPTION_NOT_FOUND
    """
    result = await VerifySubscriptionUseCase(uow).execute(actor, subscription_id, request)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{subscription_id}/cancel",
    status_code=status.HTTP_200_OK,
    response_model=SubscriptionResponse,
)
async def cancel_subscription(
    subscription_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CancelSubscriptionUseCase(uow).execute(actor, subscription_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
