"""
Admin API Routes - System Maintenance Endpoints

These endpoints are for internal service integrations (e.g. a scheduler).
Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from acetrack.api.error import ServerError
from acetrack.api.utils.admin_auth import verify_admin_api_key
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.admin import (
    ExpireSubscriptionsResponse,
    ExpireSubscriptionsUseCase,
)
from acetrack.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/subscriptions/expire",
    status_code=status.HTTP_200_OK,
    response_model=ExpireSubscriptionsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def expire_subscriptions(
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Expire Lapsed Subscriptions

    Scheduler endpoint: marks active subscriptions whose end date has
    passed as expired. Safe to call repeatedly.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = ExpireSubscriptionsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
