"""
Subscription Use Case DTOs (Data Transfer Objects)

Command, query and response classes for the subscription domain.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from acetrack.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Pagination
from acetrack.domain.entities import Subscription, SubscriptionDuration, SubscriptionStatus


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored timestamps are naive UTC"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# ============================================================================
# Command DTOs
# ============================================================================


class CreateSubscriptionCommand(BaseModel):
    """Input for opening a subscription; end_date defaults to start + duration"""

    organization_id: UUID
    duration: SubscriptionDuration
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    payment_amount: float = Field(ge=0)
    payment_method: Optional[str] = Field(default=None, max_length=100)
    receipt_file: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=1000)

    normalize_dates = field_validator("start_date", "end_date")(as_naive_utc)


class UpdateSubscriptionCommand(BaseModel):
    """Partial update; organization admins may only send payment_method and notes"""

    duration: Optional[SubscriptionDuration] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    payment_amount: Optional[float] = Field(default=None, ge=0)
    payment_method: Optional[str] = Field(default=None, max_length=100)
    receipt_file: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=1000)

    normalize_dates = field_validator("start_date", "end_date")(as_naive_utc)


class VerifySubscriptionCommand(BaseModel):
    """Admin verdict on a pending subscription's payment"""

    verified: bool
    notes: Optional[str] = Field(default=None, max_length=1000)


class ListSubscriptionsQuery(BaseModel):
    """Filters accepted by the subscription list"""

    organization_id: Optional[UUID] = None
    status: Optional[SubscriptionStatus] = None
    expiring: bool = False
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=100)


# ============================================================================
# Response DTOs
# ============================================================================


class SubscriptionResponse(BaseModel):
    """Subscription with its derived state at response time"""

    id: UUID
    organization_id: UUID
    duration: SubscriptionDuration
    start_date: datetime
    end_date: datetime
    status: SubscriptionStatus
    payment_amount: float
    payment_method: Optional[str]
    receipt_file: Optional[str]
    verified_by: Optional[UUID]
    verified_at: Optional[datetime]
    notes: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime]
    is_active: bool
    days_remaining: int
    is_expiring_soon: bool

    @classmethod
    def from_entity(
        cls, subscription: Subscription, now: Optional[datetime] = None
    ) -> "SubscriptionResponse":
        now = now or datetime.utcnow()
        return cls(
            id=subscription.id,
            organization_id=subscription.organization_id,
            duration=subscription.duration,
            start_date=subscription.start_date,
            end_date=subscription.end_date,
            status=subscription.status,
            payment_amount=subscription.payment_amount,
            payment_method=subscription.payment_method,
            receipt_file=subscription.receipt_file,
            verified_by=subscription.verified_by,
            verified_at=subscription.verified_at,
            notes=subscription.notes,
            created_at=subscription.created_at,
            updated_at=subscription.updated_at,
            is_active=subscription.is_active(now),
            days_remaining=subscription.days_remaining(now),
            is_expiring_soon=subscription.is_expiring_soon(now),
        )


class SubscriptionListResponse(BaseModel):
    """Page of subscriptions"""

    subscriptions: List[SubscriptionResponse]
    pagination: Pagination
