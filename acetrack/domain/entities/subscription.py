"""
Subscription Entity

A paid term that keeps an organization in good standing.
"""

import math
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import SubscriptionDuration, SubscriptionStatus

EXPIRING_SOON_DAYS = 30


class Subscription(SQLModel, table=True):
    """
    Subscription entity - a paid term for an organization.

    Business Rules:
    - Created pending; only an admin verification activates or cancels it
    - end_date is start_date plus the duration in calendar months
    - start_date < end_date
    - At most one active-or-pending subscription per organization
    - Expiry is derived from end_date; the admin sweep persists it
    """

    __tablename__ = "subscriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    duration: SubscriptionDuration = Field(nullable=False)

    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: datetime = Field(sa_column=Column(DateTime, nullable=False))

    status: SubscriptionStatus = Field(default=SubscriptionStatus.pending)

    payment_amount: float = Field(ge=0)
    payment_method: Optional[str] = Field(default=None, max_length=100)
    receipt_file: Optional[str] = Field(default=None, max_length=255)

    verified_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    verified_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_subscription_organization_status", "organization_id", "status"),
        Index("idx_subscription_status_end_date", "status", "end_date"),
    )

    def is_active(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.utcnow()
        return (
            self.status == SubscriptionStatus.active
            and self.start_date <= now <= self.end_date
        )

    def days_remaining(self, now: Optional[datetime] = None) -> int:
        now = now or datetime.utcnow()
        if self.end_date <= now:
            return 0
        return math.ceil((self.end_date - now).total_seconds() / 86400)

    def is_expiring_soon(self, now: Optional[datetime] = None) -> bool:
        remaining = self.days_remaining(now)
        return self.is_active(now) and 0 < remaining <= EXPIRING_SOON_DAYS
