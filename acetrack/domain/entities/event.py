"""
Event Entity

A scheduled occurrence owned by an organization, with attendance windows.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import EventStatus


class Event(SQLModel, table=True):
    """
    Event entity - an organization's event that members attend.

    Business Rules:
    - Times are HH:mm strings compared as minutes since midnight,
      so an event never spans midnight
    - Check-in window starts at or before the event start and ends at
      or after the event end; check-out window starts at or after the
      event start and ends at or after the event end
    - Status follows the lifecycle table in domain.event_lifecycle
    - Soft delete: deleted_at marks deletion, admins may purge or restore
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    event_date: date = Field(index=True)
    banner: str = Field(max_length=255)

    start_time: str = Field(max_length=5)
    end_time: str = Field(max_length=5)
    check_in_start_time: Optional[str] = Field(default=None, max_length=5)
    check_in_end_time: Optional[str] = Field(default=None, max_length=5)
    check_out_start_time: Optional[str] = Field(default=None, max_length=5)
    check_out_end_time: Optional[str] = Field(default=None, max_length=5)

    location: Optional[str] = Field(default=None, max_length=255)
    status: EventStatus = Field(default=EventStatus.draft)
    is_mandatory: bool = Field(default=False)

    created_by: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Soft delete support
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_event_organization_status", "organization_id", "status"),
        Index("idx_event_organization_date", "organization_id", "event_date"),
        Index("idx_event_date_status", "event_date", "status"),
        Index("idx_event_deleted_at", "deleted_at"),
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
