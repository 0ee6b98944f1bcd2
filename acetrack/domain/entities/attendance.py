"""
Attendance Entity

One user's check-in/check-out record for one event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import AttendanceStatus, CheckInMethod


class Attendance(SQLModel, table=True):
    """
    Attendance entity - a user's presence at an event.

    Business Rules:
    - (event_id, user_id) must be unique
    - Created on first check-in, completed by check-out
    - check_out_time, when present, is after check_in_time
    - Never deleted
    """

    __tablename__ = "attendances"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    check_in_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    check_out_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    status: AttendanceStatus = Field(default=AttendanceStatus.present)
    check_in_method: CheckInMethod = Field(default=CheckInMethod.qr_code)

    notes: Optional[str] = Field(default=None, max_length=500)
    user_agent: Optional[str] = Field(default=None, max_length=1000)
    location: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_attendance_event_user", "event_id", "user_id", unique=True),
        Index("idx_attendance_event_status", "event_id", "status"),
        Index("idx_attendance_user_status", "user_id", "status"),
    )

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.check_in_time is None or self.check_out_time is None:
            return None
        return round((self.check_out_time - self.check_in_time).total_seconds() / 60)
