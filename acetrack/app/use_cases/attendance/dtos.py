"""
Attendance Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from acetrack.app.use_cases.pagination import Pagination
from acetrack.domain.entities import AttendanceStatus, CheckInMethod


class CheckInCommand(BaseModel):
    """
    Check-in request.

    user_id set to someone else means a manual entry on their behalf.
    """

    event_id: UUID
    user_id: Optional[UUID] = None
    method: CheckInMethod = CheckInMethod.qr_code
    notes: Optional[str] = Field(default=None, max_length=500)
    user_agent: Optional[str] = Field(default=None, max_length=1000)
    location: Optional[str] = Field(default=None, max_length=255)


class CheckOutCommand(BaseModel):
    """Check-out request; user_id as for check-in"""

    event_id: UUID
    user_id: Optional[UUID] = None
    notes: Optional[str] = Field(default=None, max_length=500)


class AttendanceResponse(BaseModel):
    """Attendance record as returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_id: UUID
    user_id: UUID
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    check_in_method: CheckInMethod
    notes: Optional[str]
    location: Optional[str]
    duration_minutes: Optional[int]


class AttendanceListResponse(BaseModel):
    """Page of attendance records"""

    attendance: List[AttendanceResponse]
    pagination: Pagination
