"""
Attendance Use Cases

Check-in, check-out and attendance history.
"""

from .check_in_use_case import CheckInUseCase
from .check_out_use_case import CheckOutUseCase
from .dtos import (
    AttendanceListResponse,
    AttendanceResponse,
    CheckInCommand,
    CheckOutCommand,
)
from .get_my_attendance_use_case import GetMyAttendanceUseCase
from .list_event_attendance_use_case import ListEventAttendanceUseCase

__all__ = [
    "CheckInUseCase",
    "CheckOutUseCase",
    "ListEventAttendanceUseCase",
    "GetMyAttendanceUseCase",
    "CheckInCommand",
    "CheckOutCommand",
    "AttendanceResponse",
    "AttendanceListResponse",
]
